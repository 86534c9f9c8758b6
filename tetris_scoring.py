"""Scoring & leveling"""
from tetris_config import CONFIG

ROWS_PER_LEVEL = 3
# NES line clear points for 1..4 rows, multiplied by level+1
SCORE_TABLE = (40, 100, 300, 1200)


def calculate_score(level: int, rows_cleared: int) -> int:
    if not 0 <= rows_cleared <= len(SCORE_TABLE):
        raise ValueError(f"cannot score {rows_cleared} rows cleared at once")
    if rows_cleared == 0:
        return 0
    return (level + 1) * SCORE_TABLE[rows_cleared - 1]


def level_for_rows(total_rows: int) -> int:
    return 1 + total_rows // ROWS_PER_LEVEL


def speed_multiplier_for_level(level: int) -> int:
    """Ticks per automatic fall step. Lower is faster; never below the floor."""
    return max(CONFIG["MIN_SPEED_MULTIPLIER"], CONFIG["MULTIPLIER"] - level)
