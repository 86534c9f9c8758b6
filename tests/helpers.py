from dataclasses import replace

from tetris_config import CONFIG
from tetris_piece import Position, Tetromino
from tetris_state import initial_state

SEED = 12345
W, H = CONFIG["GRID_WIDTH"], CONFIG["GRID_HEIGHT"]


def piece(t, x, y, rotation=0):
    return replace(Tetromino.spawn(t), position=Position(x, y), rotation=rotation)


def grid_with(filled, color="red"):
    """Grid with the given (x, y) cells occupied."""
    return tuple(tuple(color if (x, y) in filled else None for x in range(W)) for y in range(H))


def full_row(y, skip=()):
    return {(x, y) for x in range(W) if x not in skip}


def make_state(current=None, grid=None, **kw):
    s = initial_state(SEED)
    if current is not None:
        kw["current_tetromino"] = current
    if grid is not None:
        kw["grid"] = grid
    return replace(s, **kw)
