# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG

PREVIEW_COLS, PREVIEW_ROWS = 8, 4


@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    preview_x: int
    preview_y: int
    hold_x: int
    hold_y: int


def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = PREVIEW_COLS * cell

    board_w = CONFIG["GRID_WIDTH"] * cell
    board_h = CONFIG["GRID_HEIGHT"] * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    # Next preview and hold box sit stacked in the side panel, below the HUD text
    preview_x = panel_x
    preview_y = panel_y + 110
    hold_x = panel_x
    hold_y = preview_y + PREVIEW_ROWS * cell + 40

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        preview_x=preview_x, preview_y=preview_y,
        hold_x=hold_x, hold_y=hold_y,
    )
