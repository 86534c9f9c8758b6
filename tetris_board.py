"""Board helpers: grid init, cells, collide, place, line clear, top-out"""
from typing import Iterable, Iterator, Optional, Tuple

from tetris_piece import Tetromino

GridCell = Optional[str]
Grid = Tuple[Tuple[GridCell, ...], ...]


def initialise_grid(width: int, height: int) -> Grid:
    return tuple((None,) * width for _ in range(height))


def shape_cells(piece: Tetromino, dx: int = 0, dy: int = 0) -> Iterator[Tuple[int, int]]:
    """Yield absolute (x, y) of every filled cell, shifted by (dx, dy)."""
    for y, row in enumerate(piece.shape):
        for x, v in enumerate(row):
            if v:
                yield piece.position.x + x + dx, piece.position.y + y + dy


def collide(grid: Grid, cells: Iterable[Tuple[int, int]]) -> bool:
    height, width = len(grid), len(grid[0])
    for bx, by in cells:
        if bx < 0 or bx >= width or by < 0 or by >= height:
            return True
        if grid[by][bx] is not None:
            return True
    return False


def place_tetromino_on_grid(grid: Grid, piece: Tetromino) -> Grid:
    """Return a new grid with the piece stamped in its color."""
    filled = set(shape_cells(piece))
    return tuple(
        tuple(piece.color if (x, y) in filled else cell for x, cell in enumerate(row))
        for y, row in enumerate(grid)
    )


def line_clear(grid: Grid) -> Tuple[Grid, int]:
    """Remove full rows. Returns (new grid, number of rows removed)."""
    kept = tuple(row for row in grid if not all(cell is not None for cell in row))
    cleared = len(grid) - len(kept)
    width = len(grid[0])
    return tuple((None,) * width for _ in range(cleared)) + kept, cleared


def top_out(grid: Grid) -> bool:
    return any(cell is not None for cell in grid[0])
