from tetris_board import (collide, initialise_grid, line_clear,
                          place_tetromino_on_grid, shape_cells, top_out)

from helpers import H, W, full_row, grid_with, piece


def test_initialise_grid_dimensions():
    grid = initialise_grid(W, H)
    assert len(grid) == 20
    assert all(len(row) == 10 for row in grid)
    assert all(cell is None for row in grid for cell in row)


def test_shape_cells_offset():
    o = piece("O", 4, 0)
    assert sorted(shape_cells(o)) == [(4, 0), (4, 1), (5, 0), (5, 1)]
    assert sorted(shape_cells(o, 1, 2)) == [(5, 2), (5, 3), (6, 2), (6, 3)]


def test_collide_bounds_and_occupied():
    grid = grid_with({(3, 3)})
    assert collide(grid, [(-1, 0)])
    assert collide(grid, [(W, 0)])
    assert collide(grid, [(0, H)])
    assert collide(grid, [(3, 3)])
    assert not collide(grid, [(0, 0), (9, 19)])


def test_place_stamps_color_and_leaves_input_untouched():
    grid = initialise_grid(W, H)
    placed = place_tetromino_on_grid(grid, piece("O", 4, 0))
    assert {(x, y) for y, row in enumerate(placed) for x, c in enumerate(row) if c} == {(4, 0), (5, 0), (4, 1), (5, 1)}
    assert placed[0][4] == "yellow"
    assert all(cell is None for row in grid for cell in row)


def test_place_keeps_existing_cells():
    grid = grid_with({(0, 19)}, color="blue")
    placed = place_tetromino_on_grid(grid, piece("T", 4, 10))
    assert placed[19][0] == "blue"
    assert placed[10][5] == "purple"
    assert placed[10][4] is None


def test_place_ignores_shape_cells_outside_grid():
    placed = place_tetromino_on_grid(initialise_grid(W, H), piece("I", 8, 0))
    assert placed[0][8] == placed[0][9] == "cyan"
    assert all(len(row) == W for row in placed)


def test_line_clear_empty_grid_unchanged():
    grid = initialise_grid(W, H)
    new, cleared = line_clear(grid)
    assert new == grid
    assert cleared == 0


def test_line_clear_removes_full_rows():
    filled = full_row(2) | full_row(5) | {(1, 3), (0, 7), (9, 19)}
    grid = grid_with(filled)
    new, cleared = line_clear(grid)
    assert cleared == 2
    assert len(new) == H
    assert all(len(row) == W for row in new)
    assert all(c is None for c in new[0]) and all(c is None for c in new[1])
    # row 3 had one full row above it removed
    assert new[4][1] == "red"
    assert new[7][0] == "red"
    assert new[19][9] == "red"
    assert sum(1 for row in new for c in row if c) == 3


def test_line_clear_partial_row_stays():
    grid = grid_with(full_row(19, skip=(4,)))
    new, cleared = line_clear(grid)
    assert cleared == 0
    assert new == grid


def test_top_out():
    assert not top_out(initialise_grid(W, H))
    assert top_out(grid_with({(7, 0)}))
    assert not top_out(grid_with({(7, 1)}))
