import io

import pygame
import pytest

from blockfall.colors import BLACK, get_cell_colors
from blockfall.grid import GRID_ORIGIN, Grid


def test_new_grid_dimensions_and_empty():
    grid = Grid()
    assert grid.num_rows == 20
    assert grid.num_cols == 10
    assert len(grid.grid) == grid.num_rows
    assert all(len(row) == grid.num_cols for row in grid.grid)
    assert all(value == 0 for row in grid.grid for value in row)


def test_initialize_clears_cells():
    grid = Grid()
    grid.grid[5][5] = 3
    grid.initialize()
    assert all(value == 0 for row in grid.grid for value in row)


def test_rows_are_independent_lists():
    grid = Grid()
    grid.grid[0][0] = 2
    assert grid.grid[1][0] == 0


@pytest.mark.parametrize(
    "row, column, outside",
    [(0, 0, False), (19, 9, False), (-1, 0, True), (0, -1, True),
     (20, 0, True), (0, 10, True), (10, 5, False)],
)
def test_is_cell_outside(row, column, outside):
    assert Grid().is_cell_outside(row, column) is outside


def test_is_cell_empty():
    grid = Grid()
    grid.grid[3][4] = 6
    assert grid.is_cell_empty(3, 4) is False
    assert grid.is_cell_empty(3, 5) is True


def test_clear_full_rows_with_nothing_full():
    grid = Grid()
    grid.grid[19][0] = 1
    assert grid.clear_full_rows() == 0
    assert grid.grid[19][0] == 1


def test_clear_single_full_row_drops_above():
    grid = Grid()
    grid.grid[19] = [1] * grid.num_cols
    grid.grid[18][0] = 7
    assert grid.clear_full_rows() == 1
    assert grid.grid[19][0] == 7
    assert all(value == 0 for value in grid.grid[19][1:])
    assert all(value == 0 for value in grid.grid[18])


def test_clear_separated_full_rows():
    grid = Grid()
    grid.grid[19] = [2] * grid.num_cols
    grid.grid[17] = [3] * grid.num_cols
    grid.grid[18][3] = 5
    grid.grid[16][8] = 4
    assert grid.clear_full_rows() == 2
    assert grid.grid[19][3] == 5
    assert grid.grid[18][8] == 4
    filled = sum(1 for row in grid.grid for value in row if value)
    assert filled == 2


def test_clear_full_rows_preserves_total_of_unfull_cells():
    grid = Grid()
    grid.grid[19] = [1] * grid.num_cols
    grid.grid[10][2] = 6
    grid.grid[12][7] = 2
    grid.clear_full_rows()
    values = sorted(value for row in grid.grid for value in row if value)
    assert values == [2, 6]


def test_print_writes_every_row():
    grid = Grid()
    grid.grid[0][1] = 4
    out = io.StringIO()
    grid.print(out)
    lines = out.getvalue().splitlines()
    assert len(lines) == grid.num_rows
    assert lines[0].split() == ["0", "4"] + ["0"] * (grid.num_cols - 2)
    assert all(line.endswith(" ") for line in lines)


def test_draw_paints_filled_cells():
    surface = pygame.Surface((340, 640), 0, 32)
    surface.fill((255, 255, 255))
    grid = Grid()
    grid.grid[2][3] = 1
    grid.draw(surface)
    x = 3 * grid.cell_size + GRID_ORIGIN + 5
    y = 2 * grid.cell_size + GRID_ORIGIN + 5
    assert tuple(surface.get_at((x, y))) == tuple(get_cell_colors()[1])
    empty = (GRID_ORIGIN + 5, GRID_ORIGIN + 5)
    assert tuple(surface.get_at(empty)) == tuple(BLACK)
    assert tuple(surface.get_at((2, 2))) == (255, 255, 255, 255)