"""The playing field: a fixed-size matrix of cell values."""

from __future__ import annotations

import sys
from typing import TextIO

import pygame

from blockfall.colors import BLACK, Color, get_cell_colors

GRID_ORIGIN = 11


class Grid:
    """A 20 x 10 field where 0 marks an empty cell and other values are block ids."""

    def __init__(self) -> None:
        self.num_rows = 20
        self.num_cols = 10
        self.cell_size = 30
        self.grid: list[list[int]] = []
        self.initialize()
        self.colors: list[Color] = get_cell_colors()

    def initialize(self) -> None:
        """Empty every cell."""
        self.grid = [[0] * self.num_cols for _ in range(self.num_rows)]

    def print(self, file: TextIO | None = None) -> None:
        """Write the cell values as text, one line per row."""
        out = sys.stdout if file is None else file
        for row in self.grid:
            out.write("".join(f"{value} " for value in row) + "\n")

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the background, grid lines and filled cells onto a surface."""
        width = self.num_cols * self.cell_size
        height = self.num_rows * self.cell_size
        pygame.draw.rect(surface, BLACK, (GRID_ORIGIN, GRID_ORIGIN, width, height))
        for row in range(self.num_rows + 1):
            y = GRID_ORIGIN + row * self.cell_size
            pygame.draw.line(surface, BLACK, (GRID_ORIGIN, y), (GRID_ORIGIN + width, y))
        for col in range(self.num_cols + 1):
            x = GRID_ORIGIN + col * self.cell_size
            pygame.draw.line(surface, BLACK, (x, GRID_ORIGIN), (x, GRID_ORIGIN + height))
        size = self.cell_size - 1
        for row, values in enumerate(self.grid):
            for column, value in enumerate(values):
                if value:
                    rect = (
                        column * self.cell_size + GRID_ORIGIN,
                        row * self.cell_size + GRID_ORIGIN,
                        size,
                        size,
                    )
                    pygame.draw.rect(surface, self.colors[value], rect)

    def is_cell_outside(self, row: int, column: int) -> bool:
        """Tell whether the coordinate lies beyond the field's bounds."""
        return not (0 <= row < self.num_rows and 0 <= column < self.num_cols)

    def is_cell_empty(self, row: int, column: int) -> bool:
        """Tell whether the cell holds no block."""
        return self.grid[row][column] == 0

    def clear_full_rows(self) -> int:
        """Remove full rows, drop the rows above them, and return how many were removed."""
        completed = 0
        for row in reversed(range(self.num_rows)):
            if self._is_row_full(row):
                self._clear_row(row)
                completed += 1
            elif completed:
                self._move_row_down(row, completed)
        return completed

    def _is_row_full(self, row: int) -> bool:
        return all(self.grid[row])

    def _clear_row(self, row: int) -> None:
        self.grid[row] = [0] * self.num_cols

    def _move_row_down(self, row: int, distance: int) -> None:
        self.grid[row + distance] = self.grid[row]
        self.grid[row] = [0] * self.num_cols