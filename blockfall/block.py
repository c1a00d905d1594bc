"""Falling pieces and their rotation states."""

from __future__ import annotations

import pygame

from blockfall.colors import Color, get_cell_colors
from blockfall.position import Position

CELL_SIZE = 30


def _shape(*cells: tuple[int, int]) -> list[Position]:
    return [Position(row, column) for row, column in cells]


class Block:
    """A piece made of cells, with rotation states and a grid offset."""

    id: int = 0
    shapes: tuple[list[Position], ...] = ()
    spawn: tuple[int, int] = (0, 0)

    def __init__(self) -> None:
        self.cell_size = CELL_SIZE
        self.rotation_state = 0
        self.colors: list[Color] = get_cell_colors()
        self.row_offset = 0
        self.column_offset = 0
        self.cells: dict[int, list[Position]] = {
            state: list(cells) for state, cells in enumerate(self.shapes)
        }
        self.move(*self.spawn)

    def move(self, rows: int, columns: int) -> None:
        """Shift the block by the given number of rows and columns."""
        self.row_offset += rows
        self.column_offset += columns

    def cell_positions(self) -> list[Position]:
        """Return the grid positions of the cells in the current rotation."""
        return [
            Position(cell.row + self.row_offset, cell.column + self.column_offset)
            for cell in self.cells.get(self.rotation_state, [])
        ]

    def rotate(self) -> None:
        """Advance to the next rotation state, wrapping around."""
        if self.cells:
            self.rotation_state = (self.rotation_state + 1) % len(self.cells)

    def undo_rotation(self) -> None:
        """Return to the previous rotation state, wrapping around."""
        if self.cells:
            self.rotation_state = (self.rotation_state - 1) % len(self.cells)

    def draw(self, surface: pygame.Surface, offset_x: int, offset_y: int) -> None:
        """Paint the block's cells onto a surface at the given pixel offset."""
        color = self.colors[self.id]
        size = self.cell_size - 1
        for cell in self.cell_positions():
            rect = (
                cell.column * self.cell_size + offset_x,
                cell.row * self.cell_size + offset_y,
                size,
                size,
            )
            pygame.draw.rect(surface, color, rect)


class LBlock(Block):
    id = 1
    shapes = (
        _shape((0, 2), (1, 0), (1, 1), (1, 2)),
        _shape((0, 1), (1, 1), (2, 1), (2, 2)),
        _shape((1, 0), (1, 1), (1, 2), (2, 0)),
        _shape((0, 0), (0, 1), (1, 1), (2, 1)),
    )
    spawn = (0, 3)


class JBlock(Block):
    id = 2
    shapes = (
        _shape((0, 0), (1, 0), (1, 1), (1, 2)),
        _shape((0, 1), (0, 2), (1, 1), (2, 1)),
        _shape((1, 0), (1, 1), (1, 2), (2, 2)),
        _shape((0, 1), (1, 1), (2, 0), (2, 1)),
    )
    spawn = (0, 3)


class IBlock(Block):
    id = 3
    shapes = (
        _shape((1, 0), (1, 1), (1, 2), (1, 3)),
        _shape((0, 2), (1, 2), (2, 2), (3, 2)),
        _shape((2, 0), (2, 1), (2, 2), (2, 3)),
        _shape((0, 1), (1, 1), (2, 1), (3, 1)),
    )
    spawn = (-1, 3)


class OBlock(Block):
    id = 4
    shapes = (_shape((0, 0), (0, 1), (1, 0), (1, 1)),)
    spawn = (0, 4)


class SBlock(Block):
    id = 5
    shapes = (
        _shape((0, 1), (0, 2), (1, 0), (1, 1)),
        _shape((0, 1), (1, 1), (1, 2), (2, 2)),
        _shape((1, 1), (1, 2), (2, 0), (2, 1)),
        _shape((0, 0), (1, 0), (1, 1), (2, 1)),
    )
    spawn = (0, 3)


class TBlock(Block):
    id = 6
    shapes = (
        _shape((0, 1), (1, 0), (1, 1), (1, 2)),
        _shape((0, 1), (1, 1), (1, 2), (2, 1)),
        _shape((1, 0), (1, 1), (1, 2), (2, 1)),
        _shape((0, 1), (1, 0), (1, 1), (2, 1)),
    )
    spawn = (0, 3)


class ZBlock(Block):
    id = 7
    shapes = (
        _shape((0, 0), (0, 1), (1, 1), (1, 2)),
        _shape((0, 2), (1, 1), (1, 2), (2, 1)),
        _shape((1, 0), (1, 1), (2, 1), (2, 2)),
        _shape((0, 1), (1, 0), (1, 1), (2, 0)),
    )
    spawn = (0, 3)


def all_blocks() -> list[Block]:
    """Return one fresh instance of every piece type."""
    return [IBlock(), JBlock(), LBlock(), OBlock(), SBlock(), TBlock(), ZBlock()]