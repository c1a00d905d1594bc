"""Colour palette used for blocks and the interface."""

from __future__ import annotations

from typing import NamedTuple


class Color(NamedTuple):
    """An RGBA colour; usable directly wherever pygame expects a colour."""

    r: int
    g: int
    b: int
    a: int = 255


BLACK = Color(0, 0, 0, 255)
GREEN = Color(47, 230, 23, 255)
RED = Color(232, 18, 18, 255)
ORANGE = Color(226, 116, 17, 255)
YELLOW = Color(237, 234, 4, 255)
PURPLE = Color(166, 0, 247, 255)
CYAN = Color(21, 204, 209, 255)
BLUE = Color(13, 64, 216, 255)
LIGHT_BLUE = Color(59, 85, 162, 255)
DARK_BLUE = Color(44, 44, 127, 255)


def get_cell_colors() -> list[Color]:
    """Return the cell palette, indexed by the value stored in a grid cell."""
    return [BLACK, GREEN, RED, ORANGE, YELLOW, PURPLE, CYAN, BLUE]