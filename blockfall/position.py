"""Cell coordinates on the playing field."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A (row, column) coordinate on the grid."""

    row: int
    column: int