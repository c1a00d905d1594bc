"""Game rules: moving, rotating, locking pieces, clearing rows and scoring."""

from __future__ import annotations

import copy
import random
from collections.abc import Mapping
from typing import Any

import pygame

from blockfall.block import Block, all_blocks
from blockfall.colors import Color
from blockfall.grid import GRID_ORIGIN, Grid
from blockfall.position import Position

WHITE = Color(255, 255, 255, 255)
NEXT_BLOCK_OFFSET = (320, 215)
STROKE_THICKNESS = 2

_LINE_POINTS = {1: 100, 2: 300, 3: 500}


class Game:
    """State of one game: the field, the falling piece, the next piece and the score.

    ``rng`` supplies the randomness for choosing pieces. ``sounds`` maps the
    names ``"rotate"`` and ``"clear"`` to objects with a ``play()`` method;
    missing entries are simply not played.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        sounds: Mapping[str, Any] | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.sounds: Mapping[str, Any] = dict(sounds) if sounds else {}
        self.grid = Grid()
        self._bag: list[Block] = all_blocks()
        self.current_block: Block = self._random_block()
        self.next_block: Block = self._random_block()
        self.game_over = False
        self.score = 0

    def _play(self, name: str) -> None:
        sound = self.sounds.get(name)
        if sound is not None:
            sound.play()

    def _random_block(self) -> Block:
        if not self._bag:
            self._bag = all_blocks()
        return self._bag.pop(self.rng.randrange(len(self._bag)))

    def _is_outside(self, block: Block) -> bool:
        return any(
            self.grid.is_cell_outside(cell.row, cell.column)
            for cell in block.cell_positions()
        )

    def _fits(self, block: Block) -> bool:
        return all(
            self.grid.is_cell_empty(cell.row, cell.column)
            for cell in block.cell_positions()
        )

    def _is_blocked(self, block: Block) -> bool:
        return self._is_outside(block) or not self._fits(block)

    def ghost_positions(self) -> list[Position]:
        """Return where the current piece would come to rest if dropped."""
        ghost = copy.copy(self.current_block)
        while True:
            ghost.move(1, 0)
            if self._is_blocked(ghost):
                ghost.move(-1, 0)
                break
        return ghost.cell_positions()

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the field, the current piece and the next-piece preview."""
        self.grid.draw(surface)
        size = self.grid.cell_size - 1
        color = self.current_block.colors[self.current_block.id]
        for cell in self.current_block.cell_positions():
            x = cell.column * self.grid.cell_size + GRID_ORIGIN
            y = cell.row * self.grid.cell_size + GRID_ORIGIN
            pygame.draw.rect(
                surface,
                WHITE,
                (
                    x - STROKE_THICKNESS,
                    y - STROKE_THICKNESS,
                    size + 2 * STROKE_THICKNESS,
                    size + 2 * STROKE_THICKNESS,
                ),
            )
            pygame.draw.rect(surface, color, (x, y, size, size))
        if self.next_block.id != 0:
            self.next_block.draw(surface, *NEXT_BLOCK_OFFSET)

    def reset(self) -> None:
        """Start over with an empty field, a full bag and a zero score."""
        self.grid = Grid()
        self._bag = all_blocks()
        self.current_block = self._random_block()
        self.next_block = self._random_block()
        self.game_over = False
        self.score = 0

    def handle_key(self, key: int | None) -> None:
        """React to one pressed key; any key clears the game-over flag."""
        if self.game_over and key:
            self.game_over = False
        action = {
            pygame.K_a: self.move_block_left,
            pygame.K_LEFT: self.move_block_left,
            pygame.K_d: self.move_block_right,
            pygame.K_RIGHT: self.move_block_right,
            pygame.K_s: self.move_block_down,
            pygame.K_DOWN: self.move_block_down,
            pygame.K_w: self.rotate_block,
            pygame.K_UP: self.rotate_block,
            pygame.K_SPACE: self.drop_block,
            pygame.K_z: self.swap_next_with_current,
        }.get(key)
        if action is not None:
            action()

    def move_block_left(self) -> None:
        """Shift the current piece one column left if there is room."""
        if not self.game_over:
            self.current_block.move(0, -1)
            if self._is_blocked(self.current_block):
                self.current_block.move(0, 1)

    def move_block_right(self) -> None:
        """Shift the current piece one column right if there is room."""
        if not self.game_over:
            self.current_block.move(0, 1)
            if self._is_blocked(self.current_block):
                self.current_block.move(0, -1)

    def move_block_down(self) -> None:
        """Shift the current piece down one row, locking it if it cannot move."""
        if not self.game_over:
            self.current_block.move(1, 0)
            if self._is_blocked(self.current_block):
                self.current_block.move(-1, 0)
                self._lock_block()

    def drop_block(self) -> None:
        """Move the current piece straight down as far as it goes and lock it."""
        while not self.game_over:
            self.current_block.move(1, 0)
            if self._is_blocked(self.current_block):
                self.current_block.move(-1, 0)
                self._lock_block()
                break

    def rotate_block(self) -> None:
        """Rotate the current piece, undoing the rotation if it does not fit."""
        if not self.game_over:
            self.current_block.rotate()
            if self._is_blocked(self.current_block):
                self.current_block.undo_rotation()
            else:
                self._play("rotate")

    def swap_next_with_current(self) -> None:
        """Exchange the current piece with the next one."""
        if not self.game_over:
            self.current_block, self.next_block = self.next_block, self.current_block

    def _lock_block(self) -> None:
        for cell in self.current_block.cell_positions():
            self.grid.grid[cell.row][cell.column] = self.current_block.id
        self.current_block = self.next_block
        if not self._fits(self.current_block):
            self.game_over = True
        self.next_block = self._random_block()
        rows_cleared = self.grid.clear_full_rows()
        if rows_cleared > 0:
            self._play("clear")
            self.update_score(rows_cleared, 0)

    def update_score(self, lines_cleared: int, move_down_points: int) -> None:
        """Add points for cleared lines and for downward movement."""
        self.score += _LINE_POINTS.get(lines_cleared, 0)
        self.score += move_down_points