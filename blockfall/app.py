"""Screens, timing and the main loop of the game window."""

from __future__ import annotations

import argparse
import enum
import random
from collections.abc import Sequence

import pygame

from blockfall.colors import BLACK, GREEN, LIGHT_BLUE, Color
from blockfall.game import Game

WINDOW_SIZE = (500, 620)
WINDOW_TITLE = "Blockfall"
TARGET_FPS = 90

WHITE = Color(255, 255, 255, 255)
GRAY = Color(130, 130, 130, 255)
DARK_GRAY = Color(80, 80, 80, 255)
MENU_RED = Color(230, 41, 55, 255)
MENU_BACKGROUND = Color(20, 24, 48, 255)
PLAY_BACKGROUND = Color(44, 44, 127, 255)
HELP_BACKGROUND = Color(16, 16, 40, 255)
GAME_OVER_BACKGROUND = MENU_RED

BOX_RADIUS = 10
BOX_STROKE = 3
TEXT_STROKE = 2

HELP_LINES = (
    '- PRESS "A/D" or Left/Right to move blocks',
    '- PRESS "W or Up" to rotate blocks',
    '- PRESS "S or Down" to move blocks down',
    '- Press "SPACE" to drop blocks',
    '- Press "TAB" to pause the game',
)


class GameState(enum.Enum):
    """The screen currently shown."""

    MAIN_MENU = enum.auto()
    PLAYING = enum.auto()
    GAME_OVER = enum.auto()
    HOW_TO_PLAY = enum.auto()
    PAUSE = enum.auto()


class DropTimer:
    """Fires once each time at least ``interval`` seconds have passed."""

    def __init__(self) -> None:
        self.last_update = 0.0

    def triggered(self, now: float, interval: float) -> bool:
        """Return True and restart the period if ``interval`` has elapsed by ``now``."""
        if now - self.last_update >= interval:
            self.last_update = now
            return True
        return False


def calculation_interval(score: int) -> float:
    """Seconds between automatic drops for the given score."""
    interval = 0.8 - score / 1000.0
    return interval if interval > 0.2 else 0.5


def draw_rounded_with_stroke(
    surface: pygame.Surface,
    rect: pygame.Rect | Sequence[int],
    radius: int,
    fill_color: Color,
    stroke_color: Color,
    stroke_thickness: int,
) -> None:
    """Draw a rounded rectangle with an outline of the given thickness."""
    outer = pygame.Rect(rect)
    thickness = int(stroke_thickness)
    pygame.draw.rect(surface, stroke_color, outer, border_radius=radius)
    inner = outer.inflate(-2 * thickness, -2 * thickness)
    pygame.draw.rect(surface, fill_color, inner, border_radius=radius)


def draw_text_with_stroke(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    position: tuple[int, int],
    text_color: Color,
    stroke_color: Color,
    stroke_thickness: int,
) -> None:
    """Draw text surrounded by copies of itself in the stroke colour."""
    x, y = position
    thickness = int(stroke_thickness)
    outline = font.render(text, True, stroke_color)
    for dx in range(-thickness, thickness + 1):
        for dy in range(-thickness, thickness + 1):
            if dx or dy:
                surface.blit(outline, (x + dx, y + dy))
    surface.blit(font.render(text, True, text_color), (x, y))


class App:
    """Switches between screens and drives the game from keys and time."""

    def __init__(self, game: Game | None = None) -> None:
        self.game = game if game is not None else Game()
        self.state = GameState.MAIN_MENU
        self.timer = DropTimer()

    def handle_key(self, key: int) -> None:
        """React to one pressed key according to the current screen."""
        if self.state is GameState.MAIN_MENU:
            if key == pygame.K_RETURN:
                self.state = GameState.PLAYING
            elif key == pygame.K_h:
                self.state = GameState.HOW_TO_PLAY
        elif self.state is GameState.HOW_TO_PLAY:
            if key == pygame.K_BACKSPACE:
                self.state = GameState.MAIN_MENU
        elif self.state is GameState.PLAYING:
            if self.game.game_over:
                self.state = GameState.GAME_OVER
            elif key == pygame.K_TAB:
                self.state = GameState.PAUSE
            else:
                self.game.handle_key(key)
        elif self.state is GameState.PAUSE:
            if key == pygame.K_b:
                self.state = GameState.PLAYING
            elif key == pygame.K_r:
                self.game.reset()
                self.state = GameState.PLAYING
            elif key == pygame.K_m:
                self.game.reset()
                self.state = GameState.MAIN_MENU
        elif self.state is GameState.GAME_OVER:
            if key == pygame.K_r:
                self.game.reset()
                self.state = GameState.PLAYING

    def update(self, now: float) -> None:
        """Advance time: drop the piece when due and notice the end of the game."""
        if self.state is not GameState.PLAYING:
            return
        if self.game.game_over:
            self.state = GameState.GAME_OVER
            return
        if self.timer.triggered(now, calculation_interval(self.game.score)):
            self.game.move_block_down()

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        """Paint the current screen."""
        {
            GameState.MAIN_MENU: self._draw_menu,
            GameState.HOW_TO_PLAY: self._draw_help,
            GameState.PLAYING: self._draw_playing,
            GameState.GAME_OVER: self._draw_game_over,
            GameState.PAUSE: self._draw_pause,
        }[self.state](surface, font)

    def _draw_menu(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        surface.fill(MENU_BACKGROUND)
        draw_rounded_with_stroke(surface, (100, 480, 300, 60), BOX_RADIUS, GRAY, BLACK, BOX_STROKE)
        draw_text_with_stroke(surface, font, 'Press "ENTER" to Start', (135, 500), WHITE, BLACK, TEXT_STROKE)
        draw_text_with_stroke(surface, font, 'Press "H" for How to Play', (120, 450), GREEN, BLACK, TEXT_STROKE)
        draw_text_with_stroke(surface, font, 'Press "ESCAPE" to Quit', (133, 550), MENU_RED, BLACK, TEXT_STROKE)

    def _draw_help(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        surface.fill(HELP_BACKGROUND)
        pygame.draw.rect(surface, DARK_GRAY, (2, 10, 495, 600))
        draw_text_with_stroke(surface, font, "HOW TO PLAY", (145, 50), WHITE, BLACK, TEXT_STROKE)
        for index, line in enumerate(HELP_LINES):
            draw_text_with_stroke(surface, font, line, (20, 130 + 30 * index), WHITE, BLACK, TEXT_STROKE)
        draw_text_with_stroke(
            surface, font, 'Press "BACKSPACE" to return to the main menu', (25, 570), WHITE, BLACK, TEXT_STROKE
        )

    def _draw_playing(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        surface.fill(PLAY_BACKGROUND)
        surface.blit(font.render("Score", True, WHITE), (365, 15))
        surface.blit(font.render("Next", True, WHITE), (370, 175))
        draw_rounded_with_stroke(surface, (320, 50, 170, 60), BOX_RADIUS, GRAY, BLACK, BOX_STROKE)
        score_text = font.render(str(self.game.score), True, WHITE)
        surface.blit(score_text, (320 + (170 - score_text.get_width()) // 2, 65))
        pygame.draw.rect(surface, LIGHT_BLUE, (320, 215, 170, 180), border_radius=BOX_RADIUS)
        self.game.draw(surface)

    def _draw_game_over(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        surface.fill(GAME_OVER_BACKGROUND)
        draw_text_with_stroke(surface, font, "GAME OVER", (100, 100), WHITE, BLACK, BOX_STROKE)
        draw_text_with_stroke(surface, font, f"Score: {self.game.score}", (40, 300), WHITE, BLACK, TEXT_STROKE)
        draw_text_with_stroke(surface, font, 'Press "R" to Retry', (40, 400), WHITE, BLACK, TEXT_STROKE)
        draw_text_with_stroke(surface, font, 'Press "M" Back to Main Menu', (40, 450), WHITE, BLACK, TEXT_STROKE)
        draw_text_with_stroke(surface, font, 'Press "ESCAPE" to Quit', (133, 550), WHITE, BLACK, TEXT_STROKE)

    def _draw_pause(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        surface.fill(PLAY_BACKGROUND)
        draw_text_with_stroke(surface, font, "PAUSED", (155, 100), WHITE, BLACK, TEXT_STROKE)
        draw_text_with_stroke(surface, font, 'Press "B" to Continue', (135, 300), WHITE, BLACK, TEXT_STROKE)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="blockfall", description="A falling-block puzzle game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the piece order")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, 30)
        clock = pygame.time.Clock()
        app = App(Game(rng=random.Random(args.seed)))
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        app.handle_key(event.key)
            app.update(pygame.time.get_ticks() / 1000.0)
            app.draw(screen, font)
            pygame.display.flip()
            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()
    return 0