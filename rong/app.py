"""Window, input and drawing for the game."""

from __future__ import annotations

import argparse
from collections.abc import Iterable

import pygame

from rong.ball import BALL_RADIUS
from rong.core import WINDOW_HEIGHT, WINDOW_WIDTH
from rong.game import Game
from rong.scoreboard import (
    BACKGROUND,
    HEIGHT_PERCENT,
    SCORE_FONT_SIZE,
    SEPARATOR_FONT_SIZE,
    WIDTH_PERCENT,
)

TITLE = "Rong"
FPS = 60
WIN_FONT_SIZE = 32
WIN_BACKGROUND: tuple[float, float, float, float] = (0.1, 0.1, 0.1, 0.5)

_KEY_NAMES: dict[int, str] = {
    pygame.K_w: "w",
    pygame.K_s: "s",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_SPACE: "space",
}


def map_keys(pressed: Iterable[int]) -> set[str]:
    """Name the given key codes; keys the game does not use get a generic name."""
    return {_KEY_NAMES.get(code, f"key{code}") for code in pressed}


def to_screen(x: float, y: float) -> tuple[float, float]:
    """World coordinates (origin at centre, y up) to window pixels (y down)."""
    return (x + WINDOW_WIDTH / 2.0, WINDOW_HEIGHT / 2.0 - y)


def _rgba(colour: tuple[float, float, float, float]) -> tuple[int, int, int, int]:
    return tuple(round(c * 255) for c in colour)  # type: ignore[return-value]


def _draw_rect(surface: pygame.Surface, rect: tuple[float, float, float, float]) -> None:
    left, bottom, right, top = rect
    sx, sy = to_screen(left, top)
    pygame.draw.rect(surface, (255, 255, 255), pygame.Rect(sx, sy, right - left, top - bottom))


def _draw_panel(
    surface: pygame.Surface,
    colour: tuple[float, float, float, float],
    top_percent: float,
    width_percent: float,
    height_percent: float,
) -> pygame.Rect:
    width = WINDOW_WIDTH * width_percent / 100.0
    height = WINDOW_HEIGHT * height_percent / 100.0
    rect = pygame.Rect((WINDOW_WIDTH - width) / 2.0, WINDOW_HEIGHT * top_percent / 100.0, width, height)
    panel = pygame.Surface(rect.size, pygame.SRCALPHA)
    panel.fill(_rgba(colour))
    surface.blit(panel, rect.topleft)
    return rect


def _draw_scoreboard(surface: pygame.Surface, game: Game, fonts: dict[int, pygame.font.Font]) -> None:
    rect = _draw_panel(surface, BACKGROUND, 0.0, WIDTH_PERCENT, HEIGHT_PERCENT)
    left, separator, right = game.scoreboard.texts()
    parts = [
        (left, SCORE_FONT_SIZE),
        (separator, SEPARATOR_FONT_SIZE),
        (right, SCORE_FONT_SIZE),
    ]
    slot = rect.width / (len(parts) + 1)
    for position, (text, size) in enumerate(parts, start=1):
        rendered = fonts[size].render(text, True, (255, 255, 255))
        centre = (rect.left + slot * position, rect.centery)
        surface.blit(rendered, rendered.get_rect(center=centre))


def _draw_win_screen(surface: pygame.Surface, message: str, font: pygame.font.Font) -> None:
    rect = _draw_panel(surface, WIN_BACKGROUND, 40.0, 50.0, 20.0)
    lines = [font.render(line, True, (255, 255, 255)) for line in message.split("\n")]
    total = sum(line.get_height() for line in lines)
    y = rect.centery - total / 2.0
    for line in lines:
        surface.blit(line, line.get_rect(midtop=(rect.centerx, y)))
        y += line.get_height()


def _draw(surface: pygame.Surface, game: Game, fonts: dict[int, pygame.font.Font]) -> None:
    surface.fill((0, 0, 0))
    for paddle in game.paddles:
        _draw_rect(surface, paddle.rect())
    centre = to_screen(game.ball.x, game.ball.y)
    pygame.draw.circle(surface, (255, 255, 255), centre, BALL_RADIUS)
    _draw_scoreboard(surface, game, fonts)
    message = game.win_message
    if message is not None:
        _draw_win_screen(surface, message, fonts[WIN_FONT_SIZE])


def main(argv: list[str] | None = None) -> int:
    """Open the window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="rong", description="Two-player paddle game.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((int(WINDOW_WIDTH), int(WINDOW_HEIGHT)))
        pygame.display.set_caption(TITLE)
        fonts = {size: pygame.font.Font(None, size) for size in {SCORE_FONT_SIZE, SEPARATOR_FONT_SIZE, WIN_FONT_SIZE}}
        clock = pygame.time.Clock()
        game = Game()
        held: set[int] = set()

        while True:
            dt = clock.tick(FPS) / 1000.0
            just_pressed: set[int] = set()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    held.add(event.key)
                    just_pressed.add(event.key)
                elif event.type == pygame.KEYUP:
                    held.discard(event.key)
            game.update(dt, map_keys(held), map_keys(just_pressed))
            _draw(screen, game, fonts)
            pygame.display.flip()
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())