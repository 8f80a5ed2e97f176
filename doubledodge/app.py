"""Window, input handling and drawing for the game."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

from doubledodge.consts import (
    BACKGROUND_COLOR,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from doubledodge.game import Body, Game, GameState
from doubledodge.ui import Button, Interaction, make_play_button, make_restart_button

FRAME_RATE = 60
SPAWN_INTERVAL = 0.5
SCORE_INTERVAL = 1.0

_KEY_NAMES = {
    pygame.K_a: "a",
    pygame.K_d: "d",
    pygame.K_w: "w",
    pygame.K_s: "s",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
}


def to_screen(x: float, y: float, width: float, height: float) -> tuple[float, float]:
    """Map world coordinates (origin centred, y up) to screen pixels (y down)."""
    return (width / 2 + x, height / 2 - y)


def body_rect(body: Body, width: float, height: float) -> pygame.Rect:
    """The screen rectangle covered by ``body`` in a window of the given size."""
    cx, cy = to_screen(body.x, body.y, width, height)
    rect = pygame.Rect(0, 0, round(body.width), round(body.height))
    rect.center = (round(cx), round(cy))
    return rect


def draw_world(surface: pygame.Surface, game: Game) -> None:
    """Clear the surface and draw every body of the game onto it."""
    surface.fill(BACKGROUND_COLOR)
    width, height = surface.get_size()
    for body in game.bodies():
        pygame.draw.rect(surface, body.color, body_rect(body, width, height))


def _load_font(path: str, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(path, size)
    except (FileNotFoundError, OSError):
        return pygame.font.Font(None, size)


def _draw_score(surface: pygame.Surface, game: Game) -> None:
    x = 0
    for section in game.scoreboard.sections():
        font = _load_font(section.font, section.font_size)
        rendered = font.render(section.value, True, section.color)
        surface.blit(rendered, (x, 0))
        x += rendered.get_width()


def _draw_button(surface: pygame.Surface, button: Button) -> None:
    left, top, width, height = button.rect
    rect = pygame.Rect(round(left), round(top), round(width), round(height))
    pygame.draw.rect(surface, button.color, rect)
    font = _load_font(button.font, button.font_size)
    label = font.render(button.label, True, button.text_color)
    surface.blit(label, label.get_rect(center=rect.center))


def _held_keys() -> set[str]:
    pressed = pygame.key.get_pressed()
    return {name for code, name in _KEY_NAMES.items() if pressed[code]}


def run(width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
    """Open the window and play until it is closed or Escape is pressed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        game = Game(width, height)
        center = (width / 2, height / 2)
        play_button = make_play_button(center)
        restart_button = make_restart_button(center)
        spawn_timer = 0.0
        score_timer = 0.0
        running = True

        while running:
            elapsed = clock.tick(FRAME_RATE) / 1000.0
            clicked = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    clicked = True
            if not running:
                break

            spawn_timer += elapsed
            while spawn_timer >= SPAWN_INTERVAL:
                spawn_timer -= SPAWN_INTERVAL
                game.spawn_creature()
            score_timer += elapsed
            while score_timer >= SCORE_INTERVAL:
                score_timer -= SCORE_INTERVAL
                game.tick_score()

            if game.state is GameState.IN_GAME:
                game.update(_held_keys())
                draw_world(screen, game)
                _draw_score(screen, game)
            else:
                button = play_button if game.state is GameState.MENU else restart_button
                if game.state is GameState.GAME_OVER:
                    draw_world(screen, game)
                else:
                    screen.fill(BACKGROUND_COLOR)
                state = button.update(pygame.mouse.get_pos(), clicked)
                if state is Interaction.CLICKED:
                    game.play()
                    spawn_timer = 0.0
                    score_timer = 0.0
                else:
                    _draw_button(screen, button)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and run the game."""
    parser = argparse.ArgumentParser(description=WINDOW_TITLE)
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH)
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT)
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("window size must be positive")
    run(args.width, args.height)
    return 0