"""Window, input and drawing for the game."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

import pygame

from .entities import BULLET_SIZE, SPRITE_SIZE
from .game import Game, Key
from .motion import SCREEN_SIZE

TITLE = "Space defender"
FONT_FILE = "font/static/BitcountGridDouble-Regular.ttf"
TITLE_FONT_SIZE = 32
HUD_FONT_SIZE = 30

WHITE = (255, 255, 255)
RED = (255, 0, 0)
BLUE = (0, 0, 255)

_KEYS = {
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_f: Key.F,
}


def hud_texts(game: Game) -> list[tuple[str, tuple[int, int]]]:
    """The ammunition and enemy counters with their screen positions."""
    return [
        (f"Ammo: {game.ammo_left}", (500, 24)),
        (f"Enemy: {game.enemies_left}", (20, 24)),
    ]


def _load(path: Path) -> pygame.Surface | None:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError, OSError):
        return None


def _tile(image: pygame.Surface | None) -> pygame.Surface | None:
    if image is None:
        return None
    width = min(int(SPRITE_SIZE), image.get_width())
    height = min(int(SPRITE_SIZE), image.get_height())
    return image.subsurface(pygame.Rect(0, 0, width, height))


def _font(path: Path, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(str(path), size)
    except (pygame.error, FileNotFoundError, OSError):
        return pygame.font.Font(None, size)


def _blit(screen: pygame.Surface, image, position) -> None:
    if image is not None:
        screen.blit(image, (round(position[0]), round(position[1])))


def _draw(screen, game: Game, art: dict, fonts: dict) -> None:
    screen.fill((0, 0, 0))
    for top in game.background:
        screen.blit(art["background"], (0, round(top)))
    title, hud = fonts["title"], fonts["hud"]
    if not game.started:
        screen.blit(title.render("Press space to start game", True, WHITE), (200, 320))
        return
    if game.bonus is not None:
        _blit(screen, art["bonus"], game.bonus.position)
    for meteor in game.meteors:
        if meteor is not None:
            _blit(screen, art["meteor"], meteor.position)
    restart_text = title.render("Press F to restart game", True, WHITE)
    if game.gameover:
        _blit(screen, art["explode"], game.crash_position)
        screen.blit(title.render("You lose!", True, RED), (300, 320))
        screen.blit(restart_text, (200, 370))
    elif game.winner:
        screen.blit(title.render("You win!", True, BLUE), (300, 320))
        screen.blit(restart_text, (200, 370))
    else:
        _blit(screen, art["ship"], game.ship)
        for text, position in hud_texts(game):
            screen.blit(hud.render(text, True, WHITE), position)
        for bullet in game.bullets:
            if bullet is not None and bullet.fired:
                x, y = bullet.position
                rect = pygame.Rect(round(x), round(y), int(BULLET_SIZE[0]), int(BULLET_SIZE[1]))
                pygame.draw.rect(screen, RED, rect)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="spacedefender", description=TITLE)
    parser.add_argument(
        "--assets", type=Path, default=Path("."),
        help="directory holding the images/ and font/ folders",
    )
    args = parser.parse_args(argv)
    root: Path = args.assets

    icon = _load(root / "images" / "icon.png")
    if icon is None:
        return 1
    background = _load(root / "images" / "background.png")
    if background is None:
        return 1

    pygame.init()
    try:
        size = int(SCREEN_SIZE)
        pygame.display.set_icon(icon)
        screen = pygame.display.set_mode((size, size))
        pygame.display.set_caption(TITLE)
        art = {
            "background": pygame.transform.scale(background, (size, size)),
            "ship": _load(root / "images" / "spaceship.png"),
            "explode": _load(root / "images" / "explode.png"),
            "meteor": _tile(_load(root / "images" / "space_object.png")),
            "bonus": _tile(_load(root / "images" / "bonus.png")),
        }
        fonts = {
            "title": _font(root / FONT_FILE, TITLE_FONT_SIZE),
            "hud": _font(root / FONT_FILE, HUD_FONT_SIZE),
        }
        game = Game()
        last = time.perf_counter()
        running = True
        while running:
            now = time.perf_counter()
            elapsed_us = (now - last) * 1_000_000
            last = now
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in _KEYS:
                    game.key_pressed(_KEYS[event.key])
                elif event.type == pygame.KEYUP and event.key in _KEYS:
                    game.key_released(_KEYS[event.key])
            if not running:
                break
            pressed = pygame.key.get_pressed()
            held = {key for code, key in _KEYS.items() if pressed[code]}
            game.update(elapsed_us, held)
            _draw(screen, game, art, fonts)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0