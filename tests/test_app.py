import random

import pygame

from spacedefender.app import hud_texts, main
from spacedefender.game import STARTING_AMMO, Game, Key


def _game():
    game = Game(random.Random(7))
    game.update(0, {Key.SPACE})
    return game


def test_hud_texts_initial():
    texts = dict(hud_texts(_game()))
    assert "Ammo: 15" in texts
    assert "Enemy: 10" in texts


def test_hud_positions():
    texts = dict(hud_texts(_game()))
    assert texts["Ammo: 15"] == (500, 24)
    assert texts["Enemy: 10"] == (20, 24)


def test_hud_tracks_shots():
    game = _game()
    game.key_pressed(Key.SPACE)
    labels = [text for text, _ in hud_texts(game)]
    assert labels[0] == f"Ammo: {STARTING_AMMO - 1}"


def test_hud_tracks_kills():
    game = _game()
    game.key_pressed(Key.SPACE)
    game.bullets[0].position = (100.0, 300.0)
    game.meteors[0].position = (90.0, 280.0)
    game.update(0, set())
    labels = [text for text, _ in hud_texts(game)]
    assert labels[1] == f"Enemy: {game.enemies_left}"
    assert game.enemies_left < 10


def test_main_fails_without_icon(tmp_path):
    assert main(["--assets", str(tmp_path)]) == 1


def test_main_fails_without_background(tmp_path):
    images = tmp_path / "images"
    images.mkdir()
    pygame.image.save(pygame.Surface((32, 32)), str(images / "icon.png"))
    assert main(["--assets", str(tmp_path)]) == 1