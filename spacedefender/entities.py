"""Falling meteors and bonuses, and the ship's bullets."""

from __future__ import annotations

import random
from dataclasses import dataclass

SCREEN_SIZE = 720.0
SPRITE_SIZE = 64.0
FALL_SPEED = 0.3
BULLET_SPEED = 0.5
BULLET_SIZE = (2.0, 5.0)
BULLET_OFFSET = (40.0, 23.0)
BULLET_PARKING = (128.0, 128.0)

Vector = tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles share an area of non-zero size."""
        inter_left = max(self.left, other.left)
        inter_top = max(self.top, other.top)
        inter_right = min(self.left + self.width, other.left + other.width)
        inter_bottom = min(self.top + self.height, other.top + other.height)
        return inter_left < inter_right and inter_top < inter_bottom


def _spawn_position(rng: random.Random) -> Vector:
    """A random spot above the visible screen."""
    x = float(rng.randrange(492) + 64)
    y = float(rng.randrange(720) - 720)
    return (x, y)


def _sprite_bounds(position: Vector) -> Rect:
    return Rect(position[0], position[1], SPRITE_SIZE, SPRITE_SIZE)


class Meteor:
    """An enemy rock; the ship dies on contact and bullets destroy it."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.position: Vector = (0.0, 0.0)
        self.restart()

    def restart(self) -> None:
        """Place the meteor at a random spot above the visible screen."""
        self.position = _spawn_position(self._rng)

    def move(self, time: float) -> None:
        """Fall for ``time`` units, respawning once below the screen."""
        x, y = self.position
        self.position = (x, y + FALL_SPEED * time)
        if self.position[1] > SCREEN_SIZE:
            self.restart()

    def bounds(self) -> Rect:
        return _sprite_bounds(self.position)

    def collides(self, rect: Rect) -> bool:
        return self.bounds().intersects(rect)


class Bonus:
    """An ammunition pickup."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.position: Vector = (0.0, 0.0)
        self.restart()

    def restart(self) -> None:
        """Place the bonus at a random spot above the visible screen."""
        self.position = _spawn_position(self._rng)

    def move(self, time: float) -> None:
        """Fall for ``time`` units, respawning once below the screen."""
        x, y = self.position
        self.position = (x, y + FALL_SPEED * time)
        if self.position[1] > SCREEN_SIZE:
            self.restart()

    def bounds(self) -> Rect:
        return _sprite_bounds(self.position)

    def collides(self, rect: Rect) -> bool:
        return self.bounds().intersects(rect)


class Bullet:
    """A small projectile fired upwards from the ship."""

    def __init__(self) -> None:
        self.position: Vector = (0.0, 0.0)
        self.fired = False

    def launch(self, ship_position: Vector) -> None:
        """Place the bullet at the ship's gun."""
        self.position = (
            ship_position[0] + BULLET_OFFSET[0],
            ship_position[1] + BULLET_OFFSET[1],
        )

    def move(self, time: float) -> None:
        x, y = self.position
        self.position = (x, y - BULLET_SPEED * time)

    def reset(self) -> None:
        self.position = BULLET_PARKING

    def out_of_bounds(self) -> bool:
        return self.position[1] < 0

    def bounds(self) -> Rect:
        return Rect(self.position[0], self.position[1], *BULLET_SIZE)