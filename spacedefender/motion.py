"""Movement rules for the player's ship and the scrolling starfield."""

from __future__ import annotations

SCREEN_SIZE = 720.0
SHIP_LIMIT = 656.0
BACKGROUND_SPEED = 0.2

Vector = tuple[float, float]


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def move_spaceship(position: Vector, velocity: Vector, time: float) -> Vector:
    """Advance the ship by ``velocity * time`` and keep it inside the play field."""
    x = position[0] + velocity[0] * time
    y = position[1] + velocity[1] * time
    return _clamp(x, 0.0, SHIP_LIMIT), _clamp(y, 0.0, SHIP_LIMIT)


def scroll_background(top: float, bottom: float, time: float) -> tuple[float, float]:
    """Scroll the two stacked background panels downwards, wrapping each one.

    ``top`` and ``bottom`` are the vertical positions of the two panels; the
    new positions are returned in the same order.
    """
    if top > SCREEN_SIZE:
        top = 0.0
    if bottom > 0:
        bottom = -SCREEN_SIZE
    step = BACKGROUND_SPEED * time
    return top + step, bottom + step