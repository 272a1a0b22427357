"""Game state and rules: ship control, shooting, meteors, bonus and rounds."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable

from .entities import SPRITE_SIZE, Bonus, Bullet, Meteor, Rect
from .motion import SCREEN_SIZE, move_spaceship, scroll_background

SHIP_START = (360.0, 600.0)
SHIP_HIDDEN = (-10.0, -10.0)
SHIP_SPEED = 0.5
METEOR_COUNT = 10
BULLET_SLOTS = 75
STARTING_AMMO = 15
BONUS_AMMO = 15
BACKGROUND_DIVISOR = 6000
MOTION_DIVISOR = 2000

Vector = tuple[float, float]


class Key(Enum):
    """Keys the game reacts to."""

    A = auto()
    D = auto()
    W = auto()
    S = auto()
    SPACE = auto()
    F = auto()


@dataclass(frozen=True)
class FrameTimes:
    """Per-object time steps derived from one frame's elapsed time."""

    background: float
    spaceship: float
    bullet: float
    meteor: float
    bonus: float


def frame_times(elapsed_us: float) -> FrameTimes:
    """Scale the microseconds elapsed since the last frame into time steps."""
    step = elapsed_us / MOTION_DIVISOR
    return FrameTimes(
        background=elapsed_us / BACKGROUND_DIVISOR,
        spaceship=step,
        bullet=step,
        meteor=step,
        bonus=step,
    )


_PRESS_VELOCITY = {
    Key.A: (0, -SHIP_SPEED),
    Key.D: (0, SHIP_SPEED),
    Key.W: (1, -SHIP_SPEED),
    Key.S: (1, SHIP_SPEED),
}


class Game:
    """The whole state of a game of shooting down falling meteors."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.started = False
        self.gameover = False
        self.winner = False
        self.ship: Vector = SHIP_START
        self.velocity: Vector = (0.0, 0.0)
        self.crash_position: Vector = (0.0, 0.0)
        self.background: Vector = (0.0, -SCREEN_SIZE)
        self.meteors: list[Meteor | None] = []
        self.bullets: list[Bullet | None] = []
        self.bonus: Bonus | None = None
        self.bullet_limit = STARTING_AMMO
        self.ammo_left = STARTING_AMMO
        self.shots_fired = 0
        self.enemies_left = METEOR_COUNT
        self.kills = 0
        self._new_round()

    def _new_round(self) -> None:
        self.meteors = [Meteor(self._rng) for _ in range(METEOR_COUNT)]
        self.bullets = [Bullet() for _ in range(BULLET_SLOTS)]
        self.bonus = Bonus(self._rng)
        self.bullet_limit = STARTING_AMMO
        self.ammo_left = STARTING_AMMO
        self.shots_fired = 0
        self.enemies_left = METEOR_COUNT
        self.kills = 0

    def restart(self) -> None:
        """Begin a new round.

        After a win the ship returns to its starting spot; after a crash it
        stays where it was.
        """
        if self.winner:
            self.ship = SHIP_START
        self.gameover = False
        self.winner = False
        self._new_round()

    def ship_bounds(self) -> Rect:
        return Rect(self.ship[0], self.ship[1], SPRITE_SIZE, SPRITE_SIZE)

    def _set_velocity(self, axis: int, value: float) -> None:
        vx, vy = self.velocity
        self.velocity = (value, vy) if axis == 0 else (vx, value)

    def key_pressed(self, key: Key) -> None:
        """React to a key going down: steer the ship or fire a bullet."""
        if not self.gameover and key in _PRESS_VELOCITY:
            axis, value = _PRESS_VELOCITY[key]
            self._set_velocity(axis, value)
        if (
            key is Key.SPACE
            and self.shots_fired < self.bullet_limit
            and not self.gameover
            and not self.winner
            and self.started
        ):
            bullet = self.bullets[self.shots_fired]
            if bullet is not None:
                bullet.launch(self.ship)
                bullet.fired = True
            self.ammo_left -= 1
            self.shots_fired += 1

    def key_released(self, key: Key) -> None:
        """React to a key going up: stop the ship along that axis."""
        if not self.gameover and key in _PRESS_VELOCITY:
            axis, _ = _PRESS_VELOCITY[key]
            self._set_velocity(axis, 0.0)

    def update(self, elapsed_us: float, held: Iterable[Key] = ()) -> None:
        """Advance the game by one frame.

        ``held`` holds the keys that are down at the end of the frame.
        """
        held = frozenset(held)
        times = frame_times(elapsed_us)
        if Key.SPACE in held:
            self.started = True
        self.background = scroll_background(*self.background, times.background)
        if not self.started:
            return

        if self.bonus is not None:
            self.bonus.move(times.bonus)
        self.ship = move_spaceship(self.ship, self.velocity, times.spaceship)
        for meteor in self.meteors:
            if meteor is not None:
                meteor.move(times.meteor)

        if self.gameover:
            self.velocity = (0.0, 0.0)
            if Key.F in held:
                self.restart()
        elif self.kills == METEOR_COUNT:
            for index in range(min(self.bullet_limit, len(self.bullets))):
                self.bullets[index] = None
            self.winner = True
            self.ship = SHIP_HIDDEN
            if Key.F in held:
                self.restart()
        else:
            self._play(times)

    def _play(self, times: FrameTimes) -> None:
        ship_rect = self.ship_bounds()
        if any(m is not None and m.collides(ship_rect) for m in self.meteors):
            self.gameover = True
            self.crash_position = self.ship

        for index in range(min(self.bullet_limit, len(self.bullets))):
            bullet = self.bullets[index]
            if bullet is None or not bullet.fired:
                continue
            bullet.move(times.bullet)
            if bullet.out_of_bounds():
                self.bullets[index] = None
                continue
            for m_index, meteor in enumerate(self.meteors):
                if meteor is not None and meteor.collides(bullet.bounds()):
                    self.kills += 1
                    self.enemies_left -= 1
                    self.meteors[m_index] = None
                    self.bullets[index] = None
                    break

        if self.bonus is not None and self.bonus.collides(ship_rect):
            self.bullet_limit += BONUS_AMMO
            self.ammo_left += BONUS_AMMO
            self.bonus = None