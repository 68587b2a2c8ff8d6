"""Entities of the bork runner: projectiles, enemies and power-ups."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from arcadekit.engine import Canvas, Rng

CANVAS_WIDTH = 256
CANVAS_HEIGHT = 144
DOGE_WIDTH = 16.0
DOGE_HEIGHT = 32.0
BORK_WIDTH = 8.0
BORK_HEIGHT = 8.0
ENEMY_WIDTH = 16.0
ENEMY_HEIGHT = 16.0
POWERUP_WIDTH = 16.0
POWERUP_HEIGHT = 16.0
BAT_RANGE = 10.0


@dataclass
class Bork:
    """A bark projectile flying to the right at constant speed."""

    x: float
    y: float
    vel_x: float = 5.0

    def update(self) -> None:
        self.x += self.vel_x

    def draw(self, canvas: Canvas) -> None:
        canvas.sprite("bork", x=self.x, y=self.y)


@dataclass
class Enemy:
    """A flying enemy that enters from the right edge."""

    x: float
    y: float
    vel_x: float
    hits: int = 0
    max_hits: int = 1

    @classmethod
    def spawn(cls, vel_x: float, rng: Rng) -> Enemy:
        """Create an enemy at the right edge in a randomly chosen row slot."""
        slots = int(CANVAS_HEIGHT / ENEMY_HEIGHT)
        slot = rng.next() % slots
        return cls(x=256.0, y=-20.0 + slot * ENEMY_HEIGHT, vel_x=vel_x)

    def update(self) -> None:
        self.x += self.vel_x

    def draw(self, canvas: Canvas) -> None:
        canvas.sprite("enemy", x=self.x, y=self.y, fps="fast")


class PowerupType(enum.Enum):
    DOUBLE_JUMP = "double_jump"
    SPEED_BOOST = "speed_boost"
    MULTI_BORK = "multi_bork"
    BAT = "bat"


_POWERUP_LOOKS: dict[PowerupType, tuple[str, int | None]] = {
    PowerupType.DOUBLE_JUMP: ("double_jump", 0xFF000FFF),
    PowerupType.SPEED_BOOST: ("speed_boost", 0xFFFF00FF),
    PowerupType.MULTI_BORK: ("multi_bork", 0xFF00FFFF),
    PowerupType.BAT: ("coin", None),
}


@dataclass
class Powerup:
    x: float
    y: float
    angle: float
    vel_y: float
    powerup_type: PowerupType

    def draw(self, canvas: Canvas) -> None:
        sprite, outline = _POWERUP_LOOKS[self.powerup_type]
        canvas.sprite(sprite, x=self.x, y=self.y)
        if outline is not None:
            canvas.rect(w=POWERUP_WIDTH, h=POWERUP_HEIGHT, color=outline, x=self.x, y=self.y)