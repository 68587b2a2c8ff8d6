"""Pancake Cat: steer a cat to catch falling pancakes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from arcadekit.engine import Canvas, Font, Inputs, Rng


@dataclass
class Pancake:
    x: float
    y: float
    vel: float
    radius: float

    def caught_by(self, cat_x: float, cat_y: float, cat_r: float) -> bool:
        """True when the pancake's rim touches the cat's circle."""
        dx = (cat_x + cat_r) - (self.x + self.radius)
        dy = (cat_y + cat_r) - (self.y + self.radius)
        distance = math.hypot(dx, dy)
        return abs(cat_r - self.radius) <= distance <= cat_r + self.radius


@dataclass
class PancakeCat:
    rng: Rng = field(default_factory=Rng)
    frame: int = 0
    last_munch_at: int = 0
    cat_x: float = 128.0
    cat_y: float = 112.0
    cat_r: float = 8.0
    pancakes: list[Pancake] = field(default_factory=list)
    score: int = 0

    def _spawn(self) -> Pancake:
        x = float(self.rng.next() % 256)
        vel = float(self.rng.next() % 3 + 1)
        radius = float(self.rng.next() % 10 + 5)
        return Pancake(x, 0.0, vel, radius)

    def _keep(self, pancake: Pancake) -> bool:
        pancake.y += pancake.vel
        if pancake.caught_by(self.cat_x, self.cat_y, self.cat_r):
            self.score += 1
            self.last_munch_at = self.frame
            return False
        return pancake.y < 144.0 + pancake.radius * 2.0

    def update(self, inputs: Inputs, canvas: Canvas) -> None:
        pad = inputs.gamepad(0)
        if pad.left.pressed():
            self.cat_x -= 2.0
        if pad.right.pressed():
            self.cat_x += 2.0

        if self.rng.next() % 64 == 0:
            self.pancakes.append(self._spawn())

        self.pancakes = [p for p in self.pancakes if self._keep(p)]

        self.draw(canvas)
        self.frame += 1

    def draw(self, canvas: Canvas) -> None:
        canvas.clear(0x00FFFFFF)
        frame = self.frame // 2
        for col in range(9):
            for row in range(6):
                x = (col * 32 + frame) % (272 + 16) - 32
                y = (row * 32 + frame) % (144 + 16) - 24
                canvas.sprite("heart", x=x, y=y)

        if self.frame >= 64 and max(self.frame - self.last_munch_at, 0) <= 60:
            cx, cy = self.cat_x, self.cat_y
            canvas.rect(w=30, h=10, x=cx + 32.0, y=cy)
            canvas.circ(d=10, x=cx + 28.0, y=cy)
            canvas.rect(w=10, h=5, x=cx + 28.0, y=cy + 5.0)
            canvas.circ(d=10, x=cx + 56.0, y=cy)
            canvas.text("MUNCH!", x=cx + 33.0, y=cy + 3.0, font=Font.S, color=0x000000FF)

        canvas.sprite("munch_cat", x=self.cat_x - self.cat_r, y=self.cat_y - 16.0, fps="fast")

        for p in self.pancakes:
            canvas.circ(x=p.x, y=p.y + 1.0, d=p.radius + 2.0, color=0x000000AA)
            canvas.circ(x=p.x, y=p.y, d=p.radius + 1.0, color=0xF4D29CFF)
            canvas.circ(x=p.x, y=p.y, d=p.radius, color=0xDBA463FF)

        canvas.text(f"Score: {self.score}", x=10, y=10, font=Font.L, color=0xFFFFFFFF)