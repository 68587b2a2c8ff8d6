"""Feelings, buttons, floating score text and drawing helpers for Dreamland."""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass

from arcadekit.engine import Canvas, Font, Rng

Hitbox = tuple[int, int, int, int]

_TEXT_DARK = 0x323B42FF
_TEXT_LIGHT = 0xCCDEE3FF
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def hit_test(hitbox: Hitbox, mx: int, my: int) -> bool:
    """True when the point lies inside the (x, y, w, h) box, edges included."""
    x, y, w, h = hitbox
    return x <= mx <= x + w and y <= my <= y + h


def rand01(rng: Rng) -> float:
    """A random value in [0, 1) with a resolution of one hundredth."""
    return (rng.next() % 100) / 100.0


class Feeling(enum.Enum):
    WONDER = "wonder"
    LOVE = "love"
    RITUAL = "ritual"
    STRESS = "stress"
    DAZE = "daze"
    GLOOM = "gloom"

    def color(self) -> int:
        return _FEELING_COLORS[self]

    def sprite(self) -> str:
        return self.value

    @classmethod
    def pool(cls, count: int) -> tuple[Feeling, ...]:
        """The feelings in play for a round with ``count`` feelings."""
        if count == 3:
            return (cls.WONDER, cls.RITUAL, cls.DAZE)
        if count == 4:
            return (cls.WONDER, cls.LOVE, cls.RITUAL, cls.DAZE)
        return (cls.WONDER, cls.LOVE, cls.RITUAL, cls.STRESS, cls.DAZE)


_FEELING_COLORS = {
    Feeling.WONDER: 0xA6884AFF,
    Feeling.LOVE: 0x9D405CFF,
    Feeling.RITUAL: 0x4E7499FF,
    Feeling.STRESS: 0x83473DFF,
    Feeling.DAZE: 0x645360FF,
    Feeling.GLOOM: 0x595652FF,
}


def random_feelings(count: int, pool: int, rng: Rng) -> list[Feeling]:
    """Draw ``count`` feelings, with repetition, from the pool of size ``pool``."""
    choices = Feeling.pool(pool)
    return [choices[math.floor(rand01(rng) * len(choices))] for _ in range(count)]


def nine_slice(canvas: Canvas, name: str, size: int, w: int, h: int, x: int, y: int) -> None:
    """Draw a box of w by h at (x, y) from a 3x3 sprite sheet of ``size`` pixel cells."""
    inner_w = w - size * 2
    inner_h = h - size * 2
    right = x + w - size
    bottom = y + h - size
    # Centre and edges are tiled.
    canvas.sprite(name, x=x + size, y=y + size, sx=size, sy=size, sw=size, sh=size,
                  w=inner_w, h=inner_h, repeat=True)
    canvas.sprite(name, x=x + size, y=y, sx=size, sy=0, sw=size, sh=size, w=inner_w, repeat=True)
    canvas.sprite(name, x=x + size, y=bottom, sx=size, sy=2 * size, sw=size, sh=size,
                  w=inner_w, repeat=True)
    canvas.sprite(name, x=x, y=y + size, sx=0, sy=size, sw=size, sh=size, h=inner_h, repeat=True)
    canvas.sprite(name, x=right, y=y + size, sx=2 * size, sy=size, sw=size, sh=size,
                  h=inner_h, repeat=True)
    # Corners.
    for cx, cy, sx, sy in (
        (x, y, 0, 0),
        (right, y, 2 * size, 0),
        (x, bottom, 0, 2 * size),
        (right, bottom, 2 * size, 2 * size),
    ):
        canvas.sprite(name, x=cx, y=cy, sx=sx, sy=sy, sw=size, sh=size)


@dataclass
class UIButton:
    text: str
    hitbox: Hitbox
    hovered: bool = False

    def hover(self, mx: int, my: int) -> bool:
        """Update and return whether the pointer is over the button."""
        self.hovered = hit_test(self.hitbox, mx, my)
        return self.hovered

    def draw(self, canvas: Canvas) -> None:
        x, y, w, h = self.hitbox
        if self.hovered:
            nine_slice(canvas, "button_hover", 5, w, h, x, y)
            front, shadow = _TEXT_LIGHT, _TEXT_DARK
        else:
            nine_slice(canvas, "button", 5, w, h, x, y)
            front, shadow = _TEXT_DARK, _TEXT_LIGHT
        text_x = x + w // 2 + 1 - int(len(self.text) * 2.5)
        text_y = y + h // 2
        canvas.text(self.text, x=text_x, y=text_y - 2, font=Font.M, color=shadow)
        canvas.text(self.text, x=text_x, y=text_y - 3, font=Font.M, color=front)


def _parse_i32(text: str) -> int | None:
    if not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if -(2**31) <= value < 2**31 else None


class FloatingText:
    """Score text that drifts upward for a short while."""

    def __init__(self, text: str, x: int, y: int, color: int) -> None:
        self.text = text
        self.x = x
        self.y = y
        self.timer = 0
        self.lifetime = 90
        value = _parse_i32(text)
        if value is None:
            self.color = color
            self.color2 = color
        elif value >= 0:
            self.color = 0xFFFFFFFF
            self.color2 = 0xA6884AFF
        else:
            self.color = 0x9D405CFF
            self.color2 = 0xFFFFFFFF

    def update(self) -> None:
        self.timer += 1
        if self.timer % 10 == 0:
            self.y -= 1

    def draw(self, canvas: Canvas) -> None:
        canvas.text(self.text, x=self.x, y=self.y + 1, font=Font.L, color=_TEXT_DARK)
        canvas.text(self.text, x=self.x, y=self.y, font=Font.L, color=self.color)