"""Dreamers, the night clock, the player's tray and the cloud overlay of Dreamland."""

from __future__ import annotations

import enum
import math
from typing import Iterable

from arcadekit.dreamland_feelings import (
    Feeling,
    FloatingText,
    Hitbox,
    hit_test,
    rand01,
    random_feelings,
)
from arcadekit.dreamland_vials import SandTap, Vial, VialSource
from arcadekit.engine import Canvas, Font, Rng


class Easing(enum.Enum):
    LINEAR = "linear"
    EASE_IN_OUT_CIRC = "ease_in_out_circ"

    def apply(self, t: float) -> float:
        """Map linear progress in [0, 1] to eased progress."""
        t = max(0.0, min(1.0, t))
        if self is Easing.LINEAR:
            return t
        if t < 0.5:
            return (1.0 - math.sqrt(1.0 - (2.0 * t) ** 2)) / 2.0
        return (math.sqrt(1.0 - (-2.0 * t + 2.0) ** 2) + 1.0) / 2.0


class Tween:
    """An integer value moving from ``start`` to ``end`` over ``duration`` frames."""

    def __init__(self, start: int, end: int | None = None, duration: int = 0,
                 easing: Easing = Easing.LINEAR) -> None:
        if duration < 0:
            raise ValueError("duration must not be negative")
        self.start = start
        self.end = start if end is None else end
        self.duration = duration
        self.easing = easing
        self.elapsed = 0

    def get(self) -> int:
        """Advance one frame and return the current value."""
        if self.duration == 0:
            return self.end
        self.elapsed = min(self.elapsed + 1, self.duration)
        progress = self.easing.apply(self.elapsed / self.duration)
        return self.start + round((self.end - self.start) * progress)

    def done(self) -> bool:
        return self.elapsed >= self.duration


class Dreamer:
    """A townsperson who wakes up and wants a vial matching their feelings."""

    def __init__(self, x: int, y: int, awake_limit: int, feelings: Iterable[Feeling]) -> None:
        self.hitbox: Hitbox = (x, y, 32, 18)
        self.selected = False
        self.awake = False
        self.sleeping = False
        self.awake_limit = awake_limit
        self.awake_timer = 0.0
        self.feelings = list(feelings)

    @classmethod
    def spawn(cls, count: int, feelings_count: int, awake_limit: int, rng: Rng) -> list[Dreamer]:
        """Place ``count`` dreamers on random free spots of the town grid."""
        x_size, y_size, x_scale, y_scale = 6, 3, 40, 25
        excluded = {(0, 0), (0, y_size - 1), (x_size - 1, 0), (x_size - 1, y_size - 1), (x_size - 1, 1)}
        grid = [(gx, gy) for gx in range(x_size) for gy in range(y_size) if (gx, gy) not in excluded]
        dreamers = []
        for _ in range(count):
            if not grid:
                raise IndexError("no free spot left for another dreamer")
            gx, gy = grid.pop(math.floor(len(grid) * rand01(rng)))
            x_offset = x_scale // 2 if gy == 1 else 0
            x = 127 - (x_size // 2) * x_scale + gx * x_scale + x_offset
            y = 80 - (y_size // 2) * y_scale + gy * y_scale
            dreamers.append(cls(x, y, awake_limit, random_feelings(4, feelings_count, rng)))
        return dreamers

    def hover(self, mx: int, my: int) -> bool:
        return hit_test(self.hitbox, mx, my)

    def toggle_select(self, selected: bool) -> None:
        self.selected = selected

    def sleep(self, vial: Vial) -> int:
        """Put the dreamer to sleep with the given vial; returns the satisfaction score."""
        self.selected = False
        self.awake = False
        self.sleeping = True

        totals: list[list] = []
        for feeling, amount in vial.contents:
            for entry in totals:
                if entry[0] == feeling:
                    entry[1] += int(amount)
                    break
            else:
                totals.append([feeling, int(amount)])

        wanted = len(self.feelings)
        unit = 30.0 / wanted if wanted else math.inf
        satisfaction = 0
        for feeling in self.feelings:
            entry = next((e for e in totals if e[0] == feeling), None)
            if entry is None:
                satisfaction -= 100 // wanted
                continue
            satisfaction += int(max(0.0, min(1.0, entry[1] / unit)) * 25.0)
            entry[1] -= int(unit)
            if entry[1] < 0:
                totals.remove(entry)
        for _, amount in totals:
            satisfaction -= int(amount / unit * 12.5)
        if satisfaction > 0:
            satisfaction += int((self.awake_limit - self.awake_timer) / self.awake_limit * 100.0)
        return satisfaction

    def update(self, ui: GameUI, mx: int, my: int) -> int:
        """Advance one frame; returns a score when the dreamer gives up waiting, else 0."""
        if self.hover(mx, my):
            if self.awake and not self.selected:
                self.toggle_select(True)
        elif self.selected:
            self.toggle_select(False)

        if not self.awake:
            return 0
        if self.awake_timer < self.awake_limit:
            self.awake_timer += 1.0 / 60.0
            return 0
        score = self.sleep(Vial(-32, -32))
        ui.floating_text.append(FloatingText(str(score), self.hitbox[0] + 16, self.hitbox[1], 0))
        return score

    def draw_home(self, canvas: Canvas) -> None:
        x, y = self.hitbox[0], self.hitbox[1]
        if self.awake:
            limit = float(self.awake_limit)
            canvas.rect(x=x + 10, y=y + 15, w=14, h=8, color=0xA6884AFF)
            drop = max(0.0, min(limit, self.awake_timer - limit / 4.0)) / (limit / 2.0) * 3.0
            canvas.circ(x=x + 15, y=y + 17 + int(drop), d=4, color=0x906C30FF)
            canvas.rect(x=x + 10, y=y + 15, w=14, h=9.0 * self.awake_timer / limit, color=0x906C30FF)
            name = "dreamer_awake_hover" if self.selected else "dreamer_awake"
        elif self.sleeping:
            name = "dreamer_asleep"
        else:
            name = "dreamer_idle"
        canvas.sprite(name, x=x, y=y, sw=32, fps="slow")

    def draw_dreamer(self, canvas: Canvas) -> None:
        x, y = self.hitbox[0], self.hitbox[1]
        canvas.sprite("dream_bubble", x=x - 16, y=y - 50, fps="slow")
        offset_x, offset_y = 0, -38
        for i, feeling in enumerate(self.feelings):
            if (i + 1) % 3 == 0:
                offset_x = 0
                offset_y += 17
            canvas.sprite(feeling.sprite(), x=x + offset_x, y=y + offset_y)
            offset_x += 17


class Clock:
    """The night's countdown; stops when time is up or every dreamer sleeps."""

    def __init__(self, limit: float) -> None:
        self.hitbox: Hitbox = (8, 282, 32, 32)
        self.time = 0.0
        self.limit = limit
        self.running = True
        self.intrvl = False
        self.rot = 45.0

    def score_remaining(self) -> int:
        return int(self.limit - self.time) * 3

    def anchor_y(self, y: int) -> None:
        x, _, w, h = self.hitbox
        self.hitbox = (x, y + 25, w, h)

    def update(self, dreamers: Iterable[Dreamer]) -> None:
        self.time += 0.015
        self.intrvl = math.fmod(math.floor(self.limit - self.time), 5.0) == 0.0
        done = all(d.sleeping for d in dreamers)
        self.rot = (self.time / self.limit) * -270.0
        if self.time > self.limit or done:
            self.running = False

    def draw(self, canvas: Canvas) -> None:
        x, y = self.hitbox[0], self.hitbox[1]
        canvas.sprite("clock", x=x, y=y, rotate=self.rot, fps="medium")
        canvas.sprite("clock_frame", x=x, y=y)


class PlayerArea:
    """The tray holding the vial rack, the taps and the clock; slides in and out."""

    def __init__(self, taps: int, time: float) -> None:
        self.hitbox: Hitbox = (0, 255, 255, 112)
        self.vial_source = VialSource()
        self.taps = SandTap.spawn(taps)
        self.clock = Clock(time)
        self.tween: Tween | None = None

    def tween_area(self, out: bool) -> None:
        if out:
            for tap in self.taps:
                tap.flow = 0
        target = 255 if out else 143
        self.tween = Tween(self.hitbox[1], target, 40, Easing.EASE_IN_OUT_CIRC)

    def update(self) -> None:
        if self.tween is None:
            return
        x, _, w, h = self.hitbox
        y = self.tween.get()
        self.hitbox = (x, y, w, h)
        for tap in self.taps:
            tap.anchor_y(y)
        self.vial_source.anchor_y(y)
        self.clock.anchor_y(y)
        if self.tween.done():
            self.tween = None

    def draw(self, canvas: Canvas) -> None:
        canvas.sprite("backsplash", x=self.hitbox[0], y=self.hitbox[1])
        self.vial_source.draw(canvas)
        for tap in self.taps:
            tap.draw(canvas)
        self.clock.draw(canvas)


_VIGNETTE_MENU = (-33, 0, -33)
_VIGNETTE_GAME = (-132, 60, 4)


class GameUI:
    """Cloud vignette, night counter and floating score text."""

    def __init__(self) -> None:
        self.floating_text: list[FloatingText] = []
        self.score = 50
        self.night_count = 0
        self.vignette_tween: tuple[Tween, Tween, Tween] | None = None
        self.vignette_pos: tuple[int, int, int] = _VIGNETTE_MENU

    def tween_vignette(self, to_menu: bool) -> None:
        targets = _VIGNETTE_MENU if to_menu else _VIGNETTE_GAME
        self.vignette_tween = tuple(
            Tween(start, end, 60, Easing.EASE_IN_OUT_CIRC)
            for start, end in zip(self.vignette_pos, targets)
        )

    def update(self, score: int) -> None:
        self.score = score
        alive = []
        for text in self.floating_text:
            if text.timer < text.lifetime:
                text.update()
                alive.append(text)
        self.floating_text = alive

        if self.vignette_tween is not None:
            self.vignette_pos = tuple(t.get() for t in self.vignette_tween)
            if all(t.done() for t in self.vignette_tween):
                self.vignette_tween = None

    def draw_bottom(self, canvas: Canvas) -> None:
        top, bottom, counter = self.vignette_pos
        canvas.sprite("cloud_vignette", x=0, y=top)
        canvas.sprite("cloud_vignette", x=0, y=bottom, rotate=180)
        canvas.sprite("night_counter", x=8, y=counter)
        canvas.text("NIGHT", x=12, y=counter + 13, font=Font.M)
        canvas.text(f"{self.night_count}/7", x=17, y=counter + 21, font=Font.S)

    def draw_top(self, canvas: Canvas) -> None:
        for text in self.floating_text:
            text.draw(canvas)