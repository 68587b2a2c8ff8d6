"""Vials, the vial rack and the sand taps that fill them."""

from __future__ import annotations

import enum
import math

from arcadekit.dreamland_feelings import Feeling, Hitbox, hit_test
from arcadekit.engine import Canvas

OFF_WHITE = 0xCCDEE3FF
VIAL_CAPACITY = 31
_FLOW_RATES = {1: 0.01, 2: 0.05, 3: 0.1}

# Per flow level: stream (outer width, outer dx, inner width, inner dx) and pile likewise.
_STREAMS = {
    1: ((3, 15, 1, 16), (5, 14, 3, 15)),
    2: ((4, 14, 2, 15), (6, 13, 4, 14)),
    3: ((5, 14, 3, 15), (7, 13, 5, 14)),
}


class ObjState(enum.Enum):
    LOOSE = "loose"
    HELD = "held"
    ATTACHED = "attached"
    POURING = "pouring"


class Vial:
    """A vial holding layers of sand, each a (feeling, amount) pair."""

    def __init__(self, x: int, y: int) -> None:
        self.hitbox: Hitbox = (x, y, 12, 32)
        self.state = ObjState.LOOSE
        self.contents: list[tuple[Feeling, float]] = []
        self.filling = False
        self.overflow: tuple[Feeling, int] = (Feeling.WONDER, 0)
        self.overflow_timer = 0
        self.hovered = False

    def contents_sum(self) -> int:
        return int(sum(amount for _, amount in self.contents))

    def hover(self, mx: int, my: int) -> bool:
        return hit_test(self.hitbox, mx, my)

    def fill(self, flow: int, feeling: Feeling, tick: int) -> int:
        """Pour sand in; returns the spillage penalty (negative) when overflowing."""
        if self.contents_sum() < VIAL_CAPACITY:
            self.overflow = (feeling, 0)
            amount = _FLOW_RATES.get(flow, 0.0)
            if self.contents and self.contents[-1][0] == feeling:
                top_feeling, top_amount = self.contents[-1]
                self.contents[-1] = (top_feeling, top_amount + amount)
            else:
                self.contents.append((feeling, amount))
            return 0
        self.overflow = (feeling, flow)
        if tick > self.overflow_timer:
            self.overflow_timer = tick + 60
            return -3 * flow
        return 0

    def update(self, mx: int, my: int) -> None:
        self.overflow = (Feeling.WONDER, 0)
        if self.state is ObjState.HELD:
            _, _, w, h = self.hitbox
            self.hitbox = (mx - 6, my - 8, w, h)
        if self.state is not ObjState.ATTACHED:
            self.hovered = self.hover(mx, my)

    def draw(self, canvas: Canvas) -> None:
        x, y = self.hitbox[0], self.hitbox[1]
        attached = self.state is ObjState.ATTACHED
        if not attached:
            canvas.sprite("vial_bg", x=x, y=y, color=0xFFFFFF80)

        fill_i = 0
        for feeling, amount in self.contents:
            height = int(amount)
            canvas.rect(w=8, h=height, x=x + 4, y=y + 32 - height - fill_i, color=feeling.color())
            fill_i += height
        if self.filling:
            canvas.rect(w=8, h=1, x=x + 4, y=y + 31 - fill_i, color=OFF_WHITE)

        name = "vial_attached" if attached else "vial"
        if self.hovered:
            name += "_hover"
        canvas.sprite(name, x=x, y=y)

        if self.overflow[1] > 0:
            sand = self.overflow[0].color()
            for dx in (1, 12):
                canvas.rect(w=3, h=240 - y, x=x + dx, y=y + 1, color=OFF_WHITE)
            for dx in (2, 13):
                canvas.rect(w=1, h=239 - y, x=x + dx, y=y + 2, color=sand)
            for dx in (0, 11):
                canvas.rect(w=5, h=2, x=x + dx, y=240, color=OFF_WHITE)
            for dx in (1, 12):
                canvas.rect(w=3, h=1, x=x + dx, y=240, color=sand)
            canvas.rect(w=12, h=2, x=x + 2, y=y + 1, color=sand)


class VialSource:
    """The rack that hands out empty vials and the bin that takes them back."""

    def __init__(self) -> None:
        self.vials = 3
        self.rack_hitbox: Hitbox = (8, 327, 32, 32)
        self.rack_hover = False
        self.trash_hitbox: Hitbox = (215, 327, 32, 32)
        self.trash_hover = False

    def anchor_y(self, y: int) -> None:
        rx, _, rw, rh = self.rack_hitbox
        tx, _, tw, th = self.trash_hitbox
        self.rack_hitbox = (rx, y + 60, rw, rh)
        self.trash_hitbox = (tx, y + 74, tw, th)

    def update(self, mx: int, my: int, held_vial: bool) -> None:
        self.rack_hover = hit_test(self.rack_hitbox, mx, my) and not held_vial
        self.trash_hover = hit_test(self.trash_hitbox, mx, my) and held_vial

    def draw(self, canvas: Canvas) -> None:
        rx, ry = self.rack_hitbox[0], self.rack_hitbox[1]
        if self.vials == 0:
            canvas.sprite("0rack_idle", x=rx, y=ry)
        elif 1 <= self.vials <= 3:
            suffix = "hover" if self.rack_hover else "idle"
            canvas.sprite(f"{self.vials}rack_{suffix}", x=rx, y=ry)

        tx, ty = self.trash_hitbox[0], self.trash_hitbox[1]
        if self.trash_hover:
            canvas.sprite("trash_hover", x=tx, y=ty, fps="fast")
        else:
            canvas.sprite("trash", x=tx, y=ty)


class SandTap:
    """A tap pouring one feeling's sand; its handle sets the flow from 0 to 3."""

    def __init__(self, x: int, y: int, feeling: Feeling) -> None:
        self.x = x
        self.anchor_offset = y
        self.y = 255 + y
        self.spiggot_hitbox: Hitbox = (x + 5, y + 255, 22, 22)
        self.handle_hitbox: Hitbox = (x + 5, y + 255, 22, 22)
        self.spiggot_hover = False
        self.handle_hover = False
        self.feeling = feeling
        self.flow = 0
        self.state = ObjState.LOOSE
        self.vial: Vial | None = None
        self.overflow_timer = 0

    @classmethod
    def spawn(cls, pool: int) -> list[SandTap]:
        """One tap per feeling in the pool, centred and arranged in an arc."""
        taps = []
        for s, feeling in enumerate(Feeling.pool(pool)):
            x = 43 + 21 * (5 - pool) + s * 34
            y = 32.0 + (1.0 - math.sin(3.145 * (s + 1) / (pool + 1)) ** 2) * 8.0
            taps.append(cls(x, int(y), feeling))
        return taps

    def _reset_handle(self) -> None:
        self.handle_hitbox = (self.x, self.y - 2, 32, 16)

    def anchor_y(self, y: int) -> None:
        self.y = y + self.anchor_offset
        self._reset_handle()
        self.spiggot_hitbox = (self.x + 5, self.y + 14, 22, 32)
        if self.vial is not None:
            vx, _, vw, vh = self.vial.hitbox
            self.vial.hitbox = (vx, self.y + 18, vw, vh)

    def change_flow(self, mx: int) -> None:
        clamped = max(self.x, min(self.x + 32, mx))
        self.flow = max(0, min(3, (clamped - self.x) // 8))
        self._reset_handle()

    def update(self, vial_held: bool, mx: int, my: int, tick: int) -> int:
        """Advance one frame; returns a spillage penalty (negative) or 0."""
        vial = self.vial
        if not vial_held:
            self.spiggot_hover = False
            if hit_test(self.handle_hitbox, mx, my):
                self.handle_hover = True
                if vial is not None:
                    vial.hovered = False
            else:
                self.handle_hover = False
                if vial is not None:
                    vial.hovered = vial.hover(mx, my)
        else:
            self.handle_hover = False
            if vial is not None:
                vial.hovered = False
            self.spiggot_hover = vial is None and hit_test(self.spiggot_hitbox, mx, my)

        if vial is not None:
            vial.update(0, 0)
            if self.flow > 0:
                vial.filling = True
                return vial.fill(self.flow, self.feeling, tick)
            vial.filling = False
            return 0
        if tick > self.overflow_timer:
            self.overflow_timer = tick + 60
            return -3 * self.flow
        return 0

    def draw(self, canvas: Canvas) -> None:
        if self.vial is not None:
            canvas.sprite("vial_bg", x=self.vial.hitbox[0], y=self.vial.hitbox[1], color=0xFFFFFF80)

        height = 23 if self.vial is not None else 215 - self.y
        pattern = _STREAMS.get(self.flow)
        if pattern is not None:
            sand = self.feeling.color()
            (sw_out, sdx_out, sw_in, sdx_in), (pw_out, pdx_out, pw_in, pdx_in) = pattern
            canvas.rect(w=sw_out, h=height, x=self.x + sdx_out, y=self.y + 26, color=OFF_WHITE)
            canvas.rect(w=sw_in, h=height, x=self.x + sdx_in, y=self.y + 26, color=sand)
            pile_y = self.y + 25 + height
            canvas.rect(w=pw_out, h=2, x=self.x + pdx_out, y=pile_y, color=OFF_WHITE)
            canvas.rect(w=pw_in, h=1, x=self.x + pdx_in, y=pile_y, color=sand)

        canvas.sprite("tap_label", x=self.x + 6, y=self.y - 16)
        canvas.sprite(self.feeling.sprite(), x=self.x + 8, y=self.y - 14)
        canvas.sprite("tap_spigot_hover" if self.spiggot_hover else "tap_spigot", x=self.x, y=self.y)
        handle_hot = self.handle_hover or self.state is ObjState.HELD
        canvas.sprite(
            "tap_handle_hover" if handle_hot else "tap_handle",
            x=self.x - 4 + self.flow * 8,
            y=self.handle_hitbox[1],
        )
        if self.vial is not None:
            self.vial.draw(canvas)