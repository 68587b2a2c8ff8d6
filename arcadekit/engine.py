"""Frame-based input state, draw recording and random numbers shared by the games."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field, fields
from typing import Any, Iterable, Iterator


@dataclass
class Button:
    """A digital button whose state is sampled once per frame."""

    held: bool = False
    was_held: bool = False

    def press(self) -> None:
        self.held = True

    def release(self) -> None:
        self.held = False

    def advance(self) -> None:
        """Close the current frame: the current state becomes the previous one."""
        self.was_held = self.held

    def pressed(self) -> bool:
        return self.held

    def just_pressed(self) -> bool:
        return self.held and not self.was_held

    def just_released(self) -> bool:
        return self.was_held and not self.held


@dataclass
class Gamepad:
    """The buttons of one player's controller."""

    up: Button = field(default_factory=Button)
    down: Button = field(default_factory=Button)
    left: Button = field(default_factory=Button)
    right: Button = field(default_factory=Button)
    a: Button = field(default_factory=Button)
    b: Button = field(default_factory=Button)
    x: Button = field(default_factory=Button)
    y: Button = field(default_factory=Button)
    start: Button = field(default_factory=Button)
    select: Button = field(default_factory=Button)

    def _buttons(self) -> Iterator[Button]:
        return (getattr(self, f.name) for f in fields(self))

    def advance(self) -> None:
        for button in self._buttons():
            button.advance()


@dataclass
class Mouse:
    """Pointer position and buttons."""

    left: Button = field(default_factory=Button)
    right: Button = field(default_factory=Button)
    position: tuple[int, int] = (0, 0)

    def advance(self) -> None:
        self.left.advance()
        self.right.advance()


class Inputs:
    """All input devices seen by a game during one frame."""

    def __init__(self, players: int = 4) -> None:
        if players < 1:
            raise ValueError("at least one gamepad is required")
        self.gamepads = [Gamepad() for _ in range(players)]
        self.mouse = Mouse()

    def gamepad(self, index: int) -> Gamepad:
        if not 0 <= index < len(self.gamepads):
            raise IndexError(f"no gamepad with index {index}")
        return self.gamepads[index]

    def advance(self) -> None:
        for pad in self.gamepads:
            pad.advance()
        self.mouse.advance()


class Font(enum.Enum):
    S = "small"
    M = "medium"
    L = "large"
    XL = "extra-large"


@dataclass(frozen=True)
class DrawCommand:
    """One recorded drawing operation."""

    kind: str
    params: dict[str, Any]

    def __getitem__(self, key: str) -> Any:
        return self.params[key]


class Canvas:
    """Records the drawing operations issued during a frame."""

    def __init__(self, width: int = 256, height: int = 144) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self.commands: list[DrawCommand] = []
        self.camera: tuple[float, float] = (0.0, 0.0)

    def _record(self, kind: str, **params: Any) -> DrawCommand:
        command = DrawCommand(kind, params)
        self.commands.append(command)
        return command

    def clear(self, color: int) -> DrawCommand:
        return self._record("clear", color=color)

    def rect(self, x=0, y=0, w=0, h=0, color: int = 0xFFFFFFFF, border_radius=0) -> DrawCommand:
        return self._record("rect", x=x, y=y, w=w, h=h, color=color, border_radius=border_radius)

    def circ(self, x=0, y=0, d=0, color: int = 0xFFFFFFFF) -> DrawCommand:
        return self._record("circ", x=x, y=y, d=d, color=color)

    def sprite(self, name: str, x=0, y=0, **kwargs: Any) -> DrawCommand:
        return self._record("sprite", name=name, x=x, y=y, **kwargs)

    def text(self, text: str, x=0, y=0, font: Font = Font.M, color: int = 0xFFFFFFFF) -> DrawCommand:
        return self._record("text", text=text, x=x, y=y, font=font, color=color)

    def set_camera(self, x: float, y: float) -> None:
        self.camera = (x, y)

    def commands_of(self, kind: str) -> list[DrawCommand]:
        return [command for command in self.commands if command.kind == kind]

    def reset(self) -> None:
        self.commands.clear()


class Rng:
    """Source of unsigned 32-bit random numbers; optionally replays fixed values."""

    def __init__(self, seed: int | None = None, values: Iterable[int] | None = None) -> None:
        self._random = random.Random(seed)
        self._values: list[int] | None = None
        self._position = 0
        if values is not None:
            self._values = list(values)
            if not self._values:
                raise ValueError("values must not be empty")

    def next(self) -> int:
        if self._values is None:
            return self._random.getrandbits(32)
        value = self._values[self._position % len(self._values)]
        self._position += 1
        return value & 0xFFFFFFFF