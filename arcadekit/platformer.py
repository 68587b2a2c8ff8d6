"""A tile-based platformer with variable-height jumps and coyote time."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Sequence

from arcadekit.engine import Canvas, Gamepad, Inputs

TILE_SIZE = 16
GRAVITY = 0.6

PLAYER_MOVE_SPEED_MAX = 2.0
PLAYER_ACCELERATION = 1.0
PLAYER_DECELERATION = 0.5
PLAYER_MIN_JUMP_FORCE = 3.0
PLAYER_MAX_JUMP_FORCE = 5.5
PLAYER_JUMP_POWER_DUR = 6
PLAYER_COYOTE_TIMER_DUR = 3

# Size of the sprite art and its offset from the sprite's top-left corner.
_ART_W = 12.0
_ART_H = 12.0
_PAD_X = 2.0
_PAD_Y = 3.0


class Direction(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Tile:
    grid_x: int
    grid_y: int

    def contains(self, point_x: float, point_y: float) -> bool:
        """True when the point lies inside this tile."""
        tile_x = float(self.grid_x * TILE_SIZE)
        tile_y = float(self.grid_y * TILE_SIZE)
        return tile_x <= point_x < tile_x + TILE_SIZE and tile_y <= point_y < tile_y + TILE_SIZE

    def draw(self, canvas: Canvas) -> None:
        canvas.sprite("tile", x=self.grid_x * TILE_SIZE, y=self.grid_y * TILE_SIZE)


def check_collision(player_x: float, player_y: float, direction: Direction, tiles: Sequence[Tile]) -> bool:
    """True when the player's edge facing ``direction`` touches any tile."""
    if direction is Direction.UP:
        points = ((player_x + _PAD_X, player_y + _PAD_Y), (player_x + _PAD_X + _ART_W, player_y + _PAD_Y))
    elif direction is Direction.DOWN:
        bottom = player_y + _PAD_Y + _ART_H
        points = ((player_x + _PAD_X, bottom), (player_x + _PAD_X + _ART_W, bottom))
    elif direction is Direction.LEFT:
        points = ((player_x + _PAD_X - 1.0, player_y + _PAD_Y), (player_x - 1.0, player_y + _PAD_Y + _ART_H))
    else:
        right = player_x + _PAD_X + _ART_W + 1.0
        points = ((right, player_y + _PAD_Y), (right, player_y + _PAD_Y + _ART_H))
    return any(tile.contains(px, py) for tile in tiles for px, py in points)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class Player:
    x: float
    y: float
    speed_x: float = 0.0
    speed_y: float = 0.0
    max_gravity: float = 15.0
    is_falling: bool = False
    is_facing_left: bool = True
    is_landed: bool = False
    coyote_timer: int = 0
    is_powering_jump: bool = False

    def handle_input(self, gamepad: Gamepad) -> None:
        jump_pressed = gamepad.up.just_pressed() or gamepad.start.just_pressed()
        jump_held = gamepad.up.pressed() or gamepad.start.pressed()

        if jump_pressed and (self.is_landed or self.coyote_timer > 0) and self.speed_y >= 0.0:
            if not self.is_powering_jump:
                self.speed_y = -PLAYER_MIN_JUMP_FORCE
                self.is_powering_jump = True

        if self.is_powering_jump and jump_held and self.speed_y < 0.0:
            self.speed_y -= (PLAYER_MAX_JUMP_FORCE - PLAYER_MIN_JUMP_FORCE) / PLAYER_JUMP_POWER_DUR
            if self.speed_y <= -PLAYER_MAX_JUMP_FORCE:
                self.is_powering_jump = False
        else:
            self.is_powering_jump = False

        if gamepad.left.pressed():
            self.speed_x -= PLAYER_ACCELERATION
            self.is_facing_left = True
        elif gamepad.right.pressed():
            self.speed_x += PLAYER_ACCELERATION
            self.is_facing_left = False
        elif self.speed_x > 0.0:
            self.speed_x -= PLAYER_DECELERATION
        elif self.speed_x < 0.0:
            self.speed_x += PLAYER_DECELERATION

        self.speed_x = _clamp(self.speed_x, -PLAYER_MOVE_SPEED_MAX, PLAYER_MOVE_SPEED_MAX)
        if not self.is_powering_jump:
            self.speed_y += GRAVITY
        self.speed_y = _clamp(self.speed_y, -PLAYER_MAX_JUMP_FORCE, self.max_gravity)

        if self.coyote_timer > 0:
            self.coyote_timer -= 1

    def check_collision_tilemap(self, tiles: Sequence[Tile]) -> None:
        if self.speed_y > 0.0:
            if check_collision(self.x, self.y + self.speed_y, Direction.DOWN, tiles):
                self.speed_y = 0.0
                self.is_landed = True
            elif self.is_landed:
                # Just ran off a ledge: allow a late jump for a few frames.
                self.is_landed = False
                self.coyote_timer = PLAYER_COYOTE_TIMER_DUR

        while self.speed_y < 0.0 and check_collision(self.x, self.y + self.speed_y, Direction.UP, tiles):
            self.speed_y += 1.0

        while self.speed_x > 0.0 and check_collision(self.x + self.speed_x, self.y, Direction.RIGHT, tiles):
            self.speed_x -= 1.0

        while self.speed_x < 0.0 and check_collision(self.x + self.speed_x, self.y, Direction.LEFT, tiles):
            self.speed_x += 1.0

    def update_position(self) -> None:
        self.x += self.speed_x
        self.y += self.speed_y

    def draw(self, canvas: Canvas) -> None:
        walking = self.is_landed and self.speed_x != 0.0
        canvas.sprite(
            "kiwi_walking" if walking else "kiwi_idle",
            x=int(self.x),
            y=int(self.y),
            sw=16,
            flip_x=self.is_facing_left,
            fps="fast" if walking else "medium",
        )


def default_tiles() -> list[Tile]:
    """The starting level: a floor, two short walls and three steps."""
    tiles = [Tile(x, 12) for x in range(24)]
    for y in range(9, 12):
        tiles.append(Tile(0, y))
        tiles.append(Tile(23, y))
    tiles.extend([Tile(5, 10), Tile(11, 9), Tile(17, 11)])
    return tiles


@dataclass
class Platformer:
    player: Player = field(default_factory=lambda: Player(200.0, 125.0))
    tiles: list[Tile] = field(default_factory=default_tiles)

    def _center_camera(self, canvas: Canvas) -> None:
        canvas.set_camera(
            self.player.x - canvas.width / 2.0 + 8.0,
            self.player.y - canvas.height / 2.0 + 8.0,
        )

    def update(self, inputs: Inputs, canvas: Canvas) -> None:
        canvas.clear(0xADD8E6FF)
        for tile in self.tiles:
            tile.draw(canvas)
        self.player.handle_input(inputs.gamepad(0))
        self.player.check_collision_tilemap(self.tiles)
        self.player.update_position()
        self._center_camera(canvas)
        self.player.draw(canvas)