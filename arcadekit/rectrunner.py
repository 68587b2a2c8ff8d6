"""RectaRunner: fly between scrolling pillars and collect coins for extra lives."""

from __future__ import annotations

from dataclasses import dataclass

from arcadekit.engine import Canvas, Font, Inputs, Rng

_START_X = 30.0
_START_Y = 10.0
_PLAYER_SIZE = 10.0
_BASE_GAP = 50.0


@dataclass
class Obstacle:
    x: float
    y: float
    width: float
    height: float


@dataclass
class Coin:
    x: float
    y: float


class RectRunner:
    """Game state and per-frame logic."""

    def __init__(self, rng: Rng | None = None) -> None:
        self.rng = rng or Rng()
        self._reset(started=False)

    def _reset(self, started: bool) -> None:
        self.frame = 0
        self.player_x = _START_X
        self.player_y = _START_Y
        self.velocity_y = 0.0
        self.obstacles: list[Obstacle] = []
        self.coins: list[Coin] = []
        self.score = 0
        self.lives = 1
        self.is_game_over = False
        self.is_started = started
        self.speed = 2.0
        self.collision_cooldown = 0
        self.acceleration = 0.001
        self.max_speed = 5.0
        self.bg_x = 0.0
        self.fg_x = 0.0

    def restart(self) -> None:
        """Begin a fresh run."""
        self._reset(started=True)

    def _rand(self) -> int:
        return self.rng.next()

    def spawn_obstacles(self) -> None:
        """Add a pair of pillars, sometimes followed by a second pair."""
        height = float(self._rand() % 50 + 20)
        gap_variability = float(self._rand() % 40 - 20)
        gap = _BASE_GAP + self.score // 100 + gap_variability
        self.obstacles.append(Obstacle(256.0, 144.0 - height, 10.0, height))
        self.obstacles.append(Obstacle(256.0, 0.0, 10.0, 144.0 - height - gap))

        if self._rand() % 10 < 3:
            extra_height = float(self._rand() % 50 + 10)
            extra_gap = _BASE_GAP + (self._rand() % 30 - 15)
            self.obstacles.append(
                Obstacle(256.0 + (self._rand() % 30 + 20), 144.0 - extra_height, 10.0, extra_height)
            )
            self.obstacles.append(
                Obstacle(256.0 + (self._rand() % 30 + 20), 0.0, 10.0, 144.0 - extra_height - extra_gap)
            )

    def _overlaps(self, x: float, y: float, w: float, h: float) -> bool:
        return (
            self.player_x < x + w
            and self.player_x + _PLAYER_SIZE > x
            and self.player_y < y + h
            and self.player_y + _PLAYER_SIZE > y
        )

    def _draw_banner(self, canvas: Canvas) -> None:
        canvas.clear(0x00FFFFFF)
        canvas.rect(x=-75, y=0, w=350, h=200, color=0x000000FF)

    def update(self, inputs: Inputs, canvas: Canvas) -> None:
        pad = inputs.gamepad(0)

        if not self.is_started:
            if pad.start.pressed():
                self.is_started = True
            self._draw_banner(canvas)
            canvas.text("Press Start to Play", x=55, y=70, font=Font.L, color=0xFFD700FF)
            return

        if self.is_game_over:
            if pad.start.pressed():
                self.restart()
            self._draw_banner(canvas)
            canvas.text("Game Over", x=65, y=70, font=Font.XL, color=0xFF0000FF)
            canvas.text("Press Start to Restart", x=80, y=90, font=Font.M, color=0x00FFFFFF)
            return

        self._play(pad.up.pressed())
        self._draw_play(canvas)
        self.frame += 1

    def _play(self, up: bool) -> None:
        if up:
            self.velocity_y = -3.0
        self.velocity_y += 0.2
        self.player_y += self.velocity_y
        if self.player_y < 0.0:
            self.player_y = 0.0
            self.velocity_y = 0.0
        elif self.player_y > 144.0 - _PLAYER_SIZE:
            self.player_y = 144.0 - _PLAYER_SIZE
            self.velocity_y = 0.0

        for obstacle in self.obstacles:
            obstacle.x -= self.speed
        for coin in self.coins:
            coin.x -= self.speed
        self.obstacles = [o for o in self.obstacles if o.x + o.width > 0.0]
        self.coins = [c for c in self.coins if c.x > -5.0]

        if self.frame % 60 == 0:
            self.spawn_obstacles()
        if self.frame % 300 == 0:
            self.coins.append(Coin(256.0, float(self._rand() % 120)))

        self.bg_x -= self.speed * 0.5
        self.fg_x -= self.speed
        if self.bg_x <= -256.0:
            self.bg_x = 0.0
        if self.fg_x <= -256.0:
            self.fg_x = 0.0

        hit = any(self._overlaps(o.x, o.y, o.width, o.height) for o in self.obstacles)
        if hit and self.collision_cooldown == 0:
            if self.lives > 0:
                self.lives -= 1
                self.player_x = _START_X
                self.player_y = _START_Y
                self.velocity_y = 0.0
                self.collision_cooldown = 30
            else:
                self.is_game_over = True
        if self.collision_cooldown > 0:
            self.collision_cooldown -= 1

        remaining = []
        for coin in self.coins:
            if self._overlaps(coin.x, coin.y, 5.0, 5.0):
                self.lives += 1
            else:
                remaining.append(coin)
        self.coins = remaining

        self.score += 1
        if self.speed < self.max_speed:
            self.speed = min(self.speed + self.acceleration, self.max_speed)

    def _draw_play(self, canvas: Canvas) -> None:
        canvas.clear(0x00FFFFFF)
        canvas.sprite("bg_mountains", x=self.bg_x, y=70, fps="fast")
        canvas.sprite("bg_mountains", x=self.bg_x + 256.0, y=70, fps="fast")
        canvas.sprite("fg_path", x=int(self.fg_x), y=120, fps="fast")
        canvas.sprite("fg_path", x=self.fg_x + 256.0, y=120, fps="fast")
        canvas.sprite("npc_spex", x=self.player_x - 5.0, y=self.player_y - 25.0, fps="fast")
        for o in self.obstacles:
            canvas.rect(x=o.x, y=o.y, w=o.width, h=o.height, color=0x555555FF)
        for c in self.coins:
            canvas.circ(x=c.x, y=c.y, d=5, color=0xFFD700FF)
        canvas.rect(x=0, y=0, w=256, h=20, color=0x000000FF)
        canvas.text(f"Score: {self.score}", x=10, y=6, font=Font.M, color=0x00FFFFFF)
        canvas.text(f"Lives: {self.lives}", x=175, y=6, font=Font.M, color=0x00FFFFFF)