"""Bork Runner: an endless runner with a balloon-carried dog that barks at enemies."""

from __future__ import annotations

import math

from arcadekit.bork_entities import (
    BAT_RANGE,
    BORK_HEIGHT,
    BORK_WIDTH,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DOGE_HEIGHT,
    DOGE_WIDTH,
    ENEMY_HEIGHT,
    ENEMY_WIDTH,
    POWERUP_HEIGHT,
    POWERUP_WIDTH,
    Bork,
    Enemy,
    Powerup,
    PowerupType,
)
from arcadekit.engine import Canvas, Font, Inputs, Rng


def format_clock(ticks: int) -> str:
    """Render a frame count (60 per second) as mm:ss."""
    minutes, seconds = divmod(ticks // 60, 60)
    return f"{minutes:02}:{seconds:02}"


def energy_color(energy: int, max_energy: int) -> int:
    """Colour of the energy bar for the given fill level."""
    if max_energy <= 0:
        raise ValueError("max_energy must be positive")
    ratio = energy / max_energy
    if ratio <= 0.25:
        return 0xFF0000FF
    if ratio <= 0.75:
        return 0xEC8915FF
    return 0x00A0FFFF


def _overlap(ax: float, ay: float, aw: float, ah: float, bx: float, by: float, bw: float, bh: float) -> bool:
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def _by_health(health: int, low: float, mid: float, high: float) -> float:
    if health <= 1:
        return low
    if health == 2:
        return mid
    return high


class BorkRunner:
    """Game state and per-frame logic."""

    def __init__(self, rng: Rng | None = None) -> None:
        self.rng = rng or Rng()
        self._reset()

    def _reset(self) -> None:
        self.is_ready = False
        self.dog_x = 20.0
        self.dog_y = 100.0
        self.tick = 0
        self.last_bork = 0
        self.bork_rate = 10
        self.bork_range = 96.0
        self.last_enemy_spawn = 0
        self.enemy_spawn_rate = 100
        self.is_jumping = False
        self.energy = 10
        self.max_energy = 10
        self.recharge_rate = 25
        self.vel_y = 0.0
        self.borks: list[Bork] = []
        self.enemies: list[Enemy] = []
        self.powerups: list[Powerup] = []
        self.score = 0
        self.health = 3
        self.has_bat = True
        self.last_bat_swing = 0
        self.can_fire_multiple_borks = False
        self.last_game_over = 0

    @property
    def is_over(self) -> bool:
        return self.last_game_over > 0

    def _dog_hits(self, x: float, y: float, w: float, h: float) -> bool:
        return _overlap(self.dog_x, self.dog_y, DOGE_WIDTH, DOGE_HEIGHT, x, y, w, h)

    def _handle_input(self, inputs: Inputs) -> None:
        gp = inputs.gamepad(0)
        if gp.start.just_released():
            if self.tick - self.last_bork >= self.bork_rate and self.energy > 0:
                self.borks.append(Bork(self.dog_x + DOGE_WIDTH / 2.0, self.dog_y - (8.0 - DOGE_HEIGHT / 2.0)))
                self.last_bork = self.tick
                self.energy -= 1

        if gp.right.just_pressed() and self.has_bat:
            for enemy in self.enemies:
                if _overlap(self.dog_x, self.dog_y, BAT_RANGE, BAT_RANGE, enemy.x, enemy.y, ENEMY_WIDTH, ENEMY_HEIGHT):
                    enemy.hits = enemy.max_hits
            self.last_bat_swing = self.tick

        if gp.up.just_pressed() and self.energy > 0:
            self.is_jumping = True
            if self.vel_y > -3.0:
                self.vel_y = max(self.vel_y - 2.5, -3.0)
            self.energy -= 1
        elif gp.down.just_pressed():
            self.is_jumping = True
            self.vel_y = min(self.vel_y + 1.0, 6.0)

    def _apply_gravity(self) -> None:
        self.dog_y += self.vel_y
        if self.vel_y < _by_health(self.health, 1.1, 0.85, 0.25):
            self.vel_y += _by_health(self.health, 0.12, 0.11, 0.1)
        if not self.is_over and (self.dog_y > CANVAS_HEIGHT or self.dog_y < -DOGE_HEIGHT):
            self.health = 0
            self.last_game_over = self.tick

    def _keep_bork(self, bork: Bork) -> bool:
        bork.update()
        collided = False
        for enemy in self.enemies:
            if _overlap(bork.x, bork.y, BORK_WIDTH, BORK_HEIGHT, enemy.x, enemy.y, ENEMY_WIDTH, ENEMY_HEIGHT):
                enemy.hits += 1
                collided = True
        return not collided and bork.x < self.dog_x + self.bork_range

    def _spawn_enemy(self) -> None:
        vel_x = -1.0 + max((self.tick // 10) * -0.01, -1.0)
        modifier = (self.rng.next() % 200) / 100.0
        self.enemies.append(Enemy.spawn(vel_x * modifier, self.rng))
        self.last_enemy_spawn = self.tick
        if self.tick > 60 and self.enemy_spawn_rate > 30:
            self.enemy_spawn_rate -= 2

    def _keep_enemy(self, enemy: Enemy) -> bool:
        enemy.update()
        if self._dog_hits(enemy.x, enemy.y, ENEMY_WIDTH, ENEMY_HEIGHT):
            if self.health > 0:
                self.health -= 1
            if self.health == 0:
                self.last_game_over = self.tick
            enemy.hits += 1
        if enemy.hits >= enemy.max_hits:
            self.score += 10
            return False
        return enemy.x > -ENEMY_WIDTH

    def _keep_powerup(self, powerup: Powerup) -> bool:
        kind = powerup.powerup_type
        if kind is PowerupType.DOUBLE_JUMP:
            powerup.y += math.sin(powerup.angle) * 2.0
            powerup.angle += 0.1
            self.energy = 2
        elif kind is PowerupType.SPEED_BOOST:
            powerup.x -= 2.0
            for bork in self.borks:
                bork.vel_x *= 1.5
        elif kind is PowerupType.MULTI_BORK:
            powerup.x -= 2.0
            powerup.y += powerup.vel_y
            self.can_fire_multiple_borks = True
        else:
            powerup.x -= 2.0
            powerup.y += math.sin(powerup.angle) * 5.0
            powerup.angle += 0.1
            self.has_bat = True
        if self._dog_hits(powerup.x, powerup.y, POWERUP_WIDTH, POWERUP_HEIGHT):
            if kind is PowerupType.BAT and not self.is_over:
                self.score += 1
            return False
        return True

    def update(self, inputs: Inputs, canvas: Canvas) -> None:
        if not self.is_ready and self.tick >= self.enemy_spawn_rate:
            self.is_ready = True
            self.is_jumping = True
            self.vel_y = -3.0

        if not self.is_over and self.is_ready:
            self._handle_input(inputs)

        if self.is_jumping:
            self._apply_gravity()

        if not self.is_over and self.tick % self.recharge_rate == 0 and self.energy < self.max_energy:
            self.energy += 1

        self.borks = [b for b in self.borks if self._keep_bork(b)]

        if self.tick - self.last_enemy_spawn >= self.enemy_spawn_rate:
            self._spawn_enemy()
        self.enemies = [e for e in self.enemies if self._keep_enemy(e)]

        if self.is_ready and self.rng.next() % 100 < 2:
            y = float(self.rng.next() % CANVAS_HEIGHT)
            self.powerups.append(Powerup(float(CANVAS_WIDTH), y, 0.0, 0.0, PowerupType.BAT))
        self.powerups = [p for p in self.powerups if self._keep_powerup(p)]

        self.draw(canvas)

        if self.is_over and self.tick - self.last_game_over > 60 and inputs.gamepad(0).start.just_pressed():
            self._reset()

        self.tick += 1

    def _draw_speed_lines(self, canvas: Canvas) -> None:
        line_count, max_speed = 15, 25
        for i in range(line_count):
            speed = (i + 1) * max_speed // line_count
            y_position = (i * 28) % 144
            x_position = (self.tick * speed) % 512 - 20
            canvas.rect(w=128, h=1, x=256 - x_position, y=y_position, color=0xFFFFFF88)

    def _draw_dog(self, canvas: Canvas) -> None:
        x = self.dog_x - DOGE_WIDTH
        if self.is_over:
            canvas.sprite("sad_doge", x=x, y=self.dog_y, fps="fast")
            return
        if self.health <= 1:
            balloons, doge = "one_balloon", "doge_worried"
        elif self.health == 2:
            balloons, doge = "two_balloons", "doge"
        else:
            balloons, doge = "three_balloons", "doge"
        fps = 14 if self.vel_y > 0.0 else 8
        canvas.sprite(balloons, x=x, y=self.dog_y - 16.0, fps="slow")
        canvas.sprite(doge, x=x, y=self.dog_y, fps=fps)

    def _draw_hud(self, canvas: Canvas) -> None:
        canvas.rect(w=256, h=24, color=0xFFFFFFAA)
        mmss = format_clock(self.last_game_over if self.is_over else self.tick)
        canvas.text("time", x=118, y=3, color=0x000000FF, font=Font.S)
        canvas.text(mmss, x=108, y=9, font=Font.L, color=0x000000AA)
        canvas.text(mmss, x=108, y=8, font=Font.L, color=0x000000FF)

        points = f"${self.score:06}"
        canvas.text("BORK points", x=190, y=3, color=0x000000FF, font=Font.S)
        canvas.text(points, x=190, y=9, font=Font.L, color=0x000000AA)
        canvas.text(points, x=190, y=8, font=Font.L, color=0x000000FF)

        canvas.sprite("energy", x=4, y=4)
        canvas.text("energy", x=20, y=3, color=0x000000FF, font=Font.S)
        canvas.rect(w=4 * self.energy, h=6, color=energy_color(self.energy, self.max_energy), x=18, y=9)

    def _draw_countdown(self, canvas: Canvas) -> None:
        for limit, label, x in ((30, "3", 124), (60, "2", 124), (90, "1", 124), (120, "GO!", 118)):
            if self.tick < limit:
                canvas.text(label, x=x, y=64, font=Font.L, color=0x000000FF)
                return

    def _draw_game_over(self, canvas: Canvas) -> None:
        canvas.text("GAME OVER", x=90, y=73, font=Font.L, color=0x000000AA)
        canvas.text("GAME OVER", x=90, y=72, font=Font.L, color=0xFF0000FF)
        if self.tick - self.last_game_over > 60 and (self.tick // 2) % 32 < 16:
            canvas.text("- press start -", x=88, y=84, font=Font.M, color=0x000000AA)
            canvas.text("- press start -", x=88, y=83, font=Font.M, color=0x000000FF)

    def draw(self, canvas: Canvas) -> None:
        canvas.clear(0x00FFFFFF)
        self._draw_speed_lines(canvas)
        self._draw_dog(canvas)
        for entity in (*self.borks, *self.enemies, *self.powerups):
            entity.draw(canvas)
        self._draw_hud(canvas)
        self._draw_countdown(canvas)
        if self.is_over:
            self._draw_game_over(canvas)