"""DinoRunner: jump over scrolling trees."""

from __future__ import annotations

from arcadekit.engine import Canvas, Font, Inputs, Rng

_GROUND_Y = 90.0
_TREE_SPEED = 5


def _rem(a: int, b: int) -> int:
    """Remainder that keeps the sign of the dividend."""
    r = abs(a) % abs(b)
    return r if a >= 0 else -r


class DinoRunner:
    """Game state for the runner."""

    def __init__(self, rng: Rng | None = None) -> None:
        self.rng = rng or Rng()
        self.high_score = 0
        self._reset(started=False)

    def _reset(self, started: bool) -> None:
        self.frame = 0
        self.player_x = 0.0
        self.player_y = _GROUND_Y
        self.velocity_y = 0.0
        self.tree_positions = [400]
        self.tree16_positions = [900]
        self.is_started = started
        self.is_game_over = False
        self.score = 0
        self.bird_x = float(self.rng.next() % 256)
        self.bird_y = -32.0
        self.bird_velocity = 1.0 + self.rng.next() % 3
        self.bird_active = False
        self.bird_animation_frame = 0

    def restart(self) -> None:
        """Start a new run, keeping the high score."""
        self._reset(started=True)

    def _respawn(self) -> int:
        return 256 + self.rng.next() % 200 + 200

    def _draw_scenery(self, canvas: Canvas) -> None:
        bg_x = -100 - self.frame // 10
        bg_width = 256
        night = (self.score // 12) % 2 == 1
        background, decoration = ("backgroundnight", "star") if night else ("bglonger", "clouds21")
        canvas.sprite(background, x=_rem(bg_x, bg_width), y=-250, fps="fast")
        canvas.sprite(background, x=_rem(bg_x, bg_width) + bg_width, y=-250, fps="fast")
        total_width = 9 * (32 + 24)
        x_offset = self.frame // 7
        for col in range(9):
            x = _rem(col * (32 + 24) - x_offset, total_width)
            canvas.sprite(decoration, x=x, y=8)
            canvas.sprite(decoration, x=x + total_width, y=8)
        if night:
            canvas.sprite("moon", x=90, y=-1)
        else:
            canvas.sprite("sun64", x=90, y=-10)

        floor_width, num_floors = 45, 10
        floor_offset = self.frame * 5
        for i in range(num_floors):
            x_pos = _rem(i * floor_width - floor_offset, num_floors * floor_width)
            canvas.sprite("floor", x=x_pos, y=114)
            canvas.sprite("floor", x=x_pos + num_floors * floor_width, y=114)

    def _move_trees(self, canvas: Canvas) -> None:
        for i, _ in enumerate(self.tree_positions):
            self.tree_positions[i] -= _TREE_SPEED
            if self.tree_positions[i] < -32:
                self.tree_positions[i] = self._respawn()
                self.score += 1
            pos = self.tree_positions[i]
            if self.player_x + 16.0 > pos and self.player_x < pos + 32 and self.player_y + 16.0 > 105.0:
                self.is_game_over = True
            canvas.sprite("tree32px", x=pos, y=105, fps="fast")

        for i, _ in enumerate(self.tree16_positions):
            self.tree16_positions[i] -= _TREE_SPEED
            if self.tree16_positions[i] < -16:
                self.tree16_positions[i] = self._respawn()
                self.score += 1
            tree_x = float(self.tree16_positions[i])
            tree_top = 102.0
            if (
                self.player_x + 16.0 > tree_x
                and self.player_x < tree_x + 16.0
                and self.player_y + 16.0 > tree_top
                and self.player_y < tree_top + 16.0
            ):
                self.is_game_over = True
            canvas.sprite("tree16x16", x=tree_x, y=118, fps="fast")

    def update(self, inputs: Inputs, canvas: Canvas) -> None:
        pad = inputs.gamepad(0)

        if not self.is_started:
            canvas.text("Press Start to Play", x=55, y=70, font=Font.L, color=0xFFD700FF)
            if pad.start.pressed():
                self.is_started = True
            return

        if self.is_game_over:
            canvas.text("Game Over!", x=85, y=75, font=Font.L, color=0xFF0000FF)
            self.high_score = max(self.high_score, self.score)
            if pad.start.pressed():
                self.restart()
            return

        on_ground = self.player_y >= 86.0
        if pad.up.pressed() and on_ground:
            self.velocity_y = -7.2
        self.velocity_y += 0.4
        self.player_y += self.velocity_y
        if self.player_y < 0.0:
            self.player_y = 0.0
            self.velocity_y = 0.0
        elif self.player_y > _GROUND_Y:
            self.player_y = _GROUND_Y
            self.velocity_y = 0.0

        self._draw_scenery(canvas)
        canvas.sprite("dinorun-Sheet", x=self.player_x, y=self.player_y, fps="fast")
        self._move_trees(canvas)

        canvas.text(f"Score: {self.score}", x=170, y=30, font=Font.L, color=0x0000FFFF)
        canvas.text(f"High Score: {self.high_score}", x=10, y=30, font=Font.M, color=0x0000FFFF)
        self.frame += 1