"""Two-player Pong."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from arcadekit.engine import Canvas, Font, Inputs

_log = logging.getLogger(__name__)

PADDLE_SPEED = 4.0
PADDLE_WIDTH = 8.0
PADDLE_HEIGHT = 32.0
BALL_RADIUS = 4.0


@dataclass
class Paddle:
    x: float
    y: float
    height: float


@dataclass
class Ball:
    x: float
    y: float
    velocity_x: float
    velocity_y: float
    radius: float


class Pong:
    """Game state: two paddles, a ball and the scores."""

    def __init__(self, width: int = 256, height: int = 144) -> None:
        self.width = float(width)
        self.height = float(height)
        paddle_y = self.height / 2.0 - PADDLE_HEIGHT / 2.0
        self.p1_score = 0
        self.p2_score = 0
        self.paddle1 = Paddle(10.0, paddle_y, PADDLE_HEIGHT)
        self.paddle2 = Paddle(self.width - PADDLE_WIDTH - 10.0, paddle_y, PADDLE_HEIGHT)
        self.ball = Ball(self.width / 2.0, self.height / 2.0, 2.0, 2.0, BALL_RADIUS)

    def __repr__(self) -> str:
        return (
            f"Pong(p1_score={self.p1_score}, p2_score={self.p2_score}, "
            f"paddle1={self.paddle1}, paddle2={self.paddle2}, ball={self.ball})"
        )

    def _move_paddle(self, paddle: Paddle, up: bool, down: bool) -> None:
        if up and paddle.y > 0.0:
            paddle.y -= PADDLE_SPEED
        if down and paddle.y + paddle.height < self.height:
            paddle.y += PADDLE_SPEED

    def update(self, inputs: Inputs, canvas: Canvas) -> None:
        gp1 = inputs.gamepad(0)
        gp2 = inputs.gamepad(1)
        if gp1.start.pressed() or gp2.start.pressed():
            _log.debug("%r", self)

        self._move_paddle(self.paddle1, gp1.up.pressed(), gp1.down.pressed())
        self._move_paddle(self.paddle2, gp2.up.pressed(), gp2.down.pressed())

        ball = self.ball
        ball.x += ball.velocity_x
        ball.y += ball.velocity_y

        p1_scored = ball.x + ball.radius * 2.0 >= self.width
        p2_scored = ball.x < 0.0
        if p1_scored:
            self.p1_score += 1
        if p2_scored:
            self.p2_score += 1
        if p1_scored or p2_scored:
            ball.x = self.width / 2.0
            ball.y = self.height / 2.0

        p1, p2 = self.paddle1, self.paddle2
        hits_left = ball.x - ball.radius < p1.x + PADDLE_WIDTH and p1.y < ball.y < p1.y + p1.height
        hits_right = ball.x + ball.radius > p2.x and p2.y < ball.y < p2.y + p2.height
        if hits_left or hits_right:
            ball.velocity_x = -ball.velocity_x

        if ball.y - ball.radius < 0.0 or ball.y + ball.radius > self.height:
            ball.velocity_y = -ball.velocity_y

        self.draw(canvas)

    def draw(self, canvas: Canvas) -> None:
        for paddle in (self.paddle1, self.paddle2):
            canvas.rect(x=paddle.x, y=paddle.y, w=8, h=paddle.height, color=0xFFFFFFFF)
        canvas.circ(x=self.ball.x, y=self.ball.y, d=self.ball.radius, color=0xFFFFFFFF)
        canvas.text(f"P1: {self.p1_score}", x=64, font=Font.L)
        canvas.text(f"P2: {self.p2_score}", x=self.width / 2.0 + 64.0, font=Font.L)