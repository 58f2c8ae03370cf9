"""Pong against the pet, whose skill grows with its pong level."""

from __future__ import annotations

import math
import random

from honkpet.canvas import Canvas, Color

SCREEN_SIZE = 128
PADDLE_HEIGHT = 20
ENEMY_HEIGHT = 20
ENEMY_X = 125.0
FRICTION = 0.998
MIN_HORIZONTAL_SPEED = 0.8
MAX_VERTICAL_SPEED = 3.0
BASE_SPEED = 2.5
WINNING_SCORE = 5
XP_PER_LEVEL = 5
PLAYER_WINS_MESSAGE = "aw dang it ggs"
PET_WINS_MESSAGE = "LMAO YOU SUCK AT THIS GAME"


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def level_up(beginning_xp: float, gained_xp: float, beginning_level: int) -> tuple[float, int]:
    """Return (xp, level) after gaining xp; a level needs level * 5 xp."""
    total = beginning_xp + gained_xp
    needed = beginning_level * XP_PER_LEVEL
    if total > needed:
        return total - needed, beginning_level + 1
    return total, beginning_level


class Pong:
    """One match, advanced frame by frame with :meth:`step`."""

    def __init__(self, level: int = 1, rng: random.Random | None = None) -> None:
        self.level = level
        self.rng = rng or random.Random()
        self.score = 0
        self.enemy_score = 0
        self.paddle_x = 0
        self.paddle_y = 0
        self.desired_paddle_y = 0.0
        self.ball_x = 10.0
        self.ball_y = 30.0
        self.ball_vx = 2.0
        self.ball_vy = 2.0
        self.enemy_paddle_x = ENEMY_X
        self.enemy_paddle_y = 30.0
        self.enemy_speed = 1.5
        self.finished = False
        self.message = ""

    def _track_ball(self) -> None:
        centre = self.enemy_paddle_y + ENEMY_HEIGHT // 2
        if self.ball_y < centre:
            self.enemy_paddle_y -= self.enemy_speed
        elif self.ball_y > centre:
            self.enemy_paddle_y += self.enemy_speed

    def enemy_ai(self) -> None:
        """Move the pet's paddle; low levels track always, mid levels wait for the ball."""
        if 1 <= self.level <= 3:
            self.enemy_speed = _clamp(1.5 + (self.level - 1) * 0.5, 0, 3)
            self._track_ball()
        elif 4 <= self.level <= 10:
            trigger_x = 55 + (self.level - 4) * 3
            if self.ball_x > trigger_x:
                self.enemy_speed = _clamp(2.5 + (self.level - 4) * 0.5, 0, 5)
                self._track_ball()
        self.enemy_paddle_y = _clamp(self.enemy_paddle_y, 0, SCREEN_SIZE - ENEMY_HEIGHT)

    def step_ball_forward(self) -> None:
        factor = _clamp(self.enemy_speed / 2, 1, 2)
        self.ball_x += self.ball_vx * factor
        self.ball_y += self.ball_vy * factor

    def re_energize(self, amount: float) -> None:
        factor = amount + self.level // 10
        self.ball_vx *= factor
        self.ball_vy *= factor

    def _move_player_paddle(self) -> None:
        desired = self.desired_paddle_y
        if abs(self.paddle_y - 4 - desired) < PADDLE_HEIGHT:
            return
        move = self.enemy_speed * 1.4
        if desired < self.paddle_y + PADDLE_HEIGHT:
            self.paddle_y = int(self.paddle_y - move)
        elif desired > self.paddle_y + PADDLE_HEIGHT:
            self.paddle_y = int(self.paddle_y + move)

    def _bounce_off_paddles(self) -> None:
        last_x = self.ball_x - self.ball_vx
        edge = self.paddle_x + 4
        if (self.ball_vx < 0 and last_x >= edge and self.ball_x <= edge
                and self.paddle_y - 2 <= self.ball_y <= self.paddle_y + PADDLE_HEIGHT + 2):
            self.ball_vx = abs(self.ball_vx)
            half = PADDLE_HEIGHT // 2
            offset = (self.ball_y - (self.paddle_y + half)) / half + self.rng.randrange(-5, 5)
            self.ball_vy += offset * 2
            self.re_energize(1.1)

        edge = self.enemy_paddle_x - 2
        if (self.ball_vx > 0 and last_x <= edge and self.ball_x >= edge
                and self.enemy_paddle_y <= self.ball_y <= self.enemy_paddle_y + ENEMY_HEIGHT):
            self.ball_vx = -abs(self.ball_vx)
            half = ENEMY_HEIGHT // 2
            self.ball_vy += (self.ball_y - (self.enemy_paddle_y + half)) / half

    def step(self, tilt_y: float, left_held: bool = False, right_held: bool = False) -> bool:
        """Advance one frame; return whether the match goes on."""
        if self.finished:
            return False
        stop = right_held
        if left_held:
            tilt_y = 60.0
        self.desired_paddle_y = tilt_y
        self._move_player_paddle()

        self.step_ball_forward()
        if self.ball_x <= 0:
            self.ball_vx = -self.ball_vx
            self.enemy_score += 1
            self.ball_x = 40.0
        if self.ball_x >= SCREEN_SIZE:
            self.ball_vx = -self.ball_vx
            self.score += 1
            self.ball_x = 100.0
        if self.ball_y >= 127 or self.ball_y <= 0:
            self.ball_vy = -self.ball_vy
            self.re_energize(1.12)

        self.enemy_ai()

        if abs(self.ball_vx) < MIN_HORIZONTAL_SPEED:
            self.ball_vx = math.copysign(MIN_HORIZONTAL_SPEED, self.ball_vx)
            scale = BASE_SPEED / math.hypot(self.ball_vx, self.ball_vy)
            self.ball_vx *= scale
            self.ball_vy *= scale
        if self.ball_vy > MAX_VERTICAL_SPEED:
            self.ball_vy /= 1.2
            self.ball_vx *= 1.5

        self._bounce_off_paddles()

        if self.ball_y <= 0:
            self.ball_y = 0.0
            self.ball_vy = abs(self.ball_vy) * 1.5
        if self.ball_y >= 127:
            self.ball_y = 127.0
            self.ball_vy = -abs(self.ball_vy) * 1.5

        speed = math.hypot(self.ball_vx, self.ball_vy)
        if speed > 4:
            self.ball_vx *= FRICTION / 1.5
            self.ball_vy *= FRICTION / 1.5
        elif speed > 3:
            self.ball_vx *= FRICTION
            self.ball_vy *= FRICTION
        else:
            self.re_energize(2)

        if WINNING_SCORE in (self.score, self.enemy_score):
            stop = True
        if stop:
            self.finished = True
            self.message = (
                PLAYER_WINS_MESSAGE if self.score > self.enemy_score else PET_WINS_MESSAGE
            )
        return not self.finished

    def draw(self, canvas: Canvas) -> None:
        canvas.clear()
        canvas.fill_circle(self.ball_x, self.ball_y, 2, Color.WHITE)
        canvas.fill_rect(self.paddle_x, self.paddle_y, 2, PADDLE_HEIGHT, Color.WHITE)
        canvas.fill_rect(2, self.desired_paddle_y - 3, 2, 6, Color.WHITE)
        canvas.fill_rect(self.enemy_paddle_x, self.enemy_paddle_y, 2, ENEMY_HEIGHT, Color.WHITE)

    def rewards(self) -> tuple[int, int]:
        """Fun and money the match earns."""
        total = self.score + self.enemy_score
        return total, total // 3

    def gained_xp(self) -> int:
        """Pong xp the pet earns from the match."""
        return self.enemy_score + self.score // 2