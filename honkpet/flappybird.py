"""A one-button flappy bird game."""

from __future__ import annotations

import random
from dataclasses import dataclass

from honkpet.canvas import Canvas, Color

MAX_PIPES = 2
PIPE_GAP = 40
PIPE_WIDTH = 10
SCREEN_W = 128
SCREEN_H = 128
BIRD_X = 10
BIRD_RADIUS = 3
START_Y = 32.0
JUMP_VELOCITY = -3.5
GRAVITY = 0.25
PIPE_SPEED = 2
PIPE_INTERVAL = 60
MAX_FUN = 20
END_MESSAGE = "ahh ggs ggs"


@dataclass
class Pipe:
    x: int = 0
    y: int = 0  # top of the gap
    active: bool = False


class FlappyBird:
    """Game state advanced one frame at a time by :meth:`step`."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.pipes = [Pipe() for _ in range(MAX_PIPES)]
        self.reset()

    def reset(self) -> None:
        self.bird_y = START_Y
        self.bird_vy = 0.0
        self.already_jumped = False
        self.pipe_timer = 0
        self.score = 0
        self.crashed = False
        self.finished = False
        for pipe in self.pipes:
            pipe.active = False

    def spawn_pipe(self) -> None:
        """Activate the first free pipe at the right edge; scores a point."""
        for pipe in self.pipes:
            if not pipe.active:
                self.score += 1
                pipe.x = SCREEN_W
                pipe.y = self.rng.randrange(0, SCREEN_H - PIPE_GAP)
                pipe.active = True
                break

    def update_pipes(self) -> None:
        for pipe in self.pipes:
            if pipe.active:
                pipe.x -= PIPE_SPEED
                if pipe.x + PIPE_WIDTH < 0:
                    pipe.active = False

    def check_collision(self) -> bool:
        if self.bird_y < 0 or self.bird_y > SCREEN_H:
            return True
        for pipe in self.pipes:
            if not pipe.active:
                continue
            if BIRD_X + BIRD_RADIUS >= pipe.x and BIRD_X - BIRD_RADIUS <= pipe.x + PIPE_WIDTH:
                if (self.bird_y - BIRD_RADIUS < pipe.y
                        or self.bird_y + BIRD_RADIUS > pipe.y + PIPE_GAP):
                    return True
        return False

    def step(self, jump_held: bool, quit_held: bool = False) -> bool:
        """Advance one frame; return whether the game goes on."""
        if self.finished:
            return False
        if jump_held and not self.already_jumped:
            self.bird_vy = JUMP_VELOCITY
            self.already_jumped = True
        elif not jump_held:
            self.already_jumped = False

        self.bird_vy += GRAVITY
        self.bird_y += self.bird_vy
        self.pipe_timer += 1
        if self.pipe_timer > PIPE_INTERVAL:
            self.pipe_timer = 0
            self.spawn_pipe()

        self.update_pipes()

        if self.check_collision():
            self.crashed = True
            self.finished = True
        elif quit_held:
            self.finished = True
        return not self.finished

    def draw(self, canvas: Canvas) -> None:
        canvas.clear()
        for pipe in self.pipes:
            if not pipe.active:
                continue
            canvas.draw_rect(pipe.x, -1, PIPE_WIDTH, pipe.y - 2, Color.WHITE)
            canvas.draw_rect(pipe.x - 2, pipe.y - 4, PIPE_WIDTH + 4, 4, Color.WHITE)
            bottom = pipe.y + PIPE_GAP
            canvas.draw_rect(pipe.x, bottom + 4, PIPE_WIDTH, SCREEN_H - bottom, Color.WHITE)
            canvas.draw_rect(pipe.x - 2, bottom + 3, PIPE_WIDTH + 4, -2, Color.WHITE)
        canvas.fill_circle(BIRD_X, self.bird_y, BIRD_RADIUS, Color.WHITE)
        canvas.draw_line(BIRD_X, self.bird_y, BIRD_X + 6, self.bird_y + self.bird_vy, Color.WHITE)

    def rewards(self) -> tuple[int, int]:
        """Fun and money earned by the final score."""
        fun = min(max(self.score, 0), MAX_FUN)
        return fun, self.score // 2