"""A tilt-driven sandbox of bouncing particles."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from honkpet.canvas import Canvas, Color

SCREEN_WIDTH = 128
SCREEN_HEIGHT = 128
NUM_PARTICLES = 125
PARTICLE_RADIUS = 3
CELL_SIZE = 8
GRID_COLS = SCREEN_WIDTH // CELL_SIZE
GRID_ROWS = SCREEN_HEIGHT // CELL_SIZE
TILT_GAIN = 0.05
MAX_SPEED = 4.0
COLLISION_DAMPING = 0.8
WALL_BOUNCE = -0.6
JITTER = (-5, -3, -1, 0, 1, 3, 5, -4, 2, -2, 4, -1, 1, 0, -3, 3)


@dataclass
class Particle:
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _cell(x: float, y: float) -> tuple[int, int]:
    gx = int(_clamp(int(x) // CELL_SIZE, 0, GRID_COLS - 1))
    gy = int(_clamp(int(y) // CELL_SIZE, 0, GRID_ROWS - 1))
    return gx, gy


class ParticleSim:
    """Particles that fall with the device's tilt and push each other apart."""

    def __init__(self, rng: random.Random | None = None, count: int = NUM_PARTICLES) -> None:
        if count < 0:
            raise ValueError(f"particle count cannot be negative, got {count}")
        self.rng = rng or random.Random()
        self.count = count
        self.particles: list[Particle] = []
        self.grid: list[list[list[int]]] = []
        self.zero_g = False
        self.previous_left = False
        self.reset()

    def reset(self) -> None:
        """Scatter the particles over the screen at rest."""
        self.particles = [
            Particle(
                float(self.rng.randrange(SCREEN_WIDTH)),
                float(self.rng.randrange(SCREEN_HEIGHT)),
            )
            for _ in range(self.count)
        ]

    def build_grid(self) -> list[list[list[int]]]:
        """Bucket particle indexes by grid cell, indexed grid[column][row]."""
        grid: list[list[list[int]]] = [[[] for _ in range(GRID_ROWS)] for _ in range(GRID_COLS)]
        for index, particle in enumerate(self.particles):
            gx, gy = _cell(particle.x, particle.y)
            grid[gx][gy].append(index)
        self.grid = grid
        return grid

    def _resolve_collisions(self, i: int) -> None:
        me = self.particles[i]
        gx, gy = _cell(me.x, me.y)
        min_dist = 2 * PARTICLE_RADIUS
        for nx in range(gx - 1, gx + 2):
            for ny in range(gy - 1, gy + 2):
                if not (0 <= nx < GRID_COLS and 0 <= ny < GRID_ROWS):
                    continue
                for j in self.grid[nx][ny]:
                    if i == j:
                        continue
                    other = self.particles[j]
                    dx = other.x - me.x
                    dy = other.y - me.y
                    dist_sq = dx * dx + dy * dy
                    if dist_sq >= min_dist * min_dist:
                        continue
                    dist = math.sqrt(dist_sq)
                    overlap = 0.5 * (min_dist - dist)
                    if dist != 0:
                        dx /= dist
                        dy /= dist
                    else:
                        dx, dy = 1.0, 0.0
                    me.x -= dx * overlap
                    me.y -= dy * overlap
                    other.x += dx * overlap
                    other.y += dy * overlap
                    me.vx *= COLLISION_DAMPING
                    me.vy *= COLLISION_DAMPING

    @staticmethod
    def _keep_on_screen(particle: Particle) -> None:
        if particle.x < 0:
            particle.x = 0.0
            particle.vx *= WALL_BOUNCE
        if particle.x >= SCREEN_WIDTH:
            particle.x = float(SCREEN_WIDTH - 1)
            particle.vx *= WALL_BOUNCE
        if particle.y < 0:
            particle.y = 0.0
            particle.vy *= WALL_BOUNCE
        if particle.y >= SCREEN_HEIGHT:
            particle.y = float(SCREEN_HEIGHT - 1)
            particle.vy *= WALL_BOUNCE

    def update(self, angle_x: float, angle_y: float) -> None:
        """Advance every particle by one frame under the given tilt."""
        ax = angle_x * TILT_GAIN
        ay = angle_y * TILT_GAIN
        self.build_grid()
        for i, particle in enumerate(self.particles):
            index = i % len(JITTER)
            jitter_x = JITTER[index] / 100.0
            jitter_y = JITTER[(index + 5) % len(JITTER)] / 100.0
            particle.vx = _clamp(particle.vx + ax + jitter_x, -MAX_SPEED, MAX_SPEED)
            particle.vy = _clamp(particle.vy + ay + jitter_y, -MAX_SPEED, MAX_SPEED)
            particle.x += particle.vx
            particle.y += particle.vy
            self._resolve_collisions(i)
            self._keep_on_screen(particle)

    def step(self, left_held: bool, angle_x: float, angle_y: float) -> bool:
        """Run one frame; releasing the left button toggles zero gravity.

        Returns whether zero gravity is on afterwards.
        """
        if self.zero_g:
            angle_x = angle_y = 0.0
        self.update(angle_x, angle_y)
        if not left_held and self.previous_left:
            self.zero_g = not self.zero_g
        self.previous_left = left_held
        return self.zero_g

    def draw(self, canvas: Canvas) -> None:
        canvas.clear()
        for particle in self.particles:
            x, y = int(particle.x), int(particle.y)
            canvas.fill_circle(x, y, PARTICLE_RADIUS + 1, Color.BLACK)
            canvas.draw_circle(x, y, PARTICLE_RADIUS, Color.WHITE)