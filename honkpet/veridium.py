"""A top-down arena shooter: aim by tilting, walk, shoot and reload."""

from __future__ import annotations

import math
import random
import time
from collections.abc import Callable
from dataclasses import dataclass

from honkpet.canvas import Canvas, Color

SCREEN_MAX = 127
MAX_BULLETS = 50
MAX_ENEMIES = 5
MAX_AMMO = 50
PLAYER_SPEED = 4
PLAYER_START = (10, 10)
ENEMY_SPEED = 0.5
ENEMY_HEALTH = 3
BULLET_SPEED = 8.5
BULLET_HIT_RADIUS = 6
ENEMY_TOUCH_RADIUS = 8
RELOAD_MS = 2000
GUN_LENGTH = 8
BARREL_LENGTH = 4
HUD_OFFSET = -30
AIM_RESET = (64.0, 64.0)
QUIT_BOX = (110, 0, 17, 17)


@dataclass(frozen=True)
class Wall:
    xa: int
    ya: int
    xb: int
    yb: int

    def contains(self, x: int, y: int) -> bool:
        """Whether the point lies in the wall's rectangle, edges included."""
        left, right = sorted((self.xa, self.xb))
        top, bottom = sorted((self.ya, self.yb))
        return left <= x <= right and top <= y <= bottom


@dataclass
class Bullet:
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    active: bool = False


@dataclass
class Enemy:
    x: int = 0
    y: int = 0
    health: int = 0
    active: bool = False


WALLS: tuple[Wall, ...] = (
    Wall(20, 20, 30, 30),
    Wall(60, 60, 80, 70),
    Wall(10, 60, 20, 90),
    Wall(55, 100, 75, 110),
    Wall(10, 66, 14, 88),
)


def angle_between(x1: float, y1: float, x2: float, y2: float) -> float:
    """Angle from the first point to the second, with screen y pointing down."""
    dx = int(x2) - int(x1)
    dy = int(y1) - int(y2)
    return math.atan2(dy, dx)


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Veridium:
    """One round of the shooter, advanced a frame at a time by :meth:`step`.

    ``clock`` returns the current time in milliseconds and drives reloading.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.clock = clock or _monotonic_ms
        self.walls = WALLS
        self.player_x, self.player_y = PLAYER_START
        self.gun_xa = self.gun_ya = 0
        self.gun_xb = self.gun_yb = 0
        self.ammo = MAX_AMMO
        self.reloading = False
        self.reload_start = 0.0
        self.aim_x = 0.0
        self.aim_y = 0.0
        self.cursor = (0, 0)
        self.angle = 0.0
        self.bullets = [Bullet() for _ in range(MAX_BULLETS)]
        self.enemies = [Enemy() for _ in range(MAX_ENEMIES)]
        self.finished = False
        self.game_over = False
        self.spawn_enemies()

    def is_inside_wall(self, x: int, y: int) -> bool:
        return any(wall.contains(x, y) for wall in self.walls)

    def spawn_bullet(self, start_x: float, start_y: float, angle: float) -> bool:
        """Fire the first idle bullet; return False when all are in flight."""
        for bullet in self.bullets:
            if not bullet.active:
                bullet.x = float(start_x)
                bullet.y = float(start_y)
                bullet.vx = BULLET_SPEED * math.cos(angle)
                bullet.vy = -BULLET_SPEED * math.sin(angle)
                bullet.active = True
                return True
        return False

    def update_bullets(self) -> None:
        """Resolve hits on enemies, then move bullets, stopping them at walls and edges.

        A bullet keeps its last position once stopped and still counts for hits.
        """
        for bullet in self.bullets:
            for enemy in self.enemies:
                if not enemy.active:
                    continue
                dx = int(bullet.x - enemy.x)
                dy = int(bullet.y - enemy.y)
                if dx * dx + dy * dy < BULLET_HIT_RADIUS * BULLET_HIT_RADIUS:
                    enemy.health -= 1
                    bullet.active = False
                    if enemy.health <= 0:
                        enemy.active = False
                    break

            if not bullet.active:
                continue
            next_x = bullet.x + bullet.vx
            next_y = bullet.y + bullet.vy
            if self.is_inside_wall(int(next_x), int(next_y)):
                bullet.active = False
                continue
            bullet.x, bullet.y = next_x, next_y
            if not (0 <= bullet.x <= SCREEN_MAX and 0 <= bullet.y <= SCREEN_MAX):
                bullet.active = False

    def spawn_enemies(self) -> None:
        """Place every enemy afresh, rerolling any spot that falls inside a wall."""
        for enemy in self.enemies:
            enemy.x = self.rng.randrange(10, 110)
            enemy.y = 100
            enemy.health = ENEMY_HEALTH
            enemy.active = True
            while self.is_inside_wall(enemy.x, enemy.y):
                enemy.x = self.rng.randrange(10, 110)
                enemy.y = self.rng.randrange(10, 110)

    def update_enemies(self) -> None:
        """Walk every live enemy toward the player unless a wall is in the way."""
        for enemy in self.enemies:
            if not enemy.active:
                continue
            angle = angle_between(enemy.x, enemy.y, self.player_x, self.player_y)
            next_x = int(enemy.x + ENEMY_SPEED * math.cos(angle))
            next_y = int(enemy.y - ENEMY_SPEED * math.sin(angle))
            if not self.is_inside_wall(next_x, next_y):
                enemy.x, enemy.y = next_x, next_y

    def start_reload(self) -> None:
        if not self.reloading and self.ammo < MAX_AMMO:
            self.reloading = True
            self.reload_start = self.clock()

    def update_reload(self) -> None:
        if self.reloading and self.clock() - self.reload_start >= RELOAD_MS:
            self.ammo = MAX_AMMO
            self.reloading = False

    def _cursor_in_quit_box(self) -> bool:
        x, y, width, height = QUIT_BOX
        cx, cy = self.cursor
        return x <= cx < x + width and y <= cy < y + height

    def _enemy_touching_player(self) -> bool:
        for enemy in self.enemies:
            if not enemy.active:
                continue
            dx = self.player_x - enemy.x
            dy = self.player_y - enemy.y
            if dx * dx + dy * dy < ENEMY_TOUCH_RADIUS * ENEMY_TOUCH_RADIUS:
                return True
        return False

    def step(
        self,
        aim_x: float,
        aim_y: float,
        left_held: bool = False,
        middle_held: bool = False,
        right_held: bool = False,
    ) -> bool:
        """Advance one frame; return whether the round goes on.

        Right walks toward the aim point (and, with the aim on the quit box,
        leaves), middle fires, left recentres the aim.
        """
        if self.finished:
            return False
        self.aim_x, self.aim_y = float(aim_x), float(aim_y)
        self.cursor = (int(self.aim_x), int(self.aim_y))
        angle = angle_between(self.player_x, self.player_y, self.aim_x, self.aim_y)
        self.angle = angle
        cos_a, sin_a = math.cos(angle), math.sin(angle)

        if right_held:
            next_x = int(self.player_x + PLAYER_SPEED * cos_a)
            next_y = int(self.player_y - PLAYER_SPEED * sin_a)
            if not self.is_inside_wall(next_x, next_y):
                self.player_x, self.player_y = next_x, next_y
                self.aim_x = self.player_x + PLAYER_SPEED * 2 * cos_a
                self.aim_y = self.player_y - PLAYER_SPEED * 2 * sin_a

        if left_held:
            self.aim_x, self.aim_y = AIM_RESET

        if middle_held and self.ammo > 0:
            self.spawn_bullet(self.gun_xb, self.gun_yb, angle)
            self.ammo -= 1

        if self.ammo < 1:
            self.start_reload()
        self.update_reload()

        self.gun_xa = int(self.player_x + GUN_LENGTH * cos_a)
        self.gun_ya = int(self.player_y - GUN_LENGTH * sin_a)
        self.gun_xb = int(self.gun_xa + BARREL_LENGTH * cos_a)
        self.gun_yb = int(self.gun_ya - BARREL_LENGTH * sin_a)

        self.update_bullets()
        self.update_enemies()

        if self._cursor_in_quit_box() and right_held:
            self.finished = True
        if self._enemy_touching_player():
            self.game_over = True
            self.finished = True
        return not self.finished

    @property
    def hud_text(self) -> str:
        """The ammo readout: the count, or "R" while reloading."""
        return "R" if self.reloading else str(self.ammo)

    @property
    def hud_position(self) -> tuple[int, int]:
        """Where the ammo readout sits, behind the gun."""
        x = self.gun_xb + HUD_OFFSET * math.cos(self.angle)
        y = self.gun_yb - HUD_OFFSET * math.sin(self.angle)
        return int(x), int(y)

    def draw(self, canvas: Canvas) -> None:
        canvas.clear()
        for wall in self.walls:
            width = abs(wall.xb - wall.xa)
            height = abs(wall.yb - wall.ya)
            canvas.draw_round_rect(wall.xa, wall.ya, width, height, 2, Color.WHITE)
        canvas.draw_circle(self.player_x, self.player_y, 4, Color.WHITE)
        canvas.draw_line(self.gun_xa, self.gun_ya, self.gun_xb, self.gun_yb, Color.WHITE)
        for enemy in self.enemies:
            if enemy.active:
                canvas.draw_circle(enemy.x, enemy.y, 4, Color.WHITE)
        canvas.draw_hline(int(self.aim_x - 2), self.aim_y, 5, Color.WHITE)
        canvas.draw_vline(self.aim_x, int(self.aim_y - 2), 5, Color.WHITE)
        for bullet in self.bullets:
            if bullet.active:
                canvas.draw_pixel(int(bullet.x), int(bullet.y), Color.WHITE)
        x, y, width, height = QUIT_BOX
        canvas.fill_rect(x, y, width, height, Color.WHITE)
        canvas.draw_line(x + 1, y + 1, x + width - 1, y + height - 1, Color.BLACK)
        canvas.draw_line(x + width - 1, y + 1, x + 1, y + height - 1, Color.BLACK)