"""A monochrome framebuffer with the drawing primitives the games use."""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum


class Color(IntEnum):
    """Pixel colours of a one-bit display."""

    BLACK = 0
    WHITE = 1
    INVERSE = 2


class Canvas:
    """A width x height grid of one-bit pixels; drawing outside it is clipped."""

    def __init__(self, width: int = 128, height: int = 128) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = bytearray(width * height)

    def clear(self) -> None:
        """Turn every pixel off."""
        self._pixels = bytearray(self.width * self.height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def draw_pixel(self, x: float, y: float, color: Color) -> None:
        x, y = int(x), int(y)
        if not self._inside(x, y):
            return
        color = Color(color)
        i = y * self.width + x
        if color is Color.INVERSE:
            self._pixels[i] ^= 1
        else:
            self._pixels[i] = int(color)

    def get_pixel(self, x: int, y: int) -> Color:
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return Color(self._pixels[y * self.width + x])

    def draw_line(self, x0: float, y0: float, x1: float, y1: float, color: Color) -> None:
        x0, y0, x1, y1 = int(x0), int(y0), int(x1), int(y1)
        steep = abs(y1 - y0) > abs(x1 - x0)
        if steep:
            x0, y0, x1, y1 = y0, x0, y1, x1
        if x0 > x1:
            x0, x1, y0, y1 = x1, x0, y1, y0
        dx = x1 - x0
        dy = abs(y1 - y0)
        err = dx // 2
        ystep = 1 if y0 < y1 else -1
        y = y0
        for x in range(x0, x1 + 1):
            if steep:
                self.draw_pixel(y, x, color)
            else:
                self.draw_pixel(x, y, color)
            err -= dy
            if err < 0:
                y += ystep
                err += dx

    def draw_hline(self, x: float, y: float, length: float, color: Color) -> None:
        x, length = int(x), int(length)
        self.draw_line(x, y, x + length - 1, y, color)

    def draw_vline(self, x: float, y: float, length: float, color: Color) -> None:
        y, length = int(y), int(length)
        self.draw_line(x, y, x, y + length - 1, color)

    def draw_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        x, y, width, height = int(x), int(y), int(width), int(height)
        self.draw_hline(x, y, width, color)
        self.draw_hline(x, y + height - 1, width, color)
        self.draw_vline(x, y, height, color)
        self.draw_vline(x + width - 1, y, height, color)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        x, y, width, height = int(x), int(y), int(width), int(height)
        for column in range(x, x + width):
            self.draw_vline(column, y, height, color)

    def _circle_points(self, radius: int) -> Iterator[tuple[int, int]]:
        """Yield the (x, y) octant steps of the midpoint circle algorithm."""
        f = 1 - radius
        ddf_x = 1
        ddf_y = -2 * radius
        x, y = 0, radius
        while x < y:
            if f >= 0:
                y -= 1
                ddf_y += 2
                f += ddf_y
            x += 1
            ddf_x += 2
            f += ddf_x
            yield x, y

    def _circle_corners(self, cx: int, cy: int, radius: int, corners: int, color: Color) -> None:
        for x, y in self._circle_points(radius):
            if corners & 4:
                self.draw_pixel(cx + x, cy + y, color)
                self.draw_pixel(cx + y, cy + x, color)
            if corners & 2:
                self.draw_pixel(cx + x, cy - y, color)
                self.draw_pixel(cx + y, cy - x, color)
            if corners & 8:
                self.draw_pixel(cx - y, cy + x, color)
                self.draw_pixel(cx - x, cy + y, color)
            if corners & 1:
                self.draw_pixel(cx - y, cy - x, color)
                self.draw_pixel(cx - x, cy - y, color)

    def draw_round_rect(
        self, x: float, y: float, width: float, height: float, radius: float, color: Color
    ) -> None:
        x, y, width, height, radius = int(x), int(y), int(width), int(height), int(radius)
        radius = min(radius, int(min(width, height) / 2))
        self.draw_hline(x + radius, y, width - 2 * radius, color)
        self.draw_hline(x + radius, y + height - 1, width - 2 * radius, color)
        self.draw_vline(x, y + radius, height - 2 * radius, color)
        self.draw_vline(x + width - 1, y + radius, height - 2 * radius, color)
        self._circle_corners(x + radius, y + radius, radius, 1, color)
        self._circle_corners(x + width - radius - 1, y + radius, radius, 2, color)
        self._circle_corners(x + width - radius - 1, y + height - radius - 1, radius, 4, color)
        self._circle_corners(x + radius, y + height - radius - 1, radius, 8, color)

    def draw_circle(self, cx: float, cy: float, radius: float, color: Color) -> None:
        cx, cy, radius = int(cx), int(cy), int(radius)
        self.draw_pixel(cx, cy + radius, color)
        self.draw_pixel(cx, cy - radius, color)
        self.draw_pixel(cx + radius, cy, color)
        self.draw_pixel(cx - radius, cy, color)
        self._circle_corners(cx, cy, radius, 0xF, color)

    def fill_circle(self, cx: float, cy: float, radius: float, color: Color) -> None:
        cx, cy, radius = int(cx), int(cy), int(radius)
        self.draw_vline(cx, cy - radius, 2 * radius + 1, color)
        px, py = 0, radius
        for x, y in self._circle_points(radius):
            if x < y + 1:
                self.draw_vline(cx + x, cy - y, 2 * y + 1, color)
                self.draw_vline(cx - x, cy - y, 2 * y + 1, color)
            if y != py:
                self.draw_vline(cx + py, cy - px, 2 * px + 1, color)
                self.draw_vline(cx - py, cy - px, 2 * px + 1, color)
                py = y
            px = x

    def draw_bitmap(
        self, x: float, y: float, data: bytes, width: int, height: int, color: Color
    ) -> None:
        """Draw the set bits of a row-major, MSB-first bitmap; clear bits stay untouched."""
        x, y = int(x), int(y)
        byte_width = (width + 7) // 8
        for row in range(height):
            start = row * byte_width
            line = data[start:start + byte_width]
            for column in range(width):
                byte_index = column >> 3
                byte = line[byte_index] if byte_index < len(line) else 0
                if byte & (0x80 >> (column & 7)):
                    self.draw_pixel(x + column, y + row, color)

    def lit_count(self) -> int:
        """Number of pixels that are on."""
        return sum(self._pixels)

    def to_text(self, on: str = "#", off: str = ".") -> str:
        """Render the canvas as lines of text, one per pixel row."""
        return "\n".join(
            "".join(on if self._pixels[row * self.width + x] else off for x in range(self.width))
            for row in range(self.height)
        )