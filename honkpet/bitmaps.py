"""Sprite bitmaps: the pet, furniture, items and interface icons."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from honkpet.canvas import Canvas, Color


@dataclass(frozen=True)
class Bitmap:
    """A one-bit sprite stored row-major, most significant bit first."""

    index: int
    name: str
    display_name: str
    width: int
    height: int
    data: bytes = field(repr=False)

    @property
    def byte_width(self) -> int:
        return (self.width + 7) // 8

    def pixel(self, x: int, y: int) -> bool:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside {self.width}x{self.height}")
        offset = y * self.byte_width + (x >> 3)
        if offset >= len(self.data):
            return False
        return bool(self.data[offset] & (0x80 >> (x & 7)))

    def rows(self) -> Iterator[list[bool]]:
        """Yield each pixel row as a list of booleans."""
        for y in range(self.height):
            yield [self.pixel(x, y) for x in range(self.width)]

    def to_text(self, on: str = "#", off: str = ".") -> str:
        return "\n".join("".join(on if bit else off for bit in row) for row in self.rows())

    def draw(self, canvas: Canvas, x: float, y: float, color: Color) -> None:
        canvas.draw_bitmap(x, y, self.data, self.width, self.height, color)


_SPRITES: list[tuple[str, str, int, int, str]] = [
    ("pet_gooseStill", "goose", 12, 15, """
        07 c0 0a a0 08 30 09 c0 11 00 65 00 8b 00 93 00
        8d 00 81 00 7e 00 42 00 42 00 c6 00 e7
    """),
    ("pet_gooseStillBig", "goose", 16, 26, """
        00 fc 03 2a 04 03 04 1c 04 20 04 20 04 20 04 20
        7b 20 84 a0 88 a0 88 a0 87 20 80 20 80 20 7f c0
        20 40 20 40 20 40 20 40 70 e0 50 a0 50 a0 58 b0
        44 88 38 70
    """),
    ("pet_gooseStillBigMask", "goose", 18, 28, """
        00 ff 00 03 ff 80 07 ff c0 07 ff c0 07 ff c0 07
        ff 00 07 f8 00 07 f8 00 7f f8 00 ff f8 00 ff f8
        00 ff f8 00 ff f8 00 ff f8 00 ff f8 00 ff f8 00
        ff f8 00 7f f0 00 38 70 00 38 70 00 7c f8 00 7c
        f8 00 7c f8 00 7e fc 00 7f fe 00 7f fe 00 7f fe
        00 3e 7c 00
    """),
    ("ui_couch1", "couch", 28, 30, """
        0f ff ff 00 15 56 aa 80 28 89 11 40 30 00 00 c0
        20 00 00 40 20 00 00 40 20 00 00 40 20 00 00 40
        38 00 01 c0 44 00 02 20 92 00 04 90 a2 00 05 10
        82 00 04 10 83 ff fc 10 82 00 04 10 ba 00 05 d0
        c6 00 06 30 82 00 04 10 82 00 04 10 42 00 04 20
        42 00 04 20 41 00 08 20 40 ff f0 20 40 00 00 20
        40 00 00 20 7f ff ff e0 2a 00 05 40 36 00 06 c0
        2a 00 05 40 1c 00 03 80
    """),
    ("ui_table", "table", 18, 14, """
        3f ff 00 40 00 80 40 00 80 76 db 80 40 00 80 80
        00 40 db 6d c0 80 00 40 80 00 40 7f ff 80 28 05
        00 28 05 00 28 05 00 38 07 00
    """),
    ("ui_fireplace", "fireplace", 15, 15, """
        ff fe 80 02 80 02 ff fe 60 0c 3f f8 20 08 26 48
        2e e8 27 e8 27 e8 2f e8 7f fc c0 06 ff fe
    """),
    ("ui_bigTable", "big table", 46, 38, """
        7f ff ff ff ff f8 ff ff ff ff ff fc 7f ff ff ff
        ff f8 ff ff ff ff ff fc ff ff ff ff ff fc ff ff
        ff ff ff fc 7f ff ff ff ff f8 ff ff ff ff ff fc
        ff ff ff ff ff fc ff ff ff ff ff fc 7f ff ff ff
        ff f8 ff ff ff ff ff fc ff ff ff ff ff fc ff ff
        ff ff ff fc 7f ff ff ff ff f8 ff ff ff ff ff fc
        ff ff ff ff ff fc ff ff ff ff ff fc 7f ff ff ff
        ff f8 ff ff ff ff ff fc ff ff ff ff ff fc ff ff
        ff ff ff fc 7f ff ff ff ff f8 ff ff ff ff ff fc
        ff ff ff ff ff fc dd dd dd dd dd dc 80 00 00 00
        00 04 55 55 55 55 55 50 7f ff ff ff ff f8 7d 55
        55 55 55 f8 6e aa aa aa aa d8 74 00 00 00 00 e8
        6c 00 00 00 00 d8 74 00 00 00 00 e8 6c 00 00 00
        00 d8 74 00 00 00 00 e8 6c 00 00 00 00 d8 7c 00
        00 00 00 f8
    """),
    ("ui_window", "window", 29, 27, """
        0f ff ff 80 1f ff ff c0 18 07 00 c0 19 27 20 c0
        1a 47 48 c0 18 87 10 c0 19 07 20 c0 1a 07 00 c0
        18 07 00 c0 18 07 00 c0 18 07 00 c0 1f ff ff c0
        18 07 00 c0 1a 07 48 c0 18 87 00 c0 19 07 20 c0
        18 07 00 c0 18 07 00 c0 18 07 00 c0 18 07 00 c0
        18 07 00 c0 1f ff ff c0 0f ff ff 80 f0 00 00 78
        ff ff ff f8 aa aa aa a8 ff ff ff f8
    """),
    ("ui_menu", "menuIcon", 12, 9, """
        df e0 df e0 00 00 df e0 df e0 df e0 00 00 df e0
        df e0 00 00 00 00
    """),
    ("ui_pencil", "pencilIcon", 11, 11, """
        01 80 02 40 04 20 0e 20 17 40 23 80 41 00 82 00
        c4 00 e8 00 f0 00
    """),
    ("ui_settings", "settingsIcon", 11, 11, """
        0a 00 4e 40 3f 80 31 80 e0 e0 64 c0 e0 e0 31 80
        3f 80 4e 40 0a 00
    """),
    ("ui_shop", "shopIcon", 16, 11, """
        c0 00 e0 00 70 00 3f ff 24 93 1f fe 12 4c 0f f8
        09 30
    """),
    ("ui_back", "backIcon", 9, 8, """
        38 00 70 00 fe 00 71 00 38 80 00 80 01 00 3e 00
        00 00
    """),
    ("ui_inventory", "inventoryIcon", 16, 9, """
        3f fc 40 e2 81 51 fe 4f 20 44 20 44 2a 44 20 44
        3f fc
    """),
    ("ui_cursor", "cursorIcon", 9, 11, """
        00 00 40 00 60 00 70 00 78 00 7c 00 56 00 57 00
        7e 00 70 00 00 00
    """),
    ("ui_cursorMask", "cursorMask", 11, 13, """
        f8 00 fc 00 de 00 cf 00 c7 80 c3 c0 c1 e0 d4 e0
        d4 60 c0 e0 c7 e0 ff c0 fe 00
    """),
    ("item_apple", "apple", 11, 11, """
        03 80 04 00 35 80 4e 40 80 20 88 20 90 20 40 40
        40 40 31 80 0e 00
    """),
    ("pet_gooseSleep", "goose", 24, 39, """
        00 00 3f 00 00 01 00 00 01 00 00 0e 00 00 30 00
        00 20 00 00 3f 00 00 00 00 07 80 00 00 80 00 03
        00 00 04 00 00 07 80 00 00 00 03 f0 00 04 0c 00
        05 b4 00 04 04 00 04 34 00 04 2c 00 04 24 00 7b
        20 00 84 a0 00 88 a0 00 88 a0 00 87 20 00 80 20
        00 80 20 00 7f c0 00 20 40 00 20 40 00 20 40 00
        20 40 00 70 e0 00 50 a0 00 50 a0 00 58 b0 00 44
        88 00 38 70 00
    """),
    ("item_banana", "banana", 10, 11, """
        08 00 1c 00 38 00 50 00 90 00 90 00 88 00 86 00
        61 c0 10 40 0f 80
    """),
    ("item_rug", "rug", 15, 25, """
        80 02 aa aa aa aa ff fe 80 02 88 22 90 12 83 82
        8c 62 90 12 90 12 90 12 88 22 90 12 90 12 90 12
        8c 62 83 82 90 12 88 22 80 02 ff fe aa aa aa aa
        80 02
    """),
    ("item_controller", "controller", 15, 11, """
        30 18 7f fc 40 04 98 32 9a b2 80 02 8f e2 90 12
        a0 0a a0 0a 40 04
    """),
    ("pet_gooseWalk", "goose", 16, 26, """
        00 fc 03 16 04 03 04 1c 04 20 04 20 04 20 04 20
        7b 20 84 a0 88 a0 88 a0 87 20 80 20 80 20 7f c0
        12 00 12 00 21 00 21 00 40 80 40 80 40 80 40 f0
        c1 e0 e0 80
    """),
    ("pet_gooseWalkMask", "goose", 18, 27, """
        00 ff 00 03 ff 80 07 ff c0 07 ff c0 07 ff c0 07
        ff 00 07 f8 00 07 f8 00 7f f8 00 ff f8 00 ff f8
        00 ff f8 00 ff f8 00 ff f8 00 ff f8 00 ff f8 00
        ff f8 00 7f f0 00 3f c0 00 3f c0 00 79 e0 00 79
        e0 00 70 e0 00 70 fc 00 f1 fc 00 f9 fc 00 f9 f8
        00
    """),
    ("pet_gooseWalk2", "goose", 17, 25, """
        00 7e 00 01 8b 00 02 01 80 02 0e 00 02 10 00 02
        10 00 02 10 00 02 10 00 3d 90 00 42 50 00 44 50
        00 44 50 00 43 90 00 40 10 00 3f e0 00 09 80 00
        0a 00 00 0c 00 00 04 00 00 0c 00 00 14 00 00 77
        80 00 94 40 00 94 20 00 f7 e0 00
    """),
    ("pet_gooseWalk2Mask", "goose", 19, 26, """
        00 7f 80 01 ff c0 03 ff e0 03 ff e0 03 ff e0 03
        ff 80 03 fc 00 03 fc 00 3f fc 00 7f fc 00 7f fc
        00 7f fc 00 7f fc 00 7f fc 00 7f fc 00 7f fc 00
        3f f8 00 0f e0 00 0f 80 00 0f 00 00 1f 00 00 7f
        e0 00 ff f0 00 ff f8 00 ff f8 00 ff f8 00
    """),
    ("item_gravestone", "gravestone", 32, 33, """
        00 03 c0 00 01 fc 3f 80 06 00 00 60 08 00 00 10
        10 00 00 08 10 00 00 08 20 00 00 04 23 83 83 84
        22 41 02 44 22 41 02 44 23 81 03 84 22 41 02 04
        22 43 82 04 20 00 00 04 20 00 00 04 20 00 00 04
        20 00 00 04 23 cf 3f c4 20 00 00 04 20 00 00 04
        23 f9 fe c4 20 00 00 04 20 00 00 04 23 f1 f7 c4
        20 00 00 04 20 00 00 04 20 00 00 04 20 00 00 04
        20 06 e0 04 20 00 00 04 20 00 00 04 20 00 00 04
        ff ff ff ff
    """),
    ("pet_gooseSit", "goose", 19, 26, """
        00 1f 80 00 65 40 00 80 60 00 83 80 00 84 00 00
        84 00 00 84 00 00 84 00 0f 64 00 10 94 00 11 14
        00 11 14 00 10 e4 00 10 04 00 10 04 00 0f f8 00
        04 08 00 04 08 00 08 04 00 08 04 00 1c 0e 00 14
        0a 00 14 0a 00 74 0b 80 c4 08 c0 78 07 80
    """),
    ("pet_gooseSitMask", "goose", 21, 28, """
        00 1f e0 00 7f f0 00 ff f8 00 ff f8 00 ff f8 00
        ff e0 00 ff 00 00 ff 00 0f ff 00 1f ff 00 1f ff
        00 1f ff 00 1f ff 00 1f ff 00 1f ff 00 1f ff 00
        1f ff 00 0f fe 00 0f 0f 00 0f 0f 00 1f 0f 80 1f
        0f 80 3f 0f 80 7f 0f e0 ff 0f f0 ff 0f f0 ff 0f
        f0 7e 07 e0
    """),
    ("pet_gooseMarshmellow", "goose", 17, 26, """
        00 fc 00 03 2a 00 04 03 00 04 1c 00 04 20 00 04
        20 00 04 20 00 04 20 00 7b 20 00 84 a1 80 89 ff
        80 88 a1 80 87 20 00 80 20 00 80 20 00 7f c0 00
        20 40 00 20 40 00 20 40 00 20 40 00 70 e0 00 50
        a0 00 50 a0 00 5c b8 00 46 8c 00 3c 78 00
    """),
    ("pet_gooseMarshmellowMask", "goose", 19, 28, """
        00 ff 00 03 ff 80 07 ff c0 07 ff c0 07 ff c0 07
        ff 00 07 f8 00 07 f8 00 7f f8 00 ff f9 e0 ff ff
        e0 ff ff e0 ff ff e0 ff f9 e0 ff f8 00 ff f8 00
        ff f8 00 7f f0 00 38 70 00 38 70 00 7c f8 00 7c
        f8 00 7c f8 00 7f fe 00 7f ff 00 7f ff 00 7f ff
        00 3f 7e 00
    """),
    ("item_tree", "tree", 22, 26, """
        00 78 00 03 87 00 0c 20 c0 10 18 20 14 00 a0 22
        83 10 40 70 08 40 00 08 80 00 04 98 00 24 86 00
        c4 40 28 08 38 90 70 06 01 90 01 fe 38 00 48 10
        00 48 00 00 58 00 00 48 00 00 48 00 00 48 00 00
        a4 00 00 84 00 00 94 00 00 84 00 01 22 00
    """),
    ("item_bush", "bush", 13, 11, """
        33 10 4c e8 80 08 90 90 48 10 41 48 94 08 88 10
        80 48 49 10 36 e0
    """),
    ("item_fence", "fence", 16, 7, """
        66 66 ff ff ff ff 66 66 66 66 66 66 66 66
    """),
    ("item_sun", "sun", 26, 26, """
        01 12 20 00 01 12 20 00 00 92 40 00 10 80 42 00
        08 00 04 00 04 3f 08 00 00 ff c0 00 c1 ff e0 c0
        33 ff f3 00 03 ff f0 00 07 ff f8 00 e7 ff f9 c0
        07 ff f8 00 07 ff f8 00 e7 ff f9 c0 07 ff f8 00
        03 ff f0 00 33 ff f3 00 c1 ff e0 c0 00 ff c0 00
        04 3f 08 00 08 00 04 00 10 80 42 00 00 92 40 00
        01 12 20 00 01 12 20 00
    """),
    ("item_grass", "grass", 9, 7, """
        44 80 28 80 49 00 51 00 92 00 4a 00 49 00
    """),
    ("item_grass2", "grass 2", 10, 9, """
        04 00 08 00 88 40 44 80 25 00 29 00 48 80 44 80
        29 00
    """),
]

BITMAPS: tuple[Bitmap, ...] = tuple(
    Bitmap(index, name, display_name, width, height, bytes.fromhex(hex_data))
    for index, (name, display_name, width, height, hex_data) in enumerate(_SPRITES)
)


def bitmap(index: int) -> Bitmap:
    """Return the sprite at a table index."""
    if not 0 <= index < len(BITMAPS):
        raise IndexError(f"no bitmap with index {index}")
    return BITMAPS[index]


def find_bitmaps(display_name: str) -> list[Bitmap]:
    """Return every sprite shown under the given name, in table order."""
    return [entry for entry in BITMAPS if entry.display_name == display_name]