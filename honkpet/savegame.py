"""The pet's save record and a file-backed stand-in for the save EEPROM."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path

INVENTORY_SLOTS = 8
PLACED_SLOTS = 30
FOOD_SLOTS = 8
EEPROM_SIZE = 4096
ERASED = 0xFF


def _zeros(count: int) -> list[int]:
    return [0] * count


# Field name and length in bytes (1 for a scalar), in on-chip order.
_LAYOUT: tuple[tuple[str, int], ...] = (
    ("hunger", 1),
    ("sleep", 1),
    ("fun", 1),
    ("money", 1),
    ("pong_xp", 1),
    ("pong_lvl", 1),
    ("invent", INVENTORY_SLOTS),
    ("invent_items", 1),
    ("placed", PLACED_SLOTS),
    ("placed_items", 1),
    ("placed_x", PLACED_SLOTS),
    ("placed_y", PLACED_SLOTS),
    ("food_inv", FOOD_SLOTS),
    ("food_inv_items", 1),
    ("save_version", 1),
)


@dataclass
class SaveGame:
    """Everything the pet remembers between power cycles; every value is one byte."""

    hunger: int = 0
    sleep: int = 0
    fun: int = 0
    money: int = 0
    pong_xp: int = 0
    pong_lvl: int = 0
    invent: list[int] = field(default_factory=lambda: _zeros(INVENTORY_SLOTS))
    invent_items: int = 0
    placed: list[int] = field(default_factory=lambda: _zeros(PLACED_SLOTS))
    placed_items: int = 0
    placed_x: list[int] = field(default_factory=lambda: _zeros(PLACED_SLOTS))
    placed_y: list[int] = field(default_factory=lambda: _zeros(PLACED_SLOTS))
    food_inv: list[int] = field(default_factory=lambda: _zeros(FOOD_SLOTS))
    food_inv_items: int = 0
    save_version: int = 0

    SIZE = sum(length for _, length in _LAYOUT)

    def __post_init__(self) -> None:
        for name, length in _LAYOUT:
            value = getattr(self, name)
            values = [value] if length == 1 else list(value)
            if length > 1 and len(values) != length:
                raise ValueError(f"{name} needs {length} entries, got {len(values)}")
            for item in values:
                if not isinstance(item, int) or not 0 <= item <= 0xFF:
                    raise ValueError(f"{name} holds {item!r}, which is not a byte")
            if length > 1:
                setattr(self, name, values)

    def to_bytes(self) -> bytes:
        out = bytearray()
        for name, length in _LAYOUT:
            value = getattr(self, name)
            if length == 1:
                out.append(value)
            else:
                out.extend(value)
        return bytes(out)

    @classmethod
    def from_bytes(cls, data: bytes) -> SaveGame:
        if len(data) != cls.SIZE:
            raise ValueError(f"a save record is {cls.SIZE} bytes, got {len(data)}")
        values: dict[str, object] = {}
        offset = 0
        for name, length in _LAYOUT:
            chunk = data[offset:offset + length]
            values[name] = chunk[0] if length == 1 else list(chunk)
            offset += length
        return cls(**values)


assert [f.name for f in fields(SaveGame)] == [name for name, _ in _LAYOUT]


class EepromStore:
    """A byte-addressed memory kept in a file; unwritten bytes read as 0xFF.

    Addresses wrap around the memory size, as on the chip.
    """

    def __init__(self, path: str | os.PathLike[str], size: int = EEPROM_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"memory size must be positive, got {size}")
        self.path = Path(path)
        self.size = size

    def _load(self) -> bytearray:
        try:
            memory = bytearray(self.path.read_bytes()[: self.size])
        except FileNotFoundError:
            memory = bytearray()
        memory.extend([ERASED] * (self.size - len(memory)))
        return memory

    def _check(self, addr: int) -> None:
        if not 0 <= addr <= 0xFFFF:
            raise ValueError(f"address {addr} does not fit in 16 bits")

    def write_save(self, addr: int, save: SaveGame) -> None:
        self._check(addr)
        memory = self._load()
        for i, byte in enumerate(save.to_bytes()):
            memory[((addr + i) & 0xFFFF) % self.size] = byte
        self.path.write_bytes(bytes(memory))

    def read_save(self, addr: int) -> SaveGame:
        self._check(addr)
        memory = self._load()
        data = bytes(memory[((addr + i) & 0xFFFF) % self.size] for i in range(SaveGame.SIZE))
        return SaveGame.from_bytes(data)