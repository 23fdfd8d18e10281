"""Cutting SCREEN 5 images into X68000 PCG and FM TOWNS sprite patterns."""

from __future__ import annotations

from typing import NamedTuple

from retrovram.bitplanes import SC5_LINES, SC5_ROW_BYTES

X68K_PARTS = 256
X68K_MAX_SPRITES = 128
TOWNS_PARTS = 256
TOWNS_MAX_SPRITES = 256


class SpriteEntry(NamedTuple):
    x: int
    y: int
    code: int
    attribute: int


class _ByteGrid:
    """Image bytes addressed by (byte column, row); rows past the bottom read as zero."""

    def __init__(self, rows: list[bytes]) -> None:
        self.rows = rows

    def __call__(self, x: int, y: int) -> int:
        return self.rows[y][x] if y < len(self.rows) else 0

    @classmethod
    def from_data(cls, data: bytes) -> "_ByteGrid":
        size = SC5_ROW_BYTES * SC5_LINES
        raw = bytes(data[:size]).ljust(size, b"\0")
        return cls([raw[y * SC5_ROW_BYTES:(y + 1) * SC5_ROW_BYTES] for y in range(SC5_LINES)])


def _swap_nibbles(byte: int) -> int:
    return ((byte >> 4) | (byte << 4)) & 0xFF


def x68k_pcg(data: bytes) -> list[int]:
    """Return 16-bit PCG words: 256 parts of 16x16 pixels built from four 8x8 tiles."""
    cell = _ByteGrid.from_data(data)
    words = []
    xx = yy = 0
    for _part in range(X68K_PARTS):
        for _column in range(2):
            for _row in range(2):
                for y in range(8):
                    for x in range(0, 4, 2):
                        if x + xx >= SC5_ROW_BYTES:
                            xx = 0
                            yy += 16
                        words.append(cell(x + xx, y + yy) * 256 + cell(x + xx + 1, y + yy))
                yy += 8
            yy -= 16
            xx += 4
    return words


def towns_sprites(data: bytes) -> list[int]:
    """Return 16-bit sprite words: 256 sprites of 16x16 pixels in TOWNS pixel order."""
    grid = _ByteGrid.from_data(data)
    cell = _ByteGrid(
        [bytes(_swap_nibbles(row[i ^ 1]) for i in range(len(row))) for row in grid.rows]
    )
    words = []
    xx = yy = 0
    for _sprite in range(TOWNS_PARTS):
        for y in range(16):
            for x in range(0, 8, 2):
                if x + xx >= SC5_ROW_BYTES:
                    xx = 0
                    yy += 16
                words.append(cell(x + xx, y + yy) * 256 + cell(x + xx + 1, y + yy))
        xx += 8
    return words


def x68k_sprite_entries(count: int = X68K_MAX_SPRITES) -> list[SpriteEntry]:
    """Return sprite table entries laying ``count`` sprites out 16 to a row."""
    return [
        SpriteEntry((i % 16) * 16 + 16, (i // 16) * 16 + 16, i, 0x0011)
        for i in range(count)
    ]


def towns_sprite_entries(count: int = TOWNS_MAX_SPRITES) -> list[SpriteEntry]:
    """Return sprite table entries laying ``count`` sprites out 16 to a row."""
    return [
        SpriteEntry((i % 16) * 16, (i // 16) * 16 + 2, i + 128, 256 | 0x8000)
        for i in range(count)
    ]