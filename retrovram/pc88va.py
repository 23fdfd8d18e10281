"""SCREEN 5 image rendering for the 640x200 bit-planed PC-88VA display."""

from __future__ import annotations

from typing import Iterator, Sequence

from retrovram.bitplanes import (
    DIGITAL_TABLE,
    IDENTITY_TABLE,
    MSX_PALETTE,
    PlaneBuffer,
    double_width,
    pack_planes,
)

ROW_BYTES = 80
LINES = 200
PLANE_SIZE = ROW_BYTES * LINES
UNITS_PER_LINE = 32
UNIT_SIZE = 4

PALETTE_BASE_PORT = 0x300


def _units(data: bytes) -> Iterator[bytes]:
    # Pixels are read two bytes at a time; conversion stops once a read comes up empty.
    limit = min(len(data), LINES * UNITS_PER_LINE * UNIT_SIZE)
    for start in range(0, limit, UNIT_SIZE):
        unit = data[start:start + UNIT_SIZE]
        if len(unit) <= 2:
            return
        yield unit.ljust(UNIT_SIZE, b"\0")


def _offsets() -> Iterator[int]:
    for line in range(LINES):
        for column in range(UNITS_PER_LINE):
            yield line * ROW_BYTES + column * 2


def render(data: bytes, digital: bool = False) -> PlaneBuffer:
    """Render SCREEN 5 pixel data into four 80x200 planes, doubled horizontally.

    In digital mode colours go through the 8-colour table and plane 3 stays empty.
    """
    table, planes = (DIGITAL_TABLE, 3) if digital else (IDENTITY_TABLE, 4)
    screen = PlaneBuffer(4, PLANE_SIZE)
    for unit, offset in zip(_units(bytes(data)), _offsets()):
        left = pack_planes(double_width(unit[:2]), planes, table)
        right = pack_planes(double_width(unit[2:]), planes, table)
        for plane, (first, second) in enumerate(zip(left, right)):
            screen.planes[plane][offset] = first
            screen.planes[plane][offset + 1] = second
    return screen


def palette_word(red: int, green: int, blue: int) -> int:
    """Return the 16-bit palette register value for 4-bit colour levels."""
    return (green * 4096 + red * 64 + blue * 2) & 0xFFFF


def palette_writes(
    palette: Sequence[tuple[int, int, int]] = MSX_PALETTE,
) -> list[tuple[int, int]]:
    """Return the (port, word) writes that load an (r, g, b) palette."""
    return [
        (PALETTE_BASE_PORT + index * 2, palette_word(red, green, blue))
        for index, (red, green, blue) in enumerate(palette)
    ]