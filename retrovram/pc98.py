"""SCREEN 5 image rendering for the 640x400 bit-planed PC-98 display."""

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
PLANE_SIZE = ROW_BYTES * 400
LINES = 200
UNITS_PER_LINE = 32
UNIT_SIZE = 4

PALETTE_INDEX_PORT = 0xA8
GREEN_PORT = 0xAA
RED_PORT = 0xAC
BLUE_PORT = 0xAE


def _units(data: bytes) -> Iterator[bytes]:
    limit = min(len(data), LINES * UNITS_PER_LINE * UNIT_SIZE)
    for start in range(0, limit, UNIT_SIZE):
        unit = data[start:start + UNIT_SIZE]
        if len(unit) <= 2:
            return
        yield unit.ljust(UNIT_SIZE, b"\0")


def _offsets() -> Iterator[int]:
    for line in range(LINES):
        for column in range(UNITS_PER_LINE):
            yield line * ROW_BYTES * 2 + column * 2


def render(data: bytes, digital: bool = False) -> PlaneBuffer:
    """Render SCREEN 5 pixel data into four 80x400 planes, doubled both ways.

    In digital mode colours go through the 8-colour table and plane 3 stays empty.
    """
    table, planes = (DIGITAL_TABLE, 3) if digital else (IDENTITY_TABLE, 4)
    screen = PlaneBuffer(4, PLANE_SIZE)
    for unit, offset in zip(_units(bytes(data)), _offsets()):
        left = pack_planes(double_width(unit[:2]), planes, table)
        right = pack_planes(double_width(unit[2:]), planes, table)
        for plane, (first, second) in enumerate(zip(left, right)):
            for row in (offset, offset + ROW_BYTES):
                screen.planes[plane][row] = first
                screen.planes[plane][row + 1] = second
    return screen


def palette_writes(
    palette: Sequence[tuple[int, int, int]] = MSX_PALETTE,
) -> list[tuple[int, int]]:
    """Return the (port, value) writes that load an (r, g, b) palette."""
    return [
        write
        for index, (red, green, blue) in enumerate(palette)
        for write in (
            (PALETTE_INDEX_PORT, index),
            (GREEN_PORT, green),
            (RED_PORT, red),
            (BLUE_PORT, blue),
        )
    ]