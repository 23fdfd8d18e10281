"""SCREEN 5 image rendering for the 640x480 16-colour VGA planar display."""

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
PLANE_SIZE = ROW_BYTES * 480
LINES = 212
UNITS_PER_LINE = 32
UNIT_SIZE = 4
IMAGE_SIZE = LINES * UNITS_PER_LINE * UNIT_SIZE

DAC_INDEX_PORT = 0x3C8
DAC_DATA_PORT = 0x3C9


def _analog_units(data: bytes) -> Iterator[bytes]:
    # The whole image is read in bulk; missing bytes count as zero.
    image = data[:IMAGE_SIZE].ljust(IMAGE_SIZE, b"\0")
    for start in range(0, IMAGE_SIZE, UNIT_SIZE):
        yield image[start:start + UNIT_SIZE]


def _digital_units(data: bytes) -> Iterator[bytes]:
    # Two pixels pairs are read at a time; conversion stops when a read comes up empty.
    for start in range(0, min(len(data), IMAGE_SIZE), UNIT_SIZE):
        unit = data[start:start + UNIT_SIZE]
        if len(unit) <= 2:
            return
        yield unit.ljust(UNIT_SIZE, b"\0")


def _offsets() -> Iterator[int]:
    for line in range(LINES):
        for column in range(UNITS_PER_LINE):
            yield line * ROW_BYTES * 2 + column * 2


def render(data: bytes, digital: bool = False) -> PlaneBuffer:
    """Render SCREEN 5 pixel data into four 80x480 VGA planes, doubled both ways.

    In digital mode colours go through the 8-colour table and plane 3 stays empty.
    """
    data = bytes(data)
    if digital:
        units, table, planes = _digital_units(data), DIGITAL_TABLE, 3
    else:
        units, table, planes = _analog_units(data), IDENTITY_TABLE, 4
    screen = PlaneBuffer(4, PLANE_SIZE)
    for unit, offset in zip(units, _offsets()):
        left = pack_planes(double_width(unit[:2]), planes, table)
        right = pack_planes(double_width(unit[2:]), planes, table)
        for plane, (first, second) in enumerate(zip(left, right)):
            for row in (offset, offset + ROW_BYTES):
                screen.planes[plane][row] = first
                screen.planes[plane][row + 1] = second
    return screen


def dac_level(level: int) -> int:
    """Scale a 4-bit colour level to the 6-bit DAC range, keeping zero at zero."""
    return ((level + 1) * 4 - 1) if level != 0 else 0


def palette_writes(
    palette: Sequence[tuple[int, int, int]] = MSX_PALETTE,
) -> list[tuple[int, int]]:
    """Return the (port, value) writes that load an (r, g, b) palette into the DAC."""
    return [
        write
        for index, (red, green, blue) in enumerate(palette)
        for write in (
            (DAC_INDEX_PORT, index),
            (DAC_DATA_PORT, dac_level(red)),
            (DAC_DATA_PORT, dac_level(green)),
            (DAC_DATA_PORT, dac_level(blue)),
        )
    ]