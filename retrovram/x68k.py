"""SCREEN 5 image rendering for the X68000 text planes and graphic pages."""

from __future__ import annotations

from typing import Sequence

from retrovram.bitplanes import (
    MSX_PALETTE,
    SC5_LINES,
    SC5_ROW_BYTES,
    PlaneBuffer,
    nibbles,
    pack_planes,
)

IMAGE_SIZE = SC5_ROW_BYTES * SC5_LINES
UNIT_SIZE = 4
UNITS_PER_LINE = SC5_ROW_BYTES // UNIT_SIZE

TEXT_PLANES = 4
TEXT_PLANE_SIZE = 0x20000
TEXT_ROW_BYTES = 0x80

GRAPHIC_STRIDE = 512
GRAPHIC_SIZE = GRAPHIC_STRIDE * 512

TEXT_PALETTE = 0xE82200
GRAPHIC_PALETTE = 0xE82000
INTENSITY_BIT = 0x0001


def _image(data: bytes) -> bytes:
    # The image is read in bulk; bytes past the end of the data count as zero.
    return bytes(data[:IMAGE_SIZE]).ljust(IMAGE_SIZE, b"\0")


def _lines(data: bytes):
    image = _image(data)
    for row in range(SC5_LINES):
        yield row, image[row * SC5_ROW_BYTES:(row + 1) * SC5_ROW_BYTES]


def scale_level(level: int) -> int:
    """Scale a 4-bit colour level to 5 bits, keeping zero at zero."""
    return (level + 1) * 2 - 1 if level != 0 else 0


def color_word(red: int, green: int, blue: int) -> int:
    """Return the GGGGGRRRRRBBBBBI colour word for 4-bit levels, intensity bit clear."""
    return (
        (scale_level(green) * 32 * 32 + scale_level(red) * 32 + scale_level(blue)) * 2
    ) & 0xFFFF


def palette_writes(
    palette: Sequence[tuple[int, int, int]] = MSX_PALETTE,
) -> list[tuple[int, int]]:
    """Return (offset, word) writes that load an (r, g, b) palette.

    Offsets count from the start of a palette block, ``TEXT_PALETTE`` or
    ``GRAPHIC_PALETTE``; every word has the intensity bit set.
    """
    return [
        (index * 2, color_word(red, green, blue) | INTENSITY_BIT)
        for index, (red, green, blue) in enumerate(palette)
    ]


def render_planes(data: bytes) -> PlaneBuffer:
    """Render SCREEN 5 pixel data into the four text planes, one pixel per bit."""
    screen = PlaneBuffer(TEXT_PLANES, TEXT_PLANE_SIZE)
    for row, line in _lines(data):
        for column in range(UNITS_PER_LINE):
            unit = line[column * UNIT_SIZE:(column + 1) * UNIT_SIZE]
            offset = row * TEXT_ROW_BYTES + column
            for plane, byte in enumerate(pack_planes(nibbles(unit), TEXT_PLANES)):
                screen.planes[plane][offset] = byte
    return screen


def render_16(data: bytes) -> list[int]:
    """Render SCREEN 5 pixel data as palette indices on a 512-word-wide graphic page."""
    words = [0] * GRAPHIC_SIZE
    for row, line in _lines(data):
        start = row * GRAPHIC_STRIDE
        for x, color in enumerate(nibbles(line)):
            words[start + x] = color
    return words


def render_65536(data: bytes) -> list[int]:
    """Render SCREEN 5 pixel data as direct colour words using the MSX palette."""
    colors = [color_word(*entry) for entry in MSX_PALETTE]
    words = [0] * GRAPHIC_SIZE
    for row, line in _lines(data):
        start = row * GRAPHIC_STRIDE
        for x, color in enumerate(nibbles(line)):
            words[start + x] = colors[color]
    return words