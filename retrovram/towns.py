"""SCREEN 5 image rendering for the FM TOWNS 16-colour and 32768-colour pages."""

from __future__ import annotations

from typing import Sequence

from retrovram.bitplanes import MSX_PALETTE, SC5_LINES, SC5_ROW_BYTES, nibbles
from retrovram.x68k import scale_level

IMAGE_SIZE = SC5_ROW_BYTES * SC5_LINES

PAGE_SIZE = 0x40000
ROW_BYTES = 512
ROW_WORDS = 512
PAGE_WORDS = PAGE_SIZE // 2

PRIORITY_INDEX_PORT = 0x448
PRIORITY_DATA_PORT = 0x44A
PALETTE_INDEX_PORT = 0xFD90
BLUE_PORT = 0xFD92
RED_PORT = 0xFD94
GREEN_PORT = 0xFD96


def _lines(data: bytes):
    # The image is read in bulk; bytes past the end of the data count as zero.
    image = bytes(data[:IMAGE_SIZE]).ljust(IMAGE_SIZE, b"\0")
    for row in range(SC5_LINES):
        yield row, image[row * SC5_ROW_BYTES:(row + 1) * SC5_ROW_BYTES]


def color_32768(red: int, green: int, blue: int) -> int:
    """Return the 15-bit GGGGGRRRRRBBBBB colour for 4-bit levels."""
    return scale_level(green) * 32 * 32 + scale_level(red) * 32 + scale_level(blue)


def palette_writes(
    palette: Sequence[tuple[int, int, int]] = MSX_PALETTE,
) -> list[tuple[int, int]]:
    """Return the (port, value) writes that load an (r, g, b) palette."""
    return [
        write
        for index, (red, green, blue) in enumerate(palette)
        for write in (
            (PRIORITY_INDEX_PORT, 0x01),
            (PRIORITY_DATA_PORT, 0x00),
            (PALETTE_INDEX_PORT, index),
            (BLUE_PORT, (blue * 16) & 0xFF),
            (RED_PORT, (red * 16) & 0xFF),
            (GREEN_PORT, (green * 16) & 0xFF),
        )
    ]


def render_16(data: bytes) -> bytearray:
    """Render SCREEN 5 pixel data into a 4-bit page, leftmost pixel in the low nibble."""
    page = bytearray(PAGE_SIZE)
    for row, line in _lines(data):
        start = row * ROW_BYTES
        page[start:start + len(line)] = bytes(
            ((byte >> 4) & 0x0F) | ((byte & 0x0F) << 4) for byte in line
        )
    return page


def render_32768(data: bytes) -> list[int]:
    """Render SCREEN 5 pixel data as 15-bit colour words using the MSX palette."""
    colors = [color_32768(*entry) for entry in MSX_PALETTE]
    words = [0] * PAGE_WORDS
    for row, line in _lines(data):
        start = row * ROW_WORDS
        for x, color in enumerate(nibbles(line)):
            words[start + x] = colors[color]
    return words