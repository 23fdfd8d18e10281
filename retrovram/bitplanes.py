"""MSX SCREEN 5 image loading and conversion of pixels into bit planes."""

from __future__ import annotations

import os
from typing import BinaryIO, Iterable, Iterator, Sequence

HEADER_SIZE = 7
SC5_WIDTH = 256
SC5_LINES = 212
SC5_ROW_BYTES = SC5_WIDTH // 2

IDENTITY_TABLE = tuple(range(16))
DIGITAL_TABLE = (0, 0, 4, 4, 1, 1, 2, 5, 2, 2, 6, 6, 4, 3, 7, 7)

MSX_PALETTE = (
    (0, 0, 0),
    (0, 0, 0),
    (3, 13, 3),
    (7, 15, 7),
    (3, 3, 15),
    (5, 7, 15),
    (11, 3, 3),
    (5, 13, 15),
    (15, 3, 3),
    (15, 7, 7),
    (13, 13, 3),
    (13, 13, 7),
    (3, 9, 3),
    (13, 5, 11),
    (11, 11, 11),
    (15, 15, 15),
)

DIGITAL_PALETTE = (
    (0, 0, 0),
    (0, 0, 15),
    (15, 0, 0),
    (15, 0, 15),
    (0, 15, 0),
    (0, 15, 15),
    (15, 15, 0),
    (15, 15, 15),
) + ((0, 0, 0),) * 8


class PlaneBuffer:
    """A set of equally sized bit planes, one bytearray per plane."""

    def __init__(self, count: int, size: int) -> None:
        self.planes = [bytearray(size) for _ in range(count)]

    def __len__(self) -> int:
        return len(self.planes)

    def __getitem__(self, index: int) -> bytearray:
        return self.planes[index]

    def clear(self, value: int = 0) -> None:
        """Fill every byte of every plane with ``value``."""
        fill = bytes([value])
        for plane in self.planes:
            plane[:] = fill * len(plane)


def read_sc5(stream: BinaryIO) -> bytes:
    """Skip the 7-byte BSAVE header of a stream and return the pixel data."""
    stream.read(HEADER_SIZE)
    return stream.read()


def load_sc5(path: str | os.PathLike) -> bytes:
    """Return the pixel data of the SCREEN 5 file at ``path``."""
    with open(path, "rb") as stream:
        return read_sc5(stream)


def nibbles(data: Iterable[int]) -> Iterator[int]:
    """Yield the colour indices of packed 4-bit pixels, high nibble first."""
    for byte in data:
        yield (byte >> 4) & 0x0F
        yield byte & 0x0F


def double_width(data: Iterable[int]) -> list[int]:
    """Return the colour indices of ``data`` with every pixel repeated twice."""
    return [color for color in nibbles(data) for _ in range(2)]


def pack_planes(
    colors: Sequence[int], planes: int, table: Sequence[int] = IDENTITY_TABLE
) -> list[int]:
    """Pack eight colour indices into one byte per plane, leftmost pixel in bit 7."""
    colors = list(colors)
    if len(colors) != 8:
        raise ValueError(f"expected 8 pixels, got {len(colors)}")
    packed = []
    for plane in range(planes):
        byte = 0
        for color in colors:
            byte = (byte << 1) | ((table[color] >> plane) & 1)
        packed.append(byte)
    return packed