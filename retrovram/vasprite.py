"""Packing SCREEN 5 images into PC-88VA sprite patterns and attribute entries."""

from __future__ import annotations

from typing import NamedTuple

ATTRIBUTE_SIZE = 8
_WORD = 0xFFFF


class SpritePatterns(NamedTuple):
    """Packed pattern memory and the offset just past the last byte written."""

    patterns: bytes
    end: int


def sprite_size(width: int, height: int) -> int:
    """Return the bytes one sprite of ``width`` x ``height`` pixels occupies."""
    return width // 2 * height


def pack_sprite_patterns(
    data: bytes,
    width: int,
    line: int,
    sprite_width: int,
    sprite_height: int,
    columns: int,
    rows: int = 1,
    compact: bool = False,
) -> SpritePatterns:
    """Cut SCREEN 5 pixel data into sprites, doubling every pixel horizontally.

    Each source pixel becomes one pattern byte holding the pixel in both nibbles.
    ``line`` image lines are read for every band of ``columns`` sprites, and
    ``rows`` such bands are read. With ``compact`` false, ``width`` counts bytes
    of a 128-byte line and pixels are read four bytes at a time; with ``compact``
    true it counts pixels of a 256-pixel line and pixels are read two bytes at a
    time. The rest of each line is skipped. Reading stops at the end of the data;
    a short final read keeps the bytes of the previous one for what is missing.
    """
    if sprite_width < 2 or sprite_height < 1:
        raise ValueError(f"bad sprite size {sprite_width}x{sprite_height}")
    if columns < 1 or rows < 0 or line < 0 or width < 0:
        raise ValueError("columns must be positive and counts must not be negative")

    data = bytes(data)
    unit = 2 if compact else 4
    step = unit * 2
    reads_per_line = width // 4
    skips = max(0, ((256 if compact else 128) - width) // 4)
    row_bytes = sprite_width // 2
    size = sprite_size(sprite_width, sprite_height)

    memory = bytearray(columns * rows * size)
    pattern = bytearray(unit)
    position = 0
    index = 0
    spr_x = spr_no = 0

    def read() -> bool:
        nonlocal position
        chunk = data[position:position + unit]
        if not chunk:
            return False
        pattern[:len(chunk)] = chunk
        position += len(chunk)
        return True

    def store(offset: int, value: int) -> None:
        if offset >= len(memory):
            memory.extend(bytes(offset + 1 - len(memory)))
        memory[offset] = value

    def result() -> SpritePatterns:
        return SpritePatterns(bytes(memory), index)

    for band in range(rows):
        spr_y = band * sprite_height * columns
        for _ in range(line):
            for _ in range(reads_per_line):
                if not read():
                    return result()
                index = (spr_no * size + spr_x + spr_y * row_bytes) & _WORD
                for byte in pattern:
                    for nibble in ((byte >> 4) & 0x0F, byte & 0x0F):
                        store(index, nibble * 0x11)
                        index = (index + 1) & _WORD
                spr_x += step
                if spr_x >= row_bytes:
                    spr_x = 0
                    spr_no += 1
                    if spr_no >= columns:
                        spr_no = 0
                        spr_y += 1
            for _ in range(skips):
                if not read():
                    return result()
    return result()


def sprite_attribute(address: int, x: int, y: int, width: int, height: int) -> bytes:
    """Return the 8-byte sprite control entry placing a pattern at (x, y).

    ``address`` is the byte address of the pattern; the entry stores it in words.
    """
    address &= _WORD
    x &= _WORD
    y &= _WORD
    width &= 0xFF
    height &= 0xFF
    word_address = address // 2
    return bytes(
        [
            y % 256,
            ((height // 4 - 1) * 4 | 0x02 | ((y // 256) & 0x01)) & 0xFF,
            x % 256,
            ((width // 8 - 1) * 8 | ((x // 256) & 0x03)) & 0xFF,
            word_address % 256,
            (word_address // 256) & 0xFF,
            0,
            0,
        ]
    )