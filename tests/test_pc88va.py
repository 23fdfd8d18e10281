from retrovram.bitplanes import DIGITAL_PALETTE, MSX_PALETTE
from retrovram.pc88va import (
    LINES,
    PLANE_SIZE,
    ROW_BYTES,
    palette_word,
    palette_writes,
    render,
)


def test_blank_image_renders_empty_planes():
    screen = render(bytes(128 * 212))
    assert len(screen) == 4
    assert all(len(plane) == PLANE_SIZE for plane in screen.planes)
    assert all(not any(plane) for plane in screen.planes)


def test_analog_pixel_doubled_horizontally_only():
    screen = render(b"\xf0\x00\x00\x00" + bytes(200))
    for plane in screen.planes:
        assert plane[0] == 0xC0
        assert plane[1] == 0
        assert plane[ROW_BYTES] == 0


def test_digital_mode_leaves_plane_three_empty():
    screen = render(b"\xff\xff\xff\xff" + bytes(200), digital=True)
    assert [plane[0] for plane in screen.planes[:3]] == [0xFF] * 3
    assert [plane[1] for plane in screen.planes[:3]] == [0xFF] * 3
    assert not any(screen.planes[3])


def test_second_line_starts_one_row_down():
    data = bytes(128) + b"\xff\xff\xff\xff"
    screen = render(data)
    assert screen.planes[0][ROW_BYTES] == 0xFF
    assert screen.planes[0][ROW_BYTES + 1] == 0xFF
    assert not any(screen.planes[0][:ROW_BYTES])


def test_short_data_stops_conversion():
    screen = render(b"\xff\xff")
    assert [bytes(plane) for plane in screen.planes] == [bytes(PLANE_SIZE)] * 4


def test_image_rows_beyond_limit_ignored():
    data = bytes(128 * LINES) + b"\xff" * 128
    screen = render(data)
    assert [sum(plane) for plane in screen.planes] == [0, 0, 0, 0]


def test_palette_word_round_trip():
    for red, green, blue in MSX_PALETTE:
        word = palette_word(red, green, blue)
        assert (word >> 12) & 0xF == green
        assert (word >> 6) & 0x3F == red
        assert (word >> 1) & 0x1F == blue


def test_palette_word_green_only():
    assert palette_word(0, 15, 0) == 0xF000


def test_palette_writes_ports_and_values():
    writes = palette_writes(DIGITAL_PALETTE)
    assert len(writes) == 16
    assert [port for port, _ in writes] == [0x300 + i * 2 for i in range(16)]
    assert writes[0][1] == 0
    assert writes[7][1] == palette_word(15, 15, 15)