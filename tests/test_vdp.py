import pytest

from retrovram.vdp import Vdp


def test_write_register_sends_value_then_register():
    vdp = Vdp()
    vdp.write_register(7, 0x11)
    assert vdp.writes == [(0x99, 0x11), (0x99, 0x87)]
    assert vdp.registers[7] == 0x11


def test_ports_follow_base():
    sent = []
    vdp = Vdp(write_base=0x88, port_out=lambda port, value: sent.append((port, value)))
    vdp.write_data(0xFF)
    assert sent == [(0x88, 0xFF)]
    assert vdp.writes == sent


def test_screen5_registers():
    vdp = Vdp()
    vdp.set_screen5()
    assert vdp.registers == {0: 0x06, 1: 0x60, 8: 0x08, 9: 0x88}


def test_screen1_registers():
    vdp = Vdp()
    vdp.set_screen1()
    assert vdp.registers == {0: 0x00, 1: 0x60, 8: 0x08, 9: 0x08}


@pytest.mark.parametrize("page", [0, 1, 2, 3])
def test_display_page_round_trip(page):
    vdp = Vdp()
    vdp.set_display_page(page)
    assert (vdp.registers[2] & 0x60) >> 5 == page
    assert vdp.registers[2] & 0x1F == 0x1F


def test_background_color_masked():
    vdp = Vdp()
    vdp.set_background_color(0x31)
    assert vdp.registers[7] == 0x01


@pytest.mark.parametrize("high,low", [(0, 0x7600), (0, 0x8000), (1, 0x0200)])
def test_vram_address_round_trip(high, low):
    vdp = Vdp()
    vdp.set_vram_address(high, low)
    r14 = vdp.registers[14]
    low_byte, top = vdp.writes[-2][1], vdp.writes[-1][1]
    assert top & 0x40
    address = ((r14 & 0x04) << 14) | ((r14 & 0x03) << 14) | ((top & 0x3F) << 8) | low_byte
    assert address == (high << 16) | low


def test_sprite_pattern_address_round_trip():
    vdp = Vdp()
    vdp.set_sprite_pattern_address(0, 0x7800)
    assert (vdp.registers[6] & 0x1F) << 11 == 0x7800


def test_sprites_on_and_off():
    vdp = Vdp()
    vdp.sprites_off()
    assert vdp.registers[8] == 0x02
    vdp.sprites_on()
    assert vdp.registers[8] == 0x00


def test_read_status_selects_and_restores():
    reads = []

    def port_in(port):
        reads.append(port)
        return 0x81

    vdp = Vdp(port_in=port_in)
    assert vdp.read_status(2) == 0x81
    assert reads == [0x99]
    assert vdp.registers[15] == 0
    assert vdp.writes[0] == (0x99, 2)


def test_boxfill_command_bytes():
    vdp = Vdp()
    vdp.boxfill(0, 0, 256, 212, 0, 0, 0xFF)
    assert vdp.registers[17] == 36
    index_writes = [value for port, value in vdp.writes if port == 0x9B]
    assert len(index_writes) == 11
    nx = index_writes[4] | (index_writes[5] << 8)
    ny = index_writes[6] | (index_writes[7] << 8)
    assert (nx, ny) == (256, 212)
    assert index_writes[8] == 0xFF
    assert index_writes[-1] == 0xC0