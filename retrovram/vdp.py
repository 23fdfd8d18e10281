"""Register-level driver for the MSX2 video display processor."""

from __future__ import annotations

from typing import Callable, Optional

DEFAULT_PORT = 0x98

READ_DATA = 0
READ_STATUS = 1

WRITE_DATA = 0
WRITE_CONTROL = 1
WRITE_PALETTE = 2
WRITE_INDEX = 3


class Vdp:
    """Issues VDP port writes, records them and keeps the last value of each register.

    ``port_out`` receives every (port, value) write; ``port_in`` answers port reads.
    """

    def __init__(
        self,
        read_base: int = DEFAULT_PORT,
        write_base: int = DEFAULT_PORT,
        port_out: Optional[Callable[[int, int], None]] = None,
        port_in: Optional[Callable[[int], int]] = None,
    ) -> None:
        self.read_ports = [read_base + i for i in range(4)]
        self.write_ports = [write_base + i for i in range(4)]
        self.writes: list[tuple[int, int]] = []
        self.registers: dict[int, int] = {}
        self._port_out = port_out
        self._port_in = port_in

    def _out(self, port: int, value: int) -> None:
        value &= 0xFF
        self.writes.append((port, value))
        if self._port_out is not None:
            self._port_out(port, value)

    def _in(self, port: int) -> int:
        return (self._port_in(port) & 0xFF) if self._port_in is not None else 0

    def write_register(self, register: int, value: int) -> None:
        """Set a control register through the control port."""
        register &= 0xFF
        value &= 0xFF
        control = self.write_ports[WRITE_CONTROL]
        self._out(control, value)
        self._out(control, 0x80 | register)
        self.registers[register] = value

    def set_vram_address(self, high: int, low: int) -> None:
        """Point the VRAM write pointer at ``high`` (bit 16) and ``low`` (bits 0-15)."""
        self.write_register(14, ((high << 2) & 0x04) | ((low >> 14) & 0x03))
        control = self.write_ports[WRITE_CONTROL]
        self._out(control, low & 0xFF)
        self._out(control, 0x40 | ((low >> 8) & 0x3F))

    def write_data(self, value: int) -> None:
        """Write one byte at the VRAM pointer."""
        self._out(self.write_ports[WRITE_DATA], value)

    def set_screen5(self) -> None:
        """Switch to the 256x212 16-colour bitmap mode."""
        self.write_register(0, 0x06)
        self.write_register(1, 0x60)
        self.write_register(8, 0x08)
        self.write_register(9, 0x88)

    def set_screen1(self) -> None:
        """Switch to the 32-column text mode."""
        self.write_register(0, 0x00)
        self.write_register(1, 0x60)
        self.write_register(8, 0x08)
        self.write_register(9, 0x08)

    def set_display_page(self, page: int) -> None:
        """Show one of the four SCREEN 5 pages."""
        self.write_register(2, ((page << 5) & 0x60) | 0x1F)

    def set_background_color(self, color: int) -> None:
        """Set the border and background colour."""
        self.write_register(7, color & 0x0F)

    def set_sprite_attribute_address(self, high: int, low: int) -> None:
        """Set the base of the sprite attribute table."""
        self.write_register(5, ((low >> 7) & 0xF8) | 0x07)
        self.write_register(11, ((high << 1) & 0x02) | ((low >> 15) & 0x01))

    def set_sprite_pattern_address(self, high: int, low: int) -> None:
        """Set the base of the sprite pattern table."""
        self.write_register(6, ((high << 5) & 0x20) | ((low >> 11) & 0x1F))

    def sprites_on(self) -> None:
        """Enable sprite display."""
        self.write_register(8, 0x00)

    def sprites_off(self) -> None:
        """Disable sprite display."""
        self.write_register(8, 0x02)

    def read_status(self, number: int) -> int:
        """Read status register ``number``, then select status register 0 again."""
        self.write_register(15, number)
        value = self._in(self.read_ports[READ_STATUS])
        self.write_register(15, 0)
        return value

    def boxfill(
        self, dx: int, dy: int, nx: int, ny: int, dix: int, diy: int, data: int
    ) -> None:
        """Start a high-speed rectangle fill (HMMV) of ``nx`` by ``ny`` at (dx, dy).

        The argument byte is built from ``diy`` alone; ``dix`` is accepted but unused.
        """
        self.write_register(17, 36)
        index = self.write_ports[WRITE_INDEX]
        for value in (
            dx & 0xFF,
            (dx >> 8) & 0x01,
            dy & 0xFF,
            (dy >> 8) & 0x03,
            nx & 0xFF,
            (nx >> 8) & 0x01,
            ny & 0xFF,
            (ny >> 8) & 0x03,
            data,
            ((diy << 3) & 0x80) | ((diy << 2) & 0x40),
            0xC0,
        ):
            self._out(index, value)