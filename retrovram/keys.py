"""Decoding of MSX joystick, trigger and keyboard matrix readings into buttons."""

from __future__ import annotations

import enum

IDLE_ROW = 0xFF


class Button(enum.Enum):
    """A logical input, valued by the name it is reported under."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    A = "A"
    B = "B"


def _between(value: int, low: int, high: int) -> bool:
    return low <= value <= high


def pressed(
    stick0: int = 0,
    stick1: int = 0,
    pad0: int = 0,
    pad1: int = 0,
    pad2: int = 0,
    row3: int = IDLE_ROW,
    row5: int = IDLE_ROW,
    row9: int = IDLE_ROW,
    row10: int = IDLE_ROW,
) -> list[Button]:
    """Return the buttons held, in the order up, right, down, left, A, B.

    Sticks report 0 for centre and 1-8 clockwise from up; triggers are non-zero
    when held; keyboard matrix rows are active low.
    """
    sticks = (stick0, stick1)
    held = []
    if (
        any(_between(s, 1, 2) or s == 8 for s in sticks)
        or not row10 & 0x08
    ):
        held.append(Button.UP)
    if any(_between(s, 2, 4) for s in sticks) or not row10 & 0x02:
        held.append(Button.RIGHT)
    if any(_between(s, 4, 6) for s in sticks) or not row9 & 0x20:
        held.append(Button.DOWN)
    if any(_between(s, 6, 8) for s in sticks) or not row9 & 0x80:
        held.append(Button.LEFT)
    if pad0 or pad1 or not row5 & 0x20:
        held.append(Button.A)
    if pad2 or not row3 & 0x01:
        held.append(Button.B)
    return held