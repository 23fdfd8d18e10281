"""A falling-star animation drawn into bit planes, one star per byte column."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from retrovram.bitplanes import PlaneBuffer

ROW_BYTES = 80
STAR_COUNT = 80
COLOR_PLANES = 3
PIXEL = 0x01


@dataclass
class Star:
    """One star: its line, how many lines it falls per frame, and its 3-bit colour."""

    y: int
    speed: int
    color: int

    @classmethod
    def random(cls, rng: random.Random) -> "Star":
        """Return a star on a line that is a multiple of 8, below 400."""
        return cls(
            y=rng.randrange(50) * 8,
            speed=rng.randrange(3) + 1,
            color=rng.randrange(6) + 1,
        )


class Starfield:
    """Stars falling down a screen of ``height`` lines, 80 bytes per line.

    Star ``i`` lives in byte column ``i`` and is the rightmost pixel of that byte,
    drawn into each of the three colour planes whose bit is set in its colour.
    With ``advance_first`` false a frame erases the star at its line, draws it
    ``speed`` lines lower and then moves it; with ``advance_first`` true the star
    is moved first and drawn from its new line. Writes past the end of a plane
    are dropped.
    """

    def __init__(
        self,
        height: int = 400,
        count: int = STAR_COUNT,
        advance_first: bool = False,
        seed: Optional[int] = None,
        stars: Optional[Sequence[Star]] = None,
    ) -> None:
        if height <= 0:
            raise ValueError(f"height must be positive, got {height}")
        if stars is None:
            if count < 0:
                raise ValueError(f"star count must not be negative, got {count}")
            rng = random.Random(seed)
            stars = [Star.random(rng) for _ in range(count)]
        self.stars = list(stars)
        if len(self.stars) > ROW_BYTES:
            raise ValueError(
                f"at most {ROW_BYTES} stars fit on a line, got {len(self.stars)}"
            )
        self.height = height
        self.advance_first = advance_first
        self.screen = PlaneBuffer(4, ROW_BYTES * height)

    def _advance(self, star: Star) -> None:
        star.y = (star.y + star.speed) % self.height

    def step(self) -> None:
        """Move every star one frame and update the planes."""
        size = ROW_BYTES * self.height
        for column, star in enumerate(self.stars):
            if self.advance_first:
                self._advance(star)
            erase = column + star.y * ROW_BYTES
            draw = erase + star.speed * ROW_BYTES
            if not self.advance_first:
                self._advance(star)
            for index in range(COLOR_PLANES):
                if not star.color & (1 << index):
                    continue
                plane = self.screen.planes[index]
                if erase < size:
                    plane[erase] &= ~PIXEL & 0xFF
                if draw < size:
                    plane[draw] |= PIXEL

    def frames(self, count: int) -> Iterator[PlaneBuffer]:
        """Step ``count`` times, yielding the screen after each frame.

        The same buffer is yielded every time and changes as the stars move.
        """
        for _ in range(count):
            self.step()
            yield self.screen