"""Data models shared by the grid, puzzle and lexicon layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .constants import Direction


@dataclass(frozen=True)
class SlotCoords:
    """A maximal run of open squares along one row or column.

    ``index`` is the row of an across slot or the column of a down slot;
    ``start``/``stop`` bound the run along the other axis (half open).
    """

    direction: Direction
    index: int
    start: int
    stop: int

    def __post_init__(self) -> None:
        if self.start >= self.stop:
            raise ValueError(f"empty slot range [{self.start}, {self.stop})")

    @property
    def length(self) -> int:
        return self.stop - self.start

    @property
    def cells(self) -> List[Tuple[int, int]]:
        if self.direction == Direction.ACROSS:
            return [(self.index, col) for col in range(self.start, self.stop)]
        return [(row, self.index) for row in range(self.start, self.stop)]
