"""Puzzle container: a grid plus its numbered slots."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple, Union

import numpy as np

from ..core.constants import BLANK_CHAR, BLOCK_CHAR
from ..core.exceptions import LengthMismatchError, SlotIndexError
from ..core.models import SlotCoords
from ..utils.logger import get_logger
from ..utils.pretty import format_puzzle
from .grid import Grid
from .parser import parse_grid
from .slots import identify_slots


LOGGER = get_logger(__name__)


class Slot:
    """Read-only view of one slot's squares.

    The view borrows the owning puzzle's array and never copies the grid.
    Every square it exposes is open; a blank (space) square is unfilled.
    """

    __slots__ = ("coords", "_view")

    def __init__(self, coords: SlotCoords, view: np.ndarray) -> None:
        self.coords = coords
        self._view = view

    def __len__(self) -> int:
        return len(self._view)

    def __getitem__(self, index: Union[int, slice]) -> str:
        if isinstance(index, slice):
            return "".join(self._view[index])
        return self._view[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._view)

    def __str__(self) -> str:
        return "".join(self._view)

    def __repr__(self) -> str:
        return f"Slot({self.coords.direction.value}, {str(self)!r})"

    @property
    def pattern(self) -> Tuple[Optional[str], ...]:
        """Uppercased letters with ``None`` at blank positions."""

        return tuple(None if char == BLANK_CHAR else char.upper() for char in self._view)

    @property
    def is_complete(self) -> bool:
        return BLANK_CHAR not in self._view


class Puzzle:
    """Puzzle grid state.

    Slots are addressed by a single index: acrosses first, then downs. The
    grid is not exposed for writing; :meth:`with_filled_slot` returns a new
    puzzle instead.
    """

    def __init__(self, grid: Grid) -> None:
        acrosses, downs = identify_slots(grid)
        self._grid = grid
        self._acrosses: Tuple[SlotCoords, ...] = tuple(acrosses)
        self._downs: Tuple[SlotCoords, ...] = tuple(downs)

    @classmethod
    def _with_grid(
        cls,
        grid: Grid,
        acrosses: Tuple[SlotCoords, ...],
        downs: Tuple[SlotCoords, ...],
    ) -> "Puzzle":
        """Wrap a grid whose open squares match an existing slot layout."""

        puzzle = cls.__new__(cls)
        puzzle._grid = grid
        puzzle._acrosses = acrosses
        puzzle._downs = downs
        return puzzle

    @classmethod
    def parse(cls, text: str, *, block_char: str = BLOCK_CHAR) -> "Puzzle":
        return cls(parse_grid(text, block_char=block_char))

    @classmethod
    def from_grid(cls, grid: Grid) -> "Puzzle":
        return cls(grid)

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def acrosses(self) -> Tuple[SlotCoords, ...]:
        return self._acrosses

    @property
    def downs(self) -> Tuple[SlotCoords, ...]:
        return self._downs

    # ------------------------------------------------------------------
    # Counts
    # ------------------------------------------------------------------
    @property
    def nacross(self) -> int:
        return len(self.acrosses)

    @property
    def ndown(self) -> int:
        return len(self.downs)

    @property
    def slot_count(self) -> int:
        return self.nacross + self.ndown

    def __len__(self) -> int:
        return self.slot_count

    # ------------------------------------------------------------------
    # Slot access
    # ------------------------------------------------------------------
    def coords(self, i: int) -> SlotCoords:
        if 0 <= i < self.nacross:
            return self.acrosses[i]
        if self.nacross <= i < self.slot_count:
            return self.downs[i - self.nacross]
        raise SlotIndexError(i, self.slot_count)

    def access(self, i: int) -> Slot:
        """Return a read-only view of slot ``i``."""

        coords = self.coords(i)
        return Slot(coords, self.grid.view(coords))

    def slots(self) -> Iterator[Tuple[int, Slot]]:
        for i in range(self.slot_count):
            yield i, self.access(i)

    def with_filled_slot(self, i: int, value: str) -> "Puzzle":
        """Return a copy of the puzzle with slot ``i`` holding ``value``."""

        coords = self.coords(i)
        if len(value) != coords.length:
            raise LengthMismatchError(coords.length, len(value))
        LOGGER.debug("Filling slot %s (%s) with %r", i, coords.direction.value, value)
        return Puzzle._with_grid(self._grid.with_run(coords, value), self._acrosses, self._downs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Puzzle):
            return NotImplemented
        return self.grid == other.grid

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return format_puzzle(self)

    def __repr__(self) -> str:
        rows, cols = self.grid.shape
        return f"Puzzle({rows}x{cols}, {self.nacross} across, {self.ndown} down)"
