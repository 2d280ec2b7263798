"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from ..core.constants import BLOCK_CHAR, Bounds, Direction
from ..core.exceptions import LengthMismatchError
from ..core.models import SlotCoords

Square = Optional[str]


class Grid:
    """Rectangular matrix of squares; ``None`` marks a blocked square.

    The backing array is never writeable. Reads hand out numpy views, and the
    only way to change letters is :meth:`with_run`, which returns a new grid.
    """

    def __init__(self, squares: np.ndarray) -> None:
        if squares.ndim != 2:
            raise ValueError(f"grid must be two dimensional, got {squares.ndim} axes")
        self._squares = np.array(squares, dtype=object, copy=True)
        self._squares.flags.writeable = False

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Square]]) -> "Grid":
        if not rows:
            raise ValueError("grid needs at least one row")
        width = len(rows[0])
        squares = np.empty((len(rows), width), dtype=object)
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {r} has {len(row)} squares, expected {width}")
            for c, square in enumerate(row):
                squares[r, c] = square
        return cls(squares)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def bounds(self) -> Bounds:
        rows, cols = self._squares.shape
        return Bounds(rows=rows, cols=cols)

    @property
    def shape(self) -> Tuple[int, int]:
        return self._squares.shape

    def cell(self, row: int, col: int) -> Square:
        if not self.bounds.contains(row, col):
            raise IndexError(f"cell {(row, col)} outside {self.shape[0]}x{self.shape[1]} grid")
        return self._squares[row, col]

    def is_blocked(self, row: int, col: int) -> bool:
        return self.cell(row, col) is None

    def row(self, k: int) -> np.ndarray:
        return self._squares[k, :]

    def column(self, k: int) -> np.ndarray:
        return self._squares[:, k]

    def lines(self) -> Iterator[np.ndarray]:
        for r in range(self.shape[0]):
            yield self._squares[r, :]

    def view(self, coords: SlotCoords) -> np.ndarray:
        """Return a read-only view over the squares covered by ``coords``."""

        if coords.direction == Direction.ACROSS:
            return self._squares[coords.index, coords.start:coords.stop]
        return self._squares[coords.start:coords.stop, coords.index]

    def to_lists(self) -> List[List[Square]]:
        return self._squares.tolist()

    def render_rows(self, block_char: str = BLOCK_CHAR) -> List[str]:
        return [
            "".join(block_char if square is None else square for square in line)
            for line in self.lines()
        ]

    # ------------------------------------------------------------------
    # Copy-on-write
    # ------------------------------------------------------------------
    def copy(self) -> "Grid":
        return Grid(self._squares)

    def with_run(self, coords: SlotCoords, letters: Sequence[str]) -> "Grid":
        """Return a copy of this grid with ``letters`` written over ``coords``."""

        if len(letters) != coords.length:
            raise LengthMismatchError(coords.length, len(letters))
        squares = np.array(self._squares, dtype=object, copy=True)
        if coords.direction == Direction.ACROSS:
            target = squares[coords.index, coords.start:coords.stop]
        else:
            target = squares[coords.start:coords.stop, coords.index]
        for offset, letter in enumerate(letters):
            target[offset] = letter
        return Grid(squares)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool((self._squares == other._squares).all())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self.render_rows()!r})"
