"""Shared constants and enumerations for crossword grids and lexicons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BLOCK_CHAR = "."
BLANK_CHAR = " "


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"


class Alphabet(str, Enum):
    """Character sets a lexicon can accept."""

    ASCII = "ASCII"
    UNICODE = "UNICODE"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
