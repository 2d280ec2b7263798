"""Custom exception hierarchy for crossword grids and lexicons."""

from __future__ import annotations


class CrosswordError(Exception):
    """Base exception for all package failures."""


class GridParseError(CrosswordError):
    """Raised when grid text cannot be turned into a rectangular grid."""


class RowLengthError(GridParseError):
    """Raised when a row's grapheme count differs from the first row's."""

    def __init__(self, row: int, expected: int, actual: int) -> None:
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"row {row} has {actual} characters, expected {expected}"
        )


class RowTooShortError(RowLengthError):
    """Raised when a row has fewer characters than the first row."""


class RowTooLongError(RowLengthError):
    """Raised when a row has more characters than the first row."""


class MultiCodepointGraphemeError(GridParseError):
    """Raised when a grid character is built from several unicode codepoints."""

    def __init__(self, row: int, col: int, cluster: str) -> None:
        self.row = row
        self.col = col
        self.cluster = cluster
        codepoints = " ".join(f"U+{ord(char):04X}" for char in cluster)
        super().__init__(
            f"grapheme cluster at ({row},{col}) is made of several codepoints: {codepoints}"
        )


class SlotIndexError(CrosswordError, IndexError):
    """Raised when a slot index falls outside the puzzle's slot range."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"slot index {index} out of range for {count} slots")


class LengthMismatchError(CrosswordError, ValueError):
    """Raised when a fill value does not have the slot's length."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"value has {actual} characters, slot needs {expected}")


class WordListLoadError(CrosswordError):
    """Raised when a word list file cannot be read."""
