"""Crossword grid slots and lexicon pattern lookups.

This package exposes the public API surface via:

- ``xword.engine.puzzle.Puzzle``: parses grid text, numbers slots and hands
  out read-only slot views.
- ``xword.data.lexicon.Lexicon``: indexes a word list by length and answers
  pattern queries for a slot.
"""

from .core.constants import Alphabet, Direction
from .core.exceptions import (
    CrosswordError,
    GridParseError,
    LengthMismatchError,
    MultiCodepointGraphemeError,
    RowLengthError,
    RowTooLongError,
    RowTooShortError,
    SlotIndexError,
    WordListLoadError,
)
from .core.models import SlotCoords
from .data.lexicon import Lexicon, LexiconConfig
from .engine.grid import Grid
from .engine.parser import parse_grid
from .engine.puzzle import Puzzle, Slot

__all__ = [
    "Alphabet",
    "CrosswordError",
    "Direction",
    "Grid",
    "GridParseError",
    "LengthMismatchError",
    "Lexicon",
    "LexiconConfig",
    "MultiCodepointGraphemeError",
    "Puzzle",
    "RowLengthError",
    "RowTooLongError",
    "RowTooShortError",
    "Slot",
    "SlotCoords",
    "SlotIndexError",
    "WordListLoadError",
    "parse_grid",
]

__version__ = "0.1.0"
