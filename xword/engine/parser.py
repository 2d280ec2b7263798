"""Parse crossword grid text into a :class:`Grid`."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from ..core.constants import BLOCK_CHAR
from ..core.exceptions import (
    GridParseError,
    MultiCodepointGraphemeError,
    RowTooLongError,
    RowTooShortError,
)
from ..data.normalization import is_single_codepoint, split_graphemes
from ..utils.logger import get_logger
from .grid import Grid


LOGGER = get_logger(__name__)


def parse_grid(text: str, *, block_char: str = BLOCK_CHAR) -> Grid:
    """Build a grid from newline separated rows.

    Rows are measured in extended grapheme clusters, so a letter followed by a
    combining mark counts once. Such clusters are still rejected: every square
    holds exactly one codepoint. ``block_char`` marks a blocked square and any
    other character is an open square holding that character.
    """

    lines = text.split("\n")
    ncols = len(split_graphemes(lines[0]))
    squares = np.empty((len(lines), ncols), dtype=object)

    for r, line in enumerate(lines):
        clusters = split_graphemes(line)
        # Errors are reported in scan order: a bad square before the overflow.
        for c, cluster in enumerate(clusters):
            if c == ncols:
                raise RowTooLongError(r, ncols, len(clusters))
            if not is_single_codepoint(cluster):
                raise MultiCodepointGraphemeError(r, c, cluster)
            squares[r, c] = None if cluster == block_char else cluster
        if len(clusters) < ncols:
            raise RowTooShortError(r, ncols, len(clusters))

    LOGGER.debug("Parsed %sx%s grid", len(lines), ncols)
    return Grid(squares)


def read_grid_text(path: Path | str) -> str:
    """Read a grid file, dropping carriage returns and one trailing newline."""

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise GridParseError(f"Cannot read grid file {source}: {exc}") from exc
    text = text.replace("\r", "")
    if text.endswith("\n"):
        text = text[:-1]
    return text
