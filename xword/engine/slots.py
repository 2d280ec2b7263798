"""Identify the across and down slots of a grid."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..core.constants import Direction
from ..core.models import SlotCoords
from ..utils.logger import get_logger
from .grid import Grid, Square


LOGGER = get_logger(__name__)


def _scan_runs(line: Sequence[Square]) -> List[Tuple[int, int]]:
    """Return ``(start, stop)`` for every maximal run of open squares."""

    runs: List[Tuple[int, int]] = []
    n = len(line)
    stop = 0
    while stop < n:
        start = stop
        while start < n and line[start] is None:
            start += 1
        stop = start
        while stop < n and line[stop] is not None:
            stop += 1
        if start != stop:
            runs.append((start, stop))
        stop += 1
    return runs


def identify_slots(grid: Grid) -> Tuple[List[SlotCoords], List[SlotCoords]]:
    """Derive the across and down slots of ``grid``.

    Acrosses are listed row by row, left to right; downs column by column,
    top to bottom. Single squares count as slots.
    """

    rows, cols = grid.shape
    acrosses = [
        SlotCoords(Direction.ACROSS, k, start, stop)
        for k in range(rows)
        for start, stop in _scan_runs(grid.row(k))
    ]
    downs = [
        SlotCoords(Direction.DOWN, k, start, stop)
        for k in range(cols)
        for start, stop in _scan_runs(grid.column(k))
    ]
    LOGGER.debug("Identified %s across and %s down slots", len(acrosses), len(downs))
    return acrosses, downs
