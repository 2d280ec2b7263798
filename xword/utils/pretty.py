"""Pretty-print helpers for crossword grids and puzzles."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Iterable, List, Optional

from ..core.constants import BLANK_CHAR, BLOCK_CHAR

if TYPE_CHECKING:
    from ..data.lexicon import Lexicon
    from ..engine.grid import Grid, Square
    from ..engine.puzzle import Puzzle


def cell_symbol(square: Square) -> str:
    if square is None:
        return BLOCK_CHAR
    if square == BLANK_CHAR:
        return "_"
    return square


def format_grid(grid: Grid) -> str:
    """Render ``grid`` with row and column numbers."""

    width = grid.bounds.cols
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * max(0, 3 * width - 1))
    for r, line in enumerate(grid.lines()):
        row_render = " ".join(f"{cell_symbol(square):>2}" for square in line)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def _squares_line(squares: Iterable[Square], indent: str) -> str:
    return indent + "".join(BLOCK_CHAR if square is None else square for square in squares)


def format_puzzle(puzzle: Puzzle) -> str:
    """Render the grid followed by the across and down slot contents."""

    lines: List[str] = ["Grid{"]
    lines.extend(_squares_line(line, "  ") for line in puzzle.grid.lines())
    lines.append("")
    lines.append("ACROSSES:")
    lines.extend(_squares_line(puzzle.grid.view(coords), " ->") for coords in puzzle.acrosses)
    lines.append("")
    lines.append("DOWNS:")
    lines.extend(_squares_line(puzzle.grid.view(coords), " ->") for coords in puzzle.downs)
    lines.append("}")
    return "\n".join(lines)


def pretty_print_puzzle(puzzle: Puzzle, *, label: str | None = None, stream=None) -> None:
    """Print the puzzle in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_puzzle(puzzle), file=stream)


def print_slot_stats(
    puzzle: Puzzle,
    lexicon: Optional[Lexicon] = None,
    *,
    stream=None,
) -> None:
    """Print the numbered grid plus slot and candidate statistics."""

    stream = stream or sys.stdout
    print(format_grid(puzzle.grid), file=stream)

    # --- Grid geometry ---
    rows, cols = puzzle.grid.shape
    total_cells = rows * cols
    blocked = sum(1 for line in puzzle.grid.lines() for square in line if square is None)
    blanks = sum(1 for line in puzzle.grid.lines() for square in line if square == BLANK_CHAR)

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {rows} x {cols} ({total_cells} cells)", file=stream)
    print(f"  Blocked:       {blocked}", file=stream)
    if blanks:
        print(f"  Unfilled:      {blanks}", file=stream)

    # --- Slot stats ---
    lengths = [coords.length for coords in puzzle.acrosses + puzzle.downs]
    print(file=stream)
    print("--- Slots ---", file=stream)
    print(f"  Total slots:   {puzzle.slot_count} ({puzzle.nacross} across, {puzzle.ndown} down)", file=stream)
    if lengths:
        length_dist = Counter(lengths)
        dist_parts = [f"{length}:{count}" for length, count in sorted(length_dist.items())]
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)

    # --- Candidates (requires lexicon) ---
    if lexicon is not None and puzzle.slot_count:
        print(file=stream)
        print("--- Candidates ---", file=stream)
        dead_ends = 0
        for i, slot in puzzle.slots():
            count = len(lexicon.possible_answers(slot))
            if count == 0:
                dead_ends += 1
            direction = slot.coords.direction.value.lower()
            print(f"  {i:>3} {direction:<6} {cell_symbols(slot):<12} {count}", file=stream)
        print(f"  Slots without candidates: {dead_ends}", file=stream)


def cell_symbols(squares: Iterable[Square]) -> str:
    return "".join(cell_symbol(square) for square in squares)
