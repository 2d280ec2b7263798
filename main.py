"""CLI entrypoint: print a puzzle's slots and their lexicon candidates."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from xword.core.constants import Alphabet
from xword.core.exceptions import CrosswordError
from xword.data.lexicon import Lexicon, LexiconConfig
from xword.engine.parser import read_grid_text
from xword.engine.puzzle import Puzzle
from xword.utils.logger import configure_logging
from xword.utils.pretty import cell_symbols, pretty_print_puzzle, print_slot_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List candidate words for the slots of a crossword grid",
    )
    parser.add_argument("--grid", type=Path, required=True, help="Grid text file ('.' marks a blocked square)")
    parser.add_argument("--words", type=Path, help="Word list file, one word per line")
    parser.add_argument(
        "--slot",
        type=int,
        action="append",
        dest="slots",
        metavar="N",
        help="Slot index to query (repeatable, defaults to every slot)",
    )
    parser.add_argument(
        "--fill",
        nargs=2,
        action="append",
        metavar=("N", "WORD"),
        default=[],
        help="Fill slot N with WORD before querying (repeatable, applied in order)",
    )
    parser.add_argument(
        "--alphabet",
        type=str,
        choices=[a.value for a in Alphabet],
        default=Alphabet.ASCII.value,
        help="Characters accepted from the word list",
    )
    parser.add_argument("--limit", type=int, default=20, help="Maximum candidates printed per slot")
    parser.add_argument("--stats", action="store_true", help="Print grid and slot statistics")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def apply_fills(puzzle: Puzzle, fills: Sequence[Tuple[int, str]]) -> Puzzle:
    for index, word in fills:
        puzzle = puzzle.with_filled_slot(index, word)
    return puzzle


def print_candidates(
    puzzle: Puzzle,
    lexicon: Lexicon,
    indices: Sequence[int],
    limit: int,
    stream=None,
) -> None:
    stream = stream or sys.stdout
    for i in indices:
        slot = puzzle.access(i)
        answers = lexicon.possible_answers(slot)
        shown = answers[:limit] if limit >= 0 else answers
        direction = slot.coords.direction.value.lower()
        print(f"[{i}] {direction} {cell_symbols(slot)}: {len(answers)} candidate(s)", file=stream)
        if shown:
            print("    " + " ".join(shown), file=stream)
        if len(shown) < len(answers):
            print(f"    ... {len(answers) - len(shown)} more", file=stream)


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    fills: List[Tuple[int, str]] = []
    for index, word in args.fill:
        try:
            fills.append((int(index), word))
        except ValueError:
            parser.error(f"--fill expects a slot index, got {index!r}")

    try:
        puzzle = apply_fills(Puzzle.parse(read_grid_text(args.grid)), fills)
        lexicon = None
        if args.words:
            config = LexiconConfig(alphabet=Alphabet(args.alphabet))
            lexicon = Lexicon.from_file(args.words, config)
        indices = args.slots if args.slots else list(range(puzzle.slot_count))
        for i in indices:
            puzzle.coords(i)
    except CrosswordError as exc:
        parser.error(str(exc))

    pretty_print_puzzle(puzzle)
    if args.stats:
        print()
        print_slot_stats(puzzle, lexicon)
    if lexicon is not None:
        print()
        print_candidates(puzzle, lexicon, indices, args.limit)


if __name__ == "__main__":  # pragma: no cover
    main()
