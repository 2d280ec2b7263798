import tempfile
import unittest
from pathlib import Path

from xword.core.constants import Direction
from xword.core.exceptions import (
    GridParseError,
    LengthMismatchError,
    MultiCodepointGraphemeError,
    RowLengthError,
    RowTooLongError,
    RowTooShortError,
)
from xword.core.models import SlotCoords
from xword.engine.grid import Grid
from xword.engine.parser import parse_grid, read_grid_text


SAMPLE = ".ABC.\nDE.FG\nTROUT\n.MNO."


class GridParseTests(unittest.TestCase):
    def test_parse_maps_block_char_to_none(self) -> None:
        grid = parse_grid(SAMPLE)
        self.assertEqual(grid.shape, (4, 5))
        self.assertIsNone(grid.cell(0, 0))
        self.assertEqual(grid.cell(0, 1), "A")
        self.assertTrue(grid.is_blocked(1, 2))
        self.assertEqual(grid.render_rows(), SAMPLE.split("\n"))

    def test_rows_are_rectangular(self) -> None:
        grid = parse_grid("AB.\n.CD\nE.F")
        for row in grid.to_lists():
            self.assertEqual(len(row), 3)

    def test_row_too_short(self) -> None:
        with self.assertRaises(RowTooShortError) as ctx:
            parse_grid(".ABC.\nDE.F")
        self.assertEqual((ctx.exception.row, ctx.exception.expected, ctx.exception.actual), (1, 5, 4))
        self.assertIsInstance(ctx.exception, RowLengthError)
        self.assertIsInstance(ctx.exception, GridParseError)

    def test_row_too_long(self) -> None:
        with self.assertRaises(RowTooLongError):
            parse_grid(".ABC.\nDE.FGH")

    def test_trailing_newline_is_an_empty_row(self) -> None:
        with self.assertRaises(RowTooShortError):
            parse_grid("AB\nCD\n")

    def test_multi_codepoint_grapheme_rejected(self) -> None:
        with self.assertRaises(MultiCodepointGraphemeError) as ctx:
            parse_grid(".ae\u0301BC.\nDE.FG")
        self.assertEqual(ctx.exception.cluster, "e\u0301")
        self.assertEqual((ctx.exception.row, ctx.exception.col), (0, 2))

    def test_bad_square_reported_before_long_row(self) -> None:
        with self.assertRaises(MultiCodepointGraphemeError) as ctx:
            parse_grid("ABC\nAe\u0301CD")
        self.assertEqual((ctx.exception.row, ctx.exception.col), (1, 1))

    def test_long_row_reported_at_first_extra_square(self) -> None:
        with self.assertRaises(RowTooLongError) as ctx:
            parse_grid("ABC\nABCe\u0301")
        self.assertEqual((ctx.exception.row, ctx.exception.expected, ctx.exception.actual), (1, 3, 4))

    def test_combining_mark_counts_as_one_column(self) -> None:
        # the second row would be too long if codepoints were counted
        with self.assertRaises(MultiCodepointGraphemeError):
            parse_grid("ABC\nDe\u0301F")

    def test_single_codepoint_unicode_letters(self) -> None:
        grid = parse_grid("\u00c9T\u00c9\n\u00c0.\u00dc")
        self.assertEqual(grid.cell(0, 0), "\u00c9")
        self.assertEqual(grid.cell(1, 2), "\u00dc")

    def test_spaces_are_open_squares(self) -> None:
        grid = parse_grid("A C\n. .")
        self.assertEqual(grid.cell(0, 1), " ")
        self.assertFalse(grid.is_blocked(1, 1))

    def test_custom_block_char(self) -> None:
        grid = parse_grid("A#\n#B", block_char="#")
        self.assertTrue(grid.is_blocked(0, 1))
        self.assertEqual(grid.cell(1, 1), "B")

    def test_read_grid_text_strips_line_endings(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "grid.txt"
            path.write_bytes(b"AB\r\n.C\r\n")
            self.assertEqual(read_grid_text(path), "AB\n.C")

    def test_read_grid_text_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(GridParseError):
                read_grid_text(Path(tmpdir) / "missing.txt")


class GridModelTests(unittest.TestCase):
    def test_backing_array_is_read_only(self) -> None:
        grid = parse_grid(SAMPLE)
        with self.assertRaises(ValueError):
            grid.row(0)[1] = "Z"
        self.assertEqual(grid.cell(0, 1), "A")

    def test_with_run_returns_new_grid(self) -> None:
        grid = parse_grid(SAMPLE)
        coords = SlotCoords(Direction.DOWN, 1, 0, 4)
        changed = grid.with_run(coords, "WXYZ")
        self.assertEqual(changed.render_rows(), [".WBC.", "DX.FG", "TYOUT", ".ZNO."])
        self.assertEqual(grid.render_rows(), SAMPLE.split("\n"))
        self.assertNotEqual(grid, changed)

    def test_with_run_rejects_wrong_length(self) -> None:
        grid = parse_grid(SAMPLE)
        with self.assertRaises(LengthMismatchError):
            grid.with_run(SlotCoords(Direction.ACROSS, 2, 0, 5), "TROT")

    def test_from_rows_and_equality(self) -> None:
        grid = Grid.from_rows([[None, "A"], ["B", "C"]])
        self.assertEqual(grid, parse_grid(".A\nBC"))
        self.assertEqual(grid.copy(), grid)
        with self.assertRaises(ValueError):
            Grid.from_rows([["A"], ["B", "C"]])

    def test_cell_outside_bounds(self) -> None:
        grid = parse_grid("AB\nCD")
        with self.assertRaises(IndexError):
            grid.cell(2, 0)
        with self.assertRaises(IndexError):
            grid.cell(0, -1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
