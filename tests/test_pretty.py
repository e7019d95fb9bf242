import io
import unittest

from wordsearch import generate_puzzle
from wordsearch.utils.pretty import format_grid, pretty_print_puzzle, print_puzzle_stats


class PrettyTests(unittest.TestCase):
    def test_format_grid_space_separates_cells(self) -> None:
        self.assertEqual(format_grid([["A", "B"], ["C", "D"]]), "A B\nC D")

    def test_pretty_print_shows_puzzle_then_answer(self) -> None:
        result = generate_puzzle(4, 4, ["DOG"], seed=5)
        stream = io.StringIO()
        pretty_print_puzzle(result, stream=stream)
        lines = stream.getvalue().splitlines()
        self.assertEqual(len(lines), 9)
        self.assertEqual(lines[4], "")
        self.assertEqual(lines[:4], format_grid(result.puzzle).splitlines())
        self.assertEqual(lines[5:], format_grid(result.answer).splitlines())

    def test_pretty_print_can_hide_answer(self) -> None:
        result = generate_puzzle(4, 4, ["DOG"], seed=5)
        stream = io.StringIO()
        pretty_print_puzzle(result, show_answer=False, stream=stream)
        self.assertEqual(len(stream.getvalue().splitlines()), 4)

    def test_stats_report(self) -> None:
        result = generate_puzzle(5, 5, ["CAT"], seed=3)
        stream = io.StringIO()
        print_puzzle_stats(result, stream=stream)
        output = stream.getvalue()
        self.assertIn("5 x 5 (25 cells)", output)
        self.assertIn("Filler:        22", output)
        self.assertIn("Placed:        1", output)
        self.assertIn("CAT", output)
        self.assertIn("Seed: 3", output)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
