import unittest

from wordsearch.core.constants import ALL_DIRECTIONS, Direction
from wordsearch.core.exceptions import OutOfBoundsError
from wordsearch.engine.cursor import Cursor
from wordsearch.engine.grid import GridConfig, PuzzleGrid


def _lettered_grid(height: int, width: int) -> PuzzleGrid:
    grid = PuzzleGrid(GridConfig(height=height, width=width))
    for r in range(height):
        for c in range(width):
            grid.puzzle[r][c] = chr(ord("A") + r * width + c)
    return grid


class CursorBoundsTests(unittest.TestCase):
    def test_rejects_positions_outside_grid(self) -> None:
        grid = PuzzleGrid(GridConfig(height=4, width=5))
        for row, col in ((4, 0), (0, 5), (-1, 0), (0, -1)):
            with self.assertRaises(OutOfBoundsError):
                grid.cursor(row, col, Direction.HORIZONTAL)

    def test_horizontal_terminates_at_row_edges(self) -> None:
        grid = PuzzleGrid(GridConfig(height=4, width=5))
        self.assertIsNone(grid.cursor(0, 4, Direction.HORIZONTAL).next())
        self.assertIsNone(grid.cursor(0, 0, Direction.HORIZONTAL).prev())
        nxt = grid.cursor(2, 1, Direction.HORIZONTAL).next()
        assert nxt is not None
        self.assertEqual((nxt.row, nxt.col), (2, 2))

    def test_diagonal_up_steps_towards_top_right(self) -> None:
        grid = PuzzleGrid(GridConfig(height=4, width=5))
        start = grid.cursor(3, 0, Direction.DIAGONAL_UP)
        self.assertIsNone(start.prev())
        nxt = start.next()
        assert nxt is not None
        self.assertEqual((nxt.row, nxt.col), (2, 1))
        self.assertIsNone(grid.cursor(0, 2, Direction.DIAGONAL_UP).next())

    def test_diagonals_stop_at_true_edges_of_rectangular_grid(self) -> None:
        grid = PuzzleGrid(GridConfig(height=2, width=5))
        cells = [(c.row, c.col) for c in grid.cursor(0, 0, Direction.DIAGONAL_DOWN).walk()]
        self.assertEqual(cells, [(0, 0), (1, 1)])
        wide = PuzzleGrid(GridConfig(height=5, width=2))
        cells = [(c.row, c.col) for c in wide.cursor(4, 0, Direction.DIAGONAL_UP).walk()]
        self.assertEqual(cells, [(4, 0), (3, 1)])

    def test_next_then_prev_returns_to_original(self) -> None:
        grid = PuzzleGrid(GridConfig(height=4, width=5))
        for direction in ALL_DIRECTIONS:
            for cursor in grid.cursors(direction):
                nxt = cursor.next()
                if nxt is not None:
                    self.assertEqual(nxt.prev(), cursor)
                prev = cursor.prev()
                if prev is not None:
                    self.assertEqual(prev.next(), cursor)

    def test_equality_ignores_grid(self) -> None:
        first = PuzzleGrid(GridConfig(height=3, width=3))
        second = PuzzleGrid(GridConfig(height=3, width=3))
        self.assertEqual(
            Cursor(first, 1, 1, Direction.VERTICAL),
            Cursor(second, 1, 1, Direction.VERTICAL),
        )
        self.assertNotEqual(
            Cursor(first, 1, 1, Direction.VERTICAL),
            Cursor(first, 1, 1, Direction.HORIZONTAL),
        )


class CursorLineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = _lettered_grid(4, 5)

    def test_value_reads_puzzle_cell(self) -> None:
        self.assertEqual(self.grid.cursor(1, 2, Direction.HORIZONTAL).value(), "H")

    def test_horizontal_line(self) -> None:
        cursor = self.grid.cursor(1, 2, Direction.HORIZONTAL)
        self.assertEqual(cursor.line_text(), "FGHIJ")
        self.assertEqual(cursor.line_offset(), 2)

    def test_vertical_line(self) -> None:
        cursor = self.grid.cursor(2, 1, Direction.VERTICAL)
        self.assertEqual(cursor.line_text(), "BGLQ")
        self.assertEqual(cursor.line_offset(), 2)

    def test_diagonal_down_line(self) -> None:
        cursor = self.grid.cursor(2, 3, Direction.DIAGONAL_DOWN)
        self.assertEqual(cursor.line_text(), "BHNT")
        self.assertEqual(cursor.line_offset(), 2)

    def test_diagonal_up_line(self) -> None:
        cursor = self.grid.cursor(1, 2, Direction.DIAGONAL_UP)
        self.assertEqual(cursor.line_text(), "PLHD")
        self.assertEqual(cursor.line_offset(), 2)
        start = cursor.line_start()
        self.assertEqual((start.row, start.col), (3, 0))

    def test_offset_indexes_own_value(self) -> None:
        for direction in ALL_DIRECTIONS:
            for cursor in self.grid.cursors(direction):
                self.assertEqual(cursor.line_text()[cursor.line_offset()], cursor.value())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
