"""Grid representation and helper utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from ..core.constants import ALL_DIRECTIONS, BLANK, SENTINEL, Bounds, Direction
from ..core.exceptions import NoSpaceFoundError
from ..core.models import Placement
from ..utils.logger import get_logger
from .cursor import Cursor


LOGGER = get_logger(__name__)

Matrix = List[List[str]]


@dataclass
class GridConfig:
    """Configuration values driving the grid layout."""

    height: int
    width: int

    def bounds(self) -> Bounds:
        return Bounds(rows=self.height, cols=self.width)


class PuzzleGrid:
    """Owns the public ``puzzle`` matrix and its ``answer`` counterpart."""

    def __init__(self, config: GridConfig) -> None:
        if config.height < 1 or config.width < 1:
            raise ValueError(f"Grid dimensions must be positive, got {config.height}x{config.width}")
        self.config = config
        self.bounds = config.bounds()
        self.puzzle: Matrix = [[SENTINEL] * self.bounds.cols for _ in range(self.bounds.rows)]
        self.answer: Matrix = [[SENTINEL] * self.bounds.cols for _ in range(self.bounds.rows)]

    # ------------------------------------------------------------------
    # Cursors
    # ------------------------------------------------------------------
    def cursor(self, row: int, col: int, direction: Direction) -> Cursor:
        return Cursor(self, row, col, direction)

    def cursors(self, direction: Direction) -> Iterator[Cursor]:
        """Yield a cursor for every cell in row-major order."""

        for row in range(self.bounds.rows):
            for col in range(self.bounds.cols):
                yield Cursor(self, row, col, direction)

    def lines(self, directions: Iterable[Direction] = ALL_DIRECTIONS) -> Iterator[Tuple[Cursor, str]]:
        """Yield ``(start, text)`` for every full line of the puzzle."""

        for direction in directions:
            for start in self.cursors(direction):
                if start.prev() is None:
                    yield start, start.line_text()

    # ------------------------------------------------------------------
    # Cell manipulation
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> str:
        return self.puzzle[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.puzzle[row][col] == SENTINEL

    def empty_cells(self) -> Iterator[Tuple[int, int]]:
        for row in range(self.bounds.rows):
            for col in range(self.bounds.cols):
                if self.is_empty(row, col):
                    yield row, col

    def write_word(self, start: Cursor, word: str) -> Placement:
        """Write ``word`` into both matrices along the cursor's direction."""

        current = start
        for index, letter in enumerate(word):
            if current is None:
                raise NoSpaceFoundError(
                    f"Word {word!r} ran off the grid at letter {index} from "
                    f"{(start.row, start.col)} {start.direction.value}"
                )
            self.puzzle[current.row][current.col] = letter
            self.answer[current.row][current.col] = letter
            current = current.next()
        LOGGER.debug(
            "Wrote %s at (%s,%s) %s", word, start.row, start.col, start.direction.value
        )
        return Placement(
            word=word,
            start_row=start.row,
            start_col=start.col,
            direction=start.direction,
        )

    def mark_blank(self, row: int, col: int) -> None:
        self.answer[row][col] = BLANK

    def set_filler(self, row: int, col: int, letter: str) -> None:
        self.puzzle[row][col] = letter

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def get_puzzle(self) -> Matrix:
        return [list(row) for row in self.puzzle]

    def get_answer(self) -> Matrix:
        return [list(row) for row in self.answer]
