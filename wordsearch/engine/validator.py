"""Filler letter checks and deterministic validation of finished puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from ..core.constants import ALL_DIRECTIONS, ALPHABET, BLANK, SENTINEL, Direction
from ..core.exceptions import ValidationError
from ..core.models import Placement
from ..utils.logger import get_logger
from .cursor import Cursor
from .grid import PuzzleGrid


LOGGER = get_logger(__name__)


class FillValidator:
    """Rejects filler letters that would spell a target word through their cell."""

    def __init__(
        self,
        words: Sequence[str],
        directions: Sequence[Direction] = ALL_DIRECTIONS,
    ) -> None:
        self.words = list(words)
        self.directions = list(directions)

    def conflicting_word(self, letter: str, cursor: Cursor) -> Optional[str]:
        """Return the first word ``letter`` would spell along ``cursor``'s line.

        Only windows that contain the cursor's own cell are searched: any new
        occurrence has to pass through the cell being filled.
        """

        line = cursor.line_text()
        offset = cursor.line_offset()
        line = line[:offset] + letter + line[offset + 1:]
        for word in self.words:
            start = max(0, offset - len(word) + 1)
            end = min(len(line), offset + len(word))
            if word in line[start:end]:
                return word
        return None

    def is_valid_fill(self, letter: str, cursor: Cursor) -> bool:
        return self.conflicting_word(letter, cursor) is None

    def is_valid_at(self, letter: str, grid: PuzzleGrid, row: int, col: int) -> bool:
        """Check ``letter`` at ``(row, col)`` against every direction."""

        for direction in self.directions:
            cursor = grid.cursor(row, col, direction)
            word = self.conflicting_word(letter, cursor)
            if word is not None:
                LOGGER.debug(
                    "Letter %s failed at (%s,%s) for %s (spells %s), changing to another letter",
                    letter,
                    row,
                    col,
                    direction.value,
                    word,
                )
                return False
        return True


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs deterministic validation over the finished grid."""

    def __init__(self, words: Sequence[str]) -> None:
        self.words = list(words)

    def validate(self, grid: PuzzleGrid, placements: Sequence[Placement]) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_placements(grid, placements)
            self._check_cells(grid)
            self._check_no_accidental_words(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_placements(self, grid: PuzzleGrid, placements: Sequence[Placement]) -> None:
        placed_words = {placement.word for placement in placements}
        for word in self.words:
            if word not in placed_words:
                raise ValidationError(f"Word '{word}' has no recorded placement")
        for placement in placements:
            spelled = []
            for row, col in placement.cells:
                if not grid.bounds.contains(row, col):
                    raise ValidationError(
                        f"Placement of '{placement.word}' leaves the grid at ({row},{col})"
                    )
                spelled.append(grid.answer[row][col])
            if "".join(spelled) != placement.word:
                raise ValidationError(
                    f"Answer spells '{''.join(spelled)}' instead of '{placement.word}' "
                    f"at ({placement.start_row},{placement.start_col})"
                )

    def _check_cells(self, grid: PuzzleGrid) -> None:
        for r in range(grid.bounds.rows):
            for c in range(grid.bounds.cols):
                shown = grid.puzzle[r][c]
                solution = grid.answer[r][c]
                if shown == SENTINEL or solution == SENTINEL:
                    raise ValidationError(f"Unfilled cell at ({r},{c})")
                if solution == BLANK:
                    if shown not in ALPHABET:
                        raise ValidationError(f"Invalid filler '{shown}' at ({r},{c})")
                elif shown != solution:
                    raise ValidationError(
                        f"Puzzle shows '{shown}' but answer holds '{solution}' at ({r},{c})"
                    )

    def _check_no_accidental_words(self, grid: PuzzleGrid) -> None:
        for start, text in grid.lines():
            cells = None
            for word in self.words:
                for index in _occurrences(text, word):
                    if cells is None:
                        cells = list(start.walk())
                    span = cells[index:index + len(word)]
                    if any(grid.answer[c.row][c.col] == BLANK for c in span):
                        raise ValidationError(
                            f"Accidental '{word}' through filler starting at "
                            f"({span[0].row},{span[0].col}) {start.direction.value}"
                        )


def _occurrences(text: str, word: str) -> Iterator[int]:
    index = text.find(word)
    while index != -1:
        yield index
        index = text.find(word, index + 1)
