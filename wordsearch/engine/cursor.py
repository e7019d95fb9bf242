"""Directional cursors over the puzzle grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Optional

from ..core.constants import Direction
from ..core.exceptions import OutOfBoundsError

if TYPE_CHECKING:
    from .grid import PuzzleGrid


@dataclass(frozen=True)
class Cursor:
    """A grid position bound to one direction.

    Cursors only read the grid they point into. Stepping returns a new cursor
    (or ``None`` at the grid edge) and never mutates the current one, so each
    caller can hold independent cursors over the same grid.
    """

    grid: PuzzleGrid = field(repr=False, compare=False)
    row: int
    col: int
    direction: Direction

    def __post_init__(self) -> None:
        if not self.grid.bounds.contains(self.row, self.col):
            raise OutOfBoundsError(
                f"Illegal position {(self.row, self.col)} for a "
                f"{self.grid.bounds.rows}x{self.grid.bounds.cols} grid"
            )

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next(self) -> Optional[Cursor]:
        dr, dc = self.direction.step
        return self._moved(dr, dc)

    def prev(self) -> Optional[Cursor]:
        dr, dc = self.direction.step
        return self._moved(-dr, -dc)

    def _moved(self, dr: int, dc: int) -> Optional[Cursor]:
        row, col = self.row + dr, self.col + dc
        if not self.grid.bounds.contains(row, col):
            return None
        return Cursor(self.grid, row, col, self.direction)

    def line_start(self) -> Cursor:
        current = self
        previous = current.prev()
        while previous is not None:
            current = previous
            previous = current.prev()
        return current

    def walk(self) -> Iterator[Cursor]:
        """Yield this cursor and every following one up to the grid edge."""

        current: Optional[Cursor] = self
        while current is not None:
            yield current
            current = current.next()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def value(self) -> str:
        return self.grid.cell(self.row, self.col)

    def line_text(self) -> str:
        """Return the puzzle characters of the whole line through this cursor."""

        return "".join(cursor.value() for cursor in self.line_start().walk())

    def line_offset(self) -> int:
        """Return this cursor's index within :meth:`line_text`."""

        offset = 0
        previous = self.prev()
        while previous is not None:
            offset += 1
            previous = previous.prev()
        return offset
