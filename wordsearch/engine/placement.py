"""Placement search: find legal start positions for a word."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from ..core.constants import ALL_DIRECTIONS, SENTINEL, Direction
from ..core.exceptions import NoSpaceFoundError
from ..core.models import Placement
from ..utils.logger import get_logger
from .cursor import Cursor
from .grid import PuzzleGrid


LOGGER = get_logger(__name__)


def has_space(start: Cursor, word: str) -> bool:
    """Return ``True`` if ``word`` fits from ``start`` without letter conflicts.

    Cells may already hold the matching letter, which lets words cross.
    """

    current: Optional[Cursor] = start
    for letter in word:
        if current is None:
            return False
        existing = current.value()
        if existing != SENTINEL and existing != letter:
            return False
        current = current.next()
    return True


class PlacementSearch:
    """Places words one at a time, trying directions in random order."""

    def __init__(
        self,
        grid: PuzzleGrid,
        rng: random.Random,
        directions: Sequence[Direction] = ALL_DIRECTIONS,
    ) -> None:
        self.grid = grid
        self.rng = rng
        self.directions = list(directions)

    def find_placements(self, word: str) -> List[Cursor]:
        """Return every start cursor for ``word`` under the first direction that has any."""

        order = list(self.directions)
        self.rng.shuffle(order)
        for direction in order:
            candidates = [
                cursor for cursor in self.grid.cursors(direction) if has_space(cursor, word)
            ]
            if candidates:
                return candidates
            LOGGER.debug(
                "No space found with %s for %s, trying the next direction",
                direction.value,
                word,
            )
        raise NoSpaceFoundError(
            f"Cannot find a spot for {word!r} under any direction in a "
            f"{self.grid.bounds.rows}x{self.grid.bounds.cols} grid"
        )

    def place(self, word: str) -> Placement:
        candidates = self.find_placements(word)
        start = candidates[self.rng.randrange(len(candidates))]
        placement = self.grid.write_word(start, word)
        LOGGER.info(
            "Placed %s at (%s,%s) %s (%d candidates)",
            word,
            placement.start_row,
            placement.start_col,
            placement.direction.value,
            len(candidates),
        )
        return placement
