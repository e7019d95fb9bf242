"""Shared constants and enumerations for the word search generator."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


SENTINEL = "@"
BLANK = "-"
ALPHABET = string.ascii_uppercase


class Direction(str, Enum):
    """Linear layouts a word can follow through the grid."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"
    DIAGONAL_DOWN = "DIAGONAL_DOWN"  # left-top to right-bottom
    DIAGONAL_UP = "DIAGONAL_UP"  # left-bottom to right-top

    @property
    def step(self) -> Tuple[int, int]:
        return DIRECTION_STEPS[self]


DIRECTION_STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1),
}

ALL_DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
