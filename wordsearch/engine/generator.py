"""Main word search generator orchestration.

Two-phase approach:
  1. Placement: write each word, in input order, at a random legal position.
  2. Fill: give every remaining cell a random letter that does not spell any
     word through that cell.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.constants import ALL_DIRECTIONS, ALPHABET, Direction
from ..core.exceptions import FillExhaustedError, InvalidWordError, ValidationError
from ..core.models import Placement
from ..utils.logger import get_logger
from .grid import GridConfig, Matrix, PuzzleGrid
from .placement import PlacementSearch
from .validator import FillValidator, PuzzleValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    height: int
    width: int
    seed: Optional[int] = None
    bias: float = 0.5
    max_fill_attempts: int = 1000
    validate: bool = True

    def to_grid_config(self) -> GridConfig:
        return GridConfig(height=self.height, width=self.width)


@dataclass
class PuzzleResult:
    grid: PuzzleGrid
    placements: List[Placement]
    validation_messages: List[str] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def puzzle(self) -> Matrix:
        return self.grid.get_puzzle()

    @property
    def answer(self) -> Matrix:
        return self.grid.get_answer()


def normalize_word(word: str) -> str:
    return word.strip().upper()


class LetterSource:
    """Draws candidate filler letters.

    ``bias`` is the chance of picking a letter out of the word list instead of
    the whole alphabet. Higher values leave more near-misses in the puzzle.
    """

    def __init__(self, words: Sequence[str], rng: random.Random, bias: float = 0.5) -> None:
        if not 0.0 <= bias <= 1.0:
            raise ValueError(f"Bias must be within [0, 1], got {bias}")
        self.words = list(words)
        self.rng = rng
        self.bias = bias

    def draw(self) -> str:
        if self.words and self.rng.random() < self.bias:
            word = self.words[self.rng.randrange(len(self.words))]
            return word[self.rng.randrange(len(word))]
        return ALPHABET[self.rng.randrange(len(ALPHABET))]


class PuzzleGenerator:
    """High-level orchestrator: word placement then filler letters."""

    def __init__(
        self,
        config: GeneratorConfig,
        words: Sequence[str],
        rng: Optional[random.Random] = None,
        directions: Sequence[Direction] = ALL_DIRECTIONS,
    ) -> None:
        if config.max_fill_attempts < 1:
            raise ValueError("max_fill_attempts must be at least 1")
        self.config = config
        self.words = [normalize_word(word) for word in words]
        for word in self.words:
            self._validate_word(word)
        self.rng = rng or random.Random(config.seed)
        self.directions = list(directions)
        self.letters = LetterSource(self.words, self.rng, config.bias)
        self.fill_validator = FillValidator(self.words)
        self.validator = PuzzleValidator(self.words)

    def _validate_word(self, word: str) -> None:
        if not word:
            raise InvalidWordError("Empty words cannot be placed")
        if len(word) > self.config.height and len(word) > self.config.width:
            raise InvalidWordError(
                f"Word {word!r} ({len(word)} letters) is longer than both grid "
                f"dimensions {self.config.height}x{self.config.width}"
            )

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self) -> PuzzleResult:
        grid = PuzzleGrid(self.config.to_grid_config())
        LOGGER.info(
            "Generating %sx%s puzzle with %s words",
            grid.bounds.rows,
            grid.bounds.cols,
            len(self.words),
        )
        placements = self._place_words(grid)
        filled = self._fill_empty_cells(grid)
        LOGGER.info("Filled %s empty cells", filled)

        messages: List[str] = []
        if self.config.validate:
            validation = self.validator.validate(grid, placements)
            if not validation.ok:
                raise ValidationError(f"Puzzle validation failed: {validation.messages}")
            messages = validation.messages
        return PuzzleResult(
            grid=grid,
            placements=placements,
            validation_messages=messages,
            seed=self.config.seed,
        )

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------
    def _place_words(self, grid: PuzzleGrid) -> List[Placement]:
        search = PlacementSearch(grid, self.rng, self.directions)
        return [search.place(word) for word in self.words]

    def _fill_empty_cells(self, grid: PuzzleGrid) -> int:
        empty = list(grid.empty_cells())
        for row, col in empty:
            grid.mark_blank(row, col)
            grid.set_filler(row, col, self._find_filler(grid, row, col))
        return len(empty)

    def _find_filler(self, grid: PuzzleGrid, row: int, col: int) -> str:
        for _ in range(self.config.max_fill_attempts):
            letter = self.letters.draw()
            if self.fill_validator.is_valid_at(letter, grid, row, col):
                return letter
        raise FillExhaustedError(
            f"No valid filler letter at ({row},{col}) after "
            f"{self.config.max_fill_attempts} attempts"
        )


def generate_puzzle(
    height: int,
    width: int,
    words: Sequence[str],
    seed: Optional[int] = None,
    bias: float = 0.5,
    max_fill_attempts: int = 1000,
) -> PuzzleResult:
    """Build and run a :class:`PuzzleGenerator` in one call."""

    config = GeneratorConfig(
        height=height,
        width=width,
        seed=seed,
        bias=bias,
        max_fill_attempts=max_fill_attempts,
    )
    return PuzzleGenerator(config, words).generate()
