"""Pretty-print helpers for word search grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Sequence

from ..core.constants import BLANK

if TYPE_CHECKING:
    from ..engine.generator import PuzzleResult


def format_grid(matrix: Sequence[Sequence[str]]) -> str:
    """Render rows of space-separated characters, one row per line."""

    return "\n".join(" ".join(row) for row in matrix)


def pretty_print_puzzle(result: PuzzleResult, *, show_answer: bool = True, stream=None) -> None:
    """Print the puzzle, then (optionally) a blank line and the answer."""

    stream = stream or sys.stdout
    print(format_grid(result.puzzle), file=stream)
    if show_answer:
        print(file=stream)
        print(format_grid(result.answer), file=stream)


def print_puzzle_stats(result: PuzzleResult, *, stream=None) -> None:
    stream = stream or sys.stdout
    grid = result.grid
    total_cells = grid.bounds.rows * grid.bounds.cols
    filler_cells = sum(row.count(BLANK) for row in grid.answer)
    letter_cells = total_cells - filler_cells

    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid.bounds.rows} x {grid.bounds.cols} ({total_cells} cells)", file=stream)
    print(f"  Word letters:  {letter_cells} ({letter_cells / total_cells * 100:.0f}%)", file=stream)
    print(f"  Filler:        {filler_cells}", file=stream)

    placements = result.placements
    by_direction = Counter(p.direction.value for p in placements)
    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(placements)}", file=stream)
    if by_direction:
        dist_parts = [f"{name}:{count}" for name, count in sorted(by_direction.items())]
        print(f"  Directions:    {' '.join(dist_parts)}", file=stream)
    for p in placements:
        print(f"  {p.word:<12} ({p.start_row},{p.start_col}) {p.direction.value}", file=stream)

    if result.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in result.validation_messages:
            print(f"  {msg}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
