"""Word search puzzle generator.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.PuzzleGenerator``: places words and fills the grid.
- ``wordsearch.engine.generator.generate_puzzle``: one-call convenience wrapper.
- ``wordsearch.utils.pretty`` helpers: plain-text rendering of the grids.
"""

from .engine.generator import GeneratorConfig, PuzzleGenerator, PuzzleResult, generate_puzzle

__all__ = [
    "GeneratorConfig",
    "PuzzleGenerator",
    "PuzzleResult",
    "generate_puzzle",
]

__version__ = "0.1.0"
