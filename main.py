"""CLI entrypoint for the word search puzzle generator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from wordsearch.core.exceptions import WordSearchError
from wordsearch.engine.generator import GeneratorConfig, PuzzleGenerator
from wordsearch.utils.logger import configure_logging, get_logger
from wordsearch.utils.pretty import pretty_print_puzzle, print_puzzle_stats


LOGGER = get_logger(__name__)


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate word search puzzles with collision-free filler letters",
    )
    parser.add_argument("--height", type=int, required=True, help="Grid height in cells")
    parser.add_argument("--width", type=int, required=True, help="Grid width in cells")
    parser.add_argument("--words", nargs="+", metavar="WORD", help="Words to hide in the grid")
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--bias",
        type=float,
        default=0.5,
        help="Probability of drawing filler letters from the word list (default 0.5)",
    )
    parser.add_argument(
        "--max-fill-attempts",
        type=int,
        default=1000,
        help="Letters to try per empty cell before giving up",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip the final integrity checks",
    )
    parser.add_argument("--stats", action="store_true", help="Print placement statistics")
    parser.add_argument(
        "--show-fill-rejections",
        action="store_true",
        help="Log every rejected filler letter (needs --log-level DEBUG)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level, show_fill_rejections=args.show_fill_rejections)

    words: List[str] = []
    if args.words:
        words.extend(args.words)
    if args.words_file:
        words.extend(parse_words_file(args.words_file))
    if not words:
        parser.error("provide at least one word via --words or --words-file")
    if not 0.0 <= args.bias <= 1.0:
        parser.error("--bias must be between 0 and 1")

    config = GeneratorConfig(
        height=args.height,
        width=args.width,
        seed=args.seed,
        bias=args.bias,
        max_fill_attempts=args.max_fill_attempts,
        validate=not args.no_validate,
    )
    try:
        result = PuzzleGenerator(config, words).generate()
    except WordSearchError as exc:
        LOGGER.error("Puzzle generation failed: %s", exc)
        return 1

    pretty_print_puzzle(result)
    if args.stats:
        print()
        print_puzzle_stats(result)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
