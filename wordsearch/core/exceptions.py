"""Custom exception hierarchy for word search generation."""


class WordSearchError(Exception):
    """Base exception for generator failures."""


class InvalidWordError(WordSearchError):
    """Raised when a word can never fit the requested grid."""


class NoSpaceFoundError(WordSearchError):
    """Raised when a word has no legal position under any direction."""


class OutOfBoundsError(WordSearchError):
    """Raised when a cursor is built outside the grid."""


class FillExhaustedError(WordSearchError):
    """Raised when no filler letter passes validation within the attempt cap."""


class ValidationError(WordSearchError):
    """Raised when the finished puzzle fails the integrity checks."""
