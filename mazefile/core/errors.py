"""Exceptions raised by the maze file validator and codec."""

from enum import Enum
from typing import Optional


class FormatViolation(Enum):
    """Kinds of maze-file violations, in the order they are checked."""
    NOT_A_FILE = "not-a-file"
    UNREADABLE = "unreadable"
    EMPTY_FILE = "empty-file"
    WRONG_TOKEN_COUNT = "wrong-token-count"
    NON_NUMERIC_TOKEN = "non-numeric-token"
    UNEXPECTED_COORDINATE = "unexpected-coordinate"
    INVALID_WALL_VALUE = "invalid-wall-value"


class MazeFileError(Exception):
    """Base exception for maze file handling."""

    pass


class MazeFormatError(MazeFileError):
    """Exception raised when a maze file does not conform to the format.

    Attributes:
        kind: Which rule was violated.
        source: Path (or label) of the offending input.
        line_number: 1-based line of the violation, None for file-level problems.
    """

    def __init__(
        self,
        message: str,
        kind: FormatViolation,
        source: str,
        line_number: Optional[int] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.source = source
        self.line_number = line_number


class MazeGridError(MazeFileError, ValueError):
    """Exception raised when a grid cannot be written as a maze file."""

    pass


class MazeWriteError(MazeFileError):
    """Exception raised when a maze file cannot be written."""

    pass
