"""
Maze file validator.

Decides whether a file conforms to the maze file format and reports the
first violation found.

Maze File Format:
    One cell per line, six whitespace separated integers:

        x y north east south west

    - x selects the column, y the row within that column
    - the four wall values are 0 (open) or 1 (wall)
    - lines are sorted by x, then by y
    - the first line is (0, 0); each column starts at y = 0
    - x grows by exactly 1 when a new column starts, y by exactly 1
      within a column, so every (x, y) pair is unique

    Columns may have different lengths; the maze does not have to be
    rectangular. There is no header, footer or comment syntax.
"""

import io
import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, NamedTuple, Optional

from mazefile.core.errors import FormatViolation, MazeFormatError
from mazefile.core.grid import DIRECTIONS, Cell

logger = logging.getLogger(__name__)

TOKENS_PER_LINE = 2 + len(DIRECTIONS)
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
# ASCII whitespace only; other Unicode spaces stay inside a token
TOKEN_PATTERN = re.compile(r"[^ \t\n\r\f\v]+")
WALL_VALUES = (0, 1)


class MazeRecord(NamedTuple):
    """One validated line of a maze file."""

    x: int
    y: int
    cell: Cell


def iter_maze_records(lines: Iterable[str], source: str = "<text>") -> Iterator[MazeRecord]:
    """
    Validate maze lines in a single forward pass.

    The only state carried between lines is the expected (x, y) pair. A
    line is accepted when it either continues the current column or starts
    the next one at y = 0. Starting a new column requires at least one row
    in the current column, which is what forces the first line to be (0, 0).

    Args:
        lines: Lines of a maze file, with or without line terminators.
        source: Label used in diagnostics (usually the file path).

    Yields:
        MazeRecord for every accepted line, in file order.

    Raises:
        MazeFormatError: On the first line that breaks the format.
    """
    expected_x = 0
    expected_y = 0

    for line_number, line in enumerate(lines, start=1):
        tokens = TOKEN_PATTERN.findall(line)

        if len(tokens) != TOKENS_PER_LINE:
            raise MazeFormatError(
                f"\"{source}\" does not contain {TOKENS_PER_LINE} entries on each line: "
                f"line {line_number} contains {len(tokens)} entries.",
                kind=FormatViolation.WRONG_TOKEN_COUNT,
                source=source,
                line_number=line_number,
            )

        values = []
        for position, token in enumerate(tokens, start=1):
            value = None
            if INTEGER_PATTERN.fullmatch(token):
                try:
                    value = int(token)
                except ValueError:
                    # Digit strings past the interpreter's conversion limit
                    pass
            if value is None:
                shown = token if len(token) <= 32 else f"{token[:32]}..."
                raise MazeFormatError(
                    f"\"{source}\" contains non-numeric entries: the entry \"{shown}\" "
                    f"on line {line_number} in position {position} is not numeric.",
                    kind=FormatViolation.NON_NUMERIC_TOKEN,
                    source=source,
                    line_number=line_number,
                )
            values.append(value)

        x, y = values[0], values[1]
        if x == expected_x and y == expected_y:
            expected_y += 1
        elif x == expected_x + 1 and y == 0 and expected_y != 0:
            expected_x += 1
            expected_y = 1
        else:
            if expected_y == 0:
                expected = f"({expected_x}, {expected_y})"
            else:
                expected = f"({expected_x}, {expected_y}) or ({expected_x + 1}, 0)"
            raise MazeFormatError(
                f"\"{source}\" contains unexpected x and y values of {x} and {y} "
                f"on line {line_number}; expected {expected}.",
                kind=FormatViolation.UNEXPECTED_COORDINATE,
                source=source,
                line_number=line_number,
            )

        walls = values[2:]
        for position, value in enumerate(walls, start=3):
            if value not in WALL_VALUES:
                raise MazeFormatError(
                    f"\"{source}\" contains an invalid value of {value} in position {position} "
                    f"on line {line_number}. All wall values must be either \"0\" or \"1\".",
                    kind=FormatViolation.INVALID_WALL_VALUE,
                    source=source,
                    line_number=line_number,
                )

        yield MazeRecord(x, y, Cell.from_flags(walls))


def iter_maze_file_records(file_path: Path | str) -> Iterator[MazeRecord]:
    """
    Open a maze file and validate it line by line.

    Args:
        file_path: Path to the maze file.

    Yields:
        MazeRecord for every accepted line.

    Raises:
        MazeFormatError: If the path is not a readable, non-empty maze file.
    """
    file_path = Path(file_path)
    source = str(file_path)

    if not file_path.exists():
        raise MazeFormatError(
            f"\"{source}\" does not exist.",
            kind=FormatViolation.NOT_A_FILE,
            source=source,
        )

    if not file_path.is_file():
        raise MazeFormatError(
            f"\"{source}\" is not a file.",
            kind=FormatViolation.NOT_A_FILE,
            source=source,
        )

    try:
        # Lines end at "\n" only, the same split as for in-memory text
        with file_path.open("r", encoding="utf-8", errors="replace", newline="\n") as f:
            if not f.read(1):
                raise MazeFormatError(
                    f"\"{source}\" is empty.",
                    kind=FormatViolation.EMPTY_FILE,
                    source=source,
                )
            f.seek(0)
            yield from iter_maze_records(f, source)
    except OSError as e:
        raise MazeFormatError(
            f"Could not open \"{source}\" for maze validation: {e}",
            kind=FormatViolation.UNREADABLE,
            source=source,
        ) from e


def check_maze_file(file_path: Path | str) -> None:
    """
    Validate a maze file.

    Raises:
        MazeFormatError: Describing the first violation found.
    """
    for _ in iter_maze_file_records(file_path):
        pass


def is_maze_file(file_path: Path | str) -> bool:
    """
    Check whether a path holds a conformant maze file.

    Never raises for format or filesystem problems. Every rejection is
    logged as a warning naming the line and the offending value.

    Args:
        file_path: Path to the candidate file.

    Returns:
        True if the whole file conforms to the maze file format.
    """
    try:
        check_maze_file(file_path)
    except MazeFormatError as e:
        logger.warning(str(e))
        return False
    return True


def iter_maze_text_records(maze_text: str, source: str = "<text>") -> Iterator[MazeRecord]:
    """
    Validate maze text held in memory, line by line.

    Lines are split the way a file is read, so a trailing newline does not
    produce an extra empty line.

    Raises:
        MazeFormatError: If the text is empty or breaks the format.
    """
    if not maze_text:
        raise MazeFormatError(
            f"\"{source}\" is empty.",
            kind=FormatViolation.EMPTY_FILE,
            source=source,
        )

    yield from iter_maze_records(io.StringIO(maze_text, newline="\n"), source)


def check_maze_text(maze_text: str, source: str = "<text>") -> None:
    """
    Validate maze text held in memory.

    Raises:
        MazeFormatError: Describing the first violation found.
    """
    for _ in iter_maze_text_records(maze_text, source):
        pass


def validate_maze_text(maze_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Args:
        maze_text: Contents of a maze file.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        check_maze_text(maze_text)
        return True, None
    except MazeFormatError as e:
        return False, str(e)
