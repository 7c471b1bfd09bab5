"""
Maze file loader and writer.

Converts between maze files and in-memory grids. Loading always goes
through the validator's scan, so a non-conformant file raises
MazeFormatError instead of producing a half-built grid.
"""

import logging
from pathlib import Path
from typing import Iterable

from mazefile.core.errors import MazeFormatError, MazeGridError, MazeWriteError
from mazefile.core.grid import Column, Grid
from mazefile.core.maze_validator import (
    MazeRecord,
    iter_maze_file_records,
    iter_maze_text_records,
)

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "*.maz"


def build_grid(records: Iterable[MazeRecord]) -> Grid:
    """
    Group validated records into columns.

    A record whose x is past the number of completed columns closes the
    current column. The last column has no terminator in the file and is
    flushed once the records run out.
    """
    grid: Grid = []
    column: Column = []

    for record in records:
        if len(grid) < record.x:
            grid.append(column)
            column = []
        column.append(record.cell)

    grid.append(column)
    return grid


def load_maze(file_path: Path | str) -> Grid:
    """
    Load a maze file into a grid.

    Args:
        file_path: Path to a conformant maze file.

    Returns:
        Grid of columns, one entry per distinct x value in the file.

    Raises:
        MazeFormatError: If the file is missing, unreadable or not conformant.
    """
    grid = build_grid(iter_maze_file_records(file_path))
    logger.debug(f"Loaded maze {file_path} ({len(grid)} columns)")
    return grid


def parse_maze_text(maze_text: str, source: str = "<text>") -> Grid:
    """
    Parse maze text held in memory into a grid.

    Raises:
        MazeFormatError: If the text is empty or not conformant.
    """
    return build_grid(iter_maze_text_records(maze_text, source))


def check_grid(grid: Grid) -> None:
    """Make sure the grid can be written as a conformant maze file."""
    if not grid:
        raise MazeGridError("Maze has no columns")

    for x, column in enumerate(grid):
        if not column:
            raise MazeGridError(f"Column {x} has no cells")


def iter_maze_lines(grid: Grid) -> Iterable[str]:
    """Yield the newline-terminated file lines for a grid."""
    for x, column in enumerate(grid):
        for y, cell in enumerate(column):
            walls = " ".join(str(flag) for flag in cell.to_flags())
            yield f"{x} {y} {walls}\n"


def dump_maze_text(grid: Grid) -> str:
    """
    Render a grid in the maze file format.

    Raises:
        MazeGridError: If the grid is empty or has an empty column.
    """
    check_grid(grid)
    return "".join(iter_maze_lines(grid))


def save_maze(grid: Grid, file_path: Path | str) -> None:
    """
    Write a grid to a maze file, replacing any existing file.

    The write is not atomic; a failure part way through can leave a
    truncated file behind.

    Args:
        grid: Grid to save.
        file_path: Destination path.

    Raises:
        MazeGridError: If the grid is empty or has an empty column.
        MazeWriteError: If the destination cannot be written.
    """
    check_grid(grid)
    file_path = Path(file_path)

    try:
        with file_path.open("w", encoding="utf-8", newline="\n") as f:
            f.writelines(iter_maze_lines(grid))
    except OSError as e:
        logger.warning(f"Unable to save maze to \"{file_path}\": {e}")
        raise MazeWriteError(f"Unable to save maze to \"{file_path}\": {e}") from e

    logger.info(f"Saved maze {file_path} ({len(grid)} columns)")


def load_all_mazes(mazes_dir: Path | str, pattern: str = DEFAULT_PATTERN) -> dict[str, Grid]:
    """
    Load all maze files from a directory.

    Non-conformant files are logged and skipped.

    Args:
        mazes_dir: Path to the directory containing maze files.
        pattern: Glob pattern selecting maze files.

    Returns:
        Dict mapping file stem to grid, in file name order.

    Raises:
        FileNotFoundError: If the directory doesn't exist.
        NotADirectoryError: If the path is not a directory.
    """
    mazes_dir = Path(mazes_dir)

    if not mazes_dir.exists():
        raise FileNotFoundError(f"Mazes directory not found: {mazes_dir}")

    if not mazes_dir.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {mazes_dir}")

    mazes = {}
    for maze_file in sorted(mazes_dir.glob(pattern)):
        try:
            mazes[maze_file.stem] = load_maze(maze_file)
        except MazeFormatError as e:
            # Log error but continue loading other mazes
            logger.warning(f"Failed to load {maze_file}: {e}")

    return mazes
