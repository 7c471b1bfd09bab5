"""Maze store backed by a directory of maze files."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from mazefile.config import Settings, get_settings
from mazefile.core import (
    Grid,
    MazeFormatError,
    MazeInfo,
    MazeWriteError,
    check_grid,
    get_maze_info,
    load_maze,
    save_maze,
)

logger = logging.getLogger(__name__)

MAZE_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]{1,64}")


class MazeNotFoundError(LookupError):
    """Exception raised when a named maze has no file in the store."""

    pass


@dataclass
class MazeEntry:
    """A maze file in the store and its conformance status."""

    name: str
    path: Path
    conformant: bool
    info: Optional[MazeInfo] = None
    error: Optional[str] = None


class MazeStore:
    """Names, lists, loads and saves maze files inside one directory."""

    def __init__(self, mazes_dir: Path | str, suffix: str = ".maz"):
        self.mazes_dir = Path(mazes_dir)
        self.suffix = suffix

    def path_for(self, name: str) -> Path:
        """
        Map a maze name to its file path.

        Raises:
            ValueError: If the name could escape the store directory.
        """
        if not MAZE_NAME_PATTERN.fullmatch(name):
            raise ValueError(
                f"Invalid maze name '{name}'. "
                "Use 1-64 letters, digits, underscores or hyphens."
            )
        return self.mazes_dir / f"{name}{self.suffix}"

    def exists(self, name: str) -> bool:
        """Check whether a maze file exists for the name."""
        return self.path_for(name).is_file()

    def list_mazes(self) -> list[MazeEntry]:
        """
        List every maze file in the store, sorted by name.

        Non-conformant files are included with their diagnostic instead of
        their shape.
        """
        if not self.mazes_dir.is_dir():
            logger.warning(f"Mazes directory not found: {self.mazes_dir}")
            return []

        entries = []
        for maze_file in sorted(self.mazes_dir.glob(f"*{self.suffix}")):
            try:
                grid = load_maze(maze_file)
            except MazeFormatError as e:
                logger.warning(str(e))
                entries.append(MazeEntry(
                    name=maze_file.stem,
                    path=maze_file,
                    conformant=False,
                    error=str(e),
                ))
                continue

            entries.append(MazeEntry(
                name=maze_file.stem,
                path=maze_file,
                conformant=True,
                info=get_maze_info(grid),
            ))

        return entries

    def load(self, name: str) -> Grid:
        """
        Load a maze by name.

        Raises:
            ValueError: If the name is invalid.
            MazeNotFoundError: If no file exists for the name.
            MazeFormatError: If the file is not conformant.
        """
        path = self.path_for(name)
        if not path.is_file():
            raise MazeNotFoundError(f"Maze not found: {name}")
        return load_maze(path)

    def save(self, name: str, grid: Grid) -> Path:
        """
        Save a maze by name, replacing any existing file.

        Raises:
            ValueError: If the name is invalid.
            MazeGridError: If the grid is empty or has an empty column.
            MazeWriteError: If the file cannot be written.
        """
        path = self.path_for(name)
        check_grid(grid)

        try:
            self.mazes_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MazeWriteError(f"Unable to create mazes directory \"{self.mazes_dir}\": {e}") from e

        save_maze(grid, path)
        return path


def get_maze_store(settings: Optional[Settings] = None) -> MazeStore:
    """Create a maze store for the configured directory."""
    settings = settings or get_settings()
    return MazeStore(settings.mazes_dir, suffix=settings.maze_file_suffix)
