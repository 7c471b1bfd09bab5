"""API dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from mazefile.config import Settings, get_settings
from mazefile.services.maze_store import MazeStore, get_maze_store


def get_store(settings: Annotated[Settings, Depends(get_settings)]) -> MazeStore:
    """Get the maze store for the configured directory."""
    return get_maze_store(settings)


# Type aliases for cleaner route signatures
Store = Annotated[MazeStore, Depends(get_store)]
