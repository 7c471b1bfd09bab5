"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from mazefile.config import Settings, get_settings
from mazefile.main import app

# Two columns: column 0 has two cells, column 1 has one
SCENARIO_MAZE = "0 0 1 1 0 0\n0 1 0 1 1 0\n1 0 1 0 0 1\n"

SQUARE_MAZE = (
    "0 0 0 1 1 1\n"
    "0 1 0 0 0 1\n"
    "0 2 1 0 0 1\n"
    "1 0 0 0 1 1\n"
    "1 1 1 0 0 0\n"
    "1 2 1 0 1 0\n"
    "2 0 1 1 1 0\n"
    "2 1 0 1 1 0\n"
    "2 2 1 1 0 0\n"
)


@pytest.fixture
def write_maze(tmp_path: Path):
    """Write maze text to a file under tmp_path and return its path."""

    def _write(text: str, name: str = "maze.maz") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8", newline="")
        return path

    return _write


@pytest.fixture
def mazes_dir(tmp_path: Path) -> Path:
    """Create a maze store directory with two good files and one bad one."""
    directory = tmp_path / "mazes"
    directory.mkdir()
    (directory / "scenario.maz").write_text(SCENARIO_MAZE)
    (directory / "square.maz").write_text(SQUARE_MAZE)
    (directory / "broken.maz").write_text("0 0 1 1 0 0\n2 0 0 0 0 0\n")
    (directory / "notes.txt").write_text("not a maze")
    return directory


@pytest.fixture
def test_settings(mazes_dir: Path) -> Settings:
    """Settings pointing the maze store at the temporary directory."""
    return Settings(mazes_dir=mazes_dir)


@pytest_asyncio.fixture(scope="function")
async def client(test_settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    app.dependency_overrides[get_settings] = lambda: test_settings

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
