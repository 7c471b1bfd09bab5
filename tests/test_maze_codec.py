"""Tests for loading and saving maze files."""

import logging
from pathlib import Path

import pytest

from conftest import SCENARIO_MAZE, SQUARE_MAZE
from mazefile.core.errors import FormatViolation, MazeFormatError, MazeGridError, MazeWriteError
from mazefile.core.grid import Cell, Direction, get_maze_info
from mazefile.core.maze_codec import (
    build_grid,
    dump_maze_text,
    load_all_mazes,
    load_maze,
    parse_maze_text,
    save_maze,
)
from mazefile.core.maze_validator import is_maze_file, iter_maze_records


class TestLoadMaze:
    """Tests for loading maze files into grids."""

    def test_load_scenario(self, write_maze):
        """Test the scenario file loads into two columns of 2 and 1 cells."""
        grid = load_maze(write_maze(SCENARIO_MAZE))

        assert len(grid) == 2
        assert [len(column) for column in grid] == [2, 1]
        assert grid[0][0] == Cell(north=True, east=True, south=False, west=False)
        assert grid[0][1] == Cell(north=False, east=True, south=True, west=False)
        assert grid[1][0] == Cell(north=True, east=False, south=False, west=True)

    def test_load_square(self, write_maze):
        """Test a rectangular maze loads with walls in N, E, S, W order."""
        grid = load_maze(write_maze(SQUARE_MAZE))

        info = get_maze_info(grid)
        assert info.columns == 3
        assert info.max_height == 3
        assert info.is_rectangular is True
        assert grid[1][1].has_wall(Direction.NORTH) is True
        assert grid[1][1].has_wall(Direction.WEST) is False
        assert grid[0][0].walls == {
            Direction.NORTH: False,
            Direction.EAST: True,
            Direction.SOUTH: True,
            Direction.WEST: True,
        }

    def test_load_single_row_column(self, write_maze):
        """Test a one-cell column followed by a two-cell column."""
        grid = load_maze(write_maze("0 0 0 0 0 0\n1 0 0 0 0 0\n1 1 0 0 0 0\n"))

        assert [len(column) for column in grid] == [1, 2]

    def test_load_single_cell(self, write_maze):
        """Test the last column is flushed even when it is the only one."""
        grid = load_maze(write_maze("0 0 1 1 1 1\n"))

        assert grid == [[Cell(True, True, True, True)]]

    def test_load_non_conformant_raises(self, write_maze):
        """Test loading a non-conformant file fails loudly."""
        path = write_maze("0 0 0 0 0 0\n2 0 0 0 0 0\n")

        with pytest.raises(MazeFormatError) as excinfo:
            load_maze(path)

        assert excinfo.value.kind == FormatViolation.UNEXPECTED_COORDINATE
        assert excinfo.value.line_number == 2

    def test_load_missing_file_raises(self, tmp_path):
        """Test loading a missing file fails loudly."""
        with pytest.raises(MazeFormatError) as excinfo:
            load_maze(tmp_path / "missing.maz")

        assert excinfo.value.kind == FormatViolation.NOT_A_FILE

    def test_build_grid_groups_by_column(self):
        """Test records are grouped into a new column whenever x advances."""
        lines = "0 0 0 0 0 0\n0 1 0 0 0 0\n1 0 0 0 0 0\n2 0 0 0 0 0\n2 1 0 0 0 0\n"
        grid = build_grid(iter_maze_records(lines.splitlines()))

        assert [len(column) for column in grid] == [2, 1, 2]


class TestSaveMaze:
    """Tests for writing grids to maze files."""

    def test_save_scenario_reproduces_file(self, write_maze, tmp_path):
        """Test load then save writes the same bytes."""
        grid = load_maze(write_maze(SCENARIO_MAZE))
        out = tmp_path / "out.maz"

        save_maze(grid, out)

        assert out.read_bytes() == SCENARIO_MAZE.encode()

    def test_saved_file_is_conformant(self, tmp_path):
        """Test saved output passes the validator."""
        grid = [
            [Cell(north=True), Cell(east=True), Cell(south=True)],
            [Cell(west=True)],
        ]
        out = tmp_path / "built.maz"

        save_maze(grid, out)

        assert is_maze_file(out) is True
        assert out.read_text() == (
            "0 0 1 0 0 0\n"
            "0 1 0 1 0 0\n"
            "0 2 0 0 1 0\n"
            "1 0 0 0 0 1\n"
        )

    @pytest.mark.parametrize("text", [SCENARIO_MAZE, SQUARE_MAZE, "0 0 0 0 0 0\n1 0 1 1 1 1\n1 1 0 1 0 1\n"])
    def test_round_trip(self, write_maze, tmp_path, text):
        """Test save followed by load gives back an equal grid."""
        grid = load_maze(write_maze(text))
        out = tmp_path / "round_trip.maz"

        save_maze(grid, out)

        assert is_maze_file(out) is True
        assert load_maze(out) == grid

    def test_save_overwrites(self, write_maze):
        """Test saving replaces an existing file."""
        path = write_maze(SQUARE_MAZE)

        save_maze([[Cell()]], path)

        assert path.read_text() == "0 0 0 0 0 0\n"

    def test_save_empty_grid_raises(self, tmp_path):
        """Test a grid with no columns is refused before touching the file."""
        out = tmp_path / "empty.maz"

        with pytest.raises(MazeGridError, match="no columns"):
            save_maze([], out)

        assert not out.exists()

    def test_save_empty_column_raises(self, tmp_path):
        """Test a grid with an empty column is refused."""
        out = tmp_path / "gap.maz"

        with pytest.raises(MazeGridError, match="Column 1 has no cells"):
            save_maze([[Cell()], [], [Cell()]], out)

        assert not out.exists()

    def test_save_unwritable_destination_raises(self, tmp_path):
        """Test a destination that cannot be opened raises MazeWriteError."""
        out = tmp_path / "no_such_dir" / "maze.maz"

        with pytest.raises(MazeWriteError) as excinfo:
            save_maze([[Cell()]], out)

        assert isinstance(excinfo.value.__cause__, OSError)


class TestMazeText:
    """Tests for the in-memory text helpers."""

    def test_parse_maze_text(self):
        """Test text parses to the same grid as the file."""
        grid = parse_maze_text(SCENARIO_MAZE)

        assert [len(column) for column in grid] == [2, 1]
        assert grid[1][0].to_flags() == (1, 0, 0, 1)

    def test_parse_maze_text_invalid(self):
        """Test invalid text raises MazeFormatError."""
        with pytest.raises(MazeFormatError):
            parse_maze_text("0 0 0 0 0\n")

    def test_dump_matches_saved_file(self, tmp_path):
        """Test dump_maze_text renders exactly what save_maze writes."""
        grid = parse_maze_text(SQUARE_MAZE)
        out = tmp_path / "square.maz"

        save_maze(grid, out)

        assert dump_maze_text(grid) == out.read_text() == SQUARE_MAZE

    def test_dump_empty_grid_raises(self):
        """Test dumping an empty grid raises MazeGridError."""
        with pytest.raises(MazeGridError):
            dump_maze_text([])


class TestLoadAllMazes:
    """Tests for loading all mazes from a directory."""

    def test_load_all_mazes(self, mazes_dir, caplog):
        """Test conformant files are loaded and broken ones are skipped."""
        with caplog.at_level(logging.WARNING, logger="mazefile"):
            result = load_all_mazes(mazes_dir)

        assert list(result) == ["scenario", "square"]
        assert len(result["square"]) == 3
        assert any("broken.maz" in r.getMessage() for r in caplog.records)

    def test_load_all_mazes_custom_pattern(self, mazes_dir):
        """Test the glob pattern selects the files."""
        (mazes_dir / "extra.txt").write_text(SCENARIO_MAZE)

        result = load_all_mazes(mazes_dir, pattern="*.txt")

        assert list(result) == ["extra"]

    def test_load_all_mazes_empty_directory(self, tmp_path):
        """Test loading from empty directory."""
        assert load_all_mazes(tmp_path) == {}

    def test_load_all_mazes_nonexistent_directory(self):
        """Test loading from nonexistent directory."""
        with pytest.raises(FileNotFoundError):
            load_all_mazes("/nonexistent/path")

    def test_load_all_mazes_not_a_directory(self, write_maze):
        """Test loading from a file path."""
        with pytest.raises(NotADirectoryError):
            load_all_mazes(write_maze(SCENARIO_MAZE))

    def test_load_all_mazes_accepts_path_object(self, mazes_dir):
        """Test the directory may be a Path."""
        assert "scenario" in load_all_mazes(Path(mazes_dir))
