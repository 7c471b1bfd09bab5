# Core module
from .errors import (
    FormatViolation,
    MazeFileError,
    MazeFormatError,
    MazeGridError,
    MazeWriteError,
)
from .grid import DIRECTIONS, Cell, Direction, Grid, MazeInfo, get_maze_info
from .maze_codec import (
    check_grid,
    dump_maze_text,
    load_all_mazes,
    load_maze,
    parse_maze_text,
    save_maze,
)
from .maze_validator import (
    MazeRecord,
    check_maze_file,
    check_maze_text,
    is_maze_file,
    iter_maze_records,
    validate_maze_text,
)

__all__ = [
    "FormatViolation",
    "MazeFileError",
    "MazeFormatError",
    "MazeGridError",
    "MazeWriteError",
    "DIRECTIONS",
    "Cell",
    "Direction",
    "Grid",
    "MazeInfo",
    "get_maze_info",
    "check_grid",
    "dump_maze_text",
    "load_all_mazes",
    "load_maze",
    "parse_maze_text",
    "save_maze",
    "MazeRecord",
    "check_maze_file",
    "check_maze_text",
    "is_maze_file",
    "iter_maze_records",
    "validate_maze_text",
]
