"""
Maze grid data model.

A grid is a list of columns, each column a list of cells, addressed
``grid[x][y]``. Columns may differ in length; the maze does not have to be
rectangular.

Each cell carries four wall flags, one per cardinal direction, stored in the
fixed order used by the file format: north, east, south, west.
"""

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Cardinal directions, in maze-file wall order."""
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def index(self) -> int:
        """Position of this direction's flag among the four wall tokens."""
        return DIRECTIONS.index(self)


DIRECTIONS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)


@dataclass(frozen=True)
class Cell:
    """One maze position and the walls around it."""
    north: bool = False
    east: bool = False
    south: bool = False
    west: bool = False

    @classmethod
    def from_flags(cls, flags: "tuple[int, ...] | list[int]") -> "Cell":
        """Build a cell from four 0/1 wall values in N, E, S, W order."""
        if len(flags) != len(DIRECTIONS):
            raise ValueError(f"Expected {len(DIRECTIONS)} wall flags, got {len(flags)}")
        return cls(*(flag == 1 for flag in flags))

    def has_wall(self, direction: Direction) -> bool:
        """Check for a wall on the given side."""
        return getattr(self, direction.value)

    @property
    def walls(self) -> dict[Direction, bool]:
        """Wall flags keyed by direction."""
        return {direction: self.has_wall(direction) for direction in DIRECTIONS}

    def to_flags(self) -> tuple[int, int, int, int]:
        """Wall flags as 0/1 values in N, E, S, W order."""
        return tuple(1 if self.has_wall(direction) else 0 for direction in DIRECTIONS)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {direction.value: self.has_wall(direction) for direction in DIRECTIONS}


Column = list[Cell]
Grid = list[Column]


@dataclass
class MazeInfo:
    """Shape summary of a grid."""
    columns: int
    max_height: int
    column_heights: list[int]
    cell_count: int
    is_rectangular: bool

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "columns": self.columns,
            "max_height": self.max_height,
            "column_heights": list(self.column_heights),
            "cell_count": self.cell_count,
            "is_rectangular": self.is_rectangular,
        }


def get_maze_info(grid: Grid) -> MazeInfo:
    """Summarize the shape of a grid."""
    heights = [len(column) for column in grid]
    return MazeInfo(
        columns=len(grid),
        max_height=max(heights, default=0),
        column_heights=heights,
        cell_count=sum(heights),
        is_rectangular=len(set(heights)) <= 1,
    )
