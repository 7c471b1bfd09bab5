"""Maze schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field

from mazefile.core import Cell, Grid, MazeInfo


class CellSchema(BaseModel):
    """Schema for one cell's wall flags."""

    north: bool = False
    east: bool = False
    south: bool = False
    west: bool = False

    @classmethod
    def from_cell(cls, cell: Cell) -> "CellSchema":
        return cls(**cell.to_dict())

    def to_cell(self) -> Cell:
        return Cell(north=self.north, east=self.east, south=self.south, west=self.west)


class MazeInfoSchema(BaseModel):
    """Schema for the shape of a maze."""

    columns: int = Field(..., ge=0)
    max_height: int = Field(..., ge=0)
    column_heights: list[int]
    cell_count: int = Field(..., ge=0)
    is_rectangular: bool

    @classmethod
    def from_info(cls, info: MazeInfo) -> "MazeInfoSchema":
        return cls(**info.to_dict())


class MazeListItem(BaseModel):
    """Schema for maze list item (without grid data)."""

    name: str
    conformant: bool
    columns: Optional[int] = None
    max_height: Optional[int] = None
    error: Optional[str] = None


class MazeListResponse(BaseModel):
    """Schema for maze list response."""

    mazes: list[MazeListItem]
    total: int


class MazeDetail(BaseModel):
    """Schema for detailed maze response with grid data."""

    name: str
    info: MazeInfoSchema
    columns: list[list[CellSchema]]

    @classmethod
    def from_grid(cls, name: str, grid: Grid, info: MazeInfo) -> "MazeDetail":
        return cls(
            name=name,
            info=MazeInfoSchema.from_info(info),
            columns=[[CellSchema.from_cell(cell) for cell in column] for column in grid],
        )


class MazeSaveRequest(BaseModel):
    """Schema for saving a maze grid. Columns are indexed by x, cells by y."""

    columns: list[list[CellSchema]]

    def to_grid(self) -> Grid:
        return [[cell.to_cell() for cell in column] for column in self.columns]


class MazeValidateRequest(BaseModel):
    """Schema for validating maze file text."""

    maze_text: str = Field(..., max_length=5_000_000)


class MazeValidateResponse(BaseModel):
    """Schema for maze validation result."""

    valid: bool
    error: Optional[str] = None
    kind: Optional[str] = None
    line_number: Optional[int] = None
