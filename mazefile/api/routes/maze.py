"""Maze routes for validating, listing, loading and saving maze files."""

import logging

from fastapi import APIRouter, HTTPException, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from mazefile.api.deps import Store
from mazefile.config import get_settings
from mazefile.core import (
    MazeFormatError,
    MazeGridError,
    MazeWriteError,
    check_maze_text,
    get_maze_info,
)
from mazefile.schemas.maze import (
    MazeDetail,
    MazeListItem,
    MazeListResponse,
    MazeSaveRequest,
    MazeValidateRequest,
    MazeValidateResponse,
)
from mazefile.services.maze_store import MazeNotFoundError

logger = logging.getLogger(__name__)

settings = get_settings()
limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/maze", tags=["Mazes"])


@router.get(
    "",
    response_model=MazeListResponse,
)
async def list_mazes(store: Store) -> MazeListResponse:
    """List all maze files in the store.

    Non-conformant files are listed with their diagnostic.
    Grid data is not included - use GET /v1/maze/{name} for full details.
    """
    maze_items = [
        MazeListItem(
            name=entry.name,
            conformant=entry.conformant,
            columns=entry.info.columns if entry.info else None,
            max_height=entry.info.max_height if entry.info else None,
            error=entry.error,
        )
        for entry in store.list_mazes()
    ]

    return MazeListResponse(
        mazes=maze_items,
        total=len(maze_items),
    )


@router.post(
    "/validate",
    response_model=MazeValidateResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def validate_maze(
    request: Request,
    body: MazeValidateRequest,
) -> MazeValidateResponse:
    """Check maze file text against the maze file format.

    Reports the first violation with its line number.
    """
    try:
        check_maze_text(body.maze_text, source="upload")
    except MazeFormatError as e:
        return MazeValidateResponse(
            valid=False,
            error=str(e),
            kind=e.kind.value,
            line_number=e.line_number,
        )

    return MazeValidateResponse(valid=True)


@router.get(
    "/{name}",
    response_model=MazeDetail,
)
async def get_maze(name: str, store: Store) -> MazeDetail:
    """Load a maze file and return its grid, column by column."""
    try:
        grid = store.load(name)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except MazeNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except MazeFormatError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )

    return MazeDetail.from_grid(name, grid, get_maze_info(grid))


@router.put(
    "/{name}",
    response_model=MazeDetail,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def put_maze(
    request: Request,
    name: str,
    body: MazeSaveRequest,
    store: Store,
) -> MazeDetail:
    """Save a grid as a maze file, replacing any existing file."""
    grid = body.to_grid()

    try:
        store.save(name, grid)
    except MazeGridError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except MazeWriteError as e:
        logger.error(f"Failed to save maze {name}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )

    logger.info(f"Maze {name} saved ({len(grid)} columns)")
    return MazeDetail.from_grid(name, grid, get_maze_info(grid))
