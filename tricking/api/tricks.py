"""
Trick API endpoints.

Provides the trick list for dropdowns and per-trick detail views.
"""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from tricking.db import get_featured_video, get_trick, list_tricks
from tricking.db.database import get_session
from tricking.models.db import TrickDB, TrickVideoDB
from tricking.models.failure import FailureResponse, TrickNotFoundError

router = APIRouter(prefix="/api/v1", tags=["tricks"])

NOT_FOUND_RESPONSES: dict[int | str, dict[str, object]] = {
    404: {"model": FailureResponse},
}


class TrickListItem(BaseModel):
    """A trick in the list view."""

    id: int
    name: str


class TrickListResponse(BaseModel):
    """Response model for the trick list."""

    tricks: list[TrickListItem] = Field(default_factory=list)
    count: int


class TrickDetailResponse(BaseModel):
    """Response model for a single trick."""

    id: int
    name: str
    slug: str
    description: str | None = None
    difficulty: int | None = None
    execution_notes: str | None = None
    creator_name: str | None = None
    takeoff_stance_id: int | None = None
    landing_stance_id: int | None = None
    category_id: int | None = None
    rotation: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class VideoResponse(BaseModel):
    """A video demonstrating a trick."""

    id: int
    video_url: str
    thumbnail_url: str
    performer_name: str
    is_featured: bool
    created_at: datetime | None = None


class TrickFullDetailsResponse(TrickDetailResponse):
    """Trick detail plus its featured video, if any."""

    featured_video: VideoResponse | None = None


def _detail_fields(trick: TrickDB) -> dict[str, object]:
    return {
        "id": trick.id,
        "name": trick.name,
        "slug": trick.slug,
        "description": trick.description,
        "difficulty": trick.difficulty,
        "execution_notes": trick.execution_notes,
        "creator_name": trick.creator_name,
        "takeoff_stance_id": trick.takeoff_stance_id,
        "landing_stance_id": trick.landing_stance_id,
        "category_id": trick.category_id,
        "rotation": trick.rotation,
        "created_at": trick.created_at,
        "updated_at": trick.updated_at,
    }


def _video_response(video: TrickVideoDB) -> VideoResponse:
    return VideoResponse(
        id=video.id,
        video_url=video.video_url,
        thumbnail_url=video.thumbnail_url,
        performer_name=video.performer_name,
        is_featured=video.is_featured,
        created_at=video.created_at,
    )


async def _get_trick_or_404(session: AsyncSession, trick_id: int) -> TrickDB:
    db_trick = await get_trick(session, trick_id)
    if db_trick is None:
        raise TrickNotFoundError(trick_id)
    return db_trick


@router.get("/tricks", response_model=TrickListResponse)
async def get_tricks(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> TrickListResponse:
    """
    List all tricks.

    Returns id and name only, ordered by name.
    """
    db_tricks = await list_tricks(session)
    items = [TrickListItem(id=t.id, name=t.name) for t in db_tricks]
    return TrickListResponse(tricks=items, count=len(items))


@router.get(
    "/trick/{trick_id}", response_model=TrickDetailResponse, responses=NOT_FOUND_RESPONSES
)
async def get_trick_detail(
    trick_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> TrickDetailResponse:
    """
    Get a trick's details.

    Returns 404 if trick not found.
    """
    db_trick = await _get_trick_or_404(session, trick_id)
    return TrickDetailResponse(**_detail_fields(db_trick))


@router.get(
    "/trick/detail/{trick_id}",
    response_model=TrickFullDetailsResponse,
    responses=NOT_FOUND_RESPONSES,
)
async def get_trick_full_detail(
    trick_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> TrickFullDetailsResponse:
    """
    Get a trick's details with its featured video.

    Returns 404 if trick not found.
    """
    db_trick = await _get_trick_or_404(session, trick_id)
    video = await get_featured_video(session, trick_id)

    return TrickFullDetailsResponse(
        **_detail_fields(db_trick),
        featured_video=_video_response(video) if video else None,
    )
