"""
Category API endpoints.

Categories back the exclusion filter of combo generation.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from tricking.db import list_categories
from tricking.db.database import get_session

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


class CategoryResponse(BaseModel):
    """Response model for a category."""

    id: int
    name: str
    parent_id: int | None = None


class CategoryListResponse(BaseModel):
    """Response model for the category list."""

    categories: list[CategoryResponse] = Field(default_factory=list)
    count: int


@router.get("", response_model=CategoryListResponse)
async def get_categories(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CategoryListResponse:
    """List all categories, ordered by name."""
    db_categories = await list_categories(session)
    categories = [
        CategoryResponse(id=c.id, name=c.name, parent_id=c.parent_id) for c in db_categories
    ]
    return CategoryListResponse(categories=categories, count=len(categories))
