"""
Combo API endpoints.

Generates randomized trick combos from the catalog. Generation is a read
operation: nothing is persisted.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from tricking.config import MAX_COMBO_SIZE
from tricking.db.database import get_session
from tricking.models.combo import ComboFilters, ComboRequest, GeneratedCombo, SamplingStrategy
from tricking.models.failure import FailureResponse
from tricking.services.combo_generator import generate_combo, generate_simple_combo

router = APIRouter(prefix="/api/v1/combos", tags=["combos"])

# Size is only capped here; the generator rejects sizes below the minimum
SizeParam = Annotated[
    int,
    Query(le=MAX_COMBO_SIZE, description=f"Number of tricks (at most {MAX_COMBO_SIZE})"),
]

FAILURE_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": FailureResponse},
    422: {"model": FailureResponse},
}


class TrickSummaryResponse(BaseModel):
    """A trick in its minimal public form."""

    id: int
    name: str


class GeneratedComboResponse(BaseModel):
    """Response model for a generated combo."""

    tricks: list[TrickSummaryResponse] = Field(default_factory=list)
    total_difficulty: int = 0
    notation: str = Field(
        default="",
        description="Trick names in order, joined by ' > '",
    )
    count: int = 0


def _to_response(combo: GeneratedCombo) -> GeneratedComboResponse:
    return GeneratedComboResponse(
        tricks=[TrickSummaryResponse(id=t.id, name=t.name) for t in combo.tricks],
        total_difficulty=combo.total_difficulty,
        notation=combo.notation,
        count=combo.count,
    )


@router.get(
    "/generate",
    response_model=GeneratedComboResponse,
    responses=FAILURE_RESPONSES,
)
async def generate_filtered_combo(
    size: SizeParam,
    session: Annotated[AsyncSession, Depends(get_session)],
    min_difficulty: Annotated[int | None, Query(ge=1)] = None,
    max_difficulty: Annotated[int | None, Query(ge=1)] = None,
    exclude_category_ids: Annotated[list[int] | None, Query()] = None,
    trick_ids: Annotated[list[int] | None, Query()] = None,
    exclude_trick_ids: Annotated[list[int] | None, Query()] = None,
    strategy: SamplingStrategy = SamplingStrategy.WEIGHTED,
    seed: int | None = None,
) -> GeneratedComboResponse:
    """
    Generate a combo with optional filters.

    Returns 400 if size is below 1 and 422 if the filtered catalog holds
    fewer tricks than requested. Pass a seed to reproduce a combo.
    """
    request = ComboRequest(
        size=size,
        filters=ComboFilters(
            min_difficulty=min_difficulty,
            max_difficulty=max_difficulty,
            exclude_category_ids=tuple(exclude_category_ids or ()),
            trick_ids=tuple(trick_ids or ()),
            exclude_trick_ids=tuple(exclude_trick_ids or ()),
        ),
        strategy=strategy,
        seed=seed,
    )

    combo = await generate_combo(session, request)
    return _to_response(combo)


@router.get(
    "/generate/simple",
    response_model=GeneratedComboResponse,
    responses=FAILURE_RESPONSES,
)
async def generate_unfiltered_combo(
    size: SizeParam,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> GeneratedComboResponse:
    """Generate a weighted combo from the whole catalog."""
    combo = await generate_simple_combo(session, size)
    return _to_response(combo)
