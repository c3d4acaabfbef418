"""
Combo generation service.

Wires the three steps of a request together:
1. Fetch the filtered candidate pool from the catalog
2. Draw the combo with the requested sampling strategy
3. Assemble the response

Nothing here outlives a request. Each call gets its own random.Random,
seeded from the request when a seed is given.
"""

import logging
import random

from sqlalchemy.ext.asyncio import AsyncSession

from tricking.config import MIN_COMBO_SIZE
from tricking.db.operations import find_candidate_tricks, trick_to_candidate
from tricking.models.combo import ComboRequest, GeneratedCombo
from tricking.models.failure import InvalidSizeError
from tricking.models.trick import CandidatePool
from tricking.sampling import build_sampler
from tricking.services.combo_assembler import build_generated_combo

logger = logging.getLogger(__name__)


def request_rng(seed: int | None) -> random.Random:
    """A fresh generator for one request; OS entropy when seed is None."""
    return random.Random(seed)


async def load_candidate_pool(session: AsyncSession, request: ComboRequest) -> CandidatePool:
    """Fetch the tricks matching the request filters as a candidate pool."""
    db_tricks = await find_candidate_tricks(session, request.filters)
    pool = CandidatePool.of(trick_to_candidate(t) for t in db_tricks)

    logger.info(
        "candidate_pool_built",
        extra={
            "pool_size": len(pool),
            "requested": request.size,
            "filtered": not request.filters.is_empty(),
        },
    )
    return pool


async def generate_combo(
    session: AsyncSession,
    request: ComboRequest,
    rng: random.Random | None = None,
) -> GeneratedCombo:
    """
    Generate a combo for a request.

    Args:
        session: Database session for the candidate fetch
        request: Size, filters, strategy and optional seed
        rng: Random source; defaults to one built from request.seed

    Returns:
        The assembled combo, exactly request.size tricks long

    Raises:
        InvalidSizeError: request.size is below MIN_COMBO_SIZE
        InsufficientCandidatesError: fewer eligible tricks than request.size
    """
    # Reject bad sizes before touching the database
    if request.size < MIN_COMBO_SIZE:
        raise InvalidSizeError(request.size)

    pool = await load_candidate_pool(session, request)

    if rng is None:
        rng = request_rng(request.seed)

    sampler = build_sampler(request.strategy, rng)
    selected = sampler.select(pool, request.size)
    combo = build_generated_combo(selected)

    logger.info(
        "combo_generated",
        extra={
            "size": combo.count,
            "strategy": request.strategy.value,
            "seeded": request.seed is not None,
            "total_difficulty": combo.total_difficulty,
        },
    )
    return combo


async def generate_simple_combo(
    session: AsyncSession,
    size: int,
    rng: random.Random | None = None,
) -> GeneratedCombo:
    """Generate a weighted combo from the whole catalog."""
    return await generate_combo(session, ComboRequest(size=size), rng)
