"""
Database operations for the trick catalog.

Provides async functions for reading tricks, categories and videos, the
filtered candidate query used by combo generation, and the upserts used
by the catalog import job.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tricking.models.catalog import CatalogCategory, CatalogTrick
from tricking.models.combo import ComboFilters
from tricking.models.db import CategoryDB, TrickDB, TrickVideoDB
from tricking.models.trick import TrickCandidate

# --- Trick Operations ---


async def get_trick(session: AsyncSession, trick_id: int) -> TrickDB | None:
    """
    Get a trick by id.

    Returns None if no trick has this id.
    """
    result = await session.execute(select(TrickDB).where(TrickDB.id == trick_id))
    return result.scalar_one_or_none()


async def get_trick_by_slug(session: AsyncSession, slug: str) -> TrickDB | None:
    """Get a trick by its slug."""
    result = await session.execute(select(TrickDB).where(TrickDB.slug == slug))
    return result.scalar_one_or_none()


async def list_tricks(session: AsyncSession) -> list[TrickDB]:
    """Get every trick, ordered by name."""
    result = await session.execute(select(TrickDB).order_by(TrickDB.name.asc()))
    return list(result.scalars().all())


async def find_candidate_tricks(session: AsyncSession, filters: ComboFilters) -> list[TrickDB]:
    """
    Get the tricks eligible for combo generation.

    Each filter is optional and only narrows the result. Difficulty bounds
    are inclusive; tricks with no difficulty rating never satisfy a bound.
    Results are ordered by weight (descending) then id, so the pool order
    is stable for a given catalog.
    """
    query = select(TrickDB)

    if filters.min_difficulty is not None:
        query = query.where(TrickDB.difficulty >= filters.min_difficulty)

    if filters.max_difficulty is not None:
        query = query.where(TrickDB.difficulty <= filters.max_difficulty)

    if filters.exclude_category_ids:
        # Uncategorized tricks are never excluded by category
        query = query.where(
            TrickDB.category_id.is_(None)
            | TrickDB.category_id.not_in(filters.exclude_category_ids)
        )

    if filters.trick_ids:
        query = query.where(TrickDB.id.in_(filters.trick_ids))

    if filters.exclude_trick_ids:
        query = query.where(TrickDB.id.not_in(filters.exclude_trick_ids))

    query = query.order_by(TrickDB.weight.desc(), TrickDB.id.asc())

    result = await session.execute(query)
    return list(result.scalars().all())


def trick_to_candidate(db_trick: TrickDB) -> TrickCandidate:
    """Convert a database trick to a sampling candidate."""
    return TrickCandidate(
        id=db_trick.id,
        name=db_trick.name,
        weight=db_trick.weight if db_trick.weight is not None else 1,
        takeoff_stance=db_trick.takeoff_stance_id,
        landing_stance=db_trick.landing_stance_id,
        difficulty=db_trick.difficulty,
    )


async def upsert_trick(session: AsyncSession, trick: CatalogTrick) -> TrickDB:
    """
    Insert or update a trick.

    If a trick with the same slug exists, updates it.
    Otherwise creates a new record.
    """
    existing = await get_trick_by_slug(session, trick.slug)

    if existing:
        existing.name = trick.name
        existing.weight = trick.weight
        existing.difficulty = trick.difficulty
        existing.description = trick.description
        existing.execution_notes = trick.execution_notes
        existing.creator_name = trick.creator_name
        existing.category_id = trick.category_id
        existing.takeoff_stance_id = trick.takeoff_stance_id
        existing.landing_stance_id = trick.landing_stance_id
        existing.rotation = trick.rotation
        await session.flush()
        return existing

    db_trick = TrickDB(
        slug=trick.slug,
        name=trick.name,
        weight=trick.weight,
        difficulty=trick.difficulty,
        description=trick.description,
        execution_notes=trick.execution_notes,
        creator_name=trick.creator_name,
        category_id=trick.category_id,
        takeoff_stance_id=trick.takeoff_stance_id,
        landing_stance_id=trick.landing_stance_id,
        rotation=trick.rotation,
    )
    session.add(db_trick)
    await session.flush()
    return db_trick


# --- Video Operations ---


async def get_featured_video(session: AsyncSession, trick_id: int) -> TrickVideoDB | None:
    """
    Get the featured video for a trick.

    Returns the most recent featured video, or None if none is featured.
    """
    result = await session.execute(
        select(TrickVideoDB)
        .where(TrickVideoDB.trick_id == trick_id, TrickVideoDB.is_featured.is_(True))
        .order_by(TrickVideoDB.created_at.desc(), TrickVideoDB.id.desc())
        .limit(1)
    )
    return result.scalar_one_or_none()


# --- Category Operations ---


async def list_categories(session: AsyncSession) -> list[CategoryDB]:
    """Get every category, ordered by name."""
    result = await session.execute(select(CategoryDB).order_by(CategoryDB.name.asc()))
    return list(result.scalars().all())


async def upsert_category(session: AsyncSession, category: CatalogCategory) -> CategoryDB:
    """Insert or update a category by id."""
    existing = await session.get(CategoryDB, category.id)

    if existing:
        existing.name = category.name
        existing.parent_id = category.parent_id
        await session.flush()
        return existing

    db_category = CategoryDB(
        id=category.id,
        name=category.name,
        parent_id=category.parent_id,
    )
    session.add(db_category)
    await session.flush()
    return db_category
