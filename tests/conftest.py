import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tricking.db.database import build_engine, get_session
from tricking.main import app
from tricking.models.db import Base, CategoryDB, TrickDB, TrickVideoDB


@pytest.fixture
async def async_engine():
    """Create an in-memory SQLite engine with foreign keys enforced."""
    engine = build_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def session(async_engine) -> AsyncSession:
    """Provide a database session for tests."""
    async_session = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as session:
        yield session


@pytest.fixture
async def client(async_engine):
    """Provide an async test client with overridden database session."""
    async_session = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_session():
        async with async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
async def seeded_catalog(async_engine) -> list[TrickDB]:
    """
    Seed a small catalog.

    Kicks (category 1): Tornado Kick, Butterfly Kick
    Flips (category 2): Backflip, Cork
    Uncategorized: Scoot (no difficulty)
    """
    async_session = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)

    categories = [
        CategoryDB(id=1, name="Kicks"),
        CategoryDB(id=2, name="Flips"),
        CategoryDB(id=3, name="Vert Kicks", parent_id=1),
    ]
    tricks = [
        TrickDB(
            id=1,
            slug="tornado-kick",
            name="Tornado Kick",
            difficulty=2,
            weight=5,
            category_id=1,
            takeoff_stance_id=1,
            landing_stance_id=2,
        ),
        TrickDB(
            id=2,
            slug="butterfly-kick",
            name="Butterfly Kick",
            difficulty=3,
            weight=3,
            category_id=1,
            takeoff_stance_id=2,
            landing_stance_id=2,
        ),
        TrickDB(
            id=3,
            slug="backflip",
            name="Backflip",
            difficulty=4,
            weight=2,
            category_id=2,
            takeoff_stance_id=1,
            landing_stance_id=1,
        ),
        TrickDB(
            id=4,
            slug="cork",
            name="Cork",
            difficulty=7,
            weight=1,
            category_id=2,
            takeoff_stance_id=2,
            landing_stance_id=1,
            execution_notes="Commit to the set",
        ),
        TrickDB(id=5, slug="scoot", name="Scoot", weight=0),
    ]
    videos = [
        TrickVideoDB(
            trick_id=4,
            video_url="https://example.com/cork.mp4",
            thumbnail_url="https://example.com/cork.jpg",
            performer_name="Sam",
            is_featured=True,
        ),
        TrickVideoDB(
            trick_id=4,
            video_url="https://example.com/cork-2.mp4",
            thumbnail_url="https://example.com/cork-2.jpg",
            performer_name="Alex",
            is_featured=False,
        ),
    ]

    async with async_session() as session:
        session.add_all(categories)
        await session.flush()
        session.add_all(tricks)
        await session.flush()
        session.add_all(videos)
        await session.commit()

    return tricks
