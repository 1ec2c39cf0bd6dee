"""
Pytest fixtures for docshelf tests.

Tests run against an in-memory SQLite database (aiosqlite) by default;
point TEST_DATABASE_URL at another async SQLAlchemy URL to use a real server.
Tables are created fresh for every test.
"""

import os
from typing import AsyncGenerator

# Must be set before docshelf.database builds its engine
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create an async engine with all tables created."""
    from docshelf.database import Base
    import docshelf.models  # noqa: F401

    # A single shared connection keeps the in-memory database alive
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """An async session on an empty database."""
    async_session_factory = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def async_db_session(db_session: AsyncSession) -> AsyncSession:
    """
    The database session with a test user already created.

    The user is stored on the session as ``test_user``.
    """
    from docshelf.models.user import User

    test_user = User(email="owner@docshelf.io", password_hash="fakehash")
    db_session.add(test_user)
    await db_session.commit()

    db_session.test_user = test_user
    return db_session


@pytest_asyncio.fixture
async def test_user(async_db_session: AsyncSession):
    """Get the test user from the session."""
    return async_db_session.test_user


@pytest_asyncio.fixture
async def other_user(async_db_session: AsyncSession):
    """A second user, to check that tags stay private to their owner."""
    from docshelf.models.user import User

    user = User(email="other@docshelf.io", password_hash="fakehash")
    async_db_session.add(user)
    await async_db_session.commit()
    return user


# =============================================================================
# HTTP Client Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def anon_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    An httpx AsyncClient with only the database overridden.

    Authentication runs for real, so requests need a valid token.
    """
    from docshelf.database import get_db
    from docshelf.main import app

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_client(
    async_db_session: AsyncSession, test_user
) -> AsyncGenerator[AsyncClient, None]:
    """
    An httpx AsyncClient authenticated as the test user.

    Overrides FastAPI dependencies to use the test session and user.
    """
    from docshelf.database import get_db
    from docshelf.main import app
    from docshelf.models.user import User
    from docshelf.utils.auth import get_current_user

    user_id = test_user.id

    async def override_get_db():
        yield async_db_session

    async def override_get_current_user():
        # Reload so a rollback in a previous request doesn't leave it expired
        return await async_db_session.get(User, user_id)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_current_user] = override_get_current_user

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()


# =============================================================================
# Test Data Factory Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_tag(async_db_session: AsyncSession, test_user):
    """Create a test tag in the database."""
    from docshelf.models.tag import Tag

    tag = Tag(
        user_id=test_user.id,
        name="invoices",
        color="#FF5733",
    )
    async_db_session.add(tag)
    await async_db_session.commit()
    await async_db_session.refresh(tag)
    return tag


@pytest_asyncio.fixture
async def other_user_tag(async_db_session: AsyncSession, other_user):
    """A tag owned by the other user."""
    from docshelf.models.tag import Tag

    tag = Tag(user_id=other_user.id, name="private", color="#123456")
    async_db_session.add(tag)
    await async_db_session.commit()
    await async_db_session.refresh(tag)
    return tag


@pytest_asyncio.fixture
async def make_document(async_db_session: AsyncSession):
    """Factory creating a document, optionally tagged and/or soft-deleted."""
    from datetime import datetime

    from docshelf.models.document import Document
    from docshelf.models.document_tag import DocumentTag

    async def _make(user_id: str, tags=(), deleted: bool = False, title: str = "Doc"):
        document = Document(
            user_id=user_id,
            title=title,
            deleted_at=datetime.utcnow() if deleted else None,
        )
        async_db_session.add(document)
        await async_db_session.flush()
        for tag in tags:
            async_db_session.add(DocumentTag(document_id=document.id, tag_id=tag.id))
        await async_db_session.commit()
        return document

    return _make
