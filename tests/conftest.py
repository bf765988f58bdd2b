"""
Pytest configuration and fixtures for ReadMore data tests.

This module provides:
- An isolated database per test (in-memory SQLite, or a throwaway
  PostgreSQL schema when TEST_DATABASE_URL is set)
- Repository and API client fixtures bound to that database
- Factory helpers for accounts and feature toggles
"""

from typing import Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from readmore.config.settings import get_settings, reset_settings
from readmore.domain.models import FeatureToggle, PocketAccount
from readmore.main import app
from readmore.repositories.sqlalchemy import (
    EphemeralDatabase,
    SqlAlchemyPocketAccountsRepository,
    get_db,
)
from readmore.repositories.sqlalchemy.orm_models import (
    FeatureToggleORM,
    PocketAccountFeatureToggleORM,
)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest_asyncio.fixture
async def test_database():
    """Provision a fresh schema for one test and drop it afterwards."""
    # Reset settings for clean state
    reset_settings()

    db = EphemeralDatabase(get_settings().test_database_url)
    await db.setup()
    try:
        yield db
    finally:
        await db.dispose()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def account_repo(test_database) -> SqlAlchemyPocketAccountsRepository:
    """Provide test PocketAccountsRepository."""
    return SqlAlchemyPocketAccountsRepository(test_database.session_factory)


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest_asyncio.fixture
async def client(test_database):
    """Provide an HTTP client for the app, wired to the test database."""
    app.dependency_overrides[get_db] = lambda: test_database.session_factory
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def make_account(
    access_token: str = "access-token",
    redirect_url: str = "http://example.com",
    request_token: str = "request-token",
    username: Optional[str] = "user-name",
) -> PocketAccount:
    """Build an unsaved account with the usual sample credentials."""
    return PocketAccount(
        access_token=access_token,
        redirect_url=redirect_url,
        request_token=request_token,
        username=username,
    )


async def insert_feature_toggle(
    db: EphemeralDatabase,
    name: str,
    description: Optional[str] = None,
) -> FeatureToggle:
    """Insert a toggle directly; the repository has no write path for toggles."""
    orm_toggle = FeatureToggleORM(name=name, description=description)
    async with db.session_factory() as session:
        session.add(orm_toggle)
        await session.commit()
    return FeatureToggle(
        id=orm_toggle.id,
        name=orm_toggle.name,
        description=orm_toggle.description,
    )


async def link_feature_toggle(db: EphemeralDatabase, account_id: int, toggle_id: int) -> None:
    """Enable a toggle for an account by writing the junction row."""
    async with db.session_factory() as session:
        session.add(PocketAccountFeatureToggleORM(account_id=account_id, toggle_id=toggle_id))
        await session.commit()
