"""Dependency injection for FastAPI."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from readmore.repositories.sqlalchemy import (
    SqlAlchemyPocketAccountsRepository,
    get_db,
)


def get_pocket_accounts_repo(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_db),
) -> SqlAlchemyPocketAccountsRepository:
    """Provide PocketAccountsRepository instance."""
    return SqlAlchemyPocketAccountsRepository(session_factory)
