"""Throwaway database instances for repository tests.

Each ``EphemeralDatabase`` owns a private copy of the schema: a fresh
in-memory SQLite database by default, or a uniquely named schema inside a
PostgreSQL database when given a PostgreSQL URL. Nothing is shared between
instances, so tests provisioned this way never see each other's rows.
"""

import logging
import uuid
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from readmore.repositories.sqlalchemy.database import (
    Base,
    create_engine_for_url,
    make_session_factory,
)

logger = logging.getLogger(__name__)

IN_MEMORY_SQLITE_URL = "sqlite+aiosqlite:///:memory:"


class EphemeralDatabase:
    """
    Isolated schema instance, created by ``setup()`` and removed by ``dispose()``.

    Usage:
        async with EphemeralDatabase() as db:
            repo = SqlAlchemyPocketAccountsRepository(db.session_factory)
    """

    def __init__(self, database_url: Optional[str] = None, echo: bool = False):
        self._database_url = database_url or IN_MEMORY_SQLITE_URL
        self._echo = echo
        self._schema: Optional[str] = None
        self._base_engine: Optional[AsyncEngine] = None
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def is_sqlite(self) -> bool:
        return make_url(self._database_url).get_backend_name() == "sqlite"

    @property
    def schema(self) -> Optional[str]:
        """Name of the provisioned PostgreSQL schema (None for SQLite)."""
        return self._schema

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("EphemeralDatabase not set up. Call setup() first.")
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            raise RuntimeError("EphemeralDatabase not set up. Call setup() first.")
        return self._session_factory

    async def setup(self) -> None:
        """Create the schema instance and its tables."""
        from readmore.repositories.sqlalchemy import orm_models  # noqa: F401

        if self._engine is not None:
            return

        if self.is_sqlite:
            # One shared connection keeps the in-memory database alive
            self._base_engine = create_engine_for_url(
                self._database_url,
                echo=self._echo,
                poolclass=StaticPool,
            )
            self._engine = self._base_engine
        else:
            self._schema = f"readmore_test_{uuid.uuid4().hex[:12]}"
            self._base_engine = create_engine_for_url(self._database_url, echo=self._echo)
            async with self._base_engine.begin() as conn:
                await conn.execute(text(f'CREATE SCHEMA "{self._schema}"'))
            self._engine = self._base_engine.execution_options(
                schema_translate_map={None: self._schema}
            )

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        self._session_factory = make_session_factory(self._engine)
        logger.debug("Provisioned test database (schema=%s)", self._schema or "sqlite-memory")

    async def dispose(self) -> None:
        """Drop everything created by ``setup()`` and release connections."""
        if self._base_engine is None:
            return

        try:
            if self._schema is not None:
                async with self._base_engine.begin() as conn:
                    await conn.execute(text(f'DROP SCHEMA "{self._schema}" CASCADE'))
            else:
                async with self._engine.begin() as conn:
                    await conn.run_sync(Base.metadata.drop_all)
        finally:
            await self._base_engine.dispose()
            self._base_engine = None
            self._engine = None
            self._session_factory = None
            self._schema = None

    async def __aenter__(self) -> "EphemeralDatabase":
        await self.setup()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.dispose()
