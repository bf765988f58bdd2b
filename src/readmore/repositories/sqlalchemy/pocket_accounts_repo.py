"""SQLAlchemy implementation of PocketAccountsRepository."""

import logging
from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError

from readmore.core.exceptions import UniqueConstraintViolation
from readmore.domain.models import FeatureToggle, PocketAccount
from readmore.repositories.protocols import ConnectionFactory
from readmore.repositories.sqlalchemy.orm_models import (
    FeatureToggleORM,
    PocketAccountFeatureToggleORM,
    PocketAccountORM,
)

logger = logging.getLogger(__name__)

# SQLSTATE for unique_violation (PostgreSQL drivers expose it on the DBAPI error)
_UNIQUE_VIOLATION_SQLSTATE = "23505"


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == _UNIQUE_VIOLATION_SQLSTATE
    # SQLite: "UNIQUE constraint failed: PocketAccounts.username"
    return "unique constraint" in str(orig).lower()


class SqlAlchemyPocketAccountsRepository:
    """
    SQLAlchemy-backed Pocket account repository.

    Every public method opens its own session from the injected factory and
    runs a single statement in it. Identity generation, username uniqueness
    and the toggle join are left to the database.
    """

    def __init__(self, session_factory: ConnectionFactory):
        self._session_factory = session_factory

    async def insert(self, account: PocketAccount) -> PocketAccount:
        """
        Persist a new account.

        The generated ID is written back onto ``account``, which is returned.

        Raises:
            UniqueConstraintViolation: If the username is already taken.
        """
        orm_account = PocketAccountORM(
            access_token=account.access_token,
            redirect_url=account.redirect_url,
            request_token=account.request_token,
            username=account.username,
        )
        async with self._session_factory() as session:
            session.add(orm_account)
            try:
                await session.flush()
                account_id = orm_account.id
                await session.commit()
            except IntegrityError as exc:
                if _is_unique_violation(exc):
                    logger.warning("Rejected insert of duplicate username")
                    raise UniqueConstraintViolation("username", account.username) from exc
                raise

        account.id = account_id
        logger.debug("Inserted Pocket account %s", account_id)
        return account

    async def update(self, account: PocketAccount) -> None:
        """
        Overwrite the stored fields of the account with ``account.id``.

        Completes silently when no such row exists.
        """
        self._require_identity(account)
        stmt = (
            update(PocketAccountORM)
            .where(PocketAccountORM.id == account.id)
            .values({
                PocketAccountORM.access_token: account.access_token,
                PocketAccountORM.redirect_url: account.redirect_url,
                PocketAccountORM.request_token: account.request_token,
                PocketAccountORM.username: account.username,
            })
        )
        async with self._session_factory() as session:
            try:
                await session.execute(stmt)
                await session.commit()
            except IntegrityError as exc:
                if _is_unique_violation(exc):
                    logger.warning("Rejected update of account %s to a duplicate username", account.id)
                    raise UniqueConstraintViolation("username", account.username) from exc
                raise

    async def delete(self, account: PocketAccount) -> None:
        """Delete the account with ``account.id``; a missing row is not an error."""
        self._require_identity(account)
        await self.delete_by_id(account.id)

    async def delete_by_id(self, account_id: int) -> None:
        """Delete the account with the given ID; a missing row is not an error."""
        async with self._session_factory() as session:
            await session.execute(
                delete(PocketAccountORM).where(PocketAccountORM.id == account_id)
            )
            await session.commit()
        logger.debug("Deleted Pocket account %s", account_id)

    async def find_by_id(self, account_id: int) -> Optional[PocketAccount]:
        """Retrieve account by ID."""
        async with self._session_factory() as session:
            orm_account = await session.scalar(
                select(PocketAccountORM).where(PocketAccountORM.id == account_id)
            )
        return self._to_domain(orm_account) if orm_account else None

    async def find_by_username(self, username: str) -> Optional[PocketAccount]:
        """Retrieve account by username."""
        async with self._session_factory() as session:
            orm_account = await session.scalar(
                select(PocketAccountORM).where(PocketAccountORM.username == username)
            )
        return self._to_domain(orm_account) if orm_account else None

    async def find_toggles_for_account(self, account_id: int) -> list[FeatureToggle]:
        """List the feature toggles linked to an account, in store order."""
        stmt = (
            select(FeatureToggleORM)
            .join(
                PocketAccountFeatureToggleORM,
                PocketAccountFeatureToggleORM.toggle_id == FeatureToggleORM.id,
            )
            .where(PocketAccountFeatureToggleORM.account_id == account_id)
        )
        async with self._session_factory() as session:
            orm_toggles = (await session.scalars(stmt)).all()
        return [self._toggle_to_domain(t) for t in orm_toggles]

    @staticmethod
    def _require_identity(account: PocketAccount) -> None:
        if not account.is_persisted:
            raise ValueError("Account has no ID; insert it before updating or deleting")

    @staticmethod
    def _to_domain(orm: PocketAccountORM) -> PocketAccount:
        """Convert ORM model to domain model."""
        return PocketAccount(
            id=orm.id,
            access_token=orm.access_token,
            redirect_url=orm.redirect_url,
            request_token=orm.request_token,
            username=orm.username,
        )

    @staticmethod
    def _toggle_to_domain(orm: FeatureToggleORM) -> FeatureToggle:
        return FeatureToggle(
            id=orm.id,
            name=orm.name,
            description=orm.description,
        )
