"""SQLAlchemy repository implementations."""

from readmore.repositories.sqlalchemy.database import (
    Base,
    create_engine_for_url,
    make_session_factory,
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
)
from readmore.repositories.sqlalchemy.pocket_accounts_repo import SqlAlchemyPocketAccountsRepository
from readmore.repositories.sqlalchemy.provisioning import EphemeralDatabase

__all__ = [
    "Base",
    "create_engine_for_url",
    "make_session_factory",
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "SqlAlchemyPocketAccountsRepository",
    "EphemeralDatabase",
]
