"""SQLAlchemy ORM model definitions.

Table names are quoted mixed case; column names are lowercase so that
unquoted SQL from other consumers of the database (``WHERE Id = ...``)
resolves against them on PostgreSQL.
"""

from sqlalchemy import Column, ForeignKey, Integer, Text

from readmore.repositories.sqlalchemy.database import Base


class PocketAccountORM(Base):
    """SQLAlchemy model for PocketAccount."""

    __tablename__ = "PocketAccounts"
    # SQLite would otherwise hand a deleted account's ID to the next insert
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column("id", Integer, primary_key=True, autoincrement=True)
    access_token = Column("accesstoken", Text, nullable=False)
    redirect_url = Column("redirecturl", Text, nullable=False)
    request_token = Column("requesttoken", Text, nullable=False)
    username = Column("username", Text, unique=True, nullable=True)


class FeatureToggleORM(Base):
    """SQLAlchemy model for FeatureToggle."""

    __tablename__ = "FeatureToggles"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column("id", Integer, primary_key=True, autoincrement=True)
    name = Column("name", Text, nullable=False)
    description = Column("description", Text, nullable=True)


class PocketAccountFeatureToggleORM(Base):
    """Junction rows linking accounts to the toggles enabled for them."""

    __tablename__ = "PocketAccountFeatureToggles"

    account_id = Column(
        "accountid",
        Integer,
        ForeignKey("PocketAccounts.id", ondelete="CASCADE"),
        primary_key=True,
    )
    toggle_id = Column(
        "toggleid",
        Integer,
        ForeignKey("FeatureToggles.id", ondelete="CASCADE"),
        primary_key=True,
    )
