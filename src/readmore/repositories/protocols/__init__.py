"""Repository protocol definitions (interfaces)."""

from readmore.repositories.protocols.connection import ConnectionFactory
from readmore.repositories.protocols.pocket_accounts_repo import PocketAccountsRepository

__all__ = [
    "ConnectionFactory",
    "PocketAccountsRepository",
]
