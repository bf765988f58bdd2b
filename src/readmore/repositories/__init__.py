"""Repository layer - data access abstractions and implementations."""

from readmore.repositories.protocols import (
    ConnectionFactory,
    PocketAccountsRepository,
)

__all__ = [
    "ConnectionFactory",
    "PocketAccountsRepository",
]
