"""Pocket account domain model."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class PocketAccount:
    """
    Stored Pocket credential set.

    ``id`` is assigned by the store when the account is inserted and is
    ``None`` until then. ``username`` is unique across all accounts.
    """

    access_token: str
    redirect_url: str
    request_token: str
    username: Optional[str] = None
    id: Optional[int] = None

    @property
    def is_persisted(self) -> bool:
        """Whether the store has assigned an identity."""
        return self.id is not None
