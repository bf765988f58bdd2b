"""Pocket account repository protocol."""

from typing import Optional, Protocol, Sequence

from readmore.domain.models import FeatureToggle, PocketAccount


class PocketAccountsRepository(Protocol):
    """Interface for Pocket account data access."""

    async def insert(self, account: PocketAccount) -> PocketAccount:
        """Persist a new account and assign its generated ID."""
        ...

    async def update(self, account: PocketAccount) -> None:
        """Overwrite all mutable fields of the account with the same ID."""
        ...

    async def delete(self, account: PocketAccount) -> None:
        """Delete the account with the same ID."""
        ...

    async def delete_by_id(self, account_id: int) -> None:
        """Delete the account with the given ID."""
        ...

    async def find_by_id(self, account_id: int) -> Optional[PocketAccount]:
        """Retrieve account by ID."""
        ...

    async def find_by_username(self, username: str) -> Optional[PocketAccount]:
        """Retrieve account by username."""
        ...

    async def find_toggles_for_account(self, account_id: int) -> Sequence[FeatureToggle]:
        """List the feature toggles linked to an account."""
        ...
