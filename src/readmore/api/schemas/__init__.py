"""Pydantic schemas for API request/response."""

from readmore.api.schemas.pocket_account import (
    PocketAccountCreate,
    PocketAccountUpdate,
    PocketAccountResponse,
)
from readmore.api.schemas.feature_toggle import (
    FeatureToggleResponse,
    FeatureToggleListResponse,
)

__all__ = [
    "PocketAccountCreate",
    "PocketAccountUpdate",
    "PocketAccountResponse",
    "FeatureToggleResponse",
    "FeatureToggleListResponse",
]
