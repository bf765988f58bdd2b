"""Domain models package."""

from readmore.domain.models.pocket_account import PocketAccount
from readmore.domain.models.feature_toggle import FeatureToggle

__all__ = [
    "PocketAccount",
    "FeatureToggle",
]
