"""Domain layer - pure data carriers with no external dependencies."""

from readmore.domain.models import PocketAccount, FeatureToggle

__all__ = [
    "PocketAccount",
    "FeatureToggle",
]
