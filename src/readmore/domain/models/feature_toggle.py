"""Feature toggle domain model."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class FeatureToggle:
    """Named flag that can be switched on for individual accounts."""

    name: str
    description: Optional[str] = None
    id: Optional[int] = None
