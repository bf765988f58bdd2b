"""Pydantic schemas for feature toggle endpoints."""

from typing import Optional

from pydantic import BaseModel


class FeatureToggleResponse(BaseModel):
    """Response schema for a single feature toggle."""

    model_config = {"from_attributes": True}

    id: int
    name: str
    description: Optional[str] = None


class FeatureToggleListResponse(BaseModel):
    """Response schema for the toggles enabled on an account."""

    toggles: list[FeatureToggleResponse]
    count: int
