"""Pydantic schemas for Pocket account endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


class PocketAccountCreate(BaseModel):
    """Request schema for storing a new Pocket account."""

    access_token: str = Field(..., min_length=1, description="Pocket access token")
    redirect_url: str = Field(..., min_length=1, description="OAuth redirect URL")
    request_token: str = Field(..., min_length=1, description="Pocket request token")
    username: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=255,
        description="Unique Pocket username",
    )


class PocketAccountUpdate(PocketAccountCreate):
    """Request schema for overwriting a stored Pocket account."""


class PocketAccountResponse(BaseModel):
    """Response schema for a single Pocket account."""

    model_config = {"from_attributes": True}

    id: int
    access_token: str
    redirect_url: str
    request_token: str
    username: Optional[str] = None
