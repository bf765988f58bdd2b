"""API routers package."""

from readmore.api.routers.pocket_accounts import router as pocket_accounts_router

__all__ = [
    "pocket_accounts_router",
]
