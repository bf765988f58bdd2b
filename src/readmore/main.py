"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from readmore import __version__
from readmore.config.settings import get_settings
from readmore.config.logging_config import setup_logging
from readmore.repositories.sqlalchemy.database import init_db, reset_database
from readmore.api.routers import pocket_accounts_router
from readmore.core.exceptions import (
    AppError,
    NotFoundError,
    StorageError,
    UniqueConstraintViolation,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    await init_db()
    yield
    # Shutdown
    await reset_database()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Pocket account credentials and per-account feature toggles",
    version=__version__,
    lifespan=lifespan,
)

# Include routers
app.include_router(pocket_accounts_router)


def _error_response(status_code: int, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    if isinstance(exc, UniqueConstraintViolation):
        return _error_response(409, exc)
    if isinstance(exc, NotFoundError):
        return _error_response(404, exc)
    if isinstance(exc, StorageError):
        logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc.message)
        return _error_response(500, exc)
    return _error_response(400, exc)


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": __version__,
        "docs": "/docs",
    }
