"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fundtrades.config.settings import get_settings
from fundtrades.config.logging_config import setup_logging
from fundtrades.repositories.sqlalchemy.database import init_db
from fundtrades.api.routers import trades_router, stock_router, notes_router, symbols_router
from fundtrades.core.exceptions import AppError

logger = logging.getLogger(__name__)

_STATUS_BY_CODE = {
    "VALIDATION_ERROR": 400,
    "INVALID_DATE": 400,
    "PROVIDER_ERROR": 502,
    "STORE_READ_ERROR": 503,
    "STORE_WRITE_ERROR": 503,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    init_db()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Fund trades with cached historical close prices",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(trades_router)
app.include_router(stock_router)
app.include_router(notes_router)
app.include_router(symbols_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    status_code = _STATUS_BY_CODE.get(exc.code, 400)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
