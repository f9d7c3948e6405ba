"""API routers package."""

from fundtrades.api.routers.trades import router as trades_router
from fundtrades.api.routers.stock import router as stock_router
from fundtrades.api.routers.notes import router as notes_router
from fundtrades.api.routers.symbols import router as symbols_router

__all__ = [
    "trades_router",
    "stock_router",
    "notes_router",
    "symbols_router",
]
