"""Pydantic schemas for API request/response."""

from fundtrades.api.schemas.trade import (
    TradeIn,
    TradeResponse,
    ResolveClosePricesRequest,
    TradeListResponse,
    PurgePricesResponse,
)
from fundtrades.api.schemas.stock import DailyQuoteResponse
from fundtrades.api.schemas.note import NoteSaveRequest, NoteResponse, MessageResponse
from fundtrades.api.schemas.symbol import StockSymbolItem

__all__ = [
    "TradeIn",
    "TradeResponse",
    "ResolveClosePricesRequest",
    "TradeListResponse",
    "PurgePricesResponse",
    "DailyQuoteResponse",
    "NoteSaveRequest",
    "NoteResponse",
    "MessageResponse",
    "StockSymbolItem",
]
