"""Service layer - business logic orchestration."""

from fundtrades.services.price_fetcher import PriceFetcher
from fundtrades.services.close_price_resolver import ClosePriceResolver
from fundtrades.services.trade_service import TradeService
from fundtrades.services.note_service import NoteService
from fundtrades.services.symbol_service import SymbolService

__all__ = [
    "PriceFetcher",
    "ClosePriceResolver",
    "TradeService",
    "NoteService",
    "SymbolService",
]
