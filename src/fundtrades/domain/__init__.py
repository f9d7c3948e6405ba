"""Domain layer - pure business models with no external dependencies."""

from fundtrades.domain.models import (
    TradeDirection,
    Trade,
    PricePoint,
    DailyQuote,
    SymbolNote,
    StockSymbol,
)

__all__ = [
    "TradeDirection",
    "Trade",
    "PricePoint",
    "DailyQuote",
    "SymbolNote",
    "StockSymbol",
]
