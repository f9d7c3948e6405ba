"""Domain models package."""

from fundtrades.domain.models.enums import TradeDirection
from fundtrades.domain.models.trade import Trade
from fundtrades.domain.models.price import PricePoint, DailyQuote
from fundtrades.domain.models.symbol import SymbolNote, StockSymbol

__all__ = [
    "TradeDirection",
    "Trade",
    "PricePoint",
    "DailyQuote",
    "SymbolNote",
    "StockSymbol",
]
