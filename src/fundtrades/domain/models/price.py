"""Price domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class PricePoint:
    """
    Persisted daily close for a symbol.

    At most one per (symbol, date); re-upserting overwrites the price.
    `observed_at` records when the price was captured and is never used
    for invalidation.
    """

    symbol: str
    date: str
    price: Decimal
    observed_at: Optional[datetime] = field(default=None)

    @property
    def key(self) -> tuple[str, str]:
        """Uniqueness key in the store."""
        return (self.symbol, self.date)


@dataclass
class DailyQuote:
    """One trading day's OHLCV bar from the market data provider."""

    date: str
    open: Optional[Decimal] = None
    high: Optional[Decimal] = None
    low: Optional[Decimal] = None
    close: Optional[Decimal] = None
    adj_close: Optional[Decimal] = None
    volume: Optional[int] = None
