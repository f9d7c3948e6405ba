"""Market data provider protocol."""

from typing import Protocol

from fundtrades.domain.models import DailyQuote


class MarketDataProvider(Protocol):
    """
    Protocol for historical daily market data.

    Implementations return the trading days inside the half-open interval
    [start_key, end_key). A closed market or untraded symbol yields an empty
    list, not an error. Transport or parse failures raise ProviderError.
    """

    name: str

    def get_daily_quotes(self, symbol: str, start_key: str, end_key: str) -> list[DailyQuote]:
        """Fetch daily bars for symbol, ascending by date."""
        ...
