"""yfinance-backed market data provider."""

import logging
from decimal import Decimal
from typing import Optional

import pandas as pd

from fundtrades.core.exceptions import ProviderError
from fundtrades.domain.models import DailyQuote

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


# Lazy import so tests can patch before import
def _get_yf():
    import yfinance as yf
    return yf


def _to_decimal(value) -> Optional[Decimal]:
    if value is None or pd.isna(value):
        return None
    return Decimal(str(float(value)))


class YFinanceMarketDataProvider:
    """
    Fetches unadjusted daily bars from Yahoo Finance via yfinance.

    One call to Ticker.history per request; dates come from the exchange-local
    bar index, which is the trading day the bar belongs to.
    """

    name = "yfinance"

    def __init__(self, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS):
        self._timeout = timeout_seconds

    def get_daily_quotes(self, symbol: str, start_key: str, end_key: str) -> list[DailyQuote]:
        """Fetch daily bars for [start_key, end_key)."""
        yf = _get_yf()
        try:
            hist = yf.Ticker(symbol).history(
                start=start_key,
                end=end_key,
                interval="1d",
                auto_adjust=False,
                actions=False,
                timeout=self._timeout,
            )
        except Exception as e:
            raise ProviderError(self.name, f"history({symbol}, {start_key}, {end_key}) failed: {e}") from e

        if hist is None or hist.empty:
            logger.debug("yfinance: no bars for %s in [%s, %s)", symbol, start_key, end_key)
            return []

        try:
            return [self._row_to_quote(idx, row) for idx, row in hist.iterrows()]
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(self.name, f"unexpected history frame for {symbol}: {e}") from e

    @staticmethod
    def _row_to_quote(idx, row) -> DailyQuote:
        day = idx.date() if hasattr(idx, "date") else idx
        volume = row.get("Volume")
        return DailyQuote(
            date=day.isoformat(),
            open=_to_decimal(row.get("Open")),
            high=_to_decimal(row.get("High")),
            low=_to_decimal(row.get("Low")),
            close=_to_decimal(row.get("Close")),
            adj_close=_to_decimal(row.get("Adj Close")),
            volume=None if volume is None or pd.isna(volume) else int(volume),
        )
