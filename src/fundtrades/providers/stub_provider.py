"""Stub market data provider for offline/testing use."""

import zlib
from datetime import date, timedelta
from decimal import Decimal

from fundtrades.core.dates import parse_date_key
from fundtrades.domain.models import DailyQuote


# Deterministic base prices for common symbols
_STUB_BASE_PRICES: dict[str, Decimal] = {
    "TSLA": Decimal("248.75"),
    "COIN": Decimal("165.20"),
    "ROKU": Decimal("72.40"),
    "PLTR": Decimal("24.10"),
    "HOOD": Decimal("18.65"),
    "SQ": Decimal("70.35"),
    "CRSP": Decimal("55.80"),
    "PATH": Decimal("15.25"),
}


class StubMarketDataProvider:
    """
    Stub provider with deterministic fake daily closes.

    Weekdays are trading days; weekends return nothing. Prices depend only on
    (symbol, date) so repeated calls agree.
    """

    name = "stub"

    def get_daily_quotes(self, symbol: str, start_key: str, end_key: str) -> list[DailyQuote]:
        """Return one bar per weekday in [start_key, end_key)."""
        start = parse_date_key(start_key)
        end = parse_date_key(end_key)
        quotes = []
        d = start
        while d < end:
            if d.weekday() < 5:
                close = self._close_for(symbol.upper(), d)
                quotes.append(
                    DailyQuote(
                        date=d.isoformat(),
                        open=close,
                        high=close,
                        low=close,
                        close=close,
                        adj_close=close,
                        volume=1_000_000,
                    )
                )
            d += timedelta(days=1)
        return quotes

    @staticmethod
    def _close_for(symbol: str, day: date) -> Decimal:
        base = _STUB_BASE_PRICES.get(symbol)
        if base is None:
            base = Decimal(50 + zlib.crc32(symbol.encode()) % 200)
        # +/- 5% wobble keyed on the day
        wobble = Decimal(zlib.crc32(f"{symbol}{day.isoformat()}".encode()) % 1000 - 500) / Decimal(10000)
        return (base * (1 + wobble)).quantize(Decimal("0.01"))
