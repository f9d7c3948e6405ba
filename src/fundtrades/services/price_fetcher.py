"""Single-day close lookups against the market data provider."""

import logging
from decimal import Decimal
from typing import Optional

from fundtrades.core.dates import DateInput, add_days, to_date_key
from fundtrades.core.exceptions import ProviderError
from fundtrades.domain.models import DailyQuote
from fundtrades.providers.market_data_provider import MarketDataProvider

logger = logging.getLogger(__name__)


class PriceFetcher:
    """
    Issues exactly one provider request per day, covering [day, day + 1).

    A day with no bar (market closed, symbol not trading) is reported as
    None. Only transport/parse failures raise ProviderError.
    """

    def __init__(self, provider: MarketDataProvider):
        self._provider = provider

    @property
    def provider_name(self) -> str:
        return getattr(self._provider, "name", type(self._provider).__name__)

    def fetch_daily_quote(self, symbol: str, day: DateInput) -> Optional[DailyQuote]:
        """Return the day's bar, or None if the symbol did not trade."""
        day_key = to_date_key(day)
        next_key = add_days(day_key, 1)
        try:
            quotes = self._provider.get_daily_quotes(symbol, day_key, next_key)
        except ProviderError:
            raise
        except Exception as e:
            raise ProviderError(self.provider_name, f"{symbol} {day_key}: {e}") from e

        if not quotes:
            logger.info("%s: %s %s no quotes", self.provider_name, symbol, day_key)
            return None
        return quotes[0]

    def fetch_daily_close(self, symbol: str, day_key: str) -> Optional[Decimal]:
        """Return the day's closing price, or None if unavailable."""
        quote = self.fetch_daily_quote(symbol, day_key)
        if quote is None:
            return None
        if quote.close is None:
            logger.info("%s: %s %s no close in first quote", self.provider_name, symbol, day_key)
            return None
        logger.info("%s: %s %s close=%s", self.provider_name, symbol, day_key, quote.close)
        return quote.close
