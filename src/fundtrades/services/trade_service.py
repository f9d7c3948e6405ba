"""Trade service: fund trades enriched with close prices."""

import logging
from typing import Any, Optional

from fundtrades.core.dates import DateInput, to_date_key
from fundtrades.core.exceptions import ValidationError
from fundtrades.core.symbols import require_symbol
from fundtrades.domain.models import DailyQuote, Trade
from fundtrades.domain.views import TradeList
from fundtrades.providers.trade_list_provider import TradeListProvider
from fundtrades.repositories.protocols import PriceRepository
from fundtrades.services.close_price_resolver import ClosePriceResolver
from fundtrades.services.price_fetcher import PriceFetcher

logger = logging.getLogger(__name__)


class TradeService:
    """
    Entry point for callers that want trades with closing prices.

    Pulls raw trades from the trade list provider and hands them to the
    ClosePriceResolver. Also exposes single-day quotes, fund ownership and
    the price purge used by cleanup flows.
    """

    def __init__(
        self,
        trade_provider: TradeListProvider,
        resolver: ClosePriceResolver,
        price_fetcher: PriceFetcher,
        price_repo: PriceRepository,
    ):
        self._trade_provider = trade_provider
        self._resolver = resolver
        self._price_fetcher = price_fetcher
        self._price_repo = price_repo

    def get_trades_with_close(
        self,
        symbol: str,
        date_from: Optional[DateInput] = None,
        date_to: Optional[DateInput] = None,
    ) -> TradeList:
        """Fetch trades for symbol and resolve each trade's close."""
        symbol = require_symbol(symbol)
        from_key = to_date_key(date_from) if date_from else None
        to_key = to_date_key(date_to) if date_to else None
        if from_key and to_key and from_key > to_key:
            raise ValidationError(f"date_from {from_key} is after date_to {to_key}")

        trade_list = self._trade_provider.get_trades(symbol, from_key, to_key)
        trade_list.trades = self._resolver.resolve_close_prices(symbol, trade_list.trades)
        logger.info(
            "Returning %d %s trades (%d priced)",
            len(trade_list.trades),
            symbol,
            trade_list.priced_count,
        )
        return trade_list

    def resolve(self, symbol: str, trades: list[Trade]) -> list[Trade]:
        """Resolve closes for caller-supplied trades."""
        return self._resolver.resolve_close_prices(symbol, trades)

    def get_stock_quote(self, symbol: str, day: DateInput) -> Optional[DailyQuote]:
        """Return the bar for symbol on day straight from the provider."""
        return self._price_fetcher.fetch_daily_quote(require_symbol(symbol), day)

    def get_fund_ownership(self, symbol: str) -> dict[str, Any]:
        """Return which funds hold symbol."""
        return self._trade_provider.get_fund_ownership(require_symbol(symbol))

    def purge_prices(self, symbol: str) -> int:
        """Delete every stored close for symbol."""
        symbol = require_symbol(symbol)
        count = self._price_repo.delete_all(symbol)
        logger.info("Purged %d stored prices for %s", count, symbol)
        return count
