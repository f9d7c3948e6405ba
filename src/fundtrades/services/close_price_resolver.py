"""Close price resolution: price store first, market data provider for the gaps, then backfill."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import replace
from decimal import Decimal
from typing import Optional

from fundtrades.core.dates import now_utc, to_date_key
from fundtrades.core.exceptions import InvalidDateError
from fundtrades.core.symbols import require_symbol
from fundtrades.domain.models import PricePoint, Trade
from fundtrades.repositories.protocols import PriceRepository
from fundtrades.services.price_fetcher import PriceFetcher

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 4


class ClosePriceResolver:
    """
    Annotates trades with the security's close on the trade date.

    Tiered lookup per call:
    1. one range query against the price store covering all trade dates
    2. one provider request per distinct date still missing
    3. write the newly fetched prices back to the store

    Store and provider failures only reduce how many trades get a close;
    they never fail the call. The returned list always has the same length
    and order as the input.
    """

    def __init__(
        self,
        price_repo: PriceRepository,
        price_fetcher: PriceFetcher,
        max_workers: int = DEFAULT_MAX_WORKERS,
        timeout_seconds: Optional[float] = None,
    ):
        self._price_repo = price_repo
        self._price_fetcher = price_fetcher
        self._max_workers = max(1, max_workers)
        self._timeout = timeout_seconds

    def resolve_close_prices(self, symbol: str, trades: list[Trade]) -> list[Trade]:
        """
        Return copies of trades with `close` set wherever it can be resolved.

        Raises InvalidDateError only if no trade carries a usable date, since
        the store range cannot be established.
        """
        if not trades:
            return []

        symbol = require_symbol(symbol)
        deadline = time.monotonic() + self._timeout if self._timeout is not None else None
        logger.info("Resolving close prices for %d %s trades", len(trades), symbol)

        keys = [self._safe_date_key(t) for t in trades]
        valid_keys = [k for k in keys if k is not None]
        if not valid_keys:
            raise InvalidDateError(trades[0].date, reason="no trade has a valid date")
        min_key = min(valid_keys)
        max_key = max(valid_keys)
        logger.info("Date range for %s: %s to %s", symbol, min_key, max_key)

        price_map = self._load_stored_prices(symbol, min_key, max_key)

        enriched = [
            replace(t, close=price_map[k]) if k is not None and k in price_map else replace(t)
            for t, k in zip(trades, keys)
        ]

        # Distinct, first-seen order
        missing = list(dict.fromkeys(
            k for t, k in zip(enriched, keys) if t.close is None and k is not None
        ))
        if not missing:
            logger.info("All %s trades priced from store", symbol)
            return enriched
        logger.info("Need provider data for %d unique %s dates", len(missing), symbol)

        fetched = self._fetch_missing(symbol, missing, deadline)
        self._backfill(symbol, missing, fetched)

        return [
            replace(t, close=fetched[k]) if t.close is None and k in fetched else t
            for t, k in zip(enriched, keys)
        ]

    @staticmethod
    def _safe_date_key(trade: Trade) -> Optional[str]:
        try:
            return to_date_key(trade.date)
        except InvalidDateError as e:
            logger.warning("Skipping trade with invalid date: %s", e.message)
            return None

    def _load_stored_prices(self, symbol: str, min_key: str, max_key: str) -> dict[str, Decimal]:
        try:
            points = self._price_repo.range_fetch(symbol, min_key, max_key)
        except Exception as e:
            logger.warning("Price store read failed for %s, falling back to provider: %s", symbol, e)
            return {}
        logger.info("Retrieved %d stored prices for %s", len(points), symbol)

        price_map: dict[str, Decimal] = {}
        for p in points:
            try:
                price_map[to_date_key(p.date)] = p.price
            except InvalidDateError as e:
                logger.warning("Ignoring stored price with bad date: %s", e.message)
        return price_map

    def _fetch_missing(
        self,
        symbol: str,
        missing: list[str],
        deadline: Optional[float],
    ) -> dict[str, Decimal]:
        """Fetch each missing date once on a bounded pool; failures leave the date out."""
        workers = min(self._max_workers, len(missing))
        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="close-fetch")
        futures = {
            executor.submit(self._price_fetcher.fetch_daily_close, symbol, day_key): day_key
            for day_key in missing
        }
        try:
            timeout = None if deadline is None else max(0.0, deadline - time.monotonic())
            done, not_done = wait(futures, timeout=timeout)
        finally:
            # Do not block on stragglers after a timeout
            executor.shutdown(wait=False, cancel_futures=True)

        for future in not_done:
            future.cancel()
            logger.warning("Timed out fetching close for %s on %s", symbol, futures[future])

        fetched: dict[str, Decimal] = {}
        for future in done:
            day_key = futures[future]
            try:
                close = future.result()
            except Exception as e:
                logger.warning("Error fetching close for %s on %s: %s", symbol, day_key, e)
                continue
            if close is not None:
                fetched[day_key] = close
        return fetched

    def _backfill(self, symbol: str, missing: list[str], fetched: dict[str, Decimal]) -> None:
        observed_at = now_utc()
        unique: dict[tuple[str, str], PricePoint] = {}
        for day_key in missing:
            if day_key in fetched:
                point = PricePoint(
                    symbol=symbol,
                    date=day_key,
                    price=fetched[day_key],
                    observed_at=observed_at,
                )
                unique[point.key] = point
        if not unique:
            return

        logger.info("Inserting %d new %s prices into store", len(unique), symbol)
        try:
            self._price_repo.batch_upsert(list(unique.values()))
        except Exception as e:
            logger.warning("Price store write failed for %s: %s", symbol, e)
