"""HTTP client for the arkfunds.io trade and ownership endpoints."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import httpx

from fundtrades.core.exceptions import ProviderError
from fundtrades.domain.models import Trade, TradeDirection
from fundtrades.domain.views import TradeList

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://arkfunds.io/api/v2"


def _optional_decimal(value: Any) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    return Decimal(str(value))


def _parse_direction(value: Any) -> Optional[TradeDirection]:
    if not value:
        return None
    try:
        return TradeDirection(str(value).strip().capitalize())
    except ValueError:
        logger.warning("Unknown trade direction %r", value)
        return None


class ArkFundsClient:
    """Thin wrapper around the arkfunds.io public API."""

    name = "arkfunds"

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "ArkFundsClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        logger.info("arkfunds GET %s params=%s", path, params)
        try:
            response = self.client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                self.name,
                f"{path} returned {e.response.status_code} {e.response.reason_phrase}",
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(self.name, f"{path} request failed: {e}") from e
        except ValueError as e:
            raise ProviderError(self.name, f"{path} returned invalid JSON: {e}") from e

    def get_trades(
        self,
        symbol: str,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
    ) -> TradeList:
        """Fetch fund trades in symbol."""
        params: dict[str, Any] = {"symbol": symbol}
        if date_from:
            params["date_from"] = date_from
        if date_to:
            params["date_to"] = date_to

        payload = self._get_json("/stock/trades", params)
        if not isinstance(payload, dict) or not isinstance(payload.get("trades", []), list):
            raise ProviderError(self.name, "/stock/trades payload has no trades list")

        try:
            trades = [self._parse_trade(raw) for raw in payload.get("trades", [])]
        except (KeyError, TypeError, InvalidOperation) as e:
            raise ProviderError(self.name, f"malformed trade record: {e}") from e

        return TradeList(
            symbol=payload.get("symbol") or symbol,
            date_from=payload.get("date_from") or date_from,
            date_to=payload.get("date_to") or date_to,
            trades=trades,
        )

    def get_fund_ownership(self, symbol: str) -> dict[str, Any]:
        """Fetch per-fund ownership weights for symbol."""
        payload = self._get_json("/stock/fund-ownership", {"symbol": symbol})
        if not isinstance(payload, dict):
            raise ProviderError(self.name, "/stock/fund-ownership payload is not an object")
        return payload

    @staticmethod
    def _parse_trade(raw: dict[str, Any]) -> Trade:
        return Trade(
            date=raw["date"],
            shares=_optional_decimal(raw.get("shares")) or Decimal("0"),
            price=_optional_decimal(raw.get("price")),
            fund=raw.get("fund"),
            direction=_parse_direction(raw.get("direction")),
            etf_percent=_optional_decimal(raw.get("etf_percent")),
            ticker=raw.get("ticker"),
            company=raw.get("company"),
            cusip=raw.get("cusip"),
        )
