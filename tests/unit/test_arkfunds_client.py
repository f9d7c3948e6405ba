"""
Unit tests for ArkFundsClient using httpx.MockTransport.
"""

import json
from decimal import Decimal

import httpx
import pytest

from fundtrades.core.exceptions import ProviderError
from fundtrades.domain.models import TradeDirection
from fundtrades.providers import ArkFundsClient


TRADES_PAYLOAD = {
    "symbol": "TSLA",
    "date_from": "2023-01-03",
    "date_to": "2023-01-05",
    "trades": [
        {
            "date": "2023-01-03",
            "fund": "ARKK",
            "direction": "Buy",
            "ticker": "TSLA",
            "company": "TESLA INC",
            "cusip": "88160R101",
            "shares": 1000,
            "etf_percent": 0.0123,
        },
        {
            "date": "2023-01-05",
            "fund": "ARKW",
            "direction": "sell",
            "ticker": "TSLA",
            "shares": "250",
            "price": "110.34",
        },
    ],
}


def make_client(handler) -> ArkFundsClient:
    return ArkFundsClient(
        base_url="https://arkfunds.io/api/v2",
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


class TestGetTrades:
    def test_request_and_parse(self):
        """
        GIVEN arkfunds returns two trades
        WHEN I call get_trades with a date range
        THEN the request hits /stock/trades with query params and trades parse to Decimal fields
        """
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=TRADES_PAYLOAD)

        with make_client(handler) as client:
            result = client.get_trades("TSLA", "2023-01-03", "2023-01-05")

        (request,) = seen
        assert request.url.path == "/api/v2/stock/trades"
        assert request.url.params["symbol"] == "TSLA"
        assert request.url.params["date_from"] == "2023-01-03"
        assert request.url.params["date_to"] == "2023-01-05"

        assert result.symbol == "TSLA"
        assert len(result.trades) == 2
        first, second = result.trades
        assert first.date == "2023-01-03"
        assert first.shares == Decimal("1000")
        assert first.direction is TradeDirection.BUY
        assert first.etf_percent == Decimal("0.0123")
        assert first.price is None
        assert first.close is None
        assert second.direction is TradeDirection.SELL
        assert second.price == Decimal("110.34")

    def test_omits_empty_range_params(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"symbol": "TSLA", "trades": []})

        with make_client(handler) as client:
            result = client.get_trades("TSLA")

        assert "date_from" not in seen[0].url.params
        assert "date_to" not in seen[0].url.params
        assert result.trades == []

    def test_unknown_direction_left_empty(self):
        payload = {"trades": [{"date": "2023-01-03", "direction": "Hold", "shares": 1}]}

        with make_client(lambda request: httpx.Response(200, json=payload)) as client:
            result = client.get_trades("TSLA")

        assert result.trades[0].direction is None

    def test_http_error_status(self):
        with make_client(lambda request: httpx.Response(503)) as client:
            with pytest.raises(ProviderError) as exc_info:
                client.get_trades("TSLA")

        assert "503" in exc_info.value.message
        assert exc_info.value.code == "PROVIDER_ERROR"

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with make_client(handler) as client:
            with pytest.raises(ProviderError):
                client.get_trades("TSLA")

    def test_invalid_json(self):
        with make_client(lambda request: httpx.Response(200, content=b"<html>")) as client:
            with pytest.raises(ProviderError):
                client.get_trades("TSLA")

    def test_payload_without_trades_list(self):
        with make_client(lambda request: httpx.Response(200, json={"trades": "none"})) as client:
            with pytest.raises(ProviderError):
                client.get_trades("TSLA")

    def test_trade_without_date(self):
        payload = {"trades": [{"fund": "ARKK", "shares": 1}]}

        with make_client(lambda request: httpx.Response(200, json=payload)) as client:
            with pytest.raises(ProviderError):
                client.get_trades("TSLA")


class TestGetFundOwnership:
    def test_returns_payload(self):
        payload = {"symbol": "TSLA", "ownership": [{"fund": "ARKK", "weight": 9.1}]}
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, content=json.dumps(payload).encode())

        with make_client(handler) as client:
            result = client.get_fund_ownership("TSLA")

        assert seen[0].url.path == "/api/v2/stock/fund-ownership"
        assert result == payload

    def test_non_object_payload(self):
        with make_client(lambda request: httpx.Response(200, json=[1, 2])) as client:
            with pytest.raises(ProviderError):
                client.get_fund_ownership("TSLA")
