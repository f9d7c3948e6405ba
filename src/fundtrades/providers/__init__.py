"""External data providers."""

from fundtrades.providers.market_data_provider import MarketDataProvider
from fundtrades.providers.yfinance_provider import YFinanceMarketDataProvider
from fundtrades.providers.stub_provider import StubMarketDataProvider
from fundtrades.providers.trade_list_provider import TradeListProvider
from fundtrades.providers.arkfunds_client import ArkFundsClient

__all__ = [
    "MarketDataProvider",
    "YFinanceMarketDataProvider",
    "StubMarketDataProvider",
    "TradeListProvider",
    "ArkFundsClient",
]
