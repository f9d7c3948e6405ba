"""Trade list provider protocol."""

from typing import Any, Optional, Protocol

from fundtrades.domain.views import TradeList


class TradeListProvider(Protocol):
    """
    Protocol for sources of raw fund trades.

    Implementations raise ProviderError on transport or decoding failure.
    """

    name: str

    def get_trades(
        self,
        symbol: str,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
    ) -> TradeList:
        """Fetch trades in symbol, optionally bounded by date."""
        ...

    def get_fund_ownership(self, symbol: str) -> dict[str, Any]:
        """Fetch which funds hold symbol and at what weight."""
        ...
