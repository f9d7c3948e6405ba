"""Price repository protocol."""

from typing import Protocol

from fundtrades.domain.models import PricePoint


class PriceRepository(Protocol):
    """
    Interface for persisted daily close prices.

    Implementations raise StoreReadError / StoreWriteError on failure;
    callers decide whether to degrade.
    """

    def range_fetch(self, symbol: str, start_key: str, end_key: str) -> list[PricePoint]:
        """Return prices for symbol with start_key <= date <= end_key, ascending by date."""
        ...

    def batch_upsert(self, points: list[PricePoint]) -> list[PricePoint]:
        """Insert or overwrite prices keyed by (symbol, date)."""
        ...

    def delete_all(self, symbol: str) -> int:
        """Delete every price for a symbol. Returns number of rows removed."""
        ...
