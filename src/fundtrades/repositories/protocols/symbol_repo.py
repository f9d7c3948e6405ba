"""Stock symbol repository protocol."""

from typing import Protocol

from fundtrades.domain.models import StockSymbol


class SymbolRepository(Protocol):
    """Interface for tracked symbols and their display order."""

    def list_ordered(self) -> list[StockSymbol]:
        """List all symbols ordered by display_order."""
        ...

    def upsert_many(self, symbols: list[StockSymbol]) -> list[StockSymbol]:
        """Insert or update symbols keyed by symbol."""
        ...
