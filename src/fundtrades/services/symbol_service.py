"""Tracked symbols and their display order."""

from fundtrades.core.exceptions import ValidationError
from fundtrades.core.symbols import require_symbol
from fundtrades.domain.models import StockSymbol
from fundtrades.repositories.protocols import SymbolRepository


class SymbolService:
    """Lists tracked symbols and persists user-chosen ordering."""

    def __init__(self, symbol_repo: SymbolRepository):
        self._symbol_repo = symbol_repo

    def list_symbols(self) -> list[StockSymbol]:
        """List symbols ordered by display_order."""
        return self._symbol_repo.list_ordered()

    def update_order(self, items: list[StockSymbol]) -> list[StockSymbol]:
        """
        Upsert display order for each symbol.

        Symbols are normalized; a symbol listed twice keeps its last order.
        """
        by_symbol: dict[str, StockSymbol] = {}
        for item in items:
            if item.display_order < 0:
                raise ValidationError(
                    f"display_order must be non-negative for {item.symbol!r}"
                )
            symbol = require_symbol(item.symbol)
            by_symbol[symbol] = StockSymbol(symbol=symbol, display_order=item.display_order)
        if not by_symbol:
            return []
        return self._symbol_repo.upsert_many(list(by_symbol.values()))
