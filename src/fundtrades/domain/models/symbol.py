"""Symbol-level models: notes and display ordering."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class SymbolNote:
    """Free-text note attached to a symbol (one per symbol)."""

    symbol: str
    note: str = ""
    updated_at: Optional[datetime] = field(default=None)


@dataclass
class StockSymbol:
    """A tracked symbol and its position in the UI list."""

    symbol: str
    display_order: int = 0
