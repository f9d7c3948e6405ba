"""View models for trade service outputs."""

from dataclasses import dataclass, field
from typing import Optional

from fundtrades.domain.models import Trade


@dataclass
class TradeList:
    """Trades for one symbol over an optional date window."""

    symbol: str
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    trades: list[Trade] = field(default_factory=list)

    @property
    def priced_count(self) -> int:
        """Number of trades with a resolved close."""
        return sum(1 for t in self.trades if t.has_close)
