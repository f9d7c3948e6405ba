"""Trade domain model."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union

from fundtrades.domain.models.enums import TradeDirection


@dataclass
class Trade:
    """
    A single fund transaction in one security on one day.

    `price` is the transaction price reported with the trade; `close` is the
    security's closing price that day and stays None until resolved.
    Trades are identified by their position in a list, never deduplicated.
    """

    date: Union[str, datetime, date]
    shares: Decimal = Decimal("0")
    price: Optional[Decimal] = None
    close: Optional[Decimal] = None
    fund: Optional[str] = None
    direction: Optional[TradeDirection] = None
    etf_percent: Optional[Decimal] = None
    ticker: Optional[str] = None
    company: Optional[str] = None
    cusip: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.direction, str):
            self.direction = TradeDirection(self.direction)

    @property
    def has_close(self) -> bool:
        """Return True once a closing price has been resolved."""
        return self.close is not None
