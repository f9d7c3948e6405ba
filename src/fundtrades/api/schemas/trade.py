"""Pydantic schemas for trade endpoints."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from fundtrades.domain.models import Trade, TradeDirection


class TradeIn(BaseModel):
    """A trade supplied by the caller for close resolution."""

    date: str = Field(..., min_length=1, description="YYYY-MM-DD or any ISO-8601 instant")
    shares: Decimal = Field(default=Decimal("0"), description="Shares traded")
    price: Optional[Decimal] = Field(default=None, description="Transaction price")
    fund: Optional[str] = None
    direction: Optional[TradeDirection] = None
    etf_percent: Optional[Decimal] = None

    def to_domain(self) -> Trade:
        return Trade(
            date=self.date,
            shares=self.shares,
            price=self.price,
            fund=self.fund,
            direction=self.direction,
            etf_percent=self.etf_percent,
        )


class TradeResponse(BaseModel):
    """A trade with its resolved close (null when unavailable)."""

    date: str
    shares: Decimal
    price: Optional[Decimal] = None
    close: Optional[Decimal] = None
    fund: Optional[str] = None
    direction: Optional[TradeDirection] = None
    etf_percent: Optional[Decimal] = None
    ticker: Optional[str] = None
    company: Optional[str] = None
    cusip: Optional[str] = None

    @classmethod
    def from_domain(cls, trade: Trade) -> "TradeResponse":
        return cls(
            date=trade.date if isinstance(trade.date, str) else trade.date.isoformat(),
            shares=trade.shares,
            price=trade.price,
            close=trade.close,
            fund=trade.fund,
            direction=trade.direction,
            etf_percent=trade.etf_percent,
            ticker=trade.ticker,
            company=trade.company,
            cusip=trade.cusip,
        )


class ResolveClosePricesRequest(BaseModel):
    """Request schema for resolving closes on caller-supplied trades."""

    symbol: str = Field(..., min_length=1, max_length=20)
    trades: list[TradeIn]

    @field_validator("symbol")
    @classmethod
    def uppercase_symbol(cls, v: str) -> str:
        return v.strip().upper()


class TradeListResponse(BaseModel):
    """Response schema for trades of one symbol."""

    symbol: str
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    trades: list[TradeResponse]


class PurgePricesResponse(BaseModel):
    """Response schema for a stored price purge."""

    symbol: str
    deleted: int
