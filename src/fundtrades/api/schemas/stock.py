"""Pydantic schemas for stock quote endpoints."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class DailyQuoteResponse(BaseModel):
    """Response schema for one day's bar."""

    model_config = {"from_attributes": True}

    date: str
    open: Optional[Decimal] = None
    high: Optional[Decimal] = None
    low: Optional[Decimal] = None
    close: Optional[Decimal] = None
    adj_close: Optional[Decimal] = None
    volume: Optional[int] = None
