"""Pydantic schemas for symbol ordering endpoints."""

from pydantic import BaseModel, Field


class StockSymbolItem(BaseModel):
    """A symbol with its display order (request and response)."""

    model_config = {"from_attributes": True}

    symbol: str = Field(..., min_length=1, max_length=20)
    display_order: int = Field(..., ge=0)
