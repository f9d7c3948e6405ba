"""Single-symbol market endpoints."""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from fundtrades.api.deps import get_trade_service
from fundtrades.api.schemas import DailyQuoteResponse
from fundtrades.services import TradeService

router = APIRouter(tags=["stock"])


@router.get("/stock", response_model=Optional[DailyQuoteResponse])
def get_stock_quote(
    symbol: str = Query(..., min_length=1, max_length=20),
    date: str = Query(..., min_length=1, description="Trading day, YYYY-MM-DD"),
    service: TradeService = Depends(get_trade_service),
) -> Optional[DailyQuoteResponse]:
    """Get one day's bar straight from the provider; null if it did not trade."""
    quote = service.get_stock_quote(symbol, date)
    return DailyQuoteResponse.model_validate(quote) if quote else None


@router.get("/weight")
def get_fund_weight(
    symbol: str = Query(..., min_length=1, max_length=20),
    service: TradeService = Depends(get_trade_service),
) -> dict[str, Any]:
    """Get fund ownership weights for a symbol (provider payload as-is)."""
    return service.get_fund_ownership(symbol)
