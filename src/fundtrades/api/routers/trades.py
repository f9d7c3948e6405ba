"""Trade endpoints: fund trades with close prices."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from fundtrades.api.deps import get_trade_service
from fundtrades.api.schemas import (
    ResolveClosePricesRequest,
    TradeListResponse,
    TradeResponse,
    PurgePricesResponse,
)
from fundtrades.services import TradeService

router = APIRouter(tags=["trades"])


@router.get("/trades", response_model=TradeListResponse)
def list_trades(
    symbol: str = Query("TSLA", min_length=1, max_length=20),
    date_from: Optional[str] = Query(None, description="YYYY-MM-DD"),
    date_to: Optional[str] = Query(None, description="YYYY-MM-DD"),
    service: TradeService = Depends(get_trade_service),
) -> TradeListResponse:
    """List a symbol's fund trades, each with the close on its trade date."""
    trade_list = service.get_trades_with_close(symbol, date_from, date_to)
    return TradeListResponse(
        symbol=trade_list.symbol,
        date_from=trade_list.date_from,
        date_to=trade_list.date_to,
        trades=[TradeResponse.from_domain(t) for t in trade_list.trades],
    )


@router.post("/trades/close-prices", response_model=list[TradeResponse])
def resolve_close_prices(
    data: ResolveClosePricesRequest,
    service: TradeService = Depends(get_trade_service),
) -> list[TradeResponse]:
    """Resolve closes for caller-supplied trades; order and length are preserved."""
    trades = service.resolve(data.symbol, [t.to_domain() for t in data.trades])
    return [TradeResponse.from_domain(t) for t in trades]


@router.delete("/prices/{symbol}", response_model=PurgePricesResponse)
def purge_prices(
    symbol: str,
    service: TradeService = Depends(get_trade_service),
) -> PurgePricesResponse:
    """Delete every stored close for a symbol."""
    deleted = service.purge_prices(symbol)
    return PurgePricesResponse(symbol=symbol.strip().upper(), deleted=deleted)
