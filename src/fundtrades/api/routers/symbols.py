"""Tracked symbol endpoints."""

from fastapi import APIRouter, Depends

from fundtrades.api.deps import get_symbol_service
from fundtrades.api.schemas import StockSymbolItem
from fundtrades.domain.models import StockSymbol
from fundtrades.services import SymbolService

router = APIRouter(prefix="/symbols", tags=["symbols"])


@router.get("", response_model=list[StockSymbolItem])
def list_symbols(
    service: SymbolService = Depends(get_symbol_service),
) -> list[StockSymbolItem]:
    """List tracked symbols by display order."""
    return [StockSymbolItem.model_validate(s) for s in service.list_symbols()]


@router.put("", response_model=list[StockSymbolItem])
def update_symbol_order(
    items: list[StockSymbolItem],
    service: SymbolService = Depends(get_symbol_service),
) -> list[StockSymbolItem]:
    """Update display order for the given symbols."""
    updated = service.update_order(
        [StockSymbol(symbol=i.symbol, display_order=i.display_order) for i in items]
    )
    return [StockSymbolItem.model_validate(s) for s in updated]
