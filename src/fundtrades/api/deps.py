"""Dependency injection for FastAPI."""

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from fundtrades.config.settings import get_settings
from fundtrades.providers import (
    ArkFundsClient,
    MarketDataProvider,
    StubMarketDataProvider,
    TradeListProvider,
    YFinanceMarketDataProvider,
)
from fundtrades.repositories.sqlalchemy import (
    get_db,
    SqlAlchemyPriceRepository,
    SqlAlchemyNoteRepository,
    SqlAlchemySymbolRepository,
)
from fundtrades.services import (
    PriceFetcher,
    ClosePriceResolver,
    TradeService,
    NoteService,
    SymbolService,
)


def get_price_repo(db: Session = Depends(get_db)) -> SqlAlchemyPriceRepository:
    """Provide PriceRepository instance."""
    return SqlAlchemyPriceRepository(db)


def get_note_repo(db: Session = Depends(get_db)) -> SqlAlchemyNoteRepository:
    """Provide NoteRepository instance."""
    return SqlAlchemyNoteRepository(db)


def get_symbol_repo(db: Session = Depends(get_db)) -> SqlAlchemySymbolRepository:
    """Provide SymbolRepository instance."""
    return SqlAlchemySymbolRepository(db)


def get_market_provider() -> MarketDataProvider:
    """Provide the configured MarketDataProvider."""
    settings = get_settings()
    if settings.market_data_provider == "stub":
        return StubMarketDataProvider()
    return YFinanceMarketDataProvider(timeout_seconds=settings.market_data_timeout_seconds)


def get_trade_list_provider() -> Generator[TradeListProvider, None, None]:
    """Provide a trade list client, closed after the request."""
    settings = get_settings()
    client = ArkFundsClient(
        base_url=settings.arkfunds_base_url,
        timeout=settings.arkfunds_timeout_seconds,
    )
    try:
        yield client
    finally:
        client.close()


def get_price_fetcher(
    provider: MarketDataProvider = Depends(get_market_provider),
) -> PriceFetcher:
    """Provide PriceFetcher instance."""
    return PriceFetcher(provider)


def get_close_price_resolver(
    price_repo: SqlAlchemyPriceRepository = Depends(get_price_repo),
    price_fetcher: PriceFetcher = Depends(get_price_fetcher),
) -> ClosePriceResolver:
    """Provide ClosePriceResolver instance."""
    settings = get_settings()
    return ClosePriceResolver(
        price_repo=price_repo,
        price_fetcher=price_fetcher,
        max_workers=settings.resolver_max_workers,
        timeout_seconds=settings.resolver_timeout_seconds,
    )


def get_trade_service(
    trade_provider: TradeListProvider = Depends(get_trade_list_provider),
    resolver: ClosePriceResolver = Depends(get_close_price_resolver),
    price_fetcher: PriceFetcher = Depends(get_price_fetcher),
    price_repo: SqlAlchemyPriceRepository = Depends(get_price_repo),
) -> TradeService:
    """Provide TradeService instance."""
    return TradeService(
        trade_provider=trade_provider,
        resolver=resolver,
        price_fetcher=price_fetcher,
        price_repo=price_repo,
    )


def get_note_service(
    note_repo: SqlAlchemyNoteRepository = Depends(get_note_repo),
) -> NoteService:
    """Provide NoteService instance."""
    return NoteService(note_repo)


def get_symbol_service(
    symbol_repo: SqlAlchemySymbolRepository = Depends(get_symbol_repo),
) -> SymbolService:
    """Provide SymbolService instance."""
    return SymbolService(symbol_repo)
