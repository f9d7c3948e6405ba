"""
Pytest configuration and fixtures for fund trades tests.

This module provides:
- In-memory SQLite database fixtures
- In-memory fake price store with failure switches
- Deterministic fake market data and trade list providers
- Service and repository fixtures
- FastAPI test client with dependency overrides
"""

import os

# Settings are read on first import of the app; keep tests off the real data dir
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("MARKET_DATA_PROVIDER", "stub")

import threading
from decimal import Decimal
from typing import Any, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from fundtrades.main import app
from fundtrades.api.deps import get_market_provider, get_trade_list_provider
from fundtrades.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from fundtrades.repositories.sqlalchemy import orm_models  # noqa: F401
from fundtrades.repositories.sqlalchemy import (
    SqlAlchemyPriceRepository,
    SqlAlchemyNoteRepository,
    SqlAlchemySymbolRepository,
)
from fundtrades.core.exceptions import ProviderError, StoreReadError, StoreWriteError
from fundtrades.domain.models import DailyQuote, PricePoint, Trade, TradeDirection
from fundtrades.domain.views import TradeList
from fundtrades.services import (
    PriceFetcher,
    ClosePriceResolver,
    TradeService,
    NoteService,
    SymbolService,
)
from fundtrades.config.settings import reset_settings


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()
    reset_database()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def price_repo(test_session) -> SqlAlchemyPriceRepository:
    """Provide test PriceRepository backed by SQLite."""
    return SqlAlchemyPriceRepository(test_session)


@pytest.fixture
def note_repo(test_session) -> SqlAlchemyNoteRepository:
    """Provide test NoteRepository."""
    return SqlAlchemyNoteRepository(test_session)


@pytest.fixture
def symbol_repo(test_session) -> SqlAlchemySymbolRepository:
    """Provide test SymbolRepository."""
    return SqlAlchemySymbolRepository(test_session)


class InMemoryPriceRepository:
    """
    Dict-backed price store that records every call.

    fail_reads / fail_writes make the next calls raise store errors.
    """

    def __init__(self, points: Optional[list[PricePoint]] = None):
        self._points: dict[tuple[str, str], PricePoint] = {}
        self.range_calls: list[tuple[str, str, str]] = []
        self.upsert_calls: list[list[PricePoint]] = []
        self.fail_reads = False
        self.fail_writes = False
        for p in points or []:
            self._points[p.key] = p

    def range_fetch(self, symbol: str, start_key: str, end_key: str) -> list[PricePoint]:
        self.range_calls.append((symbol, start_key, end_key))
        if self.fail_reads:
            raise StoreReadError("database unavailable")
        return sorted(
            (
                p for p in self._points.values()
                if p.symbol == symbol and start_key <= p.date <= end_key
            ),
            key=lambda p: p.date,
        )

    def batch_upsert(self, points: list[PricePoint]) -> list[PricePoint]:
        self.upsert_calls.append(list(points))
        if self.fail_writes:
            raise StoreWriteError("database is read-only")
        for p in points:
            self._points[p.key] = p
        return list(points)

    def delete_all(self, symbol: str) -> int:
        keys = [k for k in self._points if k[0] == symbol]
        for k in keys:
            del self._points[k]
        return len(keys)

    @property
    def stored(self) -> dict[tuple[str, str], Decimal]:
        return {k: p.price for k, p in self._points.items()}


@pytest.fixture
def memory_price_repo() -> InMemoryPriceRepository:
    """Provide an empty in-memory price store."""
    return InMemoryPriceRepository()


# =============================================================================
# MARKET DATA FIXTURES
# =============================================================================


class FakeMarketProvider:
    """
    Deterministic market data provider for testing.

    Returns a single bar dated start_key when a close is configured for it.
    Dates in fail_dates raise ProviderError. Every request is recorded.
    """

    name = "fake"

    def __init__(
        self,
        closes: Optional[dict[str, Decimal]] = None,
        fail_dates: Optional[set[str]] = None,
    ):
        self.closes = dict(closes or {})
        self.fail_dates = set(fail_dates or ())
        self.calls: list[tuple[str, str, str]] = []
        self._lock = threading.Lock()

    def get_daily_quotes(self, symbol: str, start_key: str, end_key: str) -> list[DailyQuote]:
        with self._lock:
            self.calls.append((symbol, start_key, end_key))
        if start_key in self.fail_dates:
            raise ProviderError(self.name, f"connection reset fetching {symbol} {start_key}")
        if start_key not in self.closes:
            return []
        close = self.closes[start_key]
        return [DailyQuote(date=start_key, open=close, high=close, low=close, close=close, volume=100)]

    def dates_requested(self) -> list[str]:
        return [start for _, start, _ in self.calls]


class FailingMarketProvider:
    """Market provider that always raises a non-provider exception."""

    name = "failing"

    def get_daily_quotes(self, symbol: str, start_key: str, end_key: str) -> list[DailyQuote]:
        raise ConnectionError("Network unavailable")


class BlockingMarketProvider:
    """Market provider that blocks until released (for timeout tests)."""

    name = "blocking"

    def __init__(self):
        self.release = threading.Event()
        self.calls = 0

    def get_daily_quotes(self, symbol: str, start_key: str, end_key: str) -> list[DailyQuote]:
        self.calls += 1
        self.release.wait(timeout=5)
        return [DailyQuote(date=start_key, close=Decimal("1"))]


@pytest.fixture
def fake_provider() -> FakeMarketProvider:
    """Provide a fake provider with no prices configured."""
    return FakeMarketProvider()


@pytest.fixture
def price_fetcher(fake_provider) -> PriceFetcher:
    """Provide PriceFetcher over the fake provider."""
    return PriceFetcher(fake_provider)


# =============================================================================
# TRADE LIST FIXTURES
# =============================================================================


class FakeTradeListProvider:
    """Trade list provider returning preset trades and records requests."""

    name = "fake-trades"

    def __init__(
        self,
        trades: Optional[list[Trade]] = None,
        ownership: Optional[dict[str, Any]] = None,
        fail: bool = False,
    ):
        self.trades = list(trades or [])
        self.ownership = ownership or {}
        self.fail = fail
        self.requests: list[tuple[str, Optional[str], Optional[str]]] = []

    def get_trades(
        self,
        symbol: str,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
    ) -> TradeList:
        self.requests.append((symbol, date_from, date_to))
        if self.fail:
            raise ProviderError(self.name, "503 Service Unavailable")
        return TradeList(symbol=symbol, date_from=date_from, date_to=date_to, trades=list(self.trades))

    def get_fund_ownership(self, symbol: str) -> dict[str, Any]:
        if self.fail:
            raise ProviderError(self.name, "503 Service Unavailable")
        return {"symbol": symbol, **self.ownership}


def make_trade(
    day: str,
    shares: str = "100",
    price: Optional[str] = None,
    fund: str = "ARKK",
    direction: TradeDirection = TradeDirection.BUY,
) -> Trade:
    """Helper to build a Trade with Decimal fields."""
    return Trade(
        date=day,
        shares=Decimal(shares),
        price=Decimal(price) if price is not None else None,
        fund=fund,
        direction=direction,
    )


@pytest.fixture
def sample_trades() -> list[Trade]:
    """Three ARK trades across three days, one day traded by two funds."""
    return [
        make_trade("2023-01-03", shares="1000", fund="ARKK"),
        make_trade("2023-01-04", shares="500", fund="ARKW"),
        make_trade("2023-01-04", shares="250", fund="ARKQ", direction=TradeDirection.SELL),
        make_trade("2023-01-05", shares="75", fund="ARKK"),
    ]


@pytest.fixture
def trade_list_provider(sample_trades) -> FakeTradeListProvider:
    return FakeTradeListProvider(
        trades=sample_trades,
        ownership={"ownership": [{"fund": "ARKK", "weight": 9.1}]},
    )


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def resolver(memory_price_repo, price_fetcher) -> ClosePriceResolver:
    """Provide ClosePriceResolver over the in-memory store and fake provider."""
    return ClosePriceResolver(
        price_repo=memory_price_repo,
        price_fetcher=price_fetcher,
        max_workers=4,
    )


@pytest.fixture
def trade_service(trade_list_provider, resolver, price_fetcher, memory_price_repo) -> TradeService:
    """Provide TradeService wired to fakes."""
    return TradeService(
        trade_provider=trade_list_provider,
        resolver=resolver,
        price_fetcher=price_fetcher,
        price_repo=memory_price_repo,
    )


@pytest.fixture
def note_service(note_repo) -> NoteService:
    return NoteService(note_repo)


@pytest.fixture
def symbol_service(symbol_repo) -> SymbolService:
    return SymbolService(symbol_repo)


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine, fake_provider, trade_list_provider) -> TestClient:
    """Provide FastAPI test client with test database and fake providers."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_market_provider] = lambda: fake_provider
    app.dependency_overrides[get_trade_list_provider] = lambda: trade_list_provider
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def closes_of(trades: list[Trade]) -> list[Optional[Decimal]]:
    """Closes in input order."""
    return [t.close for t in trades]
