"""SQLAlchemy ORM model definitions."""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)

from fundtrades.repositories.sqlalchemy.database import Base


class DailyPriceORM(Base):
    """SQLAlchemy model for PricePoint (one close per symbol and day)."""

    __tablename__ = "daily_prices"
    __table_args__ = (UniqueConstraint("symbol", "date", name="uq_daily_prices_symbol_date"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    symbol = Column(String(20), nullable=False, index=True)
    date = Column(Date, nullable=False)
    price = Column(Numeric(precision=18, scale=6), nullable=False)
    observed_at = Column(DateTime(timezone=True), nullable=True)


class SymbolNoteORM(Base):
    """SQLAlchemy model for SymbolNote."""

    __tablename__ = "symbol_notes"

    symbol = Column(String(20), primary_key=True)
    note = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime(timezone=True), nullable=True)


class StockSymbolORM(Base):
    """SQLAlchemy model for StockSymbol (display ordering)."""

    __tablename__ = "stock_symbols"

    symbol = Column(String(20), primary_key=True)
    display_order = Column(Integer, nullable=False, default=0)
