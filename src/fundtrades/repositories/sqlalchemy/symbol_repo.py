"""SQLAlchemy implementation of SymbolRepository."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fundtrades.core.exceptions import StoreReadError, StoreWriteError
from fundtrades.domain.models import StockSymbol
from fundtrades.repositories.sqlalchemy.orm_models import StockSymbolORM


class SqlAlchemySymbolRepository:
    """SQLAlchemy-backed tracked symbols."""

    def __init__(self, db: Session):
        self._db = db

    def list_ordered(self) -> list[StockSymbol]:
        """List all symbols ordered by display_order, then symbol."""
        try:
            rows = (
                self._db.query(StockSymbolORM)
                .order_by(StockSymbolORM.display_order, StockSymbolORM.symbol)
                .all()
            )
        except SQLAlchemyError as e:
            raise StoreReadError(f"Error fetching stock symbols: {e}") from e
        return [self._to_domain(r) for r in rows]

    def upsert_many(self, symbols: list[StockSymbol]) -> list[StockSymbol]:
        """Insert or update display order keyed by symbol."""
        try:
            saved = []
            for item in symbols:
                orm = self._db.get(StockSymbolORM, item.symbol)
                if orm:
                    orm.display_order = item.display_order
                else:
                    orm = StockSymbolORM(symbol=item.symbol, display_order=item.display_order)
                    self._db.add(orm)
                saved.append(orm)
            self._db.commit()
        except SQLAlchemyError as e:
            self._db.rollback()
            raise StoreWriteError(f"Error updating stock symbol order: {e}") from e
        return [self._to_domain(orm) for orm in saved]

    @staticmethod
    def _to_domain(orm: StockSymbolORM) -> StockSymbol:
        return StockSymbol(symbol=orm.symbol, display_order=orm.display_order)
