"""SQLAlchemy implementation of PriceRepository."""

import logging
from decimal import Decimal

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fundtrades.core.dates import parse_date_key
from fundtrades.core.exceptions import StoreReadError, StoreWriteError
from fundtrades.domain.models import PricePoint
from fundtrades.repositories.sqlalchemy.orm_models import DailyPriceORM

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": pg_insert,
}


def _insert_for(dialect_name: str):
    """Dialect insert construct that supports ON CONFLICT."""
    try:
        return _UPSERT_INSERTS[dialect_name]
    except KeyError:
        raise StoreWriteError(f"Price upsert not supported on {dialect_name}") from None


class SqlAlchemyPriceRepository:
    """SQLAlchemy-backed store of daily close prices."""

    def __init__(self, db: Session):
        self._db = db

    def range_fetch(self, symbol: str, start_key: str, end_key: str) -> list[PricePoint]:
        """Return prices for symbol with start_key <= date <= end_key, ascending by date."""
        start = parse_date_key(start_key)
        end = parse_date_key(end_key)
        try:
            rows = (
                self._db.query(DailyPriceORM)
                .filter(
                    DailyPriceORM.symbol == symbol,
                    DailyPriceORM.date >= start,
                    DailyPriceORM.date <= end,
                )
                .order_by(DailyPriceORM.date)
                .all()
            )
        except SQLAlchemyError as e:
            raise StoreReadError(
                f"Error fetching daily prices for {symbol} {start_key}..{end_key}: {e}"
            ) from e
        return [self._to_domain(r) for r in rows]

    def batch_upsert(self, points: list[PricePoint]) -> list[PricePoint]:
        """
        Insert or overwrite prices keyed by (symbol, date).

        One INSERT ... ON CONFLICT DO UPDATE for the whole batch, so a row
        committed concurrently for the same key is overwritten (last write
        wins) instead of failing the batch. Duplicate keys within one batch
        collapse to the last occurrence.
        """
        if not points:
            return []

        unique: dict[tuple[str, str], PricePoint] = {}
        for point in points:
            unique[point.key] = point

        rows = [
            {
                "symbol": p.symbol,
                "date": parse_date_key(p.date),
                "price": p.price,
                "observed_at": p.observed_at,
            }
            for p in unique.values()
        ]

        try:
            stmt = _insert_for(self._db.get_bind().dialect.name)(DailyPriceORM).values(rows)
            stmt = stmt.on_conflict_do_update(
                index_elements=["symbol", "date"],
                set_={
                    "price": stmt.excluded.price,
                    "observed_at": stmt.excluded.observed_at,
                },
            )
            self._db.execute(stmt)
            self._db.commit()
        except SQLAlchemyError as e:
            self._db.rollback()
            raise StoreWriteError(f"Error upserting {len(rows)} daily prices: {e}") from e

        logger.debug("Upserted %d daily prices", len(rows))
        return list(unique.values())

    def delete_all(self, symbol: str) -> int:
        """Delete every stored price for a symbol."""
        try:
            count = (
                self._db.query(DailyPriceORM)
                .filter(DailyPriceORM.symbol == symbol)
                .delete()
            )
            self._db.commit()
        except SQLAlchemyError as e:
            self._db.rollback()
            raise StoreWriteError(f"Error deleting daily prices for {symbol}: {e}") from e
        return count

    @staticmethod
    def _to_domain(orm: DailyPriceORM) -> PricePoint:
        """Convert ORM row to domain model."""
        return PricePoint(
            symbol=orm.symbol,
            date=orm.date.isoformat(),
            price=Decimal(str(orm.price)),
            observed_at=orm.observed_at,
        )
