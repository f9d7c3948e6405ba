"""SQLAlchemy implementation of NoteRepository."""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fundtrades.core.exceptions import StoreReadError, StoreWriteError
from fundtrades.domain.models import SymbolNote
from fundtrades.repositories.sqlalchemy.orm_models import SymbolNoteORM


class SqlAlchemyNoteRepository:
    """SQLAlchemy-backed symbol notes."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, symbol: str) -> Optional[SymbolNote]:
        """Get the note for a symbol, or None."""
        try:
            orm = self._db.get(SymbolNoteORM, symbol)
        except SQLAlchemyError as e:
            raise StoreReadError(f"Error fetching note for {symbol}: {e}") from e
        return self._to_domain(orm) if orm else None

    def upsert(self, note: SymbolNote) -> SymbolNote:
        """Insert or replace the note for a symbol."""
        try:
            orm = self._db.get(SymbolNoteORM, note.symbol)
            if orm:
                orm.note = note.note
                orm.updated_at = note.updated_at
            else:
                orm = SymbolNoteORM(
                    symbol=note.symbol,
                    note=note.note,
                    updated_at=note.updated_at,
                )
                self._db.add(orm)
            self._db.commit()
            self._db.refresh(orm)
        except SQLAlchemyError as e:
            self._db.rollback()
            raise StoreWriteError(f"Error saving note for {note.symbol}: {e}") from e
        return self._to_domain(orm)

    def delete(self, symbol: str) -> None:
        """Delete the note for a symbol."""
        try:
            self._db.query(SymbolNoteORM).filter(SymbolNoteORM.symbol == symbol).delete()
            self._db.commit()
        except SQLAlchemyError as e:
            self._db.rollback()
            raise StoreWriteError(f"Error deleting note for {symbol}: {e}") from e

    @staticmethod
    def _to_domain(orm: SymbolNoteORM) -> SymbolNote:
        return SymbolNote(symbol=orm.symbol, note=orm.note or "", updated_at=orm.updated_at)
