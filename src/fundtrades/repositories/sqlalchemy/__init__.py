"""SQLAlchemy repository implementations."""

from fundtrades.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
    Base,
)
from fundtrades.repositories.sqlalchemy.price_repo import SqlAlchemyPriceRepository
from fundtrades.repositories.sqlalchemy.note_repo import SqlAlchemyNoteRepository
from fundtrades.repositories.sqlalchemy.symbol_repo import SqlAlchemySymbolRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyPriceRepository",
    "SqlAlchemyNoteRepository",
    "SqlAlchemySymbolRepository",
]
