"""Repository protocol definitions (interfaces)."""

from fundtrades.repositories.protocols.price_repo import PriceRepository
from fundtrades.repositories.protocols.note_repo import NoteRepository
from fundtrades.repositories.protocols.symbol_repo import SymbolRepository

__all__ = [
    "PriceRepository",
    "NoteRepository",
    "SymbolRepository",
]
