"""Repository layer - data access abstractions and implementations."""

from fundtrades.repositories.protocols import (
    PriceRepository,
    NoteRepository,
    SymbolRepository,
)

__all__ = [
    "PriceRepository",
    "NoteRepository",
    "SymbolRepository",
]
