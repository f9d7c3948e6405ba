"""Symbol note repository protocol."""

from typing import Protocol, Optional

from fundtrades.domain.models import SymbolNote


class NoteRepository(Protocol):
    """Interface for per-symbol free-text notes."""

    def get(self, symbol: str) -> Optional[SymbolNote]:
        """Get the note for a symbol, or None."""
        ...

    def upsert(self, note: SymbolNote) -> SymbolNote:
        """Insert or replace the note for a symbol."""
        ...

    def delete(self, symbol: str) -> None:
        """Delete the note for a symbol (no-op if absent)."""
        ...
