"""Per-symbol notes."""

from typing import Optional

from fundtrades.core.dates import now_utc
from fundtrades.core.symbols import require_symbol
from fundtrades.domain.models import SymbolNote
from fundtrades.repositories.protocols import NoteRepository


class NoteService:
    """Read, save and delete the free-text note kept for each symbol."""

    def __init__(self, note_repo: NoteRepository):
        self._note_repo = note_repo

    def get_note(self, symbol: str) -> str:
        """Return the note text, or an empty string if none is saved."""
        note = self._note_repo.get(require_symbol(symbol))
        return note.note if note else ""

    def save_note(self, symbol: str, note: Optional[str]) -> SymbolNote:
        """Create or replace the note for symbol."""
        return self._note_repo.upsert(
            SymbolNote(symbol=require_symbol(symbol), note=note or "", updated_at=now_utc())
        )

    def delete_note(self, symbol: str) -> None:
        self._note_repo.delete(require_symbol(symbol))
