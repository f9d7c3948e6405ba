"""Symbol note endpoints."""

from fastapi import APIRouter, Depends, Query

from fundtrades.api.deps import get_note_service
from fundtrades.api.schemas import NoteSaveRequest, NoteResponse, MessageResponse
from fundtrades.core.symbols import require_symbol
from fundtrades.services import NoteService

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=NoteResponse)
def get_note(
    symbol: str = Query(..., min_length=1, max_length=20),
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    """Get the note for a symbol (empty string if none)."""
    symbol = require_symbol(symbol)
    return NoteResponse(symbol=symbol, note=service.get_note(symbol))


@router.post("", response_model=NoteResponse)
def save_note(
    data: NoteSaveRequest,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    """Create or replace the note for a symbol."""
    saved = service.save_note(data.symbol, data.note)
    return NoteResponse(symbol=saved.symbol, note=saved.note)


@router.delete("", response_model=MessageResponse)
def delete_note(
    symbol: str = Query(..., min_length=1, max_length=20),
    service: NoteService = Depends(get_note_service),
) -> MessageResponse:
    """Delete the note for a symbol."""
    service.delete_note(symbol)
    return MessageResponse(message="Note deleted successfully")
