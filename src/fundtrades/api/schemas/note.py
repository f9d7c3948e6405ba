"""Pydantic schemas for note endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


class NoteSaveRequest(BaseModel):
    """Request schema for saving a symbol note."""

    symbol: str = Field(..., min_length=1, max_length=20)
    note: Optional[str] = Field(default="", description="Note text; empty clears it")


class NoteResponse(BaseModel):
    """Response schema for a symbol note."""

    symbol: str
    note: str


class MessageResponse(BaseModel):
    message: str
