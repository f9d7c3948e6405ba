"""Ticker symbol normalization."""

from typing import Optional

from fundtrades.core.exceptions import ValidationError


def normalize_symbol(s: Optional[str]) -> Optional[str]:
    """Normalize symbol: strip whitespace and uppercase; None or empty -> None."""
    if s is None:
        return None
    stripped = s.strip().upper()
    return stripped if stripped else None


def require_symbol(s: Optional[str]) -> str:
    """Normalize symbol, raising ValidationError when it is missing."""
    symbol = normalize_symbol(s)
    if symbol is None:
        raise ValidationError("Symbol is required")
    return symbol
