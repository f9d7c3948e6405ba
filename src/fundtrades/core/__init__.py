"""Core utilities and shared functionality."""

from fundtrades.core.dates import (
    UTC,
    now_utc,
    to_utc,
    is_date_key,
    to_date_key,
    add_days,
    parse_date_key,
)
from fundtrades.core.exceptions import (
    AppError,
    ValidationError,
    InvalidDateError,
    StoreError,
    StoreReadError,
    StoreWriteError,
    ProviderError,
)

__all__ = [
    "UTC",
    "now_utc",
    "to_utc",
    "is_date_key",
    "to_date_key",
    "add_days",
    "parse_date_key",
    "AppError",
    "ValidationError",
    "InvalidDateError",
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
    "ProviderError",
]
