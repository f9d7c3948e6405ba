"""Enumerations for domain models."""

from enum import Enum


class TradeDirection(str, Enum):
    """Direction of a fund trade as reported by the trade list provider."""

    BUY = "Buy"
    SELL = "Sell"
