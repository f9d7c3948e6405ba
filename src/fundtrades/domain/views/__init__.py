"""View models for service outputs."""

from fundtrades.domain.views.trades import TradeList

__all__ = [
    "TradeList",
]
