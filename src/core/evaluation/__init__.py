"""Bid evaluation — поиск выигравшей (максимальной) и минимальной ставки."""

from .bid_evaluator import NO_HIGHEST_BID, NO_LOWEST_BID, BidEvaluator

__all__ = [
    "BidEvaluator",
    "NO_HIGHEST_BID",
    "NO_LOWEST_BID",
]
