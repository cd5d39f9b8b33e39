"""
Bid Evaluator — отслеживание максимальной и минимальной ставки

Оценщик проходит по ставкам аукциона и запоминает наибольшую и наименьшую сумму.

Начальное состояние (ещё не оценено ни одной ставки):
- highest_bid = -inf
- lowest_bid = +inf

Пустой список ставок состояние не меняет. Поэтому для аукциона без ставок
максимальная ставка остаётся -inf — это документированное вырожденное значение,
которое попадает в сумму платежа.
"""

from typing import Final

from src.core.domain.auction import Auction


# =============================================================================
# SENTINELS
# =============================================================================

# Максимум до первой оценённой ставки
NO_HIGHEST_BID: Final[float] = float("-inf")

# Минимум до первой оценённой ставки
NO_LOWEST_BID: Final[float] = float("inf")


# =============================================================================
# BID EVALUATOR
# =============================================================================


class BidEvaluator:
    """Оценщик ставок: максимум и минимум по всем оценённым аукционам.

    Состояние накапливается между вызовами evaluate(). Для изоляции аукционов
    друг от друга используйте новый экземпляр (или reset()) на каждый аукцион.
    """

    def __init__(self, name: str = ""):
        """
        Args:
            name: метка оценщика (для логов и диагностики)
        """
        self.name = name
        self._highest_bid = NO_HIGHEST_BID
        self._lowest_bid = NO_LOWEST_BID

    @property
    def highest_bid(self) -> float:
        """Наибольшая сумма ставки (или -inf, если ставок не было)."""
        return self._highest_bid

    @property
    def lowest_bid(self) -> float:
        """Наименьшая сумма ставки (или +inf, если ставок не было)."""
        return self._lowest_bid

    def evaluate(self, auction: Auction) -> None:
        """Оценка ставок аукциона.

        Args:
            auction: аукцион, ставки которого учитываются в порядке добавления
        """
        for bid in auction.bids:
            if bid.amount > self._highest_bid:
                self._highest_bid = bid.amount
            if bid.amount < self._lowest_bid:
                self._lowest_bid = bid.amount

    def has_evaluated_bids(self) -> bool:
        """True если была оценена хотя бы одна ставка."""
        return self._highest_bid != NO_HIGHEST_BID

    def reset(self) -> None:
        """Возврат к начальному состоянию (sentinel-значения)."""
        self._highest_bid = NO_HIGHEST_BID
        self._lowest_bid = NO_LOWEST_BID

    def __repr__(self) -> str:
        return (
            f"BidEvaluator(name={self.name!r}, "
            f"highest_bid={self._highest_bid}, lowest_bid={self._lowest_bid})"
        )
