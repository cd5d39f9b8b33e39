"""Ports — узкие интерфейсы внешних коллабораторов генератора платежей.

Протоколы структурные: реализации не обязаны наследоваться от них,
поэтому в тестах достаточно простых рукописных двойников.
"""

from datetime import date
from typing import Protocol, Sequence, runtime_checkable

from src.core.domain.auction import Auction
from src.core.domain.payment import Payment


@runtime_checkable
class AuctionSource(Protocol):
    """Источник закрытых аукционов."""

    def closed_auctions(self) -> Sequence[Auction]:
        """Упорядоченная последовательность закрытых аукционов (может быть пустой)."""
        ...


@runtime_checkable
class PaymentSink(Protocol):
    """Хранилище платежей."""

    def save(self, payment: Payment) -> None:
        """Сохранение одного платежа. Ошибка сохранения выбрасывается как исключение."""
        ...


@runtime_checkable
class Clock(Protocol):
    """Источник текущей даты."""

    def today(self) -> date:
        ...
