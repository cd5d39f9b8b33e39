"""In-memory адаптеры для портов генератора платежей.

- InMemoryAuctionRepository — источник закрытых аукционов
- InMemoryPaymentRepository — хранилище платежей
- SystemClock / FixedClock — источники текущей даты
"""

from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from src.core.contracts import AuctionValidator
from src.core.domain.auction import Auction
from src.core.domain.payment import Payment
from src.core.logging import get_logger
from src.payments.ports import Clock

logger = get_logger(__name__)


# =============================================================================
# CLOCKS
# =============================================================================


class SystemClock:
    """Системные часы: текущая локальная дата."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """Часы с фиксированной датой (детерминированные тесты, пересчёт за прошлый день)."""

    def __init__(self, day: date):
        self._day = day

    def today(self) -> date:
        return self._day

    def __repr__(self) -> str:
        return f"FixedClock({self._day.isoformat()})"


# =============================================================================
# AUCTION REPOSITORY
# =============================================================================


class InMemoryAuctionRepository:
    """Хранилище аукционов в памяти.

    Без часов все сохранённые аукционы считаются закрытыми. С часами закрытыми
    считаются аукционы с closing_date не позже clock.today().
    """

    def __init__(self, auctions: Iterable[Auction] = (), clock: Optional[Clock] = None):
        self._auctions: List[Auction] = list(auctions)
        self._clock = clock

    @classmethod
    def from_records(
        cls, records: Iterable[Dict[str, Any]], clock: Optional[Clock] = None
    ) -> "InMemoryAuctionRepository":
        """Построение хранилища из записей контракта auction.

        Raises:
            ValidationError: если запись не соответствует схеме auction.json
        """
        validator = AuctionValidator()
        auctions = []
        for index, record in enumerate(records):
            errors = validator.error_messages(record)
            if errors:
                logger.warning("auction_record_rejected", index=index, errors=errors)
                validator.validate(record)
            auctions.append(Auction.from_record(record))
        logger.debug("auctions_loaded", count=len(auctions))
        return cls(auctions, clock=clock)

    def add(self, auction: Auction) -> None:
        self._auctions.append(auction)

    def closed_auctions(self) -> List[Auction]:
        if self._clock is None:
            return list(self._auctions)
        today = self._clock.today()
        return [auction for auction in self._auctions if auction.closing_date <= today]

    def __len__(self) -> int:
        return len(self._auctions)


# =============================================================================
# PAYMENT REPOSITORY
# =============================================================================


class InMemoryPaymentRepository:
    """Хранилище платежей в памяти, в порядке сохранения."""

    def __init__(self):
        self._payments: List[Payment] = []

    def save(self, payment: Payment) -> None:
        self._payments.append(payment)

    def all(self) -> List[Payment]:
        return list(self._payments)

    def __len__(self) -> int:
        return len(self._payments)
