"""Payment Generator — формирование платежей по закрытым аукционам.

Для каждого закрытого аукциона:
1. BidEvaluator находит выигравшую (максимальную) ставку; без ставок сумма = -inf
2. Срок оплаты = ближайший рабочий день от базовой даты (по умолчанию дата закрытия)
3. Платёж передаётся в хранилище платежей (PaymentSink.save)

Один платёж на аукцион за запуск; повторный запуск создаёт платежи повторно.
Ошибки коллабораторов не перехватываются: запуск прерывается, исключение
уходит вызывающему коду. Платежи, сохранённые до ошибки, остаются сохранёнными.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional
from uuid import uuid4

from src.core.calendar import next_business_day
from src.core.contracts import PaymentValidator
from src.core.domain.auction import Auction
from src.core.domain.payment import Payment
from src.core.evaluation import BidEvaluator
from src.core.logging import add_context, clear_context, get_logger
from src.payments.adapters import SystemClock
from src.payments.ports import AuctionSource, Clock, PaymentSink

logger = get_logger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


class DueDateBasis(str, Enum):
    """От какой даты отсчитывается срок оплаты."""

    CLOSING_DATE = "closing_date"  # Дата закрытия аукциона
    RUN_DATE = "run_date"  # Дата запуска генерации (clock.today())


@dataclass(frozen=True)
class PaymentGeneratorConfig:
    """Конфигурация генератора платежей.

    isolate_auctions=False воспроизводит общий оценщик на весь запуск:
    максимум и минимум переносятся между аукционами, и аукцион без ставок
    после аукциона со ставками получает чужой максимум.
    """

    due_date_basis: DueDateBasis = DueDateBasis.CLOSING_DATE
    isolate_auctions: bool = True
    validate_contracts: bool = True


# =============================================================================
# PAYMENT GENERATOR
# =============================================================================


class PaymentGenerator:
    """Генератор платежей по закрытым аукционам.

    Однопоточный и синхронный: generate() обрабатывает аукционы по очереди
    в порядке, полученном от источника.
    """

    def __init__(
        self,
        auctions: AuctionSource,
        payments: PaymentSink,
        clock: Optional[Clock] = None,
        config: Optional[PaymentGeneratorConfig] = None,
        evaluator_name: str = "",
    ):
        """
        Args:
            auctions: источник закрытых аукционов
            payments: хранилище платежей
            clock: источник текущей даты (нужен для DueDateBasis.RUN_DATE)
            config: конфигурация (опционально, используется default)
            evaluator_name: метка оценщика ставок
        """
        self.auctions = auctions
        self.payments = payments
        self.config = config or PaymentGeneratorConfig()
        self.clock = clock
        if self.clock is None and self.config.due_date_basis == DueDateBasis.RUN_DATE:
            self.clock = SystemClock()
        self.evaluator_name = evaluator_name
        self.evaluator = BidEvaluator(evaluator_name)
        self._payment_validator = PaymentValidator() if self.config.validate_contracts else None

    def generate(self) -> None:
        """Один запуск генерации: по платежу на каждый закрытый аукцион.

        run_id привязывается к контексту structlog на время запуска.
        """
        add_context(run_id=uuid4().hex, evaluator=self.evaluator_name)
        try:
            self._generate()
        finally:
            clear_context()

    def _generate(self) -> None:
        try:
            closed = list(self.auctions.closed_auctions())
        except Exception:
            logger.exception("closed_auctions_fetch_failed")
            raise

        if not closed:
            logger.info("payment_generation_skipped", reason="no_closed_auctions")
            return

        logger.info("payment_generation_started", auctions=len(closed))

        if not self.config.isolate_auctions:
            self.evaluator = BidEvaluator(self.evaluator_name)

        # Базовая дата для RUN_DATE фиксируется один раз на запуск
        run_date = self.clock.today() if self.config.due_date_basis == DueDateBasis.RUN_DATE else None

        for position, auction in enumerate(closed):
            payment = self._build_payment(auction, run_date)
            try:
                self.payments.save(payment)
            except Exception:
                logger.exception(
                    "payment_save_failed",
                    auction=auction.description,
                    position=position,
                )
                raise
            logger.debug(
                "payment_generated",
                auction=auction.description,
                amount=payment.amount,
                due_date=payment.due_date.isoformat(),
            )

        logger.info("payment_generation_finished", payments=len(closed))

    def _build_payment(self, auction: Auction, run_date: Optional[date]) -> Payment:
        if self.config.isolate_auctions:
            self.evaluator = BidEvaluator(self.evaluator_name)
        self.evaluator.evaluate(auction)

        if not auction.has_bids():
            logger.warning("auction_without_bids", auction=auction.description)

        base_date = run_date if run_date is not None else auction.closing_date
        payment = Payment(
            amount=self.evaluator.highest_bid,
            due_date=next_business_day(base_date),
            auction_description=auction.description,
        )

        if self._payment_validator is not None:
            self._payment_validator.validate(payment.to_record())

        return payment
