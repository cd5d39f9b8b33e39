"""Payments — генерация платежей по закрытым аукционам.

- PaymentGenerator: один платёж на каждый закрытый аукцион за запуск
- Ports: AuctionSource, PaymentSink, Clock
- In-memory адаптеры и часы
"""

from .adapters import (
    FixedClock,
    InMemoryAuctionRepository,
    InMemoryPaymentRepository,
    SystemClock,
)
from .generator import DueDateBasis, PaymentGenerator, PaymentGeneratorConfig
from .ports import AuctionSource, Clock, PaymentSink

__all__ = [
    "PaymentGenerator",
    "PaymentGeneratorConfig",
    "DueDateBasis",
    "AuctionSource",
    "PaymentSink",
    "Clock",
    "InMemoryAuctionRepository",
    "InMemoryPaymentRepository",
    "SystemClock",
    "FixedClock",
]
