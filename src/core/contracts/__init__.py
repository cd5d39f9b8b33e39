"""
Contract Validation Module

Модуль для валидации JSON контрактов аукционов и платежей.
"""

from .validators import (
    AuctionValidator,
    ContractValidator,
    PaymentValidator,
    SchemaLoader,
    validate_auction,
    validate_payment,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "AuctionValidator",
    "PaymentValidator",
    # Functions
    "validate_auction",
    "validate_payment",
]
