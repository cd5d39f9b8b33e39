"""
Bid — Модель ставки на аукционе

Immutable Pydantic модели участника торгов (Bidder) и его ставки (Bid).
Порядок ставок внутри аукциона — порядок добавления; уникальность суммы не требуется.
"""

import math

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# BIDDER
# =============================================================================


class Bidder(BaseModel):
    """
    Участник торгов.

    Для генерации платежей участник непрозрачен: используется только как ссылка.
    """

    name: str = Field(..., min_length=1, description="Имя участника торгов")

    model_config = {"frozen": True}


# =============================================================================
# BID MODEL
# =============================================================================


class Bid(BaseModel):
    """
    Ставка участника на аукционе.

    Immutable модель (frozen=True).
    """

    bidder: Bidder = Field(..., description="Участник, сделавший ставку")
    amount: float = Field(..., description="Сумма ставки (может быть дробной)")

    model_config = {"frozen": True}

    @field_validator("amount")
    @classmethod
    def validate_amount_is_finite(cls, v: float) -> float:
        """Сумма ставки должна быть конечным числом"""
        if math.isnan(v) or math.isinf(v):
            raise ValueError(f"bid amount must be finite, got {v}")
        return v
