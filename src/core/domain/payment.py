"""
Payment — Модель платежа по закрытому аукциону

Immutable Pydantic модель платежа: сумма выигравшей ставки и срок оплаты.
Создаётся исключительно PaymentGenerator, один платёж на каждый обработанный аукцион.
После создания владение сразу передаётся хранилищу платежей.

Сумма равна -inf, если на аукционе не было ставок (выигравшей ставки нет).
Это валидное вырожденное значение, а не ошибка: потребитель решает, как его обработать.
"""

import math
from datetime import date
from typing import Any, Dict, Final

from pydantic import BaseModel, Field, field_validator


# Сумма платежа для аукциона без ставок
NO_WINNING_BID_AMOUNT: Final[float] = float("-inf")


class Payment(BaseModel):
    """
    Модель платежа.

    Immutable модель (frozen=True). Срок оплаты всегда приходится на будний день.
    """

    amount: float = Field(..., description="Сумма платежа (максимальная ставка или -inf)")
    due_date: date = Field(..., description="Срок оплаты (всегда Пн-Пт)")
    auction_description: str | None = Field(
        None, description="Описание аукциона, по которому сформирован платёж"
    )

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    @field_validator("amount")
    @classmethod
    def validate_amount_not_nan(cls, v: float) -> float:
        """NaN запрещён; -inf допустим (аукцион без ставок)"""
        if math.isnan(v):
            raise ValueError("payment amount must not be NaN")
        if v == float("inf"):
            raise ValueError("payment amount must not be +inf")
        return v

    @field_validator("due_date")
    @classmethod
    def validate_due_date_is_weekday(cls, v: date) -> date:
        """Срок оплаты не может приходиться на выходной"""
        if v.weekday() >= 5:
            raise ValueError(f"due_date {v.isoformat()} falls on a weekend")
        return v

    def has_winning_bid(self) -> bool:
        """
        Проверка, был ли у аукциона победитель.

        Returns:
            False если сумма равна -inf (на аукционе не было ставок)
        """
        return self.amount != NO_WINNING_BID_AMOUNT

    def to_record(self) -> Dict[str, Any]:
        """Запись контракта payment (даты в ISO формате)"""
        return {
            "amount": self.amount,
            "due_date": self.due_date.isoformat(),
            "auction_description": self.auction_description,
        }
