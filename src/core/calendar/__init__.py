"""Calendar rules — перенос сроков оплаты с выходных на рабочие дни."""

from .business_days import is_weekend, next_business_day

__all__ = [
    "is_weekend",
    "next_business_day",
]
