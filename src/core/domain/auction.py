"""
Auction — Модель закрытого аукциона

Immutable Pydantic модель лота: описание, дата закрытия и упорядоченный список ставок.
Аукционы создаются внешними компонентами; для генерации платежей они read-only.
Полная совместимость с JSON Schema (contracts/schema/auction.json).
"""

from datetime import date
from typing import Any, Dict

from pydantic import BaseModel, Field

from .bid import Bid, Bidder


class Auction(BaseModel):
    """
    Модель аукциона.

    Immutable модель (frozen=True). Ставки хранятся в порядке добавления.
    """

    description: str = Field(..., min_length=1, description="Описание лота (например, 'Quadro')")
    closing_date: date = Field(..., description="Дата закрытия аукциона")
    bids: tuple[Bid, ...] = Field(default=(), description="Ставки в порядке добавления")

    model_config = {"frozen": True}

    def has_bids(self) -> bool:
        """
        Проверка наличия ставок.

        Returns:
            True если на аукционе есть хотя бы одна ставка
        """
        return len(self.bids) > 0

    def with_bid(self, bid: Bid) -> "Auction":
        """
        Новый экземпляр аукциона с добавленной ставкой.

        Args:
            bid: Ставка, добавляемая в конец списка

        Returns:
            Новый Auction (исходный не изменяется)
        """
        return self.model_copy(update={"bids": self.bids + (bid,)})

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Auction":
        """
        Построение аукциона из записи контракта auction.

        Args:
            record: dict вида {"description", "closing_date" (ISO), "bids": [{"bidder", "amount"}]}

        Returns:
            Auction
        """
        return cls(
            description=record["description"],
            closing_date=date.fromisoformat(record["closing_date"]),
            bids=tuple(
                Bid(bidder=Bidder(name=item["bidder"]), amount=item["amount"])
                for item in record.get("bids", [])
            ),
        )

    def to_record(self) -> Dict[str, Any]:
        """Запись контракта auction (даты в ISO формате)"""
        return {
            "description": self.description,
            "closing_date": self.closing_date.isoformat(),
            "bids": [{"bidder": bid.bidder.name, "amount": bid.amount} for bid in self.bids],
        }
