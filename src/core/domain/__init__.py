"""
Domain models and value objects.

Contains fundamental domain entities: Bidder, Bid, Auction, Payment.
"""

from src.core.domain.auction import Auction
from src.core.domain.bid import Bid, Bidder
from src.core.domain.payment import NO_WINNING_BID_AMOUNT, Payment

__all__ = [
    # Bid model
    "Bid",
    "Bidder",
    # Auction model
    "Auction",
    # Payment model
    "NO_WINNING_BID_AMOUNT",
    "Payment",
]
