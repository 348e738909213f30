"""Bet validation and balance tracking."""

from core.betting.ledger import (
    BettingLedger,
    RunStats,
    payout_multiplier,
    place_bet,
    settle,
)

__all__ = [
    "BettingLedger",
    "RunStats",
    "payout_multiplier",
    "place_bet",
    "settle",
]
