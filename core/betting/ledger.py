"""Betting ledger: bet validation, payouts and per-player balance."""

from dataclasses import dataclass, field

from core.exceptions import InsufficientFundsError
from core.game.outcome import RoundOutcome
from core.strategy.rules import RuleSet


def place_bet(balance: int, amount: int) -> int:
    """
    Validate a bet against a balance.

    Args:
        balance: Credits available
        amount: Requested bet

    Returns:
        The accepted bet amount

    Raises:
        InsufficientFundsError: amount is not positive or exceeds balance
    """
    if amount <= 0 or amount > balance:
        raise InsufficientFundsError(amount, balance)
    return amount


def payout_multiplier(outcome: RoundOutcome, rules: RuleSet | None = None) -> int:
    """Return the net multiple of the bet paid for an outcome."""
    rules = rules or RuleSet()
    if outcome == RoundOutcome.PLAYER_BLACKJACK:
        return rules.blackjack_payout
    if outcome.player_won:
        return rules.win_payout
    if outcome.player_lost:
        return -1
    return 0  # Push


def settle(
    balance: int,
    bet_amount: int,
    outcome: RoundOutcome,
    rules: RuleSet | None = None,
) -> int:
    """
    Apply a round outcome to a balance.

    Pure: the same (balance, bet, outcome) always gives the same result.
    """
    return balance + bet_amount * payout_multiplier(outcome, rules)


@dataclass
class RunStats:
    """Per-player tallies for one session or simulated run."""

    num_games: int = 0
    wins: int = 0
    losses: int = 0
    pushes: int = 0
    blackjacks: int = 0
    remaining_credits: int = 0

    def record_round_end(self, outcome: RoundOutcome) -> None:
        """Record stats when a round ends."""
        self.num_games += 1
        if outcome.player_won:
            self.wins += 1
        elif outcome.player_lost:
            self.losses += 1
        else:
            self.pushes += 1
        if outcome == RoundOutcome.PLAYER_BLACKJACK:
            self.blackjacks += 1

    def __str__(self) -> str:
        return (
            f"Games: {self.num_games} | W/L/P: {self.wins}/{self.losses}/{self.pushes} "
            f"| Credits: ${self.remaining_credits}"
        )


@dataclass
class BettingLedger:
    """
    A player's credit balance across rounds.

    The balance only changes in ``settle``; a placed bet is reserved, not
    deducted, until the round's outcome is known.
    """

    balance: int
    rules: RuleSet = field(default_factory=RuleSet)
    current_bet: int = 0
    last_bet: int | None = None
    stats: RunStats = field(default_factory=RunStats)

    def __post_init__(self) -> None:
        self.starting_balance = self.balance
        self.stats.remaining_credits = self.balance

    def can_cover(self, amount: int) -> bool:
        """Check whether a bet of ``amount`` would be accepted."""
        return 0 < amount <= self.balance

    def place_bet(self, amount: int) -> int:
        """Reserve a bet for the coming round."""
        self.current_bet = place_bet(self.balance, amount)
        self.last_bet = amount
        return self.current_bet

    def double_bet(self) -> int:
        """Double the reserved bet (double down)."""
        self.current_bet = place_bet(self.balance, self.current_bet * 2)
        return self.current_bet

    def settle(self, outcome: RoundOutcome) -> int:
        """
        Apply a round outcome to the balance and clear the reserved bet.

        Returns:
            The net change in balance
        """
        new_balance = settle(self.balance, self.current_bet, outcome, self.rules)
        delta = new_balance - self.balance
        self.balance = new_balance
        self.current_bet = 0
        self.stats.record_round_end(outcome)
        self.stats.remaining_credits = new_balance
        return delta

    @property
    def profit(self) -> int:
        """Return the net result against the starting balance."""
        return self.balance - self.starting_balance

    @property
    def is_bankrupt(self) -> bool:
        """Check if no positive bet can be covered."""
        return self.balance <= 0
