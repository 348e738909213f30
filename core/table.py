"""A player's seat at the table: shoe, ledger and rules for a run of rounds."""

from dataclasses import dataclass
from random import Random

from core.betting.ledger import BettingLedger
from core.cards import Shoe, new_shoe
from core.game.engine import RoundEngine
from core.game.events import EventEmitter, EventType
from core.game.outcome import RoundOutcome
from core.strategy.deciders import DecisionProvider
from core.strategy.rules import RuleSet


@dataclass(frozen=True)
class RoundResult:
    """What one round did to the player."""

    outcome: RoundOutcome
    wager: int
    delta: int
    balance: int
    doubled: bool


class Table:
    """
    Explicit session context shared by the terminal game and the simulator.

    Owns one shoe and one betting ledger; every round is played by a fresh
    ``RoundEngine`` dealing from that shoe.
    """

    def __init__(
        self,
        rules: RuleSet | None = None,
        starting_balance: int = 100,
        rng: Random | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a table.

        Args:
            rules: Game rules (uses defaults if not provided)
            starting_balance: Player's opening credits
            rng: Random number generator for reproducible shuffles
            events: Emitter shared by every round; each round gets its own
                when omitted
        """
        self.rules = rules or RuleSet()
        self.shoe: Shoe = new_shoe(
            self.rules.num_decks,
            penetration=self.rules.penetration,
            rng=rng,
        )
        self.ledger = BettingLedger(balance=starting_balance, rules=self.rules)
        self.events = events
        self.current_round: RoundEngine | None = None

    @property
    def balance(self) -> int:
        """Return the player's current balance."""
        return self.ledger.balance

    def new_round(self) -> RoundEngine:
        """Create the engine for the next round, reshuffling at the cut card."""
        reshuffled = self.shoe.needs_shuffle
        if reshuffled:
            self.shoe.shuffle()

        self.current_round = RoundEngine(self.shoe, self.rules, events=self.events)
        if reshuffled:
            self.current_round.events.emit(EventType.SHOE_SHUFFLED)
        return self.current_round

    def play_round(self, bet: int, decider: DecisionProvider) -> RoundResult:
        """
        Play one full round.

        Args:
            bet: Amount to wager
            decider: Source of the player's actions

        Returns:
            The round's outcome and its effect on the balance

        Raises:
            InsufficientFundsError: the bet cannot be covered
        """
        self.ledger.place_bet(bet)
        engine = self.new_round()
        engine.deal()

        outcome = engine.play(decider, allow_double=self.ledger.can_cover(bet * 2))
        if engine.doubled:
            self.ledger.double_bet()

        wager = self.ledger.current_bet
        delta = self.ledger.settle(outcome)
        return RoundResult(
            outcome=outcome,
            wager=wager,
            delta=delta,
            balance=self.ledger.balance,
            doubled=engine.doubled,
        )
