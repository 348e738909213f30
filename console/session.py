"""Interactive terminal game: a human plays rounds against the house."""

import logging
from random import Random
from typing import Callable, Sequence

from core.cards import Card
from core.exceptions import InsufficientFundsError
from core.game.events import EventEmitter, GameEvent
from core.hand import Hand
from core.betting.ledger import place_bet
from core.strategy.basic import Action, BasicStrategy
from core.strategy.deciders import DecisionProvider
from core.strategy.rules import RuleSet
from core.table import Table
from console.render import (
    render_event,
    render_final_board,
    render_player_view,
    render_result,
)

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class QuitGame(Exception):
    """The player asked to leave the table."""


def read_line(input_fn: InputFn, prompt: str) -> str:
    """Read one trimmed, upper-cased line; end of input reads as quit."""
    try:
        return input_fn(prompt).strip().upper()
    except EOFError:
        return "Q"


class PromptDecider(DecisionProvider):
    """Asks the human for each action, optionally showing the strategy hint."""

    COMMANDS = {
        "H": Action.HIT,
        "S": Action.STAND,
        "D": Action.DOUBLE,
    }

    def __init__(
        self,
        input_fn: InputFn,
        output_fn: OutputFn,
        strategy: BasicStrategy | None = None,
    ) -> None:
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.strategy = strategy

    def decide(
        self,
        hand: Hand,
        dealer_upcard: Card,
        legal_actions: Sequence[Action],
    ) -> Action:
        self.output_fn(render_player_view(hand, dealer_upcard))
        if self.strategy is not None:
            hint = self.strategy.recommend(
                hand,
                dealer_upcard,
                can_double=Action.DOUBLE in legal_actions,
            )
            self.output_fn(f"Basic strategy suggests: {hint.name.title()}")

        prompt = "[H]it, [S]tand"
        if Action.DOUBLE in legal_actions:
            prompt += ", [D]ouble"
        prompt += ", [Q]uit: "

        while True:
            command = read_line(self.input_fn, prompt)
            if command == "Q":
                raise QuitGame()
            action = self.COMMANDS.get(command)
            if action in legal_actions:
                return action
            self.output_fn(f"Unrecognized command: {command!r}")


class InteractiveSession:
    """
    Single-player terminal session.

    All game state lives in the session's ``Table``; the session only reads
    input, renders and forwards decisions.
    """

    def __init__(
        self,
        rules: RuleSet | None = None,
        starting_balance: int = 100,
        default_bet: int = 10,
        show_hints: bool = True,
        rng: Random | None = None,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.default_bet = default_bet

        self.events = EventEmitter()
        self.events.subscribe(self._narrate)
        self.table = Table(
            rules=rules,
            starting_balance=starting_balance,
            rng=rng,
            events=self.events,
        )

        strategy = BasicStrategy(self.table.rules) if show_hints else None
        self.decider = PromptDecider(input_fn, output_fn, strategy)

    def _narrate(self, event: GameEvent) -> None:
        message = render_event(event)
        if message is not None:
            self.output_fn(message)

    def run(self) -> int:
        """
        Play rounds until the player quits or runs out of credits.

        Returns:
            The final balance
        """
        self.output_fn(f"Welcome to Blackjack! You have ${self.table.balance}.")

        while True:
            if self.table.ledger.is_bankrupt:
                self.output_fn("You are out of credits. Game over.")
                break

            bet = self._prompt_bet()
            if bet is None:
                break

            try:
                result = self.table.play_round(bet, self.decider)
            except QuitGame:
                logger.debug("Player quit mid-round with $%d reserved", bet)
                self.output_fn(f"You leave the table. Your ${bet} bet is returned.")
                break

            self.output_fn(render_final_board(self.table.current_round))
            self.output_fn(render_result(result))

            if self.table.ledger.is_bankrupt:
                continue
            if not self._prompt_play_again():
                break

        self.output_fn(str(self.table.ledger.stats))
        return self.table.balance

    def _prompt_bet(self) -> int | None:
        """Ask for a bet; empty input reuses the previous bet. None means quit."""
        while True:
            default = self.table.ledger.last_bet or self.default_bet
            raw = read_line(
                self.input_fn,
                f"Balance ${self.table.balance}. Bet [${default}] or [Q]uit: ",
            )
            if raw == "Q":
                return None
            if not raw:
                amount = default
            else:
                try:
                    amount = int(raw)
                except ValueError:
                    self.output_fn(f"Invalid bet: {raw!r} is not a whole number")
                    continue

            try:
                return place_bet(self.table.balance, amount)
            except InsufficientFundsError as exc:
                self.output_fn(f"Invalid bet: {exc}")

    def _prompt_play_again(self) -> bool:
        while True:
            answer = read_line(self.input_fn, "Play again? [Y/N]: ")
            if answer in ("Y", "YES"):
                return True
            if answer in ("N", "NO", "Q"):
                return False
            self.output_fn(f"Unrecognized answer: {answer!r}")
