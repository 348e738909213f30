"""Blackjack round engine with state machine."""

from typing import Callable

from transitions import Machine

from core.cards import Card, Shoe
from core.exceptions import IllegalActionError
from core.hand import Hand
from core.strategy.basic import Action
from core.strategy.deciders import DecisionProvider
from core.strategy.rules import RuleSet
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.outcome import RoundOutcome, evaluate_hands
from core.game.state import RoundState


class RoundEngine:
    """
    One round of blackjack as a state machine.

    The engine is agnostic to where decisions come from: callers either invoke
    ``hit``/``stand``/``double_down`` directly or hand a ``DecisionProvider``
    to ``play``. Calling an action the current state does not allow raises
    ``IllegalActionError``.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "start_player_turn", "source": "dealing", "dest": "player_turn"},
        {"trigger": "check_blackjacks", "source": "dealing", "dest": "dealer_turn"},
        {"trigger": "settle_natural", "source": "dealing", "dest": "settled"},
        {"trigger": "player_action", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "player_busts", "source": "player_turn", "dest": "settled"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "settled"},
    ]

    def __init__(
        self,
        shoe: Shoe,
        rules: RuleSet | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a round.

        Args:
            shoe: Shoe to deal from; owned by this round until it settles
            rules: Game rules (uses defaults if not provided)
            events: Emitter to report round events on
        """
        self.rules = rules or RuleSet()
        self.shoe = shoe
        self.events = events or EventEmitter()

        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self.doubled = False
        self._outcome: RoundOutcome | None = None

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="dealing",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to round events."""
        self.events.subscribe(handler, event_type)

    def _require(self, action: str, state: RoundState) -> None:
        if self.state != state:
            raise IllegalActionError(action, str(self.state))

    def deal(self) -> RoundState:
        """
        Deal the initial cards and move to the first decision point.

        Returns:
            The state after dealing (PLAYER_TURN unless a blackjack settled
            the round immediately)
        """
        self._require("deal", RoundState.DEALING)
        if self.player_hand.cards:
            raise IllegalActionError("deal twice", str(self.state))

        # Deal: player, dealer, player, dealer (face down)
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.dealer_hand)
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.dealer_hand, face_up=False)

        self.events.emit(EventType.ROUND_STARTED)

        if self.player_hand.is_blackjack:
            # The dealer never draws against a natural; the hole card only
            # matters when the up-card could make a dealer blackjack
            self.events.emit(EventType.PLAYER_BLACKJACK)
            upcard = self.dealer_upcard
            if upcard.is_ace or upcard.is_ten_value:
                self.check_blackjacks()
                self._reveal_hole_card()
                outcome = evaluate_hands(self.player_hand, self.dealer_hand)
                self.dealer_done()
                self._finish(outcome)
            else:
                self.settle_natural()
                self._finish(RoundOutcome.PLAYER_BLACKJACK)
        elif self.rules.dealer_peeks and self.dealer_hand.is_blackjack:
            self.events.emit(EventType.DEALER_BLACKJACK)
            self.settle_natural()
            self._finish(RoundOutcome.DEALER_WINS)
        else:
            self.start_player_turn()

        return self.state

    def _deal_card_to_hand(self, hand: Hand, face_up: bool = True) -> Card:
        """Deal a card to a hand."""
        card = self.shoe.draw()
        hand.add_card(card)
        self.events.emit(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand="dealer" if hand is self.dealer_hand else "player",
            hand_value=hand.value if face_up or hand is not self.dealer_hand else None,
        )
        return card

    def hit(self) -> RoundState:
        """Player hits (takes another card)."""
        self._require("hit", RoundState.PLAYER_TURN)

        self._deal_card_to_hand(self.player_hand)
        self.events.emit(EventType.PLAYER_HIT, hand_value=self.player_hand.value)

        if self.player_hand.is_busted:
            self.events.emit(EventType.PLAYER_BUSTS, hand_value=self.player_hand.value)
            self.player_busts()
            self._finish(RoundOutcome.PLAYER_BUST)
        else:
            self.player_action()  # Stay in player turn
        return self.state

    def stand(self) -> RoundState:
        """Player stands (keeps current hand)."""
        self._require("stand", RoundState.PLAYER_TURN)

        self.events.emit(EventType.PLAYER_STAND, hand_value=self.player_hand.value)
        self.player_done()
        self._play_dealer()
        return self.state

    def double_down(self) -> RoundState:
        """Player doubles the wager, takes exactly one card and stands."""
        self._require("double down", RoundState.PLAYER_TURN)
        if Action.DOUBLE not in self.legal_actions:
            raise IllegalActionError("double down", "a hand that cannot double")

        self.doubled = True
        self._deal_card_to_hand(self.player_hand)
        self.events.emit(EventType.PLAYER_DOUBLE, hand_value=self.player_hand.value)

        if self.player_hand.is_busted:
            self.events.emit(EventType.PLAYER_BUSTS, hand_value=self.player_hand.value)
            self.player_busts()
            self._finish(RoundOutcome.PLAYER_BUST)
        else:
            self.player_done()
            self._play_dealer()
        return self.state

    def apply(self, action: Action) -> RoundState:
        """Perform a HIT, STAND or DOUBLE action."""
        if action == Action.HIT:
            return self.hit()
        if action == Action.STAND:
            return self.stand()
        if action == Action.DOUBLE:
            return self.double_down()
        raise IllegalActionError(str(action), str(self.state))

    def play(
        self,
        decider: DecisionProvider,
        allow_double: bool = True,
    ) -> RoundOutcome:
        """
        Run the player turn to completion with decisions from ``decider``.

        Args:
            decider: Source of player actions
            allow_double: False removes DOUBLE from the offered actions
                (e.g. when the bankroll cannot cover it)

        Returns:
            The settled outcome
        """
        if self.state == RoundState.DEALING:
            self.deal()

        while self.state == RoundState.PLAYER_TURN:
            legal = self.legal_actions
            if not allow_double:
                legal = [a for a in legal if a != Action.DOUBLE]
            action = decider.decide(self.player_hand, self.dealer_upcard, legal)
            if action not in legal:
                raise IllegalActionError(str(action), str(self.state))
            self.apply(action)

        return self.outcome  # type: ignore[return-value]

    def _reveal_hole_card(self) -> None:
        self.events.emit(
            EventType.DEALER_REVEALS,
            card=str(self.dealer_hand.cards[1]),
            hand_value=self.dealer_hand.value,
        )

    def _play_dealer(self) -> None:
        """Dealer plays the fixed house policy, then the round settles."""
        self._reveal_hole_card()

        while self._dealer_should_hit():
            self._deal_card_to_hand(self.dealer_hand)
            self.events.emit(EventType.DEALER_HITS, hand_value=self.dealer_hand.value)

        if self.dealer_hand.is_busted:
            self.events.emit(EventType.DEALER_BUSTS, hand_value=self.dealer_hand.value)
        else:
            self.events.emit(EventType.DEALER_STANDS, hand_value=self.dealer_hand.value)

        outcome = evaluate_hands(self.player_hand, self.dealer_hand)
        self.dealer_done()
        self._finish(outcome)

    def _dealer_should_hit(self) -> bool:
        """Determine if dealer should hit."""
        value = self.dealer_hand.value
        if value < 17:
            return True
        if value == 17 and self.dealer_hand.is_soft and self.rules.dealer_hits_soft_17:
            return True
        return False

    def _finish(self, outcome: RoundOutcome) -> None:
        self._outcome = outcome
        self.events.emit(
            EventType.ROUND_SETTLED,
            outcome=outcome.name,
            player_value=self.player_hand.value,
            dealer_value=self.dealer_hand.value,
            doubled=self.doubled,
        )

    @property
    def outcome(self) -> RoundOutcome | None:
        """Return the outcome once the round has settled."""
        return self._outcome

    @property
    def is_settled(self) -> bool:
        """Check if the round is over."""
        return self.state == RoundState.SETTLED

    @property
    def dealer_upcard(self) -> Card:
        """Return the dealer's face-up card."""
        if not self.dealer_hand.cards:
            raise IllegalActionError("show the up-card", str(self.state))
        return self.dealer_hand.cards[0]

    @property
    def dealer_visible_cards(self) -> list[Card]:
        """Return the dealer cards the player may see (hole card hidden until the dealer plays)."""
        if self.state in (RoundState.DEALING, RoundState.PLAYER_TURN):
            return self.dealer_hand.cards[:1]
        return list(self.dealer_hand.cards)

    @property
    def legal_actions(self) -> list[Action]:
        """Return the actions the current state accepts."""
        if self.state != RoundState.PLAYER_TURN:
            return []
        actions = [Action.HIT, Action.STAND]
        if self.rules.double_down and self.player_hand.can_double:
            actions.append(Action.DOUBLE)
        return actions
