"""Text rendering for the terminal game and simulation reports."""

from typing import Iterable

from core.cards import Card
from core.game.engine import RoundEngine
from core.game.events import EventType, GameEvent
from core.game.outcome import RoundOutcome
from core.hand import Hand
from core.simulation.report import SummaryReport
from core.table import RoundResult

HIDDEN_CARD = "[hidden]"

OUTCOME_MESSAGES = {
    RoundOutcome.PLAYER_BUST: "You bust. Dealer wins.",
    RoundOutcome.DEALER_BUST: "Dealer busts. You win!",
    RoundOutcome.PLAYER_BLACKJACK: "Blackjack! You win!",
    RoundOutcome.PLAYER_WINS: "You win!",
    RoundOutcome.DEALER_WINS: "Dealer wins.",
    RoundOutcome.PUSH: "Push. Your bet is returned.",
}

EVENT_MESSAGES = {
    EventType.SHOE_SHUFFLED: "The shoe is reshuffled.",
    EventType.DEALER_REVEALS: "Dealer reveals {card} ({hand_value}).",
    EventType.DEALER_HITS: "Dealer hits: {hand_value}.",
    EventType.DEALER_STANDS: "Dealer stands on {hand_value}.",
    EventType.DEALER_BUSTS: "Dealer busts with {hand_value}!",
    EventType.PLAYER_BUSTS: "You bust with {hand_value}!",
}


def format_cards(cards: Iterable[Card]) -> str:
    """Join cards in long form, e.g. "8 of Clubs, 6 of Clubs"."""
    return ", ".join(card.name for card in cards)


def format_hand(hand: Hand) -> str:
    """Cards followed by the hand's total."""
    total = f"soft {hand.value}" if hand.is_soft and not hand.is_busted else str(hand.value)
    return f"{format_cards(hand)} ({total})"


def format_change(amount: float, places: int = 0) -> str:
    """Signed credit change with the sign ahead of the dollar, e.g. "-$50"."""
    if amount > 0:
        return f"+${amount:,.{places}f}"
    if amount < 0:
        return f"-${-amount:,.{places}f}"
    return f"${0:,.{places}f}"


def render_player_view(hand: Hand, dealer_upcard: Card) -> str:
    """Board as the player sees it mid-round: the dealer's hole card is hidden."""
    return "\n".join([
        f"Dealer: {dealer_upcard.name}, {HIDDEN_CARD}",
        f"Player: {format_hand(hand)}",
    ])


def render_final_board(engine: RoundEngine) -> str:
    """Board after the round, every visible dealer card shown."""
    dealer_cards = engine.dealer_visible_cards
    dealer_line = f"Dealer: {format_hand(Hand(list(dealer_cards)))}"
    if len(dealer_cards) < len(engine.dealer_hand):
        dealer_line = f"Dealer: {format_cards(dealer_cards)}, {HIDDEN_CARD}"
    return "\n".join([dealer_line, f"Player: {format_hand(engine.player_hand)}"])


def render_result(result: RoundResult) -> str:
    """Outcome line plus the balance change."""
    message = OUTCOME_MESSAGES[result.outcome]
    return f"{message} ({format_change(result.delta)}, balance ${result.balance})"


def render_event(event: GameEvent) -> str | None:
    """Narration for an engine event, or None if it is not narrated."""
    template = EVENT_MESSAGES.get(event.event_type)
    if template is None:
        return None
    return template.format(**event.data)


def render_report(report: SummaryReport) -> str:
    """Human-readable simulation summary."""
    lines = [
        "Simulation Results:",
        f"Runs: {report.total_runs:,} "
        f"(completed {report.completed_runs:,}, errored {report.errored_runs:,})",
        f"Rounds Played: {report.total_rounds:,}",
        f"W/L/P: {report.wins:,}/{report.losses:,}/{report.pushes:,} "
        f"(win rate {report.win_rate * 100:.2f}%)",
        f"Blackjacks: {report.blackjacks:,}",
        f"Bankrupt Runs: {report.bankrupt_runs:,}",
        f"Total Earnings: {format_change(report.total_earnings)}",
        f"Average Earnings per Run: {format_change(report.average_earnings, 2)}",
        f"Average Final Balance: ${report.average_final_balance:,.2f}",
    ]
    return "\n".join(lines)
