"""Tests for the interactive terminal session."""

from console.session import InteractiveSession, PromptDecider, QuitGame
from core.cards import Card
from core.strategy import Action, BasicStrategy
from tests.conftest import StackedShoe, make_hand

import pytest


class ScriptedIO:
    """Feeds canned answers to prompts and records everything printed."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []

    def input(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def output(self, line):
        self.lines.append(line)

    @property
    def text(self):
        return "\n".join(self.lines)


def make_session(answers, cards, balance=100, show_hints=False):
    io = ScriptedIO(answers)
    session = InteractiveSession(
        starting_balance=balance,
        default_bet=10,
        show_hints=show_hints,
        input_fn=io.input,
        output_fn=io.output,
    )
    session.table.shoe = StackedShoe(cards)
    return session, io


class TestInteractiveSession:
    """Tests for full sessions driven by scripted input."""

    def test_hit_and_bust(self):
        """Test 8♣ 6♣ hitting 8♦ busts and costs the bet."""
        session, io = make_session(["10", "h", "n"], ["8C", "KH", "6C", "7S", "8D"])

        assert session.run() == 90
        assert "Dealer: King of Hearts, [hidden]" in io.text
        assert "Player: 8 of Clubs, 6 of Clubs (14)" in io.text
        assert "You bust with 22!" in io.text
        assert "You bust. Dealer wins. (-$10, balance $90)" in io.text
        assert "Games: 1 | W/L/P: 0/1/0 | Credits: $90" in io.text

    def test_stand_and_dealer_busts(self):
        """Test the dealer's draws are narrated and the win is paid."""
        session, io = make_session(["10", "S", "N"], ["10S", "KH", "9H", "3S", "2C", "7D"])

        assert session.run() == 110
        assert "Dealer hits: 15." in io.text
        assert "Dealer busts with 22!" in io.text
        assert "Dealer: King of Hearts, 3 of Spades, 2 of Clubs, 7 of Diamonds (22)" in io.text

    def test_empty_bet_reuses_previous(self):
        """Test pressing enter reuses the last bet."""
        cards = ["10C", "9H", "8C", "8S", "10D", "9S", "8D", "8H"]
        session, io = make_session(["25", "S", "Y", "", "S", "N"], cards)

        assert session.run() == 150
        assert "Bet [$25]" in io.prompts[3]

    def test_empty_first_bet_uses_default(self):
        """Test the configured default applies before any bet."""
        session, io = make_session(["", "S", "N"], ["10C", "9H", "8C", "8S"])
        assert session.run() == 110

    def test_invalid_bets_reprompt(self):
        """Test malformed, zero and oversized bets are rejected."""
        session, io = make_session(["abc", "0", "500", "10", "S", "N"], ["10C", "9H", "8C", "8S"])

        assert session.run() == 110
        assert "Invalid bet: 'ABC' is not a whole number" in io.text
        assert "Invalid bet: Bet must be positive, got 0" in io.text
        assert "Invalid bet: Bet of $500 exceeds balance of $100" in io.text

    def test_unknown_command_reprompts(self):
        """Test an unknown command is reported and asked again."""
        session, io = make_session(["10", "X", "S", "N"], ["10C", "9H", "8C", "8S"])

        assert session.run() == 110
        assert "Unrecognized command: 'X'" in io.text

    def test_double_only_when_offered(self):
        """Test D is rejected on a three-card hand."""
        session, io = make_session(
            ["10", "H", "D", "S", "N"],
            ["2C", "9H", "3C", "8S", "4D"],
        )

        session.run()
        assert "Unrecognized command: 'D'" in io.text
        assert "[D]ouble" in io.prompts[1]
        assert "[D]ouble" not in io.prompts[2]

    def test_quit_mid_round_keeps_balance(self):
        """Test Q during a round leaves without settling."""
        session, io = make_session(["10", "Q"], ["8C", "KH", "6C", "7S"])
        assert session.run() == 100
        assert "You leave the table. Your $10 bet is returned." in io.text
        assert "Games: 0 | W/L/P: 0/0/0 | Credits: $100" in io.text

    def test_quit_at_bet_prompt(self):
        """Test Q at the bet prompt ends the session."""
        session, io = make_session(["q"], [])
        assert session.run() == 100
        assert "Games: 0" in io.text

    def test_end_of_input_quits(self):
        """Test running out of input ends the session cleanly."""
        session, io = make_session([], [])
        assert session.run() == 100

    def test_bankrupt_ends_session(self):
        """Test losing every credit ends the game."""
        session, io = make_session(["10", "H"], ["8C", "KH", "6C", "7S", "8D"], balance=10)

        assert session.run() == 0
        assert "You are out of credits. Game over." in io.text

    def test_play_again_reprompts(self):
        """Test an unclear answer asks again."""
        session, io = make_session(["10", "S", "maybe", "N"], ["10C", "9H", "8C", "8S"])
        session.run()
        assert "Unrecognized answer: 'MAYBE'" in io.text

    def test_hint_shown(self):
        """Test the basic strategy hint accompanies the prompt."""
        session, io = make_session(["10", "S", "N"], ["10C", "6H", "6C", "8S"], show_hints=True)
        session.run()
        assert "Basic strategy suggests: Stand" in io.text


class TestPromptDecider:
    """Tests for the human decision provider on its own."""

    def test_maps_commands(self):
        """Test letters map to actions."""
        io = ScriptedIO(["s"])
        decider = PromptDecider(io.input, io.output)
        action = decider.decide(make_hand("10S", "6H"), Card.from_string("9C"), [Action.HIT, Action.STAND])
        assert action == Action.STAND

    def test_quit_raises(self):
        """Test Q raises QuitGame."""
        io = ScriptedIO(["Q"])
        decider = PromptDecider(io.input, io.output, BasicStrategy())
        with pytest.raises(QuitGame):
            decider.decide(make_hand("10S", "6H"), Card.from_string("9C"), [Action.HIT, Action.STAND])
        assert "Basic strategy suggests: Hit" in io.text
