"""Tests for Hand evaluation."""

import pytest
from hypothesis import given, strategies as st

from core.cards import Card, Rank, Suit
from core.game.outcome import RoundOutcome, evaluate_hands
from core.hand import Hand, best_total, is_blackjack, is_bust
from tests.conftest import hand_strategy, make_hand

TEN_VALUE_RANKS = [Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING]
NON_ACE_RANKS = [rank for rank in Rank if not rank.is_ace]


class TestBestTotal:
    """Tests for the pure evaluator functions."""

    def test_empty(self):
        """Test that no cards total zero."""
        assert best_total([]) == (0, False)

    def test_hard_total(self):
        """Test plain card sums."""
        assert best_total(make_hand("10S", "6H").cards) == (16, False)

    def test_soft_total(self):
        """Test an Ace kept at 11."""
        assert best_total(make_hand("AS", "6H").cards) == (17, True)

    def test_aces_demoted_one_at_a_time(self):
        """Test A-A-9: one Ace demoted, one kept at 11."""
        assert best_total(make_hand("AS", "AH", "9C").cards) == (21, True)

    def test_all_aces_demoted(self):
        """Test A-A-9-K: both Aces count as 1."""
        assert best_total(make_hand("AS", "AH", "9C", "KD").cards) == (21, False)

    @pytest.mark.parametrize("rank", NON_ACE_RANKS)
    def test_one_ace_never_busts(self, rank):
        """Test Ace plus any one card prefers 11 and never reports bust."""
        cards = [Card(Rank.ACE, Suit.SPADES), Card(rank, Suit.HEARTS)]
        total, soft = best_total(cards)
        assert total == 11 + rank.blackjack_value
        assert soft
        assert not is_bust(cards)

    @pytest.mark.parametrize("rank", TEN_VALUE_RANKS)
    @pytest.mark.parametrize("suit", list(Suit))
    def test_ace_and_ten_is_blackjack(self, rank, suit):
        """Test every Ace + ten-value pairing is a blackjack in either order."""
        ace = Card(Rank.ACE, Suit.CLUBS)
        ten = Card(rank, suit)
        assert is_blackjack([ace, ten])
        assert is_blackjack([ten, ace])

    def test_three_card_21_not_blackjack(self):
        """Test that 21 with 3+ cards is not blackjack."""
        assert not is_blackjack(make_hand("7S", "7H", "7C").cards)

    @given(hand_strategy(min_cards=1, max_cards=8))
    def test_total_is_best_non_bust_interpretation(self, hand):
        """Property: a non-bust total is reported whenever one exists."""
        total, soft = best_total(hand.cards)
        hard_total = sum(1 if c.is_ace else c.value for c in hand.cards)
        if hard_total <= 21:
            assert total <= 21
        else:
            assert total == hard_total
        assert soft == (total == hard_total + 10)
        assert total in (hard_total, hard_total + 10)

    @given(st.lists(st.sampled_from([Card(r, s) for r in Rank for s in Suit]), max_size=6))
    def test_bust_flag_matches_total(self, cards):
        """Property: is_bust agrees with best_total."""
        assert is_bust(cards) == (best_total(cards)[0] > 21)


class TestHand:
    """Tests for the Hand class."""

    def test_empty_hand(self, empty_hand):
        """Test empty hand properties."""
        assert len(empty_hand) == 0
        assert empty_hand.value == 0
        assert not empty_hand.is_soft
        assert not empty_hand.is_blackjack
        assert not empty_hand.is_busted

    def test_add_card(self, empty_hand):
        """Test adding cards to hand."""
        empty_hand.add_card(Card(Rank.TEN, Suit.SPADES))
        assert len(empty_hand) == 1
        assert empty_hand.value == 10

    def test_soft_hand_value(self, soft_17_hand):
        """Test soft hand value calculation."""
        assert soft_17_hand.value == 17
        assert soft_17_hand.is_soft

    def test_blackjack(self, blackjack_hand):
        """Test blackjack detection."""
        assert blackjack_hand.is_blackjack
        assert blackjack_hand.value == 21

    def test_bust(self, bust_hand):
        """Test bust detection."""
        assert bust_hand.is_busted
        assert bust_hand.value == 26

    def test_soft_to_hard_transition(self):
        """Test ace switching from 11 to 1."""
        hand = Hand()
        hand.add_card(Card(Rank.ACE, Suit.SPADES))
        hand.add_card(Card(Rank.FIVE, Suit.HEARTS))
        assert hand.value == 16
        assert hand.is_soft

        hand.add_card(Card(Rank.EIGHT, Suit.CLUBS))
        assert hand.value == 14
        assert hand.is_hard

    def test_can_double(self):
        """Test double down eligibility."""
        hand = make_hand("5S", "6H")
        assert hand.can_double

        hand.add_card(Card(Rank.TWO, Suit.CLUBS))
        assert not hand.can_double

    def test_str(self, soft_17_hand, bust_hand):
        """Test hand text form."""
        assert str(soft_17_hand) == "A♠ 6♥ (soft 17)"
        assert str(bust_hand).endswith("(BUST)")

    def test_clear_hand(self, blackjack_hand):
        """Test clearing a hand."""
        blackjack_hand.clear()
        assert len(blackjack_hand) == 0
        assert blackjack_hand.value == 0


class TestEvaluateHands:
    """Tests for hand comparison."""

    def test_player_wins_higher_value(self):
        """Test player wins with higher value."""
        assert evaluate_hands(make_hand("10S", "9H"), make_hand("10C", "8D")) == RoundOutcome.PLAYER_WINS

    def test_dealer_wins_higher_value(self):
        """Test dealer wins with higher value."""
        assert evaluate_hands(make_hand("10S", "7H"), make_hand("10C", "9D")) == RoundOutcome.DEALER_WINS

    def test_push(self):
        """Test push (tie)."""
        assert evaluate_hands(make_hand("10S", "8H"), make_hand("10C", "8D")) == RoundOutcome.PUSH

    def test_both_bust_player_loses(self):
        """Test both busting means player loses."""
        player = make_hand("10S", "6H", "KC")
        dealer = make_hand("10D", "6C", "QS")
        assert evaluate_hands(player, dealer) == RoundOutcome.PLAYER_BUST

    def test_dealer_bust_player_wins(self):
        """Test dealer busting means player wins."""
        dealer = make_hand("KH", "3S", "2C", "7D")
        assert dealer.value == 22
        assert evaluate_hands(make_hand("10S", "7H"), dealer) == RoundOutcome.DEALER_BUST

    def test_player_blackjack_vs_dealer_21(self):
        """Test player blackjack beats dealer 21 with 3+ cards."""
        assert evaluate_hands(make_hand("AS", "KH"), make_hand("7C", "7D", "7S")) == RoundOutcome.PLAYER_BLACKJACK

    def test_dealer_blackjack_beats_player_21(self):
        """Test dealer blackjack beats a multi-card 21."""
        assert evaluate_hands(make_hand("7C", "7D", "7S"), make_hand("AS", "KH")) == RoundOutcome.DEALER_WINS

    def test_both_blackjack_push(self):
        """Test both having blackjack is a push."""
        assert evaluate_hands(make_hand("AS", "KH"), make_hand("AC", "QD")) == RoundOutcome.PUSH
