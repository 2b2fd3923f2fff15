"""Tests for multi-hand ranking.

Tests cover:
- Empty input
- Best-to-worst ordering by strength order
- Stable order for hands in the same category (no kicker comparison)
- Winner lookup
"""

import pytest

from poker_hands.dealing import RandomHandGenerator
from poker_hands.engine import rank_hands, winner
from poker_hands.rules import Card, Hand, HandResult, Rank, Suit, parse_hand


@pytest.fixture
def six_hands():
    """One hand per category from straight flush down to high card, shuffled ids."""
    return [
        parse_hand("2S3S4S5S6S", hand_id=1),  # Straight Flush
        parse_hand("ASKDQHJCTS", hand_id=2),  # Straight
        parse_hand("2H8H4H5H6H", hand_id=3),  # Flush
        parse_hand("2H8D8C5H6S", hand_id=4),  # One Pair
        parse_hand("2H8D8C5H5S", hand_id=5),  # Two Pair
        parse_hand("2H8DJC5HAS", hand_id=6),  # High Card
    ]


class TestRankHands:
    def test_empty_input(self):
        assert rank_hands([]) == []

    def test_six_hand_scenario(self, six_hands):
        results = rank_hands(six_hands)
        assert [r.hand_id for r in results] == [1, 3, 2, 5, 4, 6]
        assert [r.rank_order for r in results] == [2, 5, 6, 8, 9, 10]
        assert results[0].rank == "Straight Flush"
        assert results[-1].rank == "High Card - {A}"

    def test_results_carry_original_cards(self, six_hands):
        by_id = {h.hand_id: h for h in six_hands}
        for result in rank_hands(six_hands):
            assert isinstance(result, HandResult)
            assert result.cards == by_id[result.hand_id].cards

    def test_length_and_order_on_random_hands(self):
        hands = RandomHandGenerator(seed=11).deal_many(200)
        results = rank_hands(hands)

        assert len(results) == len(hands)
        orders = [r.rank_order for r in results]
        assert orders == sorted(orders)
        assert sorted(r.hand_id for r in results) == [h.hand_id for h in hands]

    def test_same_category_keeps_input_order(self):
        hands = [
            parse_hand("2H4H6H8HTH", hand_id=10),  # Flush, ten high
            parse_hand("3S3H9DKCAS", hand_id=11),  # One Pair
            parse_hand("3D5D7D9DAD", hand_id=12),  # Flush, ace high
            parse_hand("2C4C6C8CJC", hand_id=13),  # Flush, jack high
        ]
        results = rank_hands(hands)
        assert [r.hand_id for r in results] == [10, 12, 13, 11]

    def test_accepts_generator_input(self, six_hands):
        results = rank_hands(h for h in six_hands)
        assert len(results) == 6

    def test_duplicate_cards_are_ranked(self):
        card = Card(rank=Rank.ACE, suit=Suit.SPADE)
        hand = Hand(hand_id=1, cards=[card] * 5)
        results = rank_hands([hand])
        assert results[0].rank == "Four of a Kind"

    def test_ranking_is_repeatable(self, six_hands):
        assert rank_hands(six_hands) == rank_hands(six_hands)


class TestWinner:
    def test_winner(self, six_hands):
        result = winner(six_hands)
        assert result.hand_id == 1
        assert result.rank_order == 2

    def test_winner_empty(self):
        assert winner([]) is None
