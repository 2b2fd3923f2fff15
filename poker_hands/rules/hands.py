"""Five-card hand model and category classification.

Categories, strongest first (strength order 1 is best):
1. Royal flush: T, J, Q, K, A of one suit
2. Straight flush: straight and flush
3. Four of a kind
4. Full house: three of a kind plus a pair
5. Flush: five cards of one suit
6. Straight: five consecutive ranks, including the wheel (A-2-3-4-5)
7. Three of a kind
8. Two pair
9. One pair
10. High card

Classification is a fixed-precedence cascade: the first category whose
predicate holds wins, so a straight flush is never reported as a flush.
All predicates read only the hand's sorted rank and suit views, and the
k-of-a-kind predicates are derived from a single rank-frequency count.

Hands in the same category are not compared further (no kickers).
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, Iterator, Tuple

from .errors import HandSizeError
from .ranks import (
    Card,
    Rank,
    Suit,
    RANK_SYMBOLS,
    ROYAL_RANKS,
    WHEEL_RANKS,
    are_consecutive,
    get_rank_counts,
)

# Number of cards in a hand
HAND_SIZE = 5


class HandCategory(IntEnum):
    """Hand categories; the value is the strength order (1 = strongest)."""

    ROYAL_FLUSH = 1
    STRAIGHT_FLUSH = 2
    FOUR_OF_A_KIND = 3
    FULL_HOUSE = 4
    FLUSH = 5
    STRAIGHT = 6
    THREE_OF_A_KIND = 7
    TWO_PAIR = 8
    ONE_PAIR = 9
    HIGH_CARD = 10

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS: Dict[HandCategory, str] = {
    HandCategory.ROYAL_FLUSH: "Royal Flush",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.HIGH_CARD: "High Card",
}


@dataclass(frozen=True)
class Hand:
    """An identified hand of exactly five cards.

    Attributes:
        hand_id: Caller-assigned identifier
        cards: The five cards, in the order given

    Raises:
        HandSizeError: If constructed with anything other than five cards
    """

    hand_id: int
    cards: Tuple[Card, ...]

    def __post_init__(self):
        cards = tuple(self.cards)
        if len(cards) != HAND_SIZE:
            raise HandSizeError(f"A hand needs exactly {HAND_SIZE} cards, got {len(cards)}")
        object.__setattr__(self, "cards", cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return f"Hand {self.hand_id}: {' '.join(str(c) for c in self.cards)}"

    def has_valid_ranks(self) -> bool:
        """Check that every card's rank is a Rank member.

        Cards built directly from raw values (not via ``Card.from_symbols``)
        may carry anything; this re-checks them.
        """
        return all(isinstance(card.rank, Rank) for card in self.cards)

    def has_valid_suits(self) -> bool:
        """Check that every card's suit is a Suit member."""
        return all(isinstance(card.suit, Suit) for card in self.cards)

    def extract_ranks_sorted(self) -> Tuple[int, ...]:
        """Rank values of the five cards, ascending."""
        return tuple(sorted(int(card.rank) for card in self.cards))

    def extract_suits_sorted(self) -> Tuple[str, ...]:
        """Suit symbols of the five cards, ascending."""
        return tuple(
            sorted(card.suit.value if isinstance(card.suit, Suit) else str(card.suit) for card in self.cards)
        )

    def high_card(self) -> str:
        """Symbol of the highest rank in the hand."""
        return RANK_SYMBOLS[Rank(self.extract_ranks_sorted()[-1])]

    def evaluate(self) -> Tuple[str, int]:
        """Shortcut for ``evaluate(hand)``."""
        return evaluate(self)


@dataclass(frozen=True)
class HandResult:
    """Read-only outcome of classifying a hand.

    Attributes:
        hand_id: Identifier of the classified hand
        cards: The hand's original cards
        rank: Human-readable category label
        rank_order: Strength order, 1 (Royal Flush) to 10 (High Card)
    """

    hand_id: int
    cards: Tuple[Card, ...]
    rank: str
    rank_order: int

    @property
    def category(self) -> HandCategory:
        return HandCategory(self.rank_order)


# ---------------------------------------------------------------------------
# Predicates over the sorted views
# ---------------------------------------------------------------------------


def _all_same(suits: Tuple[str, ...]) -> bool:
    return len(set(suits)) == 1


def _is_run(ranks: Tuple[int, ...]) -> bool:
    return ranks == WHEEL_RANKS or are_consecutive(ranks)


def _max_count(counts: Iterable[int]) -> int:
    return max(counts, default=0)


def _pair_count(counts: Iterable[int]) -> int:
    # A rank seen 4 times holds two disjoint pairs
    return sum(c // 2 for c in counts)


def is_flush(hand: Hand) -> bool:
    """Check if all five cards share one suit."""
    return _all_same(hand.extract_suits_sorted())


def is_straight(hand: Hand) -> bool:
    """Check if the ranks form five consecutive values.

    The wheel (A-2-3-4-5) counts as a straight with the Ace playing low.
    """
    return _is_run(hand.extract_ranks_sorted())


def is_royal_flush(hand: Hand) -> bool:
    """Check for exactly T, J, Q, K, A in a single suit."""
    return hand.extract_ranks_sorted() == ROYAL_RANKS and is_flush(hand)


def is_straight_flush(hand: Hand) -> bool:
    return is_straight(hand) and is_flush(hand)


def is_four_of_a_kind(hand: Hand) -> bool:
    return _max_count(get_rank_counts(hand.extract_ranks_sorted()).values()) >= 4


def is_three_of_a_kind(hand: Hand) -> bool:
    return _max_count(get_rank_counts(hand.extract_ranks_sorted()).values()) >= 3


def is_two_pair(hand: Hand) -> bool:
    """Check for two disjoint pairs of equal rank."""
    return _pair_count(get_rank_counts(hand.extract_ranks_sorted()).values()) >= 2


def is_one_pair(hand: Hand) -> bool:
    return _max_count(get_rank_counts(hand.extract_ranks_sorted()).values()) >= 2


def is_full_house(hand: Hand) -> bool:
    """Check for three of a kind and two pair on the same ranks."""
    return is_three_of_a_kind(hand) and is_two_pair(hand)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def classify(hand: Hand) -> HandCategory:
    """Return the strongest category the hand satisfies.

    The sorted views and the rank-frequency count are computed once and
    shared by every step of the cascade.
    """
    ranks = hand.extract_ranks_sorted()
    suits = hand.extract_suits_sorted()
    counts = list(get_rank_counts(ranks).values())

    flush = _all_same(suits)
    straight = _is_run(ranks)
    most = _max_count(counts)
    pairs = _pair_count(counts)

    if ranks == ROYAL_RANKS and flush:
        return HandCategory.ROYAL_FLUSH
    if straight and flush:
        return HandCategory.STRAIGHT_FLUSH
    if most >= 4:
        return HandCategory.FOUR_OF_A_KIND
    if most >= 3 and pairs >= 2:
        return HandCategory.FULL_HOUSE
    if flush:
        return HandCategory.FLUSH
    if straight:
        return HandCategory.STRAIGHT
    if most >= 3:
        return HandCategory.THREE_OF_A_KIND
    if pairs >= 2:
        return HandCategory.TWO_PAIR
    if most >= 2:
        return HandCategory.ONE_PAIR
    return HandCategory.HIGH_CARD


def describe(hand: Hand, category: HandCategory) -> str:
    """Label for a category; High Card names the hand's top rank."""
    if category == HandCategory.HIGH_CARD:
        return f"{category.label} - {{{hand.high_card()}}}"
    return category.label


def evaluate(hand: Hand) -> Tuple[str, int]:
    """Classify a hand.

    Args:
        hand: A hand with valid ranks and suits. Validity is not checked;
            callers should use ``has_valid_ranks``/``has_valid_suits`` first.

    Returns:
        (label, strength order) where order 1 is a Royal Flush and 10 is High Card
    """
    category = classify(hand)
    return describe(hand, category), int(category)


def evaluate_hand(hand: Hand) -> HandResult:
    """Classify a hand and package the outcome as a HandResult."""
    label, order = evaluate(hand)
    return HandResult(hand_id=hand.hand_id, cards=hand.cards, rank=label, rank_order=order)
