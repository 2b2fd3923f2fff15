"""Card rank and suit definitions and utilities.

Rank order (high to low): A > K > Q > J > T > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

The Ace is high everywhere except in the wheel straight (A-2-3-4-5), which is
resolved by the classifier, not here.

This module provides:
- Rank and suit constants and their read-only symbol tables
- Card representation
- Symbol validation (rank_value, is_valid_rank, is_valid_suit)
- Counting and ordering utilities used by hand classification
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Dict, Iterable, List

from .errors import CardStringError, InvalidRankError, InvalidSuitError


class Rank(IntEnum):
    """Card ranks; the value is the numeric strength (2-14, Ace high)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        return RANK_SYMBOLS[self]


class Suit(Enum):
    """Card suits. Unordered; only equality matters."""

    SPADE = "S"
    HEART = "H"
    DIAMOND = "D"
    CLUB = "C"

    @property
    def symbol(self) -> str:
        return self.value


# Rank symbols for display and parsing
RANK_SYMBOLS = MappingProxyType(
    {
        Rank.TWO: "2",
        Rank.THREE: "3",
        Rank.FOUR: "4",
        Rank.FIVE: "5",
        Rank.SIX: "6",
        Rank.SEVEN: "7",
        Rank.EIGHT: "8",
        Rank.NINE: "9",
        Rank.TEN: "T",
        Rank.JACK: "J",
        Rank.QUEEN: "Q",
        Rank.KING: "K",
        Rank.ACE: "A",
    }
)

# Symbol to rank mapping (for parsing)
SYMBOL_TO_RANK = MappingProxyType({v: k for k, v in RANK_SYMBOLS.items()})

# Symbol to suit mapping (for parsing)
SYMBOL_TO_SUIT = MappingProxyType({s.value: s for s in Suit})

# Rank values of the wheel, the only straight where the Ace plays low
WHEEL_RANKS = (2, 3, 4, 5, 14)

# Rank values of a royal flush
ROYAL_RANKS = (10, 11, 12, 13, 14)


def rank_value(symbol: str) -> int:
    """Map a rank symbol to its numeric strength.

    Args:
        symbol: One of 2-9, T, J, Q, K, A (case-sensitive)

    Returns:
        Integer in [2, 14]

    Raises:
        InvalidRankError: If the symbol is not a rank
    """
    try:
        return int(SYMBOL_TO_RANK[symbol])
    except (KeyError, TypeError):
        raise InvalidRankError(symbol) from None


def is_valid_rank(symbol: str) -> bool:
    """Check if a symbol names a rank."""
    return isinstance(symbol, str) and symbol in SYMBOL_TO_RANK


def is_valid_suit(symbol: str) -> bool:
    """Check if a symbol names a suit."""
    return isinstance(symbol, str) and symbol in SYMBOL_TO_SUIT


@dataclass(frozen=True)
class Card:
    """A playing card with rank and suit.

    Immutable and hashable for use in sets. Fields are not validated here:
    use ``from_symbols`` to build a card from raw symbols with validation.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        rank = self.rank.symbol if isinstance(self.rank, Rank) else str(self.rank)
        suit = self.suit.symbol if isinstance(self.suit, Suit) else str(self.suit)
        return f"{rank}{suit}"

    def __repr__(self) -> str:
        return f"Card({self})"

    @classmethod
    def from_symbols(cls, rank_symbol: str, suit_symbol: str) -> "Card":
        """Build a card from a rank symbol and a suit symbol.

        Args:
            rank_symbol: One of 2-9, T, J, Q, K, A
            suit_symbol: One of S, H, D, C

        Returns:
            Card object

        Raises:
            InvalidRankError: If the rank symbol is outside the domain
            InvalidSuitError: If the suit symbol is outside the domain
        """
        if not is_valid_rank(rank_symbol):
            raise InvalidRankError(rank_symbol)
        if not is_valid_suit(suit_symbol):
            raise InvalidSuitError(suit_symbol)
        return cls(rank=SYMBOL_TO_RANK[rank_symbol], suit=SYMBOL_TO_SUIT[suit_symbol])

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a two-character code like 'TS' or '9H'.

        Raises:
            CardStringError: If the string is not two characters
            InvalidRankError: If the rank is unknown
            InvalidSuitError: If the suit is unknown
        """
        if len(s) != 2:
            raise CardStringError(f"Invalid card code: {s!r}. expected rank and suit, ex) TS")
        return cls.from_symbols(s[0], s[1])


def are_consecutive(ranks: Iterable[int]) -> bool:
    """Check if sorted rank values increase by exactly one each step."""
    values = [int(r) for r in ranks]
    return all(b - a == 1 for a, b in zip(values, values[1:]))


def get_rank_counts(ranks: Iterable[int]) -> Dict[int, int]:
    """Count occurrences of each rank value.

    Args:
        ranks: Rank values (Rank members or plain ints)

    Returns:
        Dict mapping rank value to count
    """
    counts: Dict[int, int] = {}
    for rank in ranks:
        counts[int(rank)] = counts.get(int(rank), 0) + 1
    return counts


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (13 ranks x 4 suits)
    """
    deck = []
    for rank in Rank:
        for suit in Suit:
            deck.append(Card(rank=rank, suit=suit))
    return deck


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards by rank (ascending), then by suit symbol.

    Returns:
        New sorted list of cards
    """
    return sorted(cards, key=lambda c: (int(c.rank), c.suit.value))
