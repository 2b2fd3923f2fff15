"""Card-string parsing.

A hand is written as ten characters of alternating rank and suit, e.g.
``3s4h5d6c7s`` or ``9H3CTSQSAS``: even indices are ranks, odd indices are
suits. Input is case-insensitive. Several hands are separated by commas.
"""

from typing import List, Optional

from .errors import CardStringError, InvalidRankError, InvalidSuitError
from .hands import HAND_SIZE, Hand
from .ranks import Card, is_valid_rank, is_valid_suit

# Characters per hand string: one rank and one suit per card
HAND_STRING_LENGTH = HAND_SIZE * 2

EXAMPLE_HANDS = "3s4h5d6c7s,9H3CTSQSAS,4DASAC7H9C"


def parse_cards(text: str) -> List[Card]:
    """Parse a single ten-character hand string into five cards.

    Args:
        text: Alternating rank/suit characters, any case

    Returns:
        List of five Card objects

    Raises:
        CardStringError: If the string is not ten characters long
        InvalidRankError: If a rank character is unknown
        InvalidSuitError: If a suit character is unknown
    """
    if len(text) != HAND_STRING_LENGTH:
        raise CardStringError(
            f"invalid card string: {text}. card string should be like this. ex) 3s4h5d6c7s or 9H3CTSQSAS"
        )

    upper = text.upper()
    cards = []
    for i in range(0, HAND_STRING_LENGTH, 2):
        rank, suit = upper[i], upper[i + 1]
        if not is_valid_rank(rank):
            raise InvalidRankError(
                rank, f"invalid card string: {text}. rank should be 2,3,4,5,6,7,8,9,T,J,Q,K,A"
            )
        if not is_valid_suit(suit):
            raise InvalidSuitError(suit, f"invalid card string: {text}. suit should be S,H,D,C")
        cards.append(Card.from_symbols(rank, suit))
    return cards


def parse_hand(text: str, hand_id: int) -> Hand:
    """Parse a hand string into a Hand with the given id."""
    return Hand(hand_id=hand_id, cards=parse_cards(text))


def parse_hands(text: str, expected: Optional[int] = None) -> List[Hand]:
    """Parse comma-separated hand strings.

    Spaces are ignored. Hands get ids 1..n in input order.

    Args:
        text: e.g. "3s4h5d6c7s, 9H3CTSQSAS"
        expected: If given, the number of hands the text must contain

    Returns:
        List of Hand objects

    Raises:
        CardStringError: On a count mismatch or a malformed hand string
        InvalidRankError, InvalidSuitError: On unknown symbols
    """
    parts = text.replace(" ", "").split(",")
    if expected is not None and len(parts) != expected:
        raise CardStringError(
            f"expected {expected} hand(s) but got {len(parts)}. "
            "Please provide the same number as the number of hands"
        )
    return [parse_hand(part, hand_id=i + 1) for i, part in enumerate(parts)]
