"""Poker rules implementations.

This module provides:
- Card, rank and suit definitions (ranks.py)
- Five-card hand model and classification (hands.py)
- Card-string parsing (parsing.py)
- Error types (errors.py)
"""

from .errors import (
    PokerHandsError,
    CardError,
    InvalidRankError,
    InvalidSuitError,
    HandSizeError,
    CardStringError,
)

from .ranks import (
    Rank,
    Suit,
    Card,
    RANK_SYMBOLS,
    SYMBOL_TO_RANK,
    SYMBOL_TO_SUIT,
    WHEEL_RANKS,
    ROYAL_RANKS,
    rank_value,
    is_valid_rank,
    is_valid_suit,
    are_consecutive,
    get_rank_counts,
    create_standard_deck,
    sort_cards,
)

from .hands import (
    HAND_SIZE,
    HandCategory,
    CATEGORY_LABELS,
    Hand,
    HandResult,
    is_royal_flush,
    is_straight_flush,
    is_four_of_a_kind,
    is_full_house,
    is_flush,
    is_straight,
    is_three_of_a_kind,
    is_two_pair,
    is_one_pair,
    classify,
    describe,
    evaluate,
    evaluate_hand,
)

from .parsing import (
    HAND_STRING_LENGTH,
    EXAMPLE_HANDS,
    parse_cards,
    parse_hand,
    parse_hands,
)

__all__ = [
    # Errors
    "PokerHandsError",
    "CardError",
    "InvalidRankError",
    "InvalidSuitError",
    "HandSizeError",
    "CardStringError",
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "RANK_SYMBOLS",
    "SYMBOL_TO_RANK",
    "SYMBOL_TO_SUIT",
    "WHEEL_RANKS",
    "ROYAL_RANKS",
    "rank_value",
    "is_valid_rank",
    "is_valid_suit",
    "are_consecutive",
    "get_rank_counts",
    "create_standard_deck",
    "sort_cards",
    # Hands
    "HAND_SIZE",
    "HandCategory",
    "CATEGORY_LABELS",
    "Hand",
    "HandResult",
    "is_royal_flush",
    "is_straight_flush",
    "is_four_of_a_kind",
    "is_full_house",
    "is_flush",
    "is_straight",
    "is_three_of_a_kind",
    "is_two_pair",
    "is_one_pair",
    "classify",
    "describe",
    "evaluate",
    "evaluate_hand",
    # Parsing
    "HAND_STRING_LENGTH",
    "EXAMPLE_HANDS",
    "parse_cards",
    "parse_hand",
    "parse_hands",
]
