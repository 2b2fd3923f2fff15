"""Random hand generation.

Each card's rank and suit are sampled independently and uniformly, so a
hand may contain the same card twice. Pass ``unique=True`` to draw five
distinct cards from a standard deck instead.
"""

from typing import List, Optional

import numpy as np

from poker_hands.rules.hands import HAND_SIZE, Hand
from poker_hands.rules.ranks import Card, Rank, Suit, create_standard_deck

RANKS = list(Rank)
SUITS = list(Suit)
DECK = tuple(create_standard_deck())


class RandomHandGenerator:
    """Deals random five-card hands.

    Attributes:
        unique: If True, cards within a hand are drawn without replacement
        rng: Random number generator
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        unique: bool = False,
        rng: Optional[np.random.Generator] = None,
    ):
        """Initialize the generator.

        Args:
            seed: Random seed for reproducibility
            unique: Draw distinct cards within each hand
            rng: Existing generator to draw from; ``seed`` is ignored when given
        """
        self.unique = unique
        self._seed = seed
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def deal(self, hand_id: int) -> Hand:
        """Deal one hand with the given id."""
        if self.unique:
            picks = self.rng.choice(len(DECK), size=HAND_SIZE, replace=False)
            cards = [DECK[int(i)] for i in picks]
        else:
            rank_idx = self.rng.integers(0, len(RANKS), size=HAND_SIZE)
            suit_idx = self.rng.integers(0, len(SUITS), size=HAND_SIZE)
            cards = [Card(rank=RANKS[int(r)], suit=SUITS[int(s)]) for r, s in zip(rank_idx, suit_idx)]
        return Hand(hand_id=hand_id, cards=cards)

    def deal_many(self, count: int) -> List[Hand]:
        """Deal ``count`` hands with ids 0..count-1.

        A count below one gives an empty list; rejecting it is up to the caller.
        """
        if count < 1:
            return []
        return [self.deal(i) for i in range(count)]

    def reset(self) -> None:
        """Restart the random stream from the original seed."""
        self.rng = np.random.default_rng(self._seed)


def random_hand(hand_id: int, rng: Optional[np.random.Generator] = None) -> Hand:
    """Deal a single hand with independently sampled cards."""
    return RandomHandGenerator(rng=rng).deal(hand_id)


def random_hands(count: int, rng: Optional[np.random.Generator] = None) -> List[Hand]:
    """Deal ``count`` hands with independently sampled cards."""
    return RandomHandGenerator(rng=rng).deal_many(count)
