"""Multi-hand ranking.

Hands are classified once, pushed onto a min-heap keyed by strength order,
and popped best-first. The heap key also carries the input position, so
hands that land in the same category come out in the order they were given.
No kicker comparison is done: two flushes are equal as far as the ranking is
concerned, whatever their top cards.
"""

import heapq
import logging
from typing import Iterable, List, Optional, Tuple

from poker_hands.rules.hands import Hand, HandResult, evaluate_hand

logger = logging.getLogger(__name__)


def rank_hands(hands: Iterable[Hand]) -> List[HandResult]:
    """Order hands from strongest to weakest.

    Args:
        hands: Hands to rank. Ranks and suits are assumed valid.

    Returns:
        One HandResult per input hand, lowest strength order first.
        Empty input gives an empty list.
    """
    heap: List[Tuple[int, int, HandResult]] = []
    for position, hand in enumerate(hands):
        result = evaluate_hand(hand)
        heapq.heappush(heap, (result.rank_order, position, result))

    results = []
    while heap:
        _, _, result = heapq.heappop(heap)
        results.append(result)

    logger.debug("Ranked %d hand(s)", len(results))
    return results


def winner(hands: Iterable[Hand]) -> Optional[HandResult]:
    """Best hand's result, or None if there are no hands."""
    results = rank_hands(hands)
    return results[0] if results else None
