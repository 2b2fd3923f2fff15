"""Hand ranking engine.

This module provides:
- rank_hands: Order hands best-first by category strength
- winner: Result of the strongest hand
"""

from .ranking import rank_hands, winner

__all__ = [
    "rank_hands",
    "winner",
]
