"""Random hand dealing.

This module provides:
- RandomHandGenerator: Seeded generator of five-card hands
- random_hand, random_hands: One-shot helpers
"""

from .random_hands import RandomHandGenerator, random_hand, random_hands

__all__ = [
    "RandomHandGenerator",
    "random_hand",
    "random_hands",
]
