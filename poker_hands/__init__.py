"""Poker Hands - five-card poker hand classification and ranking.

Classifies a five-card hand into one of the ten standard categories and
orders a collection of hands from strongest to weakest.
"""

__version__ = "0.1.0"

from poker_hands.utils.seeding import set_seed

__all__ = ["__version__", "set_seed"]
