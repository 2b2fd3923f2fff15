"""Exceptions raised by the card model, hand construction and card parsing."""


class PokerHandsError(Exception):
    """Base class for all poker_hands errors."""

    pass


class CardError(PokerHandsError, ValueError):
    """Raised when a card symbol is outside its domain.

    Attributes:
        symbol: The offending rank or suit symbol
    """

    def __init__(self, symbol: str, message: str):
        super().__init__(message)
        self.symbol = symbol


class InvalidRankError(CardError):
    """Raised for a rank symbol other than 2-9, T, J, Q, K, A."""

    def __init__(self, symbol: str, message: str = ""):
        super().__init__(
            symbol, message or f"Invalid rank: {symbol!r}. rank should be 2,3,4,5,6,7,8,9,T,J,Q,K,A"
        )


class InvalidSuitError(CardError):
    """Raised for a suit symbol other than S, H, D, C."""

    def __init__(self, symbol: str, message: str = ""):
        super().__init__(symbol, message or f"Invalid suit: {symbol!r}. suit should be S,H,D,C")


class HandSizeError(PokerHandsError, ValueError):
    """Raised when a hand is built from anything but exactly five cards."""

    pass


class CardStringError(PokerHandsError, ValueError):
    """Raised when a card string has the wrong shape (length, hand count)."""

    pass
