"""Exceptions raised by the poker engine."""


class PokerEngineError(Exception):
    """Base class for errors raised by the engine."""
    pass


class EmptyDeckError(PokerEngineError):
    """Raised when more cards are dealt than the deck holds."""

    def __init__(self, requested: int = 1, remaining: int = 0):
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"Cannot deal {requested} card(s), {remaining} left in deck"
        )


class InsufficientCardsError(PokerEngineError, ValueError):
    """Raised when a hand is evaluated from fewer than five cards."""

    def __init__(self, provided: int, required: int = 5):
        self.provided = provided
        self.required = required
        super().__init__(
            f"Hand evaluation requires at least {required} cards, got {provided}"
        )
