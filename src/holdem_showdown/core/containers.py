"""Interfaces and implementations for card containers."""

from abc import ABC, abstractmethod

from .card import Card


class CardContainer(ABC):
    """Interface for any collection of cards (deck, hand, board)."""

    @abstractmethod
    def add_card(self, card: Card) -> None:
        """Add a single card to the container."""
        pass

    @abstractmethod
    def add_cards(self, cards: list[Card]) -> None:
        """Add multiple cards to the container."""
        pass

    @abstractmethod
    def get_cards(self) -> list[Card]:
        """Get a copy of all cards in the container, in order."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all cards from the container."""
        pass

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of cards in the container."""
        pass

    def __str__(self) -> str:
        return "".join(f"[{card}]" for card in self.get_cards())
