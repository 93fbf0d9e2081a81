"""Deck implementation."""
from typing import List, Optional
import logging
import random

from .card import Card, Rank, Suit
from .containers import CardContainer
from .errors import EmptyDeckError

logger = logging.getLogger(__name__)

DECK_SIZE = len(Suit) * len(Rank)


class Deck(CardContainer):
    """
    A standard 52-card deck.

    The top of the deck is the end of ``cards``; dealing pops from there.

    Attributes:
        cards: List of cards in the deck
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize a new deck in reset (unshuffled) order.

        Args:
            rng: Random generator used for shuffling. A fresh, OS-seeded
                 generator is created when omitted; pass a seeded one for
                 reproducible shuffles.
        """
        self.rng = rng if rng is not None else random.Random()
        self.cards: List[Card] = []
        self.reset()

    def reset(self) -> None:
        """Repopulate the deck with every suit/rank pair exactly once."""
        self.cards = [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]

    def shuffle(self) -> None:
        """Shuffle the remaining cards in place (Fisher-Yates)."""
        self.rng.shuffle(self.cards)

    def deal_card(self) -> Card:
        """
        Deal a single card from the top of the deck.

        Returns:
            The dealt card

        Raises:
            EmptyDeckError: If the deck has no cards left
        """
        if not self.cards:
            raise EmptyDeckError(requested=1, remaining=0)
        return self.cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        """
        Deal multiple cards from the top of the deck.

        Args:
            count: Number of cards to deal

        Returns:
            The dealt cards, in deal order

        Raises:
            ValueError: If count is negative
            EmptyDeckError: If fewer than count cards remain; nothing is dealt
        """
        if count < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {count}")
        if count > len(self.cards):
            raise EmptyDeckError(requested=count, remaining=len(self.cards))
        return [self.cards.pop() for _ in range(count)]

    # CardContainer implementation
    def add_card(self, card: Card) -> None:
        """Add a card to the top of the deck."""
        self.cards.append(card)

    def add_cards(self, cards: List[Card]) -> None:
        """Add multiple cards to the top of the deck."""
        self.cards.extend(cards)

    def get_cards(self) -> List[Card]:
        """Get all cards in the deck, bottom first."""
        return self.cards.copy()

    def clear(self) -> None:
        """Remove all cards from the deck."""
        self.cards.clear()

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)
