"""Community cards shared by every player."""
from typing import List

from holdem_showdown.core.card import Card
from holdem_showdown.core.containers import CardContainer


class Board(CardContainer):
    """
    The community cards, in the order they were dealt.

    Attributes:
        cards: List of board cards
    """

    FLOP_SIZE = 3

    def __init__(self):
        self.cards: List[Card] = []

    @property
    def flop(self) -> List[Card]:
        return self.cards[:self.FLOP_SIZE]

    @property
    def turn(self) -> List[Card]:
        return self.cards[self.FLOP_SIZE:self.FLOP_SIZE + 1]

    @property
    def river(self) -> List[Card]:
        return self.cards[self.FLOP_SIZE + 1:self.FLOP_SIZE + 2]

    def clear_cards(self) -> None:
        """Remove all cards from the board between rounds."""
        self.clear()

    # CardContainer implementation
    def add_card(self, card: Card) -> None:
        """Add a card to the board."""
        self.cards.append(card)

    def add_cards(self, cards: List[Card]) -> None:
        """Add multiple cards to the board."""
        self.cards.extend(cards)

    def get_cards(self) -> List[Card]:
        """Get all board cards."""
        return self.cards.copy()

    def clear(self) -> None:
        """Remove all cards from the board."""
        self.cards.clear()

    @property
    def size(self) -> int:
        """Number of cards on the board."""
        return len(self.cards)
