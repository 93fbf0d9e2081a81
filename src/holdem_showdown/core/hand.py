"""Hole cards held by a single player."""

import logging

from .card import Card
from .containers import CardContainer

logger = logging.getLogger(__name__)

CARD_STRING_LENGTH = 2


class PlayerHand(CardContainer):
    """
    A player's private cards for the current round.

    Cards are kept in deal order; the hand never reorders or evaluates
    them itself.

    Attributes:
        cards: Hole cards, first dealt first
    """

    def __init__(self):
        self.cards: list[Card] = []

    def add_card(self, card: Card) -> None:
        self.cards.append(card)

    def add_cards(self, cards: list[Card]) -> None:
        self.cards.extend(cards)

    def get_cards(self) -> list[Card]:
        """Copy of the hole cards in deal order."""
        return list(self.cards)

    def clear(self) -> None:
        """Return the hand to empty between rounds."""
        self.cards.clear()

    @property
    def size(self) -> int:
        return len(self.cards)

    @classmethod
    def from_string(cls, hand_str: str) -> 'PlayerHand':
        """
        Create a hand holding the cards in a string such as "AsKd".

        Raises:
            ValueError: If the string does not parse as cards
        """
        hand = cls()
        hand.add_cards(parse_cards(hand_str))
        return hand

    def __str__(self) -> str:
        if not self.cards:
            return "Empty hand"
        return "Hand: " + " ".join(str(card) for card in self.cards)


def parse_cards(card_str: str) -> list[Card]:
    """
    Parse cards written back to back, such as "AsKd7h" or "As Kd 7h".

    Args:
        card_str: Two-character cards (rank then suit); whitespace is ignored

    Returns:
        The parsed cards in the order written

    Raises:
        ValueError: If a card is malformed or one is left incomplete
    """
    compact = "".join(card_str.split())
    if len(compact) % CARD_STRING_LENGTH:
        raise ValueError(
            f"Cannot split '{card_str}' into {CARD_STRING_LENGTH}-character cards"
        )

    parsed = []
    for start in range(0, len(compact), CARD_STRING_LENGTH):
        token = compact[start:start + CARD_STRING_LENGTH]
        try:
            parsed.append(Card.from_string(token))
        except ValueError as e:
            position = start // CARD_STRING_LENGTH + 1
            raise ValueError(f"Card {position} of '{card_str}' is invalid: {e}")

    logger.debug(f"Parsed '{card_str}' as {[str(c) for c in parsed]}")
    return parsed
