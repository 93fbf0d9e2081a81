"""Common types for poker evaluation."""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from holdem_showdown.core.card import Card, Rank
from holdem_showdown.evaluation.constants import HAND_SIZE


class HandCategory(Enum):
    """The nine standard hand categories, weakest first."""
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def display_name(self) -> str:
        """Name as shown to players, e.g. 'Full House'."""
        return _DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.PAIR: "Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
}


@dataclass(frozen=True)
class EvaluatedHand:
    """
    The best five cards found for a player and the category they make.

    Attributes:
        category: Hand category
        cards: Exactly five cards ordered by significance; matched groups
               come first, then kickers from high to low
    """
    category: HandCategory
    cards: Tuple[Card, ...]

    def __post_init__(self):
        # Accept any sequence but store a tuple so the value stays immutable
        object.__setattr__(self, 'cards', tuple(self.cards))
        if len(self.cards) != HAND_SIZE:
            raise ValueError(
                f"An evaluated hand holds exactly {HAND_SIZE} cards, got {len(self.cards)}"
            )

    @property
    def ranks(self) -> Tuple[Rank, ...]:
        """Ranks of the five cards in significance order."""
        return tuple(card.rank for card in self.cards)

    def __str__(self) -> str:
        return f"{self.category}: {''.join(f'[{card}]' for card in self.cards)}"
