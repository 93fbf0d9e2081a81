"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    """Card suits."""
    CLUBS = 'c'
    DIAMONDS = 'd'
    HEARTS = 'h'
    SPADES = 's'

    def __str__(self) -> str:
        return self.value

    @property
    def full_name(self) -> str:
        return self.name.capitalize()


class Rank(Enum):
    """
    Card ranks, ordered Two (lowest) through Ace (highest).

    The Ace is only ever treated as low by the straight detector when it
    checks for the wheel (A-2-3-4-5); everywhere else it is the top rank.
    """
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    TEN = 'T'
    JACK = 'J'
    QUEEN = 'Q'
    KING = 'K'
    ACE = 'A'

    def __str__(self) -> str:
        return self.value

    @property
    def ordinal(self) -> int:
        """Numeric value of the rank, 2 for Two up to 14 for Ace."""
        return _RANK_ORDINALS[self]

    @property
    def full_name(self) -> str:
        return self.name.capitalize()

    @property
    def plural_name(self) -> str:
        if self is Rank.SIX:
            return "Sixes"
        return f"{self.full_name}s"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.ordinal < other.ordinal

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.ordinal <= other.ordinal

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.ordinal > other.ordinal

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.ordinal >= other.ordinal


_RANK_ORDINALS = {rank: value for value, rank in enumerate(Rank, start=2)}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Cards are immutable values: equality and hashing use both rank and suit,
    while ordering compares rank only since suit never breaks a tie.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (clubs, diamonds, hearts, spades)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank}{self.suit}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank

    @property
    def full_name(self) -> str:
        """Long form such as 'King of Hearts'."""
        return f"{self.rank.full_name} of {self.suit.full_name}"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' for Ace of spades

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) != 2:
            raise ValueError(f"Invalid card string: {card_str}")

        rank_str, suit_str = card_str[0], card_str[1]

        try:
            rank = Rank(rank_str.upper())
            suit = Suit(suit_str.lower())
        except ValueError:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(rank=rank, suit=suit)
