from dataclasses import dataclass, field

from holdem_showdown.core.card import Card
from holdem_showdown.core.hand import PlayerHand


@dataclass
class Player:
    """
    Represents a player at the table.

    Attributes:
        id: Unique identifier for the player
        name: Display name
        hand: Current hole cards
    """

    id: str
    name: str
    hand: PlayerHand = field(default_factory=PlayerHand)

    @property
    def cards(self) -> list[Card]:
        """Copy of the player's current hole cards."""
        return self.hand.get_cards()

    def add_card(self, card: Card) -> None:
        self.hand.add_card(card)

    def clear_hand(self) -> None:
        self.hand.clear()

    def __eq__(self, other):
        if not isinstance(other, Player):
            return False
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __str__(self) -> str:
        return "".join(f"[{card}]" for card in self.hand.cards)
