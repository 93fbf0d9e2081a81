import json
from dataclasses import dataclass, field
from typing import Optional

from holdem_showdown.core.card import Card
from holdem_showdown.evaluation.types import EvaluatedHand


@dataclass
class HandResult:
    """Information about a player's hand and its evaluation."""

    player_id: str
    player_name: str
    hole_cards: list[Card]
    hand: EvaluatedHand
    hand_name: str  # e.g., "Full House"
    hand_description: str  # e.g., "Full House, Aces over Kings"

    @property
    def cards(self) -> list[Card]:
        """The five cards making up the best hand."""
        return list(self.hand.cards)

    def __str__(self) -> str:
        """String representation of the hand result."""
        cards_str = ", ".join(str(card) for card in self.cards)
        return f"{self.player_name}: {self.hand_description} ({cards_str})"

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "player_id": self.player_id,
            "player_name": self.player_name,
            "hole_cards": [str(card) for card in self.hole_cards],
            "cards": [str(card) for card in self.cards],
            "hand_name": self.hand_name,
            "hand_description": self.hand_description,
            "category": self.hand.category.value,
        }


@dataclass
class RoundResult:
    """
    Complete results of a showdown round.

    Attributes:
        game: Name of the variant played
        hands: Hand results in player order
        board: Community cards
        winners: Ids of every player holding the best hand, in player order
    """

    game: str
    hands: list[HandResult]
    board: list[Card] = field(default_factory=list)
    winners: list[str] = field(default_factory=list)

    @property
    def winner(self) -> Optional[HandResult]:
        """
        The declared winner.

        When several hands tie for best, the first of them in player order
        is declared; use ``winners`` or ``is_tie`` to detect that case.
        """
        if not self.winners:
            return None
        return self.hand_for(self.winners[0])

    @property
    def is_tie(self) -> bool:
        return len(self.winners) > 1

    @property
    def winning_hands(self) -> list[HandResult]:
        return [hand for hand in self.hands if hand.player_id in self.winners]

    def hand_for(self, player_id: str) -> HandResult:
        """
        Get the hand result for a player.

        Raises:
            KeyError: If the player was not part of the round
        """
        for hand in self.hands:
            if hand.player_id == player_id:
                return hand
        raise KeyError(player_id)

    def __str__(self) -> str:
        """String representation of the round result."""
        lines = [f"{self.game} showdown"]
        lines.append(f"Board: {' '.join(str(card) for card in self.board)}")
        for hand in self.hands:
            lines.append(f"- {hand}")
        if self.is_tie:
            names = ", ".join(hand.player_name for hand in self.winning_hands)
            lines.append(f"Tie between {names} ({self.winner.hand_description})")
        elif self.winner:
            lines.append(f"Winner: {self.winner.player_name} ({self.winner.hand_name})")
        return "\n".join(lines)

    def to_json(self) -> str:
        """Convert to JSON string."""
        result_dict = {
            "game": self.game,
            "board": [str(card) for card in self.board],
            "hands": [hand.to_json() for hand in self.hands],
            "winners": self.winners,
            "winner": self.winners[0] if self.winners else None,
            "is_tie": self.is_tie,
        }
        return json.dumps(result_dict, indent=2)
