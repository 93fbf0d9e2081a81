"""Round configuration loading and parsing."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import json
from pathlib import Path

import jsonschema

from holdem_showdown.core.deck import DECK_SIZE
from holdem_showdown.evaluation.constants import HAND_SIZE

import logging
logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).parent
SCHEMA_PATH = CONFIG_DIR / 'schemas' / 'round.json'
ROUNDS_DIR = CONFIG_DIR / 'rounds'
DEFAULT_ROUND_FILE = ROUNDS_DIR / 'texas_holdem.json'

_schema_cache: Dict[str, Any] = {}


def load_schema() -> Dict[str, Any]:
    """Load the JSON schema for round configurations."""
    if 'round' not in _schema_cache:
        with open(SCHEMA_PATH) as f:
            _schema_cache['round'] = json.load(f)
    return _schema_cache['round']


@dataclass
class DealStep:
    """A named batch of community cards, e.g. the flop."""
    name: str
    cards: int


@dataclass
class RoundRules:
    """
    Dealing rules for a showdown round.

    Attributes:
        game: Display name of the variant
        min_players: Fewest players a round may be dealt to
        max_players: Most players a round may be dealt to
        hole_cards: Private cards dealt to each player
        board: Community card streets in deal order
    """
    game: str
    min_players: int
    max_players: int
    hole_cards: int
    board: List[DealStep] = field(default_factory=list)

    @property
    def board_cards(self) -> int:
        """Total community cards dealt over all streets."""
        return sum(step.cards for step in self.board)

    def cards_needed(self, num_players: int) -> int:
        """Cards a full round consumes for the given number of players."""
        return num_players * self.hole_cards + self.board_cards

    def validate_player_count(self, num_players: int) -> None:
        """
        Check that a round can be dealt to this many players.

        Raises:
            ValueError: If the count is outside the configured bounds
        """
        if num_players < self.min_players:
            raise ValueError(
                f"{self.game} needs at least {self.min_players} players, got {num_players}"
            )
        if num_players > self.max_players:
            raise ValueError(
                f"{self.game} allows at most {self.max_players} players, got {num_players}"
            )

    @classmethod
    def default(cls) -> 'RoundRules':
        """Standard Texas Hold'em dealing rules."""
        return cls.from_file(DEFAULT_ROUND_FILE)

    @classmethod
    def from_file(cls, filepath: Path) -> 'RoundRules':
        """
        Load RoundRules from a JSON file.

        Args:
            filepath: Path to JSON configuration file

        Returns:
            RoundRules instance
        """
        logger.debug(f"Loading round rules from {filepath}")
        with open(filepath, 'r') as f:
            return cls.from_json(f.read())

    @classmethod
    def from_json(cls, json_str: str) -> 'RoundRules':
        """
        Create RoundRules from JSON string.

        Args:
            json_str: JSON string defining round rules

        Returns:
            RoundRules instance

        Raises:
            ValueError: If JSON is invalid, fails schema validation, or
                        describes a round that cannot be dealt
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")

        try:
            jsonschema.validate(instance=data, schema=load_schema())
        except jsonschema.exceptions.ValidationError as e:
            raise ValueError(f"Invalid round rules: {e.message}")

        rules = cls(
            game=data['game'],
            min_players=data['players']['min'],
            max_players=data['players']['max'],
            hole_cards=data['holeCards'],
            board=[DealStep(name=step['name'], cards=step['cards']) for step in data['board']],
        )
        rules._validate()
        return rules

    def _validate(self) -> None:
        if self.min_players > self.max_players:
            raise ValueError(
                f"Minimum players ({self.min_players}) exceeds maximum ({self.max_players})"
            )
        if self.hole_cards + self.board_cards < HAND_SIZE:
            raise ValueError(
                f"Players see {self.hole_cards + self.board_cards} cards, "
                f"at least {HAND_SIZE} are needed to make a hand"
            )
        needed = self.cards_needed(self.max_players)
        if needed > DECK_SIZE:
            raise ValueError(
                f"{self.max_players} players need {needed} cards, deck has {DECK_SIZE}"
            )

    def to_json(self) -> Dict[str, Any]:
        """Convert to the JSON-compatible layout read by from_json."""
        return {
            'game': self.game,
            'players': {'min': self.min_players, 'max': self.max_players},
            'holeCards': self.hole_cards,
            'board': [{'name': step.name, 'cards': step.cards} for step in self.board],
        }


def available_rules(rounds_dir: Optional[Path] = None) -> Dict[str, Path]:
    """Map bundled rule file stems (e.g. 'texas_holdem') to their paths."""
    directory = rounds_dir or ROUNDS_DIR
    return {path.stem: path for path in sorted(directory.glob('*.json'))}
