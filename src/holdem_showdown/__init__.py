"""Poker showdown engine package."""

from holdem_showdown.config.loader import DealStep, RoundRules
from holdem_showdown.core.card import Card, Rank, Suit
from holdem_showdown.core.containers import CardContainer
from holdem_showdown.core.deck import Deck
from holdem_showdown.core.errors import EmptyDeckError, InsufficientCardsError, PokerEngineError
from holdem_showdown.core.hand import PlayerHand, parse_cards
from holdem_showdown.evaluation.evaluator import HandEvaluator, compare_hands, evaluate
from holdem_showdown.evaluation.types import EvaluatedHand, HandCategory
from holdem_showdown.game.board import Board
from holdem_showdown.game.game_result import HandResult, RoundResult
from holdem_showdown.game.player import Player
from holdem_showdown.game.round import PokerRound

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "CardContainer",
    "Deck",
    "PlayerHand",
    "parse_cards",
    "EmptyDeckError",
    "InsufficientCardsError",
    "PokerEngineError",
    "HandEvaluator",
    "evaluate",
    "compare_hands",
    "EvaluatedHand",
    "HandCategory",
    "Board",
    "Player",
    "PokerRound",
    "HandResult",
    "RoundResult",
    "DealStep",
    "RoundRules",
]
