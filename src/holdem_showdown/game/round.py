"""Deals a showdown round and determines its winner."""
import logging
from typing import List, Optional, Sequence

from holdem_showdown.config.loader import RoundRules
from holdem_showdown.core.deck import Deck
from holdem_showdown.evaluation.evaluator import HandEvaluator, evaluator as default_evaluator
from holdem_showdown.evaluation.hand_description import HandDescriber
from holdem_showdown.game.board import Board
from holdem_showdown.game.game_result import HandResult, RoundResult
from holdem_showdown.game.game_state import RoundState
from holdem_showdown.game.player import Player

logger = logging.getLogger(__name__)


class PokerRound:
    """
    Runs one round: hole cards, board streets, then showdown.

    The phases only ever run in the order IDLE -> DEALING_HOLE_CARDS ->
    DEALING_BOARD -> COMPLETE. ``run_round`` drives all of them; each phase
    is also public so a caller can step through a round.

    Attributes:
        rules: Dealing rules for the round
        state: Current phase
    """

    def __init__(
        self,
        rules: Optional[RoundRules] = None,
        evaluator: Optional[HandEvaluator] = None
    ):
        """
        Initialize a round runner.

        Args:
            rules: Dealing rules (default: Texas Hold'em)
            evaluator: Hand evaluator (default: the shared instance)
        """
        self.rules = rules or RoundRules.default()
        self.evaluator = evaluator or default_evaluator
        self.describer = HandDescriber()
        self.state = RoundState.IDLE

    def run_round(self, players: Sequence[Player], deck: Deck, board: Board) -> RoundResult:
        """
        Reset, deal and evaluate a complete round.

        Args:
            players: Players in dealing order
            deck: Deck to deal from; it is reset and shuffled first
            board: Board to receive the community cards

        Returns:
            Every player's best hand and the winner(s)

        Raises:
            ValueError: If the player count is not allowed by the rules or two
                        players share an id
            EmptyDeckError: If the deck runs out while dealing
        """
        self.start_round(players, deck, board)
        self.deal_hole_cards(players, deck)
        self.deal_board(deck, board)
        return self.showdown(players, board)

    def start_round(self, players: Sequence[Player], deck: Deck, board: Board) -> None:
        """Clear last round's cards and prepare a fresh shuffled deck."""
        self.rules.validate_player_count(len(players))
        self._validate_player_ids(players)

        for player in players:
            player.clear_hand()
        board.clear_cards()
        deck.reset()
        deck.shuffle()

        self.state = RoundState.IDLE
        logger.info(f"Starting {self.rules.game} round with {[p.name for p in players]}")

    def deal_hole_cards(self, players: Sequence[Player], deck: Deck) -> None:
        """Deal hole cards one at a time around the table, one pass per card."""
        self._require_state(RoundState.IDLE, "deal hole cards")
        self.state = RoundState.DEALING_HOLE_CARDS

        for _ in range(self.rules.hole_cards):
            for player in players:
                card = deck.deal_card()
                player.add_card(card)
                logger.debug(f"Dealt {card} to {player.name}")

    def deal_board(self, deck: Deck, board: Board) -> None:
        """Deal each board street (flop, turn, river) in order."""
        self._require_state(RoundState.DEALING_HOLE_CARDS, "deal the board")
        self.state = RoundState.DEALING_BOARD

        for step in self.rules.board:
            cards = [deck.deal_card() for _ in range(step.cards)]
            board.add_cards(cards)
            logger.debug(f"{step.name}: {' '.join(str(c) for c in cards)}")

    def showdown(self, players: Sequence[Player], board: Board) -> RoundResult:
        """
        Evaluate every player's best hand and find the winner(s).

        Can be called after ``deal_board`` or directly on players and a board
        whose cards were set by hand.

        Returns:
            RoundResult with all hands; ``winners`` lists every player whose
            hand ties for best, in player order
        """
        if self.state not in (RoundState.IDLE, RoundState.DEALING_BOARD):
            raise ValueError(f"Cannot run showdown while round is {self.state.value}")
        self._validate_player_ids(players)

        board_cards = board.get_cards()
        hands: List[HandResult] = []
        for player in players:
            best = self.evaluator.evaluate(player.cards + board_cards)
            hands.append(HandResult(
                player_id=player.id,
                player_name=player.name,
                hole_cards=player.cards,
                hand=best,
                hand_name=self.describer.describe_hand(best),
                hand_description=self.describer.describe_hand_detailed(best),
            ))
            logger.debug(f"{player.name} best hand: {best}")

        winners = self._find_winners(hands)
        self.state = RoundState.COMPLETE

        result = RoundResult(
            game=self.rules.game,
            hands=hands,
            board=board_cards,
            winners=[hand.player_id for hand in winners],
        )
        if result.is_tie:
            logger.info(f"Tie between {result.winners}, declaring {result.winners[0]}")
        elif result.winner:
            logger.info(f"{result.winner.player_name} wins with {result.winner.hand_description}")
        return result

    def _find_winners(self, hands: List[HandResult]) -> List[HandResult]:
        """Return every hand comparing equal to the best, in player order."""
        winners: List[HandResult] = []
        for hand in hands:
            if not winners:
                winners = [hand]
                continue
            comparison = self.evaluator.compare_hands(hand.hand, winners[0].hand)
            if comparison > 0:
                winners = [hand]
            elif comparison == 0:
                winners.append(hand)
        return winners

    def _validate_player_ids(self, players: Sequence[Player]) -> None:
        """Results refer to players by id, so ids must be unique."""
        seen = set()
        for player in players:
            if player.id in seen:
                raise ValueError(f"Duplicate player id: {player.id}")
            seen.add(player.id)

    def _require_state(self, expected: RoundState, action: str) -> None:
        if self.state != expected:
            raise ValueError(f"Cannot {action} while round is {self.state.value}")
