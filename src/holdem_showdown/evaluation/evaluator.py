"""Main poker hand evaluation interface."""
from typing import Callable, Dict, Iterable, List, Optional, Tuple
import logging

from holdem_showdown.core.card import Card, Rank, Suit
from holdem_showdown.core.errors import InsufficientCardsError
from holdem_showdown.evaluation.constants import HAND_SIZE, SUIT_ORDER, WHEEL_RANKS
from holdem_showdown.evaluation.types import EvaluatedHand, HandCategory

logger = logging.getLogger(__name__)

Detector = Callable[[List[Card]], Optional[EvaluatedHand]]


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards from highest to lowest rank, suit order breaking ties."""
    return sorted(cards, key=lambda c: (-c.rank.ordinal, SUIT_ORDER[c.suit]))


def _group_by_rank(ordered: List[Card]) -> List[List[Card]]:
    """Group sorted cards by rank; groups come out highest rank first."""
    groups: Dict[Rank, List[Card]] = {}
    for card in ordered:
        groups.setdefault(card.rank, []).append(card)
    return list(groups.values())


def _group_by_suit(ordered: List[Card]) -> Dict[Suit, List[Card]]:
    groups: Dict[Suit, List[Card]] = {}
    for card in ordered:
        groups.setdefault(card.suit, []).append(card)
    return groups


def _ordinals(cards: Iterable[Card]) -> Tuple[int, ...]:
    return tuple(card.rank.ordinal for card in cards)


def _with_kickers(committed: List[Card], ordered: List[Card]) -> List[Card]:
    """Fill a partial hand up to five cards with the best unused cards."""
    remaining = [card for card in ordered if card not in committed]
    return committed + remaining[:HAND_SIZE - len(committed)]


def find_straight(ordered: List[Card]) -> Optional[List[Card]]:
    """
    Find the highest five-card straight among sorted cards.

    Windows of distinct ranks are scanned from the top down with the Ace
    high. Only when no such window exists is the wheel (A-2-3-4-5) tried,
    with the Ace playing low and listed last.

    Args:
        ordered: Cards sorted highest rank first

    Returns:
        The five straight cards, top card first, or None
    """
    by_rank: Dict[Rank, Card] = {}
    for card in ordered:
        by_rank.setdefault(card.rank, card)

    ranks = list(by_rank)
    for start in range(len(ranks) - HAND_SIZE + 1):
        window = ranks[start:start + HAND_SIZE]
        if window[0].ordinal - window[-1].ordinal == HAND_SIZE - 1:
            return [by_rank[rank] for rank in window]

    if all(rank in by_rank for rank in WHEEL_RANKS):
        return [by_rank[rank] for rank in WHEEL_RANKS]
    return None


def hand_sort_key(hand: EvaluatedHand) -> Tuple[int, Tuple[int, ...]]:
    """Key ordering hands the same way as compare_hands."""
    return hand.category.value, _ordinals(hand.cards)


class HandEvaluator:
    """
    Finds the best five-card hand in a set of cards and compares results.

    Detectors run strongest category first and the first match wins, so a
    hand that is both a straight and a flush is always reported as a
    straight flush.
    """

    def __init__(self):
        """Initialize evaluator."""
        self._detectors: List[Detector] = [
            self._straight_flush,
            self._four_of_a_kind,
            self._full_house,
            self._flush,
            self._straight,
            self._three_of_a_kind,
            self._two_pair,
            self._pair,
            self._high_card,
        ]

    def evaluate(self, cards: Iterable[Card]) -> EvaluatedHand:
        """
        Evaluate the best poker hand available from the given cards.

        Args:
            cards: Candidate cards, typically hole cards plus the board

        Returns:
            The strongest EvaluatedHand obtainable from the cards

        Raises:
            InsufficientCardsError: If fewer than five cards are supplied
            ValueError: If the same card appears more than once
        """
        candidates = list(cards)
        if len(candidates) < HAND_SIZE:
            raise InsufficientCardsError(provided=len(candidates), required=HAND_SIZE)
        if len(set(candidates)) != len(candidates):
            raise ValueError(f"Duplicate cards in {[str(c) for c in candidates]}")

        ordered = sort_cards(candidates)
        for detector in self._detectors:
            hand = detector(ordered)
            if hand is not None:
                logger.debug(f"Evaluated {[str(c) for c in ordered]} as {hand}")
                return hand

        # High card always matches
        raise AssertionError(f"No hand found for {[str(c) for c in ordered]}")

    def compare_hands(self, hand1: EvaluatedHand, hand2: EvaluatedHand) -> int:
        """
        Compare two evaluated hands.

        Categories are compared first; within a category the five cards are
        compared position by position in their stored significance order.

        Returns:
            1 if hand1 wins, -1 if hand2 wins, 0 if tie
        """
        if hand1.category != hand2.category:
            return 1 if hand1.category.value > hand2.category.value else -1

        for rank1, rank2 in zip(_ordinals(hand1.cards), _ordinals(hand2.cards)):
            if rank1 != rank2:
                return 1 if rank1 > rank2 else -1

        return 0  # Tie

    # Detectors, each taking cards sorted highest first

    def _straight_flush(self, ordered: List[Card]) -> Optional[EvaluatedHand]:
        straights = []
        for suited in _group_by_suit(ordered).values():
            if len(suited) >= HAND_SIZE:
                straight = find_straight(suited)
                if straight:
                    straights.append(straight)
        if not straights:
            return None
        return EvaluatedHand(HandCategory.STRAIGHT_FLUSH, max(straights, key=_ordinals))

    def _four_of_a_kind(self, ordered: List[Card]) -> Optional[EvaluatedHand]:
        quads = [group for group in _group_by_rank(ordered) if len(group) == 4]
        if not quads:
            return None
        return EvaluatedHand(HandCategory.FOUR_OF_A_KIND, _with_kickers(quads[0], ordered))

    def _full_house(self, ordered: List[Card]) -> Optional[EvaluatedHand]:
        groups = _group_by_rank(ordered)
        trips = [group for group in groups if len(group) >= 3]
        if not trips:
            return None
        pairs = [group for group in groups if group is not trips[0] and len(group) >= 2]
        if not pairs:
            return None
        return EvaluatedHand(HandCategory.FULL_HOUSE, trips[0][:3] + pairs[0][:2])

    def _flush(self, ordered: List[Card]) -> Optional[EvaluatedHand]:
        flushes = [
            suited[:HAND_SIZE]
            for suited in _group_by_suit(ordered).values()
            if len(suited) >= HAND_SIZE
        ]
        if not flushes:
            return None
        return EvaluatedHand(HandCategory.FLUSH, max(flushes, key=_ordinals))

    def _straight(self, ordered: List[Card]) -> Optional[EvaluatedHand]:
        straight = find_straight(ordered)
        if straight is None:
            return None
        return EvaluatedHand(HandCategory.STRAIGHT, straight)

    def _three_of_a_kind(self, ordered: List[Card]) -> Optional[EvaluatedHand]:
        trips = [group for group in _group_by_rank(ordered) if len(group) == 3]
        if not trips:
            return None
        return EvaluatedHand(HandCategory.THREE_OF_A_KIND, _with_kickers(trips[0], ordered))

    def _two_pair(self, ordered: List[Card]) -> Optional[EvaluatedHand]:
        pairs = [group for group in _group_by_rank(ordered) if len(group) == 2]
        if len(pairs) < 2:
            return None
        return EvaluatedHand(HandCategory.TWO_PAIR, _with_kickers(pairs[0] + pairs[1], ordered))

    def _pair(self, ordered: List[Card]) -> Optional[EvaluatedHand]:
        pairs = [group for group in _group_by_rank(ordered) if len(group) == 2]
        if not pairs:
            return None
        return EvaluatedHand(HandCategory.PAIR, _with_kickers(pairs[0], ordered))

    def _high_card(self, ordered: List[Card]) -> Optional[EvaluatedHand]:
        return EvaluatedHand(HandCategory.HIGH_CARD, ordered[:HAND_SIZE])


# Global evaluator instance
evaluator = HandEvaluator()


def evaluate(cards: Iterable[Card]) -> EvaluatedHand:
    """Evaluate cards with the shared evaluator."""
    return evaluator.evaluate(cards)


def compare_hands(hand1: EvaluatedHand, hand2: EvaluatedHand) -> int:
    """Compare two hands with the shared evaluator."""
    return evaluator.compare_hands(hand1, hand2)
