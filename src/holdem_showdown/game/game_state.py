from enum import Enum


class RoundState(Enum):
    """Phases of a showdown round, in the only order they may occur."""
    IDLE = "idle"  # Nothing dealt yet
    DEALING_HOLE_CARDS = "dealing_hole_cards"  # Private cards going out
    DEALING_BOARD = "dealing_board"  # Flop, turn and river going out
    COMPLETE = "complete"  # Hands evaluated, winner known
