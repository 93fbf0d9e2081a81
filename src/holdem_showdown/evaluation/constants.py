"""Constants for poker hand evaluation."""
from holdem_showdown.core.card import Rank, Suit

# Number of cards in a finished poker hand
HAND_SIZE = 5

# Suit ordering, used only to make card sorting deterministic.
# Suits never decide a comparison between hands.
SUIT_ORDER = {
    Suit.SPADES: 0,
    Suit.HEARTS: 1,
    Suit.DIAMONDS: 2,
    Suit.CLUBS: 3,
}

# Ace-low straight, listed from its top card down with the Ace last
WHEEL_RANKS = (Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, Rank.ACE)
