"""Tests for card module."""
import pytest
from holdem_showdown.core.card import Card, Rank, Suit


def test_card_creation():
    """Test basic card creation."""
    card = Card(Rank.ACE, Suit.SPADES)
    assert card.rank == Rank.ACE
    assert card.suit == Suit.SPADES


def test_card_string_representation():
    """Test string conversion of cards."""
    assert str(Card(Rank.ACE, Suit.SPADES)) == "As"
    assert str(Card(Rank.TEN, Suit.HEARTS)) == "Th"
    assert Card(Rank.KING, Suit.HEARTS).full_name == "King of Hearts"


def test_card_equality():
    """Test card equality comparison."""
    card1 = Card(Rank.ACE, Suit.SPADES)
    card2 = Card(Rank.ACE, Suit.SPADES)
    card3 = Card(Rank.ACE, Suit.HEARTS)

    assert card1 == card2
    assert hash(card1) == hash(card2)
    assert card1 != card3  # Different suits are not equal
    assert card1 != "As"  # Different types are not equal


def test_card_is_immutable():
    """Cards cannot be changed once created."""
    card = Card(Rank.ACE, Suit.SPADES)
    with pytest.raises(AttributeError):
        card.rank = Rank.KING


def test_card_ordering_uses_rank_only():
    """Ordering compares rank; suit never breaks a tie."""
    assert Card(Rank.TWO, Suit.SPADES) < Card(Rank.THREE, Suit.CLUBS)
    assert Card(Rank.ACE, Suit.CLUBS) > Card(Rank.KING, Suit.SPADES)

    ace_spades = Card(Rank.ACE, Suit.SPADES)
    ace_clubs = Card(Rank.ACE, Suit.CLUBS)
    assert not ace_spades < ace_clubs
    assert not ace_clubs < ace_spades


def test_card_non_strict_ordering():
    """<= and >= also compare rank only."""
    ace_spades = Card(Rank.ACE, Suit.SPADES)
    ace_clubs = Card(Rank.ACE, Suit.CLUBS)
    two_hearts = Card(Rank.TWO, Suit.HEARTS)

    assert ace_spades <= ace_clubs
    assert ace_spades >= ace_clubs
    assert two_hearts <= ace_spades
    assert not two_hearts >= ace_spades
    assert max([two_hearts, ace_clubs]) == ace_clubs


def test_rank_ordering():
    """Ranks run from Two up to Ace."""
    ranks = list(Rank)
    assert ranks[0] == Rank.TWO
    assert ranks[-1] == Rank.ACE
    assert sorted(reversed(ranks)) == ranks
    assert Rank.TWO.ordinal == 2
    assert Rank.ACE.ordinal == 14
    assert Rank.ACE > Rank.KING
    assert Rank.TWO <= Rank.TWO


@pytest.mark.parametrize("rank,full_name,plural_name", [
    (Rank.ACE, "Ace", "Aces"),
    (Rank.SIX, "Six", "Sixes"),
    (Rank.TEN, "Ten", "Tens"),
])
def test_rank_names(rank, full_name, plural_name):
    assert rank.full_name == full_name
    assert rank.plural_name == plural_name


@pytest.mark.parametrize("card_str,expected_rank,expected_suit", [
    ("As", Rank.ACE, Suit.SPADES),
    ("2h", Rank.TWO, Suit.HEARTS),
    ("Td", Rank.TEN, Suit.DIAMONDS),
    ("Kc", Rank.KING, Suit.CLUBS),
])
def test_card_from_string(card_str, expected_rank, expected_suit):
    """Test creating cards from string representation."""
    card = Card.from_string(card_str)
    assert card.rank == expected_rank
    assert card.suit == expected_suit


@pytest.mark.parametrize("invalid_str", [
    "",           # Empty string
    "A",          # Missing suit
    "AsH",        # Too long
    "Xx",         # Invalid rank
    "Ax",         # Invalid suit
    "*j",         # No jokers in this deck
])
def test_card_from_string_invalid(invalid_str):
    """Test error handling for invalid card strings."""
    with pytest.raises(ValueError):
        Card.from_string(invalid_str)


@pytest.mark.parametrize("card_str", ["as", "AS", "As", "aS"])
def test_card_from_string_case_insensitivity(card_str):
    """Test that from_string is case-insensitive."""
    card = Card.from_string(card_str)
    assert card.rank == Rank.ACE
    assert card.suit == Suit.SPADES
