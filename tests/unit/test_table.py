"""Tests for players and the board."""
import pytest

from holdem_showdown.core.card import Card, Rank, Suit
from holdem_showdown.core.hand import parse_cards
from holdem_showdown.game.board import Board
from holdem_showdown.game.player import Player


@pytest.fixture
def board():
    board = Board()
    board.add_cards(parse_cards("AhKdQc"))
    return board


def test_board_streets(board):
    assert [str(c) for c in board.flop] == ["Ah", "Kd", "Qc"]
    assert board.turn == []
    assert board.river == []

    board.add_card(Card(Rank.JACK, Suit.SPADES))
    board.add_card(Card(Rank.TWO, Suit.HEARTS))
    assert board.turn == [Card(Rank.JACK, Suit.SPADES)]
    assert board.river == [Card(Rank.TWO, Suit.HEARTS)]
    assert board.size == 5
    assert str(board) == "[Ah][Kd][Qc][Js][2h]"


def test_board_clear(board):
    board.clear_cards()
    assert board.size == 0
    assert board.get_cards() == []


def test_board_get_cards_is_copy(board):
    cards = board.get_cards()
    cards.clear()
    assert board.size == 3


def test_player_cards():
    player = Player(id="p1", name="Nick")
    player.add_card(Card(Rank.ACE, Suit.SPADES))
    player.add_card(Card(Rank.KING, Suit.DIAMONDS))

    assert player.cards == [Card(Rank.ACE, Suit.SPADES), Card(Rank.KING, Suit.DIAMONDS)]
    assert str(player) == "[As][Kd]"

    player.cards.clear()
    assert player.hand.size == 2

    player.clear_hand()
    assert player.cards == []


def test_players_do_not_share_hands():
    nick = Player(id="p1", name="Nick")
    frank = Player(id="p2", name="Frank")
    nick.add_card(Card(Rank.ACE, Suit.SPADES))
    assert frank.cards == []


def test_player_identity_by_id():
    assert Player(id="p1", name="Nick") == Player(id="p1", name="Nicholas")
    assert Player(id="p1", name="Nick") != Player(id="p2", name="Nick")
    assert len({Player(id="p1", name="Nick"), Player(id="p1", name="Nick")}) == 1
