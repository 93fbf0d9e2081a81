import click

from holdem_showdown.evaluation.hand_description import HandDescriber
from holdem_showdown.evaluation.types import EvaluatedHand
from holdem_showdown.game.board import Board
from holdem_showdown.game.game_result import RoundResult
from holdem_showdown.game.player import Player


def format_cards(cards) -> str:
    """Render cards as '[As][Kd]'."""
    return "".join(f"[{card}]" for card in cards)


def display_hand(hand: EvaluatedHand) -> None:
    """Display a single evaluated hand with its kickers."""
    describer = HandDescriber()
    click.echo(f"{describer.describe_hand_detailed(hand)}: {format_cards(hand.cards)}")
    kickers = describer.describe_kickers(hand)
    if kickers:
        click.echo(f"Kickers: {', '.join(rank.full_name for rank in kickers)}")


def display_round(players: list[Player], board: Board, result: RoundResult) -> None:
    """Display the dealt cards and the outcome of a round."""
    click.echo(f"\n=== {result.game} ===")
    for player in players:
        click.echo(f"{player.name}: {format_cards(player.cards)}")
    click.echo(f"Table: {format_cards(board.get_cards())}")

    click.echo("\n=== Showdown ===")
    for hand in result.hands:
        click.echo(f"{hand.player_name}: {hand.hand_description} {format_cards(hand.cards)}")

    winner = result.winner
    if result.is_tie:
        names = " and ".join(hand.player_name for hand in result.winning_hands)
        click.echo(f"Tie: {names} ({winner.hand_name}), {winner.player_name} declared winner")
    elif winner is not None:
        click.echo(f"Winner: {winner.player_name} ({winner.hand_name})")
