import logging
import random
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from holdem_showdown.config.loader import RoundRules, available_rules
from holdem_showdown.core.deck import Deck
from holdem_showdown.core.errors import PokerEngineError
from holdem_showdown.core.hand import parse_cards
from holdem_showdown.evaluation.evaluator import evaluator
from holdem_showdown.game.board import Board
from holdem_showdown.game.player import Player
from holdem_showdown.game.round import PokerRound
from .display import display_hand, display_round

logger = logging.getLogger(__name__)

DEFAULT_PLAYERS = ("Nick", "Frank")


def setup_logging(verbose: bool) -> None:
    """Set up logging for the console front end."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True
    )


def load_rules(rules_path: Optional[Path], game: Optional[str]) -> RoundRules:
    """Pick round rules from an explicit file, a bundled variant, or the default."""
    try:
        if rules_path is not None:
            return RoundRules.from_file(rules_path)
        if game is not None:
            return RoundRules.from_file(available_rules()[game])
        return RoundRules.default()
    except ValueError as e:
        raise click.ClickException(str(e))


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def cli(verbose):
    """Deal Hold'em showdown rounds and evaluate poker hands."""
    setup_logging(verbose)


@cli.command()
@click.option('--player', 'names', multiple=True, default=DEFAULT_PLAYERS, show_default=True,
              help='Player name, repeat for each player')
@click.option('--rules', 'rules_path', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Round rules JSON file')
@click.option('--game', type=click.Choice(sorted(available_rules())), help='Bundled round rules')
@click.option('--seed', type=int, help='Seed for reproducible shuffles')
@click.option('--rounds', type=click.IntRange(min=1), help='Play this many rounds without prompting')
def play(names: Tuple[str, ...], rules_path: Optional[Path], game: Optional[str],
         seed: Optional[int], rounds: Optional[int]):
    """Deal rounds and show who wins each one."""
    rules = load_rules(rules_path, game)
    players = [Player(id=f"p{i}", name=name) for i, name in enumerate(names, 1)]
    deck = Deck(rng=random.Random(seed))
    board = Board()
    poker_round = PokerRound(rules)

    played = 0
    while True:
        try:
            result = poker_round.run_round(players, deck, board)
        except (PokerEngineError, ValueError) as e:
            logger.error(f"Round failed: {e}")
            raise click.ClickException(str(e))

        display_round(players, board, result)
        played += 1

        if rounds is not None:
            if played >= rounds:
                break
        elif not click.confirm("\nRepeat?", default=False):
            break
        click.echo("\n---")


@cli.command()
@click.argument('cards', nargs=-1, required=True)
def evaluate(cards: Tuple[str, ...]):
    """Evaluate the best hand in CARDS, e.g. 'As Kd 7h 7c 2s'."""
    try:
        hand = evaluator.evaluate(parse_cards(" ".join(cards)))
    except (PokerEngineError, ValueError) as e:
        raise click.ClickException(str(e))
    display_hand(hand)


def main():
    cli()


if __name__ == '__main__':
    main()
