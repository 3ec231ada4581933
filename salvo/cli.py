"""Command-line host: watch one salvo game or simulate a batch of them."""

import argparse
import logging
import random
import sys
from collections import Counter

from tqdm import tqdm

from salvo import config
from salvo.errors import BattleshipError
from salvo.game import Game
from salvo.render import player_view, scoreboard


def build_parser():
    parser = argparse.ArgumentParser(
        prog="salvo",
        description="Simulate a multi-player Battleship game with random targeting.",
    )
    parser.add_argument("names", nargs="*", help="Player names (two default players if omitted)")
    parser.add_argument("--width", type=int, default=config.DEFAULT_DIMENSIONS[0], help="Grid width")
    parser.add_argument("--height", type=int, default=config.DEFAULT_DIMENSIONS[1], help="Grid height")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible game")
    parser.add_argument("--games", type=int, default=1, help=f"Games to simulate (e.g. {config.NUM_GAMES})")
    parser.add_argument("--show-grids", action="store_true", help="Print every home grid after a single game")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every strike")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    return parser


def new_game(names, dimensions, rng):
    specs = [{"name": name, "dimensions": dimensions} for name in names] or [
        {"dimensions": dimensions},
        {"dimensions": dimensions},
    ]
    return Game(*specs, rng=rng)


def play_one(names, dimensions, rng, show_grids=False):
    game = new_game(names, dimensions, rng)
    winner = game.play()

    print(f"\n🏁 Game over after {game.rounds} rounds ({game.strikes} strikes). Winner: {winner.name}\n")
    print(scoreboard(game.players))
    if show_grids:
        for player in game.players:
            print(f"\n{player.name}'s fleet:")
            print(player_view(player))
    return game


def run_batch(names, dimensions, rng, num_games):
    wins = Counter()
    total_rounds = 0
    for _ in tqdm(range(num_games), desc="Simulating", ncols=80):
        game = new_game(names, dimensions, rng)
        wins[game.play().name] += 1
        total_rounds += game.rounds

    print(f"\n✅ Batch complete: {num_games} games, {total_rounds / num_games:.1f} rounds on average\n")
    width = max(len(name) for name in wins)
    for name, count in wins.most_common():
        print(f"{name:<{width}}  {count:>6} wins  ({100.0 * count / num_games:.1f}%)")
    return wins


def main(argv=None):
    args = build_parser().parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet or args.games > 1:
        level = logging.WARNING
    config.configure_logging(level)

    if args.games < 1:
        print("salvo: --games must be at least 1", file=sys.stderr)
        return 2

    rng = random.Random(args.seed)
    dimensions = (args.width, args.height)
    try:
        if args.games == 1:
            play_one(args.names, dimensions, rng, show_grids=args.show_grids)
        else:
            run_batch(args.names, dimensions, rng, args.games)
    except BattleshipError as exc:
        print(f"salvo: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
