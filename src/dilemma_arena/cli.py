"""Terminal front end for Dilemma Arena.

Usage:
    dilemma-arena strategies
    dilemma-arena play --opponent tit_for_tat --rounds 10
    dilemma-arena play --random --seed 42
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Callable
from typing import TextIO

from dilemma_arena.engine import MatchEngine, MatchSummary, cooperation_rate
from dilemma_arena.errors import DilemmaArenaError
from dilemma_arena.parameters import DEFAULT_ROUNDS


def print_strategies(engine: MatchEngine, out: TextIO) -> None:
    """Print the strategy catalog as a table."""
    for meta in engine.list_strategies():
        rank = f"#{meta.historical_rank}" if meta.historical_rank else "-"
        print(f"{meta.id:<18} {meta.name:<20} {meta.tag_label:<10} {rank:>4}  {meta.description}", file=out)


def print_summary(summary: MatchSummary, out: TextIO) -> None:
    """Print the end-of-match report."""
    print("=" * 60, file=out)
    print(f"Opponent: {summary.strategy_name}", file=out)
    print(
        f"Result: {summary.result}  ({summary.player_score} - {summary.opponent_score})",
        file=out,
    )
    print(
        f"Mutual cooperation: {summary.mutual_coop_count}  "
        f"Mutual defection: {summary.mutual_defect_count}  "
        f"Betrayed: {summary.betrayed_count}  "
        f"Betrayals: {summary.betrayal_count}",
        file=out,
    )
    if summary.history:
        coop = cooperation_rate(summary.history)
        print(f"Your cooperation rate: {coop * 100:.0f}%", file=out)
    print("-" * 60, file=out)
    for entry in summary.leaderboard:
        marker = "  <--" if entry.is_player else ""
        print(f"{entry.rank:>3}. {entry.name:<20} {entry.score:>5}{marker}", file=out)
    print("=" * 60, file=out)


def play_match(
    engine: MatchEngine,
    opponent: str | None,
    rounds: int,
    random_mode: bool,
    input_fn: Callable[[str], str] = input,
    out: TextIO = sys.stdout,
) -> MatchSummary:
    """Play a match interactively, prompting for a move each round."""
    started = engine.start_match(opponent, rounds, random_mode)
    print(f"Opponent: {started.strategy_name}  Rounds: {started.total_rounds}", file=out)

    finished = False
    while not finished:
        raw = input_fn("Your move [C/D]: ")
        try:
            result = engine.play_round(started.session_id, raw)
        except ValueError as e:
            print(str(e), file=out)
            continue
        print(
            f"Round {result.round_number}/{result.total_rounds}: "
            f"{result.outcome}  +{result.player_points}/+{result.opponent_points}  "
            f"score {result.player_score}-{result.opponent_score}",
            file=out,
        )
        finished = result.finished

    summary = engine.get_summary(started.session_id)
    engine.cleanup_session(started.session_id)
    return summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dilemma-arena",
        description="Play the iterated Prisoner's Dilemma against Axelrod's tournament strategies.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("strategies", help="List available strategies")

    play = subparsers.add_parser("play", help="Play a match")
    opponent = play.add_mutually_exclusive_group()
    opponent.add_argument(
        "--opponent",
        type=str,
        default="tit_for_tat",
        help="Strategy id to face (default: tit_for_tat)",
    )
    opponent.add_argument(
        "--random",
        action="store_true",
        help="Face a hidden, randomly drawn strategy",
    )
    play.add_argument(
        "--rounds",
        type=int,
        default=DEFAULT_ROUNDS,
        help=f"Number of rounds, 5-500 (default: {DEFAULT_ROUNDS})",
    )
    play.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (optional)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the `dilemma-arena` command."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed) if getattr(args, "seed", None) is not None else None
    engine = MatchEngine(rng=rng)

    if args.command == "strategies":
        print_strategies(engine, sys.stdout)
        return 0

    try:
        summary = play_match(engine, args.opponent, args.rounds, args.random)
    except DilemmaArenaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\nMatch abandoned.", file=sys.stderr)
        return 130

    print_summary(summary, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
