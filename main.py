#!/usr/bin/env python3
"""
Grid Pattern Runner

Loads a session configuration, applies charm / phone-call effects, advances turns
and scores a grid snapshot read from a JSON file of symbol type ids.

Usage:
    python main.py configs/grid_example.json
    python main.py configs/grid_example.json --config configs/session.json -e wide_reels -e lucky_call
    python main.py configs/grid_example.json --turns 2 --log-level DEBUG
"""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from config_models import SessionConfiguration, load_session_configuration
from core.models.grid_snapshot import GridSnapshot
from engine.grid_size_controller import InvalidResize
from engine.session import GameSession


def print_banner():
    """Print welcome banner."""
    print("=" * 60)
    print(" 🎰 GRID PATTERN RUNNER")
    print("=" * 60)
    print()


def print_patterns(session: GameSession):
    """Display the active pattern set."""
    print(f"Grid size: {session.current_dimensions()}  (turn {session.turn})")
    print("Active patterns:")
    print("─" * 30)
    for pattern in session.active_patterns():
        print(f"  {pattern.shape_kind.value:<14} length {pattern.length:<3} x{pattern.multiplier:.3f}")
    skipped = session.catalog.skipped_for_capacity()
    if skipped:
        print(f"  (skipped at cap: {', '.join(sorted(kind.value for kind in skipped))})")
    print()


def load_grid(json_file_path: str) -> GridSnapshot:
    with open(json_file_path) as f:
        data = json.load(f)
    return GridSnapshot.from_type_ids(data)


def main():
    """Main runner function."""
    parser = argparse.ArgumentParser(description="Score a symbol grid against the active winning patterns")
    parser.add_argument("grid_file", help="Path to JSON file with the grid as a list of rows of type ids")
    parser.add_argument("--config", "-c", help="Path to session configuration JSON file")
    parser.add_argument(
        "--effect",
        "-e",
        action="append",
        default=[],
        help="Name of a configured effect to trigger before scoring (repeatable)",
    )
    parser.add_argument("--turns", "-t", type=int, default=0, help="Turns to advance before scoring")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = load_session_configuration(args.config) if args.config else SessionConfiguration()
    session = GameSession(config)

    print_banner()

    for name in args.effect:
        try:
            dimensions = session.trigger_effect(name)
            print(f"✅ Effect {name} applied, grid is now {dimensions}")
        except KeyError:
            print(f"❌ Unknown effect: {name}")
            return 1
        except InvalidResize as e:
            print(f"⚠️  Effect {name} rejected: {e}")

    for _ in range(args.turns):
        session.advance_turn()

    print()
    print_patterns(session)

    try:
        grid = load_grid(args.grid_file)
    except (OSError, json.JSONDecodeError, TypeError, ValidationError) as e:
        print(f"❌ Could not load grid from {args.grid_file}: {e}")
        return 1

    print(grid.pretty_print())
    print()

    result = session.evaluate(grid)
    if not result.matches:
        print("No winning patterns.")
    for match in result.matches:
        print(f"  🏆 {match.shape_kind.value}-{match.length}: x{match.multiplier:.3f} -> {match.coin_value} coins")
    print(f"\nTotal coins: {result.total_coins}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
