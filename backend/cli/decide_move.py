#!/usr/bin/env python3
"""
CLI tool to run the decision core on a saved Battlesnake move request.

Usage:
    python decide_move.py <snapshot.json>
    python decide_move.py <snapshot.json> --snake <snake_id> --verbose

The snapshot is the JSON body the game engine POSTs to /move.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from players import BattlesnakePlayer  # noqa: E402

logger = logging.getLogger(__name__)


def load_game_state(path: Path) -> GameState:
    with path.open("r", encoding="utf-8") as f:
        return GameState.from_dict(json.load(f))


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Decide a move for a saved Battlesnake game state",
    )
    parser.add_argument("snapshot", type=str, help="Path to a /move request JSON file")
    parser.add_argument(
        "--snake",
        type=str,
        default=None,
        help="Snake id to decide for (default: the 'you' snake of the snapshot)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show search debug output and the board",
    )
    args = parser.parse_args()

    config.configure_logging()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    path = Path(args.snapshot).resolve()
    if not path.exists():
        raise SystemExit(f"Snapshot file does not exist: {path}")

    try:
        game_state = load_game_state(path)
    except (ValueError, json.JSONDecodeError) as exc:
        raise SystemExit(f"Could not parse {path.name}: {exc}")

    if args.verbose:
        logger.info("\n%s", game_state.print_board())

    player = BattlesnakePlayer(args.snake or game_state.you_id)
    direction = player.get_move(game_state)
    decision = player.last_decision

    target = f" (target {decision.target})" if decision.target is not None else ""
    print(f"{direction}  [{decision.state}]{target}")


if __name__ == "__main__":
    main()
