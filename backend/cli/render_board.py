#!/usr/bin/env python3
"""
Print an ASCII rendering of a saved Battlesnake move request.

Usage:
    python render_board.py <snapshot.json>
"""

import argparse
import json
import os
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.game_state import GameState  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a Battlesnake board as text")
    parser.add_argument("snapshot", type=str, help="Path to a /move request JSON file")
    args = parser.parse_args()

    path = Path(args.snapshot).resolve()
    if not path.exists():
        raise SystemExit(f"Snapshot file does not exist: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            game_state = GameState.from_dict(json.load(f))
    except (ValueError, json.JSONDecodeError) as exc:
        raise SystemExit(f"Could not parse {path.name}: {exc}")

    print(repr(game_state))
    for i, snake in enumerate(game_state.snakes):
        marker = " (you)" if snake.id == game_state.you_id else ""
        print(f"  {i}: {snake.name} health={snake.health} length={snake.length}{marker}")
    print(game_state.print_board())


if __name__ == "__main__":
    main()
