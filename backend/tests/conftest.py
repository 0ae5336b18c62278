"""
Shared fixtures for the SnakeBrain test suite.

Board scenarios live in tests/fixtures/*.json as /move request bodies.
"""

import json
import os
import sys
from pathlib import Path

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.game_state import GameState  # noqa: E402

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def load_payload(name: str) -> dict:
    with (FIXTURES_DIR / f"{name}.json").open("r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def load_board():
    """Return a loader: name -> (GameState, our Snake)."""

    def _load(name: str):
        game_state = GameState.from_dict(load_payload(name))
        return game_state, game_state.you

    return _load


@pytest.fixture
def move_payload():
    return load_payload
