"""
Runtime configuration for the SnakeBrain server and CLIs.

Values come from the environment (optionally a local .env file). Search
thresholds are not configurable here; they live in domain/constants.py.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()


def get_port() -> int:
    return int(os.getenv("PORT", "8000"))


def get_host() -> str:
    return os.getenv("HOST", "0.0.0.0")


def get_log_level() -> int:
    level_name = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    return getattr(logging, level_name, logging.INFO)


def get_appearance() -> dict:
    """
    Battlesnake customization returned by the metadata endpoint.
    """
    return {
        "apiversion": "1",
        "author": os.getenv("BATTLESNAKE_AUTHOR", ""),
        "color": os.getenv("BATTLESNAKE_COLOR", "#888888"),
        "head": os.getenv("BATTLESNAKE_HEAD", "default"),
        "tail": os.getenv("BATTLESNAKE_TAIL", "default"),
    }


def configure_logging() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
