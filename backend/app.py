import logging

from flask import Flask, jsonify, request

import config
from domain.constants import DEFAULT_MOVE
from domain.game_state import GameState
from players import decide

app = Flask(__name__)
logger = logging.getLogger(__name__)


@app.route("/", methods=["GET"])
def info():
    """
    Battlesnake metadata: API version and appearance.
    """
    return jsonify(config.get_appearance())


@app.route("/start", methods=["POST"])
def start():
    payload = request.get_json(silent=True) or {}
    logger.info("GAME START %s", (payload.get("game") or {}).get("id"))
    return jsonify({"ok": True})


@app.route("/move", methods=["POST"])
def move():
    """
    Decide the next move for the snake described in the request body.

    Returns {"move": direction}. A malformed body is a 400; any other
    failure still answers with the default move so the game goes on.
    """
    payload = request.get_json(silent=True)
    if payload is None:
        return jsonify({"error": "Request body must be JSON"}), 400

    try:
        game_state = GameState.from_dict(payload)
    except ValueError as error:
        logger.warning("Rejected move request: %s", error)
        return jsonify({"error": str(error)}), 400

    try:
        direction = decide(game_state)
    except Exception:
        logger.exception("Move decision failed, falling back to %s", DEFAULT_MOVE)
        direction = DEFAULT_MOVE

    return jsonify({"move": direction})


@app.route("/end", methods=["POST"])
def end():
    payload = request.get_json(silent=True) or {}
    logger.info("GAME OVER %s", (payload.get("game") or {}).get("id"))
    return jsonify({"ok": True})


if __name__ == "__main__":
    config.configure_logging()
    app.run(host=config.get_host(), port=config.get_port())
