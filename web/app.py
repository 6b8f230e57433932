from __future__ import annotations

import atexit
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from flask import Flask, jsonify, request

# Ensure project root is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from othello import AIPlayer, Game, IllegalMove, InvalidInput, OutOfTurn, Side
from othello.config import CONFIG, Config, configure_logging


def create_app(config: Optional[Config] = None) -> Flask:
    cfg = config or CONFIG
    app = Flask(__name__)

    human = Side.parse(cfg.web.human_side)
    game = Game(computer_side=human.opponent, depth=cfg.search.depth, ai=AIPlayer(cfg.search))
    # Searches run here so request handling never waits on the AI
    executor = ThreadPoolExecutor(max_workers=max(1, cfg.web.search_threads), thread_name_prefix="othello-ai")
    atexit.register(executor.shutdown, wait=False)
    app.extensions["othello_game"] = game
    app.extensions["othello_executor"] = executor

    def state():
        if request.args.get("wait"):
            game.wait()
        return jsonify(game.snapshot())

    @app.post("/api/new")
    def api_new():
        data = request.get_json(silent=True) or {}
        try:
            human_side = Side.parse(data.get("human") or cfg.web.human_side)
            depth = int(data.get("depth", cfg.search.depth))
        except (InvalidInput, ValueError, TypeError) as exc:
            return jsonify({"error": str(exc)}), 400
        if depth < 0:
            return jsonify({"error": "depth must not be negative"}), 400

        game.depth = depth
        game.reset(computer_side=human_side.opponent)

        # If the player chose light, the computer (dark) opens
        game.request_computer_move(executor)
        return state()

    @app.get("/api/state")
    def api_state():
        return state()

    @app.post("/api/move")
    def api_move():
        payload = request.get_json(silent=True) or {}
        row, col = payload.get("row"), payload.get("col")
        if row is None or col is None:
            return jsonify({"error": "Missing move"}), 400
        human_side = game.computer_side.opponent

        try:
            game.attempt_move(row, col, side=human_side)
        except OutOfTurn as exc:
            return jsonify({"error": str(exc)}), 409
        except (IllegalMove, InvalidInput) as exc:
            return jsonify({"error": str(exc)}), 400

        game.request_computer_move(executor)
        return state()

    return app


if __name__ == "__main__":
    configure_logging(CONFIG)
    create_app().run(host=CONFIG.web.host, port=CONFIG.web.port, debug=True)
