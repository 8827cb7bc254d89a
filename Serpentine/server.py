# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

import logging
import os
import typing

from flask import Flask, jsonify, request

from Serpentine.snake import InvalidSnakeError
from Serpentine.utils import debug


def create_app(handlers: typing.Dict) -> Flask:
    """
    Baut die Flask-App mit den Battlesnake-Endpunkten.

    :param handlers: Dictionary mit den Funktionen "info", "start", "move" und "end"
    :return: Flask-App
    """
    app = Flask(__name__)

    @app.get("/")
    def on_info():
        return handlers["info"]()

    @app.post("/start")
    def on_start():
        game_state = request.get_json()
        handlers["start"](game_state)
        return "ok"

    @app.post("/move")
    def on_move():
        game_state = request.get_json(silent=True)
        if not isinstance(game_state, dict):
            debug("[ERROR] Ungültiges JSON im Request erhalten.")
            return jsonify({"error": "invalid JSON body"}), 400
        try:
            return handlers["move"](game_state)
        except InvalidSnakeError as e:
            debug(f"[ERROR] Ungültige Schlange: {e}")
            return jsonify({"error": str(e)}), 400
        except KeyError as e:
            debug(f"[ERROR] Feld fehlt im Spielzustand: {e}")
            return jsonify({"error": f"missing field {e}"}), 400

    @app.post("/ping")
    def on_ping():
        return "pong"

    @app.post("/end")
    def on_end():
        game_state = request.get_json()
        handlers["end"](game_state)
        return "ok"

    @app.after_request
    def identify_server(response):
        response.headers.set(
            "server", "battlesnake/github/serpentine-python"
        )
        return response

    return app


def run_server(handlers: typing.Dict):
    app = create_app(handlers)

    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))

    logging.getLogger("werkzeug").setLevel(logging.ERROR)

    print(f"\nBattlesnake active at http://{host}:{port}")
    app.run(host=host, port=port)
