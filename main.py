# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006


from Serpentine.utils import debug
from Serpentine.strategy import move
from Serpentine.server import run_server

import typing


def info() -> typing.Dict:
    """
    Gibt Meta-Daten des Snakes zurück.
    """
    debug("[info] Sending Battlesnake metadata.")
    return {
        #----------------customization----------------
        "apiversion": "1",
        "author": "erentmzkn",
        "color": "#800080",
        "head": "fang",
        "tail": "round-bum",
        #----------------customization----------------
    }

def start(game_state: typing.Dict):
    """
    Wird beim Start des Spiels aufgerufen. Jeder Zug wird unabhängig entschieden, daher gibt es nichts vorzubereiten.
    """
    debug(f"[start] Game {game_state.get('game', {}).get('id')} started.")

def end(game_state: typing.Dict):
    """
    Wird am Ende des Spiels aufgerufen.
    """
    debug(f"[end] Game {game_state.get('game', {}).get('id')} ended.")

HANDLERS = {
    "info": info,
    "start": start,
    "move": move,
    "end": end
}

if __name__ == "__main__":
    print("main.py is running")
    run_server(HANDLERS)
