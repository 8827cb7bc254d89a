# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

import traceback
import typing

from Serpentine.board import Board
from Serpentine.search import Search
from Serpentine.utils import debug, move_budget, search_workers


def decide(board: Board, budget: float | None = None) -> typing.Dict:
    """
    Lässt die Suche auf dem Spielfeld laufen und gibt die Antwort im API-Format zurück.

    :param board: aktuelles Spielfeld
    :param budget: Zeitbudget in Sekunden (Standard: MOVE_BUDGET_MS)
    :return: z. B. {"move": "up"}
    """
    result = Search(board, move_budget() if budget is None else budget, search_workers()).run()
    debug(f"[move] {result.direction.value} after {result.expansions} expansions, depth {result.depth}")
    return {"move": result.direction.value}


def move(game_state: typing.Dict) -> typing.Dict:
    """
    Hauptentscheidungsfunktion für den Snake-Zug.

    Ungültige Eingaben (leerer Körper, fehlende Felder) werden schon beim Einlesen an den Aufrufer
    weitergegeben. Jeder Fehler in der Suche wird geloggt und mit dem Notfall-Zug beantwortet.

    :raises InvalidSnakeError: wenn eine Schlange keinen Körper hat
    :raises KeyError: wenn Pflichtfelder im JSON fehlen
    """
    debug("[move] Wähle nächsten Zug...")
    board = Board.from_json(game_state)
    debug(f"[move] Turn {game_state.get('turn')}, {len(board.snakes)} snakes\n{board}")
    try:
        return decide(board)
    except Exception:
        debug("[ERROR] Fehler im Move-Handler:")
        traceback.print_exc()
        return fallback_move(board)


def fallback_move(board: Board) -> typing.Dict:
    """
    Notfall-Zug, wenn die Suche wegen eines unerwarteten Fehlers abbricht: Standardzug der eigenen Schlange.
    """
    direction = board.you().get_default_move()
    debug(f"[Fallback] Benutze Standardzug '{direction.value}'")
    return {"move": direction.value}
