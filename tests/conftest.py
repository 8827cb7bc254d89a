# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

import pytest

from Serpentine.board import Board

YOU = 'Y'


def state_from_ascii(rows, health=90, healths=None, turn=0):
    """
    Baut einen JSON-Spielzustand aus einem ASCII-Spielfeld.

    Zeilen von oben nach unten, Zellen durch Leerzeichen getrennt, jede Zelle zwei Zeichen:
    ".." leer, "()" Futter, "Y0" Segment 0 der eigenen Schlange, "A3" Segment 3 von Gegner A.
    Gestapelte Segmente gibt es hier nicht, dafür Snake.init verwenden.

    :param rows: Liste von Zeilen
    :param health: Lebenspunkte aller Schlangen
    :param healths: optionale Lebenspunkte pro Buchstabe, z. B. {"A": 5}
    :param turn: Zugnummer
    """
    grid = [row.split() for row in rows]
    height = len(grid)
    width = len(grid[0])
    healths = healths or {}

    food = []
    segments: dict[str, dict[int, dict]] = {}
    for row_index, cells in enumerate(grid):
        assert len(cells) == width, f'row {row_index} has {len(cells)} cells, expected {width}'
        y = height - 1 - row_index
        for x, cell in enumerate(cells):
            if cell == '..':
                continue
            if cell == '()':
                food.append({'x': x, 'y': y})
                continue
            letter, index = cell[0], int(cell[1:])
            segments.setdefault(letter, {})[index] = {'x': x, 'y': y}

    snakes = {}
    for letter, body in segments.items():
        snakes[letter] = {
            'id': letter,
            'health': healths.get(letter, health),
            'body': [body[i] for i in sorted(body)],
            'length': len(body),
        }

    you = snakes.get(YOU)
    return {
        'game': {'id': 'test-game'},
        'turn': turn,
        'board': {
            'width': width,
            'height': height,
            'food': food,
            'snakes': [snakes[letter] for letter in sorted(snakes)],
        },
        'you': you,
    }


def board_from_ascii(rows, **kwargs) -> Board:
    return Board.from_json(state_from_ascii(rows, **kwargs))


@pytest.fixture
def parse_board():
    return board_from_ascii


@pytest.fixture
def parse_state():
    return state_from_ascii


@pytest.fixture(autouse=True)
def quiet_debug(monkeypatch):
    """Debug-Ausgaben in Tests abschalten."""
    monkeypatch.setattr('Serpentine.utils.DEBUG', False)
