# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

import typing

from Serpentine.game import Coordinate, Direction, ZERO
from Serpentine.path import Path

SNAKE_MAX_HEALTH = 100
SNAKE_START_SIZE = 3


class InvalidSnakeError(ValueError):
    """Die Eingabedaten beschreiben keine gültige Schlange (z. B. leerer Körper)."""


class Snake:
    """
    Repräsentiert eine Schlange im Spiel.

    Besteht aus einem Body (komprimierter Path vom Kopf zum Schwanz) und den Lebenspunkten.
    """
    __slots__ = ('health', 'body', 'snake_id')

    def __init__(self, health: int, body: Path, snake_id: str | None = None):
        """
        Erstellt eine neue Snake.

        :param health: Lebenspunkte (0 bis SNAKE_MAX_HEALTH)
        :param body: Path, beginnend mit dem Kopf
        :param snake_id: optionale ID aus der API, nur für Debug-Ausgaben
        """
        if not body.nodes:
            raise InvalidSnakeError('A snake needs at least one body coordinate')
        self.health = health
        self.body = body
        self.snake_id = snake_id

    def __str__(self):
        """Kurze Darstellung der Schlange"""
        return f'{self.snake_id}: {self.body.nodes} ({self.health} HP)'

    def __repr__(self):
        """Detaillierte Darstellung für Debugging"""
        return f'Snake(health={self.health}, body={self.body!r}, snake_id={self.snake_id!r})'

    def __eq__(self, other):
        """
        Zwei Schlangen gelten als gleich, wenn Lebenspunkte und Körper identisch sind.

        :param other: Vergleichsobjekt
        :return: True oder False
        """
        if not isinstance(other, Snake):
            return False
        return self.health == other.health and self.body == other.body

    def copy(self) -> 'Snake':
        return Snake(self.health, self.body.copy(), self.snake_id)

    @staticmethod
    def init(health: int, start: Coordinate, size: int, snake_id: str | None = None) -> 'Snake':
        """
        Erstellt eine Schlange, deren Segmente alle auf der Startzelle gestapelt sind (Spielstart).
        """
        return Snake(health, Path([start] * max(size, 1)), snake_id)

    @staticmethod
    def from_json(json: typing.Dict) -> 'Snake':
        """
        Erstellt eine neue Snake aus JSON-Daten.

        :param json: Dictionary mit 'id', 'health' und 'body'
        :return: Snake-Instanz
        :raises InvalidSnakeError: wenn der Körper leer ist
        """
        body = [Coordinate.from_json(cell_obj) for cell_obj in json.get('body', [])]
        if not body:
            raise InvalidSnakeError(f"Snake {json.get('id')} has an empty body")
        # Lebenspunkte auf den gültigen Bereich begrenzen
        health = min(max(int(json.get('health', SNAKE_MAX_HEALTH)), 0), SNAKE_MAX_HEALTH)
        return Snake(health, Path(body), json.get('id'))

    def to_json(self) -> typing.Dict:
        """Liste aller Segmente im API-Format (ungekürzt, gestapelte Segmente doppelt)."""
        body = []
        nodes = self.body.nodes
        body.append(nodes[0])
        for a, b in zip(nodes, nodes[1:]):
            if a == b or not (b - a).linear():
                body.append(b)
                continue
            cell = a
            while cell != b:
                cell = cell.move_toward(b, 1)
                body.append(cell)
        return {
            'id': self.snake_id,
            'health': self.health,
            'body': [cell.to_json() for cell in body],
            'length': len(body),
        }

    def head(self) -> Coordinate:
        return self.body.start()

    def tail(self) -> Coordinate:
        return self.body.end()

    def neck(self) -> Coordinate | None:
        """Segment 1, falls es sich vom Kopf unterscheidet, sonst None."""
        nodes = self.body.nodes
        if len(nodes) < 2 or nodes[1] == nodes[0]:
            return None
        return nodes[0].move_toward(nodes[1], 1)

    def size(self) -> int:
        return self.body.num_segments()

    def starved(self) -> bool:
        return self.health == 0

    def slither(self, direction: Direction):
        """
        Bewegt die Schlange um ein Feld in direction und zieht einen Lebenspunkt ab (nie unter 0).
        """
        self.health = max(self.health - 1, 0)
        self.body.slide_start(direction.offset)

    def feed(self, max_health: int):
        """
        Setzt die Lebenspunkte zurück und lässt den Schwanz einen Zug länger liegen (Wachstum).
        """
        self.health = max_health
        self.body.extend_end(ZERO)

    def get_default_move(self) -> Direction:
        """
        Zug, den die Regeln annehmen, wenn die Schlange nicht antwortet: geradeaus weiter (Hals -> Kopf).

        Ohne eigenen Hals (Spielstart, alles gestapelt) ist es "up".
        """
        neck = self.neck()
        if neck is None:
            return Direction.UP
        return Direction.from_offset(self.head() - neck)

    def hit_body_of(self, other: 'Snake') -> bool:
        """Kopf liegt auf einem Segment von other mit Index > 0 (funktioniert auch mit sich selbst)."""
        return other.body.find_first_node(self.head(), 1) is not None

    def hit_self(self) -> bool:
        """Kopf liegt auf dem eigenen Körper (ohne den Kopf selbst)."""
        return self.hit_body_of(self)

    def loses_head_to_head(self, other: 'Snake') -> bool:
        """Beide Köpfe auf derselben Zelle und other ist mindestens genauso groß."""
        return self.head() == other.head() and self.size() <= other.size()
