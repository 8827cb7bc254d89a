# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

import enum
import typing


class Offset(typing.NamedTuple):
    """
    Verschiebung zwischen zwei Zellen auf dem Spielfeld.

    Eine Richtung ist eine Einheits-Verschiebung, "linear" heißt, dass genau eine Achse ungleich 0 ist.

    :ivar dx: Verschiebung in x-Richtung
    :ivar dy: Verschiebung in y-Richtung
    """
    dx: int
    dy: int

    def __str__(self):
        return f'<{self.dx}, {self.dy}>'

    def __add__(self, other: 'Offset') -> 'Offset':
        return Offset(self.dx + other.dx, self.dy + other.dy)

    def __sub__(self, other: 'Offset') -> 'Offset':
        return Offset(self.dx - other.dx, self.dy - other.dy)

    @staticmethod
    def between(a: 'Coordinate', b: 'Coordinate') -> 'Offset':
        """
        Verschiebung, die von a nach b führt.

        :param a: Startzelle
        :param b: Zielzelle
        :return: Offset von a nach b
        """
        return Offset(b.x - a.x, b.y - a.y)

    def linear(self) -> bool:
        """True, wenn genau eine Achse ungleich 0 ist (gerade Linie)."""
        return (self.dx == 0) != (self.dy == 0)

    def manhattan_dist(self) -> int:
        return abs(self.dx) + abs(self.dy)

    def abs(self) -> 'Offset':
        return Offset(abs(self.dx), abs(self.dy))

    def unit(self) -> 'Offset':
        """
        Vorzeichen pro Achse, z. B. <4, 0> -> <1, 0>.

        Für lineare Offsets ist das die Richtung des Laufs.
        """
        return Offset((self.dx > 0) - (self.dx < 0), (self.dy > 0) - (self.dy < 0))


ZERO = Offset(0, 0)


class Coordinate(typing.NamedTuple):
    """
    Repräsentiert eine Zelle auf dem Battlesnake-Spielfeld.

    Unveränderlicher Werttyp: kann in Mengen und als Dictionary-Schlüssel verwendet werden
    und wird lexikografisch (erst x, dann y) sortiert.

    :ivar x: X-Koordinate der Zelle.
    :ivar y: Y-Koordinate der Zelle.
    """
    x: int
    y: int

    def __str__(self):
        """String-Darstellung wie (3, 5)"""
        return f'({self.x}, {self.y})'

    def __add__(self, offset: Offset) -> 'Coordinate':
        return Coordinate(self.x + offset.dx, self.y + offset.dy)

    def __sub__(self, other):
        """
        Coordinate - Coordinate ergibt einen Offset, Coordinate - Offset eine neue Coordinate.
        """
        if isinstance(other, Offset):
            return Coordinate(self.x - other.dx, self.y - other.dy)
        return Offset(self.x - other.x, self.y - other.y)

    def distance(self, other: 'Coordinate') -> int:
        """
        Berechnet die Manhattan-Distanz zu einer anderen Zelle.

        Wird für Bewegungslogik und Distanzen verwendet (keine Diagonalen).

        :param other: Zielzelle
        :return: Anzahl Schritte (int)
        """
        return abs(self.x - other.x) + abs(self.y - other.y)

    def bounded_by(self, a: 'Coordinate', b: 'Coordinate') -> bool:
        """
        Prüft, ob die Zelle in dem von a und b aufgespannten Rechteck liegt (inklusive Rand).

        :param a: eine Ecke
        :param b: gegenüberliegende Ecke
        :return: True oder False
        """
        return (min(a.x, b.x) <= self.x <= max(a.x, b.x)
                and min(a.y, b.y) <= self.y <= max(a.y, b.y))

    def move_toward(self, dest: 'Coordinate', dist: int) -> 'Coordinate':
        """
        Geht höchstens dist Schritte Richtung dest (zuerst entlang x) und schießt nie darüber hinaus.

        :param dest: Zielzelle
        :param dist: maximale Anzahl Schritte
        :return: neue Zelle
        """
        offset = dest - self
        step_x = min(abs(offset.dx), dist)
        step_y = min(abs(offset.dy), dist - step_x)
        unit = offset.unit()
        return Coordinate(self.x + unit.dx * step_x, self.y + unit.dy * step_y)

    @staticmethod
    def from_json(json: typing.Dict):
        """
        Erstellt eine Coordinate aus einem JSON-Objekt wie {'x': 3, 'y': 5}

        :param json: Dictionary mit 'x' und 'y'
        :return: Neue Coordinate-Instanz
        """
        return Coordinate(int(json['x']), int(json['y']))

    def to_json(self) -> typing.Dict:
        return {'x': self.x, 'y': self.y}


ORIGIN = Coordinate(0, 0)


class Direction(enum.Enum):
    """
    Die vier erlaubten Züge. Der Wert ist der String, den die Battlesnake-API erwartet.

    (0, 0) liegt unten links, "up" erhöht also y.
    """
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'

    @property
    def offset(self) -> Offset:
        return _OFFSETS[self]

    @property
    def index(self) -> int:
        """Fester Index 0..3 für Arrays, die pro Richtung indiziert werden."""
        return _INDICES[self]

    @property
    def opposite(self) -> 'Direction':
        return Direction.from_offset(Offset(-self.offset.dx, -self.offset.dy))

    @staticmethod
    def from_offset(offset: Offset) -> 'Direction':
        """
        Wandelt eine Einheits-Verschiebung in eine Richtung um.

        :param offset: Offset mit Manhattan-Länge 1
        :return: passende Richtung
        :raises ValueError: wenn der Offset keine Einheitsrichtung ist
        """
        for direction, direction_offset in _OFFSETS.items():
            if direction_offset == offset:
                return direction
        raise ValueError(f'Offset {offset} is not a unit cardinal direction')


_OFFSETS = {
    Direction.UP: Offset(0, 1),
    Direction.DOWN: Offset(0, -1),
    Direction.LEFT: Offset(-1, 0),
    Direction.RIGHT: Offset(1, 0),
}

ALL_DIRECTIONS: typing.Tuple[Direction, ...] = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)

_INDICES = {direction: i for i, direction in enumerate(ALL_DIRECTIONS)}
