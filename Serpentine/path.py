# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

import typing

from Serpentine.game import Coordinate, Offset, ZERO


def _continues(a: Coordinate, b: Coordinate, c: Coordinate) -> bool:
    """True, wenn b im Inneren eines geraden, gleichgerichteten Laufs a -> b -> c liegt."""
    first = b - a
    second = c - b
    return first.linear() and second.linear() and first.unit() == second.unit()


class Path:
    """
    Komprimierte Folge von Zellen, z. B. der Körper einer Schlange vom Kopf (Start) bis zum Schwanz (Ende).

    Gerade Läufe werden nur durch ihre beiden Endpunkte gespeichert. Zwei identische Zellen
    hintereinander (gestapelte Segmente, z. B. beim Spielstart oder nach dem Fressen) bleiben
    erhalten und zählen jeweils als eigenes Segment.

    Ist der Abstand zweier aufeinanderfolgender Knoten nicht linear, ist der Weg dazwischen
    ein beliebiger kürzester Manhattan-Weg.
    """
    __slots__ = ('nodes',)

    def __init__(self, nodes: typing.Iterable[Coordinate] = ()):
        """
        Erstellt einen Path und entfernt dabei innere Punkte gerader Läufe.

        :param nodes: Zellen vom Start bis zum Ende
        """
        self.nodes: list[Coordinate] = []
        for node in nodes:
            node = Coordinate(*node)
            if len(self.nodes) >= 2 and _continues(self.nodes[-2], self.nodes[-1], node):
                self.nodes[-1] = node
            else:
                self.nodes.append(node)

    def __repr__(self):
        return f'Path({self.nodes})'

    def __eq__(self, other):
        if not isinstance(other, Path):
            return False
        return self.nodes == other.nodes

    def copy(self) -> 'Path':
        path = Path()
        path.nodes = list(self.nodes)
        return path

    def slide_start(self, offset: Offset):
        """
        Bewegt den Path um offset nach vorne: neuer Startknoten, dafür wird das Ende
        um genauso viele Schritte eingezogen. So bewegt sich eine Schlange um ein Feld.

        :param offset: Verschiebung des Kopfes
        """
        if not self.nodes:
            return
        self.extend_start(offset)
        self.retract_end(offset.manhattan_dist())

    def slide_end(self, offset: Offset):
        """Spiegelbild von slide_start: das Ende wächst, der Start wird eingezogen."""
        if not self.nodes:
            return
        self.extend_end(offset)
        self.retract_start(offset.manhattan_dist())

    def extend_start(self, offset: Offset):
        if not self.nodes:
            return
        new_start = self.nodes[0] + offset
        if offset != ZERO and len(self.nodes) >= 2 and _continues(self.nodes[1], self.nodes[0], new_start):
            self.nodes[0] = new_start
        else:
            self.nodes.insert(0, new_start)

    def extend_end(self, offset: Offset):
        """
        Verlängert das Ende, ohne den Start zu kürzen.

        Mit ZERO entsteht ein gestapeltes Segment am Ende (Wachstum nach dem Fressen).

        :param offset: Verschiebung des neuen Endes
        """
        if not self.nodes:
            return
        new_end = self.nodes[-1] + offset
        if offset != ZERO and len(self.nodes) >= 2 and _continues(self.nodes[-2], self.nodes[-1], new_end):
            self.nodes[-1] = new_end
        else:
            self.nodes.append(new_end)

    def retract_end(self, steps: int):
        for _ in range(steps):
            if len(self.nodes) < 2:
                return
            self.nodes[-1] = self._retracted(self.nodes[-1], self.nodes[-2])
            if self.nodes[-1] is None:
                self.nodes.pop()

    def retract_start(self, steps: int):
        for _ in range(steps):
            if len(self.nodes) < 2:
                return
            self.nodes[0] = self._retracted(self.nodes[0], self.nodes[1])
            if self.nodes[0] is None:
                self.nodes.pop(0)

    @staticmethod
    def _retracted(outer: Coordinate, inner: Coordinate) -> Coordinate | None:
        # None: der äußere Knoten fällt komplett weg
        gap = inner - outer
        if gap.manhattan_dist() <= 1:
            return None
        if gap.linear():
            return outer + gap.unit()
        return outer.move_toward(inner, 1)

    def pop_start(self) -> Coordinate | None:
        return self.nodes.pop(0) if self.nodes else None

    def pop_end(self) -> Coordinate | None:
        return self.nodes.pop() if self.nodes else None

    def dist(self) -> int:
        """Tatsächliche Weglänge: Summe der Manhattan-Distanzen zwischen aufeinanderfolgenden Knoten."""
        return sum(a.distance(b) for a, b in zip(self.nodes, self.nodes[1:]))

    def num_nodes(self) -> int:
        """Anzahl der gespeicherten (komprimierten) Knoten, nur für strukturelle Vergleiche."""
        return len(self.nodes)

    def num_segments(self) -> int:
        """
        Anzahl der logischen Segmente, die der Path darstellt.

        Ein gestapeltes Paar zählt als ein zusätzliches Segment, ein Lauf der Länge d als d Segmente.
        """
        if not self.nodes:
            return 0
        return 1 + sum(max(a.distance(b), 1) for a, b in zip(self.nodes, self.nodes[1:]))

    def start(self) -> Coordinate | None:
        return self.nodes[0] if self.nodes else None

    def end(self) -> Coordinate | None:
        return self.nodes[-1] if self.nodes else None

    def get_node(self, index: int) -> Coordinate | None:
        if 0 <= index < len(self.nodes):
            return self.nodes[index]
        return None

    def find_first_node(self, coord: Coordinate, min_index: int = 0) -> int | None:
        """
        Sucht den ersten logischen Segment-Index >= min_index, der auf coord liegt.

        Index 0 ist der Start (Kopf), größere Indizes liegen Richtung Ende (Schwanz).
        Für Kollisionen ist wichtig, das *erste* Vorkommen zu finden: bei einem gestapelten
        Schwanz belegt die Zelle zwei Indizes und wird erst später frei.

        :param coord: gesuchte Zelle
        :param min_index: kleinster erlaubter Index
        :return: Index oder None, wenn die Zelle nicht belegt ist
        """
        if not self.nodes:
            return None
        if min_index <= 0 and self.nodes[0] == coord:
            return 0

        index = 0
        for a, b in zip(self.nodes, self.nodes[1:]):
            gap = b - a
            length = gap.manhattan_dist()
            if length == 0:
                # gestapelt
                index += 1
                if b == coord and index >= min_index:
                    return index
                continue
            if gap.linear():
                if coord.bounded_by(a, b):
                    step = a.distance(coord)
                    if step > 0 and index + step >= min_index:
                        return index + step
            elif b == coord and index + length >= min_index:
                return index + length
            index += length
        return None

    def intersects(self, coord: Coordinate) -> bool:
        return self.find_first_node(coord) is not None

    def contains_node(self, coord: Coordinate) -> bool:
        return coord in self.nodes

    def start_self_intersects(self) -> bool:
        """
        Prüft, ob der Start von einem späteren Lauf eingeschlossen wird (z. B. Schlange ist in sich selbst gefahren).
        """
        if not self.nodes:
            return False
        start = self.nodes[0]
        return any(start.bounded_by(a, b) for a, b in zip(self.nodes[1:], self.nodes[2:]))
