# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

import heapq
import typing
from typing import Iterable

from Serpentine.game import Coordinate
from Serpentine.path import Path

if typing.TYPE_CHECKING:
    from Serpentine.board import Board

# Gewichtetes A* (bounded relaxation): schneller, aber nicht garantiert optimal
PATHFINDING_HEURISTIC_WEIGHT = 3


class PathSolver:
    def __init__(self, board: 'Board', weight: int = PATHFINDING_HEURISTIC_WEIGHT):
        """
        Initialisiert den PathSolver mit dem aktuellen Spielfeld.

        :param board: Das aktuelle Board-Objekt
        :param weight: Gewicht der Heuristik
        """
        self.board = board
        self.weight = weight

    def heuristic_cost_estimate(self, current: Coordinate, goal: Coordinate) -> int:
        """
        Schätzt die Entfernung vom aktuellen Punkt zum Ziel mit der gewichteten Manhattan-Distanz.

        :param current: Startzelle
        :param goal: Zielzelle
        :return: Geschätzte Kosten
        """
        return current.distance(goal) * self.weight

    def distance_between(self, n1: Coordinate, n2: Coordinate) -> int:
        return 1  # jeder Schritt ist ein Zug

    def neighbors(self, node: Coordinate, turns: int) -> Iterable[Coordinate]:
        """
        Gibt alle Nachbarzellen zurück, die nach turns Zügen frei sind.

        turns ist der bisherige g-Score: Schwänze, die bis dahin weitergezogen sind,
        blockieren den Weg nicht mehr.

        :param node: Aktuelle Zelle
        :param turns: Anzahl Züge bis node
        :return: freie Nachbarzellen
        """
        return [node + direction.offset for direction in self.board.get_free_moves(node, turns)]

    def astar(self, start: Coordinate, goal: Coordinate) -> Path | None:
        """
        Sucht einen Weg von start nach goal.

        Bei gleichem f-Score wird der kleinere g-Score bevorzugt, danach die lexikografisch
        kleinere Zelle, damit das Ergebnis reproduzierbar ist.

        :param start: Startzelle
        :param goal: Zielzelle
        :return: Path von start nach goal oder None, wenn es keinen Weg gibt
        """
        frontier: list[tuple[int, int, Coordinate]] = [(self.heuristic_cost_estimate(start, goal), 0, start)]
        # g-Score und Vorgänger zusammen speichern
        history: dict[Coordinate, tuple[int, Coordinate | None]] = {start: (0, None)}

        while frontier:
            _, g_score, leader = heapq.heappop(frontier)
            if g_score > history[leader][0]:
                continue  # veralteter Eintrag
            if leader == goal:
                nodes = [leader]
                while (previous := history[nodes[-1]][1]) is not None:
                    nodes.append(previous)
                nodes.reverse()
                return Path(nodes)

            for neighbor in self.neighbors(leader, g_score):
                new_g_score = g_score + self.distance_between(leader, neighbor)
                known = history.get(neighbor)
                if known is None or new_g_score < known[0]:
                    history[neighbor] = (new_g_score, leader)
                    f_score = new_g_score + self.heuristic_cost_estimate(neighbor, goal)
                    heapq.heappush(frontier, (f_score, new_g_score, neighbor))

        return None
