# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

import random
import typing
from dataclasses import dataclass

from Serpentine.game import ALL_DIRECTIONS, ORIGIN, Coordinate, Direction
from Serpentine.path import Path
from Serpentine.path_solver import PathSolver
from Serpentine.snake import SNAKE_MAX_HEALTH, SNAKE_START_SIZE, Snake
from Serpentine.utils import debug

FOOD_SPAWN_CHANCE = 15  # Prozent pro Zug

# Todesursachen
STARVED = 'starved'
OUT_OF_BOUNDS = 'out-of-bounds'
OTHER_COLLISION = 'other-collision'
HEAD_TO_HEAD = 'head-to-head'
SELF_COLLISION = 'self-collision'


@dataclass
class Territory:
    """
    Felder, die eine Schlange schneller als alle anderen erreicht (Gleichstand zählt für niemanden).

    :ivar area: Anzahl dieser Felder
    :ivar num_food: Futter innerhalb des Gebiets
    :ivar nearest_food: Züge bis zum nächsten Futter im Gebiet, None wenn keins vorhanden ist
    """
    area: int = 0
    num_food: int = 0
    nearest_food: int | None = None


class Board:
    """
    Hält den Gesamtzustand eines Zuges (Schlangen, Futter, Feldgröße) und kennt die Spielregeln.

    snakes[0] ist immer die eigene Schlange ("you"), danach folgen die Gegner.
    """
    __slots__ = ('snakes', 'food', 'bound')

    def __init__(self, snakes: list[Snake], food: list[Coordinate], bound: Coordinate):
        """
        :param snakes: Schlangen, Index 0 ist "you"
        :param food: Futterpositionen
        :param bound: obere rechte Ecke (inklusive), der Ursprung ist (0, 0)
        """
        self.snakes = snakes
        self.food = food
        self.bound = bound

    def __eq__(self, other):
        if not isinstance(other, Board):
            return False
        return self.snakes == other.snakes and self.food == other.food and self.bound == other.bound

    def __str__(self):
        """
        Spielfeld als Text, (0, 0) unten links:
        . = leer, * = Futter, 0,1,2... = Kopf der Schlange mit diesem Index, o = Körper
        """
        rows = [['.' for _ in range(self.width())] for _ in range(self.height())]
        for food in self.food:
            if self.in_bounds(food):
                rows[food.y][food.x] = '*'
        for i, snake in enumerate(self.snakes):
            nodes = snake.body.nodes
            for a, b in zip(nodes, nodes[1:]):
                cell = a
                while cell != b:
                    cell = cell.move_toward(b, 1)
                    if self.in_bounds(cell):
                        rows[cell.y][cell.x] = 'o'
            head = snake.head()
            if self.in_bounds(head):
                rows[head.y][head.x] = str(i % 10)

        result = [f"{y:2d} {' '.join(rows[y])}" for y in range(self.height() - 1, -1, -1)]
        result.append('   ' + ' '.join(str(x % 10) for x in range(self.width())))
        return '\n'.join(result)

    @staticmethod
    def init(width: int, height: int, num_snakes: int, rng: random.Random) -> 'Board':
        """
        Erstellt ein neues Spielfeld für Self-Play.

        Auf 7x7, 11x11 und 19x19 gibt es (wie in den offiziellen Regeln) acht feste Startpositionen,
        sonst starten die Schlangen auf zufälligen freien Feldern. Pro Schlange wird ein Futter verteilt.

        :param width: Breite
        :param height: Höhe
        :param num_snakes: Anzahl Schlangen
        :param rng: Zufallsquelle
        :return: neues Board
        :raises ValueError: wenn nicht alle Schlangen auf das Feld passen
        """
        free_spaces = [Coordinate(x, y) for x in range(width) for y in range(height)]

        if width == height and width in (7, 11, 19) and num_snakes <= 8:
            mn, md, mx = 1, (width - 1) // 2, width - 2
            fixed_starts = [
                Coordinate(mn, mn), Coordinate(mn, md), Coordinate(mn, mx), Coordinate(md, mn),
                Coordinate(md, mx), Coordinate(mx, mn), Coordinate(mx, md), Coordinate(mx, mx),
            ]
            rng.shuffle(fixed_starts)
            starts = fixed_starts[:num_snakes]
            for start in starts:
                free_spaces.remove(start)
        else:
            if len(free_spaces) < num_snakes:
                raise ValueError('The board is not big enough to contain all requested snakes')
            starts = [free_spaces.pop(rng.randrange(len(free_spaces))) for _ in range(num_snakes)]

        snakes = [Snake.init(SNAKE_MAX_HEALTH, start, SNAKE_START_SIZE, str(i)) for i, start in enumerate(starts)]

        food = []
        for _ in range(num_snakes):
            if not free_spaces:
                debug("[board] Ran out of free space to spawn food")
                break
            food.append(free_spaces.pop(rng.randrange(len(free_spaces))))

        return Board(snakes, food, Coordinate(width - 1, height - 1))

    @staticmethod
    def from_json(game_state: typing.Dict) -> 'Board':
        """
        Erstellt ein Board aus dem kompletten JSON-Zustand der Battlesnake-API.

        Die eigene Schlange ("you") landet immer auf Index 0.

        :param game_state: JSON-Daten des aktuellen Zuges
        :return: Board-Instanz
        :raises InvalidSnakeError: wenn eine Schlange keinen Körper hat
        """
        board = game_state['board']
        you = game_state['you']
        enemies = [snake_obj for snake_obj in board['snakes'] if snake_obj.get('id') != you.get('id')]
        return Board(
            [Snake.from_json(snake_obj) for snake_obj in [you] + enemies],
            [Coordinate.from_json(food_obj) for food_obj in board.get('food', [])],
            Coordinate(int(board['width']) - 1, int(board['height']) - 1),
        )

    def clone(self) -> 'Board':
        return Board([snake.copy() for snake in self.snakes], list(self.food), self.bound)

    def perspective(self, index: int) -> 'Board':
        """Kopie, in der die Schlange index auf Position 0 steht (für Entscheidungen der Gegner)."""
        board = self.clone()
        board.snakes.insert(0, board.snakes.pop(index))
        return board

    def you(self) -> Snake:
        return self.snakes[0]

    def enemies(self) -> list[Snake]:
        return self.snakes[1:]

    def width(self) -> int:
        return self.bound.x + 1

    def height(self) -> int:
        return self.bound.y + 1

    def area(self) -> int:
        return self.width() * self.height()

    def in_bounds(self, coord: Coordinate) -> bool:
        return coord.bounded_by(ORIGIN, self.bound)

    def find_food(self, coord: Coordinate) -> int | None:
        try:
            return self.food.index(coord)
        except ValueError:
            return None

    def free_cells(self) -> list[Coordinate]:
        """Alle Felder ohne Schlange und ohne Futter, sortiert nach x, dann y."""
        return [
            coord
            for coord in (Coordinate(x, y) for x in range(self.width()) for y in range(self.height()))
            if coord not in self.food and all(snake.body.find_first_node(coord) is None for snake in self.snakes)
        ]

    def get_free_moves(self, from_coord: Coordinate, n_turns: int) -> list[Direction]:
        """
        Bestimmt die Richtungen, in die man von from_coord aus ziehen kann, ohne blockiert zu sein.

        Ein Körpersegment mit Index i ist nach n_turns Zügen frei, wenn i >= size - n_turns,
        weil der Schwanz bis dahin weitergezogen ist. Der eigene Hals ist vom eigenen Kopf aus nie frei.

        :param from_coord: Startzelle
        :param n_turns: Anzahl Züge in der Zukunft (1 = nächster Zug)
        :return: Liste freier Richtungen
        """
        moves = []
        for direction in ALL_DIRECTIONS:
            new_coord = from_coord + direction.offset
            if not self.in_bounds(new_coord):
                continue
            if all(self._is_free_of(snake, from_coord, new_coord, n_turns) for snake in self.snakes):
                moves.append(direction)
        return moves

    @staticmethod
    def _is_free_of(snake: Snake, from_coord: Coordinate, new_coord: Coordinate, n_turns: int) -> bool:
        size = snake.size()
        head = snake.head()
        if new_coord.distance(head) > size:
            # Schlange ist zu weit weg
            return True
        i = snake.body.find_first_node(new_coord, 0)
        if i is None:
            return True
        if i == 1 and from_coord == head:
            return False  # umdrehen
        return i >= size - n_turns

    def enumerate_snake_moves(self) -> list[list[Direction]]:
        """
        Mögliche Züge jeder Schlange für den nächsten Zug.

        Schlangen müssen ziehen: ist eine Schlange eingesperrt, bleibt nur ihr Standardzug.
        """
        all_moves = []
        for snake in self.snakes:
            moves = self.get_free_moves(snake.head(), 1)
            if not moves:
                moves = [snake.get_default_move()]
            all_moves.append(moves)
        return all_moves

    def pathfind(self, from_coord: Coordinate, to_coord: Coordinate) -> Path | None:
        """
        A*-Weg von from_coord nach to_coord, der Zellen nutzen darf, die rechtzeitig frei werden.

        :return: Path oder None, wenn das Ziel nicht erreichbar ist
        """
        return PathSolver(self).astar(from_coord, to_coord)

    def get_territories(self) -> list[Territory]:
        """
        Verteilt das Spielfeld wie ein Voronoi-Diagramm auf die Schlangen.

        Alle Köpfe breiten sich gleichzeitig ringweise aus (Ring t nutzt get_free_moves(cell, t)).
        Wer eine Zelle zuerst erreicht, bekommt sie; erreichen mehrere sie im selben Ring,
        gehört sie niemandem.

        :return: ein Territory pro Schlange (gleiche Reihenfolge wie snakes)
        """
        # Zelle -> (Besitzer oder None bei Gleichstand, Ring)
        ownerships: dict[Coordinate, tuple[int | None, int]] = {}
        for i, snake in enumerate(self.snakes):
            head = snake.head()
            if head in ownerships:
                ownerships[head] = (None, 0)
            else:
                ownerships[head] = (i, 0)
        frontier: list[tuple[Coordinate, int]] = [
            (coord, owner) for coord, (owner, _) in ownerships.items() if owner is not None
        ]

        turn = 1
        while frontier:
            claims: dict[Coordinate, set[int]] = {}
            for coord, owner in frontier:
                for direction in self.get_free_moves(coord, turn):
                    neighbour = coord + direction.offset
                    if neighbour not in ownerships:
                        claims.setdefault(neighbour, set()).add(owner)
            frontier = []
            for coord, owners in claims.items():
                if len(owners) == 1:
                    owner = next(iter(owners))
                    ownerships[coord] = (owner, turn)
                    frontier.append((coord, owner))
                else:
                    ownerships[coord] = (None, turn)
            turn += 1

        territories = [Territory() for _ in self.snakes]
        for coord, (owner, ring) in ownerships.items():
            if owner is None:
                continue
            territory = territories[owner]
            territory.area += 1
            if coord in self.food:
                territory.num_food += 1
                if territory.nearest_food is None or ring < territory.nearest_food:
                    territory.nearest_food = ring
        return territories

    def get_closest_snakes_by_manhattan(self, coord: Coordinate) -> list[tuple[int, int]]:
        """Schlangen-Indizes mit Abstand ihres Kopfes zu coord, aufsteigend sortiert."""
        return sorted(((i, coord.distance(snake.head())) for i, snake in enumerate(self.snakes)),
                      key=lambda entry: entry[1])

    def get_closest_snake_by_pathfind(self, coord: Coordinate) -> tuple[int, int] | None:
        """
        Schlange, die coord auf dem kürzesten A*-Weg erreicht.

        Die Schlangen werden nach Manhattan-Distanz geprüft, so kann man früh aufhören.

        :return: (Index, Weglänge) oder None, wenn keine Schlange hinkommt
        """
        best = None
        for i, manhattan in self.get_closest_snakes_by_manhattan(coord):
            if best is not None and manhattan > best[1]:
                break
            path = self.pathfind(self.snakes[i].head(), coord)
            if path is not None and (best is None or path.dist() < best[1]):
                best = (i, path.dist())
        return best

    def advance(self, spawn_food: bool, moves: typing.Sequence[Direction | None],
                rng: random.Random | None = None) -> dict[int, str]:
        """
        Wendet die Spielregeln für einen Zug an.

        1. Alle Schlangen ziehen (ohne Zug: Standardzug) und fressen, was unter ihrem Kopf liegt.
           Alle dürfen fressen, bevor Futter entfernt wird.
        2. Tote Schlangen bestimmen (verhungert, Wand, Körper, Kopf-an-Kopf, eigener Körper).
        3. Gefressenes Futter und tote Schlangen entfernen (Reihenfolge bleibt erhalten).
        4. Optional mit FOOD_SPAWN_CHANCE Prozent neues Futter auf ein zufälliges freies Feld legen.

        :param spawn_food: ob neues Futter erscheinen darf
        :param moves: Zug pro Schlange (gleicher Index wie snakes)
        :param rng: Zufallsquelle, Pflicht wenn spawn_food gesetzt ist
        :return: ursprünglicher Index -> Todesursache für alle Schlangen, die in diesem Zug gestorben sind
        :raises ValueError: wenn spawn_food ohne rng verwendet wird
        """
        if spawn_food and rng is None:
            raise ValueError('Spawning food needs a random source')

        eaten_food: set[int] = set()
        reversed_snakes: set[int] = set()

        for i, snake in enumerate(self.snakes):
            direction = moves[i] if i < len(moves) and moves[i] is not None else snake.get_default_move()
            neck = snake.neck()
            snake.slither(direction)
            if neck is not None and snake.head() == neck:
                reversed_snakes.add(i)
            food_index = self.find_food(snake.head())
            if food_index is not None:
                snake.feed(SNAKE_MAX_HEALTH)
                eaten_food.add(food_index)

        dead_snakes: dict[int, str] = {}
        for i, snake in enumerate(self.snakes):
            cause = self._death_cause(i, snake, i in reversed_snakes)
            if cause is not None:
                dead_snakes[i] = cause

        if eaten_food:
            self.food = [food for i, food in enumerate(self.food) if i not in eaten_food]
        if dead_snakes:
            self.snakes = [snake for i, snake in enumerate(self.snakes) if i not in dead_snakes]

        if spawn_food and rng.randrange(100) < FOOD_SPAWN_CHANCE:
            free = self.free_cells()
            if free:
                self.food.append(free[rng.randrange(len(free))])
            else:
                debug("[board] No free cell to spawn food")

        return dead_snakes

    def _death_cause(self, index: int, snake: Snake, reversed_onto_neck: bool) -> str | None:
        if snake.starved():
            return STARVED
        if not self.in_bounds(snake.head()):
            return OUT_OF_BOUNDS
        for other_index, other in enumerate(self.snakes):
            if other_index == index:
                if reversed_onto_neck or snake.hit_self():
                    return SELF_COLLISION
                continue
            if snake.hit_body_of(other):
                return OTHER_COLLISION
            if snake.loses_head_to_head(other):
                # zwei Schlangen rein, eine raus (oder keine)
                return HEAD_TO_HEAD
        return None
