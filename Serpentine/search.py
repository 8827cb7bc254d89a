# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

import heapq
import itertools
import time
import typing
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field

from Serpentine import heuristic
from Serpentine.board import Board
from Serpentine.game import ALL_DIRECTIONS, Direction
from Serpentine.utils import debug

ROOT_SCORE = 1.0
DEATH_SCORE = -1.0
# Gewicht des Eltern-Scores beim Mischen, damit tiefe, schmale "Glückspfade" nicht dominieren
PARENT_WEIGHT = 0.5

# Nur Schlangen in der Nähe werden mit allen Zügen durchgerechnet
PRIORITY_RADIUS = 4
MIN_PRIORITY_SNAKES = 2
MAX_PRIORITY_SNAKES = 3

TRACE_SIZE = 3


@dataclass
class Candidate:
    """
    Ein noch nicht expandiertes, mögliches zukünftiges Spielfeld.

    :ivar score: Bewertung (höher = besser)
    :ivar board: Spielfeld nach den bisherigen Zügen
    :ivar first_move: erster eigener Zug, der hierher führt (None für die Wurzel)
    :ivar depth: Anzahl simulierter Züge
    """
    score: float
    board: Board
    first_move: Direction | None
    depth: int


@dataclass
class TraceEntry:
    first_move: Direction | None
    score: float
    depth: int

    def __str__(self):
        move = self.first_move.value if self.first_move else '-'
        return f'{move}:{self.score:.3f}@{self.depth}'


@dataclass
class SearchResult:
    direction: Direction
    expansions: int = 0
    depth: int = 0
    trace: list[TraceEntry] = field(default_factory=list)


def prune_moves(board: Board, moves: list[list[Direction]]) -> list[list[Direction]]:
    """
    Reduziert die Züge weit entfernter Gegner auf einen einzigen Zug.

    Volle Zugmengen behalten die MIN_PRIORITY_SNAKES nächsten Köpfe (der eigene Kopf zählt mit,
    Abstand 0) und alle Köpfe innerhalb von PRIORITY_RADIUS, insgesamt höchstens MAX_PRIORITY_SNAKES.
    Alle anderen ziehen ihren Standardzug, falls er frei ist, sonst den ersten freien Zug.

    :param board: Spielfeld
    :param moves: Ergebnis von board.enumerate_snake_moves()
    :return: gekürzte Zugmengen
    """
    priority = {0}
    for rank, (i, dist) in enumerate(board.get_closest_snakes_by_manhattan(board.you().head())):
        if len(priority) >= MAX_PRIORITY_SNAKES:
            break
        if rank < MIN_PRIORITY_SNAKES or dist <= PRIORITY_RADIUS:
            priority.add(i)

    pruned = []
    for i, options in enumerate(moves):
        if i in priority or len(options) <= 1:
            pruned.append(options)
            continue
        default = board.snakes[i].get_default_move()
        pruned.append([default] if default in options else options[:1])
    return pruned


def evaluate(board: Board, joint_moves: typing.Sequence[Direction]) -> tuple[Direction, float, Board | None]:
    """
    Simuliert eine Zugkombination auf einer Kopie und bewertet das Ergebnis für die eigene Schlange.

    :return: (eigener Zug, Bewertung oder DEATH_SCORE, neues Spielfeld oder None wenn tot)
    """
    child = board.clone()
    deaths = child.advance(False, joint_moves)
    if 0 in deaths:
        return joint_moves[0], DEATH_SCORE, None
    return joint_moves[0], heuristic.score(child, 0), child


class Search:
    """
    Anytime Best-First-Suche über alle gleichzeitigen Züge aller Schlangen.

    Gegner werden als Widersacher behandelt: für jeden eigenen Zug zählt das schlechteste
    Ergebnis über alle Gegnerzüge. Die Suche läuft, bis das Zeitbudget aufgebraucht ist.
    """

    def __init__(self, board: Board, budget: float, workers: int = 1,
                 clock: typing.Callable[[], float] = time.monotonic):
        """
        :param board: aktuelles Spielfeld (wird nicht verändert)
        :param budget: Zeitbudget in Sekunden
        :param workers: Threads für die Bewertung, 1 = alles im aufrufenden Thread
        :param clock: Zeitquelle
        """
        self.board = board
        self.workers = workers
        self.clock = clock
        self.deadline = clock() + budget
        self.frontier: list[tuple[float, int, Candidate]] = []
        self.counter = itertools.count()
        # bester Score pro erstem Zug, falls die Frontier leer läuft
        self.best_first_moves: list[float | None] = [None] * len(ALL_DIRECTIONS)
        # überlebte und gesamte Zugkombinationen pro erstem Zug, aus der Expansion der Wurzel
        self.root_outcomes: list[list[int]] = [[0, 0] for _ in ALL_DIRECTIONS]
        self.expansions = 0
        self.max_depth = 0
        self.executor: ThreadPoolExecutor | None = None

    def push(self, candidate: Candidate):
        # heapq ist ein Min-Heap, bei Gleichstand gewinnt der ältere Eintrag
        heapq.heappush(self.frontier, (-candidate.score, next(self.counter), candidate))
        self.max_depth = max(self.max_depth, candidate.depth)

    def run(self) -> SearchResult:
        if self.workers > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                self.executor = executor
                try:
                    return self._run()
                finally:
                    self.executor = None
        return self._run()

    def _run(self) -> SearchResult:
        has_opponents = len(self.board.snakes) > 1
        self.push(Candidate(ROOT_SCORE, self.board.clone(), None, 0))

        while self.frontier:
            _, _, candidate = heapq.heappop(self.frontier)

            if self.clock() >= self.deadline:
                direction = candidate.first_move or self.board.you().get_default_move()
                debug(f"[search] Out of time after {self.expansions} expansions")
                return self._result(direction, candidate)

            if candidate.first_move is not None and has_opponents and len(candidate.board.snakes) == 1:
                debug(f"[search] Found a win at depth {candidate.depth}")
                return self._result(candidate.first_move, candidate)

            for child in self.expand(candidate):
                slot = child.first_move.index
                if self.best_first_moves[slot] is None or child.score > self.best_first_moves[slot]:
                    self.best_first_moves[slot] = child.score
                self.push(child)
            self.expansions += 1

        debug(f"[search] Frontier exhausted after {self.expansions} expansions")
        return self._result(self._best_found(), None)

    def expand(self, candidate: Candidate) -> list[Candidate]:
        """
        Simuliert alle (gekürzten) Zugkombinationen und erzeugt pro überlebendem eigenen Zug ein Kind.

        :param candidate: zu expandierender Eintrag
        :return: Kinder, schlechtestes Ergebnis pro eigenem Zug gemischt mit dem Eltern-Score
        """
        board = candidate.board
        moves = prune_moves(board, board.enumerate_snake_moves())

        # schlechtestes bekanntes Ergebnis pro eigener Richtung: (Score, Nr. der Kombination, Board)
        worst: list[tuple[float, int, Board | None] | None] = [None] * len(ALL_DIRECTIONS)
        outcomes = [[0, 0] for _ in ALL_DIRECTIONS]
        for number, (direction, value, child) in self._evaluate_all(board, itertools.product(*moves)):
            outcomes[direction.index][0] += child is not None
            outcomes[direction.index][1] += 1
            slot = worst[direction.index]
            if slot is None or (value, number) < slot[:2]:
                worst[direction.index] = (value, number, child)
        if candidate.first_move is None:
            self.root_outcomes = outcomes

        children = []
        for direction in ALL_DIRECTIONS:
            slot = worst[direction.index]
            if slot is None or slot[2] is None:
                continue
            value, _, child = slot
            children.append(Candidate(
                PARENT_WEIGHT * candidate.score + (1 - PARENT_WEIGHT) * value,
                child,
                candidate.first_move or direction,
                candidate.depth + 1,
            ))
        return children

    def _evaluate_all(self, board: Board, combinations: typing.Iterable[tuple[Direction, ...]]):
        if self.executor is None:
            for number, joint_moves in enumerate(combinations):
                yield number, evaluate(board, joint_moves)
            return
        # jede Aufgabe arbeitet auf ihrer eigenen Kopie, zusammengeführt wird nur hier
        futures = {
            self.executor.submit(evaluate, board, joint_moves): number
            for number, joint_moves in enumerate(combinations)
        }
        for future in as_completed(futures):
            yield futures[future], future.result()

    def _best_found(self) -> Direction:
        """
        Zug, wenn die Frontier leer gelaufen ist: der beste gefundene Score pro erstem Zug.

        Kann jeder Zug tödlich enden, gewinnt der Zug, der den größten Anteil der Gegnerzüge überlebt
        (bei Gleichstand in der Reihenfolge von ALL_DIRECTIONS). Überlebt keiner, der erste freie Zug.
        """
        best = None
        for direction in ALL_DIRECTIONS:
            value = self.best_first_moves[direction.index]
            if value is not None and (best is None or value > self.best_first_moves[best.index]):
                best = direction
        if best is not None:
            return best
        survivors = [direction for direction in ALL_DIRECTIONS if self.root_outcomes[direction.index][0] > 0]
        if survivors:
            return max(survivors, key=self._survival_rate)
        you = self.board.you()
        free = self.board.get_free_moves(you.head(), 1)
        return free[0] if free else you.get_default_move()

    def _survival_rate(self, direction: Direction) -> float:
        survived, total = self.root_outcomes[direction.index]
        return survived / total

    def _result(self, direction: Direction, current: Candidate | None) -> SearchResult:
        entries = [current] if current is not None else []
        entries += [entry for _, _, entry in heapq.nsmallest(TRACE_SIZE, self.frontier)]
        trace = [TraceEntry(entry.first_move, entry.score, entry.depth) for entry in entries[:TRACE_SIZE]]
        debug(f"[search] Decided {direction.value}, trace: {', '.join(str(entry) for entry in trace)}")
        return SearchResult(direction, self.expansions, self.max_depth, trace)


def get_decision(board: Board, budget: float, workers: int = 1) -> Direction:
    """
    Wählt den nächsten Zug für snakes[0].

    :param board: aktuelles Spielfeld
    :param budget: Zeitbudget in Sekunden
    :param workers: Threads für die Bewertung
    :return: gewählte Richtung
    """
    return Search(board, budget, workers).run().direction
