# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

import argparse
import random
from pathlib import Path

import pandas as pd
from joblib import Parallel, delayed

from Serpentine.board import Board
from Serpentine.search import get_decision
from Serpentine.utils import debug

# Spalten der Ergebnis-Tabelle
columns = ["seed", "snake", "turns_survived", "cause", "final_size", "winner"]


def play_game(seed: int, width: int = 11, height: int = 11, num_snakes: int = 4,
              budget: float = 0.05, max_turns: int = 500) -> list[dict]:
    """
    Spielt ein komplettes Spiel lokal, alle Schlangen entscheiden mit der Suche.

    :param seed: Startwert für die Zufallsquelle (Startpositionen und Futter)
    :param width: Spielfeldbreite
    :param height: Spielfeldhöhe
    :param num_snakes: Anzahl Schlangen
    :param budget: Zeitbudget pro Entscheidung in Sekunden
    :param max_turns: Abbruch nach so vielen Zügen
    :return: ein Eintrag pro Schlange
    """
    rng = random.Random(seed)
    board = Board.init(width, height, num_snakes, rng)
    # ursprüngliche Nummer jeder noch lebenden Schlange
    alive_ids = list(range(num_snakes))
    records = {i: {"seed": seed, "snake": i, "turns_survived": 0, "cause": None, "final_size": 0, "winner": False}
               for i in range(num_snakes)}

    turn = 0
    while len(board.snakes) > (1 if num_snakes > 1 else 0) and turn < max_turns:
        moves = [get_decision(board.perspective(i), budget) for i in range(len(board.snakes))]
        sizes = [snake.size() for snake in board.snakes]
        deaths = board.advance(True, moves, rng)
        turn += 1

        for index, cause in deaths.items():
            record = records[alive_ids[index]]
            record["turns_survived"] = turn
            record["cause"] = cause
            record["final_size"] = sizes[index]
        alive_ids = [snake_id for index, snake_id in enumerate(alive_ids) if index not in deaths]

    for snake_id, snake in zip(alive_ids, board.snakes):
        records[snake_id]["turns_survived"] = turn
        records[snake_id]["final_size"] = snake.size()
        records[snake_id]["winner"] = len(alive_ids) == 1 and num_snakes > 1

    debug(f"[selfplay] Game {seed} finished after {turn} turns, survivors: {alive_ids}")
    return [records[i] for i in range(num_snakes)]


def run_selfplay(num_games: int, n_jobs: int = 1, csv_path: Path | str | None = None, **kwargs) -> pd.DataFrame:
    """
    Spielt mehrere Spiele (parallel mit joblib) und sammelt die Ergebnisse in einem DataFrame.

    :param num_games: Anzahl Spiele, die Seeds sind 0..num_games-1
    :param n_jobs: parallele Prozesse für joblib
    :param csv_path: optionaler Pfad, unter dem die Ergebnisse als CSV gespeichert werden
    :param kwargs: weitere Parameter für play_game
    :return: DataFrame mit einer Zeile pro Schlange und Spiel
    """
    results = Parallel(n_jobs=n_jobs)(delayed(play_game)(seed, **kwargs) for seed in range(num_games))
    df = pd.DataFrame([record for records in results for record in records], columns=pd.Index(columns))

    if csv_path is not None:
        df.to_csv(csv_path, index=False)
        debug(f"[selfplay] {len(df)} Zeilen gespeichert in {csv_path}")
    return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """
    Fasst die Ergebnisse pro Startplatz zusammen: Siege, durchschnittliche Überlebensdauer, Größe.
    """
    return df.groupby("snake").agg(
        games=("seed", "count"),
        wins=("winner", "sum"),
        mean_turns=("turns_survived", "mean"),
        mean_size=("final_size", "mean"),
    )


def main():
    parser = argparse.ArgumentParser(description="Run local self-play games")
    parser.add_argument("--games", type=int, default=4)
    parser.add_argument("--jobs", type=int, default=1)
    parser.add_argument("--snakes", type=int, default=4)
    parser.add_argument("--size", type=int, default=11)
    parser.add_argument("--budget-ms", type=int, default=50)
    parser.add_argument("--csv", type=Path, default=None)
    args = parser.parse_args()

    df = run_selfplay(args.games, n_jobs=args.jobs, csv_path=args.csv, width=args.size, height=args.size,
                      num_snakes=args.snakes, budget=args.budget_ms / 1000)
    print(summarize(df))
    print(df["cause"].value_counts(dropna=False))


if __name__ == "__main__":
    main()
