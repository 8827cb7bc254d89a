# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

import datetime
import os


def env_flag(name: str, default: bool) -> bool:
    """
    Liest einen Ja/Nein-Wert aus der Umgebung ("0", "false", "no", "off" gelten als aus).

    :param name: Name der Umgebungsvariable
    :param default: Wert, falls die Variable nicht gesetzt ist
    """
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off", "")


DEBUG = env_flag("SERPENTINE_DEBUG", True)  # Aktiviere Debug


def debug(msg):
    """
    Gibt eine Debug-Nachricht mit Zeitstempel aus, sofern DEBUG aktiviert ist.

    Diese Methode dient zur Laufzeitdiagnose und erleichtert das Nachverfolgen
    von Abläufen im Programm, insbesondere während der Entwicklung und Fehlersuche.

    :param msg: Die auszugebende Debug-Nachricht als Zeichenkette.
    """
    if DEBUG:
        print(f"[{datetime.datetime.now().strftime('%H:%M:%S')}] {msg}", flush=True)


def move_budget() -> float:
    """Zeitbudget pro Zug in Sekunden (MOVE_BUDGET_MS, Standard 250 ms)."""
    return int(os.environ.get("MOVE_BUDGET_MS", "250")) / 1000


def search_workers() -> int:
    """Anzahl Threads für die Bewertung der Zugkombinationen (SEARCH_WORKERS, Standard 1)."""
    return max(int(os.environ.get("SEARCH_WORKERS", "1")), 1)
