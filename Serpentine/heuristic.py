# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

from Serpentine.board import FOOD_SPAWN_CHANCE, Board, Territory

HEAD_TO_HEAD_RADIUS = 2


def territory_layer(board: Board, territory: Territory) -> float:
    """
    Anteil des Spielfelds, den die Schlange kontrolliert.

    :param board: Spielfeld
    :param territory: Gebiet der Schlange
    :return: Wert zwischen 0 und 1
    """
    return territory.area / board.area()


def food_layer(board: Board, territory: Territory, health: int) -> float:
    """
    Überlebenschance in Bezug auf Hunger.

    Liegt Futter im eigenen Gebiet und ist es mit den Lebenspunkten erreichbar, ist alles gut.
    Sonst zählt nur noch die Hoffnung, dass rechtzeitig neues Futter im eigenen Gebiet erscheint.

    :param board: Spielfeld
    :param territory: Gebiet der Schlange
    :param health: Lebenspunkte
    :return: Wert zwischen 0 und 1
    """
    if territory.nearest_food is not None and territory.nearest_food <= health:
        return 1.0
    spawn_per_turn = FOOD_SPAWN_CHANCE / 100 * territory.area / board.area()
    return 1.0 - (1.0 - spawn_per_turn) ** health


def head_to_head_layer(board: Board, index: int) -> float:
    """
    Anteil der Gegner, die gerade keine Kopf-an-Kopf-Gefahr sind.

    Gefährlich ist ein Gegner, der mindestens genauso groß ist und dessen Kopf höchstens
    HEAD_TO_HEAD_RADIUS Felder entfernt liegt.

    :param board: Spielfeld
    :param index: Index der bewerteten Schlange
    :return: Wert zwischen 0 und 1
    """
    snake = board.snakes[index]
    opponents = [other for i, other in enumerate(board.snakes) if i != index]
    if not opponents:
        return 1.0
    threats = sum(
        1 for other in opponents
        if other.size() >= snake.size() and other.head().distance(snake.head()) <= HEAD_TO_HEAD_RADIUS
    )
    return 1.0 - threats / len(opponents)


def score(board: Board, index: int = 0, territories: list[Territory] | None = None) -> float:
    """
    Bewertet das Spielfeld aus Sicht einer Schlange.

    Die Faktoren werden multipliziert, damit ein einzelnes katastrophales Problem
    (z. B. gleich verhungert) die ganze Bewertung bestimmt.

    :param board: Spielfeld
    :param index: Index der Schlange
    :param territories: bereits berechnete Gebiete (optional)
    :return: Wert zwischen 0 (schlecht) und 1 (sicher)
    """
    if territories is None:
        territories = board.get_territories()
    snake = board.snakes[index]
    territory = territories[index]

    value = (territory_layer(board, territory)
             * food_layer(board, territory, snake.health)
             * head_to_head_layer(board, index))
    return min(max(value, 0.0), 1.0)
