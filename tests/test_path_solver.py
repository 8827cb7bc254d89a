# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006


from Serpentine.game import Coordinate as C
from Serpentine.path_solver import PATHFINDING_HEURISTIC_WEIGHT, PathSolver


class TestAStar:
    """A* über das Spielfeld, Schwänze werden rechtzeitig frei."""

    def test_straight_line(self, parse_board):
        board = parse_board([
            '.. .. .. .. ..',
            'Y1 .. .. .. ..',
            'Y0 .. .. .. ..',
        ])
        path = board.pathfind(C(0, 0), C(4, 0))
        assert path.nodes == [C(0, 0), C(4, 0)]
        assert path.dist() == 4

    def test_goes_around_a_wall(self, parse_board):
        board = parse_board([
            '.. .. .. .. ..',
            '.. A0 .. .. ..',
            '.. A1 .. .. ..',
            '.. A2 .. .. ..',
            'Y0 A3 A4 A5 ..',
        ])
        path = board.pathfind(C(0, 0), C(2, 1))
        assert path is not None
        assert path.end() == C(2, 1)
        # die Wand wird erst frei, wenn es zu spät ist, also oben herum
        assert path.find_first_node(C(1, 4)) is not None
        assert path.dist() >= 9

    def test_unreachable_goal(self, parse_board):
        board = parse_board([
            'Y0 A0 .. ..',
            'A2 A1 .. ..',
            '.. .. .. ..',
        ])
        assert board.pathfind(C(0, 2), C(3, 0)) is None

    def test_start_is_goal(self, parse_board):
        board = parse_board(['Y0 Y1 ..'])
        path = board.pathfind(C(0, 0), C(0, 0))
        assert path.nodes == [C(0, 0)]
        assert path.dist() == 0

    def test_path_through_cells_that_free_up_in_time(self, parse_board):
        board = parse_board([
            'Y0 Y1 Y2 Y3 Y4',
            '.. .. .. .. ..',
        ])
        # Segment 4 liegt auf (4, 1), ist aber frei, bis man dort ankommt
        path = board.pathfind(C(0, 1), C(4, 1))
        assert path is not None
        assert path.dist() == 6

    def test_heuristic_is_weighted(self, parse_board):
        solver = PathSolver(parse_board(['Y0 Y1 ..']))
        assert solver.heuristic_cost_estimate(C(0, 0), C(2, 3)) == 5 * PATHFINDING_HEURISTIC_WEIGHT
        assert solver.distance_between(C(0, 0), C(0, 1)) == 1
