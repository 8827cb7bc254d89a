# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006


from Serpentine.game import ZERO, Coordinate as C, Offset
from Serpentine.path import Path


class TestCompression:
    """Gerade Läufe werden auf ihre Endpunkte reduziert."""

    def test_collinear_points_are_dropped(self):
        path = Path([C(0, 0), C(1, 0), C(2, 0), C(2, 1), C(2, 2)])
        assert path.nodes == [C(0, 0), C(2, 0), C(2, 2)]
        assert path.num_nodes() == 3
        assert path.num_segments() == 5
        assert path.dist() == 4

    def test_stacked_nodes_are_kept(self):
        path = Path([C(1, 1), C(1, 1), C(1, 1)])
        assert path.num_nodes() == 3
        assert path.num_segments() == 3
        assert path.dist() == 0

    def test_stacked_tail(self):
        path = Path([C(0, 0), C(1, 0), C(1, 0)])
        assert path.nodes == [C(0, 0), C(1, 0), C(1, 0)]
        assert path.num_segments() == 3

    def test_accepts_plain_tuples(self):
        assert Path([(0, 0), (0, 1)]).nodes == [C(0, 0), C(0, 1)]

    def test_empty_path(self):
        path = Path()
        assert path.start() is None
        assert path.end() is None
        assert path.num_segments() == 0
        assert path.find_first_node(C(0, 0)) is None
        assert path.pop_start() is None
        assert path.pop_end() is None


class TestFindFirstNode:
    """Logische Indizes im komprimierten Path."""

    def test_indices_along_runs(self):
        path = Path([C(0, 0), C(1, 0), C(2, 0), C(2, 1), C(2, 2)])
        assert [path.find_first_node(c) for c in [C(0, 0), C(1, 0), C(2, 0), C(2, 1), C(2, 2)]] == [0, 1, 2, 3, 4]
        assert path.find_first_node(C(5, 5)) is None

    def test_min_index(self):
        path = Path([C(0, 0), C(2, 0), C(2, 2)])
        assert path.find_first_node(C(0, 0), 1) is None
        assert path.find_first_node(C(2, 0), 3) is None
        assert path.find_first_node(C(2, 1), 3) == 3

    def test_stacked_tail_occupies_two_indices(self):
        path = Path([C(0, 0), C(1, 0), C(1, 0)])
        assert path.find_first_node(C(1, 0)) == 1
        assert path.find_first_node(C(1, 0), 2) == 2

    def test_intersects_and_contains_node(self):
        path = Path([C(0, 0), C(2, 0)])
        assert path.intersects(C(1, 0))
        assert not path.contains_node(C(1, 0))
        assert path.contains_node(C(2, 0))


class TestMutation:
    """Verschieben, Verlängern und Einziehen."""

    def test_slide_start_along_the_run(self):
        path = Path([C(0, 0), C(2, 0), C(2, 2)])
        path.slide_start(Offset(-1, 0))
        assert path.nodes == [C(-1, 0), C(2, 0), C(2, 1)]
        assert path.num_segments() == 5

    def test_slide_start_around_a_corner(self):
        path = Path([C(0, 0), C(2, 0), C(2, 2)])
        path.slide_start(Offset(0, 1))
        assert path.nodes == [C(0, 1), C(0, 0), C(2, 0), C(2, 1)]
        assert path.num_segments() == 5

    def test_slide_end(self):
        path = Path([C(0, 0), C(2, 0)])
        path.slide_end(Offset(1, 0))
        assert path.nodes == [C(1, 0), C(3, 0)]

    def test_extend_end(self):
        path = Path([C(0, 0), C(2, 0)])
        path.extend_end(Offset(1, 0))
        assert path.nodes == [C(0, 0), C(3, 0)]
        path.extend_end(ZERO)
        assert path.nodes == [C(0, 0), C(3, 0), C(3, 0)]
        assert path.num_segments() == 5

    def test_retract_end_drops_corner_nodes(self):
        path = Path([C(0, 0), C(1, 0), C(1, 1)])
        path.retract_end(1)
        assert path.nodes == [C(0, 0), C(1, 0)]
        path.retract_end(5)
        assert path.nodes == [C(0, 0)]

    def test_retract_start(self):
        path = Path([C(0, 0), C(3, 0)])
        path.retract_start(2)
        assert path.nodes == [C(2, 0), C(3, 0)]

    def test_copy_is_independent(self):
        path = Path([C(0, 0), C(2, 0)])
        copy = path.copy()
        copy.slide_start(Offset(-1, 0))
        assert path == Path([C(0, 0), C(2, 0)])
        assert copy != path

    def test_pop(self):
        path = Path([C(0, 0), C(2, 0), C(2, 2)])
        assert path.pop_start() == C(0, 0)
        assert path.pop_end() == C(2, 2)
        assert path.nodes == [C(2, 0)]
        assert path.get_node(0) == C(2, 0)
        assert path.get_node(1) is None


class TestSelfIntersection:
    def test_start_inside_later_run(self):
        path = Path([C(1, 1), C(2, 1), C(2, 0), C(0, 0), C(0, 1), C(1, 1)])
        assert path.start_self_intersects()

    def test_no_self_intersection(self):
        assert not Path([C(0, 0), C(2, 0), C(2, 2)]).start_self_intersects()
