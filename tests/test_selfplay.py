# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006


import pandas as pd

from Serpentine.board import HEAD_TO_HEAD, OTHER_COLLISION, OUT_OF_BOUNDS, SELF_COLLISION, STARVED
from Serpentine.selfplay import columns, play_game, run_selfplay, summarize

CAUSES = {None, STARVED, OUT_OF_BOUNDS, OTHER_COLLISION, HEAD_TO_HEAD, SELF_COLLISION}


class TestPlayGame:
    def test_one_record_per_snake(self):
        records = play_game(3, width=7, height=7, num_snakes=2, budget=0.01, max_turns=5)
        assert [record['snake'] for record in records] == [0, 1]
        for record in records:
            assert set(record) == set(columns)
            assert record['seed'] == 3
            assert 0 <= record['turns_survived'] <= 5
            assert record['cause'] in CAUSES
            assert record['final_size'] >= 1
        assert sum(record['winner'] for record in records) <= 1

    def test_survivors_have_no_cause(self):
        records = play_game(1, width=7, height=7, num_snakes=2, budget=0.01, max_turns=2)
        last_turn = max(record['turns_survived'] for record in records)
        for record in records:
            if record['cause'] is None:
                assert record['turns_survived'] == last_turn


class TestRunSelfplay:
    def test_dataframe_and_csv(self, tmp_path):
        csv_path = tmp_path / 'results.csv'
        df = run_selfplay(2, n_jobs=1, csv_path=csv_path, width=7, height=7, num_snakes=2,
                          budget=0.01, max_turns=3)
        assert list(df.columns) == columns
        assert len(df) == 4
        assert sorted(df['seed'].unique()) == [0, 1]
        assert len(pd.read_csv(csv_path)) == 4

    def test_summarize(self):
        df = pd.DataFrame([
            {'seed': 0, 'snake': 0, 'turns_survived': 10, 'cause': None, 'final_size': 5, 'winner': True},
            {'seed': 0, 'snake': 1, 'turns_survived': 4, 'cause': STARVED, 'final_size': 3, 'winner': False},
            {'seed': 1, 'snake': 0, 'turns_survived': 6, 'cause': HEAD_TO_HEAD, 'final_size': 4, 'winner': False},
            {'seed': 1, 'snake': 1, 'turns_survived': 8, 'cause': None, 'final_size': 6, 'winner': True},
        ], columns=columns)
        summary = summarize(df)
        assert list(summary.index) == [0, 1]
        assert summary.loc[0, 'games'] == 2
        assert summary.loc[0, 'wins'] == 1
        assert summary.loc[0, 'mean_turns'] == 8
        assert summary.loc[1, 'mean_size'] == 4.5
