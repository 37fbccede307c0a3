from types import SimpleNamespace

from django.test import SimpleTestCase

from tours.standings import build_standings


def row(player_id, competition_id, points):
    return SimpleNamespace(player_id=player_id, competition_id=competition_id, points=points)


class BuildStandingsTests(SimpleTestCase):

    def test_no_results_is_an_empty_standings(self):
        self.assertEqual(build_standings([]), [])

    def test_points_are_summed_across_competitions(self):
        standings = build_standings([row(1, 10, 7), row(2, 10, 5), row(1, 11, 3), row(3, 11, 9)])

        self.assertEqual([(s.entity_id, s.total_points, s.position) for s in standings],
                         [(1, 10, 1), (3, 9, 2), (2, 5, 3)])
        self.assertEqual(standings[0].competitions_played, 2)

    def test_equal_totals_share_a_position(self):
        standings = build_standings([row(1, 10, 6), row(2, 10, 3), row(2, 11, 3), row(3, 10, 1)])

        self.assertEqual([s.position for s in standings], [1, 1, 3])
        self.assertEqual(standings[0].entity_id, 2)
        self.assertEqual(standings[0].competitions_played, 2)

    def test_negative_points_count(self):
        standings = build_standings([row(1, 10, -1), row(1, 11, 4)])
        self.assertEqual(standings[0].total_points, 3)

    def test_team_standings(self):
        rows = [SimpleNamespace(team_id="A", competition_id=1, points=4),
                SimpleNamespace(team_id="B", competition_id=1, points=2)]
        standings = build_standings(rows, entity="team_id")
        self.assertEqual([s.entity_id for s in standings], ["A", "B"])

    def test_competition_breakdown_keeps_row_order(self):
        rows = [SimpleNamespace(player_id=1, competition_id=10, points=7, position=1, relative_to_par=-3),
                SimpleNamespace(player_id=1, competition_id=11, points=2, position=4, relative_to_par=2)]

        standing = build_standings(rows)[0]

        self.assertEqual([entry.competition_id for entry in standing.competitions], [10, 11])
        self.assertEqual([entry.position for entry in standing.competitions], [1, 4])
        self.assertEqual([entry.relative_to_par for entry in standing.competitions], [-3, 2])
        self.assertIsNone(standing.competitions[0].competition_name)

    def test_team_breakdown_reads_the_named_score(self):
        rows = [SimpleNamespace(team_id="A", competition_id=1, points=4, position=1, total_relative_score=-5)]
        standing = build_standings(rows, entity="team_id", score="total_relative_score")[0]
        self.assertEqual(standing.competitions[0].relative_to_par, -5)
