from django.test import SimpleTestCase

from scores.ranking import GROSS, NET, dense_positions, rank
from scores.resolver import ResolvedScore


def resolved(relative_to_par, handicap_strokes=None, eligible=True):
    gross_total = 72 + relative_to_par
    return ResolvedScore(
        holes_played=18,
        gross_total=gross_total,
        relative_to_par=relative_to_par,
        net_total=gross_total - handicap_strokes if handicap_strokes is not None else None,
        handicap_strokes=handicap_strokes,
        eligible=eligible,
    )


class DensePositionTests(SimpleTestCase):

    def test_tied_entries_share_a_position(self):
        self.assertEqual(dense_positions([0, 0, 1], lambda a, b: a == b), [1, 1, 3])

    def test_empty(self):
        self.assertEqual(dense_positions([], lambda a, b: a == b), [])


class RankTests(SimpleTestCase):

    def test_lowest_relative_score_first(self):
        ranked = rank([("a", resolved(3)), ("b", resolved(-2)), ("c", resolved(0))])

        self.assertEqual([entry.participant_id for entry in ranked], ["b", "c", "a"])
        self.assertEqual([entry.position for entry in ranked], [1, 2, 3])

    def test_ties_share_position_and_keep_input_order(self):
        ranked = rank([
            ("a", resolved(1)),
            ("b", resolved(-1)),
            ("c", resolved(1)),
            ("d", resolved(1)),
            ("e", resolved(4)),
        ])

        self.assertEqual([entry.participant_id for entry in ranked], ["b", "a", "c", "d", "e"])
        self.assertEqual([entry.position for entry in ranked], [1, 2, 2, 2, 5])

    def test_position_is_one_plus_entries_strictly_better(self):
        scores = [(n, resolved(value)) for n, value in enumerate([2, -1, 0, 2, -1, 5, 0, 0])]
        ranked = rank(scores)

        for entry in ranked:
            better = sum(1 for other in ranked if other.ranking_score < entry.ranking_score)
            self.assertEqual(entry.position, better + 1)

    def test_ineligible_entries_are_left_out(self):
        ranked = rank([("a", resolved(0)), ("b", resolved(-5, eligible=False))])
        self.assertEqual([entry.participant_id for entry in ranked], ["a"])

    def test_net_view_ranks_on_net_relative_score(self):
        scores = [("a", resolved(2, handicap_strokes=10)), ("b", resolved(-1, handicap_strokes=0))]

        gross = rank(scores, GROSS)
        net = rank(scores, NET)

        self.assertEqual([entry.participant_id for entry in gross], ["b", "a"])
        self.assertEqual([entry.participant_id for entry in net], ["a", "b"])
        self.assertEqual(net[0].ranking_score, -8)
        self.assertEqual(net[0].relative_to_par, 2)

    def test_net_view_excludes_players_without_handicap(self):
        scores = [("a", resolved(0, handicap_strokes=5)), ("b", resolved(-3))]

        self.assertEqual(len(rank(scores, GROSS)), 2)
        self.assertEqual([entry.participant_id for entry in rank(scores, NET)], ["a"])

    def test_empty_field(self):
        self.assertEqual(rank([]), [])

    def test_unknown_scoring_type(self):
        with self.assertRaises(ValueError):
            rank([("a", resolved(0))], "stableford")
