from django.test import SimpleTestCase

from points.rules import PointsRule
from scores.ranking import rank
from scores.resolver import ResolvedScore
from tours.teams import TeamRoundAggregate, aggregate_teams, allocate_team_points, compare_teams, rank_teams


def resolved(relative_to_par, eligible=True):
    return ResolvedScore(holes_played=18, gross_total=72 + relative_to_par, relative_to_par=relative_to_par,
                         eligible=eligible)


def team(team_id, *member_scores):
    return TeamRoundAggregate(
        team_id=team_id,
        competition_id=1,
        total_relative_score=sum(member_scores),
        total_shots=sum(72 + score for score in member_scores),
        member_scores=tuple(sorted(member_scores)),
    )


class AggregateTeamsTests(SimpleTestCase):

    def test_sums_ranked_members(self):
        ranked = rank([(1, resolved(-2)), (2, resolved(3)), (3, resolved(-1)), (4, resolved(2))])
        membership = {1: "A", 2: "A", 3: "B", 4: "B"}

        aggregates = {agg.team_id: agg for agg in aggregate_teams(ranked, membership, competition_id=9)}

        self.assertEqual(aggregates["A"].total_relative_score, 1)
        self.assertEqual(aggregates["A"].total_shots, 145)
        self.assertEqual(aggregates["A"].member_scores, (-2, 3))
        self.assertEqual(aggregates["B"].member_scores, (-1, 2))
        self.assertEqual(aggregates["B"].competition_id, 9)

    def test_ineligible_member_adds_nothing(self):
        ranked = rank([(1, resolved(-2)), (2, resolved(-10, eligible=False))])
        aggregates = aggregate_teams(ranked, {1: "A", 2: "A"})

        self.assertEqual(len(aggregates), 1)
        self.assertEqual(aggregates[0].total_relative_score, -2)
        self.assertEqual(aggregates[0].member_scores, (-2,))

    def test_team_without_eligible_member_is_left_out(self):
        ranked = rank([(1, resolved(0)), (2, resolved(0, eligible=False))])
        aggregates = aggregate_teams(ranked, {1: "A", 2: "B"})
        self.assertEqual([agg.team_id for agg in aggregates], ["A"])

    def test_players_without_a_team_are_ignored(self):
        ranked = rank([(1, resolved(0)), (2, resolved(-4))])
        aggregates = aggregate_teams(ranked, {1: "A"})
        self.assertEqual(aggregates[0].total_relative_score, 0)


class TeamTieBreakTests(SimpleTestCase):

    def test_lower_total_ranks_first(self):
        self.assertEqual(compare_teams(team("A", -3), team("B", 1)), -1)

    def test_first_member_score_breaks_a_tie(self):
        a = TeamRoundAggregate("A", 1, total_relative_score=1, total_shots=0, member_scores=(-2, 3))
        b = TeamRoundAggregate("B", 1, total_relative_score=1, total_shots=0, member_scores=(-1, 4))

        self.assertEqual(compare_teams(a, b), -1)
        self.assertEqual(compare_teams(b, a), 1)

    def test_cascade_continues_past_equal_members(self):
        a = team("A", -2, 0, 3)
        b = team("B", -2, 1, 2)

        ranked = rank_teams([b, a])
        self.assertEqual([agg.team_id for agg in ranked], ["A", "B"])
        self.assertEqual([agg.position for agg in ranked], [1, 2])

    def test_team_with_more_counted_members_ranks_ahead(self):
        ranked = rank_teams([team("A", -1), team("B", -1, 0)])
        self.assertEqual([agg.team_id for agg in ranked], ["B", "A"])

    def test_identical_teams_stay_tied(self):
        ranked = rank_teams([team("A", -1, 2), team("B", 2, -1), team("C", 4)])

        self.assertEqual([agg.position for agg in ranked], [1, 1, 3])
        self.assertEqual(ranked[2].team_id, "C")

    def test_team_points_use_the_allocator(self):
        ranked = rank_teams([team("A", -1, 2), team("B", 2, -1), team("C", 4)])
        with_points = allocate_team_points(ranked, PointsRule.default_formula(), field_size=3)

        self.assertEqual({agg.team_id: agg.points for agg in with_points}, {"A": 4, "B": 4, "C": 1})
