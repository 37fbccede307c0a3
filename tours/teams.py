from dataclasses import dataclass, replace
from functools import cmp_to_key
from operator import attrgetter
from typing import Dict, Hashable, Iterable, List, Optional, Tuple

from points.allocator import allocate
from points.rules import PointsRule
from scores.ranking import RankedEntry, dense_positions


@dataclass(frozen=True)
class TeamRoundAggregate:
    team_id: Hashable
    competition_id: Optional[Hashable]
    total_relative_score: int
    total_shots: int
    member_scores: Tuple[int, ...]
    position: int = 0
    points: int = 0


def aggregate_teams(individual_results: Iterable[RankedEntry], membership: Dict[Hashable, Hashable],
                    competition_id: Optional[Hashable] = None) -> List[TeamRoundAggregate]:
    """
    Sum each team's ranked members into one round total.

    Only ranked (eligible) members count. A team with no ranked member is left
    out, the others are returned in first-seen order and still need ranking.
    """
    relative_scores: Dict[Hashable, List[int]] = {}
    shots: Dict[Hashable, int] = {}

    for result in individual_results:
        team_id = membership.get(result.participant_id)
        if team_id is None:
            continue
        relative_scores.setdefault(team_id, []).append(result.score.relative_to_par)
        shots[team_id] = shots.get(team_id, 0) + result.score.gross_total

    return [
        TeamRoundAggregate(
            team_id=team_id,
            competition_id=competition_id,
            total_relative_score=sum(scores),
            total_shots=shots[team_id],
            member_scores=tuple(sorted(scores)),
        )
        for team_id, scores in relative_scores.items()
    ]


def compare_teams(a: TeamRoundAggregate, b: TeamRoundAggregate) -> int:
    """
    Order two teams: lower total first, then member by member from each team's
    best score down. A team that runs out of members to compare ranks behind.
    Returns 0 only when the teams cannot be separated.
    """
    if a.total_relative_score != b.total_relative_score:
        return -1 if a.total_relative_score < b.total_relative_score else 1

    for score_a, score_b in zip(a.member_scores, b.member_scores):
        if score_a != score_b:
            return -1 if score_a < score_b else 1

    if len(a.member_scores) != len(b.member_scores):
        return -1 if len(a.member_scores) > len(b.member_scores) else 1
    return 0


def rank_teams(aggregates: Iterable[TeamRoundAggregate]) -> List[TeamRoundAggregate]:
    ordered = sorted(aggregates, key=cmp_to_key(compare_teams))
    positions = dense_positions(ordered, lambda a, b: compare_teams(a, b) == 0)
    return [replace(team, position=position) for team, position in zip(ordered, positions)]


def allocate_team_points(ranked: List[TeamRoundAggregate], rule: PointsRule,
                         field_size: int) -> List[TeamRoundAggregate]:
    points = allocate(ranked, rule, field_size, key=attrgetter("team_id"))
    return [replace(team, points=points[team.team_id]) for team in ranked]
