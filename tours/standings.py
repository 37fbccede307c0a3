from dataclasses import dataclass
from datetime import date
from operator import attrgetter
from typing import Hashable, Iterable, List, Optional, Tuple

from scores.ranking import dense_positions


@dataclass(frozen=True)
class StandingCompetition:
    """One competition's contribution to a season standing."""

    competition_id: Hashable
    points: int
    position: Optional[int] = None
    relative_to_par: Optional[int] = None
    competition_name: Optional[str] = None
    competition_date: Optional[date] = None


@dataclass(frozen=True)
class TourStanding:
    entity_id: Hashable
    total_points: int
    competitions_played: int
    position: Optional[int]
    name: Optional[str] = None
    competitions: Tuple[StandingCompetition, ...] = ()


def build_standings(results: Iterable, entity: str = "player_id",
                    score: str = "relative_to_par") -> List[TourStanding]:
    """
    Season standings from finalized competition rows.

    Points are summed per player (or team, with entity="team_id"); a missed
    competition simply adds nothing. Positions are shared on equal totals.
    Within a tie, more competitions played is listed first.

    Args:
        results: Rows exposing competition_id, points and the entity attribute,
            plus position and the score attribute when they have them
        entity: Name of the attribute identifying who the points belong to
        score: Name of the attribute holding the row's score relative to par

    Returns:
        Standings best first, each with its competitions in row order, or an
        empty list when there are no rows
    """
    get_entity = attrgetter(entity)
    totals = {}
    breakdown = {}

    for result in results:
        entity_id = get_entity(result)
        totals[entity_id] = totals.get(entity_id, 0) + result.points
        breakdown.setdefault(entity_id, []).append(StandingCompetition(
            competition_id=result.competition_id,
            points=result.points,
            position=getattr(result, "position", None),
            relative_to_par=getattr(result, score, None),
        ))

    def played(entity_id):
        return len({entry.competition_id for entry in breakdown[entity_id]})

    ordered = sorted(
        totals,
        key=lambda entity_id: (-totals[entity_id], -played(entity_id), entity_id),
    )
    positions = dense_positions(ordered, lambda a, b: totals[a] == totals[b])

    return [
        TourStanding(
            entity_id=entity_id,
            total_points=totals[entity_id],
            competitions_played=played(entity_id),
            position=position,
            competitions=tuple(breakdown[entity_id]),
        )
        for entity_id, position in zip(ordered, positions)
    ]
