from dataclasses import dataclass, replace
from typing import Any, Callable, Hashable, Iterable, List, Sequence, Tuple

from scores.resolver import ResolvedScore

GROSS = "gross"
NET = "net"
SCORING_TYPES = (GROSS, NET)


@dataclass(frozen=True)
class RankedEntry:
    participant_id: Hashable
    score: ResolvedScore
    scoring_type: str
    position: int

    @property
    def ranking_score(self) -> int:
        if self.scoring_type == NET:
            return self.score.net_relative_to_par
        return self.score.relative_to_par

    @property
    def relative_to_par(self) -> int:
        return self.score.relative_to_par


def dense_positions(ordered: Sequence[Any], same: Callable[[Any, Any], bool]) -> List[int]:
    """
    Positions for an already sorted sequence where equal entries share a place.

    The entry after a tie group is placed at one plus the number of entries
    ahead of it, so [0, 0, 1] ranks as [1, 1, 3].
    """
    positions = []
    position = 0
    for index, item in enumerate(ordered):
        if index == 0 or not same(ordered[index - 1], item):
            position = index + 1
        positions.append(position)
    return positions


def rankable(score: ResolvedScore, scoring_type: str) -> bool:
    if not score.eligible:
        return False
    if scoring_type == NET:
        return score.has_net
    return True


def rank(scores: Iterable[Tuple[Hashable, ResolvedScore]], scoring_type: str = GROSS) -> List[RankedEntry]:
    """
    Rank a competition's resolved scores, lowest relative score first.

    Ineligible scores are left out, and the net view also leaves out anyone
    without a handicap. Equal scores share a position and keep input order.
    """
    if scoring_type not in SCORING_TYPES:
        raise ValueError(f"scoring_type must be one of {SCORING_TYPES}, got {scoring_type!r}")

    entries = [
        RankedEntry(participant_id=participant_id, score=score, scoring_type=scoring_type, position=0)
        for participant_id, score in scores
        if rankable(score, scoring_type)
    ]
    entries.sort(key=lambda entry: entry.ranking_score)
    positions = dense_positions(entries, lambda a, b: a.ranking_score == b.ranking_score)

    return [replace(entry, position=position) for entry, position in zip(entries, positions)]
