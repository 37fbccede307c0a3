from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from django.utils import timezone as tz

from core.util import round_half_up
from courses.pars import HOLES_PER_ROUND, CourseParProfile
from scores.entry import HoleScoreKind, RawEntry

SCHEDULED = "scheduled"
OPEN = "open"


@dataclass(frozen=True)
class RoundCompletionPolicy:
    """
    Decides whether a participant's round counts as final.

    Scheduled competitions only count locked scorecards. Open competitions
    also count unlocked scorecards once the open window has ended.
    """

    start_mode: str = SCHEDULED
    open_end: Optional[datetime] = None

    def window_closed(self, now: Optional[datetime] = None) -> bool:
        if self.start_mode != OPEN or self.open_end is None:
            return False
        return self.open_end < (now or tz.now())

    def is_satisfied(self, is_locked: bool, now: Optional[datetime] = None) -> bool:
        return is_locked or self.window_closed(now)


@dataclass(frozen=True)
class ResolvedScore:
    holes_played: int
    gross_total: int
    relative_to_par: int
    net_total: Optional[int] = None
    handicap_strokes: Optional[int] = None
    eligible: bool = False
    is_manual: bool = False

    @property
    def has_net(self) -> bool:
        return self.net_total is not None

    @property
    def net_relative_to_par(self) -> Optional[int]:
        if self.handicap_strokes is None:
            return None
        return self.relative_to_par - self.handicap_strokes


def handicap_strokes_for(handicap_index) -> Optional[int]:
    if handicap_index is None:
        return None
    return int(round_half_up(handicap_index))


def resolve(entry: RawEntry, pars: CourseParProfile, policy: Optional[RoundCompletionPolicy] = None,
            now: Optional[datetime] = None) -> ResolvedScore:
    """
    Turn one participant's raw scorecard into gross, relative and net totals.

    A manual total, when present, replaces the hole-by-hole card entirely and
    counts as a full round. Otherwise only holes with strokes add to the gross
    and relative totals, while gave-up holes still count as played.

    Args:
        entry: The participant's raw entry
        pars: Par profile of the course the round was played on
        policy: Round completion rules of the competition, scheduled by default
        now: Reference time for open window checks

    Returns:
        ResolvedScore with eligible set when the round can be ranked
    """
    policy = policy or RoundCompletionPolicy()

    if entry.manual_total is not None:
        holes_played = HOLES_PER_ROUND
        gross_total = entry.manual_total.total
        relative_to_par = gross_total - pars.total
    else:
        holes_played = 0
        gross_total = 0
        relative_to_par = 0
        for hole_number, hole_score in enumerate(entry.hole_scores, 1):
            if hole_score.kind is HoleScoreKind.STROKES:
                holes_played += 1
                gross_total += hole_score.strokes
                relative_to_par += hole_score.strokes - pars.par_for(hole_number)
            elif hole_score.kind is HoleScoreKind.GAVE_UP:
                holes_played += 1

    handicap_strokes = handicap_strokes_for(entry.handicap_index)
    net_total = gross_total - handicap_strokes if handicap_strokes is not None else None

    eligible = (
        not entry.is_dq
        and holes_played == HOLES_PER_ROUND
        and policy.is_satisfied(entry.is_locked, now)
    )

    return ResolvedScore(
        holes_played=holes_played,
        gross_total=gross_total,
        relative_to_par=relative_to_par,
        net_total=net_total,
        handicap_strokes=handicap_strokes,
        eligible=eligible,
        is_manual=entry.manual_total is not None,
    )
