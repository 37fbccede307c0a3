from django.db import models
from django.db.models import CASCADE, DO_NOTHING, SET_NULL, UniqueConstraint
from simple_history.models import HistoricalRecords

from core.exceptions import InvalidScoreEntryError
from courses.pars import HOLES_PER_ROUND
from scores.entry import HoleScore, ManualTotal, RawEntry


def blank_scorecard():
    return [0] * HOLES_PER_ROUND


class Participant(models.Model):
    competition = models.ForeignKey(verbose_name="Competition", to="tours.Competition", on_delete=CASCADE,
                                    related_name="participants")
    player = models.ForeignKey(verbose_name="Player", to="players.Player", on_delete=DO_NOTHING,
                               related_name="participations")
    team = models.ForeignKey(verbose_name="Team", to="players.Team", null=True, blank=True, on_delete=SET_NULL,
                             related_name="participants")
    hole_scores = models.JSONField(verbose_name="Hole scores", default=blank_scorecard)
    manual_out = models.IntegerField(verbose_name="Manual out", blank=True, null=True)
    manual_in = models.IntegerField(verbose_name="Manual in", blank=True, null=True)
    manual_total = models.IntegerField(verbose_name="Manual total", blank=True, null=True)
    handicap_index = models.DecimalField(verbose_name="Handicap Index Snapshot", max_digits=4, decimal_places=1,
                                         blank=True, null=True)
    is_locked = models.BooleanField(verbose_name="Locked", default=False)
    is_dq = models.BooleanField(verbose_name="Disqualified", default=False)
    dq_reason = models.CharField(verbose_name="DQ reason", max_length=200, blank=True, null=True)

    history = HistoricalRecords()

    class Meta:
        constraints = [
            UniqueConstraint(fields=["competition", "player"], name="unique_competition_participant")
        ]

    def has_scores(self):
        return self.manual_total is not None or any(value != 0 for value in (self.hole_scores or []))

    def capture_handicap(self):
        """
        Snapshot the player's handicap index on the first score entry. Once any
        score exists the snapshot is never refreshed from the player record.
        """
        if self.handicap_index is None and not self.has_scores():
            self.handicap_index = self.player.handicap_index

    def record_hole_score(self, hole_number, value):
        """
        Store one hole of the scorecard.

        Raises:
            InvalidScoreEntryError: The scorecard is locked, the hole number is
                not 1 to 18, or the value is not -1, 0 or a positive stroke count.
        """
        if self.is_locked:
            raise InvalidScoreEntryError("This scorecard is locked")
        if isinstance(hole_number, bool) or not isinstance(hole_number, int) \
                or not 1 <= hole_number <= HOLES_PER_ROUND:
            raise InvalidScoreEntryError(f"Hole number must be between 1 and {HOLES_PER_ROUND}")
        HoleScore.from_value(value, hole_number)

        self.capture_handicap()
        scores = list(self.hole_scores or blank_scorecard())
        scores[hole_number - 1] = value
        self.hole_scores = scores

    def record_manual_total(self, total, out_score=None, in_score=None):
        if self.is_locked:
            raise InvalidScoreEntryError("This scorecard is locked")
        ManualTotal(total=total, out_score=out_score, in_score=in_score)

        self.capture_handicap()
        self.manual_total = total
        self.manual_out = out_score
        self.manual_in = in_score

    def to_raw_entry(self):
        manual_total = None
        if self.manual_total is not None:
            manual_total = ManualTotal(total=self.manual_total, out_score=self.manual_out, in_score=self.manual_in)
        return RawEntry.from_values(
            self.hole_scores,
            manual_total=manual_total,
            handicap_index=self.handicap_index,
            is_locked=self.is_locked,
            is_dq=self.is_dq,
        )

    def __str__(self):
        return "{}: {}".format(self.competition, self.player)
