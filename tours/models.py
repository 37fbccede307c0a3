from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import CASCADE, PROTECT, SET_NULL, UniqueConstraint

from core.util import current_season
from points.rules import PointsRule
from scores.ranking import GROSS, NET
from scores.resolver import OPEN, SCHEDULED, RoundCompletionPolicy

SCORING_MODE_CHOICES = (
    ("gross", "Gross"),
    ("net", "Net"),
    ("both", "Gross and Net"),
)
SCORING_TYPE_CHOICES = (
    (GROSS, "Gross"),
    (NET, "Net"),
)
START_MODE_CHOICES = (
    (SCHEDULED, "Scheduled Tee Times"),
    (OPEN, "Open Window"),
)
ENROLLMENT_STATUS_CHOICES = (
    ("A", "Active"),
    ("P", "Pending"),
    ("W", "Withdrawn"),
)


class Tour(models.Model):
    name = models.CharField(verbose_name="Tour name", max_length=100)
    season = models.IntegerField(verbose_name="Season", default=current_season)
    scoring_mode = models.CharField(verbose_name="Scoring mode", max_length=5, choices=SCORING_MODE_CHOICES,
                                    default="gross")
    point_template = models.ForeignKey(verbose_name="Point template", to="points.PointTemplate", null=True,
                                       blank=True, on_delete=SET_NULL, related_name="+")

    class Meta:
        constraints = [
            UniqueConstraint(fields=["name", "season"], name="unique_tour_name_season")
        ]

    @property
    def default_scoring_type(self):
        return NET if self.scoring_mode == "net" else GROSS

    def active_enrollment_count(self):
        return self.enrollments.filter(status="A").count()

    def __str__(self):
        return "{} {}".format(self.season, self.name)


class TourEnrollment(models.Model):
    tour = models.ForeignKey(verbose_name="Tour", to=Tour, on_delete=CASCADE, related_name="enrollments")
    player = models.ForeignKey(verbose_name="Player", to="players.Player", on_delete=CASCADE,
                               related_name="enrollments")
    status = models.CharField(verbose_name="Status", max_length=1, choices=ENROLLMENT_STATUS_CHOICES,
                              default="A")

    class Meta:
        constraints = [
            UniqueConstraint(fields=["tour", "player"], name="unique_tour_player")
        ]

    def __str__(self):
        return "{}: {}".format(self.tour, self.player)


class Competition(models.Model):
    tour = models.ForeignKey(verbose_name="Tour", to=Tour, null=True, blank=True, on_delete=CASCADE,
                             related_name="competitions")
    course = models.ForeignKey(verbose_name="Course", to="courses.Course", null=True, blank=True,
                               on_delete=PROTECT)
    name = models.CharField(verbose_name="Competition name", max_length=100)
    date = models.DateField(verbose_name="Date")
    start_mode = models.CharField(verbose_name="Start mode", max_length=10, choices=START_MODE_CHOICES,
                                  default=SCHEDULED)
    open_start = models.DateTimeField(verbose_name="Open window start", blank=True, null=True)
    open_end = models.DateTimeField(verbose_name="Open window end", blank=True, null=True)
    points_multiplier = models.DecimalField(verbose_name="Points multiplier", max_digits=4, decimal_places=2,
                                            default=1)
    is_results_final = models.BooleanField(verbose_name="Results final", default=False)
    results_finalized_at = models.DateTimeField(verbose_name="Results finalized at", blank=True, null=True)

    class Meta:
        ordering = ("date", "name", )

    def clean(self):
        if self.start_mode == OPEN:
            if self.open_start is None or self.open_end is None:
                raise ValidationError("An open competition requires both an open window start and end")
            if self.open_start > self.open_end:
                raise ValidationError("The open window start must be earlier than its end")
        if self.points_multiplier is not None and self.points_multiplier <= 0:
            raise ValidationError("The points multiplier must be greater than zero")

    def completion_policy(self):
        return RoundCompletionPolicy(start_mode=self.start_mode, open_end=self.open_end)

    def points_rule(self):
        multiplier = self.points_multiplier or 1
        if self.tour is not None and self.tour.point_template is not None:
            return self.tour.point_template.to_rule(multiplier)
        return PointsRule.default_formula(multiplier)

    def __str__(self):
        return "{} {}".format(self.date, self.name)


class CompetitionResult(models.Model):
    competition = models.ForeignKey(verbose_name="Competition", to=Competition, on_delete=CASCADE,
                                    related_name="results")
    participant = models.ForeignKey(verbose_name="Participant", to="scores.Participant", on_delete=CASCADE,
                                    related_name="results")
    player = models.ForeignKey(verbose_name="Player", to="players.Player", on_delete=CASCADE,
                               related_name="competition_results")
    scoring_type = models.CharField(verbose_name="Scoring type", max_length=5, choices=SCORING_TYPE_CHOICES)
    position = models.IntegerField(verbose_name="Position")
    points = models.IntegerField(verbose_name="Points", default=0)
    gross_score = models.IntegerField(verbose_name="Gross score")
    net_score = models.IntegerField(verbose_name="Net score", blank=True, null=True)
    relative_to_par = models.IntegerField(verbose_name="Relative to par")
    calculated_at = models.DateTimeField(verbose_name="Calculated at", auto_now_add=True)

    class Meta:
        constraints = [
            UniqueConstraint(fields=["competition", "participant", "scoring_type"], name="unique_competition_result")
        ]
        ordering = ["competition", "scoring_type", "position"]

    def __str__(self):
        return "{} - {} {} ({})".format(self.competition.name, self.player, self.scoring_type, self.position)


class TeamResult(models.Model):
    competition = models.ForeignKey(verbose_name="Competition", to=Competition, on_delete=CASCADE,
                                    related_name="team_results")
    team = models.ForeignKey(verbose_name="Team", to="players.Team", on_delete=CASCADE,
                             related_name="results")
    position = models.IntegerField(verbose_name="Position")
    points = models.IntegerField(verbose_name="Points", default=0)
    total_relative_score = models.IntegerField(verbose_name="Total relative to par")
    total_shots = models.IntegerField(verbose_name="Total shots")
    calculated_at = models.DateTimeField(verbose_name="Calculated at", auto_now_add=True)

    class Meta:
        constraints = [
            UniqueConstraint(fields=["competition", "team"], name="unique_competition_team")
        ]
        ordering = ["competition", "position"]

    def __str__(self):
        return "{} - {} ({})".format(self.competition.name, self.team, self.position)
