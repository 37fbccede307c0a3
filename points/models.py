from django.db import models
from django.db.models import CASCADE, UniqueConstraint

from points.rules import PointsRule


class PointTemplate(models.Model):
    name = models.CharField(verbose_name="Template name", max_length=60)
    tour = models.ForeignKey(verbose_name="Tour", to="tours.Tour", null=True, blank=True, on_delete=CASCADE,
                             related_name="point_templates")
    default_points = models.IntegerField(verbose_name="Points beyond listed positions", default=0)

    class Meta:
        ordering = ("name", )

    def to_rule(self, multiplier=1):
        template = {entry.position: entry.points for entry in self.positions.all()}
        return PointsRule.from_template(template, default_points=self.default_points, multiplier=multiplier)

    def __str__(self):
        return self.name


class PointTemplatePosition(models.Model):
    template = models.ForeignKey(verbose_name="Template", to=PointTemplate, on_delete=CASCADE,
                                 related_name="positions")
    position = models.PositiveIntegerField(verbose_name="Position")
    points = models.IntegerField(verbose_name="Points")

    class Meta:
        ordering = ("template", "position", )
        constraints = [
            UniqueConstraint(fields=["template", "position"], name="unique_template_position")
        ]

    def __str__(self):
        return "{} #{}: {}".format(self.template.name, self.position, self.points)
