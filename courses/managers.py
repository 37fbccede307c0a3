from django.db import models
from django.db.models import Prefetch


class CourseManager(models.Manager):

    def get_queryset(self):
        from courses.models import Hole
        return (
            super().get_queryset().prefetch_related(
                Prefetch("holes", queryset=Hole.objects.order_by("hole_number"))
            )
        )
