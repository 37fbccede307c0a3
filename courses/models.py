from django.db import models
from django.db.models import CASCADE, UniqueConstraint

from courses.managers import CourseManager
from courses.pars import CourseParProfile


class Course(models.Model):
    name = models.CharField(max_length=100, unique=True)
    number_of_holes = models.IntegerField(default=18)

    objects = CourseManager()

    def par_profile(self):
        """
        Build the immutable par profile for this course from its holes.

        Raises:
            MissingParProfileError: The course does not have exactly 18 holes.
            InvalidParProfileError: A hole has a par outside 3 to 6.
        """
        return CourseParProfile.from_holes(self.holes.all())

    def __str__(self):
        return self.name


class Hole(models.Model):
    course = models.ForeignKey(Course, related_name="holes", on_delete=CASCADE)
    hole_number = models.IntegerField(default=0)
    par = models.IntegerField(default=0)

    class Meta:
        constraints = [
            UniqueConstraint(fields=["course", "hole_number"], name="unique_course_holenumber")
        ]

    def __str__(self):
        return "{} Hole {}".format(self.course.name, self.hole_number)
