from django.contrib.auth.models import User
from django.db import models
from django.db.models import DO_NOTHING


class Player(models.Model):
    first_name = models.CharField(verbose_name="First name", max_length=30)
    last_name = models.CharField(verbose_name="Last name", max_length=30)
    email = models.CharField(verbose_name="Email", unique=True, max_length=200)
    handicap_index = models.DecimalField(verbose_name="Handicap Index", max_digits=4, decimal_places=1, blank=True,
                                         null=True)
    user = models.ForeignKey(verbose_name="User record", to=User, null=True, blank=True, on_delete=DO_NOTHING)

    class Meta:
        ordering = ("last_name", "first_name")

    def player_name(self):
        return "{} {}".format(self.first_name, self.last_name)

    def __str__(self):
        return self.player_name()


class Team(models.Model):
    name = models.CharField(verbose_name="Team name", max_length=60, unique=True)

    class Meta:
        ordering = ("name", )

    def __str__(self):
        return self.name
