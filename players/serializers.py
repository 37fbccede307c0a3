from rest_framework import serializers

from .models import Player, Team


class SimplePlayerSerializer(serializers.ModelSerializer):

    class Meta:
        model = Player
        fields = ("id", "first_name", "last_name", "handicap_index", )


class TeamSerializer(serializers.ModelSerializer):

    class Meta:
        model = Team
        fields = ("id", "name", )
