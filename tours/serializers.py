from rest_framework import serializers

from players.serializers import SimplePlayerSerializer, TeamSerializer
from scores.ranking import SCORING_TYPES
from .models import Competition, CompetitionResult, TeamResult, Tour, TourEnrollment


class TourSerializer(serializers.ModelSerializer):

    class Meta:
        model = Tour
        fields = ("id", "name", "season", "scoring_mode", "point_template", )


class TourEnrollmentSerializer(serializers.ModelSerializer):

    class Meta:
        model = TourEnrollment
        fields = ("id", "tour", "player", "status", )


class CompetitionSerializer(serializers.ModelSerializer):

    class Meta:
        model = Competition
        fields = ("id", "tour", "course", "name", "date", "start_mode", "open_start", "open_end",
                  "points_multiplier", "is_results_final", "results_finalized_at", )
        read_only_fields = ("is_results_final", "results_finalized_at", )

    def validate(self, attrs):
        start_mode = attrs.get("start_mode", getattr(self.instance, "start_mode", None))
        open_start = attrs.get("open_start", getattr(self.instance, "open_start", None))
        open_end = attrs.get("open_end", getattr(self.instance, "open_end", None))
        multiplier = attrs.get("points_multiplier")

        if start_mode == "open":
            if open_start is None or open_end is None:
                raise serializers.ValidationError("An open competition requires both an open window start and end")
            if open_start > open_end:
                raise serializers.ValidationError("The open window start must be earlier than its end")
        if multiplier is not None and multiplier <= 0:
            raise serializers.ValidationError("The points multiplier must be greater than zero")
        return attrs


class CompetitionResultSerializer(serializers.ModelSerializer):

    player = SimplePlayerSerializer(read_only=True)

    class Meta:
        model = CompetitionResult
        fields = ("id", "competition", "participant", "player", "scoring_type", "position", "points",
                  "gross_score", "net_score", "relative_to_par", "calculated_at", )


class TeamResultSerializer(serializers.ModelSerializer):

    team = TeamSerializer(read_only=True)

    class Meta:
        model = TeamResult
        fields = ("id", "competition", "team", "position", "points", "total_relative_score", "total_shots",
                  "calculated_at", )


class StandingCompetitionSerializer(serializers.Serializer):
    competition_id = serializers.IntegerField()
    competition_name = serializers.CharField(allow_null=True)
    competition_date = serializers.DateField(allow_null=True)
    points = serializers.IntegerField()
    position = serializers.IntegerField(allow_null=True)
    relative_to_par = serializers.IntegerField(allow_null=True)


class TourStandingSerializer(serializers.Serializer):
    entity_id = serializers.IntegerField()
    name = serializers.CharField(allow_null=True)
    total_points = serializers.IntegerField()
    competitions_played = serializers.IntegerField()
    position = serializers.IntegerField(allow_null=True)
    competitions = StandingCompetitionSerializer(many=True)


class StandingsQuerySerializer(serializers.Serializer):
    scoring_type = serializers.ChoiceField(choices=SCORING_TYPES, required=False)
    kind = serializers.ChoiceField(choices=("player", "team"), required=False, default="player")
