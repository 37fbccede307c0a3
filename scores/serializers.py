from rest_framework import serializers

from players.serializers import SimplePlayerSerializer
from scores.models import Participant


class ParticipantSerializer(serializers.ModelSerializer):

    player = SimplePlayerSerializer(read_only=True)

    class Meta:
        model = Participant
        fields = ("id", "competition", "player", "team", "hole_scores", "manual_out", "manual_in", "manual_total",
                  "handicap_index", "is_locked", "is_dq", "dq_reason", )
        read_only_fields = fields


class ScoreEntrySerializer(serializers.Serializer):
    hole = serializers.IntegerField(required=False, min_value=1, max_value=18)
    score = serializers.IntegerField(required=False)
    manual_total = serializers.IntegerField(required=False)
    manual_out = serializers.IntegerField(required=False, allow_null=True)
    manual_in = serializers.IntegerField(required=False, allow_null=True)

    def validate(self, attrs):
        has_hole = "hole" in attrs or "score" in attrs
        if has_hole and ("hole" not in attrs or "score" not in attrs):
            raise serializers.ValidationError("A hole score needs both a hole and a score")
        if has_hole == ("manual_total" in attrs):
            raise serializers.ValidationError("Send either a hole score or a manual total")
        return attrs
