import structlog
from django.db import transaction
from django.shortcuts import get_object_or_404
from rest_framework import permissions, viewsets
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from scores.models import Participant
from scores.serializers import ParticipantSerializer, ScoreEntrySerializer

logger = structlog.get_logger(__name__)


class ParticipantViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = ParticipantSerializer

    def get_queryset(self):
        queryset = Participant.objects.all()
        competition_id = self.request.query_params.get("competition", None)
        player_id = self.request.query_params.get("player", None)

        if competition_id is not None:
            queryset = queryset.filter(competition=competition_id)
        if player_id is not None:
            queryset = queryset.filter(player=player_id)

        return queryset.select_related("player").order_by("player__last_name", "player__first_name")


@api_view(("POST",))
@permission_classes((permissions.IsAuthenticated,))
def record_score(request, participant_id):
    entry = ScoreEntrySerializer(data=request.data)
    entry.is_valid(raise_exception=True)
    data = entry.validated_data

    with transaction.atomic():
        participant = get_object_or_404(
            Participant.objects.select_for_update().select_related("player"), pk=participant_id
        )
        if "manual_total" in data:
            participant.record_manual_total(data["manual_total"], data.get("manual_out"), data.get("manual_in"))
        else:
            participant.record_hole_score(data["hole"], data["score"])
        participant.save()

    logger.info("Score recorded", participant_id=participant_id, competition_id=participant.competition_id)
    return Response(ParticipantSerializer(participant).data, status=200)
