import structlog
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from scores.ranking import GROSS, SCORING_TYPES
from tours.models import Competition, CompetitionResult, TeamResult, Tour, TourEnrollment
from tours.serializers import (
    CompetitionResultSerializer,
    CompetitionSerializer,
    StandingsQuerySerializer,
    TeamResultSerializer,
    TourEnrollmentSerializer,
    TourSerializer,
    TourStandingSerializer,
)
from tours.services import CompetitionResultsService
from tours.tasks import finalize_competition

logger = structlog.get_logger(__name__)


class TourViewSet(viewsets.ModelViewSet):
    serializer_class = TourSerializer

    def get_queryset(self):
        queryset = Tour.objects.all()
        season = self.request.query_params.get("season", None)

        if season is not None:
            queryset = queryset.filter(season=season)
        return queryset.order_by("-season", "name")


class TourEnrollmentViewSet(viewsets.ModelViewSet):
    serializer_class = TourEnrollmentSerializer

    def get_queryset(self):
        queryset = TourEnrollment.objects.all()
        tour_id = self.request.query_params.get("tour", None)
        player_id = self.request.query_params.get("player", None)

        if tour_id is not None:
            queryset = queryset.filter(tour=tour_id)
        if player_id is not None:
            queryset = queryset.filter(player=player_id)
        return queryset


class CompetitionViewSet(viewsets.ModelViewSet):
    serializer_class = CompetitionSerializer

    def get_queryset(self):
        queryset = Competition.objects.all()
        tour_id = self.request.query_params.get("tour", None)

        if tour_id is not None:
            queryset = queryset.filter(tour=tour_id)
        return queryset


class CompetitionResultViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = CompetitionResultSerializer

    def get_queryset(self):
        competition_id = self.request.query_params.get("competition", None)
        player_id = self.request.query_params.get("player", None)
        scoring_type = self.request.query_params.get("scoring_type", GROSS)
        if scoring_type not in SCORING_TYPES:
            scoring_type = GROSS

        service = CompetitionResultsService()
        if competition_id is not None:
            return service.get_competition_results(competition_id, scoring_type)
        if player_id is not None:
            return service.get_player_results(player_id, scoring_type)
        return CompetitionResult.objects.none()


class TeamResultViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = TeamResultSerializer

    def get_queryset(self):
        competition_id = self.request.query_params.get("competition", None)

        if competition_id is None:
            return TeamResult.objects.none()
        return CompetitionResultsService().get_team_results(competition_id)


@api_view(("POST",))
@permission_classes((permissions.IsAdminUser,))
def finalize_results(request, competition_id):
    background = str(request.data.get("background", "false")).lower() == "true"

    logger.info(
        "Competition finalization requested",
        user=request.user.username,
        competition_id=competition_id,
        background=background,
    )

    if background:
        finalize_competition.delay(competition_id)
        return Response({"competition_id": competition_id, "queued": True}, status=status.HTTP_202_ACCEPTED)

    result = CompetitionResultsService().finalize_competition_results(competition_id)
    return Response(result.to_dict(), status=status.HTTP_200_OK)


@api_view(("GET",))
@permission_classes((permissions.AllowAny,))
def tour_standings(request, tour_id):
    query = StandingsQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    service = CompetitionResultsService()
    if query.validated_data["kind"] == "team":
        standings = service.get_team_tour_standings(tour_id)
    else:
        standings = service.get_tour_standings_from_results(tour_id, query.validated_data.get("scoring_type"))

    serializer = TourStandingSerializer(standings, many=True)
    return Response({
        "tour_id": tour_id,
        "total_competitions": service.count_finalized_competitions(tour_id),
        "standings": serializer.data,
    }, status=200)


@api_view(("GET",))
@permission_classes((permissions.AllowAny,))
def player_tour_points(request, tour_id, player_id):
    query = StandingsQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    standing = CompetitionResultsService().get_player_tour_points(
        player_id, tour_id, query.validated_data.get("scoring_type")
    )
    return Response(TourStandingSerializer(standing).data, status=200)
