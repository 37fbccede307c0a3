from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Optional

import structlog
from django.db import transaction
from django.utils import timezone as tz

from core.exceptions import CompetitionNotFoundError, InvalidScoreEntryError, MissingParProfileError
from courses.pars import CourseParProfile
from players.models import Player, Team
from points.allocator import allocate
from scores.ranking import GROSS, NET, SCORING_TYPES, RankedEntry, rank
from scores.resolver import resolve
from tours.models import Competition, CompetitionResult, TeamResult, Tour
from tours.standings import TourStanding, build_standings
from tours.teams import aggregate_teams, allocate_team_points, rank_teams

logger = structlog.get_logger(__name__)


class FinalizeResult:
    """Container for competition finalization results"""

    def __init__(self, competition: Competition):
        self.competition_id = competition.id
        self.competition_name = competition.name
        self.errors = []
        self.gross_results = 0
        self.net_results = 0
        self.team_results = 0
        self.unranked_participants = 0
        self.finalized_at = None

    def add_error(self, error: str, participant_id=None):
        """Add an error for a participant that could not be scored"""
        self.errors.append(error)
        logger.error(
            "Finalize competition error",
            competition_id=self.competition_id,
            participant_id=participant_id,
            error=error,
        )

    def to_dict(self) -> Dict:
        """Convert results to dictionary for API response"""
        return {
            "competition": self.competition_name,
            "competition_id": self.competition_id,
            "gross_results": self.gross_results,
            "net_results": self.net_results,
            "team_results": self.team_results,
            "unranked_participants": self.unranked_participants,
            "finalized_at": self.finalized_at.isoformat() if self.finalized_at else None,
            "errors": self.errors,
        }


class CompetitionResultsService:
    """
    Turns a competition's score entries into persisted results and derives
    tour standings from them.

    Finalizing is idempotent: every run replaces the competition's previous
    result rows inside one transaction, so a re-run after a score correction
    leaves exactly one set of results behind.
    """

    def finalize_competition_results(self, competition_id, now: Optional[datetime] = None) -> FinalizeResult:
        """
        Resolve, rank and allocate points for one competition, then store the
        gross, net and team results.

        Args:
            competition_id: The competition to finalize
            now: Reference time for open window checks, defaults to now

        Returns:
            FinalizeResult with counts and per-participant errors

        Raises:
            CompetitionNotFoundError: No competition has this id.
            MissingParProfileError: The competition course lacks 18 pars.
        """
        competition = self._get_competition(competition_id)
        pars = self._get_par_profile(competition)
        result = FinalizeResult(competition)

        participants = list(competition.participants.select_related("player"))
        by_id = {participant.id: participant for participant in participants}
        scores = self._resolve_participants(competition, pars, participants, result, now)

        rule = competition.points_rule()
        enrolled = competition.tour.active_enrollment_count() if competition.tour is not None else 0

        result_rows = []
        ranked_views = {}
        for scoring_type in SCORING_TYPES:
            ranked = rank(scores, scoring_type)
            ranked_views[scoring_type] = ranked
            field_size = enrolled or len(ranked)
            points = allocate(ranked, rule, field_size)
            result_rows.extend(self._build_result_rows(competition, ranked, points, by_id))

        result.gross_results = len(ranked_views[GROSS])
        result.net_results = len(ranked_views[NET])
        result.unranked_participants = len(participants) - result.gross_results

        team_rows = self._build_team_rows(competition, participants, ranked_views[GROSS], rule)
        result.team_results = len(team_rows)

        with transaction.atomic():
            self._delete_existing_results(competition)
            CompetitionResult.objects.bulk_create(result_rows)
            TeamResult.objects.bulk_create(team_rows)

            competition.is_results_final = True
            competition.results_finalized_at = tz.now()
            competition.save(update_fields=["is_results_final", "results_finalized_at"])

        result.finalized_at = competition.results_finalized_at
        logger.info(
            "Competition results finalized",
            competition_id=competition.id,
            gross_results=result.gross_results,
            net_results=result.net_results,
            team_results=result.team_results,
            errors=len(result.errors),
        )
        return result

    def recalculate_results(self, competition_id, now: Optional[datetime] = None) -> FinalizeResult:
        logger.info("Recalculating competition results", competition_id=competition_id)
        return self.finalize_competition_results(competition_id, now)

    def is_competition_finalized(self, competition_id) -> bool:
        return Competition.objects.filter(pk=competition_id, is_results_final=True).exists()

    def get_competition_results(self, competition_id, scoring_type: str = GROSS):
        return CompetitionResult.objects \
            .filter(competition=competition_id, scoring_type=scoring_type) \
            .select_related("player") \
            .order_by("position", "player__last_name", "player__first_name")

    def get_team_results(self, competition_id):
        return TeamResult.objects \
            .filter(competition=competition_id) \
            .select_related("team") \
            .order_by("position", "team__name")

    def get_player_results(self, player_id, scoring_type: str = GROSS):
        return CompetitionResult.objects \
            .filter(player=player_id, scoring_type=scoring_type, competition__is_results_final=True) \
            .select_related("competition") \
            .order_by("competition__date")

    def get_tour_standings_from_results(self, tour_id, scoring_type: Optional[str] = None) -> List[TourStanding]:
        """
        Player standings for a tour, built from the results of its finalized
        competitions. The tour's own scoring mode picks the view when no
        scoring type is given.
        """
        scoring_type = scoring_type or self._default_scoring_type(tour_id)
        results = CompetitionResult.objects.filter(
            competition__tour=tour_id,
            competition__is_results_final=True,
            scoring_type=scoring_type,
        ).order_by("competition__date", "competition__name", "competition_id")
        standings = build_standings(results, entity="player_id")

        players = Player.objects.filter(pk__in=[standing.entity_id for standing in standings])
        names = {player.id: player.player_name() for player in players}
        return self._label_standings(tour_id, standings, names)

    def get_team_tour_standings(self, tour_id) -> List[TourStanding]:
        results = TeamResult.objects \
            .filter(competition__tour=tour_id, competition__is_results_final=True) \
            .order_by("competition__date", "competition__name", "competition_id")
        standings = build_standings(results, entity="team_id", score="total_relative_score")

        names = dict(
            Team.objects.filter(pk__in=[standing.entity_id for standing in standings]).values_list("id", "name")
        )
        return self._label_standings(tour_id, standings, names)

    def count_finalized_competitions(self, tour_id) -> int:
        return Competition.objects.filter(tour=tour_id, is_results_final=True).count()

    def get_player_tour_points(self, player_id, tour_id, scoring_type: Optional[str] = None) -> TourStanding:
        """
        The player's standing on the tour. A player without finalized results
        has zero points, no competitions and no position.
        """
        for standing in self.get_tour_standings_from_results(tour_id, scoring_type):
            if standing.entity_id == player_id:
                return standing

        player = Player.objects.filter(pk=player_id).first()
        return TourStanding(
            entity_id=player_id,
            total_points=0,
            competitions_played=0,
            position=None,
            name=player.player_name() if player is not None else None,
        )

    @staticmethod
    def _label_standings(tour_id, standings, names) -> List[TourStanding]:
        competitions = {
            competition_id: (name, competition_date)
            for competition_id, name, competition_date in Competition.objects
            .filter(tour=tour_id, is_results_final=True)
            .values_list("id", "name", "date")
        }
        return [
            replace(
                standing,
                name=names.get(standing.entity_id),
                competitions=tuple(
                    replace(
                        entry,
                        competition_name=competitions[entry.competition_id][0],
                        competition_date=competitions[entry.competition_id][1],
                    )
                    for entry in standing.competitions
                ),
            )
            for standing in standings
        ]

    @staticmethod
    def _get_competition(competition_id) -> Competition:
        try:
            return Competition.objects.select_related("tour__point_template", "course").get(pk=competition_id)
        except Competition.DoesNotExist:
            raise CompetitionNotFoundError(competition_id)

    @staticmethod
    def _get_par_profile(competition: Competition) -> CourseParProfile:
        if competition.course is None:
            raise MissingParProfileError(f"Competition {competition.id} is not assigned to a course")
        return competition.course.par_profile()

    @staticmethod
    def _default_scoring_type(tour_id) -> str:
        tour = Tour.objects.filter(pk=tour_id).first()
        return tour.default_scoring_type if tour is not None else GROSS

    @staticmethod
    def _resolve_participants(competition, pars, participants, result, now):
        policy = competition.completion_policy()
        scores = []
        for participant in participants:
            try:
                score = resolve(participant.to_raw_entry(), pars, policy, now)
            except InvalidScoreEntryError as ex:
                result.add_error(f"{participant.player}: {ex.detail}", participant.id)
                continue
            scores.append((participant.id, score))
        return scores

    @staticmethod
    def _build_result_rows(competition, ranked: List[RankedEntry], points, by_id) -> List[CompetitionResult]:
        return [
            CompetitionResult(
                competition=competition,
                participant_id=entry.participant_id,
                player_id=by_id[entry.participant_id].player_id,
                scoring_type=entry.scoring_type,
                position=entry.position,
                points=points[entry.participant_id],
                gross_score=entry.score.gross_total,
                net_score=entry.score.net_total,
                relative_to_par=entry.ranking_score,
            )
            for entry in ranked
        ]

    @staticmethod
    def _build_team_rows(competition, participants, gross_ranked, rule) -> List[TeamResult]:
        membership = {
            participant.id: participant.team_id
            for participant in participants
            if participant.team_id is not None
        }
        if not membership:
            return []

        field_size = len(set(membership.values()))
        aggregates = aggregate_teams(gross_ranked, membership, competition_id=competition.id)
        ranked = allocate_team_points(rank_teams(aggregates), rule, field_size)

        return [
            TeamResult(
                competition=competition,
                team_id=team.team_id,
                position=team.position,
                points=team.points,
                total_relative_score=team.total_relative_score,
                total_shots=team.total_shots,
            )
            for team in ranked
        ]

    @staticmethod
    def _delete_existing_results(competition: Competition) -> int:
        deleted_count = CompetitionResult.objects.filter(competition=competition).delete()[0]
        deleted_count += TeamResult.objects.filter(competition=competition).delete()[0]
        logger.info(
            "Deleted existing competition results",
            competition_id=competition.id,
            deleted_count=deleted_count,
        )
        return deleted_count
