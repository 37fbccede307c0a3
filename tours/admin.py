from django.contrib import admin

from scores.models import Participant
from tours import models
from tours.services import CompetitionResultsService


class TourEnrollmentInline(admin.TabularInline):
    model = models.TourEnrollment
    can_delete = True
    extra = 0
    verbose_name_plural = "Enrollments"
    fields = ["player", "status", ]


class ParticipantInline(admin.TabularInline):
    model = Participant
    can_delete = True
    extra = 0
    verbose_name_plural = "Participants"
    fields = ["player", "team", "manual_total", "handicap_index", "is_locked", "is_dq", ]


@admin.register(models.Tour)
class TourAdmin(admin.ModelAdmin):
    fields = ["name", "season", "scoring_mode", "point_template", ]
    inlines = [TourEnrollmentInline, ]
    list_display = ["name", "season", "scoring_mode", ]
    list_filter = ("season", )
    ordering = ["-season", "name", ]
    save_on_top = True


@admin.register(models.Competition)
class CompetitionAdmin(admin.ModelAdmin):
    fieldsets = (
        (None, {
            "fields": ("tour", "course", "name", "date", "points_multiplier", )
        }),
        ("Start", {
            "fields": ("start_mode", "open_start", "open_end", )
        }),
        ("Results", {
            "fields": ("is_results_final", "results_finalized_at", )
        }),
    )
    readonly_fields = ("is_results_final", "results_finalized_at", )
    inlines = [ParticipantInline, ]
    list_display = ["name", "date", "tour", "course", "is_results_final", ]
    list_filter = ("tour", "is_results_final", )
    ordering = ["-date", ]
    actions = ["finalize_results", ]
    save_on_top = True

    @admin.action(description="Finalize results for the selected competitions")
    def finalize_results(self, request, queryset):
        service = CompetitionResultsService()
        for competition in queryset:
            result = service.finalize_competition_results(competition.id)
            self.message_user(request, "{}: {} gross, {} net, {} team results, {} errors".format(
                competition.name, result.gross_results, result.net_results, result.team_results,
                len(result.errors)))


@admin.register(models.CompetitionResult)
class CompetitionResultAdmin(admin.ModelAdmin):
    list_display = ["competition", "player", "scoring_type", "position", "points", "gross_score", "net_score", ]
    list_filter = ("competition", "scoring_type", )
    ordering = ["competition", "scoring_type", "position", ]


@admin.register(models.TeamResult)
class TeamResultAdmin(admin.ModelAdmin):
    list_display = ["competition", "team", "position", "points", "total_relative_score", "total_shots", ]
    list_filter = ("competition", )
    ordering = ["competition", "position", ]
