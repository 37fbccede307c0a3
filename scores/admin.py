from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from scores import models


@admin.register(models.Participant)
class ParticipantAdmin(SimpleHistoryAdmin):
    fields = ["competition", "player", "team", "hole_scores", "manual_out", "manual_in", "manual_total",
              "handicap_index", "is_locked", "is_dq", "dq_reason", ]
    list_display = ["competition", "player", "team", "manual_total", "is_locked", "is_dq", ]
    ordering = ["competition", "player", ]
    search_fields = ("player__first_name", "player__last_name", )
    list_filter = ("competition", "is_locked", "is_dq", )

    save_on_top = True
