from django.contrib import admin

from .models import Player, Team


@admin.register(Player)
class PlayerAdmin(admin.ModelAdmin):
    fields = ["first_name", "last_name", "email", "handicap_index", "user", ]
    list_display = ["first_name", "last_name", "email", "handicap_index", ]
    list_display_links = ("first_name", "last_name", )
    ordering = ["last_name", "first_name", ]
    search_fields = ("first_name", "last_name", "email", )
    save_on_top = True


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    fields = ["name", ]
    list_display = ["name", ]
    search_fields = ("name", )
