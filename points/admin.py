from django.contrib import admin

from points.models import PointTemplate, PointTemplatePosition


class PointTemplatePositionInline(admin.TabularInline):
    model = PointTemplatePosition
    can_delete = True
    extra = 0
    fields = ["position", "points", ]


@admin.register(PointTemplate)
class PointTemplateAdmin(admin.ModelAdmin):
    fields = ["name", "tour", "default_points", ]
    list_display = ["name", "tour", "default_points", ]
    inlines = [PointTemplatePositionInline, ]
    save_on_top = True
