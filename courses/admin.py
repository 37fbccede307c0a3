from django.contrib import admin

from courses.models import Course, Hole


class HoleInline(admin.TabularInline):
    model = Hole
    can_delete = True
    extra = 0
    ordering = ["hole_number", ]
    fields = ["hole_number", "par", ]


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    fields = ["name", "number_of_holes", ]
    list_display = ["name", "number_of_holes", "total_par", ]
    save_on_top = True
    inlines = [HoleInline, ]

    @admin.display(description="Par")
    def total_par(self, obj):
        return sum(hole.par for hole in obj.holes.all())
