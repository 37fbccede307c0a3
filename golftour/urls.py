from django.contrib import admin
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from courses import views as course_views
from points import views as point_views
from scores import views as score_views
from tours import views as tour_views

admin.site.site_header = "Golf Tour Administration"

# Create a router and register our viewsets with it.
router = DefaultRouter()
router.register(r"competitions", tour_views.CompetitionViewSet, "competitions")
router.register(r"competition-results", tour_views.CompetitionResultViewSet, "competition-results")
router.register(r"courses", course_views.CourseViewSet, "courses")
router.register(r"enrollments", tour_views.TourEnrollmentViewSet, "enrollments")
router.register(r"holes", course_views.HoleViewSet, "holes")
router.register(r"participants", score_views.ParticipantViewSet, "participants")
router.register(r"point-templates", point_views.PointTemplateViewSet, "point-templates")
router.register(r"team-results", tour_views.TeamResultViewSet, "team-results")
router.register(r"tours", tour_views.TourViewSet, "tours")

urlpatterns = [
      path("admin/", admin.site.urls),
      path("api/", include(router.urls)),
      path("api/competitions/<int:competition_id>/finalize/", tour_views.finalize_results),
      path("api/participants/<int:participant_id>/score/", score_views.record_score),
      path("api/tours/<int:tour_id>/standings/", tour_views.tour_standings),
      path("api/tours/<int:tour_id>/players/<int:player_id>/points/", tour_views.player_tour_points),
  ]
