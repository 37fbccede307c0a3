from django.utils.decorators import method_decorator
from django.views.decorators.cache import cache_page
from rest_framework import viewsets

from .models import Course, Hole
from .serializers import CourseSerializer, HoleSerializer


class CourseViewSet(viewsets.ModelViewSet):

    queryset = Course.objects.all()
    serializer_class = CourseSerializer

    @method_decorator(cache_page(60 * 60 * 24))
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)


class HoleViewSet(viewsets.ModelViewSet):

    serializer_class = HoleSerializer

    def get_queryset(self):
        queryset = Hole.objects.all()
        course_id = self.request.query_params.get("course", None)
        if course_id is not None:
            queryset = queryset.filter(course=course_id)
        return queryset.order_by("course", "hole_number")
