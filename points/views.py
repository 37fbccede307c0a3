from rest_framework import viewsets

from .models import PointTemplate
from .serializers import PointTemplateSerializer


class PointTemplateViewSet(viewsets.ModelViewSet):

    serializer_class = PointTemplateSerializer

    def get_queryset(self):
        queryset = PointTemplate.objects.all()
        tour_id = self.request.query_params.get("tour", None)

        if tour_id is not None:
            queryset = queryset.filter(tour=tour_id)
        return queryset.prefetch_related("positions")
