from rest_framework import serializers

from .models import Course, Hole


class HoleSerializer(serializers.ModelSerializer):

    class Meta:
        model = Hole
        fields = ("id", "course", "hole_number", "par", )


class CourseSerializer(serializers.ModelSerializer):
    holes = HoleSerializer(many=True, read_only=True)
    front_nine_par = serializers.SerializerMethodField()
    back_nine_par = serializers.SerializerMethodField()
    total_par = serializers.SerializerMethodField()

    class Meta:
        model = Course
        fields = ("id", "name", "number_of_holes", "holes", "front_nine_par", "back_nine_par", "total_par", )

    def get_front_nine_par(self, obj):
        return sum(hole.par for hole in obj.holes.all() if hole.hole_number <= 9)

    def get_back_nine_par(self, obj):
        return sum(hole.par for hole in obj.holes.all() if hole.hole_number > 9)

    def get_total_par(self, obj):
        return sum(hole.par for hole in obj.holes.all())
