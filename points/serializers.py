from django.db import transaction
from rest_framework import serializers

from points.models import PointTemplate, PointTemplatePosition


class PointTemplatePositionSerializer(serializers.ModelSerializer):

    class Meta:
        model = PointTemplatePosition
        fields = ("position", "points", )

    def validate_position(self, value):
        if value < 1:
            raise serializers.ValidationError("Positions start at 1")
        return value


class PointTemplateSerializer(serializers.ModelSerializer):

    positions = PointTemplatePositionSerializer(many=True)

    class Meta:
        model = PointTemplate
        fields = ("id", "name", "tour", "default_points", "positions", )

    def validate_positions(self, value):
        numbers = [entry["position"] for entry in value]
        if len(numbers) != len(set(numbers)):
            raise serializers.ValidationError("Each position can only be listed once")
        return value

    @transaction.atomic()
    def create(self, validated_data):
        positions = validated_data.pop("positions", [])
        template = PointTemplate.objects.create(**validated_data)
        self._save_positions(template, positions)
        return template

    @transaction.atomic()
    def update(self, instance, validated_data):
        positions = validated_data.pop("positions", None)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save()
        if positions is not None:
            instance.positions.all().delete()
            self._save_positions(instance, positions)
        return instance

    @staticmethod
    def _save_positions(template, positions):
        PointTemplatePosition.objects.bulk_create([
            PointTemplatePosition(template=template, position=entry["position"], points=entry["points"])
            for entry in positions
        ])
