from rest_framework import serializers

from .models import EmissionRecord


class EmissionRecordSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source="user_id")
    weekIdentifier = serializers.CharField(source="week_identifier")
    monthIdentifier = serializers.CharField(source="month_identifier")
    carKm = serializers.FloatField(source="car_km")
    publicTransportKm = serializers.FloatField(source="public_transport_km")
    electricityKwh = serializers.FloatField(source="electricity_kwh")
    lpgCylinders = serializers.FloatField(source="lpg_cylinders")
    meatMeals = serializers.FloatField(source="meat_meals")
    vegetarianMeals = serializers.FloatField(source="vegetarian_meals")
    plasticItems = serializers.FloatField(source="plastic_items")
    recyclingRate = serializers.FloatField(source="recycling_rate")
    totalEmissions = serializers.FloatField(source="total_emissions")
    categoryBreakdown = serializers.DictField(source="category_breakdown")
    createdAt = serializers.DateTimeField(source="created_at")

    class Meta:
        model = EmissionRecord
        fields = [
            "id",
            "userId",
            "date",
            "weekIdentifier",
            "monthIdentifier",
            "carKm",
            "publicTransportKm",
            "flights",
            "electricityKwh",
            "lpgCylinders",
            "meatMeals",
            "vegetarianMeals",
            "plasticItems",
            "recyclingRate",
            "totalEmissions",
            "categoryBreakdown",
            "score",
            "feedback",
            "recommendations",
            "createdAt",
        ]
