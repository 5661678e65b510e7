# ecohub/carbon/models.py
from django.conf import settings
from django.db import models


class EmissionRecord(models.Model):
    """One accepted weekly survey. Immutable once written."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="emission_records",
    )
    date = models.DateTimeField(db_index=True)
    week_identifier = models.CharField(max_length=10)  # YYYY-MM-DD, ISO Monday
    month_identifier = models.CharField(max_length=7)  # YYYY-MM

    # Transportation
    car_km = models.FloatField(default=0)  # kilometres driven
    public_transport_km = models.FloatField(default=0)
    flights = models.FloatField(default=0)
    # Energy
    electricity_kwh = models.FloatField(default=0)  # kWh per month
    lpg_cylinders = models.FloatField(default=0)
    # Food
    meat_meals = models.FloatField(default=0)
    vegetarian_meals = models.FloatField(default=0)
    # Waste
    plastic_items = models.FloatField(default=0)
    recycling_rate = models.FloatField(default=0)  # percentage 0-100

    # kg CO2 equivalent
    total_emissions = models.DecimalField(max_digits=10, decimal_places=2)
    transportation = models.DecimalField(max_digits=10, decimal_places=2)
    energy = models.DecimalField(max_digits=10, decimal_places=2)
    food = models.DecimalField(max_digits=10, decimal_places=2)
    waste = models.DecimalField(max_digits=10, decimal_places=2)

    score = models.PositiveSmallIntegerField()  # 0-100, higher is better
    feedback = models.TextField(blank=True, default="")
    recommendations = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-date"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "week_identifier"], name="carbon_one_record_per_week"
            )
        ]
        indexes = [
            models.Index(fields=["user", "date"], name="carbon_user_date_idx"),
            models.Index(fields=["week_identifier", "score"], name="carbon_week_score_idx"),
            models.Index(fields=["month_identifier", "user"], name="carbon_month_user_idx"),
        ]

    def __str__(self):
        return f"{self.user} {self.week_identifier} ({self.total_emissions} kg)"

    @property
    def category_breakdown(self):
        return {
            "transportation": float(self.transportation),
            "energy": float(self.energy),
            "food": float(self.food),
            "waste": float(self.waste),
        }

    def summary(self):
        return {
            "date": self.date,
            "score": self.score,
            "totalEmissions": float(self.total_emissions),
        }
