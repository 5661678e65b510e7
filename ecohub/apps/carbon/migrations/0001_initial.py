import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="EmissionRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date", models.DateTimeField(db_index=True)),
                ("week_identifier", models.CharField(max_length=10)),
                ("month_identifier", models.CharField(max_length=7)),
                ("car_km", models.FloatField(default=0)),
                ("public_transport_km", models.FloatField(default=0)),
                ("flights", models.FloatField(default=0)),
                ("electricity_kwh", models.FloatField(default=0)),
                ("lpg_cylinders", models.FloatField(default=0)),
                ("meat_meals", models.FloatField(default=0)),
                ("vegetarian_meals", models.FloatField(default=0)),
                ("plastic_items", models.FloatField(default=0)),
                ("recycling_rate", models.FloatField(default=0)),
                ("total_emissions", models.DecimalField(decimal_places=2, max_digits=10)),
                ("transportation", models.DecimalField(decimal_places=2, max_digits=10)),
                ("energy", models.DecimalField(decimal_places=2, max_digits=10)),
                ("food", models.DecimalField(decimal_places=2, max_digits=10)),
                ("waste", models.DecimalField(decimal_places=2, max_digits=10)),
                ("score", models.PositiveSmallIntegerField()),
                ("feedback", models.TextField(blank=True, default="")),
                ("recommendations", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="emission_records",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-date"],
                "indexes": [
                    models.Index(fields=["user", "date"], name="carbon_user_date_idx"),
                    models.Index(fields=["week_identifier", "score"], name="carbon_week_score_idx"),
                    models.Index(fields=["month_identifier", "user"], name="carbon_month_user_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("user", "week_identifier"), name="carbon_one_record_per_week"
                    )
                ],
            },
        ),
    ]
