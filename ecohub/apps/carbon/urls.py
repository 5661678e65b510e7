from django.urls import path
from .views import (
    calculate,
    latest,
    monthly_rewards,
    my_emissions,
    predictions,
    rankings,
    stats,
)

urlpatterns = [
    path("calculate", calculate, name="carbon-calculate"),
    path("my-emissions", my_emissions, name="carbon-history"),
    path("latest", latest, name="carbon-latest"),
    path("stats", stats, name="carbon-stats"),
    path("predictions", predictions, name="carbon-predictions"),
    path("rankings", rankings, name="carbon-rankings"),
    path("monthly-rewards", monthly_rewards, name="carbon-monthly-rewards"),
]
