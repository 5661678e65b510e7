from unittest import mock

import pytest
from django.db import OperationalError
from rest_framework.authtoken.models import Token

from ecohub.apps.carbon.models import EmissionRecord
from tests.conftest import local_dt

CALCULATE_URL = "/api/carbon/calculate"


@pytest.mark.django_db
def test_calculate_saves_the_weekly_entry(auth_client, user):
    response = auth_client.post(
        CALCULATE_URL, {"carKm": 100, "electricityKwh": 100}, format="json"
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Carbon emission calculated and saved successfully"
    assert body["totalEmissions"] == 107.5
    assert body["score"] == 90
    assert body["categoryBreakdown"]["energy"] == 82.0
    assert body["userId"] == user.id
    assert EmissionRecord.objects.filter(user=user).count() == 1


@pytest.mark.django_db
def test_calculate_accepts_legacy_miles(auth_client):
    response = auth_client.post(
        CALCULATE_URL, {"carMiles": 100, "electricityKwh": 100}, format="json"
    )

    assert response.status_code == 200
    assert response.json()["carKm"] == pytest.approx(160.934)


@pytest.mark.django_db
def test_second_calculation_in_a_week_returns_429(auth_client):
    auth_client.post(CALCULATE_URL, {"carKm": 100, "electricityKwh": 100}, format="json")
    response = auth_client.post(CALCULATE_URL, {"meatMeals": 10}, format="json")

    assert response.status_code == 429
    body = response.json()
    assert "once per week" in body["message"]
    assert body["nextAvailableDate"]
    assert body["existingEntry"]["score"] == 90


@pytest.mark.django_db
def test_implausible_score_returns_diagnostics(auth_client):
    response = auth_client.post(CALCULATE_URL, {"electricityKwh": 100}, format="json")

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Data validation failed"
    assert body["calculatedEmissions"] == 82.0
    assert body["calculatedScore"] == 100


@pytest.mark.django_db
def test_empty_survey_is_rejected(auth_client):
    response = auth_client.post(CALCULATE_URL, {"recyclingRate": 50}, format="json")

    assert response.status_code == 400
    assert response.json()["errors"] == [
        "Please enter at least some data. All fields cannot be zero."
    ]


@pytest.mark.django_db
def test_all_errors_are_reported_together(auth_client):
    response = auth_client.post(
        CALCULATE_URL,
        {"carKm": -5, "flights": 50, "recyclingRate": 120},
        format="json",
    )

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert "Car distance cannot be negative" in errors
    assert "Recycling rate must be between 0 and 100" in errors
    assert "Number of flights (50) seems unrealistic. Maximum allowed: 20 flights/month" in errors


@pytest.mark.django_db
def test_non_object_body_is_rejected(auth_client):
    response = auth_client.post(CALCULATE_URL, [1, 2, 3], format="json")
    assert response.status_code == 400


@pytest.mark.django_db
@pytest.mark.parametrize(
    "method, url",
    [
        ("post", CALCULATE_URL),
        ("get", "/api/carbon/my-emissions"),
        ("get", "/api/carbon/latest"),
        ("get", "/api/carbon/stats"),
        ("get", "/api/carbon/predictions"),
        ("get", "/api/carbon/rankings"),
        ("get", "/api/carbon/monthly-rewards"),
    ],
)
def test_carbon_endpoints_require_authentication(api_client, method, url):
    response = getattr(api_client, method)(url)
    assert response.status_code == 401


@pytest.mark.django_db
def test_history_and_latest(auth_client, user, make_record):
    make_record(user, local_dt(2026, 10, 5), score=60, total=180)
    make_record(user, local_dt(2026, 10, 12), score=80, total=150)

    history = auth_client.get("/api/carbon/my-emissions").json()
    assert [entry["score"] for entry in history] == [80, 60]

    latest = auth_client.get("/api/carbon/latest").json()
    assert latest["weekIdentifier"] == "2026-10-12"
    assert latest["totalEmissions"] == 150.0


@pytest.mark.django_db
def test_empty_history_responses(auth_client):
    assert auth_client.get("/api/carbon/my-emissions").json() == []
    assert auth_client.get("/api/carbon/latest").json() == {
        "message": "No emission data found. Please calculate your emissions first."
    }
    assert auth_client.get("/api/carbon/stats").json() == {"message": "No data available"}

    predictions = auth_client.get("/api/carbon/predictions").json()
    assert predictions["predictedYearly"] == 0
    assert predictions["confidence"] == "low"


@pytest.mark.django_db
def test_stats_endpoint(auth_client, user, make_record):
    make_record(user, local_dt(2026, 10, 5), score=60, total=100)
    make_record(user, local_dt(2026, 10, 12), score=80, total=150.5)

    stats = auth_client.get("/api/carbon/stats").json()

    assert stats["totalEntries"] == 2
    assert stats["averageMonthly"] == 125.25
    assert stats["latestScore"] == 80
    assert stats["trend"] == "stable"


@pytest.mark.django_db
def test_predictions_endpoint(auth_client, user, make_record):
    make_record(user, local_dt(2026, 10, 5), total=200)
    make_record(user, local_dt(2026, 10, 12), total=190)

    forecast = auth_client.get("/api/carbon/predictions", {"months": 1}).json()

    assert forecast["predictedMonthly"] == pytest.approx(180)
    assert forecast["trend"] == "decreasing"
    assert forecast["dataPoints"] == 2


@pytest.mark.django_db
def test_predictions_rejects_bad_months(auth_client):
    response = auth_client.get("/api/carbon/predictions", {"months": "soon"})
    assert response.status_code == 400


@pytest.mark.django_db
def test_rankings_for_a_given_week(auth_client, user, make_user, make_record):
    rival = make_user(name="Ravi")
    make_record(user, local_dt(2026, 10, 13), score=60)
    make_record(rival, local_dt(2026, 10, 14), score=80)

    board = auth_client.get("/api/carbon/rankings", {"week": "2026-10-12"}).json()

    assert board["week"] == "2026-10-12"
    assert board["userRank"] == 2
    assert board["totalParticipants"] == 2
    assert board["rankings"][0]["userName"] == "Ravi"


@pytest.mark.django_db
def test_rankings_rejects_malformed_week(auth_client):
    response = auth_client.get("/api/carbon/rankings", {"week": "week-42"})
    assert response.status_code == 400


@pytest.mark.django_db
def test_monthly_rewards_for_a_given_month(auth_client, user, make_user, make_record):
    make_record(user, local_dt(2026, 9, 7), score=90)
    make_record(make_user(), local_dt(2026, 9, 8), score=70)

    rewards = auth_client.get("/api/carbon/monthly-rewards", {"month": "2026-09"}).json()

    assert rewards["month"] == "2026-09"
    assert rewards["totalParticipants"] == 2
    assert rewards["userReward"]["tier"] == "gold"
    assert [u["averageScore"] for u in rewards["topUsers"]] == [90.0, 70.0]


@pytest.mark.django_db
def test_monthly_rewards_rejects_malformed_month(auth_client):
    response = auth_client.get("/api/carbon/monthly-rewards", {"month": "2026-13"})
    assert response.status_code == 400


@pytest.mark.django_db
def test_store_outage_returns_503(auth_client):
    with mock.patch.object(
        EmissionRecord.objects, "filter", side_effect=OperationalError("db down")
    ):
        response = auth_client.get("/api/carbon/my-emissions")

    assert response.status_code == 503
    assert "temporarily unavailable" in response.json()["message"]


@pytest.mark.django_db
def test_rankings_week_is_normalized_to_its_monday(auth_client, user, make_record):
    make_record(user, local_dt(2026, 10, 20), score=70)

    board = auth_client.get("/api/carbon/rankings", {"week": "2026-10-21"}).json()

    assert board["week"] == "2026-10-19"
    assert board["totalParticipants"] == 1
    assert board["userRank"] == 1


@pytest.mark.django_db
def test_store_outage_during_authentication_returns_503(auth_client):
    with mock.patch.object(
        Token.objects, "select_related", side_effect=OperationalError("db down")
    ):
        response = auth_client.get("/api/carbon/latest")

    assert response.status_code == 503
    assert "temporarily unavailable" in response.json()["message"]
