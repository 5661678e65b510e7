from datetime import date
from unittest import mock

import pytest

from ecohub.apps.carbon.exceptions import DependencyFailure, RateLimited
from ecohub.apps.carbon.models import EmissionRecord
from ecohub.apps.carbon.services.emissions import EmissionService
from tests.conftest import local_dt

SURVEY = {"carKm": 100, "electricityKwh": 100}


@pytest.mark.django_db
def test_second_submission_in_the_same_week_is_rate_limited(user):
    first = EmissionService(user, now=local_dt(2026, 10, 19, 9)).submit(SURVEY)

    with pytest.raises(RateLimited) as excinfo:
        EmissionService(user, now=local_dt(2026, 10, 25, 22)).submit({"meatMeals": 4})

    exc = excinfo.value
    assert exc.next_available_date == date(2026, 11, 1)
    assert exc.existing_entry["score"] == first.score
    assert exc.existing_entry["totalEmissions"] == 107.5
    assert EmissionRecord.objects.filter(user=user).count() == 1


@pytest.mark.django_db
def test_submissions_in_different_weeks_both_succeed(user):
    EmissionService(user, now=local_dt(2026, 10, 25, 22)).submit(SURVEY)
    EmissionService(user, now=local_dt(2026, 10, 26, 8)).submit(SURVEY)

    weeks = list(
        EmissionRecord.objects.filter(user=user)
        .order_by("date")
        .values_list("week_identifier", flat=True)
    )
    assert weeks == ["2026-10-19", "2026-10-26"]


@pytest.mark.django_db
def test_other_users_are_not_limited(user, make_user):
    now = local_dt(2026, 10, 20)
    EmissionService(user, now=now).submit(SURVEY)
    EmissionService(make_user(), now=now).submit(SURVEY)

    assert EmissionRecord.objects.filter(week_identifier="2026-10-19").count() == 2


@pytest.mark.django_db
def test_concurrent_insert_is_reported_as_rate_limited(user, make_record):
    now = local_dt(2026, 10, 21)
    existing = make_record(user, local_dt(2026, 10, 20), score=60, total=180.0)

    # The pre-check misses the row written by a concurrent request
    with mock.patch(
        "ecohub.apps.carbon.services.guard.find_weekly_record",
        side_effect=[None, existing],
    ):
        with pytest.raises(RateLimited) as excinfo:
            EmissionService(user, now=now).submit(SURVEY)

    assert excinfo.value.existing_entry["score"] == 60
    assert EmissionRecord.objects.filter(user=user).count() == 1


@pytest.mark.django_db
def test_accepted_record_stores_identifiers_and_feedback(user):
    record = EmissionService(user, now=local_dt(2026, 10, 31, 23)).submit(SURVEY)

    assert record.week_identifier == "2026-10-26"
    assert record.month_identifier == "2026-10"
    assert float(record.total_emissions) == 107.5
    assert record.category_breakdown == {
        "transportation": 25.5,
        "energy": 82.0,
        "food": 0.0,
        "waste": 0.0,
    }
    assert record.score == 90
    assert len(record.recommendations) == 3


@pytest.mark.django_db
def test_integrity_error_without_a_weekly_record_is_a_store_failure(user, make_record):
    make_record(user, local_dt(2026, 10, 20))

    # Neither lookup sees the row, so the constraint violation is unexplained
    with mock.patch(
        "ecohub.apps.carbon.services.guard.find_weekly_record",
        side_effect=[None, None],
    ):
        with pytest.raises(DependencyFailure):
            EmissionService(user, now=local_dt(2026, 10, 21)).submit(SURVEY)

    assert EmissionRecord.objects.filter(user=user).count() == 1
