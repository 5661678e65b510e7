from datetime import date, datetime, timezone as dt_timezone

import pytest

from ecohub.apps.carbon.services.periods import (
    month_identifier,
    next_submission_date,
    parse_month_identifier,
    parse_week_identifier,
    week_identifier,
)


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2026, 10, 19), "2026-10-19"),  # Monday
        (date(2026, 10, 21), "2026-10-19"),  # Wednesday
        (date(2026, 10, 24), "2026-10-19"),  # Saturday
        (date(2026, 10, 25), "2026-10-19"),  # Sunday closes the week
        (date(2026, 10, 26), "2026-10-26"),
        (date(2026, 3, 1), "2026-02-23"),  # Sunday across a month boundary
        (date(2027, 1, 1), "2026-12-28"),  # across a year boundary
    ],
)
def test_week_identifier_is_the_monday(day, expected):
    assert week_identifier(day) == expected


def test_aware_datetimes_use_the_local_date():
    # 20:00 UTC on Sunday is already Monday in Asia/Kolkata
    instant = datetime(2026, 10, 25, 20, 0, tzinfo=dt_timezone.utc)
    assert week_identifier(instant) == "2026-10-26"
    assert month_identifier(datetime(2026, 10, 31, 20, 0, tzinfo=dt_timezone.utc)) == "2026-11"


def test_month_identifier():
    assert month_identifier(date(2026, 1, 5)) == "2026-01"


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2026, 10, 19), date(2026, 10, 25)),  # Monday -> Sunday
        (date(2026, 10, 24), date(2026, 10, 25)),  # Saturday -> next day
        (date(2026, 10, 25), date(2026, 11, 1)),  # Sunday -> following Sunday
    ],
)
def test_next_submission_date_is_the_coming_sunday(day, expected):
    assert next_submission_date(day) == expected


def test_parse_period_keys():
    assert parse_week_identifier("2026-10-19") == "2026-10-19"
    # any day of the week maps to its Monday key
    assert parse_week_identifier("2026-10-21") == "2026-10-19"
    assert parse_week_identifier("2026-10-25") == "2026-10-19"
    assert parse_month_identifier("2026-10") == "2026-10"
    with pytest.raises(ValueError):
        parse_week_identifier("2026-W43")
    with pytest.raises(ValueError):
        parse_month_identifier("October")
