"""
Period keys shared by submission limits, leaderboards and reward months.

Every date is reduced to the local calendar date before a key is derived, so
the same instant always lands in the same week and month everywhere.
"""

from datetime import date, datetime, timedelta
from typing import Optional, Union

from django.utils import timezone

DateLike = Union[date, datetime]


def local_date(value: Optional[DateLike] = None) -> date:
    """Calendar date of ``value`` in the configured time zone (today when omitted)."""
    if value is None:
        return timezone.localdate()
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            return timezone.localtime(value).date()
        return value.date()
    return value


def week_start(value: Optional[DateLike] = None) -> date:
    # Monday of the ISO week; Sunday is day 7 of the week it closes.
    d = local_date(value)
    return d - timedelta(days=d.weekday())


def week_identifier(value: Optional[DateLike] = None) -> str:
    """ISO week key: the week's Monday as ``YYYY-MM-DD``."""
    return week_start(value).strftime("%Y-%m-%d")


def month_identifier(value: Optional[DateLike] = None) -> str:
    """Month key as ``YYYY-MM``."""
    return local_date(value).strftime("%Y-%m")


def next_submission_date(value: Optional[DateLike] = None) -> date:
    """
    The upcoming Sunday, counting Sunday as weekday 0 (a Sunday maps to the
    following Sunday).
    """
    d = local_date(value)
    sunday_based_index = (d.weekday() + 1) % 7
    return d + timedelta(days=7 - sunday_based_index)


def parse_week_identifier(raw: str) -> str:
    """
    Read a client-supplied ``YYYY-MM-DD`` into the key of the week containing
    that day; raises ValueError when malformed.
    """
    parsed = datetime.strptime(raw, "%Y-%m-%d").date()
    return week_identifier(parsed)


def parse_month_identifier(raw: str) -> str:
    """Validate a client-supplied month key; raises ValueError when malformed."""
    parsed = datetime.strptime(raw, "%Y-%m")
    return parsed.strftime("%Y-%m")
