import logging
from datetime import datetime
from typing import Any, Dict

from django.db import IntegrityError, transaction

from ..exceptions import RateLimited
from ..models import EmissionRecord
from .periods import month_identifier, next_submission_date, week_identifier

logger = logging.getLogger(__name__)


def _rate_limited(existing: EmissionRecord, now: datetime) -> RateLimited:
    return RateLimited(
        next_available_date=next_submission_date(now),
        existing_entry=existing.summary(),
    )


def find_weekly_record(user, week: str):
    return EmissionRecord.objects.filter(user=user, week_identifier=week).first()


def record_submission(user, now: datetime, fields: Dict[str, Any]) -> EmissionRecord:
    """
    Writes the week's record for ``user`` unless one already exists.

    The lookup and insert share one transaction, and the unique
    (user, week_identifier) constraint catches a concurrent submission that
    slips between them; both paths raise RateLimited.
    """
    week = week_identifier(now)
    try:
        with transaction.atomic():
            existing = find_weekly_record(user, week)
            if existing is not None:
                raise _rate_limited(existing, now)
            return EmissionRecord.objects.create(
                user=user,
                date=now,
                week_identifier=week,
                month_identifier=month_identifier(now),
                **fields,
            )
    except IntegrityError:
        existing = find_weekly_record(user, week)
        if existing is None:
            raise
        logger.info(f"[Carbon] Concurrent submission for user {user.pk} in week {week}")
        raise _rate_limited(existing, now)
