import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from django.conf import settings
from django.db import DatabaseError
from django.utils import timezone

from ecohub.apps.users.authentication import display_name
from ..exceptions import DependencyFailure
from ..models import EmissionRecord
from .calculator import calculate_emissions, round_cents
from .guard import record_submission
from .periods import month_identifier, week_identifier
from .rankings import build_monthly_rewards, build_weekly_leaderboard
from .scoring import score_emissions
from .trends import predict_future_emissions
from .validation import check_plausibility, validate_input

logger = logging.getLogger(__name__)

# Share change between recent and older entries that counts as a trend
STATS_TREND_MARGIN = 0.1
STATS_WINDOW = 3


@contextmanager
def store_errors(action: str):
    """Turns persistence failures into DependencyFailure."""
    try:
        yield
    except DatabaseError as exc:
        logger.error(f"[Carbon] Store failure while {action}: {exc}", exc_info=True)
        raise DependencyFailure() from exc


def _entry_row(record: EmissionRecord) -> Dict[str, Any]:
    return {
        "user_id": record.user_id,
        "user_name": display_name(record.user),
        "user_email": record.user.email,
        "score": record.score,
        "total_emissions": float(record.total_emissions),
        "date": record.date,
    }


def _stats_trend(totals: List[float]) -> str:
    """``totals`` newest first; compares the latest three against the three before."""
    recent, older = totals[:STATS_WINDOW], totals[STATS_WINDOW : STATS_WINDOW * 2]
    if not older:
        return "stable"
    recent_avg = sum(recent) / len(recent)
    older_avg = sum(older) / len(older)
    if recent_avg > older_avg * (1 + STATS_TREND_MARGIN):
        return "increasing"
    if recent_avg < older_avg * (1 - STATS_TREND_MARGIN):
        return "decreasing"
    return "stable"


class EmissionService:
    """
    Request-level operations on a user's carbon footprint.

    ``now`` pins the clock for the whole request so that week and month keys
    agree across every step.
    """

    def __init__(self, user, now: Optional[datetime] = None):
        self.user = user
        self.now = now or timezone.now()

    def submit(self, raw: Mapping[str, Any]) -> EmissionRecord:
        survey = validate_input(raw)
        breakdown = calculate_emissions(survey)
        result = score_emissions(breakdown)
        check_plausibility(breakdown, result)

        fields = {
            **survey.as_dict(),
            **breakdown.categories(),
            "total_emissions": breakdown.total,
            "score": result.score,
            "feedback": result.feedback,
            "recommendations": result.recommendations,
        }
        with store_errors("saving a submission"):
            record = record_submission(self.user, self.now, fields)
            record.refresh_from_db()
        return record

    def get_history(self, limit: Optional[int] = None) -> List[EmissionRecord]:
        limit = limit or settings.CARBON_HISTORY_LIMIT
        with store_errors("loading history"):
            return list(
                EmissionRecord.objects.filter(user=self.user).order_by("-date")[:limit]
            )

    def get_latest(self) -> Optional[EmissionRecord]:
        with store_errors("loading the latest entry"):
            return EmissionRecord.objects.filter(user=self.user).order_by("-date").first()

    def get_stats(self) -> Optional[Dict[str, Any]]:
        records = self.get_history()
        if not records:
            return None
        totals = [float(r.total_emissions) for r in records]
        latest = records[0]
        return {
            "totalEntries": len(records),
            "averageMonthly": round_cents(sum(totals) / len(totals)),
            "latestScore": latest.score,
            "trend": _stats_trend(totals),
            "latestDate": latest.date,
        }

    def get_predictions(self, months_ahead: int = 12) -> Optional[Dict[str, Any]]:
        with store_errors("loading prediction history"):
            points = [
                (date, float(total))
                for date, total in EmissionRecord.objects.filter(user=self.user)
                .order_by("date")
                .values_list("date", "total_emissions")
            ]
        if not points:
            return None
        return {
            **predict_future_emissions(points, months_ahead),
            "dataPoints": len(points),
        }

    def get_weekly_ranking(self, week: Optional[str] = None) -> Dict[str, Any]:
        week = week or week_identifier(self.now)
        limit = settings.CARBON_LEADERBOARD_LIMIT
        with store_errors("loading the weekly leaderboard"):
            records = (
                EmissionRecord.objects.filter(week_identifier=week)
                .select_related("user")
                .order_by("-score", "-date")[:limit]
            )
            rows = [_entry_row(r) for r in records]
        return {"week": week, **build_weekly_leaderboard(rows, self.user.pk, limit)}

    def get_monthly_rewards(self, month: Optional[str] = None) -> Dict[str, Any]:
        month = month or month_identifier(self.now)
        with store_errors("loading monthly rewards"):
            records = EmissionRecord.objects.filter(
                month_identifier=month
            ).select_related("user")
            rows = [_entry_row(r) for r in records]
        return {
            "month": month,
            **build_monthly_rewards(rows, self.user.pk, settings.CARBON_TOP_REWARDS),
        }
