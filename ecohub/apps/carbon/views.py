import logging
from collections.abc import Mapping

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from .exceptions import DependencyFailure, RateLimited, ValidationFailed
from .serializers import EmissionRecordSerializer
from .services.emissions import EmissionService
from .services.periods import parse_month_identifier, parse_week_identifier

logger = logging.getLogger(__name__)

DEFAULT_MONTHS_AHEAD = 12


def _unavailable(exc: DependencyFailure) -> Response:
    return Response(exc.to_payload(), status=status.HTTP_503_SERVICE_UNAVAILABLE)


@api_view(["POST"])
def calculate(request):
    if not isinstance(request.data, Mapping):
        return Response(
            {"message": "Validation failed", "errors": ["Survey data must be a JSON object"]},
            status=status.HTTP_400_BAD_REQUEST,
        )
    service = EmissionService(request.user)
    try:
        record = service.submit(request.data)
    except ValidationFailed as exc:
        logger.info(f"[Carbon] Rejected submission from user {request.user.pk}: {exc.errors}")
        return Response(exc.to_payload(), status=status.HTTP_400_BAD_REQUEST)
    except RateLimited as exc:
        logger.info(f"[Carbon] Weekly limit hit for user {request.user.pk}")
        return Response(exc.to_payload(), status=status.HTTP_429_TOO_MANY_REQUESTS)
    except DependencyFailure as exc:
        return _unavailable(exc)

    return Response(
        {
            **EmissionRecordSerializer(record).data,
            "message": "Carbon emission calculated and saved successfully",
        }
    )


@api_view(["GET"])
def my_emissions(request):
    try:
        records = EmissionService(request.user).get_history()
    except DependencyFailure as exc:
        return _unavailable(exc)
    return Response(EmissionRecordSerializer(records, many=True).data)


@api_view(["GET"])
def latest(request):
    try:
        record = EmissionService(request.user).get_latest()
    except DependencyFailure as exc:
        return _unavailable(exc)
    if record is None:
        return Response(
            {"message": "No emission data found. Please calculate your emissions first."}
        )
    return Response(EmissionRecordSerializer(record).data)


@api_view(["GET"])
def stats(request):
    try:
        summary = EmissionService(request.user).get_stats()
    except DependencyFailure as exc:
        return _unavailable(exc)
    if summary is None:
        return Response({"message": "No data available"})
    return Response(summary)


@api_view(["GET"])
def predictions(request):
    raw_months = request.query_params.get("months")
    try:
        months_ahead = int(raw_months) if raw_months else DEFAULT_MONTHS_AHEAD
    except ValueError:
        return Response(
            {"message": "months must be a whole number"},
            status=status.HTTP_400_BAD_REQUEST,
        )
    if months_ahead <= 0:
        months_ahead = DEFAULT_MONTHS_AHEAD

    try:
        forecast = EmissionService(request.user).get_predictions(months_ahead)
    except DependencyFailure as exc:
        return _unavailable(exc)
    if forecast is None:
        return Response(
            {
                "message": "Not enough data for predictions. Please add some emission data first.",
                "predictedYearly": 0,
                "trend": "stable",
                "confidence": "low",
            }
        )
    return Response(forecast)


@api_view(["GET"])
def rankings(request):
    week = request.query_params.get("week")
    if week:
        try:
            week = parse_week_identifier(week)
        except ValueError:
            return Response(
                {"message": "week must be formatted as YYYY-MM-DD"},
                status=status.HTTP_400_BAD_REQUEST,
            )
    try:
        board = EmissionService(request.user).get_weekly_ranking(week)
    except DependencyFailure as exc:
        return _unavailable(exc)
    return Response(board)


@api_view(["GET"])
def monthly_rewards(request):
    month = request.query_params.get("month")
    if month:
        try:
            month = parse_month_identifier(month)
        except ValueError:
            return Response(
                {"message": "month must be formatted as YYYY-MM"},
                status=status.HTTP_400_BAD_REQUEST,
            )
    try:
        rewards = EmissionService(request.user).get_monthly_rewards(month)
    except DependencyFailure as exc:
        return _unavailable(exc)
    return Response(rewards)
