import logging
from datetime import date
from typing import Any, Dict, List, Optional

from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class CarbonError(Exception):
    """Base class for user-facing carbon tracking failures."""

    message = "Carbon tracking request failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationFailed(CarbonError):
    """
    Survey input was rejected. Field-level problems are accumulated into
    ``errors``; a plausibility rejection also carries the computed emissions
    and score so the client can show what was calculated.
    """

    message = "Validation failed"

    def __init__(
        self,
        errors: List[str],
        message: Optional[str] = None,
        calculated_emissions: Optional[float] = None,
        calculated_score: Optional[int] = None,
    ):
        if not errors:
            raise ValueError("ValidationFailed requires at least one error.")
        super().__init__(message)
        self.errors = list(errors)
        self.calculated_emissions = calculated_emissions
        self.calculated_score = calculated_score

    def to_payload(self) -> Dict[str, Any]:
        payload = {"message": self.message, "errors": self.errors}
        if self.calculated_emissions is not None:
            payload["calculatedEmissions"] = self.calculated_emissions
        if self.calculated_score is not None:
            payload["calculatedScore"] = self.calculated_score
        return payload


class RateLimited(CarbonError):
    """A second submission inside the same week. A policy rejection, not a fault."""

    message = (
        "You can only calculate your carbon footprint once per week. "
        "Please try again next week."
    )

    def __init__(
        self,
        next_available_date: date,
        existing_entry: Dict[str, Any],
        message: Optional[str] = None,
    ):
        super().__init__(message)
        self.next_available_date = next_available_date
        self.existing_entry = existing_entry

    def to_payload(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "nextAvailableDate": self.next_available_date.isoformat(),
            "existingEntry": self.existing_entry,
        }


class DependencyFailure(CarbonError):
    """The persistence store could not be reached or failed mid-request."""

    message = "Emission data is temporarily unavailable. Please try again later."


def api_exception_handler(exc, context):
    """
    DRF exception handler that reports store outages as 503.

    Covers failures outside the service layer, such as the token lookup that
    runs during authentication.
    """
    response = exception_handler(exc, context)
    if response is not None:
        return response
    if isinstance(exc, DatabaseError):
        logger.error(f"[Carbon] Store failure outside the service layer: {exc}", exc_info=exc)
        exc = DependencyFailure()
    if isinstance(exc, DependencyFailure):
        return Response(exc.to_payload(), status=status.HTTP_503_SERVICE_UNAVAILABLE)
    return None
