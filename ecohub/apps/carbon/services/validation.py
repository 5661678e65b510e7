import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Mapping, Tuple

from .calculator import EmissionBreakdown
from .scoring import BASELINE_MONTHLY_KG, ScoreResult
from ..exceptions import ValidationFailed

KM_PER_MILE = 1.60934

# A perfect score above this many kg means calculator and scorer disagree
PERFECT_SCORE_MAX_KG = 80


@dataclass(frozen=True)
class SurveyInput:
    car_km: float = 0.0
    public_transport_km: float = 0.0
    flights: float = 0.0
    electricity_kwh: float = 0.0
    lpg_cylinders: float = 0.0
    meat_meals: float = 0.0
    vegetarian_meals: float = 0.0
    plastic_items: float = 0.0
    recycling_rate: float = 0.0

    def quantities(self) -> Tuple[float, ...]:
        """Every field except the recycling rate."""
        return (
            self.car_km,
            self.public_transport_km,
            self.flights,
            self.electricity_kwh,
            self.lpg_cylinders,
            self.meat_meals,
            self.vegetarian_meals,
            self.plastic_items,
        )

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


# attribute, wire name, label, monthly ceiling, unit phrase for the ceiling message
SURVEY_FIELDS = [
    ("car_km", "carKm", "Car distance", 10000, "km"),
    ("public_transport_km", "publicTransportKm", "Public transport distance", 5000, "km"),
    ("flights", "flights", "Number of flights", 20, "flights"),
    ("electricity_kwh", "electricityKwh", "Electricity consumption", 2000, "kWh"),
    ("lpg_cylinders", "lpgCylinders", "LPG cylinders", 10, "cylinders"),
    ("meat_meals", "meatMeals", "Meat meals", 90, "meals"),
    ("vegetarian_meals", "vegetarianMeals", "Vegetarian meals", 90, "meals"),
    ("plastic_items", "plasticItems", "Plastic items", 500, "items"),
]

# canonical attribute -> legacy miles field
LEGACY_MILES = {
    "car_km": "carMiles",
    "public_transport_km": "publicTransportMiles",
}

NEGATIVE_MESSAGES = {
    "car_km": "Car distance cannot be negative",
    "public_transport_km": "Public transport distance cannot be negative",
    "flights": "Number of flights cannot be negative",
    "electricity_kwh": "Electricity consumption cannot be negative",
    "lpg_cylinders": "LPG cylinders cannot be negative",
    "meat_meals": "Meat meals cannot be negative",
    "vegetarian_meals": "Vegetarian meals cannot be negative",
    "plastic_items": "Plastic items cannot be negative",
}

EMPTY_SURVEY_MESSAGE = "Please enter at least some data. All fields cannot be zero."
RECYCLING_RANGE_MESSAGE = "Recycling rate must be between 0 and 100"


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _ceiling_message(label: str, value: float, ceiling: int, unit: str) -> str:
    if unit in ("km", "kWh"):
        shown = f"{label} ({_fmt(value)} {unit})"
    else:
        shown = f"{label} ({_fmt(value)})"
    return (
        f"{shown} seems unrealistic. Maximum allowed: {ceiling} {unit}/month"
    )


def _coerce(raw: Any, label: str, errors: List[str]) -> float:
    if raw is None or raw == "":
        return 0.0
    if isinstance(raw, bool):
        errors.append(f"{label} must be a number")
        return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        errors.append(f"{label} must be a number")
        return 0.0
    if math.isnan(value) or math.isinf(value):
        errors.append(f"{label} must be a number")
        return 0.0
    return value


def normalize_input(raw: Mapping[str, Any]) -> Tuple[SurveyInput, List[str]]:
    """
    Reads the wire payload into a SurveyInput.

    Missing or empty fields count as zero. Legacy mile distances are converted
    to kilometres when the kilometre field is absent or zero. Returns the
    survey together with any type errors found while reading it.
    """
    errors: List[str] = []
    values: Dict[str, float] = {}
    for attr, wire, label, _, _ in SURVEY_FIELDS:
        error_count = len(errors)
        value = _coerce(raw.get(wire), label, errors)
        legacy = LEGACY_MILES.get(attr)
        # A malformed km value is reported once; miles are not consulted
        if not value and legacy and len(errors) == error_count:
            miles = _coerce(raw.get(legacy), label, errors)
            value = miles * KM_PER_MILE if miles else 0.0
        values[attr] = value
    values["recycling_rate"] = _coerce(raw.get("recyclingRate"), "Recycling rate", errors)
    return SurveyInput(**values), errors


def validate_input(raw: Mapping[str, Any]) -> SurveyInput:
    """
    Normalizes and validates a survey payload.

    Every violation is collected before raising, so the caller sees the full
    list in one round trip.
    """
    survey, errors = normalize_input(raw)

    for attr, _, _, _, _ in SURVEY_FIELDS:
        if getattr(survey, attr) < 0:
            errors.append(NEGATIVE_MESSAGES[attr])
    if not 0 <= survey.recycling_rate <= 100:
        errors.append(RECYCLING_RANGE_MESSAGE)

    for attr, _, label, ceiling, unit in SURVEY_FIELDS:
        value = getattr(survey, attr)
        if value > ceiling:
            errors.append(_ceiling_message(label, value, ceiling, unit))

    if sum(survey.quantities()) == 0:
        errors.append(EMPTY_SURVEY_MESSAGE)

    if errors:
        raise ValidationFailed(errors)
    return survey


def check_plausibility(
    breakdown: EmissionBreakdown,
    result: ScoreResult,
    baseline: float = BASELINE_MONTHLY_KG,
) -> None:
    """Rejects scores that are inconsistent with the emissions they were derived from."""
    if result.score >= 100 and breakdown.total > PERFECT_SCORE_MAX_KG:
        raise ValidationFailed(
            [
                "The calculated score seems unrealistic based on your emissions. "
                "Please verify your input data."
            ],
            message="Data validation failed",
            calculated_emissions=breakdown.total,
            calculated_score=result.score,
        )
    if result.score >= 90 and breakdown.total > baseline:
        raise ValidationFailed(
            [
                "The calculated score seems inconsistent with your emissions data. "
                "Please verify your input."
            ],
            message="Data validation failed",
            calculated_emissions=breakdown.total,
            calculated_score=result.score,
        )
