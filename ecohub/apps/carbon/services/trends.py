import math
from datetime import date, datetime
from typing import Any, Dict, Iterable, Tuple, Union

# 1 tree absorbs ~21.77 kg CO2 per year
TREE_ABSORPTION_KG_PER_YEAR = 21.77
# Average car emits ~4600 kg CO2 per year
CAR_EMISSIONS_KG_PER_YEAR = 4600

# |slope| in kg per entry below which the series counts as flat
TREND_SLOPE_THRESHOLD = 0.1

DataPoint = Tuple[Union[date, datetime], float]


def _confidence(n: int) -> str:
    if n >= 6:
        return "high"
    if n >= 3:
        return "medium"
    return "low"


def _impact(predicted_yearly: float) -> Dict[str, Any]:
    return {
        "treesNeeded": math.ceil(predicted_yearly / TREE_ABSORPTION_KG_PER_YEAR),
        "equivalentCars": f"{predicted_yearly / CAR_EMISSIONS_KG_PER_YEAR:.1f}",
    }


def predict_future_emissions(
    points: Iterable[DataPoint], months_ahead: int = 12
) -> Dict[str, Any]:
    """
    Projects monthly emissions with a least-squares line over the history.

    The regression runs against the entry index (0..n-1), not the elapsed
    time between entries. The projection is read at index n-1+months_ahead.
    """
    series = sorted(points, key=lambda p: p[0])
    n = len(series)

    if n < 2:
        current = float(series[0][1]) if series else 0.0
        return {
            "predictedMonthly": current,
            "predictedYearly": current * 12,
            "trend": "stable",
            "confidence": "low",
            **_impact(max(0.0, current * 12)),
            "slope": 0.0,
        }

    sum_x = sum_y = sum_xy = sum_x2 = 0.0
    for x, (_, total) in enumerate(series):
        y = float(total)
        sum_x += x
        sum_y += y
        sum_xy += x * y
        sum_x2 += x * x

    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_x2 - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n

    predicted_monthly = slope * (n - 1 + months_ahead) + intercept
    predicted_yearly = predicted_monthly * 12

    if slope > TREND_SLOPE_THRESHOLD:
        trend = "increasing"
    elif slope < -TREND_SLOPE_THRESHOLD:
        trend = "decreasing"
    else:
        trend = "stable"

    predicted_monthly = max(0.0, predicted_monthly)
    predicted_yearly = max(0.0, predicted_yearly)
    return {
        "predictedMonthly": predicted_monthly,
        "predictedYearly": predicted_yearly,
        "trend": trend,
        "confidence": _confidence(n),
        **_impact(predicted_yearly),
        "slope": slope,
    }
