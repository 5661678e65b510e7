from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict

# kg CO2e per unit, Indian context (coal-heavy grid)
EMISSION_FACTORS = {
    "car_km": 0.255,
    "public_transport_km": 0.031,  # buses, trains
    "flight": 200.0,  # short-haul domestic flight
    "electricity_kwh": 0.82,
    "lpg_cylinder": 19.5,  # 14.2 kg cylinder
    "meat_meal": 3.5,
    "vegetarian_meal": 0.8,
    "plastic_item": 0.05,
}


def round_cents(value: float) -> float:
    """Round half-up to two decimals."""
    return float(Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class EmissionBreakdown:
    transportation: float
    energy: float
    food: float
    waste: float
    total: float

    def categories(self) -> Dict[str, float]:
        return {
            "transportation": self.transportation,
            "energy": self.energy,
            "food": self.food,
            "waste": self.waste,
        }


def calculate_emissions(survey) -> EmissionBreakdown:
    """
    Converts a normalized survey into monthly kg CO2e per category.

    The total is summed from the rounded categories so that the breakdown
    always adds up to the reported total.
    """
    f = EMISSION_FACTORS
    transportation = (
        survey.car_km * f["car_km"]
        + survey.public_transport_km * f["public_transport_km"]
        + survey.flights * f["flight"]
    )
    energy = survey.electricity_kwh * f["electricity_kwh"] + survey.lpg_cylinders * f["lpg_cylinder"]
    food = survey.meat_meals * f["meat_meal"] + survey.vegetarian_meals * f["vegetarian_meal"]
    # Recycled plastic carries proportionally less impact
    waste = survey.plastic_items * f["plastic_item"] * (1 - survey.recycling_rate / 100)

    transportation = round_cents(transportation)
    energy = round_cents(energy)
    food = round_cents(food)
    waste = round_cents(waste)

    return EmissionBreakdown(
        transportation=transportation,
        energy=energy,
        food=food,
        waste=waste,
        total=round_cents(transportation + energy + food + waste),
    )
