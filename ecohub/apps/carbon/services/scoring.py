from dataclasses import dataclass, field
from typing import List

from .calculator import EmissionBreakdown

# Indian average: ~2,000 kg CO2/year per person, i.e. ~167 kg per month
BASELINE_MONTHLY_KG = 167.0

# (upper bound as a multiple of the baseline, score); first match wins
SCORE_BANDS = [
    (0.5, 100),
    (0.8, 90),
    (1.0, 80),
    (1.2, 60),
    (1.5, 40),
]
FLOOR_SCORE = 20

POSITIVE_THRESHOLD = 0.8

# (category, share of baseline that triggers advice, feedback, recommendations)
CATEGORY_ADVICE = [
    (
        "transportation",
        0.4,
        "Your transportation emissions are above average.",
        [
            "Consider using public transport or carpooling more often.",
            "Try walking or cycling for short distances.",
            "Use metro or local trains instead of private vehicles when possible.",
        ],
    ),
    (
        "energy",
        0.3,
        "Your energy consumption is high.",
        [
            "Switch to LED bulbs and unplug devices when not in use.",
            "Use energy-efficient appliances (BEE 5-star rated).",
            "Consider solar panels if feasible.",
        ],
    ),
    (
        "food",
        0.2,
        "Your food choices have a significant carbon footprint.",
        [
            "Try reducing meat consumption and eating more plant-based meals.",
            "Buy local and seasonal produce when possible.",
            "Reduce food waste by planning meals better.",
        ],
    ),
    (
        "waste",
        0.1,
        "Your waste production is contributing to emissions.",
        [
            "Reduce single-use plastics and recycle more.",
            "Compost organic waste when possible.",
            "Use reusable bags and containers.",
        ],
    ),
]

POSITIVE_FEEDBACK = "Great job! Your carbon footprint is below the Indian average."
DEFAULT_FEEDBACK = "Your carbon footprint is within average range."
DEFAULT_RECOMMENDATION = "Keep up the excellent work! Continue your sustainable practices."


@dataclass
class ScoreResult:
    score: int
    feedback: str
    recommendations: List[str] = field(default_factory=list)


def score_for_total(total: float, baseline: float = BASELINE_MONTHLY_KG) -> int:
    """Step score in {20, 40, 60, 80, 90, 100}; higher is better."""
    for multiple, score in SCORE_BANDS:
        if total <= baseline * multiple:
            return score
    return FLOOR_SCORE


def score_emissions(
    breakdown: EmissionBreakdown, baseline: float = BASELINE_MONTHLY_KG
) -> ScoreResult:
    """Scores a month of emissions and builds per-category feedback."""
    score = score_for_total(breakdown.total, baseline)

    feedback: List[str] = []
    recommendations: List[str] = []
    categories = breakdown.categories()
    for category, share, sentence, advice in CATEGORY_ADVICE:
        if categories[category] > baseline * share:
            feedback.append(sentence)
            recommendations.extend(advice)

    if breakdown.total < baseline * POSITIVE_THRESHOLD:
        feedback.append(POSITIVE_FEEDBACK)

    if not recommendations:
        recommendations.append(DEFAULT_RECOMMENDATION)

    return ScoreResult(
        score=max(0, min(100, score)),
        feedback=" ".join(feedback) if feedback else DEFAULT_FEEDBACK,
        recommendations=recommendations,
    )
