from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from .calculator import round_cents

# Cumulative share of the ranked pool (percent) closing each reward tier
REWARD_TIERS = [
    ("gold", 10),
    ("silver", 30),
    ("bronze", 50),
]

ENTRY_COLUMNS = ["user_id", "user_name", "user_email", "score", "total_emissions", "date"]


def _tier_cutoff(participants: int, percent: int) -> int:
    # ceil(participants * percent / 100) without float drift
    return -(-participants * percent // 100)


def tier_for_position(position: int, participants: int) -> Optional[str]:
    """Tier of the 0-based ``position`` in a pool of ``participants``, or None."""
    for tier, percent in REWARD_TIERS:
        if position < _tier_cutoff(participants, percent):
            return tier
    return None


def build_weekly_leaderboard(
    entries: Iterable[Dict[str, Any]], user_id: Any, limit: int = 100
) -> Dict[str, Any]:
    """
    Ranks one week's entries by score, newest first among equal scores.

    Only the first ``limit`` entries are ranked; a requesting user outside
    them gets ``userRank`` None even though they took part.
    """
    ordered = sorted(entries, key=lambda e: e["date"], reverse=True)
    ordered = sorted(ordered, key=lambda e: e["score"], reverse=True)[:limit]

    rankings = [
        {
            "rank": index + 1,
            "userId": entry["user_id"],
            "userName": entry["user_name"],
            "userEmail": entry["user_email"],
            "score": entry["score"],
            "totalEmissions": entry["total_emissions"],
            "date": entry["date"],
        }
        for index, entry in enumerate(ordered)
    ]
    user_rank = next((r["rank"] for r in rankings if r["userId"] == user_id), None)

    return {
        "rankings": rankings,
        "userRank": user_rank,
        "totalParticipants": len(rankings),
    }


def build_monthly_rewards(
    entries: Iterable[Dict[str, Any]], user_id: Any, top: int = 10
) -> Dict[str, Any]:
    """
    Aggregates a month of entries per user and assigns reward tiers.

    Users are ordered by average score (ties broken by user id), then split
    into gold/silver/bronze by their share of the participant pool.
    """
    df = pd.DataFrame(list(entries), columns=ENTRY_COLUMNS)
    if df.empty:
        return {
            "userReward": None,
            "topUsers": [],
            "totalParticipants": 0,
            "rewardTiers": {tier: 0 for tier, _ in REWARD_TIERS},
        }

    grouped = (
        df.groupby("user_id", sort=False)
        .agg(
            user_name=("user_name", "first"),
            user_email=("user_email", "first"),
            total_score=("score", "sum"),
            entry_count=("score", "count"),
            total_emissions=("total_emissions", "sum"),
        )
        .reset_index()
    )
    grouped["average_score"] = [
        round_cents(total / count)
        for total, count in zip(grouped["total_score"], grouped["entry_count"])
    ]
    grouped = grouped.sort_values(
        ["average_score", "user_id"], ascending=[False, True], kind="mergesort"
    ).reset_index(drop=True)

    participants = len(grouped)
    ranked: List[Dict[str, Any]] = []
    for position, row in enumerate(grouped.itertuples(index=False)):
        ranked.append(
            {
                "rank": position + 1,
                "tier": tier_for_position(position, participants),
                "userId": int(row.user_id),
                "userName": row.user_name,
                "userEmail": row.user_email,
                "averageScore": float(row.average_score),
                "totalScore": int(row.total_score),
                "entryCount": int(row.entry_count),
                "totalEmissions": round_cents(float(row.total_emissions)),
            }
        )

    user_reward = next((r for r in ranked if r["userId"] == user_id), None)
    tier_counts = {}
    previous_cutoff = 0
    for tier, percent in REWARD_TIERS:
        cutoff = _tier_cutoff(participants, percent)
        tier_counts[tier] = cutoff - previous_cutoff
        previous_cutoff = cutoff

    return {
        "userReward": (
            {
                key: user_reward[key]
                for key in (
                    "rank",
                    "tier",
                    "averageScore",
                    "totalScore",
                    "entryCount",
                    "totalEmissions",
                )
            }
            if user_reward
            else None
        ),
        "topUsers": ranked[:top],
        "totalParticipants": participants,
        "rewardTiers": tier_counts,
    }
