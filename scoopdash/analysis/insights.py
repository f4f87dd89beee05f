"""
Strategic insight ranking.

Extracts the "top N" summaries shown under the dashboard charts. Ranking
works on copies: the ascending-by-value tables passed in are never
reordered. Equal scores keep their ascending-value order.
"""

from collections.abc import Sequence

from scoopdash.config import settings
from scoopdash.models.analysis import StrategyInsights
from scoopdash.models.combination import EffectivenessEntry, FrequencyEntry


def top_sums(
    frequency: Sequence[FrequencyEntry],
    limit: int | None = None,
) -> tuple[FrequencyEntry, ...]:
    """Most frequent pair sums, highest first."""
    limit = settings.insight_limit if limit is None else limit
    ranked = sorted(frequency, key=lambda e: e.frequency, reverse=True)
    return tuple(ranked[:limit])


def top_scoopers(
    effectiveness: Sequence[EffectivenessEntry],
    limit: int | None = None,
) -> tuple[EffectivenessEntry, ...]:
    """Scooper values reachable by the most pairs, highest first."""
    limit = settings.insight_limit if limit is None else limit
    ranked = sorted(effectiveness, key=lambda e: e.combinations, reverse=True)
    return tuple(ranked[:limit])


def build_insights(
    frequency: Sequence[FrequencyEntry],
    effectiveness: Sequence[EffectivenessEntry],
    total_combinations: int,
    limit: int | None = None,
) -> StrategyInsights:
    """
    Build the summary views for one analysis.

    Args:
        frequency: Sum frequency table, ascending by value
        effectiveness: Scooper effectiveness table, ascending by value
        total_combinations: Total number of Scoopee pairs
        limit: Entries per top list. Defaults to settings.insight_limit.

    Returns:
        StrategyInsights with top sums, top Scoopers and the pair total
    """
    return StrategyInsights(
        top_sums=top_sums(frequency, limit),
        top_scoopers=top_scoopers(effectiveness, limit),
        total_combinations=total_combinations,
    )


def describe_insights(insights: StrategyInsights) -> list[str]:
    """
    Render insights as the dashboard's summary lines.

    Example:
        Most common sums: 6 (7 combinations), 5 (6 combinations)
        Most versatile Scoopers: 6 (7 combinations, ×2)
        Total possible combinations: 36
    """
    sums = ", ".join(f"{e.value} ({e.frequency} combinations)" for e in insights.top_sums)
    scoopers = ", ".join(
        f"{e.value} ({e.combinations} combinations, ×{e.count})" for e in insights.top_scoopers
    )

    return [
        f"Most common sums: {sums or 'none'}",
        f"Most versatile Scoopers: {scoopers or 'none'}",
        f"Total possible combinations: {insights.total_combinations}",
    ]
