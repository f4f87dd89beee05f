from dataclasses import dataclass

from scoopdash.models.card import CardGroup
from scoopdash.models.combination import EffectivenessEntry, FrequencyEntry


@dataclass(frozen=True, slots=True)
class StrategyInsights:
    """Summary views derived from the frequency and effectiveness tables."""

    top_sums: tuple[FrequencyEntry, ...]
    top_scoopers: tuple[EffectivenessEntry, ...]
    total_combinations: int


@dataclass(frozen=True, slots=True)
class StrategyAnalysis:
    """
    Everything the dashboard needs for one pair of card specs.

    Attributes:
        scoopees: Parsed Scoopee cards, in spec order
        scoopers: Parsed Scooper cards, in spec order
        sum_frequency: Pair sums ascending by value
        scooper_effectiveness: One entry per Scooper value, ascending
        total_combinations: Number of Scoopee pairs
        insights: Top-N summary views
    """

    scoopees: tuple[CardGroup, ...]
    scoopers: tuple[CardGroup, ...]
    sum_frequency: tuple[FrequencyEntry, ...]
    scooper_effectiveness: tuple[EffectivenessEntry, ...]
    total_combinations: int
    insights: StrategyInsights
