"""
Strategy analysis pipeline.

Runs parse -> expand -> pair -> aggregate/evaluate -> rank for a pair of
card specs. Results are immutable and memoized on the raw spec strings, so
asking again for the same inputs never re-enumerates pairs. Pair
enumeration is also memoized on the Scoopee spec alone, so editing only the
Scooper spec reuses the existing pairs.
"""

import logging
from functools import lru_cache

from scoopdash.analysis.combinations import (
    aggregate_sum_frequency,
    evaluate_scooper_effectiveness,
    expand_instances,
    generate_pairs,
)
from scoopdash.analysis.insights import build_insights
from scoopdash.config import settings
from scoopdash.models.analysis import StrategyAnalysis
from scoopdash.models.card import CardMultiset
from scoopdash.models.combination import SumEntry
from scoopdash.parsers.card_spec import parse_card_spec

logger = logging.getLogger(__name__)


@lru_cache(maxsize=settings.analysis_cache_size)
def enumerate_scoopee_pairs(scoopee_spec: str) -> tuple[CardMultiset, tuple[SumEntry, ...]]:
    """Parse a Scoopee spec and enumerate all of its pairs."""
    scoopees = parse_card_spec(scoopee_spec)
    pairs = generate_pairs(expand_instances(scoopees))
    logger.debug(
        "Enumerated %d pairs from %d Scoopee cards",
        len(pairs),
        scoopees.total_cards(),
    )
    return scoopees, pairs


@lru_cache(maxsize=settings.analysis_cache_size)
def analyze_strategy(scoopee_spec: str, scooper_spec: str) -> StrategyAnalysis:
    """
    Analyze how well a Scoopee pool supports a set of Scooper cards.

    Never raises for malformed specs: unusable input degrades to empty
    tables and zero probabilities.

    Args:
        scoopee_spec: Card spec for the Scoopee pool, e.g. "1 (2), 3-5 (2)"
        scooper_spec: Card spec for the Scooper targets, e.g. "5-7 (2), 8 (3)"

    Returns:
        StrategyAnalysis with parsed cards, frequency and effectiveness
        tables, and insights
    """
    scoopees, pairs = enumerate_scoopee_pairs(scoopee_spec)
    scoopers = parse_card_spec(scooper_spec)

    sum_frequency = aggregate_sum_frequency(pairs, scoopers)
    effectiveness = evaluate_scooper_effectiveness(scoopers, pairs)
    total_combinations = len(pairs)

    return StrategyAnalysis(
        scoopees=scoopees.groups,
        scoopers=scoopers.groups,
        sum_frequency=sum_frequency,
        scooper_effectiveness=effectiveness,
        total_combinations=total_combinations,
        insights=build_insights(sum_frequency, effectiveness, total_combinations),
    )


def clear_analysis_cache() -> None:
    """Drop all memoized analyses and pair enumerations."""
    analyze_strategy.cache_clear()
    enumerate_scoopee_pairs.cache_clear()


def analysis_cache_info():
    """Hit/miss statistics for the analysis cache."""
    return analyze_strategy.cache_info()
