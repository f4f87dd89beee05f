from scoopdash.analysis.combinations import (
    aggregate_sum_frequency,
    count_pairs,
    evaluate_scooper_effectiveness,
    expand_instances,
    generate_pairs,
)
from scoopdash.analysis.insights import build_insights, describe_insights, top_scoopers, top_sums
from scoopdash.analysis.pipeline import analysis_cache_info, analyze_strategy, clear_analysis_cache

__all__ = [
    "aggregate_sum_frequency",
    "analysis_cache_info",
    "analyze_strategy",
    "build_insights",
    "clear_analysis_cache",
    "count_pairs",
    "describe_insights",
    "evaluate_scooper_effectiveness",
    "expand_instances",
    "generate_pairs",
    "top_scoopers",
    "top_sums",
]
