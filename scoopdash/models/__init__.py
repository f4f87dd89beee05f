from scoopdash.models.analysis import StrategyAnalysis, StrategyInsights
from scoopdash.models.card import CardGroup, CardMultiset
from scoopdash.models.combination import EffectivenessEntry, FrequencyEntry, SumEntry
from scoopdash.models.diagnostics import ParseIssue, ParseIssueKind, ParseResult

__all__ = [
    "CardGroup",
    "CardMultiset",
    "EffectivenessEntry",
    "FrequencyEntry",
    "ParseIssue",
    "ParseIssueKind",
    "ParseResult",
    "StrategyAnalysis",
    "StrategyInsights",
    "SumEntry",
]
