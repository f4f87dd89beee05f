"""
Pairwise combination analysis.

Expands a Scoopee multiset into individual cards, enumerates every
unordered pair of distinct cards, and measures how those pair sums line up
with the Scooper cards.

Two copies of the same value form a valid pair (sum = 2 x value). A card is
never paired with itself. For n cards there are n * (n - 1) / 2 pairs.
"""

from collections import Counter
from collections.abc import Sequence

from scoopdash.models.card import CardMultiset
from scoopdash.models.combination import EffectivenessEntry, FrequencyEntry, SumEntry


def count_pairs(card_count: int) -> int:
    """Number of unordered pairs among card_count distinct cards."""
    if card_count < 2:
        return 0
    return card_count * (card_count - 1) // 2


def expand_instances(multiset: CardMultiset) -> tuple[int, ...]:
    """
    Expand a multiset into one entry per physical card.

    Values appear in ascending order, each repeated count times.

    Args:
        multiset: Parsed cards

    Returns:
        Tuple of card values, length equal to multiset.total_cards()
    """
    instances: list[int] = []
    for group in multiset:
        instances.extend([group.value] * group.count)
    return tuple(instances)


def generate_pairs(instances: Sequence[int]) -> tuple[SumEntry, ...]:
    """
    Enumerate every unordered pair of distinct card positions.

    Args:
        instances: Expanded cards (see expand_instances)

    Returns:
        One SumEntry per pair, in (i, j) order with i < j
    """
    pairs: list[SumEntry] = []
    for i, first in enumerate(instances):
        for second in instances[i + 1 :]:
            pairs.append(SumEntry(sum=first + second, first=first, second=second))
    return tuple(pairs)


def aggregate_sum_frequency(
    sums: Sequence[SumEntry],
    scoopers: CardMultiset | None = None,
) -> tuple[FrequencyEntry, ...]:
    """
    Count how many pairs produce each sum.

    Args:
        sums: Pair outcomes from generate_pairs
        scoopers: If given, entries whose value matches a Scooper card are
            flagged with is_valid_scooper

    Returns:
        FrequencyEntries sorted ascending by value. Empty if sums is empty.
    """
    frequency = Counter(entry.sum for entry in sums)
    scooper_values = set(scoopers.values()) if scoopers is not None else set()

    return tuple(
        FrequencyEntry(
            value=value,
            frequency=frequency[value],
            is_valid_scooper=value in scooper_values,
        )
        for value in sorted(frequency)
    )


def evaluate_scooper_effectiveness(
    scoopers: CardMultiset,
    sums: Sequence[SumEntry],
) -> tuple[EffectivenessEntry, ...]:
    """
    Measure how many Scoopee pairs can make each Scooper value.

    One entry per distinct Scooper value, regardless of how many copies
    are held.

    Args:
        scoopers: Parsed Scooper cards
        sums: Pair outcomes from generate_pairs

    Returns:
        EffectivenessEntries in ascending Scooper value order
    """
    total_pairs = len(sums)
    frequency = Counter(entry.sum for entry in sums)

    entries: list[EffectivenessEntry] = []
    for group in scoopers:
        combinations = frequency.get(group.value, 0)
        probability = combinations / total_pairs if total_pairs > 0 else 0.0
        entries.append(
            EffectivenessEntry(
                value=group.value,
                count=group.count,
                combinations=combinations,
                probability=probability,
            )
        )

    return tuple(entries)
