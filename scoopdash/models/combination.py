"""
Pairwise combination models.

SumEntry is one realized pair of Scoopee cards. FrequencyEntry and
EffectivenessEntry are the aggregated views fed to the dashboard charts.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SumEntry:
    """
    The outcome of combining two distinct Scoopee cards.

    Attributes:
        sum: Combined value of the pair
        first: Value of the earlier card in expansion order
        second: Value of the later card in expansion order
    """

    sum: int
    first: int
    second: int

    @property
    def combination(self) -> str:
        """Label such as "3+4"."""
        return f"{self.first}+{self.second}"


@dataclass(frozen=True, slots=True)
class FrequencyEntry:
    """
    How many pairs produce a given sum.

    Attributes:
        value: The pair sum
        frequency: Number of pairs producing it (>= 1)
        is_valid_scooper: True if a Scooper card has exactly this value
    """

    value: int
    frequency: int
    is_valid_scooper: bool = False

    def __post_init__(self) -> None:
        if self.frequency < 1:
            raise ValueError(f"FrequencyEntry frequency must be >= 1, got {self.frequency}")


@dataclass(frozen=True, slots=True)
class EffectivenessEntry:
    """
    How well the Scoopee pool supports one Scooper value.

    Attributes:
        value: Scooper card value
        count: Number of Scooper cards with this value
        combinations: Number of Scoopee pairs summing to value
        probability: combinations / total pairs (0.0 when there are no pairs)
    """

    value: int
    count: int
    combinations: int
    probability: float

    def __post_init__(self) -> None:
        if self.combinations < 0:
            raise ValueError(f"combinations must be non-negative, got {self.combinations}")
        if not 0.0 <= self.probability <= 1.0:
            raise ValueError(f"probability must be within [0, 1], got {self.probability}")
