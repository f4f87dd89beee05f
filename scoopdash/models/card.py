"""
Card models.

A card spec parses into a CardMultiset: distinct integer values, each with
a positive count. All models are frozen (immutable after construction).

INVARIANTS:
- CardGroup.count is always > 0
- A CardMultiset never holds the same value twice
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CardGroup:
    """
    One card value with the number of copies held.

    Attributes:
        value: Face value of the card
        count: Number of physical cards with this value
    """

    value: int
    count: int

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise ValueError(f"CardGroup count must be positive, got {self.count}")

    def label(self) -> str:
        """Display label, e.g. "7" or "7 (×3)"."""
        if self.count > 1:
            return f"{self.value} (×{self.count})"
        return str(self.value)


@dataclass(frozen=True, slots=True)
class CardMultiset:
    """
    A multiset of card values.

    Groups are kept in order of first appearance in the source spec, which
    is the order shown back to the player. Computation uses ascending value
    order (see sorted_groups / iteration).
    """

    groups: tuple[CardGroup, ...] = ()

    def __post_init__(self) -> None:
        seen: set[int] = set()
        for group in self.groups:
            if group.value in seen:
                raise ValueError(f"Duplicate card value in multiset: {group.value}")
            seen.add(group.value)

    @classmethod
    def from_counts(cls, counts: Mapping[int, int]) -> "CardMultiset":
        """Build from a value -> count mapping, keeping the mapping's order."""
        return cls(groups=tuple(CardGroup(value=v, count=c) for v, c in counts.items()))

    def sorted_groups(self) -> tuple[CardGroup, ...]:
        """Groups in ascending value order."""
        return tuple(sorted(self.groups, key=lambda g: g.value))

    def __iter__(self) -> Iterator[CardGroup]:
        return iter(self.sorted_groups())

    def __len__(self) -> int:
        return len(self.groups)

    def values(self) -> tuple[int, ...]:
        """Distinct card values in ascending order."""
        return tuple(g.value for g in self.sorted_groups())

    def count_of(self, value: int) -> int:
        """Copies held of a value (0 if absent)."""
        for group in self.groups:
            if group.value == value:
                return group.count
        return 0

    def contains(self, value: int) -> bool:
        """True if at least one card has this value."""
        return self.count_of(value) > 0

    def total_cards(self) -> int:
        """Total physical cards across all values."""
        return sum(g.count for g in self.groups)

    def to_dict(self) -> dict[int, int]:
        """Value -> count mapping in first-appearance order."""
        return {g.value: g.count for g in self.groups}
