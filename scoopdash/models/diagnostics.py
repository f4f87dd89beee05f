"""
Parse diagnostics.

The card spec parser never raises: malformed tokens are skipped or
defaulted. This module describes what was skipped or defaulted so callers
can show it, without changing what the parser returns.
"""

from dataclasses import dataclass, field
from enum import Enum

from scoopdash.models.card import CardMultiset


class ParseIssueKind(str, Enum):
    """Classification of recovered parse problems."""

    EMPTY_TOKEN = "empty_token"  # ",," or trailing comma
    INVALID_VALUE = "invalid_value"  # Token skipped
    INVALID_MULTIPLIER = "invalid_multiplier"  # Multiplier defaulted to 1
    INVERTED_RANGE = "inverted_range"  # "5-3", contributes nothing
    RANGE_TOO_LARGE = "range_too_large"  # Token skipped
    TOO_MANY_CARDS = "too_many_cards"  # Token skipped, total card limit reached
    PARSE_FAILURE = "parse_failure"  # Whole spec degraded to empty


@dataclass(frozen=True, slots=True)
class ParseIssue:
    """
    A problem found (and recovered from) while parsing a card spec.

    Attributes:
        token: The raw token text, stripped
        position: Zero-based index of the token in the spec (-1 for the whole spec)
        kind: What went wrong
        message: Human-readable explanation
    """

    token: str
    position: int
    kind: ParseIssueKind
    message: str


@dataclass(frozen=True)
class ParseResult:
    """Parsed multiset together with any recovered issues."""

    multiset: CardMultiset
    issues: tuple[ParseIssue, ...] = field(default_factory=tuple)

    @property
    def is_clean(self) -> bool:
        """True if every token parsed without recovery."""
        return not self.issues
