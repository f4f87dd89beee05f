"""
Analysis API endpoints.

Serves the strategy analysis for a pair of card specs as JSON for the
dashboard charts. Malformed specs never fail the request: they degrade to
empty tables, and /analysis/parse reports what was skipped.
"""

from typing import Annotated

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from scoopdash.analysis.insights import describe_insights
from scoopdash.analysis.pipeline import analyze_strategy
from scoopdash.config import settings
from scoopdash.models.analysis import StrategyAnalysis
from scoopdash.models.card import CardGroup
from scoopdash.parsers.card_spec import parse_card_spec_with_diagnostics

router = APIRouter(prefix="/analysis", tags=["analysis"])


class CardGroupResponse(BaseModel):
    """A card value with its count."""

    value: int
    count: int = Field(gt=0)
    label: str


class FrequencyEntryResponse(BaseModel):
    """One bar of the sum distribution chart."""

    value: int
    frequency: int = Field(ge=1)
    is_valid_scooper: bool


class EffectivenessEntryResponse(BaseModel):
    """One point of the Scooper effectiveness chart."""

    value: int
    count: int
    combinations: int = Field(ge=0)
    probability: float = Field(ge=0.0, le=1.0)


class InsightsResponse(BaseModel):
    """Top-N summaries and their rendered text."""

    top_sums: list[FrequencyEntryResponse] = Field(default_factory=list)
    top_scoopers: list[EffectivenessEntryResponse] = Field(default_factory=list)
    total_combinations: int = Field(ge=0)
    summary: list[str] = Field(default_factory=list)


class AnalysisResponse(BaseModel):
    """Response model for a strategy analysis."""

    scoopees: list[CardGroupResponse] = Field(default_factory=list)
    scoopers: list[CardGroupResponse] = Field(default_factory=list)
    sum_frequency: list[FrequencyEntryResponse] = Field(default_factory=list)
    scooper_effectiveness: list[EffectivenessEntryResponse] = Field(default_factory=list)
    total_combinations: int = Field(ge=0)
    insights: InsightsResponse


class ParseRequest(BaseModel):
    """Request model for parsing a single card spec."""

    spec: str = Field(default="", max_length=settings.max_spec_length)


class ParseIssueResponse(BaseModel):
    """A token that was skipped or defaulted."""

    token: str
    position: int
    kind: str
    message: str


class ParseResponse(BaseModel):
    """Response model for card spec parsing."""

    groups: list[CardGroupResponse] = Field(default_factory=list)
    total_cards: int = Field(ge=0)
    issues: list[ParseIssueResponse] = Field(default_factory=list)


def _group_response(group: CardGroup) -> CardGroupResponse:
    return CardGroupResponse(value=group.value, count=group.count, label=group.label())


def analysis_to_response(analysis: StrategyAnalysis) -> AnalysisResponse:
    """Convert an engine result into its JSON response model."""
    sum_frequency = [
        FrequencyEntryResponse(
            value=e.value,
            frequency=e.frequency,
            is_valid_scooper=e.is_valid_scooper,
        )
        for e in analysis.sum_frequency
    ]
    effectiveness = [
        EffectivenessEntryResponse(
            value=e.value,
            count=e.count,
            combinations=e.combinations,
            probability=e.probability,
        )
        for e in analysis.scooper_effectiveness
    ]
    insights = analysis.insights

    return AnalysisResponse(
        scoopees=[_group_response(g) for g in analysis.scoopees],
        scoopers=[_group_response(g) for g in analysis.scoopers],
        sum_frequency=sum_frequency,
        scooper_effectiveness=effectiveness,
        total_combinations=analysis.total_combinations,
        insights=InsightsResponse(
            top_sums=[
                FrequencyEntryResponse(
                    value=e.value,
                    frequency=e.frequency,
                    is_valid_scooper=e.is_valid_scooper,
                )
                for e in insights.top_sums
            ],
            top_scoopers=[
                EffectivenessEntryResponse(
                    value=e.value,
                    count=e.count,
                    combinations=e.combinations,
                    probability=e.probability,
                )
                for e in insights.top_scoopers
            ],
            total_combinations=insights.total_combinations,
            summary=describe_insights(insights),
        ),
    )


@router.get("", response_model=AnalysisResponse)
def get_analysis(
    scoopees: Annotated[
        str, Query(max_length=settings.max_spec_length)
    ] = settings.default_scoopee_spec,
    scoopers: Annotated[
        str, Query(max_length=settings.max_spec_length)
    ] = settings.default_scooper_spec,
) -> AnalysisResponse:
    """
    Analyze a Scoopee pool against a set of Scooper cards.

    Returns the parsed cards, the pair-sum distribution (flagging sums that
    match a Scooper), per-Scooper effectiveness, and summary insights.
    """
    return analysis_to_response(analyze_strategy(scoopees, scoopers))


@router.post("/parse", response_model=ParseResponse)
def parse_spec(request: ParseRequest) -> ParseResponse:
    """
    Parse a single card spec and report any tokens that were skipped.

    Always succeeds: malformed tokens appear in issues, not as errors.
    """
    result = parse_card_spec_with_diagnostics(request.spec)

    return ParseResponse(
        groups=[_group_response(g) for g in result.multiset.groups],
        total_cards=result.multiset.total_cards(),
        issues=[
            ParseIssueResponse(
                token=issue.token,
                position=issue.position,
                kind=issue.kind.value,
                message=issue.message,
            )
            for issue in result.issues
        ],
    )
