"""
Command-line strategy summary.

Prints the same data the dashboard charts show, as text or JSON:

    scoopdash "1 (2), 2 (1), 3-5 (2)" "5-7 (2), 8 (3)"
"""

import argparse
import logging

from scoopdash.analysis.insights import build_insights, describe_insights
from scoopdash.analysis.pipeline import analyze_strategy
from scoopdash.api.analysis import analysis_to_response
from scoopdash.config import settings
from scoopdash.models.analysis import StrategyAnalysis
from scoopdash.models.card import CardGroup

logger = logging.getLogger(__name__)

# Marks sum distribution rows that match a Scooper card
SCOOPER_MARKER = "*"


def positive_int(text: str) -> int:
    """argparse type accepting integers >= 1."""
    try:
        value = int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from e
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def format_cards(groups: tuple[CardGroup, ...]) -> str:
    """Render parsed cards the way the dashboard echoes them."""
    if not groups:
        return "(none)"
    return ", ".join(g.label() for g in groups)


def format_report(analysis: StrategyAnalysis, limit: int | None = None) -> str:
    """
    Render an analysis as a plain-text report.

    Args:
        analysis: Result of analyze_strategy
        limit: Entries per insight list. Defaults to settings.insight_limit.

    Returns:
        Multi-line report
    """
    insights = analysis.insights
    if limit is not None:
        insights = build_insights(
            analysis.sum_frequency,
            analysis.scooper_effectiveness,
            analysis.total_combinations,
            limit,
        )

    lines = [
        f"Scoopee cards: {format_cards(analysis.scoopees)}",
        f"Scooper cards: {format_cards(analysis.scoopers)}",
        "",
        "Sum distribution:",
    ]

    if analysis.sum_frequency:
        for entry in analysis.sum_frequency:
            marker = SCOOPER_MARKER if entry.is_valid_scooper else " "
            lines.append(f" {marker} {entry.value:>4}  {entry.frequency}")
        lines.append(f"   ({SCOOPER_MARKER} matches a Scooper card)")
    else:
        lines.append("   (no pairs)")

    lines.append("")
    lines.append("Scooper effectiveness:")
    if analysis.scooper_effectiveness:
        for e in analysis.scooper_effectiveness:
            lines.append(
                f"   {e.value:>4}  ×{e.count}  {e.combinations} combinations  ({e.probability:.1%})"
            )
    else:
        lines.append("   (no Scooper cards)")

    lines.append("")
    lines.append("Strategic insights:")
    lines.extend(f" - {line}" for line in describe_insights(insights))

    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for printing a strategy analysis."""
    parser = argparse.ArgumentParser(description="Analyze Scoopee pair sums against Scooper cards")
    parser.add_argument(
        "scoopees",
        nargs="?",
        default=settings.default_scoopee_spec,
        help=f'Scoopee card spec (default: "{settings.default_scoopee_spec}")',
    )
    parser.add_argument(
        "scoopers",
        nargs="?",
        default=settings.default_scooper_spec,
        help=f'Scooper card spec (default: "{settings.default_scooper_spec}")',
    )
    parser.add_argument(
        "--limit",
        type=positive_int,
        default=None,
        help=f"Entries per insight list in the text report (default: {settings.insight_limit})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the analysis as JSON",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log skipped tokens and pair enumeration",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    analysis = analyze_strategy(args.scoopees, args.scoopers)
    logger.debug("Analyzed %d Scoopee pairs", analysis.total_combinations)

    if args.json:
        print(analysis_to_response(analysis).model_dump_json(indent=2))
    else:
        print(format_report(analysis, args.limit))


if __name__ == "__main__":
    main()
