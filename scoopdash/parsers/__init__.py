from scoopdash.parsers.card_spec import parse_card_spec, parse_card_spec_with_diagnostics

__all__ = [
    "parse_card_spec",
    "parse_card_spec_with_diagnostics",
]
