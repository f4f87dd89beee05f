from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="SCOOPDASH_")

    app_name: str = "Scoop Strategy Dashboard"
    debug: bool = False

    # Number of entries in each "top N" insight list
    insight_limit: int = 3

    # Distinct (scoopee spec, scooper spec) pairs kept in the analysis cache
    analysis_cache_size: int = 128

    # Widest range token accepted by the parser (e.g. "1-10000")
    max_range_span: int = 10_000

    # Most physical cards a single spec may describe; pairs grow as n * (n - 1) / 2
    max_total_cards: int = 500

    # Longest spec string the HTTP surface accepts
    max_spec_length: int = 2_000

    # Initial dashboard inputs
    default_scoopee_spec: str = "1 (2), 2 (1), 3-5 (2)"
    default_scooper_spec: str = "5-7 (2), 8 (3)"


settings = Settings()


# =============================================================================
# CARD SPEC GRAMMAR
# =============================================================================

# Separates tokens in a card spec ("1 (2), 3-5")
TOKEN_SEPARATOR = ","

# Separates range bounds ("3-5")
RANGE_SEPARATOR = "-"

# Multiplier used when a token has none, or an unusable one
DEFAULT_MULTIPLIER = 1
