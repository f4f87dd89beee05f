import pytest

from scoopdash.analysis.pipeline import clear_analysis_cache


@pytest.fixture(autouse=True)
def clear_cached_analyses():
    """Clear memoized analyses between tests.

    Cache hit/miss counts would otherwise leak from one test into the next.
    """
    clear_analysis_cache()
    yield
    clear_analysis_cache()


@pytest.fixture
def scoopee_spec() -> str:
    """Initial Scoopee input of the dashboard: 9 cards, 36 pairs."""
    return "1 (2), 2 (1), 3-5 (2)"


@pytest.fixture
def scooper_spec() -> str:
    """Initial Scooper input of the dashboard."""
    return "5-7 (2), 8 (3)"
