"""Pytest configuration for the currencymatrix test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Matrix Test Separation:
Tests marked with @pytest.mark.matrix run the full expectation matrix against
live Babel CLDR data. Their expected literals track one locale-data release,
so they are excluded from normal test runs.
Run them via: pytest -m matrix
Select the provider with CURRENCYMATRIX_LOCALE_PROVIDERS=COMPAT|CLDR.
"""

import os
from datetime import UTC, datetime

import pytest
from hypothesis import Phase, Verbosity, settings

from tests.helpers.fake_service import FakeFormattingService

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# MATRIX TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'matrix' marker for live locale-data runs."""
    config.addinivalue_line(
        "markers",
        "matrix: Full expectation-matrix runs against live locale data "
        "(excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip matrix-marked tests unless explicitly requested.

    Behavior:
    - Normal test run (pytest tests/): Matrix tests are SKIPPED
    - Explicit matrix run (pytest -m matrix): Matrix tests run
    """
    marker_expr = config.getoption("-m", default="")
    if "matrix" in str(marker_expr):
        return

    skip_matrix = pytest.mark.skip(reason="Live locale-data matrix - run with: pytest -m matrix")
    for item in items:
        if "matrix" in item.keywords:
            item.add_marker(skip_matrix)


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def fake_service() -> FakeFormattingService:
    """Deterministic in-memory formatting service."""
    return FakeFormattingService()


@pytest.fixture
def frozen_now() -> datetime:
    """Fixed clock value for time-gated symbol resolution."""
    return datetime(2026, 6, 15, 12, 0, 0, tzinfo=UTC)
