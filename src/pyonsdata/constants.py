"""Constants and configuration for pyonsdata.

This module contains the configuration values and lookup tables used
throughout the package. Centralising these values makes it easier to
update them and ensures consistency.

Constants:
    ONS_BASE_URL: Base URL for the ONS dataset API.
    DEFAULT_TIMEOUT: Timeout for HTTP requests (seconds).
    USER_AGENT: Fixed User-Agent header sent with every request.
    DEFAULT_HEADERS: Headers sent with every request.
    LATEST_VERSION: The server-side alias for the most recent version.
    FALLBACK_VERSION: Fixed version substituted when "latest" fails.
    DEFAULT_EDITION: Edition used when none is given.
    POPULAR_DATASETS: Curated list of commonly used dataset identifiers.
"""

from __future__ import annotations

# =============================================================================
# API Configuration
# =============================================================================

# Base URL for the ONS (beta) dataset API
ONS_BASE_URL: str = "https://api.beta.ons.gov.uk/v1"

# Timeout for HTTP requests (seconds)
DEFAULT_TIMEOUT: int = 10

USER_AGENT: str = "pyonsdata/1.0.0"

DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "User-Agent": USER_AGENT,
}

# Prefix for every normalised error message
ERROR_PREFIX: str = "ONS API"

# =============================================================================
# Versions and Editions
# =============================================================================

LATEST_VERSION: str = "latest"

# "latest" intermittently returns 500 for some datasets (e.g. cpih01),
# while version 6 serves reliably.
FALLBACK_VERSION: str = "6"

DEFAULT_EDITION: str = "time-series"

# =============================================================================
# Listing and Search
# =============================================================================

DEFAULT_LIST_LIMIT: int = 20

DEFAULT_SEARCH_LIMIT: int = 10

# The API has no search endpoint, so search filters one page of this size
SEARCH_WINDOW: int = 100

POPULAR_DATASETS: tuple[str, ...] = (
    "cpih01",
    "regional-gdp-by-year",
    "wellbeing-local-authority",
    "uk-spending-on-cards",
    "weekly-deaths-region",
    "trade",
    "ageing-population-estimates",
    "wellbeing-quarterly",
    "traffic-camera-activity",
    "tax-benefits-statistics",
)
