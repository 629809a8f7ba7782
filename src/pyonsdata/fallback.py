"""Fallback from the "latest" version alias to a fixed version.

The ONS API's ``latest`` alias intermittently answers HTTP 500 for some
datasets (cpih01 among them) while a fixed version behind it serves the
same content. :func:`request_with_fallback` retries such requests once
against :data:`~pyonsdata.constants.FALLBACK_VERSION`.

Only a ServerError on ``latest`` triggers the fallback. Client errors,
rate limiting, network failures and requests for concrete versions are
never retried.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from pyonsdata._types import FailureKind
from pyonsdata.constants import FALLBACK_VERSION, LATEST_VERSION
from pyonsdata.exceptions import APIError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

T = TypeVar("T")


def should_fall_back(error: APIError, version: str) -> bool:
    """Return True if ``error`` on ``version`` warrants the fallback request."""
    return version == LATEST_VERSION and error.kind is FailureKind.SERVER_ERROR


def request_with_fallback(fetch: Callable[[str], T], version: str) -> T:
    """Call ``fetch(version)``, falling back to the fixed version if needed.

    Args:
        fetch: Issues the request for a given version identifier. Every
            other request parameter must be bound inside it, so that the
            fallback request differs from the first only by version.
        version: The version requested by the caller.

    Returns:
        The result of the first request, or of the fallback request.

    Raises:
        APIError: The failure of the first request. If the fallback
            request also fails, the original failure is raised rather than
            the fallback's, so callers see the error that triggered it.
    """
    try:
        return fetch(version)
    except APIError as error:
        if not should_fall_back(error, version):
            raise
        logger.warning(
            "ONS API returned %s for version '%s', falling back to version '%s'",
            error.status_code,
            version,
            FALLBACK_VERSION,
        )
        try:
            return fetch(FALLBACK_VERSION)
        except APIError as fallback_error:
            logger.debug("Fallback to version '%s' failed: %s", FALLBACK_VERSION, fallback_error)
            raise error
