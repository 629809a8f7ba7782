"""HTTP fetching and error normalisation for the ONS API.

This module handles all HTTP communication with the ONS API. Every
request goes through :func:`fetch_json`, which converts transport and
HTTP failures into the APIError hierarchy so that no raw ``requests``
exception reaches a caller.

Public Functions:
    fetch_json: GET a path and return its decoded JSON body.
    build_url: Join a path (and optional dimension query) onto the base URL.
    build_query_string: Render a dimension query as ``k=v&k=v``.
    normalise_http_error: Convert an HTTP error response into an APIError.
    normalise_network_error: Convert a transport failure into a NetworkError.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import requests

from pyonsdata._types import TransportConfig
from pyonsdata.constants import ERROR_PREFIX
from pyonsdata.exceptions import (
    APIError,
    BadRequestError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnknownHTTPError,
)

# =============================================================================
# Error Normalisation
# =============================================================================

# Status codes with a dedicated error class; everything else >= 400 is
# an UnknownHTTPError
_STATUS_ERRORS: dict[int, tuple[type[APIError], str]] = {
    404: (NotFoundError, "Resource not found"),
    400: (BadRequestError, "Bad request"),
    429: (RateLimitError, "Rate limit exceeded"),
    500: (ServerError, "Server error"),
}


def _server_message(response: requests.Response) -> str | None:
    """Extract the ``message`` field from an error response body, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None


def normalise_http_error(
    response: requests.Response,
    error: Exception,
    *,
    url: str | None = None,
) -> APIError:
    """Convert an HTTP error response into the matching APIError.

    Args:
        response: The response with a status code of 400 or above.
        error: The transport exception, used for the message when the
            server did not supply one.
        url: The requested URL.

    Returns:
        An APIError subclass chosen by status code.
    """
    status = response.status_code
    message = _server_message(response) or str(error)
    error_class, label = _STATUS_ERRORS.get(status, (UnknownHTTPError, f"HTTP {status}"))
    return error_class(f"{ERROR_PREFIX}: {label} - {message}", url=url, status_code=status)


def normalise_network_error(error: Exception, *, url: str | None = None) -> NetworkError:
    """Convert a failure where no response was received into a NetworkError."""
    return NetworkError(f"{ERROR_PREFIX}: Network error - {error}", url=url)


# =============================================================================
# Requests
# =============================================================================


def build_query_string(query: Mapping[str, str]) -> str:
    """Render a dimension query as ``k=v&k=v``.

    Values are not percent-encoded; callers must supply URL-safe values
    (the API uses raw ``*`` wildcards, for example).

    Examples:
        >>> build_query_string({"time": "*", "geography": "K02000001"})
        'time=*&geography=K02000001'
    """
    return "&".join(f"{key}={value}" for key, value in query.items())


def build_url(
    config: TransportConfig,
    path: str,
    query: Mapping[str, str] | None = None,
) -> str:
    """Build the absolute URL for an API path.

    Args:
        config: The transport configuration supplying the base URL.
        path: The API path, e.g. ``/datasets/cpih01``.
        query: Optional dimension selections appended verbatim.

    Returns:
        The absolute URL.
    """
    url = f"{config.base_url.rstrip('/')}/{path.lstrip('/')}"
    if query:
        url = f"{url}?{build_query_string(query)}"
    return url


def fetch_json(
    config: TransportConfig,
    path: str,
    *,
    params: dict[str, Any] | None = None,
    query: Mapping[str, str] | None = None,
) -> Any:
    """Issue a single GET request and return the decoded JSON body.

    Exactly one request is made; there are no retries here.

    Args:
        config: Base URL, timeout and headers to use.
        path: The API path to request.
        params: Query parameters encoded by ``requests`` (e.g. limit/offset).
        query: Dimension selections appended to the URL without encoding.

    Returns:
        The parsed JSON response.

    Raises:
        APIError: The normalised failure. The subclass (and its ``kind``)
            reflects the HTTP status, or NetworkError if no response was
            received.
    """
    url = build_url(config, path, query)

    try:
        response = requests.get(
            url,
            params=params,
            headers=dict(config.headers),
            timeout=config.timeout,
        )
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        if e.response is None:
            raise normalise_network_error(e, url=url) from e
        raise normalise_http_error(e.response, e, url=url) from e
    except requests.exceptions.RequestException as e:
        raise normalise_network_error(e, url=url) from e

    try:
        return response.json()
    except ValueError as e:
        raise UnknownHTTPError(
            f"{ERROR_PREFIX}: HTTP {response.status_code} - Invalid JSON in response: {e}",
            url=url,
            status_code=response.status_code,
        ) from e
