"""Custom exceptions for pyonsdata.

This module defines the exception hierarchy used throughout the package.
All exceptions inherit from DataError, making it easy to catch all
package-specific errors. Every failed request surfaces as exactly one
APIError subclass, each tagged with a FailureKind.

Exception Hierarchy:
    DataError (base)
    └── APIError: Failed request to the ONS API.
        ├── NotFoundError: HTTP 404.
        ├── BadRequestError: HTTP 400.
        ├── RateLimitError: HTTP 429.
        ├── ServerError: HTTP 500.
        ├── UnknownHTTPError: Any other HTTP error status.
        └── NetworkError: No response received.

Examples:
    >>> from pyonsdata import ONSClient
    >>> from pyonsdata.exceptions import APIError, NotFoundError
    >>> client = ONSClient()
    >>> try:
    ...     dataset = client.get_dataset("INVALID")
    ... except NotFoundError as e:
    ...     print(f"Missing: {e.url}")
    ... except APIError as e:
    ...     print(f"{e.kind.value}: {e}")
"""

from __future__ import annotations

from pyonsdata._types import FailureKind


class DataError(Exception):
    """Base exception for all pyonsdata errors.

    This is the root of the exception hierarchy. Catching this exception
    will catch all package-specific errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class APIError(DataError):
    """Raised when a request to the ONS API fails.

    Instances are created by :mod:`pyonsdata.fetchers`; the concrete
    subclass and its ``kind`` identify what went wrong.

    Attributes:
        message: Human-readable error description.
        url: The URL that failed, if available.
        status_code: HTTP status code, if a response was received.
        kind: The FailureKind of this error.
    """

    kind: FailureKind = FailureKind.UNKNOWN_HTTP

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(APIError):
    """The requested dataset, edition, version or dimension does not exist."""

    kind = FailureKind.NOT_FOUND


class BadRequestError(APIError):
    """The API rejected the request parameters."""

    kind = FailureKind.BAD_REQUEST


class RateLimitError(APIError):
    """The API returned HTTP 429 because too many requests were made."""

    kind = FailureKind.RATE_LIMITED


class ServerError(APIError):
    """The API returned HTTP 500."""

    kind = FailureKind.SERVER_ERROR


class UnknownHTTPError(APIError):
    """The API returned an error status outside the mapped set."""

    kind = FailureKind.UNKNOWN_HTTP


class NetworkError(APIError):
    """No HTTP response was received.

    Raised for DNS failures, refused connections and timeouts. The
    ``status_code`` is always None.
    """

    kind = FailureKind.NETWORK_ERROR
