"""Type definitions and enums for pyonsdata.

This module contains all shared type definitions, enums, and TypedDict
structures used throughout the package. The TypedDicts mirror the JSON
returned by the ONS API; fields not listed here are passed through
untouched.

Classes:
    FailureKind: Enum classifying every normalised request failure.
    TransportConfig: Frozen connection parameters for the client.
    Dataset, DatasetPage, Dimension: Dataset collection shapes.
    Observation, ObservationResult: Observation endpoint shapes.

Type Aliases:
    ObservationQuery: Mapping of dimension id to selected option.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, TypedDict

from pyonsdata.constants import DEFAULT_HEADERS, DEFAULT_TIMEOUT, ONS_BASE_URL


class FailureKind(str, Enum):
    """Classification of a failed API request.

    The set is closed: every failure raised by the client carries exactly
    one of these kinds.

    Attributes:
        NOT_FOUND: HTTP 404.
        BAD_REQUEST: HTTP 400.
        RATE_LIMITED: HTTP 429.
        SERVER_ERROR: HTTP 500.
        UNKNOWN_HTTP: Any other HTTP error status.
        NETWORK_ERROR: No response was received (DNS, refused, timeout).

    Examples:
        >>> from pyonsdata import APIError, FailureKind, ONSClient
        >>> try:
        ...     ONSClient().get_dataset("no-such-dataset")
        ... except APIError as e:
        ...     assert e.kind is FailureKind.NOT_FOUND
    """

    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    UNKNOWN_HTTP = "unknown_http"
    NETWORK_ERROR = "network_error"


@dataclass(frozen=True, slots=True)
class TransportConfig:
    """Connection parameters shared by every request a client makes.

    Attributes:
        base_url: Root URL of the API, without a trailing slash.
        timeout: Per-request timeout in seconds.
        headers: Headers sent with every request, held read-only.
    """

    base_url: str = ONS_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    headers: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))

    def __post_init__(self) -> None:
        # Read-only copy of the caller's mapping
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


class Link(TypedDict):
    href: str


class DocumentLink(TypedDict):
    href: str
    title: str


class Contact(TypedDict):
    email: str
    name: str
    telephone: str


class DimensionLinks(TypedDict):
    options: Link
    self: Link


class Dimension(TypedDict):
    """A categorical axis (e.g. geography, time) of a dataset."""

    id: str
    name: str
    label: str
    links: DimensionLinks


class DatasetLinks(TypedDict):
    self: Link
    latest_version: Link
    editions: Link


class _DatasetRequired(TypedDict):
    id: str
    title: str
    description: str
    links: DatasetLinks
    state: str
    type: str
    uri: str


class Dataset(_DatasetRequired, total=False):
    """Metadata for a single ONS dataset."""

    qmi: DocumentLink
    methodology: DocumentLink
    contacts: list[Contact]
    dimensions: list[Dimension]


class DatasetPage(TypedDict):
    """A window over the dataset collection.

    ``len(items) <= limit`` and ``len(items) <= count <= total_count``.
    """

    count: int
    items: list[Dataset]
    limit: int
    offset: int
    total_count: int


class _ObservationRequired(TypedDict):
    dimensions: dict[str, Any]
    observation: str


class Observation(_ObservationRequired, total=False):
    metadata: dict[str, Any]


class ObservationResult(TypedDict):
    """Observations for one dataset version.

    ``total_observations`` is reported by the API and is not tied to the
    length of ``observations``.
    """

    observations: list[Observation]
    dimensions: dict[str, Any]
    links: dict[str, Any]
    total_observations: int


# Type aliases for common patterns
ObservationQuery = Mapping[str, str]
"""Dimension id to selected option, e.g. ``{"time": "*", "geography": "K02000001"}``.

Values are placed in the query string verbatim and must already be URL-safe.
"""
