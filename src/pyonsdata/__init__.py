"""pyonsdata - Access UK Office for National Statistics datasets.

This package provides a typed client for the ONS dataset API: list and
search datasets, resolve versions, and fetch observations filtered by
dimension, with failures normalised into a single exception hierarchy.

Main Classes:
    ONSClient: List, search and fetch ONS datasets and observations.

Examples:
    >>> from pyonsdata import ONSClient, APIError
    >>> client = ONSClient()
    >>> # Search for datasets
    >>> results = client.search_datasets("wellbeing")
    >>> # Fetch observations for the latest version
    >>> result = client.get_observations(
    ...     "cpih01",
    ...     dimensions={"time": "*", "geography": "K02000001", "aggregate": "cpih1dim1A0"},
    ... )
    >>> df = client.observations_frame("cpih01", dimensions={...})
    >>> # Handle failures by kind
    >>> try:
    ...     client.get_dataset("missing")
    ... except APIError as e:
    ...     print(e.kind, e.status_code)
"""

from __future__ import annotations

import importlib.metadata

__version__ = importlib.metadata.version("pyonsdata")

from pyonsdata._types import (
    Dataset,
    DatasetPage,
    Dimension,
    FailureKind,
    Observation,
    ObservationQuery,
    ObservationResult,
    TransportConfig,
)
from pyonsdata.client import ONSClient

# Exceptions
from pyonsdata.exceptions import (
    APIError,
    BadRequestError,
    DataError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnknownHTTPError,
)

__all__ = [
    "APIError",
    "BadRequestError",
    "DataError",
    "Dataset",
    "DatasetPage",
    "Dimension",
    "FailureKind",
    "NetworkError",
    "NotFoundError",
    "ONSClient",
    "Observation",
    "ObservationQuery",
    "ObservationResult",
    "RateLimitError",
    "ServerError",
    "TransportConfig",
    "UnknownHTTPError",
]
