"""Client for the ONS dataset API.

This module provides the ONSClient class, the entry point for listing,
searching and fetching ONS datasets, versions and observations.

Examples:
    >>> from pyonsdata import ONSClient
    >>> client = ONSClient()
    >>> page = client.search_datasets("inflation", limit=5)
    >>> result = client.get_observations(
    ...     "cpih01",
    ...     dimensions={"time": "*", "geography": "K02000001", "aggregate": "cpih1dim1A0"},
    ... )
    >>> df = client.observations_frame("cpih01", dimensions={"time": "*", ...})
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pyonsdata._types import TransportConfig
from pyonsdata.constants import (
    DEFAULT_EDITION,
    DEFAULT_LIST_LIMIT,
    DEFAULT_SEARCH_LIMIT,
    DEFAULT_TIMEOUT,
    LATEST_VERSION,
    ONS_BASE_URL,
    POPULAR_DATASETS,
    SEARCH_WINDOW,
)
from pyonsdata.exceptions import APIError
from pyonsdata.fallback import request_with_fallback
from pyonsdata.fetchers import fetch_json
from pyonsdata.parsers import extract_dimensions, extract_download_url, observations_to_frame
from pyonsdata.search import search_page

if TYPE_CHECKING:
    import pandas as pd

    from pyonsdata._types import (
        Dataset,
        DatasetPage,
        Dimension,
        ObservationQuery,
        ObservationResult,
    )


class ONSClient:
    """A client for the UK Office for National Statistics dataset API.

    The client holds only its transport configuration, which is fixed at
    construction, so a single instance can be shared freely. Every method
    either returns the decoded response or raises exactly one
    :class:`~pyonsdata.exceptions.APIError`.

    Args:
        base_url: Root URL of the API. Defaults to the public ONS beta API.
        timeout: Per-request timeout in seconds. Defaults to 10.

    Examples:
        >>> client = ONSClient()
        >>> client.health_check()
        True
        >>> dataset = client.get_dataset("cpih01")
        >>> print(dataset["title"])
    """

    def __init__(self, base_url: str = ONS_BASE_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._config = TransportConfig(base_url=base_url, timeout=timeout)

    @property
    def config(self) -> TransportConfig:
        """The transport configuration used for every request."""
        return self._config

    def __repr__(self) -> str:
        return f"ONSClient(base_url={self._config.base_url!r}, timeout={self._config.timeout})"

    # =========================================================================
    # Datasets
    # =========================================================================

    def list_datasets(self, limit: int = DEFAULT_LIST_LIMIT, offset: int = 0) -> DatasetPage:
        """List available datasets.

        Args:
            limit: Maximum number of datasets to return.
            offset: Index of the first dataset to return.

        Returns:
            A DatasetPage with the requested window of the collection.
        """
        return fetch_json(self._config, "/datasets", params={"limit": limit, "offset": offset})

    def get_dataset(self, dataset_id: str) -> Dataset:
        """Get detailed information about a dataset.

        Raises:
            NotFoundError: If the dataset does not exist.
        """
        return fetch_json(self._config, f"/datasets/{dataset_id}")

    def get_dataset_dimensions(self, dataset_id: str) -> list[Dimension]:
        """Get a dataset's dimensions, or an empty list if it lists none."""
        return extract_dimensions(self.get_dataset(dataset_id))

    def get_dimension_options(self, dataset_id: str, dimension_id: str) -> dict[str, Any]:
        """Get the option set of one dimension of a dataset.

        Args:
            dataset_id: The dataset identifier.
            dimension_id: The dimension identifier, e.g. "geography".

        Returns:
            The options body, with the options listed under ``items``.
        """
        return fetch_json(self._config, f"/datasets/{dataset_id}/dimensions/{dimension_id}/options")

    def search_datasets(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> DatasetPage:
        """Search datasets by title, description or id.

        The API offers no search, so this fetches the first 100 datasets
        and filters them locally with a case-insensitive substring match.

        Args:
            query: The search term.
            limit: Maximum number of results.

        Returns:
            A DatasetPage of at most ``limit`` matches.
        """
        return search_page(self.list_datasets(SEARCH_WINDOW, 0), query, limit)

    def get_popular_datasets(self) -> list[str]:
        """Return identifiers of commonly used datasets. No request is made."""
        return list(POPULAR_DATASETS)

    # =========================================================================
    # Versions
    # =========================================================================

    def get_version(
        self,
        dataset_id: str,
        edition: str = DEFAULT_EDITION,
        version: str = LATEST_VERSION,
    ) -> dict[str, Any]:
        """Get a specific version of a dataset edition.

        If ``version`` is "latest" and the API answers with a server error,
        the request is repeated once for the fixed fallback version.

        Args:
            dataset_id: The dataset identifier, e.g. "cpih01".
            edition: The edition. Defaults to "time-series".
            version: The version number, or "latest".

        Returns:
            The version body, including ``downloads`` and ``dimensions``.
        """
        path = f"/datasets/{dataset_id}/editions/{edition}/versions"
        return request_with_fallback(lambda v: fetch_json(self._config, f"{path}/{v}"), version)

    def get_latest_version(self, dataset_id: str, edition: str = DEFAULT_EDITION) -> dict[str, Any]:
        """Get the latest version of a dataset edition, with fallback."""
        return self.get_version(dataset_id, edition, LATEST_VERSION)

    def get_download_url(self, dataset_id: str, edition: str = DEFAULT_EDITION) -> str:
        """Get the CSV download URL of the latest version.

        Returns:
            The URL, or an empty string if the version has no CSV download.
        """
        return extract_download_url(self.get_latest_version(dataset_id, edition))

    # =========================================================================
    # Observations
    # =========================================================================

    def get_observations(
        self,
        dataset_id: str,
        edition: str = DEFAULT_EDITION,
        version: str = LATEST_VERSION,
        dimensions: ObservationQuery | None = None,
    ) -> ObservationResult:
        """Get observations for a dataset version filtered by dimension.

        If ``version`` is "latest" and the API answers with a server error,
        the request is repeated once for the fixed fallback version with
        the same dimension selections.

        Args:
            dataset_id: The dataset identifier.
            edition: The edition. Defaults to "time-series".
            version: The version number, or "latest".
            dimensions: Selected option per dimension id. Values are sent
                verbatim and must be URL-safe; "*" selects all options.

        Returns:
            The observation result.

        Raises:
            APIError: If the request fails. When the fallback also fails,
                the original server error is raised.
        """
        query = dict(dimensions or {})
        path = f"/datasets/{dataset_id}/editions/{edition}/versions"
        return request_with_fallback(
            lambda v: fetch_json(self._config, f"{path}/{v}/observations", query=query),
            version,
        )

    def observations_frame(
        self,
        dataset_id: str,
        edition: str = DEFAULT_EDITION,
        version: str = LATEST_VERSION,
        dimensions: ObservationQuery | None = None,
    ) -> pd.DataFrame:
        """Get observations as a DataFrame with one row per observation.

        Takes the same arguments as :meth:`get_observations`.
        """
        return observations_to_frame(
            self.get_observations(dataset_id, edition, version, dimensions)
        )

    # =========================================================================
    # Health
    # =========================================================================

    def health_check(self) -> bool:
        """Check that the API is reachable.

        Returns:
            True if a minimal dataset listing succeeds, False on any failure.
        """
        try:
            fetch_json(self._config, "/datasets", params={"limit": 1})
        except APIError:
            return False
        return True
