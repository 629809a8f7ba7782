"""Client-side dataset search.

The ONS API has no search endpoint, so searching fetches a page of the
dataset collection and filters it locally with a case-insensitive
substring match against each dataset's title, description and id.

Public Functions:
    dataset_matches: Check whether a single dataset matches a query.
    filter_datasets: Select matching datasets, up to a limit.
    search_page: Build a DatasetPage of matches from a fetched page.

Examples:
    >>> from pyonsdata.search import dataset_matches
    >>> dataset_matches({"id": "trade", "title": "Trade Balance", "description": ""}, "TRADE")
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pyonsdata._types import Dataset, DatasetPage

# Fields compared against the search term, in order
SEARCH_FIELDS: tuple[str, ...] = ("title", "description", "id")


def dataset_matches(dataset: Dataset, query: str) -> bool:
    """Check whether a dataset's title, description or id contains ``query``.

    Matching is case-insensitive. Missing or null fields never match.

    Args:
        dataset: The dataset to test.
        query: The search term.

    Returns:
        True if any searched field contains the term.
    """
    term = query.lower()
    for field in SEARCH_FIELDS:
        value = dataset.get(field)
        if isinstance(value, str) and term in value.lower():
            return True
    return False


def filter_datasets(datasets: Iterable[Dataset], query: str, limit: int) -> list[Dataset]:
    """Return the first ``limit`` datasets matching ``query``, in order."""
    if limit <= 0:
        return []
    matches: list[Dataset] = []
    for dataset in datasets:
        if dataset_matches(dataset, query):
            matches.append(dataset)
            if len(matches) >= limit:
                break
    return matches


def search_page(page: DatasetPage, query: str, limit: int) -> DatasetPage:
    """Filter a fetched page of datasets into a page of search results.

    Args:
        page: The page to search.
        query: The search term.
        limit: Maximum number of results.

    Returns:
        A DatasetPage whose ``count`` and ``total_count`` are the number
        of results returned, with ``offset`` 0 and the requested ``limit``.
    """
    items = filter_datasets(page.get("items") or [], query, limit)
    return {
        "count": len(items),
        "items": items,
        "limit": limit,
        "offset": 0,
        "total_count": len(items),
    }
