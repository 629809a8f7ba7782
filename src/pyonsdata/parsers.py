"""Projections over ONS API response bodies.

This module extracts the pieces of API responses that the client
surfaces directly, and converts observation results into pandas
DataFrames.

Public Functions:
    extract_dimensions: Get a dataset's dimension list.
    extract_download_url: Get the CSV download link of a version.
    observations_to_frame: Flatten an ObservationResult into a DataFrame.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pandas as pd

if TYPE_CHECKING:
    from pyonsdata._types import Dataset, Dimension, ObservationResult

# Column holding the raw observation value
OBSERVATION_COLUMN: str = "observation"

# Column holding the observation value parsed as a number
VALUE_COLUMN: str = "value"

# Suffix added to a dimension whose name collides with a reserved column
DIMENSION_SUFFIX: str = "_dimension"

_RESERVED_COLUMNS: frozenset[str] = frozenset({OBSERVATION_COLUMN, VALUE_COLUMN})


def extract_dimensions(dataset: Dataset) -> list[Dimension]:
    """Return the dataset's dimensions, or an empty list if it has none."""
    return list(dataset.get("dimensions") or [])


def extract_download_url(version: dict[str, Any], file_format: str = "csv") -> str:
    """Return ``downloads.<format>.href`` from a version body.

    Args:
        version: The JSON body of a dataset version.
        file_format: The download format key. Defaults to "csv".

    Returns:
        The download URL, or an empty string if the version has no such
        download.
    """
    downloads = version.get("downloads")
    entry = downloads.get(file_format) if isinstance(downloads, dict) else None
    href = entry.get("href") if isinstance(entry, dict) else None
    return href if isinstance(href, str) else ""


def _dimension_column(name: str) -> str:
    """Rename dimensions that would overwrite a reserved column."""
    if name in _RESERVED_COLUMNS:
        return f"{name}{DIMENSION_SUFFIX}"
    return name


def _dimension_label(value: Any) -> Any:
    """Get a display value for an observation's dimension entry.

    The API returns either a bare option string or an object with
    ``id``, ``label`` and ``href``.
    """
    if isinstance(value, dict):
        return value.get("label") or value.get("id")
    return value


def observations_to_frame(result: ObservationResult) -> pd.DataFrame:
    """Flatten an ObservationResult into a long-format DataFrame.

    Each observation becomes one row with a column per dimension, the raw
    ``observation`` string, and a numeric ``value`` column. Non-numeric
    observations (such as suppression markers) become NaN in ``value``.
    A dimension named ``observation`` or ``value`` is renamed with a
    ``_dimension`` suffix so it does not overwrite those columns.

    Args:
        result: The observation result to convert.

    Returns:
        A DataFrame with one row per observation.

    Examples:
        >>> df = observations_to_frame({
        ...     "observations": [
        ...         {"dimensions": {"time": {"id": "Jan-20", "label": "Jan-20"}},
        ...          "observation": "108.2"},
        ...     ],
        ...     "dimensions": {}, "links": {}, "total_observations": 1,
        ... })
        >>> df["value"].iloc[0]
        108.2
    """
    records = []
    for item in result.get("observations") or []:
        record = {
            _dimension_column(name): _dimension_label(value)
            for name, value in (item.get("dimensions") or {}).items()
        }
        record[OBSERVATION_COLUMN] = item.get("observation")
        records.append(record)

    df = pd.DataFrame(records)
    if df.empty:
        return pd.DataFrame(columns=[OBSERVATION_COLUMN, VALUE_COLUMN])

    df[VALUE_COLUMN] = pd.to_numeric(df[OBSERVATION_COLUMN], errors="coerce")
    return df
