"""Shared fixtures for pyonsdata tests."""

from unittest.mock import Mock

import pytest
import requests


def _make_response(status_code=200, payload=None, json_error=None):
    """Build a mock ``requests.Response``."""
    response = Mock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = {} if payload is None else payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error for url", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def make_response():
    """Factory fixture for mock HTTP responses."""
    return _make_response


@pytest.fixture
def sample_datasets():
    """A small page of datasets for search tests."""
    return {
        "count": 3,
        "limit": 100,
        "offset": 0,
        "total_count": 3,
        "items": [
            {
                "id": "cpih01",
                "title": "CPI Index",
                "description": "Consumer price inflation including owner occupiers' housing costs.",
            },
            {
                "id": "trade",
                "title": "Trade Balance",
                "description": "Imports and exports of goods.",
            },
            {
                "id": "wellbeing-quarterly",
                "title": "Quarterly personal well-being estimates",
                "description": "Seasonally adjusted life satisfaction.",
            },
        ],
    }
