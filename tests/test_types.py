"""Tests for the _types module."""

import dataclasses

import pytest

from pyonsdata._types import FailureKind, TransportConfig
from pyonsdata.constants import DEFAULT_HEADERS, DEFAULT_TIMEOUT, ONS_BASE_URL


class TestFailureKindEnum:
    """Tests for the FailureKind enum."""

    def test_enum_values(self):
        """Test that all expected enum values exist."""
        assert FailureKind.NOT_FOUND.value == "not_found"
        assert FailureKind.BAD_REQUEST.value == "bad_request"
        assert FailureKind.RATE_LIMITED.value == "rate_limited"
        assert FailureKind.SERVER_ERROR.value == "server_error"
        assert FailureKind.UNKNOWN_HTTP.value == "unknown_http"
        assert FailureKind.NETWORK_ERROR.value == "network_error"

    def test_enum_is_string(self):
        """Test that enum inherits from str for comparison."""
        assert isinstance(FailureKind.NOT_FOUND, str)
        assert FailureKind.SERVER_ERROR == "server_error"

    def test_closed_set(self):
        """Test that there are exactly six kinds."""
        assert len(FailureKind) == 6


class TestTransportConfig:
    """Tests for the TransportConfig dataclass."""

    def test_default_values(self):
        """Test the default connection parameters."""
        config = TransportConfig()
        assert config.base_url == ONS_BASE_URL
        assert config.timeout == DEFAULT_TIMEOUT
        assert dict(config.headers) == DEFAULT_HEADERS

    def test_is_frozen(self):
        """Test that the configuration cannot be reassigned."""
        config = TransportConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.timeout = 99

    def test_headers_are_read_only(self):
        """Test that headers cannot be changed through the config."""
        config = TransportConfig()
        with pytest.raises(TypeError):
            config.headers["User-Agent"] = "changed"
        assert config.headers["User-Agent"] == DEFAULT_HEADERS["User-Agent"]

    def test_headers_copied_from_argument(self):
        """Test that later changes to the passed mapping are not seen."""
        headers = {"Accept": "application/json"}
        config = TransportConfig(headers=headers)
        headers["Accept"] = "text/csv"
        assert config.headers["Accept"] == "application/json"

    def test_headers_not_shared_with_constants(self):
        """Test that each config owns its header mapping."""
        assert TransportConfig().headers is not DEFAULT_HEADERS
