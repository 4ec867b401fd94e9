"""Tests for APIServiceConfig."""

import pytest

from apiservice import DEFAULT_BASE_URL, APIServiceConfig


def test_default_config():
    """Test default configuration values."""
    config = APIServiceConfig()
    assert config.base_url == DEFAULT_BASE_URL == "https://jsonplaceholder.typicode.com"
    assert config.timeout == 5.0
    assert config.verify_ssl is True


def test_config_with_values():
    """Test configuration with custom values."""
    config = APIServiceConfig(
        base_url="http://localhost:3000/api",
        timeout=10.0,
        verify_ssl=False,
    )
    assert config.base_url == "http://localhost:3000/api"
    assert config.timeout == 10.0
    assert config.verify_ssl is False


def test_config_removes_trailing_slash():
    """Test that trailing slash is removed from base_url."""
    config = APIServiceConfig(base_url="http://test:8000/")
    assert config.base_url == "http://test:8000"


@pytest.mark.parametrize("timeout", [0, -1.5])
def test_config_validates_timeout(timeout):
    """Test that non-positive timeout raises error."""
    with pytest.raises(ValueError, match="timeout must be greater than 0"):
        APIServiceConfig(timeout=timeout)
