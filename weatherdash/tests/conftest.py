"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from weatherdash.config.defaults import DEFAULT_CITIES
from weatherdash.config.schema import DashboardConfig
from weatherdash.tests.fakes import FakeOpenWeatherClient


@pytest.fixture
def default_config() -> DashboardConfig:
    """Return default DashboardConfig with default cities."""
    return DashboardConfig(cities=DEFAULT_CITIES)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {
            "base_url": "https://test-owm.example.com",
            "units": "metric",
            "api_key_env": "WEATHERDASH_TEST_KEY",
        },
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fake_client() -> FakeOpenWeatherClient:
    return FakeOpenWeatherClient()
