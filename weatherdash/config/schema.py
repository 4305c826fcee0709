"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

OPENWEATHER_BASE_URL = "https://api.openweathermap.org"
DEFAULT_API_KEY_ENV = "OPENWEATHER_API_KEY"


class Units(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"
    STANDARD = "standard"


class CityConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(min_length=1)
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPENWEATHER_BASE_URL
    units: Units = Units.METRIC
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    api_key_env: str = DEFAULT_API_KEY_ENV


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    cities: list[CityConfig] = []
