"""Default city catalog."""

from weatherdash.config.schema import CityConfig

DEFAULT_CITIES: list[CityConfig] = [
    CityConfig(name="Rio de Janeiro", lat=-22.9068, lon=-43.1729),
    CityConfig(name="Beijing", lat=39.9042, lon=116.4074),
    CityConfig(name="Los Angeles", lat=34.0522, lon=-118.2437),
]
