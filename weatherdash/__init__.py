"""Weather dashboard data core: city catalog, OpenWeatherMap fetches, daily summaries."""

__version__ = "0.1.0"
