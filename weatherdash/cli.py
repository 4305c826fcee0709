"""CLI entry point for the weather dashboard core."""

import argparse
import asyncio
import logging

import yaml

from weatherdash.config.loader import get_config_value, load_api_key, load_config
from weatherdash.config.schema import CityConfig, DashboardConfig
from weatherdash.ingest.openweather_client import OpenWeatherClient
from weatherdash.reporting.formatters import format_weather_json, format_weather_text
from weatherdash.state.aggregator import WeatherAggregator


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherdash",
        description="Current conditions and forecasts for a fixed set of cities",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # cities
    sub.add_parser("cities", help="List the city catalog")

    # weather
    weather_p = sub.add_parser("weather", help="Fetch and show weather for a city")
    weather_p.add_argument("--city", default=None, help="City name (default: first)")
    weather_p.add_argument("--format", choices=["text", "json"], default="text")
    weather_p.add_argument(
        "--hours", type=_non_negative_int, default=8, help="Hourly entries to show"
    )

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. provider.units")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError, ValueError) as e:
        print(f"Error: cannot load config: {e}")
        return 1

    if args.command == "cities":
        return _cmd_cities(config)
    elif args.command == "weather":
        return asyncio.run(_cmd_weather(config, args))
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more: {n}")
    return n


def _find_city(config: DashboardConfig, name: str | None) -> CityConfig | None:
    if name is None:
        return config.cities[0]
    wanted = name.strip().lower()
    for city in config.cities:
        if city.name.lower() == wanted:
            return city
    return None


def _cmd_cities(config: DashboardConfig) -> int:
    for i, city in enumerate(config.cities):
        marker = "*" if i == 0 else " "
        print(f"{marker} {city.name:<20} {city.lat:>9.4f} {city.lon:>9.4f}")
    return 0


async def _cmd_weather(config: DashboardConfig, args) -> int:
    city = _find_city(config, args.city)
    if city is None:
        names = ", ".join(c.name for c in config.cities)
        print(f"Error: unknown city {args.city!r} (choose from: {names})")
        return 1

    api_key = load_api_key(config.provider)
    if api_key is None:
        print(f"Error: set {config.provider.api_key_env} to your OpenWeather API key")
        return 1

    provider = config.provider
    async with OpenWeatherClient(
        base_url=provider.base_url,
        units=provider.units,
        timeout=provider.timeout_seconds,
    ) as client:
        aggregator = WeatherAggregator(client, api_key, cities=config.cities)
        task = aggregator.select_city(city)
        if task is not None:
            await task

    current = aggregator.current_weather
    hourly = aggregator.hourly_forecast
    daily = aggregator.daily_forecast
    if args.format == "json":
        print(format_weather_json(city, current, hourly, daily))
    else:
        print(format_weather_text(city, current, hourly, daily, hours=args.hours))

    return 0 if any(v is not None for v in (current, hourly, daily)) else 1


def _cmd_config(config: DashboardConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        print(value.model_dump_json(indent=2) if hasattr(value, "model_dump_json") else value)
        return 0
    else:
        print("Use: config show | config get key")
        return 1
