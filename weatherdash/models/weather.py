"""OpenWeatherMap payload models.

Only the fields the dashboard reads are declared; everything else the
provider sends is ignored. Declared fields are type-checked, so a body
with the wrong shape fails validation instead of reaching state.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from weatherdash.models.common import from_epoch


class WeatherCondition(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    description: str | None = None
    icon: str | None = None


class MainReadings(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    temp: float | None = None
    humidity: float | None = None


class Wind(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    speed: float | None = None


class CurrentWeather(BaseModel):
    """Result of /data/2.5/weather."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str | None = None
    main: MainReadings | None = None
    weather: list[WeatherCondition] = []
    wind: Wind | None = None


class ForecastMain(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    temp: float


class ForecastEntry(BaseModel):
    """One 3-hourly slot of /data/2.5/forecast."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    dt: int
    main: ForecastMain
    weather: list[WeatherCondition] = []

    @property
    def timestamp(self) -> int:
        return self.dt

    @property
    def temp(self) -> float:
        return self.main.temp

    @property
    def moment(self) -> datetime:
        return from_epoch(self.dt)


class Forecast(BaseModel):
    """The provider's forecast envelope: ``{"list": [...]}``."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    entries: list[ForecastEntry] = Field(default_factory=list, alias="list")
