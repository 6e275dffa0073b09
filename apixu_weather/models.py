from datetime import datetime
from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


MS_PER_MPH = 0.44704


class Condition(str, Enum):
    CLEAR = "clear"
    PARTLY_CLOUDY = "partly_cloudy"
    CLOUDY = "cloudy"
    OVERCAST = "overcast"
    MIST = "mist"
    FOG = "fog"
    RAIN = "rain"
    DRIZZLE = "drizzle"
    SLEET = "sleet"
    SNOW = "snow"
    HAIL = "hail"
    THUNDERSTORM = "thunderstorm"
    UNKNOWN = "unknown"


class Wind(BaseModel):
    model_config = ConfigDict(frozen=True)

    speed_ms: float
    direction: int = Field(..., ge=0, le=359, description="Degrees, meteorological convention")

    @property
    def speed_mph(self) -> float:
        return self.speed_ms / MS_PER_MPH


class Weather(BaseModel):
    """Provider-agnostic current conditions.

    Units: pressure in hectopascal (same scale as millibar), temperature in
    degrees Celsius, wind speed in metres per second. Humidity and cloud
    cover are fractions in [0, 1].
    """

    model_config = ConfigDict(frozen=True)

    location: str
    condition: Condition
    description: str = ""
    humidity: float = Field(..., ge=0.0, le=1.0)
    pressure_hpa: float
    temperature_c: float
    wind: Wind
    cloud_cover: float = Field(..., ge=0.0, le=1.0)
    updated: datetime
    attribution: str

    @property
    def temperature_f(self) -> float:
        return self.temperature_c * 9 / 5 + 32


@runtime_checkable
class WeatherProvider(Protocol):
    """Anything that can fetch the current weather for a fixed location."""

    async def get_weather(self) -> Weather:
        ...
