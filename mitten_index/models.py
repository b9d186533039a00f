"""Value objects passed through the scoring pipeline."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Category(str, Enum):
    """Ordinal severity band, mildest first."""

    PLEASANT = "pleasant"
    CHILLY = "chilly"
    COLD = "cold"
    BRUTAL = "brutal"
    ARCTIC = "arctic"


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def to_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class WeatherReading:
    """
    Current conditions as reported by the weather provider.

    Units are metric: °C, km/h, percent, W/m². No range checks happen here;
    the lookup layer validates provider data before scoring.
    """

    temperature_c: float
    apparent_temperature_c: float
    wind_speed_kmh: float
    relative_humidity_pct: float
    cloud_cover_pct: float
    solar_radiation_wm2: float | None = None
    observed_at: datetime | None = None
    wind_direction_deg: float | None = None

    def to_dict(self) -> dict:
        return {
            "temperature": self.temperature_c,
            "apparentTemperature": self.apparent_temperature_c,
            "windSpeed": self.wind_speed_kmh,
            "windDirection": self.wind_direction_deg,
            "relativeHumidity": self.relative_humidity_pct,
            "cloudCover": self.cloud_cover_pct,
            "solarRadiation": self.solar_radiation_wm2,
            "time": self.observed_at.isoformat() if self.observed_at else None,
        }


@dataclass(frozen=True)
class ScoreFactors:
    """Per-factor contributions. `sunlight` is a penalty and may be negative."""

    temperature: float
    wind_chill: float
    humidity: float
    cloud_cover: float
    sunlight: float

    def to_dict(self) -> dict:
        return {
            "temperature": self.temperature,
            "windChill": self.wind_chill,
            "humidity": self.humidity,
            "cloudCover": self.cloud_cover,
            "sunlight": self.sunlight,
        }


@dataclass(frozen=True)
class DressingAdvice:
    layers: tuple[str, ...]
    accessories: tuple[str, ...]
    tips: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "layers": list(self.layers),
            "accessories": list(self.accessories),
            "tips": list(self.tips),
        }


@dataclass(frozen=True)
class MittenIndexResult:
    score: int | float  # NaN when the aggregate is NaN
    category: Category
    factors: ScoreFactors
    recommendation: str
    dressing: DressingAdvice

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "category": self.category.value,
            "factors": self.factors.to_dict(),
            "recommendation": self.recommendation,
            "dressing": self.dressing.to_dict(),
        }
