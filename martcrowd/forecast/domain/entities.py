"""
Domain entities for the crowd forecast module.
"""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum, IntEnum
from typing import Tuple, Optional, Union

class CongestionLevel(IntEnum):
    """
    Ordered severity of an hourly forecast.
    """
    LIGHT = 1
    MODERATE = 2
    CONGESTED = 3
    VERY_CONGESTED = 4

    @property
    def label(self) -> str:
        return _LEVEL_LABELS[self]

    @property
    def css_class(self) -> str:
        return f"level-{self.value}"

    @classmethod
    def from_label(cls, label: str) -> "CongestionLevel":
        for level, text in _LEVEL_LABELS.items():
            if text == label:
                return level
        raise ValueError(f"Unknown congestion label: {label}")

    @classmethod
    def from_css_class(cls, css_class: str) -> "CongestionLevel":
        prefix, _, number = css_class.partition("-")
        if prefix != "level" or not number.isdigit():
            raise ValueError(f"Unknown congestion class: {css_class}")
        return cls(int(number))

_LEVEL_LABELS = {
    CongestionLevel.LIGHT: "원활",
    CongestionLevel.MODERATE: "보통",
    CongestionLevel.CONGESTED: "혼잡",
    CongestionLevel.VERY_CONGESTED: "매우 혼잡",
}

class DataSource(Enum):
    """Provenance of a congestion result."""
    LIVE = "live"
    HEURISTIC = "heuristic"

    @property
    def label(self) -> str:
        return "API" if self is DataSource.LIVE else "통계"

class DayType(Enum):
    WEEKDAY = "weekday"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"

@dataclass(frozen=True)
class CongestionSlot:
    """
    Forecast for the hour [hour, hour + 1).
    """
    hour: int
    level: CongestionLevel

    @property
    def level_class(self) -> str:
        return self.level.css_class

    @property
    def time_range(self) -> str:
        return f"{self.hour}:00 - {self.hour + 1}:00"

@dataclass(frozen=True)
class CongestionResult:
    source: DataSource
    slots: Tuple[CongestionSlot, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.slots

@dataclass(frozen=True)
class WeatherResult:
    """Daily temperature range in degrees Celsius."""
    min_temp: float
    max_temp: float

@dataclass(frozen=True)
class Query:
    """
    A submitted form: region key, store key and calendar date.
    """
    region: str
    store: str
    date: date

@dataclass(frozen=True)
class Success:
    value: object

@dataclass(frozen=True)
class Failure:
    error: BaseException = field(compare=False)

Settled = Union[Success, Failure]

@dataclass(frozen=True)
class ForecastBundle:
    """
    Combined result of one submission.
    `weather` is None when the temperature lookup failed.
    """
    sequence: int
    query: Query
    congestion: CongestionResult
    weather: Optional[WeatherResult]

    @property
    def has_weather(self) -> bool:
        return self.weather is not None
