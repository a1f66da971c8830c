"""
Domain module initialization.
"""
from .entities import (
    CongestionLevel,
    DataSource,
    DayType,
    CongestionSlot,
    CongestionResult,
    WeatherResult,
    Query,
    Success,
    Failure,
    Settled,
    ForecastBundle,
)
from .protocols import (
    CongestionGateway,
    WeatherGateway,
    HolidayCalendar,
)
