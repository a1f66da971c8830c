"""
Domain protocols for the crowd forecast module.
"""
from datetime import date
from typing import Protocol
from .entities import CongestionResult, WeatherResult

class CongestionGateway(Protocol):
    """
    Live congestion source. Raises LiveCongestionUnavailable when it has no data.
    """
    async def fetch_live_congestion(self, region: str, store: str, day: date) -> CongestionResult:
        ...

class WeatherGateway(Protocol):
    """
    Temperature forecast source. Raises WeatherUnavailable on any failure.
    """
    async def fetch_temperature(self, region: str, day: date) -> WeatherResult:
        ...

class HolidayCalendar(Protocol):
    def is_holiday(self, day: date) -> bool:
        ...
