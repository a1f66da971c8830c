"""
Daily temperature lookup against an Open-Meteo compatible forecast API.
"""
from datetime import date
from typing import Any, Optional
import httpx

from .http import get_json
from ..regions import RegionDirectory
from ...domain.entities import WeatherResult
from ....common.exceptions import WeatherUnavailable
from ....common.logging import setup_logger

logger = setup_logger(__name__)

DEFAULT_ENDPOINT = "https://api.open-meteo.com/v1/forecast"
DAILY_FIELDS = "temperature_2m_max,temperature_2m_min"


class OpenMeteoWeatherGateway:
    """
    Resolves the region to coordinates, requests the daily forecast for a
    single day and extracts the temperature range.
    """

    def __init__(
        self,
        regions: RegionDirectory,
        endpoint: str = DEFAULT_ENDPOINT,
        timezone: str = "Asia/Seoul",
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = 10.0,
    ):
        self.regions = regions
        self.endpoint = endpoint
        self.timezone = timezone
        self.client = client
        self.timeout = timeout

    async def fetch_temperature(self, region: str, day: date) -> WeatherResult:
        # Raises UnknownRegionError before any network I/O
        coords = self.regions.coordinates(region)

        params = {
            "latitude": coords.latitude,
            "longitude": coords.longitude,
            "daily": DAILY_FIELDS,
            "timezone": self.timezone,
            "start_date": day.isoformat(),
            "end_date": day.isoformat(),
        }
        try:
            payload = await get_json(self.endpoint, params, client=self.client, timeout=self.timeout)
        except (httpx.HTTPError, ValueError) as e:
            raise WeatherUnavailable(f"Weather request failed for {region}: {e}") from e

        return self._parse(payload, day)

    @staticmethod
    def _parse(payload: Any, day: date) -> WeatherResult:
        try:
            daily = payload["daily"]
            days = daily["time"]
            index = days.index(day.isoformat())
            max_temp = daily["temperature_2m_max"][index]
            min_temp = daily["temperature_2m_min"][index]
            if min_temp is None or max_temp is None:
                raise ValueError("temperature missing for requested day")
            return WeatherResult(min_temp=float(min_temp), max_temp=float(max_temp))
        except (KeyError, TypeError, ValueError, IndexError, AttributeError) as e:
            raise WeatherUnavailable(f"Malformed forecast payload: {e}") from e
