"""
Network client for the live congestion endpoint.
"""
from datetime import date
from typing import Any, Optional
import httpx

from .http import get_json
from ...domain.entities import CongestionLevel, CongestionResult, CongestionSlot, DataSource
from ....common.exceptions import LiveCongestionUnavailable
from ....common.logging import setup_logger

logger = setup_logger(__name__)


class HttpCongestionGateway:
    """
    GET {endpoint}?region=..&store=..&date=YYYY-MM-DD

    Expected body:
        {"hourly_congestion": [{"hour": 10, "level": "원활", "levelClass": "level-1"}, ...]}
    """

    def __init__(
        self,
        endpoint: str,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = 10.0,
    ):
        self.endpoint = endpoint
        self.client = client
        self.timeout = timeout

    async def fetch_live_congestion(self, region: str, store: str, day: date) -> CongestionResult:
        params = {"region": region, "store": store, "date": day.isoformat()}
        try:
            payload = await get_json(self.endpoint, params, client=self.client, timeout=self.timeout)
        except (httpx.HTTPError, ValueError) as e:
            raise LiveCongestionUnavailable(f"Live congestion request failed: {e}") from e

        try:
            slots = tuple(self._parse_slot(item) for item in payload["hourly_congestion"])
        except (KeyError, TypeError, ValueError) as e:
            raise LiveCongestionUnavailable(f"Malformed live congestion payload: {e}") from e

        logger.info(f"Live congestion for {region}/{store}: {len(slots)} slots")
        return CongestionResult(source=DataSource.LIVE, slots=slots)

    @staticmethod
    def _parse_slot(item: Any) -> CongestionSlot:
        hour = item["hour"]
        if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 23:
            raise ValueError(f"Invalid hour: {hour!r}")

        # levelClass is authoritative when both are present
        if "levelClass" in item:
            level = CongestionLevel.from_css_class(item["levelClass"])
        else:
            level = CongestionLevel.from_label(item["level"])
        return CongestionSlot(hour=hour, level=level)
