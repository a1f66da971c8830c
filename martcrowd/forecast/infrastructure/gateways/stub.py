"""
Deterministic stand-in for the live congestion source.
"""
from datetime import date
from ...domain.entities import CongestionLevel, CongestionResult, CongestionSlot, DataSource
from ....common.exceptions import LiveCongestionUnavailable
from ....common.logging import setup_logger

logger = setup_logger(__name__)

# (region, store) pairs the live source has data for
LIVE_SUCCESS_COMBINATIONS = frozenset({("seoul_yangjae", "costco")})

L = CongestionLevel
LIVE_PROFILE = (
    (10, L.LIGHT),
    (11, L.MODERATE),
    (12, L.CONGESTED),
    (13, L.CONGESTED),
    (14, L.VERY_CONGESTED),
    (15, L.MODERATE),
    (16, L.LIGHT),
    (17, L.LIGHT),
    (18, L.MODERATE),
    (19, L.CONGESTED),
    (20, L.CONGESTED),
    (21, L.MODERATE),
)


class StubCongestionGateway:
    """
    Succeeds only for LIVE_SUCCESS_COMBINATIONS, fails for everything else.
    The returned profile does not depend on the date.
    """

    def __init__(self, combinations=LIVE_SUCCESS_COMBINATIONS):
        self.combinations = frozenset(combinations)

    async def fetch_live_congestion(self, region: str, store: str, day: date) -> CongestionResult:
        if (region, store) not in self.combinations:
            raise LiveCongestionUnavailable(
                f"Live data not available for {region}/{store}"
            )

        logger.info(f"Live congestion available for {region}/{store} on {day.isoformat()}")
        slots = tuple(CongestionSlot(hour=hour, level=level) for hour, level in LIVE_PROFILE)
        return CongestionResult(source=DataSource.LIVE, slots=slots)
