"""
Shared display surface for rendered forecasts.
"""
import asyncio
from typing import Optional

from ..domain.entities import ForecastBundle
from .sequencing import SubmissionSequencer
from ...common.logging import setup_logger

logger = setup_logger(__name__)


class ForecastBoard:
    """
    Holds the forecast currently on display.
    A bundle is accepted only if its sequence number is the latest issued,
    so a slow, abandoned submission can never overwrite a newer one.
    """

    def __init__(self, sequencer: SubmissionSequencer):
        self.sequencer = sequencer
        self._lock: Optional[asyncio.Lock] = None
        self._latest_bundle: Optional[ForecastBundle] = None
        self._latest_view = None

    async def publish(self, bundle: ForecastBundle, view) -> bool:
        # Bound to the loop running the first publish
        if self._lock is None:
            self._lock = asyncio.Lock()

        async with self._lock:
            if not self.sequencer.is_latest(bundle.sequence):
                logger.info(
                    f"Discarding stale result #{bundle.sequence} "
                    f"(latest issued #{self.sequencer.latest})"
                )
                return False

            self._latest_bundle = bundle
            self._latest_view = view
            return True

    @property
    def latest_bundle(self) -> Optional[ForecastBundle]:
        return self._latest_bundle

    @property
    def latest_view(self):
        return self._latest_view
