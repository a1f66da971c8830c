"""
Runs both source lookups for a submission and applies the fallback policy.
"""
import asyncio
from typing import Awaitable, Optional

from ..domain.entities import (
    CongestionResult, ForecastBundle, Query, Settled, Success, Failure, WeatherResult
)
from ..domain.protocols import CongestionGateway, WeatherGateway
from .heuristic import HeuristicCongestionModel
from .sequencing import SubmissionSequencer
from ...common.exceptions import SourceUnavailable
from ...common.logging import setup_logger, log_execution_time

logger = setup_logger(__name__)


def _to_settled(outcome: object) -> Settled:
    """
    Tags a gathered outcome. Source failures become Failure; any other
    exception is a programming error and is re-raised.
    """
    if isinstance(outcome, SourceUnavailable):
        return Failure(outcome)
    if isinstance(outcome, BaseException):
        raise outcome
    return Success(outcome)


async def settle_both(first: Awaitable, second: Awaitable) -> tuple:
    """
    Runs two awaitables concurrently and waits until both have settled,
    regardless of individual outcome.
    """
    outcomes = await asyncio.gather(first, second, return_exceptions=True)
    return tuple(_to_settled(outcome) for outcome in outcomes)


class FetchOrchestrator:
    """
    Combines the live congestion lookup, the heuristic fallback and the
    temperature lookup into one ForecastBundle per submission.
    """

    def __init__(
        self,
        congestion_gateway: CongestionGateway,
        weather_gateway: WeatherGateway,
        model: HeuristicCongestionModel,
        sequencer: Optional[SubmissionSequencer] = None,
    ):
        self.congestion_gateway = congestion_gateway
        self.weather_gateway = weather_gateway
        self.model = model
        self.sequencer = sequencer or SubmissionSequencer()

    @log_execution_time(logger)
    async def handle_submission(self, query: Query) -> ForecastBundle:
        sequence = self.sequencer.issue()

        congestion_outcome, weather_outcome = await settle_both(
            self.congestion_gateway.fetch_live_congestion(query.region, query.store, query.date),
            self.weather_gateway.fetch_temperature(query.region, query.date),
        )

        return ForecastBundle(
            sequence=sequence,
            query=query,
            congestion=self._resolve_congestion(query, congestion_outcome),
            weather=self._resolve_weather(query, weather_outcome),
        )

    def _resolve_congestion(self, query: Query, outcome: Settled) -> CongestionResult:
        if isinstance(outcome, Success):
            return outcome.value

        logger.warning(f"Live congestion unavailable, using heuristic model: {outcome.error}")
        return self.model.estimate(query.store, query.date)

    def _resolve_weather(self, query: Query, outcome: Settled) -> Optional[WeatherResult]:
        if isinstance(outcome, Success):
            return outcome.value

        logger.warning(f"Weather unavailable for {query.region}: {outcome.error}")
        return None
