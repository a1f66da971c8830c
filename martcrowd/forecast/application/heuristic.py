"""
Heuristic congestion model used when the live source has no data.

The score for an hour is day_weight * time_weight * store_weight, mapped to a
severity level by descending thresholds. Weights and thresholds are fixed
design constants.
"""
from datetime import date
from typing import Iterable, Optional, FrozenSet

from ..domain.entities import (
    CongestionLevel, CongestionResult, CongestionSlot, DataSource, DayType
)
from ..domain.protocols import HolidayCalendar
from ..infrastructure.holidays import NeverHolidayCalendar
from ...common.logging import setup_logger, log_execution_time

logger = setup_logger(__name__)

OPENING_HOUR = 10
CLOSING_HOUR = 23

DEFAULT_WAREHOUSE_STORES = frozenset({"costco", "traders"})

DAY_WEIGHTS = {
    DayType.WEEKDAY: 1.0,
    DayType.WEEKEND: 1.5,
    DayType.HOLIDAY: 1.6,
}

WAREHOUSE_WEEKEND_WEIGHT = 1.1

# (minimum score, level), highest first
LEVEL_THRESHOLDS = (
    (1.7, CongestionLevel.VERY_CONGESTED),
    (1.4, CongestionLevel.CONGESTED),
    (1.0, CongestionLevel.MODERATE),
)


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5


def time_weight(hour: int) -> float:
    if 10 <= hour < 12:
        return 0.8  # morning
    if 12 <= hour < 14:
        return 1.0  # lunch
    if 14 <= hour < 18:
        return 1.2  # afternoon
    if 18 <= hour < 21:
        return 1.8  # evening peak
    if hour >= 21:
        return 1.1  # closing
    return 1.0


def level_for_score(score: float) -> CongestionLevel:
    for threshold, level in LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return CongestionLevel.LIGHT


class HeuristicCongestionModel:
    """
    Deterministic hourly forecast from store category and day type.
    Pure: no I/O and no clock access.
    """

    def __init__(
        self,
        holiday_calendar: Optional[HolidayCalendar] = None,
        warehouse_stores: Iterable[str] = DEFAULT_WAREHOUSE_STORES,
    ):
        self.holiday_calendar = holiday_calendar or NeverHolidayCalendar()
        self.warehouse_stores: FrozenSet[str] = frozenset(warehouse_stores)

    def classify_day(self, day: date) -> DayType:
        if self.holiday_calendar.is_holiday(day):
            return DayType.HOLIDAY
        if is_weekend(day):
            return DayType.WEEKEND
        return DayType.WEEKDAY

    def is_warehouse(self, store: str) -> bool:
        return store in self.warehouse_stores

    def score(self, store: str, day: date, hour: int) -> float:
        day_weight = DAY_WEIGHTS[self.classify_day(day)]

        # The warehouse bonus follows the calendar weekend, holiday or not
        store_weight = 1.0
        if self.is_warehouse(store) and is_weekend(day) and 14 <= hour < 18:
            store_weight = WAREHOUSE_WEEKEND_WEIGHT

        return day_weight * time_weight(hour) * store_weight

    @log_execution_time(logger)
    def estimate(self, store: str, day: date) -> CongestionResult:
        slots = tuple(
            CongestionSlot(hour=hour, level=level_for_score(self.score(store, day, hour)))
            for hour in range(OPENING_HOUR, CLOSING_HOUR)
        )
        return CongestionResult(source=DataSource.HEURISTIC, slots=slots)
