"""
Holiday calendars for day-type classification.
"""
from datetime import date
from typing import Iterable, Union


class NeverHolidayCalendar:
    """Default calendar: no day is a holiday."""

    def is_holiday(self, day: date) -> bool:
        return False


class FixedHolidayCalendar:
    """
    Calendar backed by an explicit list of dates (date objects or ISO strings).
    """

    def __init__(self, holidays: Iterable[Union[date, str]]):
        self._holidays = frozenset(
            d if isinstance(d, date) else date.fromisoformat(str(d))
            for d in holidays
        )

    def is_holiday(self, day: date) -> bool:
        return day in self._holidays

    def __len__(self) -> int:
        return len(self._holidays)
