from datetime import date
import pytest
from martcrowd.forecast.infrastructure.holidays import FixedHolidayCalendar, NeverHolidayCalendar
from tests.fakes import WEDNESDAY, SATURDAY

def test_never_holiday():
    calendar = NeverHolidayCalendar()
    assert not calendar.is_holiday(WEDNESDAY)
    assert not calendar.is_holiday(date(2025, 12, 25))

def test_fixed_calendar_accepts_strings_and_dates():
    calendar = FixedHolidayCalendar(["2025-04-30", SATURDAY])
    assert len(calendar) == 2
    assert calendar.is_holiday(WEDNESDAY)
    assert calendar.is_holiday(SATURDAY)
    assert not calendar.is_holiday(date(2025, 5, 1))

def test_fixed_calendar_rejects_bad_dates():
    with pytest.raises(ValueError):
        FixedHolidayCalendar(["2025-13-01"])
