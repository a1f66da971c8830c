import pytest
from datetime import date, timedelta
from martcrowd.forecast.application.heuristic import (
    HeuristicCongestionModel, level_for_score, time_weight
)
from martcrowd.forecast.domain.entities import CongestionLevel, DataSource, DayType
from martcrowd.forecast.infrastructure.holidays import FixedHolidayCalendar
from tests.fakes import TUESDAY, WEDNESDAY, SATURDAY, SUNDAY

L = CongestionLevel
NON_WAREHOUSE_STORES = ["emart", "homeplus", "lottemart", "unknown-store"]

@pytest.fixture
def model():
    return HeuristicCongestionModel()

def _levels(result):
    return [slot.level for slot in result.slots]

def _slot(result, hour):
    return next(slot for slot in result.slots if slot.hour == hour)

# --- Shape ---
@pytest.mark.parametrize("offset", range(14))
def test_thirteen_contiguous_slots(model, offset):
    result = model.estimate("emart", TUESDAY + timedelta(days=offset))
    assert [slot.hour for slot in result.slots] == list(range(10, 23))
    assert result.source == DataSource.HEURISTIC

def test_deterministic(model):
    first = model.estimate("costco", SATURDAY)
    second = HeuristicCongestionModel().estimate("costco", SATURDAY)
    assert first == second

def test_unknown_store_is_not_warehouse(model):
    assert model.estimate("no-such-store", SATURDAY) == model.estimate("emart", SATURDAY)

# --- Scenarios ---
def test_warehouse_weekend_afternoon_peak(model):
    result = model.estimate("costco", SATURDAY)
    assert model.score("costco", SATURDAY, 15) == pytest.approx(1.98)
    assert _slot(result, 15).level == L.VERY_CONGESTED
    assert model.score("costco", SATURDAY, 10) == pytest.approx(1.2)
    assert _slot(result, 10).level == L.MODERATE

def test_weekday_baseline(model):
    result = model.estimate("homeplus", WEDNESDAY)
    assert _slot(result, 11).level == L.LIGHT
    assert _slot(result, 19).level == L.VERY_CONGESTED

def test_weekday_profile(model):
    assert _levels(model.estimate("emart", WEDNESDAY)) == [
        L.LIGHT, L.LIGHT,
        L.MODERATE, L.MODERATE,
        L.MODERATE, L.MODERATE, L.MODERATE, L.MODERATE,
        L.VERY_CONGESTED, L.VERY_CONGESTED, L.VERY_CONGESTED,
        L.MODERATE, L.MODERATE,
    ]

def test_weekend_profile(model):
    assert _levels(model.estimate("emart", SUNDAY)) == [
        L.MODERATE, L.MODERATE,
        L.CONGESTED, L.CONGESTED,
        L.VERY_CONGESTED, L.VERY_CONGESTED, L.VERY_CONGESTED, L.VERY_CONGESTED,
        L.VERY_CONGESTED, L.VERY_CONGESTED, L.VERY_CONGESTED,
        L.CONGESTED, L.CONGESTED,
    ]

@pytest.mark.parametrize("store", NON_WAREHOUSE_STORES)
@pytest.mark.parametrize("weekend_day", [SATURDAY, SUNDAY])
def test_weekend_never_lighter_than_weekday(model, store, weekend_day):
    weekend = model.estimate(store, weekend_day)
    weekday = model.estimate(store, TUESDAY)
    for weekend_slot, weekday_slot in zip(weekend.slots, weekday.slots):
        assert weekend_slot.hour == weekday_slot.hour
        assert weekend_slot.level >= weekday_slot.level

def test_warehouse_bonus_only_on_weekend_afternoon(model):
    for hour in range(10, 23):
        weekday_ratio = model.score("traders", TUESDAY, hour) / model.score("emart", TUESDAY, hour)
        assert weekday_ratio == pytest.approx(1.0)
        weekend_ratio = model.score("traders", SATURDAY, hour) / model.score("emart", SATURDAY, hour)
        expected = 1.1 if 14 <= hour < 18 else 1.0
        assert weekend_ratio == pytest.approx(expected)

def test_custom_warehouse_set():
    model = HeuristicCongestionModel(warehouse_stores={"emart"})
    assert model.is_warehouse("emart")
    assert not model.is_warehouse("costco")

# --- Day type ---
def test_classify_day(model):
    assert model.classify_day(TUESDAY) == DayType.WEEKDAY
    assert model.classify_day(SATURDAY) == DayType.WEEKEND
    assert model.classify_day(SUNDAY) == DayType.WEEKEND

def test_holiday_weight_applies():
    calendar = FixedHolidayCalendar(["2025-04-30"])
    model = HeuristicCongestionModel(holiday_calendar=calendar)
    assert model.classify_day(WEDNESDAY) == DayType.HOLIDAY

    result = model.estimate("emart", WEDNESDAY)
    assert model.score("emart", WEDNESDAY, 10) == pytest.approx(1.28)
    assert _slot(result, 10).level == L.MODERATE
    assert _slot(result, 12).level == L.CONGESTED
    assert _slot(result, 15).level == L.VERY_CONGESTED

def test_holiday_on_weekday_has_no_warehouse_bonus():
    model = HeuristicCongestionModel(holiday_calendar=FixedHolidayCalendar([WEDNESDAY]))
    assert model.score("costco", WEDNESDAY, 15) == pytest.approx(1.6 * 1.2)

def test_holiday_on_weekend_keeps_warehouse_bonus():
    model = HeuristicCongestionModel(holiday_calendar=FixedHolidayCalendar([SATURDAY]))
    assert model.classify_day(SATURDAY) == DayType.HOLIDAY

    assert model.score("costco", SATURDAY, 15) == pytest.approx(1.6 * 1.2 * 1.1)
    assert _slot(model.estimate("costco", SATURDAY), 15).level == L.VERY_CONGESTED

    assert model.score("emart", SATURDAY, 10) == pytest.approx(1.28)
    assert _slot(model.estimate("emart", SATURDAY), 10).level == L.MODERATE
    assert model.score("emart", SATURDAY, 15) == pytest.approx(1.6 * 1.2)

# --- Weights and thresholds ---
@pytest.mark.parametrize("hour,expected", [
    (10, 0.8), (11, 0.8), (12, 1.0), (13, 1.0), (14, 1.2), (17, 1.2),
    (18, 1.8), (20, 1.8), (21, 1.1), (22, 1.1),
])
def test_time_weight(hour, expected):
    assert time_weight(hour) == expected

@pytest.mark.parametrize("score,expected", [
    (0.8, L.LIGHT),
    (0.999, L.LIGHT),
    (1.0, L.MODERATE),
    (1.399, L.MODERATE),
    (1.4, L.CONGESTED),
    (1.699, L.CONGESTED),
    (1.7, L.VERY_CONGESTED),
    (2.7, L.VERY_CONGESTED),
])
def test_level_thresholds_inclusive(score, expected):
    assert level_for_score(score) == expected
