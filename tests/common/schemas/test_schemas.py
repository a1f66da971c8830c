import pytest
from datetime import date
from pydantic import ValidationError
from martcrowd.common.schemas import (
    ForecastRequest, ForecastResponse, RenderedForecastSchema, WeatherSchema
)

# --- Request ---
def test_request_valid():
    request = ForecastRequest(region="seoul_yangjae", store="costco", date="2025-05-03")
    assert request.date == date(2025, 5, 3)

def test_request_date_optional():
    request = ForecastRequest(region=" seoul_yangjae ", store="costco")
    assert request.date is None
    assert request.region == "seoul_yangjae"

def test_request_invalid_date():
    with pytest.raises(ValidationError):
        ForecastRequest(region="seoul_yangjae", store="costco", date="2025-02-30")

def test_request_extra_field():
    with pytest.raises(ValidationError):
        ForecastRequest(region="seoul_yangjae", store="costco", mart="costco")

def test_request_empty_region():
    with pytest.raises(ValidationError):
        ForecastRequest(region="", store="costco")

# --- Response ---
def _response(**overrides):
    fields = dict(
        sequence=1,
        accepted=True,
        region="seoul_yangjae",
        store="costco",
        date=date(2025, 5, 3),
        source="heuristic",
        slots=[{"hour": 10, "level": "보통", "level_class": "level-2"}],
        weather=None,
        view=RenderedForecastSchema(title="t", weather_text="w", rows=[]),
    )
    fields.update(overrides)
    return ForecastResponse(**fields)

def test_response_weather_is_present_but_null():
    dumped = _response().model_dump()
    assert "weather" in dumped
    assert dumped["weather"] is None

def test_response_weather_required():
    fields = _response().model_dump()
    del fields["weather"]
    with pytest.raises(ValidationError):
        ForecastResponse(**fields)

def test_response_with_weather():
    response = _response(weather=WeatherSchema(min_temp=-2.5, max_temp=4.0))
    assert response.weather.min_temp == -2.5

def test_response_invalid_hour():
    with pytest.raises(ValidationError):
        _response(slots=[{"hour": 24, "level": "보통", "level_class": "level-2"}])
