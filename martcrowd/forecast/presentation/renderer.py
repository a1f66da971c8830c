"""
Turns a ForecastBundle into the display strings shown by the form.
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from ..domain.entities import ForecastBundle, WeatherResult

WEEKDAYS_KO = ("월요일", "화요일", "수요일", "목요일", "금요일", "토요일", "일요일")

LOADING_MESSAGE = "데이터를 불러오는 중입니다..."
NO_DATA_MESSAGE = "데이터가 없습니다."
WEATHER_UNAVAILABLE_MESSAGE = "날씨 정보를 불러올 수 없습니다."


@dataclass(frozen=True)
class RenderedRow:
    time_range: str
    label: str
    level_class: str


@dataclass(frozen=True)
class RenderedForecast:
    sequence: int
    title: str
    weather_text: str
    rows: Tuple[RenderedRow, ...]
    empty_message: Optional[str] = None


def format_date_ko(day: date) -> str:
    """Long ko-KR date, e.g. '2025년 5월 3일 토요일'."""
    return f"{day.year}년 {day.month}월 {day.day}일 {WEEKDAYS_KO[day.weekday()]}"


def format_temperature(value: float) -> str:
    # 21.0 -> "21", 21.4 -> "21.4"
    return f"{value:g}"


def format_weather(weather: Optional[WeatherResult]) -> str:
    if weather is None:
        return WEATHER_UNAVAILABLE_MESSAGE
    return f"최저 {format_temperature(weather.min_temp)}°C / 최고 {format_temperature(weather.max_temp)}°C"


class ForecastRenderer:
    def render(self, bundle: ForecastBundle, store_text: str) -> RenderedForecast:
        congestion = bundle.congestion
        title = (
            f"{format_date_ko(bundle.query.date)} {store_text} "
            f"예상 혼잡도 (출처: {congestion.source.label})"
        )

        rows = tuple(
            RenderedRow(time_range=slot.time_range, label=slot.level.label, level_class=slot.level_class)
            for slot in congestion.slots
        )
        return RenderedForecast(
            sequence=bundle.sequence,
            title=title,
            weather_text=format_weather(bundle.weather),
            rows=rows,
            empty_message=NO_DATA_MESSAGE if congestion.is_empty else None,
        )
