from .forecast import (
    ForecastRequest,
    CongestionSlotSchema,
    WeatherSchema,
    RenderedRowSchema,
    RenderedForecastSchema,
    ForecastResponse,
    RegionOption,
    StoreOption,
    OptionsResponse,
)

__all__ = [
    "ForecastRequest",
    "CongestionSlotSchema",
    "WeatherSchema",
    "RenderedRowSchema",
    "RenderedForecastSchema",
    "ForecastResponse",
    "RegionOption",
    "StoreOption",
    "OptionsResponse",
]
