import datetime as dt
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

class ForecastRequest(BaseModel):
    """
    Form submission: region, store and an optional calendar date.
    """
    model_config = ConfigDict(extra="forbid")

    region: str = Field(..., min_length=1, description="Region key from /options")
    store: str = Field(..., min_length=1, description="Store key from /options")
    date: Optional[dt.date] = Field(None, description="YYYY-MM-DD; defaults to today in the service timezone")

    @field_validator('region', 'store')
    @classmethod
    def strip_key(cls, v: str) -> str:
        return v.strip()

class CongestionSlotSchema(BaseModel):
    hour: int = Field(..., ge=0, le=23, description="Slot covers [hour, hour + 1)")
    level: str = Field(..., description="Severity label")
    level_class: str = Field(..., description="Severity tag (level-1 .. level-4)")

class WeatherSchema(BaseModel):
    min_temp: float = Field(..., description="Daily minimum temperature (°C)")
    max_temp: float = Field(..., description="Daily maximum temperature (°C)")

class RenderedRowSchema(BaseModel):
    time_range: str
    label: str
    level_class: str

class RenderedForecastSchema(BaseModel):
    title: str
    weather_text: str
    rows: List[RenderedRowSchema]
    empty_message: Optional[str] = None

class ForecastResponse(BaseModel):
    """
    `weather` is always present and null when the temperature lookup failed.
    """
    sequence: int = Field(..., ge=1)
    accepted: bool = Field(..., description="False if a newer submission superseded this one")
    region: str
    store: str
    date: dt.date
    source: str = Field(..., description="live or heuristic")
    slots: List[CongestionSlotSchema]
    weather: Optional[WeatherSchema]
    view: RenderedForecastSchema

class RegionOption(BaseModel):
    key: str
    name: str

class StoreOption(BaseModel):
    key: str
    name: str
    warehouse: bool

class OptionsResponse(BaseModel):
    regions: List[RegionOption]
    stores: List[StoreOption]
    default_date: dt.date
    loading_message: str = Field(..., description="Shown while a submission is in flight")
