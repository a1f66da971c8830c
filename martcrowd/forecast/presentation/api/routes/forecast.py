"""
Endpoints behind the forecast form.
"""
from dataclasses import asdict
from fastapi import FastAPI, HTTPException
from typing import Optional

from ....application.builder import ForecastApplicationBuilder
from ....domain.entities import ForecastBundle, Query
from ...renderer import LOADING_MESSAGE, RenderedForecast
from .....common.schemas import (
    ForecastRequest, ForecastResponse, CongestionSlotSchema, WeatherSchema,
    RenderedForecastSchema, OptionsResponse, RegionOption, StoreOption
)

app = FastAPI()

# Singleton
_application: Optional[ForecastApplicationBuilder] = None

def init_application(builder: ForecastApplicationBuilder):
    global _application
    if builder.orchestrator is None:
        builder.build_orchestrator()
    _application = builder

def get_application() -> ForecastApplicationBuilder:
    if _application is None:
        raise HTTPException(500, "Forecast application not initialized")
    return _application

@app.get("/options", response_model=OptionsResponse)
async def get_options():
    """Regions and stores the form offers, plus the default date."""
    application = get_application()
    return OptionsResponse(
        regions=[
            RegionOption(key=key, name=application.regions.display_name(key))
            for key in application.regions
        ],
        stores=[
            StoreOption(key=store.key, name=store.name, warehouse=store.warehouse)
            for store in application.stores
        ],
        default_date=application.today(),
        loading_message=LOADING_MESSAGE,
    )

@app.post("/forecast", response_model=ForecastResponse)
async def submit_forecast(request: ForecastRequest):
    """
    Runs one submission: live congestion with heuristic fallback, plus the
    temperature forecast. The result is published to the board unless a
    newer submission was issued in the meantime.
    """
    application = get_application()
    if request.region not in application.regions:
        raise HTTPException(422, f"Unknown region: {request.region}")
    if request.store not in application.stores:
        raise HTTPException(422, f"Unknown store: {request.store}")

    query = Query(
        region=request.region,
        store=request.store,
        date=request.date or application.today(),
    )
    bundle = await application.orchestrator.handle_submission(query)
    view = application.renderer.render(bundle, application.stores.display_name(query.store))
    accepted = await application.board.publish(bundle, view)
    return to_response(bundle, view, accepted)

@app.get("/forecast/latest", response_model=RenderedForecastSchema)
async def get_latest_forecast():
    """The forecast currently on display."""
    application = get_application()
    view = application.board.latest_view
    if view is None:
        raise HTTPException(404, "No forecast has been published yet")
    return to_view_schema(view)

def to_view_schema(view: RenderedForecast) -> RenderedForecastSchema:
    return RenderedForecastSchema(
        title=view.title,
        weather_text=view.weather_text,
        rows=[asdict(row) for row in view.rows],
        empty_message=view.empty_message,
    )

def to_response(bundle: ForecastBundle, view: RenderedForecast, accepted: bool) -> ForecastResponse:
    weather = None
    if bundle.weather is not None:
        weather = WeatherSchema(min_temp=bundle.weather.min_temp, max_temp=bundle.weather.max_temp)

    return ForecastResponse(
        sequence=bundle.sequence,
        accepted=accepted,
        region=bundle.query.region,
        store=bundle.query.store,
        date=bundle.query.date,
        source=bundle.congestion.source.value,
        slots=[
            CongestionSlotSchema(hour=slot.hour, level=slot.level.label, level_class=slot.level_class)
            for slot in bundle.congestion.slots
        ],
        weather=weather,
        view=to_view_schema(view),
    )
