from datetime import date, datetime
from typing import Optional, Dict
from zoneinfo import ZoneInfo

from omegaconf import DictConfig

from ..domain import CongestionGateway, WeatherGateway, HolidayCalendar
from ..infrastructure import (
    FixedHolidayCalendar, NeverHolidayCalendar, RegionDirectory, StoreCatalog
)
from ..infrastructure.gateways import (
    StubCongestionGateway, HttpCongestionGateway, OpenMeteoWeatherGateway
)
from ..presentation.renderer import ForecastRenderer
from .board import ForecastBoard
from .heuristic import HeuristicCongestionModel
from .orchestrator import FetchOrchestrator
from .sequencing import SubmissionSequencer
from ...common.logging import setup_logger

logger = setup_logger(__name__)


class ForecastApplicationBuilder:
    """
    Builder pattern for constructing the forecast application.
    Centralizes component instantiation and wiring.
    """

    def __init__(self, config: DictConfig):
        self.config = config
        self.sequencer = SubmissionSequencer()
        self.renderer = ForecastRenderer()
        self.regions = RegionDirectory.from_config(config.regions)
        self.stores = StoreCatalog.from_config(config.stores)

        # Components
        self.holiday_calendar: Optional[HolidayCalendar] = None
        self.model: Optional[HeuristicCongestionModel] = None
        self.congestion_gateway: Optional[CongestionGateway] = None
        self.weather_gateway: Optional[WeatherGateway] = None
        self.orchestrator: Optional[FetchOrchestrator] = None
        self.board: Optional[ForecastBoard] = None

    def build_holiday_calendar(self) -> 'ForecastApplicationBuilder':
        holidays = list(self.config.forecast.holidays)
        if holidays:
            logger.info(f"Loading {len(holidays)} holidays")
            self.holiday_calendar = FixedHolidayCalendar(holidays)
        else:
            self.holiday_calendar = NeverHolidayCalendar()
        return self

    def build_model(self) -> 'ForecastApplicationBuilder':
        if not self.holiday_calendar:
            self.build_holiday_calendar()
        self.model = HeuristicCongestionModel(
            holiday_calendar=self.holiday_calendar,
            warehouse_stores=self.stores.warehouse_keys,
        )
        return self

    def build_gateways(self) -> 'ForecastApplicationBuilder':
        gateways_cfg = self.config.gateways
        timeout = gateways_cfg.request_timeout_seconds

        live_endpoint = gateways_cfg.live_congestion.endpoint
        if live_endpoint:
            logger.info(f"Using live congestion endpoint: {live_endpoint}")
            self.congestion_gateway = HttpCongestionGateway(live_endpoint, timeout=timeout)
        else:
            logger.info("No live congestion endpoint configured, using stub source")
            self.congestion_gateway = StubCongestionGateway()

        self.weather_gateway = OpenMeteoWeatherGateway(
            regions=self.regions,
            endpoint=gateways_cfg.weather.endpoint,
            timezone=self.config.forecast.timezone,
            timeout=timeout,
        )
        return self

    def with_gateways(
        self, congestion: CongestionGateway, weather: WeatherGateway
    ) -> 'ForecastApplicationBuilder':
        """Injects gateway implementations instead of building them from config."""
        self.congestion_gateway = congestion
        self.weather_gateway = weather
        return self

    def build_orchestrator(self) -> FetchOrchestrator:
        if not self.model:
            self.build_model()
        if not self.congestion_gateway or not self.weather_gateway:
            self.build_gateways()

        self.orchestrator = FetchOrchestrator(
            congestion_gateway=self.congestion_gateway,
            weather_gateway=self.weather_gateway,
            model=self.model,
            sequencer=self.sequencer,
        )
        self.board = ForecastBoard(self.sequencer)
        return self.orchestrator

    def today(self) -> date:
        """Today's calendar date in the configured reference timezone."""
        return datetime.now(ZoneInfo(self.config.forecast.timezone)).date()

    def get_components(self) -> Dict:
        """Returns built components for external use (e.g. the API layer)"""
        return {
            'orchestrator': self.orchestrator,
            'board': self.board,
            'renderer': self.renderer,
            'regions': self.regions,
            'stores': self.stores,
            'model': self.model,
        }
