from dataclasses import dataclass, field
from typing import Optional, Dict, List

@dataclass
class RegionConfig:
    name: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

@dataclass
class StoreConfig:
    name: str = ""
    warehouse: bool = False

@dataclass
class ForecastConfig:
    timezone: str = "Asia/Seoul"
    holidays: List[str] = field(default_factory=list)  # ISO dates, e.g. "2025-10-03"

@dataclass
class WeatherConfig:
    endpoint: str = "https://api.open-meteo.com/v1/forecast"

@dataclass
class LiveCongestionConfig:
    # None keeps the deterministic stub in place of a network client
    endpoint: Optional[str] = None

@dataclass
class GatewayConfig:
    request_timeout_seconds: Optional[float] = 10.0
    weather: WeatherConfig = field(default_factory=WeatherConfig)
    live_congestion: LiveCongestionConfig = field(default_factory=LiveCongestionConfig)

@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000

@dataclass
class AppConfig:
    regions: Dict[str, RegionConfig] = field(default_factory=dict)
    stores: Dict[str, StoreConfig] = field(default_factory=dict)
    forecast: ForecastConfig = field(default_factory=ForecastConfig)
    gateways: GatewayConfig = field(default_factory=GatewayConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
