from .models import (
    AppConfig,
    RegionConfig,
    StoreConfig,
    ForecastConfig,
    GatewayConfig,
    WeatherConfig,
    LiveCongestionConfig,
    ServerConfig,
)
from .manager import ConfigManager, DEFAULT_CONFIG_DIR
