from datetime import date
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .models import AppConfig
from ..exceptions import ConfigurationError

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[2] / "conf"
REGION_COUNT = 6

class ConfigManager:
    """Centralizes loading and validation of the application configuration."""

    def __init__(self, config_dir: Path = DEFAULT_CONFIG_DIR):
        self.config_dir = Path(config_dir)

    def load(self, name: str = "config", overrides: Optional[list] = None) -> DictConfig:
        """Loads conf/<name>.yaml over the structured defaults and validates it."""
        config_path = self.config_dir / f"{name}.yaml"

        if not config_path.exists():
            raise ConfigurationError(f"Config not found: {config_path}")

        try:
            cfg = OmegaConf.merge(
                OmegaConf.structured(AppConfig),
                OmegaConf.load(config_path),
                OmegaConf.from_dotlist(overrides or []),
            )
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid config {config_path}: {e}") from e

        self.validate(cfg)
        return cfg

    @staticmethod
    def from_hydra(cfg: DictConfig) -> DictConfig:
        """Validates a config composed by Hydra against the structured schema."""
        try:
            merged = OmegaConf.merge(OmegaConf.structured(AppConfig), cfg)
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid config: {e}") from e
        ConfigManager.validate(merged)
        return merged

    @staticmethod
    def validate(cfg: DictConfig):
        if len(cfg.regions) != REGION_COUNT:
            raise ConfigurationError(
                f"Expected {REGION_COUNT} regions, found {len(cfg.regions)}"
            )
        for key, region in cfg.regions.items():
            if not -90 <= region.latitude <= 90 or not -180 <= region.longitude <= 180:
                raise ConfigurationError(f"Region {key} has invalid coordinates")

        if not cfg.stores:
            raise ConfigurationError("At least one store must be configured")

        try:
            ZoneInfo(cfg.forecast.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigurationError(f"Unknown timezone: {cfg.forecast.timezone}") from e

        for raw in cfg.forecast.holidays:
            try:
                date.fromisoformat(str(raw))
            except ValueError as e:
                raise ConfigurationError(f"Invalid holiday date: {raw}") from e
