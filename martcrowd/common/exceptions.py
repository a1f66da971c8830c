class CrowdForecastError(Exception):
    """Base exception for all crowd forecast errors."""
    pass

class SourceUnavailable(CrowdForecastError):
    """Raised when an external data source cannot provide a result."""
    pass

class LiveCongestionUnavailable(SourceUnavailable):
    """Raised when the live congestion source has no data for a query."""
    pass

class WeatherUnavailable(SourceUnavailable):
    """Raised when the temperature forecast cannot be obtained."""
    pass

class UnknownRegionError(WeatherUnavailable):
    """Raised when a region has no entry in the coordinate table."""

    def __init__(self, region: str):
        super().__init__(f"No coordinates configured for region: {region}")
        self.region = region

class ConfigurationError(CrowdForecastError):
    """Raised when configuration is invalid."""
    pass
