"""
Gateway implementations for the live congestion and weather sources.
"""
from .stub import StubCongestionGateway, LIVE_SUCCESS_COMBINATIONS
from .congestion_client import HttpCongestionGateway
from .weather_client import OpenMeteoWeatherGateway
