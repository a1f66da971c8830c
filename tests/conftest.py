import pytest
from martcrowd.common.config import ConfigManager
from martcrowd.common.exceptions import LiveCongestionUnavailable, WeatherUnavailable
from martcrowd.forecast.domain.entities import WeatherResult
from tests.fakes import FakeCongestionGateway, FakeWeatherGateway

@pytest.fixture
def app_config():
    return ConfigManager().load()

@pytest.fixture
def weather_result():
    return WeatherResult(min_temp=12.5, max_temp=21.0)

@pytest.fixture
def failing_congestion():
    return FakeCongestionGateway(error=LiveCongestionUnavailable("not available"))

@pytest.fixture
def failing_weather():
    return FakeWeatherGateway(error=WeatherUnavailable("forecast down"))

@pytest.fixture
def working_weather(weather_result):
    return FakeWeatherGateway(result=weather_result)
