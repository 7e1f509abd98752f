"""
OpenWeatherMap client for the current weather of a single city.
"""
from datetime import date
from typing import Optional
import httpx
import logging
from weather_diary.core.config import settings
from weather_diary.schemas.weather import WeatherObservation, WeatherFetchResult

logger = logging.getLogger(__name__)


class WeatherClient:
    """
    Fetch current weather from the OpenWeatherMap API.

    API Documentation: https://openweathermap.org/current

    Failures never raise out of fetch_current(); they come back as
    WeatherFetchResult.failure(reason) and the caller decides how to degrade.

    Args:
        api_key: OpenWeatherMap API key (appid)
        city: City name passed as the q parameter
        api_url: Current weather endpoint
        timeout: Request timeout in seconds
        transport: Optional httpx transport (used by tests)
    """

    def __init__(
        self,
        api_key: str,
        city: str = "seoul",
        api_url: str = "https://api.openweathermap.org/data/2.5/weather",
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.api_key = api_key
        self.city = city
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport

    def fetch_current(self) -> WeatherFetchResult:
        """Issue one GET for the configured city. No retries."""
        if not self.api_key:
            logger.error("OPENWEATHERMAP_API_KEY is not configured. Please set it in .env file.")
            return WeatherFetchResult.failure("API key is not configured")

        logger.info(f"Fetching current weather from OpenWeatherMap for {self.city}")

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.get(
                    self.api_url,
                    params={"q": self.city, "appid": self.api_key}
                )
        except httpx.HTTPError as e:
            # Network errors, timeouts, etc.
            logger.error(f"HTTP error with OpenWeatherMap: {e}")
            return WeatherFetchResult.failure(f"network error: {e}")

        if response.status_code != 200:
            # Provider puts the reason in the error body
            logger.error(f"OpenWeatherMap returned {response.status_code} - {response.text}")
            return WeatherFetchResult.failure(
                f"HTTP {response.status_code}: {response.text}"
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"OpenWeatherMap returned a non-JSON body: {e}")
            return WeatherFetchResult.failure("response is not valid JSON")

        if settings.DEBUG:
            logger.debug(f"OpenWeatherMap response: {data}")

        return self._parse(data)

    def _parse(self, data) -> WeatherFetchResult:
        """Extract main.temp and weather[0].main / weather[0].icon."""
        try:
            temperature = float(data["main"]["temp"])
            condition = data["weather"][0]
            observation = WeatherObservation(
                date=date.today(),
                weather=str(condition["main"]),
                icon=str(condition["icon"]),
                temperature=temperature
            )
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.error(f"Unexpected OpenWeatherMap payload: {data!r} ({e!r})")
            return WeatherFetchResult.failure("malformed weather payload")

        logger.info(
            f"Fetched weather for {self.city}: {observation.weather} "
            f"({observation.icon}) {observation.temperature}"
        )
        return WeatherFetchResult.success(observation)


def get_weather_client() -> WeatherClient:
    """Dependency that builds a client from application settings."""
    return WeatherClient(
        api_key=settings.OPENWEATHERMAP_API_KEY,
        city=settings.WEATHER_CITY,
        api_url=settings.OPENWEATHERMAP_API_URL,
        timeout=settings.WEATHER_API_TIMEOUT
    )
