"""Weather Underground conditions/astronomy API provider implementation."""
import logging
from typing import Any, Dict

from weather_provider import FETCH_TIMEOUT, WeatherProviderBase, WeatherProviderError, fetch_json
from weather_data import RemoteAstronomy, RemoteConditions, SunTime


class WundergroundProvider(WeatherProviderBase):
    """
    Weather provider using the Weather Underground data features API.

    Both "conditions" and "astronomy" are requested per zip code. The
    API reports temperatures in Fahrenheit as ``temp_f``.
    """

    BASE_URL = "http://api.wunderground.com/api/"

    def __init__(self, api_key: str, timeout: float = FETCH_TIMEOUT):
        """
        Initialize Weather Underground provider.

        Args:
            api_key: Weather Underground API key
            timeout: HTTP request timeout in seconds
        """
        self.api_key = api_key
        self.timeout = timeout

    def url_for_zip(self, section: str, location: str) -> str:
        """
        Build the request URL for one data section.

        Args:
            section: "conditions" or "astronomy"
            location: Postal/zip code

        Raises:
            WeatherProviderError: If no API key is configured
        """
        if not self.api_key:
            raise WeatherProviderError("Missing Weather Underground API key (use -k or WUNDERGROUND_API_KEY)")
        return f"{self.BASE_URL}{self.api_key}/{section}/q/zmw:{location}.1.99999.json"

    def get_conditions(self, location: str) -> RemoteConditions:
        """
        Fetch current conditions for a zip code.

        Returns:
            RemoteConditions: Station, condition text and Fahrenheit temperature

        Raises:
            WeatherProviderError: If the API request fails
        """
        data = self._fetch("conditions", location)
        observation = self._block(data, "current_observation")

        try:
            conditions = RemoteConditions(
                station=str(observation.get("station_id", "")),
                condition=str(observation.get("weather", "")),
                temp_f=float(observation.get("temp_f", 0.0)),
            )
        except (TypeError, ValueError) as e:
            logging.debug(f"Failed to parse conditions: {e}", exc_info=True)
            raise WeatherProviderError(f"Failed to parse response: {str(e)}")

        logging.info(f"Current conditions: {conditions.condition}, {conditions.temp_f}°F at {conditions.station}")
        return conditions

    def get_astronomy(self, location: str) -> RemoteAstronomy:
        """
        Fetch moon phase and sunrise/sunset for a zip code.

        Returns:
            RemoteAstronomy: Moon phase text with local sun times

        Raises:
            WeatherProviderError: If the API request fails
        """
        data = self._fetch("astronomy", location)
        moon = self._block(data, "moon_phase")
        sun = self._block(data, "sun_phase")

        astronomy = RemoteAstronomy(
            moon_phase=str(moon.get("phaseofMoon", "")),
            sunrise=self._sun_time(sun, "sunrise"),
            sunset=self._sun_time(sun, "sunset"),
        )
        logging.info(f"Astronomy: moon={astronomy.moon_phase!r} sunrise={astronomy.sunrise} sunset={astronomy.sunset}")
        return astronomy

    def _fetch(self, section: str, location: str) -> Dict[str, Any]:
        url = self.url_for_zip(section, location)
        redacted = url.replace(self.api_key, "<key>")
        logging.info(f"Making Weather Underground {section} request for {location}")

        data = fetch_json(url, timeout=self.timeout, log_url=redacted)
        if not isinstance(data, dict):
            raise WeatherProviderError("Failed to parse response: expected a JSON object")
        self._check_api_error(data)
        return data

    @staticmethod
    def _check_api_error(data: Dict[str, Any]) -> None:
        """Raise the error Weather Underground embeds in an HTTP 200 body."""
        response = data.get("response")
        error = response.get("error") if isinstance(response, dict) else None
        if not error:
            return

        logging.debug(f"Weather Underground error response: {error}")
        if isinstance(error, dict):
            error_type = error.get("type", "unknown")
            description = error.get("description", "Unknown error")
        else:
            error_type, description = "unknown", str(error)
        raise WeatherProviderError(f"Weather Underground error {error_type}: {description}")

    @staticmethod
    def _block(data: Dict[str, Any], name: str) -> Dict[str, Any]:
        block = data.get(name)
        if not isinstance(block, dict):
            logging.debug(f"Response missing '{name}' block")
            raise WeatherProviderError(f"Failed to parse response: missing '{name}' block")
        return block

    @staticmethod
    def _sun_time(sun: Dict[str, Any], name: str) -> SunTime:
        value = sun.get(name)
        if not isinstance(value, dict):
            return SunTime()
        return SunTime(hour=str(value.get("hour", "")), minute=str(value.get("minute", "")))
