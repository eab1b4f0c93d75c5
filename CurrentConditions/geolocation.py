"""Resolve the caller's postal code from their public IP address."""
import logging

from weather_provider import FETCH_TIMEOUT, WeatherProviderError, fetch_json


class IpInfoLocator:
    """Looks up the postal code for the current public IP via ipinfo.io."""

    URL = "http://ipinfo.io/json"

    def __init__(self, timeout: float = FETCH_TIMEOUT):
        self.timeout = timeout

    def get_zip(self) -> str:
        """
        Fetch the postal code for this machine's public IP.

        Returns:
            str: Postal/zip code

        Raises:
            WeatherProviderError: If the lookup fails or has no postal code
        """
        logging.info("Looking up zip code by IP address")
        data = fetch_json(self.URL, timeout=self.timeout)

        postal = data.get("postal") if isinstance(data, dict) else None
        if not postal or not isinstance(postal, str):
            logging.debug(f"Geolocation response has no postal code: {str(data)[:200]}")
            raise WeatherProviderError("Failed to parse response: no postal code in geolocation response")

        logging.info(f"Resolved zip code {postal}")
        return postal
