"""Weather provider abstraction - allows swapping different weather APIs."""
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import requests

from weather_data import ConditionsError, RemoteAstronomy, RemoteConditions


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def get_conditions(self, location: str) -> RemoteConditions:
        """
        Fetch current conditions.

        Args:
            location: Postal/zip code

        Returns:
            RemoteConditions: Current observation

        Raises:
            WeatherProviderError: If the provider fails to fetch data
        """
        pass

    @abstractmethod
    def get_astronomy(self, location: str) -> RemoteAstronomy:
        """
        Fetch today's moon phase and sun times.

        Args:
            location: Postal/zip code

        Returns:
            RemoteAstronomy: Moon phase with sunrise/sunset

        Raises:
            WeatherProviderError: If the provider fails to fetch data
        """
        pass


class WeatherProviderError(ConditionsError):
    """Exception raised when a weather or location provider fails."""
    pass


FETCH_TIMEOUT = 3  # seconds


def fetch_json(url: str, timeout: float = FETCH_TIMEOUT, log_url: Optional[str] = None) -> Any:
    """
    GET a URL and decode its JSON body.

    Args:
        url: Full request URL
        timeout: HTTP request timeout in seconds
        log_url: URL to show in logs when url carries a secret

    Returns:
        Decoded JSON document

    Raises:
        WeatherProviderError: On network failure, non-2xx status or a non-JSON body
    """
    shown = log_url or url
    try:
        logging.debug(f"Making request: {shown}")
        response = requests.get(url, timeout=timeout)
        logging.debug(f"Response status: {response.status_code}")
    except requests.exceptions.RequestException as e:
        logging.debug(f"Network error during request to {shown}: {e}")
        raise WeatherProviderError(f"Network error: {str(e)}")

    if not response.ok:
        logging.debug(f"Request failed with status {response.status_code}: {shown}")
        raise WeatherProviderError(
            f"HTTP {response.status_code}: {response.text[:200]}"
        )

    try:
        data = response.json()
    except ValueError as e:
        logging.debug(f"Non-JSON response from {shown}: {response.text[:500]}")
        raise WeatherProviderError(f"Failed to parse response: {str(e)}")
    logging.debug(f"Response (truncated): {str(data)[:500]}")
    return data
