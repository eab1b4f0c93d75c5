"""Persist the last current-conditions result to a single JSON file."""
import json
import logging
from pathlib import Path
from typing import Optional, Union

from weather_data import ConditionsError, WeatherSnapshot

DEFAULT_CACHE_FILE = Path.home() / ".current_conditions"

# JSON key -> (WeatherSnapshot attribute, expected type)
_FIELDS = {
    "last": ("last_checked", int),
    "station": ("station", str),
    "condition": ("condition", str),
    "emoji": ("emoji", str),
    "moon_emoji": ("moon_emoji", str),
    "temp": ("temp", str),
}


class CacheStoreError(ConditionsError):
    """Raised when the cache file cannot be written."""
    pass


class CacheStore:
    """
    Reads and writes the one snapshot kept between runs.

    Reading never fails: a missing or malformed file is the same as no
    prior check. Writing is a plain truncate-and-write; a torn file only
    forces a fresh lookup next run.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Initialize cache store.

        Args:
            path: Cache file location (default: ~/.current_conditions)
        """
        self.path = Path(path) if path is not None else DEFAULT_CACHE_FILE

    def load(self) -> WeatherSnapshot:
        """
        Load the cached snapshot.

        Returns:
            WeatherSnapshot: Cached values, or a zero-valued snapshot
        """
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logging.debug(f"No cache file at {self.path}")
            return WeatherSnapshot()
        except (OSError, ValueError, RecursionError) as e:
            logging.debug(f"Ignoring unreadable cache file {self.path}: {e}")
            return WeatherSnapshot()

        if not isinstance(data, dict):
            logging.debug(f"Ignoring cache file {self.path}: not a JSON object")
            return WeatherSnapshot()

        values = {}
        for key, (attr, expected) in _FIELDS.items():
            if key not in data:
                continue
            value = data[key]
            # bool is an int subclass but never a valid timestamp
            if not isinstance(value, expected) or isinstance(value, bool):
                logging.debug(f"Ignoring cache file {self.path}: bad '{key}' value {value!r}")
                return WeatherSnapshot()
            values[attr] = value

        snapshot = WeatherSnapshot(**values)
        logging.debug(f"Loaded cached conditions: {snapshot}")
        return snapshot

    def save(self, snapshot: WeatherSnapshot) -> None:
        """
        Replace the cache file with the given snapshot.

        Raises:
            CacheStoreError: If the snapshot cannot be serialized or written
        """
        data = {key: getattr(snapshot, attr) for key, (attr, _) in _FIELDS.items()}
        try:
            payload = json.dumps(data, ensure_ascii=False)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(payload)
        except (OSError, TypeError, ValueError) as e:
            logging.debug(f"Failed to write cache file {self.path}: {e}")
            raise CacheStoreError(f"Failed to write cache file {self.path}: {e}") from e
        logging.debug(f"Saved current conditions to {self.path}")
