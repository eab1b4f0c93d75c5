"""Current conditions service with file caching and a cooldown window."""
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from cache_store import CacheStore
from classifier import classify_moon, classify_weather
from geolocation import IpInfoLocator
from layout import render_snapshot
from weather_data import ConditionsError, RemoteAstronomy, SunTime, WeatherSnapshot
from weather_provider import WeatherProviderBase

WAIT_MINUTES_DEFAULT = 10


@dataclass(frozen=True)
class ConditionsConfig:
    """Options for one run, built once from the command line."""
    wait_minutes: int = WAIT_MINUTES_DEFAULT
    zip_code: Optional[str] = None  # skip the IP lookup when set
    force: bool = False
    show_moon: bool = False
    show_temp: bool = False


def is_stale(last_checked: int, wait_minutes: int, now: int) -> bool:
    """True once more than wait_minutes have passed since last_checked (UNIX seconds)."""
    return now > last_checked + wait_minutes * 60


def _clock_field(value: str) -> int:
    """Parse an hour or minute the way the provider writes it: optional sign, digits only."""
    if not re.fullmatch(r"[+-]?[0-9]+", value):
        raise ValueError(f"not an integer: {value!r}")
    return int(value)


def sunset_today(now: datetime, sunset: SunTime) -> datetime:
    """
    Combine today's date with the provider's sunset clock time.

    Seconds and microseconds are carried over from ``now``. Out-of-range
    values roll over, so hour "24" is midnight tomorrow.

    Raises:
        ConditionsError: If hour or minute is not an integer
    """
    try:
        hour = _clock_field(sunset.hour)
        minute = _clock_field(sunset.minute)
    except ValueError as e:
        raise ConditionsError(f"Invalid sunset time {sunset.hour!r}:{sunset.minute!r}: {e}") from e
    try:
        return now.replace(hour=0, minute=0) + timedelta(hours=hour, minutes=minute)
    except OverflowError as e:
        raise ConditionsError(f"Sunset time out of range {sunset.hour!r}:{sunset.minute!r}: {e}") from e


def moon_for_night(astronomy: RemoteAstronomy, now: datetime) -> str:
    """
    Moon phase emoji after sunset, "" before it.

    Sunrise is not consulted, so the moon stays hidden after midnight
    until the next sunset.
    """
    # TODO: decide whether the moon should also show before sunrise
    logging.debug(f"sunrise {astronomy.sunrise} sunset {astronomy.sunset}")
    sunset = sunset_today(now, astronomy.sunset)
    if now > sunset:
        logging.debug("it's night")
        return classify_moon(astronomy.moon_phase)
    return ""


class ConditionsService:
    """
    Produces the status line, reusing the cached result while it is fresh.

    A refresh resolves the location, fetches current conditions (and
    astronomy when the moon is shown), classifies them, saves the new
    snapshot and renders it. Any failure raises ConditionsError; nothing
    is printed or cached for a failed run.
    """

    def __init__(
        self,
        provider: WeatherProviderBase,
        config: ConditionsConfig,
        cache: Optional[CacheStore] = None,
        locator: Optional[IpInfoLocator] = None
    ):
        """
        Initialize conditions service.

        Args:
            provider: Weather provider to use
            config: Options for this run
            cache: Snapshot store (default: ~/.current_conditions)
            locator: Zip code lookup used when config has no zip_code
        """
        self.provider = provider
        self.config = config
        self.cache = cache or CacheStore()
        self.locator = locator or IpInfoLocator()

    def get_status_line(self, now: Optional[datetime] = None) -> str:
        """
        Get the status line, from cache if still fresh.

        Args:
            now: Current local time (default: datetime.now())

        Returns:
            str: Emoji line to print

        Raises:
            ConditionsError: If a lookup, fetch, parse or cache write fails
        """
        now = now or datetime.now()
        cached = self.cache.load()
        logging.debug(f"last check was {cached.last_checked}")

        if not self.config.force and cached.exists and not self._time_to_check(cached, now):
            logging.debug("using cached response")
            return render_snapshot(cached, self.config.show_moon, self.config.show_temp)

        snapshot = self.refresh(now)
        return render_snapshot(snapshot, self.config.show_moon, self.config.show_temp)

    def refresh(self, now: datetime) -> WeatherSnapshot:
        """
        Fetch, classify and persist fresh conditions.

        Returns:
            WeatherSnapshot: The snapshot that was saved
        """
        location = self.resolve_location()
        conditions = self.provider.get_conditions(location)

        moon_emoji = ""
        if self.config.show_moon:
            astronomy = self.provider.get_astronomy(location)
            moon_emoji = moon_for_night(astronomy, now)

        snapshot = WeatherSnapshot(
            last_checked=int(now.timestamp()),
            station=conditions.station,
            condition=conditions.condition,
            emoji=classify_weather(conditions.condition),
            moon_emoji=moon_emoji,
            temp=f"{conditions.temp_f:.0f}",
        )
        self.cache.save(snapshot)
        logging.info(f"Refreshed conditions: {snapshot.condition!r} -> {snapshot.emoji!r}")
        return snapshot

    def resolve_location(self) -> str:
        if self.config.zip_code:
            logging.debug(f"using forced zip: {self.config.zip_code}")
            return self.config.zip_code
        logging.debug("zip lookup")
        return self.locator.get_zip()

    def _time_to_check(self, cached: WeatherSnapshot, now: datetime) -> bool:
        ok = is_stale(cached.last_checked, self.config.wait_minutes, int(now.timestamp()))
        logging.debug(f"Cache stale? {ok} (wait {self.config.wait_minutes} min)")
        return ok
