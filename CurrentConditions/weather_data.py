"""Current conditions domain model - pure data structures independent of any API."""
from dataclasses import dataclass, field


class ConditionsError(Exception):
    """Fatal error that ends a current-conditions run with exit status 1."""
    pass


@dataclass
class WeatherSnapshot:
    """
    The last known result, persisted between runs.

    A zero-valued snapshot (``last_checked == 0``) means no prior check.
    """
    last_checked: int = 0  # UNIX timestamp of the refresh that produced it
    station: str = ""
    condition: str = ""  # e.g., "Light Rain", "Partly Cloudy"
    emoji: str = ""
    moon_emoji: str = ""
    temp: str = ""  # whole degrees Fahrenheit, already formatted

    @property
    def exists(self) -> bool:
        return self.last_checked != 0


@dataclass(frozen=True)
class EmojiRule:
    """Maps a condition or moon phase label fragment to its glyph."""
    label: str
    emoji: str


@dataclass
class RemoteConditions:
    """Current observation as reported by the weather provider."""
    station: str
    condition: str
    temp_f: float


@dataclass
class SunTime:
    """Local clock time from the astronomy payload; fields stay strings until used."""
    hour: str = ""
    minute: str = ""


@dataclass
class RemoteAstronomy:
    """Moon phase and sun times for today at the requested location."""
    moon_phase: str
    sunrise: SunTime = field(default_factory=SunTime)
    sunset: SunTime = field(default_factory=SunTime)
