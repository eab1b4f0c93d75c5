"""Tests for the conditions service."""
import pytest
from datetime import datetime
from unittest.mock import Mock
from cache_store import CacheStore, CacheStoreError
from weather_service import ConditionsConfig, ConditionsService, is_stale, moon_for_night, sunset_today
from weather_provider import WeatherProviderBase, WeatherProviderError
from weather_data import ConditionsError, RemoteAstronomy, RemoteConditions, SunTime, WeatherSnapshot


class MockProvider(WeatherProviderBase):
    """Mock weather provider for testing."""

    def __init__(self, conditions=None, astronomy=None, raise_error=None):
        self.conditions = conditions
        self.astronomy = astronomy
        self.raise_error = raise_error
        self.conditions_calls = []
        self.astronomy_calls = []

    @property
    def call_count(self):
        return len(self.conditions_calls) + len(self.astronomy_calls)

    def get_conditions(self, location):
        self.conditions_calls.append(location)
        if self.raise_error:
            raise self.raise_error
        return self.conditions

    def get_astronomy(self, location):
        self.astronomy_calls.append(location)
        if self.raise_error:
            raise self.raise_error
        return self.astronomy


# 2024-06-01 20:00 local time
NIGHT = datetime(2024, 6, 1, 20, 0, 0)
NOON = datetime(2024, 6, 1, 12, 0, 0)


@pytest.fixture
def sample_conditions():
    """Sample current observation."""
    return RemoteConditions(station="KBOS", condition="Light Rain", temp_f=71.6)


@pytest.fixture
def sample_astronomy():
    """Sample astronomy with an 18:00 sunset."""
    return RemoteAstronomy(
        moon_phase="Full",
        sunrise=SunTime(hour="5", minute="30"),
        sunset=SunTime(hour="18", minute="00"),
    )


@pytest.fixture
def store(tmp_path):
    return CacheStore(tmp_path / ".current_conditions")


@pytest.fixture
def locator():
    loc = Mock()
    loc.get_zip.return_value = "02134"
    return loc


def make_service(provider, store, locator, **config):
    return ConditionsService(provider, ConditionsConfig(**config), cache=store, locator=locator)


@pytest.mark.parametrize("last,wait,now,expected", [
    (1000, 10, 1601, True),
    (1000, 10, 1600, False),  # boundary: not yet stale
    (1000, 10, 1599, False),
    (1000, 0, 1001, True),
    (1000, 0, 1000, False),
    (0, 10, 1684929490, True),
])
def test_is_stale(last, wait, now, expected):
    """Test staleness against the cooldown window."""
    assert is_stale(last, wait, now) is expected


def test_sunset_today_keeps_date_and_seconds():
    """Test that sunset reuses today's date and now's seconds."""
    now = datetime(2024, 6, 1, 12, 34, 56, 789)
    sunset = sunset_today(now, SunTime(hour="18", minute="05"))
    assert sunset == datetime(2024, 6, 1, 18, 5, 56, 789)


@pytest.mark.parametrize("hour,minute", [("", "00"), ("18", "xx"), ("six", "00"), (" 18", "00"), ("1_8", "00"), ("18", "0.5")])
def test_sunset_today_invalid(hour, minute):
    """Test that a bad sunset time is fatal."""
    with pytest.raises(ConditionsError):
        sunset_today(NOON, SunTime(hour=hour, minute=minute))


@pytest.mark.parametrize("hour,minute,expected", [
    ("24", "00", datetime(2024, 6, 2, 0, 0)),
    ("18", "60", datetime(2024, 6, 1, 19, 0)),
    ("+18", "05", datetime(2024, 6, 1, 18, 5)),
    ("18", "-30", datetime(2024, 6, 1, 17, 30)),
])
def test_sunset_today_rolls_over_out_of_range(hour, minute, expected):
    """Test that numeric values past the clock range roll into the next hour or day."""
    assert sunset_today(NOON, SunTime(hour=hour, minute=minute)) == expected


def test_sunset_today_huge_value_is_fatal():
    """Test that an overflowing sunset time is fatal rather than a crash."""
    with pytest.raises(ConditionsError):
        sunset_today(NOON, SunTime(hour="99999999999999", minute="00"))


def test_moon_hidden_when_sunset_rolls_to_tomorrow(sample_astronomy):
    """Test that a sunset of hour 24 keeps the moon hidden this evening."""
    sample_astronomy.sunset = SunTime(hour="24", minute="00")
    assert moon_for_night(sample_astronomy, NIGHT) == ""


def test_moon_for_night_after_sunset(sample_astronomy):
    """Test that the moon shows after sunset."""
    assert moon_for_night(sample_astronomy, NIGHT) == "🌝"


def test_moon_for_night_before_sunset(sample_astronomy):
    """Test that the moon is hidden during the day whatever the phase."""
    assert moon_for_night(sample_astronomy, NOON) == ""


def test_moon_for_night_unknown_phase(sample_astronomy):
    """Test that an unknown phase after sunset gives an empty slot."""
    sample_astronomy.moon_phase = "Blue"
    assert moon_for_night(sample_astronomy, NIGHT) == ""


def test_empty_cache_forces_refresh(sample_conditions, store, locator):
    """Test that no prior snapshot always fetches."""
    provider = MockProvider(conditions=sample_conditions)
    service = make_service(provider, store, locator, wait_minutes=10)

    line = service.get_status_line(NOON)

    assert line == "☔"
    assert provider.conditions_calls == ["02134"]
    assert provider.astronomy_calls == []


def test_fresh_cache_skips_fetch(store, locator):
    """Test that a snapshot inside the cooldown is used as-is."""
    store.save(WeatherSnapshot(
        last_checked=int(NOON.timestamp()) - 300,
        station="KBOS",
        condition="Clear",
        emoji="🌞",
        moon_emoji="🌝",
        temp="72",
    ))
    provider = MockProvider(raise_error=WeatherProviderError("should not be called"))
    service = make_service(provider, store, locator, wait_minutes=10, show_moon=True, show_temp=True)

    line = service.get_status_line(NOON)

    assert line == "🌞 🌝  72°"
    assert provider.call_count == 0
    locator.get_zip.assert_not_called()


def test_stale_cache_refreshes(sample_conditions, store, locator):
    """Test that a snapshot past the cooldown is replaced."""
    store.save(WeatherSnapshot(last_checked=int(NOON.timestamp()) - 601, condition="Clear", emoji="🌞"))
    provider = MockProvider(conditions=sample_conditions)
    service = make_service(provider, store, locator, wait_minutes=10)

    assert service.get_status_line(NOON) == "☔"
    assert len(provider.conditions_calls) == 1


def test_force_ignores_fresh_cache(sample_conditions, store, locator):
    """Test that force always fetches."""
    store.save(WeatherSnapshot(last_checked=int(NOON.timestamp()), condition="Clear", emoji="🌞"))
    provider = MockProvider(conditions=sample_conditions)
    service = make_service(provider, store, locator, force=True)

    assert service.get_status_line(NOON) == "☔"
    assert len(provider.conditions_calls) == 1


def test_refresh_saves_snapshot(sample_conditions, sample_astronomy, store, locator):
    """Test that a refresh persists every field."""
    provider = MockProvider(conditions=sample_conditions, astronomy=sample_astronomy)
    service = make_service(provider, store, locator, show_moon=True, show_temp=True)

    line = service.get_status_line(NIGHT)

    assert line == "☔ 🌝  72°"
    assert store.load() == WeatherSnapshot(
        last_checked=int(NIGHT.timestamp()),
        station="KBOS",
        condition="Light Rain",
        emoji="☔",
        moon_emoji="🌝",
        temp="72",
    )


def test_refresh_daytime_moon_slot_empty(sample_conditions, sample_astronomy, store, locator):
    """Test that the moon slot stays in the output but is empty by day."""
    provider = MockProvider(conditions=sample_conditions, astronomy=sample_astronomy)
    service = make_service(provider, store, locator, show_moon=True)

    assert service.get_status_line(NOON) == "☔ "
    assert store.load().moon_emoji == ""


def test_refresh_without_moon_skips_astronomy(sample_conditions, store, locator):
    """Test that astronomy is only fetched when the moon is shown."""
    provider = MockProvider(conditions=sample_conditions)
    service = make_service(provider, store, locator, show_temp=True)

    assert service.get_status_line(NIGHT) == "☔  72°"
    assert provider.astronomy_calls == []


def test_forced_zip_skips_lookup(sample_conditions, store, locator):
    """Test that a configured zip code is used directly."""
    provider = MockProvider(conditions=sample_conditions)
    service = make_service(provider, store, locator, zip_code="94103")

    service.get_status_line(NOON)

    assert provider.conditions_calls == ["94103"]
    locator.get_zip.assert_not_called()


def test_unknown_condition_renders_empty_slot(store, locator):
    """Test that an unmapped condition yields an empty emoji."""
    provider = MockProvider(conditions=RemoteConditions("KBOS", "Unrecognized Condition Xyz", 50.4))
    service = make_service(provider, store, locator, show_temp=True)

    assert service.get_status_line(NOON) == "  50°"


def test_provider_error_propagates_and_keeps_cache(store, locator):
    """Test that a failed fetch is fatal and leaves the old snapshot."""
    old = WeatherSnapshot(last_checked=1000, condition="Clear", emoji="🌞")
    store.save(old)
    provider = MockProvider(raise_error=WeatherProviderError("Network error"))
    service = make_service(provider, store, locator)

    with pytest.raises(WeatherProviderError):
        service.get_status_line(NOON)

    assert store.load() == old


def test_locator_error_propagates(sample_conditions, store, locator):
    """Test that a failed zip lookup is fatal before any weather fetch."""
    locator.get_zip.side_effect = WeatherProviderError("no postal code")
    provider = MockProvider(conditions=sample_conditions)
    service = make_service(provider, store, locator)

    with pytest.raises(WeatherProviderError):
        service.get_status_line(NOON)

    assert provider.call_count == 0


def test_bad_sunset_is_fatal(sample_conditions, store, locator):
    """Test that an unparseable sunset aborts the run without saving."""
    astronomy = RemoteAstronomy(moon_phase="Full", sunset=SunTime(hour="", minute=""))
    provider = MockProvider(conditions=sample_conditions, astronomy=astronomy)
    service = make_service(provider, store, locator, show_moon=True)

    with pytest.raises(ConditionsError):
        service.get_status_line(NIGHT)

    assert store.load() == WeatherSnapshot()


def test_cache_write_failure_is_fatal(sample_conditions, tmp_path, locator):
    """Test that failing to save is fatal."""
    store = CacheStore(tmp_path / "missing-dir" / "cache.json")
    provider = MockProvider(conditions=sample_conditions)
    service = make_service(provider, store, locator)

    with pytest.raises(CacheStoreError):
        service.get_status_line(NOON)
