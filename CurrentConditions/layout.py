"""Status line rendering - pure functions for testability."""
from weather_data import WeatherSnapshot


def format_status_line(
    emoji: str,
    moon_emoji: str = "",
    temp: str = "",
    show_moon: bool = False,
    show_temp: bool = False
) -> str:
    """
    Build the single line printed for the status bar.

    The moon slot is separated by one space and the temperature by two,
    e.g. "☔ 🌝  72°". Slots are included whenever requested, even when
    the value is empty.

    Args:
        emoji: Condition emoji
        moon_emoji: Moon phase emoji ("" during the day)
        temp: Temperature in whole degrees Fahrenheit
        show_moon: Include the moon slot
        show_temp: Include the temperature slot

    Returns:
        Output line without a trailing newline
    """
    out = emoji
    if show_moon:
        out += " " + moon_emoji
    if show_temp:
        out += "  " + temp + "°"
    return out


def render_snapshot(snapshot: WeatherSnapshot, show_moon: bool = False, show_temp: bool = False) -> str:
    return format_status_line(snapshot.emoji, snapshot.moon_emoji, snapshot.temp, show_moon, show_temp)
