"""Emoji glyphs for Weather Underground condition names and moon phases.

Glyphs are consumed verbatim by status bars, so keep them stable.
Rules are kept in declaration order; see classifier.py for how overlapping
labels are resolved.
"""
from typing import Tuple

from weather_data import EmojiRule


WEATHER_EMOJI: Tuple[EmojiRule, ...] = (
    EmojiRule("Drizzle", "🌦"),
    EmojiRule("Rain", "☔"),
    EmojiRule("Snow", "🌨"),
    EmojiRule("Snow Grains", "🌨"),
    EmojiRule("Ice Crystals", "🌨"),
    EmojiRule("Ice Pellets", "🌨"),
    EmojiRule("Hail", "🌧"),
    EmojiRule("Mist", "🌫"),
    EmojiRule("Fog", "🌫"),
    EmojiRule("Fog Patches", "🌫"),
    EmojiRule("Smoke", "🌪"),
    EmojiRule("Volcanic Ash", "🌪"),
    EmojiRule("Widespread Dust", "🏜"),
    EmojiRule("Sand", "🏜"),
    EmojiRule("Haze", "🌫"),
    EmojiRule("Spray", "🌦"),
    EmojiRule("Dust Whirls", "🏜"),
    EmojiRule("Sandstorm", "🏜"),
    EmojiRule("Low Drifting Snow", "🌨"),
    EmojiRule("Low Drifting Widespread Dust", "🏜"),
    EmojiRule("Low Drifting Sand", "🏜"),
    EmojiRule("Blowing Snow", "🌬❄"),
    EmojiRule("Blowing Widespread Dust", "🌬🏜"),
    EmojiRule("Blowing Sand", "🌬🏜"),
    EmojiRule("Rain Mist", "🌦"),
    EmojiRule("Rain Showers", "☔"),
    EmojiRule("Snow Showers", "🌨"),
    EmojiRule("Snow Blowing Snow Mist", "🌬🌨"),
    EmojiRule("Ice Pellet Showers", "🌨☄"),
    EmojiRule("Hail Showers", "🌧"),
    EmojiRule("Small Hail Showers", "🌧"),
    EmojiRule("Thunderstorm", "🌩"),
    EmojiRule("Thunderstorms and Rain", "⛈"),
    EmojiRule("Thunderstorms and Snow", "🌩🌨"),
    EmojiRule("Thunderstorms and Ice Pellets", "🌩☄"),
    EmojiRule("Thunderstorms with Hail", "⛈"),
    EmojiRule("Thunderstorms with Small Hail", "⛈"),
    EmojiRule("Freezing Drizzle", "🌨"),
    EmojiRule("Freezing Rain", "🌨"),
    EmojiRule("Freezing Fog", "🌫"),
    EmojiRule("Patches of Fog", "🌫"),
    EmojiRule("Shallow Fog", "🌫"),
    EmojiRule("Partial Fog", "🌫"),
    EmojiRule("Overcast", "☁"),
    EmojiRule("Clear", "🌞"),
    EmojiRule("Partly Cloudy", "🌤"),
    EmojiRule("Mostly Cloudy", "🌥"),
    EmojiRule("Scattered Clouds", "⛅"),
    EmojiRule("Small Hail", "🌧"),
    EmojiRule("Squalls", "🌊"),
    EmojiRule("Funnel Cloud", "🌪"),
    EmojiRule("Unknown Precipitation", "🌧❔"),
    EmojiRule("Unknown", "❔"),
)

MOON_EMOJI: Tuple[EmojiRule, ...] = (
    EmojiRule("New", "🌚"),
    EmojiRule("Waxing Crescent", "🌙"),
    EmojiRule("First Quarter", "🌛"),
    EmojiRule("Waxing Gibbous", "🌔"),
    EmojiRule("Full", "🌝"),
    EmojiRule("Waning Gibbous", "🌖"),
    EmojiRule("Last Quarter", "🌜"),
    EmojiRule("Waning Crescent", "🌘"),
)
