"""Map free-text condition and moon phase descriptions to emoji."""
from typing import Callable, Iterable

from weather_data import EmojiRule
from emoji_table import WEATHER_EMOJI, MOON_EMOJI


def _best_match(text: str, rules: Iterable[EmojiRule], matches: Callable[[str, str], bool]) -> str:
    """
    Return the glyph of the longest matching label.

    Equal-length matches go to the rule declared first.

    Args:
        text: Description from the provider
        rules: Rules in declaration order
        matches: Predicate taking (text, label)

    Returns:
        Emoji string, or "" when nothing matches
    """
    best = None
    for rule in rules:
        if matches(text, rule.label) and (best is None or len(rule.label) > len(best.label)):
            best = rule
    return best.emoji if best else ""


def classify_weather(condition: str) -> str:
    """Emoji for a condition such as "Light Thunderstorms and Rain" (suffix match)."""
    return _best_match(condition, WEATHER_EMOJI, str.endswith)


def classify_moon(phase: str) -> str:
    """Emoji for a moon phase such as "Waxing Gibbous" (prefix match)."""
    return _best_match(phase, MOON_EMOJI, str.startswith)
