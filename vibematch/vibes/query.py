from __future__ import annotations

from .models import UserPreferences

LOW_THRESHOLD = 30
HIGH_THRESHOLD = 70
FALLBACK_DESCRIPTION = "restaurant or cafe"


def _noise_phrases(level: int) -> list[str]:
    if level < LOW_THRESHOLD:
        return ["quiet"]
    if level > HIGH_THRESHOLD:
        return ["lively", "vibrant atmosphere"]
    return []


def _cozy_phrases(level: int) -> list[str]:
    if level > HIGH_THRESHOLD:
        return ["cozy", "warm ambiance"]
    if level < LOW_THRESHOLD:
        return ["modern", "minimalist"]
    return []


def _focus_phrases(level: int) -> list[str]:
    if level > HIGH_THRESHOLD:
        return ["good for working", "has WiFi", "quiet enough to focus"]
    if level < LOW_THRESHOLD:
        return ["casual hangout spot", "social atmosphere"]
    return []


def build_vibe_query(
    term: str | None,
    preferences: UserPreferences,
    location: str | None,
) -> str:
    """
    Turn a search term and slider preferences into a natural-language query.

    Sliders at or between 30 and 70 add nothing.  The term is dropped when it
    just repeats the location.  Without a location the query asks for
    places nearby.
    """
    parts: list[str] = []

    if term and term != location:
        parts.append(term)

    parts += _noise_phrases(preferences.noise_level)
    parts += _cozy_phrases(preferences.cozy_factor)
    parts += _focus_phrases(preferences.focus_level)

    description = ", ".join(parts) if parts else FALLBACK_DESCRIPTION
    if not location:
        return f"Find me {description} places nearby"
    return f"Find me {description} places in {location}"
