from __future__ import annotations

from collections import Counter
from typing import Any

from ..vibes.query import HIGH_THRESHOLD, LOW_THRESHOLD

_SLIDERS = ("noise_level", "cozy_factor", "focus_level")


def _slider_band(value: int) -> str:
    if value < LOW_THRESHOLD:
        return "low"
    if value > HIGH_THRESHOLD:
        return "high"
    return "neutral"


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == "vibe_search"]
    errors = [e for e in events if e["type"] == "vibe_search_error"]
    total = len(searches)

    # Average response time
    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Top locations (coordinate-only searches have no location)
    loc_counter: Counter[str] = Counter()
    for s in searches:
        loc_counter[s.get("location") or "current location"] += 1
    top_locations = [{"name": n, "count": c} for n, c in loc_counter.most_common(10)]

    # How often each slider was pushed out of the neutral band
    slider_usage: dict[str, dict[str, int]] = {}
    for slider in _SLIDERS:
        bands = Counter(_slider_band(s[slider]) for s in searches if slider in s)
        slider_usage[slider] = {band: bands.get(band, 0) for band in ("low", "neutral", "high")}

    # Match quality of the best result per search
    top_matches = [s["top_match"] for s in searches if s.get("top_match") is not None]
    avg_top_match = round(sum(top_matches) / len(top_matches), 1) if top_matches else 0.0
    empty_results = sum(1 for s in searches if not s.get("results_returned"))

    return {
        "total_searches": total,
        "failed_searches": len(errors),
        "avg_response_time_ms": avg_time,
        "top_locations": top_locations,
        "slider_usage": slider_usage,
        "avg_top_match": avg_top_match,
        "empty_result_rate": round(empty_results / total * 100, 1) if total else 0.0,
    }
