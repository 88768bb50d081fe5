from vibematch.analytics.aggregator import compute_analytics
from vibematch.analytics.store import clear_events, get_events, record_event


def _search(location, top_match, results=2, noise=50, cozy=50, focus=50, ms=10.0):
    return {
        "type": "vibe_search",
        "location": location,
        "noise_level": noise,
        "cozy_factor": cozy,
        "focus_level": focus,
        "top_match": top_match,
        "results_returned": results,
        "response_time_ms": ms,
    }


def test_store_filters_by_type():
    clear_events()
    record_event("vibe_search", {"location": "A"})
    record_event("vibe_search_error", {"location": "B"})
    assert len(get_events()) == 2
    assert [e["location"] for e in get_events("vibe_search")] == ["A"]
    assert "timestamp" in get_events()[0]
    clear_events()
    assert get_events() == []


def test_analytics_empty():
    body = compute_analytics([])
    assert body["total_searches"] == 0
    assert body["avg_response_time_ms"] == 0.0
    assert body["avg_top_match"] == 0.0
    assert body["empty_result_rate"] == 0.0


def test_analytics_summary():
    events = [
        _search("Portland", 90, noise=10, ms=10.0),
        _search("Portland", 70, focus=95, ms=20.0),
        _search(None, None, results=0, cozy=30, ms=30.0),
        {"type": "vibe_search_error", "location": "Portland", "error": "boom"},
    ]
    body = compute_analytics(events)
    assert body["total_searches"] == 3
    assert body["failed_searches"] == 1
    assert body["avg_response_time_ms"] == 20.0
    assert body["top_locations"] == [
        {"name": "Portland", "count": 2},
        {"name": "current location", "count": 1},
    ]
    assert body["slider_usage"]["noise_level"] == {"low": 1, "neutral": 2, "high": 0}
    assert body["slider_usage"]["cozy_factor"] == {"low": 0, "neutral": 3, "high": 0}
    assert body["slider_usage"]["focus_level"] == {"low": 0, "neutral": 2, "high": 1}
    assert body["avg_top_match"] == 80.0
    assert body["empty_result_rate"] == 33.3
