from unittest.mock import patch

import pytest

from vibematch.analytics.store import clear_events, get_events
from vibematch.search.models import VibeSearchRequest
from vibematch.search.service import parse_venues, run_vibe_search, score_businesses
from vibematch.vibes.models import UserPreferences
from vibematch.yelp.errors import YelpAPIError

QUIET_CAFE = {
    "id": "cafe",
    "name": "Quiet Cafe",
    "url": "https://www.yelp.com/biz/quiet-cafe",
    "rating": 4.5,
    "attributes": {"NoiseLevel": "quiet", "WiFi": "free"},
    "contextual_info": {"photos": [{"original_url": "https://img.example/cafe.jpg"}]},
}

LOUD_BAR = {
    "id": "bar",
    "name": "Loud Bar",
    "image_url": "https://img.example/bar.jpg",
    "attributes": {"NoiseLevel": "loud", "HasTV": True},
    "summaries": {"short": "Lively bar with loud music and a packed dance floor"},
}

BROKEN = {"id": "broken"}

AI_RESPONSE = {
    "response": {"text": "Here are some spots you might like."},
    "chat_id": "chat-123",
    "entities": [{"businesses": [LOUD_BAR, BROKEN, QUIET_CAFE]}],
}

WORK_PREFS = {"noise_level": 20, "cozy_factor": 50, "focus_level": 90}


def test_parse_venues_skips_malformed_records():
    venues, skipped = parse_venues([QUIET_CAFE, BROKEN])
    assert [v.id for v in venues] == ["cafe"]
    assert skipped == 1


def test_parse_venues_fills_image_from_photos():
    venues, _ = parse_venues([QUIET_CAFE, LOUD_BAR])
    assert venues[0].image_url == "https://img.example/cafe.jpg"
    assert venues[1].image_url == "https://img.example/bar.jpg"


def test_parse_venues_empty_image_without_photos():
    venues, _ = parse_venues([{"id": "x", "name": "X"}])
    assert venues[0].image_url == ""


def test_parse_venues_keeps_records_with_null_lists():
    venues, skipped = parse_venues([
        {"id": "a", "name": "A", "categories": None},
        {"id": "b", "name": "B", "contextual_info": {"photos": None}},
    ])
    assert [v.id for v in venues] == ["a", "b"]
    assert skipped == 0
    assert venues[0].categories == []
    assert venues[1].image_url == ""


def test_parse_venues_skips_photos_without_url():
    record = {
        "id": "c",
        "name": "C",
        "contextual_info": {"photos": [
            {"original_url": None},
            {"original_url": "https://img.example/c.jpg"},
        ]},
    }
    no_url = {"id": "d", "name": "D", "contextual_info": {"photos": [{"original_url": None}]}}
    venues, skipped = parse_venues([record, no_url])
    assert skipped == 0
    assert venues[0].image_url == "https://img.example/c.jpg"
    assert venues[1].image_url == ""


def test_score_businesses_ranks_best_match_first():
    result = score_businesses([LOUD_BAR, QUIET_CAFE], UserPreferences(**WORK_PREFS))
    assert [s.venue.id for s in result.businesses] == ["cafe", "bar"]

    cafe, bar = result.businesses
    assert cafe.vibe_match.overall == 96
    assert (bar.vibe_scores.noise, bar.vibe_scores.cozy, bar.vibe_scores.focus) == (83, 50, 5)
    assert bar.vibe_match.overall == 51
    assert bar.quote == "Lively bar with loud music and a packed dance floor"


@patch("vibematch.search.service.search_with_ai")
def test_run_vibe_search(mock_ai):
    clear_events()
    mock_ai.return_value = AI_RESPONSE
    request = VibeSearchRequest(query="coffee", location="San Francisco", **WORK_PREFS)

    response = run_vibe_search(request)

    expected_query = (
        "Find me coffee, quiet, good for working, has WiFi, "
        "quiet enough to focus places in San Francisco"
    )
    assert response.query == expected_query
    assert mock_ai.call_args.args == (expected_query,)
    assert mock_ai.call_args.kwargs["chat_id"] is None

    assert response.total == 3
    assert [s.venue.id for s in response.businesses] == ["cafe", "bar"]
    assert response.ai_response.text == "Here are some spots you might like."
    assert response.ai_response.chat_id == "chat-123"

    events = get_events("vibe_search")
    assert len(events) == 1
    assert events[0]["location"] == "San Francisco"
    assert events[0]["top_match"] == 96
    assert events[0]["skipped_records"] == 1


@patch("vibematch.search.service.search_with_ai")
def test_run_vibe_search_passes_coordinates_and_chat(mock_ai):
    mock_ai.return_value = {"entities": []}
    request = VibeSearchRequest(chat_id="chat-9", latitude=40.7, longitude=-74.0)

    response = run_vibe_search(request)

    assert response.query == "Find me restaurant or cafe places nearby"
    assert mock_ai.call_args.kwargs["chat_id"] == "chat-9"
    assert mock_ai.call_args.kwargs["latitude"] == 40.7
    assert mock_ai.call_args.kwargs["longitude"] == -74.0
    assert response.businesses == []
    assert response.total == 0
    assert response.ai_response.text == ""


@patch("vibematch.search.service.search_with_ai")
def test_run_vibe_search_records_failures(mock_ai):
    clear_events()
    mock_ai.side_effect = YelpAPIError("Yelp API error: 500 - boom", status_code=500)

    with pytest.raises(YelpAPIError):
        run_vibe_search(VibeSearchRequest(location="Boston"))

    errors = get_events("vibe_search_error")
    assert len(errors) == 1
    assert "500" in errors[0]["error"]
    assert get_events("vibe_search") == []
