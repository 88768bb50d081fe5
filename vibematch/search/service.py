from __future__ import annotations

import logging
import time
from typing import Any

from pydantic import ValidationError

from ..analytics.store import record_event
from ..vibes.config import DEFAULT_VIBE_CONFIG, VibeConfig
from ..vibes.matching import rank_venues, score_venue
from ..vibes.models import UserPreferences, Venue
from ..vibes.query import build_vibe_query
from ..yelp.client import extract_businesses, search_with_ai
from ..yelp.config import DEFAULT_YELP_CONFIG, YelpConfig
from ..yelp.errors import YelpError
from .models import (
    AIResponseSummary,
    ScoreResponse,
    VibeSearchRequest,
    VibeSearchResponse,
)

logger = logging.getLogger(__name__)


def _with_photo_fallback(venue: Venue) -> Venue:
    """Use the first contextual photo with a URL when the business has no image_url."""
    if venue.image_url:
        return venue
    photos = venue.contextual_info.photos if venue.contextual_info else []
    photo_url = next((p.original_url for p in photos if p.original_url), "")
    return venue.model_copy(update={"image_url": photo_url})


def parse_venues(records: list[dict[str, Any]]) -> tuple[list[Venue], int]:
    """Validate raw business records, skipping the ones that cannot be read."""
    venues: list[Venue] = []
    skipped = 0
    for record in records:
        try:
            venue = Venue.model_validate(record)
        except ValidationError:
            logger.warning(
                "Skipping malformed business record %r",
                record.get("id") if isinstance(record, dict) else record,
                exc_info=True,
            )
            skipped += 1
            continue
        venues.append(_with_photo_fallback(venue))
    return venues, skipped


def score_businesses(
    records: list[dict[str, Any]],
    preferences: UserPreferences,
    config: VibeConfig = DEFAULT_VIBE_CONFIG,
) -> ScoreResponse:
    venues, skipped = parse_venues(records)
    scored = [score_venue(venue, preferences, config) for venue in venues]
    return ScoreResponse(businesses=rank_venues(scored), skipped=skipped)


def run_vibe_search(
    request: VibeSearchRequest,
    yelp_config: YelpConfig = DEFAULT_YELP_CONFIG,
    vibe_config: VibeConfig = DEFAULT_VIBE_CONFIG,
) -> VibeSearchResponse:
    start_time = time.time()
    preferences = request.preferences()

    query = build_vibe_query(request.query, preferences, request.location)
    logger.info("Yelp AI query: %s", query)

    event = {
        "location": request.location,
        "term": request.query,
        "noise_level": preferences.noise_level,
        "cozy_factor": preferences.cozy_factor,
        "focus_level": preferences.focus_level,
        "has_coordinates": request.latitude is not None and request.longitude is not None,
        "query": query,
    }

    try:
        ai_response = search_with_ai(
            query,
            chat_id=request.chat_id,
            latitude=request.latitude,
            longitude=request.longitude,
            config=yelp_config,
        )
    except YelpError as exc:
        elapsed_ms = round((time.time() - start_time) * 1000, 1)
        record_event("vibe_search_error", {**event, "error": str(exc), "response_time_ms": elapsed_ms})
        raise

    records = extract_businesses(ai_response)
    scored = score_businesses(records, preferences, vibe_config)

    reply = ai_response.get("response") or {}
    response = VibeSearchResponse(
        businesses=scored.businesses,
        total=len(records),
        ai_response=AIResponseSummary(
            text=reply.get("text") or "",
            chat_id=ai_response.get("chat_id"),
        ),
        query=query,
    )

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    top_match = response.businesses[0].vibe_match.overall if response.businesses else None
    record_event("vibe_search", {
        **event,
        "total_results": response.total,
        "results_returned": len(response.businesses),
        "skipped_records": scored.skipped,
        "top_match": top_match,
        "response_time_ms": elapsed_ms,
    })

    return response
