from __future__ import annotations

import os
from typing import Any, Literal

from fastapi import FastAPI, HTTPException, Query, Request
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .search.models import (
    QueryRequest,
    ScoreRequest,
    ScoreResponse,
    VibeSearchRequest,
    VibeSearchResponse,
)
from .search.service import run_vibe_search, score_businesses
from .vibes.query import build_vibe_query
from .yelp.client import search_businesses
from .yelp.config import DEFAULT_YELP_CONFIG
from .yelp.errors import YelpAPIError, YelpConfigError, YelpError

app = FastAPI(title="Vibe Match API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "vibematch-secret-change-in-production"),
)


def _yelp_http_error(exc: YelpError) -> HTTPException:
    if isinstance(exc, YelpConfigError):
        return HTTPException(status_code=500, detail=str(exc))
    if isinstance(exc, YelpAPIError):
        return HTTPException(status_code=502, detail=str(exc))
    return HTTPException(status_code=502, detail="Failed to fetch from Yelp")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/vibes/search", response_model=VibeSearchResponse)
def vibe_search(body: VibeSearchRequest, request: Request) -> VibeSearchResponse:
    # Continue the Yelp AI conversation stored in the session unless the
    # client passed its own chat id.
    if not body.chat_id:
        session_chat_id = request.session.get("yelp_chat_id")
        if session_chat_id:
            body = body.model_copy(update={"chat_id": session_chat_id})

    try:
        response = run_vibe_search(body)
    except YelpError as exc:
        raise _yelp_http_error(exc) from exc

    if response.ai_response.chat_id:
        request.session["yelp_chat_id"] = response.ai_response.chat_id

    return response


@app.post("/vibes/score", response_model=ScoreResponse)
def vibe_score(body: ScoreRequest) -> ScoreResponse:
    return score_businesses(body.businesses, body.preferences)


@app.post("/vibes/query")
def vibe_query(body: QueryRequest) -> dict[str, str]:
    return {"query": build_vibe_query(body.term, body.preferences, body.location)}


@app.post("/vibes/reset")
def vibe_reset(request: Request) -> dict[str, str]:
    request.session.pop("yelp_chat_id", None)
    return {"status": "reset"}


@app.get("/businesses/search")
def business_search(
    term: str | None = None,
    location: str | None = None,
    latitude: float | None = None,
    longitude: float | None = None,
    radius: int | None = Query(default=None, ge=0, le=40000),
    categories: str | None = None,
    limit: int = Query(default=DEFAULT_YELP_CONFIG.default_limit, ge=1, le=50),
    offset: int | None = Query(default=None, ge=0),
    sort_by: Literal["best_match", "rating", "review_count", "distance"] = "best_match",
) -> dict[str, Any]:
    params = {
        "term": term,
        "location": location,
        "latitude": latitude,
        "longitude": longitude,
        "radius": radius,
        "categories": categories,
        "limit": limit,
        "offset": offset,
        "sort_by": sort_by,
    }
    try:
        return search_businesses(params)
    except YelpError as exc:
        raise _yelp_http_error(exc) from exc


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())


@app.get("/analytics/events")
def analytics_events(type: str | None = None) -> list[dict[str, Any]]:
    return get_events(type)
