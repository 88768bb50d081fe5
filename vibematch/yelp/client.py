from __future__ import annotations

import logging
from typing import Any

import httpx

from .config import DEFAULT_YELP_CONFIG, YelpConfig
from .errors import YelpAPIError, YelpConfigError

logger = logging.getLogger(__name__)

SEARCH_PATH = "/v3/businesses/search"
BUSINESS_PATH = "/v3/businesses/{business_id}"
AI_CHAT_PATH = "/ai/chat/v2"


def _headers(config: YelpConfig) -> dict[str, str]:
    if not config.api_key:
        raise YelpConfigError("YELP_API_KEY is not set in environment variables")
    return {
        "Authorization": f"Bearer {config.api_key}",
        "Content-Type": "application/json",
    }


def _request(
    method: str,
    path: str,
    config: YelpConfig,
    params: dict[str, Any] | None = None,
    body: dict[str, Any] | None = None,
) -> dict[str, Any]:
    headers = _headers(config)
    url = f"{config.base_url.rstrip('/')}{path}"

    try:
        response = httpx.request(
            method,
            url,
            params=params,
            json=body,
            headers=headers,
            timeout=config.timeout,
        )
    except httpx.HTTPError as exc:
        logger.warning("Yelp request %s %s failed", method, path, exc_info=True)
        raise YelpAPIError(f"Yelp API request failed: {exc}") from exc

    if response.is_error:
        raise YelpAPIError(
            f"Yelp API error: {response.status_code} - {response.text}",
            status_code=response.status_code,
            body=response.text,
        )

    try:
        return response.json()
    except ValueError as exc:
        raise YelpAPIError(
            "Yelp API returned invalid JSON",
            status_code=response.status_code,
            body=response.text,
        ) from exc


def search_businesses(
    params: dict[str, Any],
    config: YelpConfig = DEFAULT_YELP_CONFIG,
) -> dict[str, Any]:
    """Plain Fusion business search.  ``None`` params are not sent."""
    query = {k: v for k, v in params.items() if v is not None}
    return _request("GET", SEARCH_PATH, config, params=query)


def get_business(
    business_id: str,
    config: YelpConfig = DEFAULT_YELP_CONFIG,
) -> dict[str, Any]:
    return _request("GET", BUSINESS_PATH.format(business_id=business_id), config)


def search_with_ai(
    query: str,
    chat_id: str | None = None,
    latitude: float | None = None,
    longitude: float | None = None,
    config: YelpConfig = DEFAULT_YELP_CONFIG,
) -> dict[str, Any]:
    """
    Send a natural-language query to the Yelp AI chat endpoint.

    Coordinates are only included when both are given.  Passing the
    ``chat_id`` from a previous response continues that conversation.
    """
    user_context: dict[str, Any] = {"locale": config.locale}
    if latitude is not None and longitude is not None:
        user_context["latitude"] = latitude
        user_context["longitude"] = longitude

    body: dict[str, Any] = {"query": query, "user_context": user_context}
    if chat_id:
        body["chat_id"] = chat_id

    return _request("POST", AI_CHAT_PATH, config, body=body)


def extract_businesses(ai_response: dict[str, Any]) -> list[dict[str, Any]]:
    """Flatten the businesses of every entity in an AI chat response."""
    businesses: list[dict[str, Any]] = []
    for entity in ai_response.get("entities") or []:
        if isinstance(entity, dict):
            businesses.extend(entity.get("businesses") or [])
    return businesses
