from __future__ import annotations

from .analyzer import round_score
from .config import DEFAULT_VIBE_CONFIG, VibeConfig
from .models import (
    DimensionScore,
    MatchBreakdown,
    MatchResult,
    MatchTier,
    ScoredVenue,
    UserPreferences,
    Venue,
    VibeLevels,
)
from .scoring import calculate_vibe_scores, venue_quote

MAX_LEVEL = 5

# Lower bound (inclusive) of each tier, best first
_TIER_FLOORS: tuple[tuple[int, MatchTier], ...] = (
    (80, "excellent"),
    (60, "good"),
    (40, "fair"),
    (20, "weak"),
)


def _dimension_match(preference: int, score: int) -> float:
    # Both sides live in [0, 100], so this never leaves [0, 100] either.
    return 100.0 - abs(preference - score)


def calculate_vibe_match(
    scores: DimensionScore,
    preferences: UserPreferences,
) -> MatchResult:
    """
    Compare a venue's vibe scores to what the user asked for.

    ``breakdown`` and ``overall`` are each rounded from their own unrounded
    values; ``overall`` is never derived from the rounded breakdown.
    """
    noise = _dimension_match(preferences.noise_level, scores.noise)
    cozy = _dimension_match(preferences.cozy_factor, scores.cozy)
    focus = _dimension_match(preferences.focus_level, scores.focus)

    return MatchResult(
        overall=round_score((noise + cozy + focus) / 3),
        breakdown=MatchBreakdown(
            noise=round_score(noise),
            cozy=round_score(cozy),
            focus=round_score(focus),
        ),
    )


def vibe_level(score: int) -> int:
    """Map a 0-100 score onto 0-5 indicator dots."""
    return max(0, min(MAX_LEVEL, score * MAX_LEVEL // 100))


def vibe_levels(scores: DimensionScore) -> VibeLevels:
    return VibeLevels(
        noise=vibe_level(scores.noise),
        cozy=vibe_level(scores.cozy),
        focus=vibe_level(scores.focus),
    )


def match_tier(percentage: int) -> MatchTier:
    for floor, tier in _TIER_FLOORS:
        if percentage >= floor:
            return tier
    return "poor"


def score_venue(
    venue: Venue,
    preferences: UserPreferences,
    config: VibeConfig = DEFAULT_VIBE_CONFIG,
) -> ScoredVenue:
    scores = calculate_vibe_scores(venue, config)
    match = calculate_vibe_match(scores, preferences)
    return ScoredVenue(
        venue=venue,
        vibe_scores=scores,
        vibe_match=match,
        vibe_levels=vibe_levels(scores),
        match_tier=match_tier(match.overall),
        quote=venue_quote(venue),
    )


def rank_venues(scored: list[ScoredVenue]) -> list[ScoredVenue]:
    """Best overall match first; equal matches keep their input order."""
    return sorted(scored, key=lambda s: s.vibe_match.overall, reverse=True)
