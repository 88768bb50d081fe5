"""
Per-venue vibe scoring.

Text analysis produces a baseline for each dimension; structured attributes
then adjust it through a fixed pipeline of blend steps.  Every step takes
and returns a ``RawVibeScores`` and clamps what it touches, so no later step
ever reads a value outside [0, 100].
"""
from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, replace

from .analyzer import analyze_text, clamp_score, round_score
from .config import DEFAULT_VIBE_CONFIG, VibeConfig
from .lexicon import Lexicon
from .models import (
    ContextualInfo,
    DimensionScore,
    Venue,
    VenueAttributes,
    VenueSummaries,
)

logger = logging.getLogger(__name__)

FALLBACK_QUOTE = "A great spot with wonderful vibes!"
_HIGHLIGHT_RE = re.compile(r"\[\[(?:END)?HIGHLIGHT\]\]")


@dataclass(frozen=True)
class RawVibeScores:
    noise: float
    cozy: float
    focus: float


BlendStep = Callable[[RawVibeScores, VenueAttributes, VibeConfig], RawVibeScores]


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


def combine_venue_text(venue: Venue) -> str:
    """Join the venue's text fragments (long summary first) into one lower-cased string."""
    summaries = venue.summaries or VenueSummaries()
    info = venue.contextual_info or ContextualInfo()
    fragments = [
        summaries.long,
        summaries.medium,
        summaries.short,
        info.summary,
        info.review_snippet,
    ]
    return " ".join(f for f in fragments if f).lower()


def text_scores(text: str, config: VibeConfig = DEFAULT_VIBE_CONFIG) -> RawVibeScores:
    def _analyze(lexicon: Lexicon) -> float:
        return analyze_text(
            text,
            lexicon,
            baseline=config.baseline,
            step=config.keyword_step,
            moderate_pull=config.moderate_pull,
        )

    return RawVibeScores(
        noise=_analyze(config.lexicons.noise),
        cozy=_analyze(config.lexicons.cozy),
        focus=_analyze(config.lexicons.focus),
    )


# ---------------------------------------------------------------------------
# Attribute blend steps
# ---------------------------------------------------------------------------


def blend_noise_level(
    scores: RawVibeScores, attributes: VenueAttributes, config: VibeConfig
) -> RawVibeScores:
    attribute_noise = config.noise_level_values.get(attributes.noise_level or "")
    if attribute_noise is None:
        return scores
    w = config.attribute_noise_weight
    blended = scores.noise * (1.0 - w) + attribute_noise * w
    return replace(scores, noise=clamp_score(blended))


def apply_ambience_boost(
    scores: RawVibeScores, attributes: VenueAttributes, config: VibeConfig
) -> RawVibeScores:
    if attributes.ambience is None:
        return scores
    flags = attributes.ambience.model_dump()
    boost = sum(
        amount
        for flag, amount in config.ambience_boosts.items()
        if flags[flag]
    )
    return replace(scores, cozy=clamp_score(scores.cozy + boost))


def apply_wifi_boost(
    scores: RawVibeScores, attributes: VenueAttributes, config: VibeConfig
) -> RawVibeScores:
    boost = config.wifi_focus_boosts.get(attributes.wifi or "")
    if not boost:
        return scores
    return replace(scores, focus=clamp_score(scores.focus + boost))


def apply_noise_focus_adjustment(
    scores: RawVibeScores, attributes: VenueAttributes, config: VibeConfig
) -> RawVibeScores:
    if attributes.noise_level == "quiet":
        return replace(scores, focus=clamp_score(scores.focus + config.quiet_focus_boost))
    if attributes.noise_level in ("loud", "very_loud"):
        return replace(scores, focus=clamp_score(scores.focus - config.loud_focus_penalty))
    return scores


def apply_tv_penalty(
    scores: RawVibeScores, attributes: VenueAttributes, config: VibeConfig
) -> RawVibeScores:
    if not attributes.has_tv:
        return scores
    return replace(scores, focus=clamp_score(scores.focus - config.tv_focus_penalty))


# Noise first, then cozy, then focus.
BLEND_STEPS: tuple[BlendStep, ...] = (
    blend_noise_level,
    apply_ambience_boost,
    apply_wifi_boost,
    apply_noise_focus_adjustment,
    apply_tv_penalty,
)


def blend_attributes(
    scores: RawVibeScores,
    attributes: VenueAttributes | None,
    config: VibeConfig = DEFAULT_VIBE_CONFIG,
) -> RawVibeScores:
    if attributes is None:
        return scores
    for step in BLEND_STEPS:
        scores = step(scores, attributes, config)
    return scores


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def calculate_vibe_scores(
    venue: Venue,
    config: VibeConfig = DEFAULT_VIBE_CONFIG,
) -> DimensionScore:
    """Compute the 0-100 noise / cozy / focus scores for a venue."""
    baseline = text_scores(combine_venue_text(venue), config)
    blended = blend_attributes(baseline, venue.attributes, config)

    result = DimensionScore(
        noise=round_score(blended.noise),
        cozy=round_score(blended.cozy),
        focus=round_score(blended.focus),
    )
    logger.debug(
        "Vibe scores for %s: text=%s blended=%s", venue.id, baseline, result
    )
    return result


def venue_quote(venue: Venue) -> str:
    """Pick the text shown alongside a venue: review snippet, then summaries."""
    info = venue.contextual_info
    if info and info.review_snippet:
        return _HIGHLIGHT_RE.sub("", info.review_snippet)
    if venue.summaries:
        if venue.summaries.short:
            return venue.summaries.short
        if venue.summaries.medium:
            return venue.summaries.medium
    return FALLBACK_QUOTE
