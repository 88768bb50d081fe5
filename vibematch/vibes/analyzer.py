from __future__ import annotations

import math

from .lexicon import Lexicon

SCORE_MIN = 0.0
SCORE_MAX = 100.0


def clamp_score(value: float) -> float:
    return max(SCORE_MIN, min(SCORE_MAX, value))


def round_score(value: float) -> int:
    """Round half away from zero (scores are never negative)."""
    return int(math.floor(value + 0.5))


def analyze_text(
    text: str,
    lexicon: Lexicon,
    baseline: float = 50.0,
    step: float = 15.0,
    moderate_pull: float = 0.1,
) -> float:
    """
    Score *text* on one vibe dimension using literal phrase containment.

    Starts at *baseline*; every ``leans_high`` phrase found adds *step*, every
    ``leans_low`` phrase subtracts it, and every ``moderate`` phrase moves the
    running score *moderate_pull* of the way back to *baseline*.  Each list
    entry counts at most once, however often it appears in the text.
    """
    lower_text = (text or "").lower()
    score = baseline

    for phrase in lexicon.leans_high:
        if phrase in lower_text:
            score += step

    for phrase in lexicon.leans_low:
        if phrase in lower_text:
            score -= step

    for phrase in lexicon.moderate:
        if phrase in lower_text:
            score += (baseline - score) * moderate_pull

    return clamp_score(score)
