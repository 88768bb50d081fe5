from __future__ import annotations

from dataclasses import dataclass, field

from .lexicon import DEFAULT_LEXICONS, VibeLexicons
from .models import AmbienceFlags


def _default_noise_level_values() -> dict[str, float]:
    return {"quiet": 20.0, "average": 50.0, "loud": 75.0, "very_loud": 95.0}


def _default_ambience_boosts() -> dict[str, float]:
    return {"cozy": 25.0, "intimate": 20.0, "romantic": 15.0, "casual": 10.0}


def _default_wifi_focus_boosts() -> dict[str, float]:
    return {"free": 25.0, "paid": 15.0}


@dataclass(frozen=True)
class VibeConfig:
    """Tunable tables for text analysis and attribute blending."""

    lexicons: VibeLexicons = DEFAULT_LEXICONS
    baseline: float = 50.0
    keyword_step: float = 15.0
    moderate_pull: float = 0.1

    noise_level_values: dict[str, float] = field(default_factory=_default_noise_level_values)
    # Share of the blended noise score taken from the NoiseLevel attribute
    attribute_noise_weight: float = 0.6

    ambience_boosts: dict[str, float] = field(default_factory=_default_ambience_boosts)
    wifi_focus_boosts: dict[str, float] = field(default_factory=_default_wifi_focus_boosts)
    quiet_focus_boost: float = 15.0
    loud_focus_penalty: float = 20.0
    tv_focus_penalty: float = 10.0

    def __post_init__(self) -> None:
        unknown = set(self.ambience_boosts) - set(AmbienceFlags.model_fields)
        if unknown:
            raise ValueError(f"Unknown ambience flags in ambience_boosts: {sorted(unknown)}")


DEFAULT_VIBE_CONFIG = VibeConfig()
