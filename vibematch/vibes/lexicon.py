from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Lexicon:
    """Phrase buckets for one vibe dimension.

    ``leans_high`` pushes the score towards 100, ``leans_low`` towards 0 and
    ``moderate`` pulls it back towards the neutral 50.
    """

    leans_high: tuple[str, ...] = ()
    leans_low: tuple[str, ...] = ()
    moderate: tuple[str, ...] = ()


@dataclass(frozen=True)
class VibeLexicons:
    noise: Lexicon
    cozy: Lexicon
    focus: Lexicon


NOISE_LEXICON = Lexicon(
    leans_high=(
        "lively", "vibrant", "bustling", "energetic", "loud", "noisy", "crowded",
        "busy", "happening", "upbeat", "buzzing", "packed", "hopping",
    ),
    leans_low=(
        "quiet", "peaceful", "calm", "serene", "tranquil", "silent", "relaxed",
        "chill", "mellow", "soft music",
    ),
    moderate=("moderate", "ambient", "background music", "comfortable noise"),
)

COZY_LEXICON = Lexicon(
    leans_high=(
        "cozy", "warm", "intimate", "comfortable", "homey", "welcoming",
        "charming", "snug", "inviting", "rustic", "quaint", "cute", "adorable",
        "lovely ambiance", "fireplace",
    ),
    leans_low=(
        "sterile", "cold", "industrial", "minimalist", "modern", "sleek",
        "clinical", "bare", "sparse",
    ),
    moderate=("nice", "pleasant", "decent", "comfortable"),
)

FOCUS_LEXICON = Lexicon(
    leans_high=(
        "work", "working", "laptop", "laptops", "wifi", "wi-fi", "study",
        "studying", "productive", "focus", "remote work", "freelancer",
        "outlet", "outlets", "power outlets", "workspace", "meetings",
        "quiet corner", "good for work",
    ),
    leans_low=(
        "social", "hangout", "party", "date night", "groups", "loud music",
        "bar scene", "nightlife", "dancing",
    ),
    moderate=("tables", "seating", "spacious"),
)

DEFAULT_LEXICONS = VibeLexicons(
    noise=NOISE_LEXICON,
    cozy=COZY_LEXICON,
    focus=FOCUS_LEXICON,
)
