from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

NoiseLevel = Literal["quiet", "average", "loud", "very_loud"]
WifiAvailability = Literal["free", "paid", "none"]
MatchTier = Literal["excellent", "good", "fair", "weak", "poor"]

_NOISE_LEVELS = {"quiet", "average", "loud", "very_loud"}
_WIFI_ALIASES = {"free": "free", "paid": "paid", "none": "none", "no": "none"}


# ── Venue record ─────────────────────────────────────────────────────────


class AmbienceFlags(BaseModel):
    model_config = ConfigDict(extra="ignore")

    cozy: bool | None = None
    casual: bool | None = None
    trendy: bool | None = None
    intimate: bool | None = None
    romantic: bool | None = None


class VenueAttributes(BaseModel):
    """Structured attributes; every field may be missing."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    noise_level: NoiseLevel | None = Field(default=None, alias="NoiseLevel")
    wifi: WifiAvailability | None = Field(default=None, alias="WiFi")
    ambience: AmbienceFlags | None = Field(default=None, alias="Ambience")
    has_tv: bool | None = Field(default=None, alias="HasTV")

    @field_validator("noise_level", mode="before")
    @classmethod
    def _unknown_noise_level_is_absent(cls, value: Any) -> str | None:
        if not isinstance(value, str):
            return None
        lowered = value.strip().lower()
        return lowered if lowered in _NOISE_LEVELS else None

    @field_validator("wifi", mode="before")
    @classmethod
    def _unknown_wifi_is_absent(cls, value: Any) -> str | None:
        if not isinstance(value, str):
            return None
        return _WIFI_ALIASES.get(value.strip().lower())

    @field_validator("ambience", mode="before")
    @classmethod
    def _non_mapping_ambience_is_absent(cls, value: Any) -> Any:
        if isinstance(value, (dict, AmbienceFlags)):
            return value
        return None


class VenueSummaries(BaseModel):
    model_config = ConfigDict(extra="ignore")

    short: str | None = None
    medium: str | None = None
    long: str | None = None


class VenuePhoto(BaseModel):
    model_config = ConfigDict(extra="ignore")

    original_url: str | None = None


class ContextualInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    summary: str | None = None
    review_snippet: str | None = None
    photos: list[VenuePhoto] = Field(default_factory=list)

    @field_validator("photos", mode="before")
    @classmethod
    def _null_photos_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Category(BaseModel):
    alias: str = ""
    title: str = ""


class Coordinates(BaseModel):
    latitude: float | None = None
    longitude: float | None = None


class Venue(BaseModel):
    """A business record as returned by the search service.

    Unknown keys are kept so they round-trip back to the caller.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    url: str | None = None
    image_url: str | None = None
    rating: float | None = None
    review_count: int | None = None
    price: str | None = None
    categories: list[Category] = Field(default_factory=list)
    coordinates: Coordinates | None = None
    location: dict[str, Any] | None = None
    summaries: VenueSummaries | None = None
    contextual_info: ContextualInfo | None = None
    attributes: VenueAttributes | None = None

    @field_validator("categories", mode="before")
    @classmethod
    def _null_categories_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


# ── Scores & preferences ─────────────────────────────────────────────────


class DimensionScore(BaseModel):
    noise: int = Field(..., ge=0, le=100, description="0 = silent, 100 = very loud")
    cozy: int = Field(..., ge=0, le=100, description="0 = sterile, 100 = very warm")
    focus: int = Field(..., ge=0, le=100, description="0 = social, 100 = work-friendly")


class UserPreferences(BaseModel):
    noise_level: int = Field(default=50, ge=0, le=100)
    cozy_factor: int = Field(default=50, ge=0, le=100)
    focus_level: int = Field(default=50, ge=0, le=100)


class MatchBreakdown(BaseModel):
    noise: int = Field(..., ge=0, le=100)
    cozy: int = Field(..., ge=0, le=100)
    focus: int = Field(..., ge=0, le=100)


class MatchResult(BaseModel):
    overall: int = Field(..., ge=0, le=100)
    breakdown: MatchBreakdown


class VibeLevels(BaseModel):
    noise: int = Field(..., ge=0, le=5)
    cozy: int = Field(..., ge=0, le=5)
    focus: int = Field(..., ge=0, le=5)


class ScoredVenue(BaseModel):
    venue: Venue
    vibe_scores: DimensionScore
    vibe_match: MatchResult
    vibe_levels: VibeLevels
    match_tier: MatchTier
    quote: str
