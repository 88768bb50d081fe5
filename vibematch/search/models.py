from __future__ import annotations

from pydantic import BaseModel, Field

from ..vibes.models import ScoredVenue, UserPreferences


class VibeSearchRequest(BaseModel):
    query: str = Field(default="", max_length=500, description="Free-text search term")
    location: str | None = Field(default=None, description="City, neighborhood or address")
    noise_level: int = Field(default=50, ge=0, le=100, description="0 = quiet, 100 = lively")
    cozy_factor: int = Field(default=50, ge=0, le=100, description="0 = minimal, 100 = very cozy")
    focus_level: int = Field(default=50, ge=0, le=100, description="0 = casual, 100 = work-friendly")
    chat_id: str | None = None
    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, ge=-180.0, le=180.0)

    def preferences(self) -> UserPreferences:
        return UserPreferences(
            noise_level=self.noise_level,
            cozy_factor=self.cozy_factor,
            focus_level=self.focus_level,
        )


class AIResponseSummary(BaseModel):
    text: str = ""
    chat_id: str | None = None


class VibeSearchResponse(BaseModel):
    businesses: list[ScoredVenue]
    total: int
    ai_response: AIResponseSummary
    query: str


class ScoreRequest(BaseModel):
    businesses: list[dict] = Field(default_factory=list, max_length=100)
    preferences: UserPreferences = Field(default_factory=UserPreferences)


class ScoreResponse(BaseModel):
    businesses: list[ScoredVenue]
    skipped: int = 0


class QueryRequest(BaseModel):
    term: str = ""
    location: str | None = None
    preferences: UserPreferences = Field(default_factory=UserPreferences)
