"""
Domain models for the birding guide.

Pydantic models for the JSON files the site consumes. Field names are
snake_case in Python and camelCase on the wire (``hotspotId``, ``obsCount``),
matching what the frontend imports.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# =============================================================================
# Seasons
# =============================================================================


class Season(StrEnum):
    """Meteorological seasons, in output order."""

    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"

    @classmethod
    def from_month(cls, month: int) -> Season:
        """Map a calendar month (1-12) to its season.

        Dec/Jan/Feb are winter, so a winter season spans two calendar years.
        """
        if not 1 <= month <= 12:
            msg = f"Month out of range: {month}"
            raise ValueError(msg)
        if 3 <= month <= 5:
            return cls.SPRING
        if 6 <= month <= 8:
            return cls.SUMMER
        if 9 <= month <= 11:
            return cls.FALL
        return cls.WINTER


class _CamelModel(BaseModel):
    """Base for models serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Seasonal hotspot report
# =============================================================================


class NotableSpecies(_CamelModel):
    """A species seen consistently and disproportionately often at a hotspot."""

    name: str
    score: float = Field(..., description="Local/region frequency ratio, capped")
    frequency: float = Field(..., ge=0, le=1, description="Fraction of hotspot checklists")
    region_frequency: float = Field(..., ge=0, le=1, description="Fraction of region checklists")
    obs_count: int
    years_present: int
    years_total: int


class RareSpecies(_CamelModel):
    """A species rarely recorded anywhere in the region."""

    name: str
    obs_count: int
    last_seen_year: int
    frequency: float = Field(..., ge=0, le=1, description="Fraction of hotspot checklists")


class SeasonalHotspot(_CamelModel):
    """One hotspot's entry in a season's ranking."""

    hotspot_id: str
    hotspot_name: str
    latitude: float = 0.0
    longitude: float = 0.0
    seasonal_species_count: int = Field(..., description="Number of notable species")
    notable_species: list[NotableSpecies] = Field(default_factory=list)
    rare_species: list[RareSpecies] = Field(default_factory=list)


# =============================================================================
# Hotspot index and region stats
# =============================================================================


class HotspotSummary(_CamelModel):
    """All-time summary of a hotspot for the hotspot list."""

    id: str
    name: str
    latitude: float = 0.0
    longitude: float = 0.0
    species_count: int


class RegionStats(_CamelModel):
    """Region-wide totals."""

    total_species: int
    total_observations: int
