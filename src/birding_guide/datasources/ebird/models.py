"""Aggregation state built from EBD exports.

The loader creates an ``AggregationState``, the aggregator fills in species
tallies, and the scorer reads it. Nothing here does I/O.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from birding_guide.schemas import Season


def _per_season_counts() -> dict[Season, int]:
    return dict.fromkeys(Season, 0)


def _per_season_years() -> dict[Season, set[int]]:
    return {season: set() for season in Season}


@dataclass(frozen=True)
class Checklist:
    """A complete checklist that passed every loader filter."""

    sampling_event_id: str
    locality_id: str
    season: Season
    year: int


@dataclass
class SpeciesTally:
    """Occurrences of one species at one hotspot in one season."""

    count: int = 0
    years: set[int] = field(default_factory=set)

    @property
    def years_present(self) -> int:
        return len(self.years)

    @property
    def last_seen_year(self) -> int:
        return max(self.years) if self.years else 0


@dataclass
class Hotspot:
    """A public eBird hotspot and its per-season aggregates."""

    locality_id: str
    name: str
    latitude: float | None = None
    longitude: float | None = None
    checklists: dict[Season, int] = field(default_factory=_per_season_counts)
    years_with_data: dict[Season, set[int]] = field(default_factory=_per_season_years)
    species: dict[Season, dict[str, SpeciesTally]] = field(
        default_factory=lambda: {season: {} for season in Season}
    )
    all_time_species: set[str] = field(default_factory=set)

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def tally(self, season: Season, species: str) -> SpeciesTally:
        """Return the tally for a species in a season, creating it if needed."""
        return self.species[season].setdefault(species, SpeciesTally())


@dataclass
class Region:
    """Region-wide (all hotspots) aggregates."""

    checklists: dict[Season, int] = field(default_factory=_per_season_counts)
    species_counts: dict[Season, dict[str, int]] = field(
        default_factory=lambda: {season: {} for season in Season}
    )
    all_time_species: set[str] = field(default_factory=set)
    observation_count: int = 0

    def frequency(self, season: Season, species: str) -> float:
        """Fraction of the season's region checklists reporting the species.

        Returns 0.0 for species never counted or seasons without checklists.
        """
        total = self.checklists[season]
        if total == 0:
            return 0.0
        return self.species_counts[season].get(species, 0) / total


@dataclass
class AggregationState:
    """Everything the pipeline stages pass between each other."""

    region: Region = field(default_factory=Region)
    hotspots: dict[str, Hotspot] = field(default_factory=dict)
    checklists: dict[str, Checklist] = field(default_factory=dict)
    skipped: Counter[str] = field(default_factory=Counter)
