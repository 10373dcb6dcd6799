"""Rank hotspots by their notable and rare species, per season.

A species is *notable* at a hotspot when it turns up there consistently
(several years) and clearly more often than across the region. A species is
*rare* when it's seen on under 1% of region checklists, whatever its pattern
at the hotspot. The two lists never overlap.

Scores are kept at full precision until the output models are built, so the
ranking sort never sees rounded values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from birding_guide.reference.scoring import (
    MAX_SPECIES_SCORE,
    MIN_COMPLETE_CHECKLISTS,
    MIN_YEARS_PRESENT_ABSOLUTE,
    MIN_YEARS_PRESENT_RATIO,
    NOTABLE_SCORE_THRESHOLD,
    RARITY_REGION_FREQ_THRESHOLD,
    TOP_HOTSPOTS_PER_SEASON,
    TOP_SPECIES_PER_LIST,
)
from birding_guide.schemas import NotableSpecies, RareSpecies, Season, SeasonalHotspot

if TYPE_CHECKING:
    from birding_guide.datasources.ebird.models import (
        AggregationState,
        Hotspot,
        Region,
        SpeciesTally,
    )


@dataclass
class _Notable:
    name: str
    score: float
    frequency: float
    region_frequency: float
    obs_count: int
    years_present: int
    years_total: int


@dataclass
class _Rare:
    name: str
    obs_count: int
    last_seen_year: int
    frequency: float


@dataclass
class RankedHotspot:
    """A hotspot-season result with its (unexported) rank score."""

    rank_score: float
    record: SeasonalHotspot


def notable_score(
    tally: SpeciesTally,
    *,
    local_frequency: float,
    region_frequency: float,
    years_total: int,
) -> float | None:
    """
    Return the capped notability score, or None if the species isn't notable.

    The absolute (>= 2 years) and relative (>= 30% of years) consistency
    checks are independent: with 2 years on record the ratio is trivially
    met by one year, and only the absolute floor rules out a one-year wonder.
    """
    years_present = tally.years_present
    if years_present < MIN_YEARS_PRESENT_ABSOLUTE:
        return None
    if years_present / years_total < MIN_YEARS_PRESENT_RATIO:
        return None
    if region_frequency <= 0:
        return None

    score = local_frequency / region_frequency
    if score <= NOTABLE_SCORE_THRESHOLD:
        return None
    return min(score, MAX_SPECIES_SCORE)


def _is_rare(region: Region, season: Season, region_frequency: float) -> bool:
    # Without region checklists there is no frequency to compare against
    if region.checklists[season] == 0:
        return False
    return region_frequency < RARITY_REGION_FREQ_THRESHOLD


def score_hotspot_season(
    hotspot: Hotspot,
    season: Season,
    region: Region,
) -> RankedHotspot | None:
    """
    Score one hotspot in one season.

    Returns None when the hotspot has too few checklists or no year coverage
    for the season, or when it has neither notable nor rare species.
    """
    total_checklists = hotspot.checklists[season]
    if total_checklists < MIN_COMPLETE_CHECKLISTS:
        return None

    years_total = len(hotspot.years_with_data[season])
    if years_total == 0:
        return None

    species_tallies = hotspot.species[season]
    notable: list[_Notable] = []
    rare: list[_Rare] = []

    for name, tally in species_tallies.items():
        region_freq = region.frequency(season, name)
        local_freq = tally.count / total_checklists

        score = notable_score(
            tally,
            local_frequency=local_freq,
            region_frequency=region_freq,
            years_total=years_total,
        )
        if score is not None:
            notable.append(
                _Notable(
                    name=name,
                    score=score,
                    frequency=local_freq,
                    region_frequency=region_freq,
                    obs_count=tally.count,
                    years_present=tally.years_present,
                    years_total=years_total,
                )
            )
        elif _is_rare(region, season, region_freq):
            rare.append(
                _Rare(
                    name=name,
                    obs_count=tally.count,
                    last_seen_year=tally.last_seen_year,
                    frequency=local_freq,
                )
            )

    if not notable and not rare:
        return None

    notable.sort(key=lambda s: s.score, reverse=True)
    rare.sort(key=lambda s: s.obs_count, reverse=True)

    # Sum of notable scores, scaled by sqrt of the season's species richness
    richness = len(species_tallies)
    rank_score = sum(s.score for s in notable) * math.sqrt(richness or 1)

    record = SeasonalHotspot(
        hotspot_id=hotspot.locality_id,
        hotspot_name=hotspot.name,
        latitude=hotspot.latitude if hotspot.has_coordinates else 0.0,
        longitude=hotspot.longitude if hotspot.has_coordinates else 0.0,
        seasonal_species_count=len(notable),
        notable_species=[
            NotableSpecies(
                name=s.name,
                score=round(s.score, 2),
                frequency=round(s.frequency, 3),
                region_frequency=round(s.region_frequency, 3),
                obs_count=s.obs_count,
                years_present=s.years_present,
                years_total=s.years_total,
            )
            for s in notable[:TOP_SPECIES_PER_LIST]
        ],
        rare_species=[
            RareSpecies(
                name=s.name,
                obs_count=s.obs_count,
                last_seen_year=s.last_seen_year,
                frequency=round(s.frequency, 4),
            )
            for s in rare[:TOP_SPECIES_PER_LIST]
        ],
    )
    return RankedHotspot(rank_score=rank_score, record=record)


def rank_hotspots(state: AggregationState) -> dict[Season, list[RankedHotspot]]:
    """Score every hotspot-season and rank each season, keeping the rank scores."""
    ranked: dict[Season, list[RankedHotspot]] = {season: [] for season in Season}

    for hotspot in state.hotspots.values():
        for season in Season:
            result = score_hotspot_season(hotspot, season, state.region)
            if result is not None:
                ranked[season].append(result)

    for season in Season:
        ranked[season].sort(key=lambda r: r.rank_score, reverse=True)
        ranked[season] = ranked[season][:TOP_HOTSPOTS_PER_SEASON]

    return ranked


def score_hotspots(state: AggregationState) -> dict[Season, list[SeasonalHotspot]]:
    """
    Build the seasonal hotspot rankings.

    Args:
        state: Aggregated checklist and observation state.

    Returns:
        Dict mapping each season to at most ``TOP_HOTSPOTS_PER_SEASON``
        hotspot records, best first.
    """
    return {
        season: [r.record for r in results] for season, results in rank_hotspots(state).items()
    }
