"""All-time hotspot index and region totals."""

from __future__ import annotations

from typing import TYPE_CHECKING

from birding_guide.reference.scoring import MIN_INDEX_SPECIES
from birding_guide.schemas import HotspotSummary, RegionStats

if TYPE_CHECKING:
    from birding_guide.datasources.ebird.models import AggregationState


def build_hotspot_index(
    state: AggregationState,
    min_species: int = MIN_INDEX_SPECIES,
) -> list[HotspotSummary]:
    """List hotspots with more than ``min_species`` all-time species, richest first."""
    summaries = [
        HotspotSummary(
            id=hotspot.locality_id,
            name=hotspot.name,
            latitude=hotspot.latitude if hotspot.has_coordinates else 0.0,
            longitude=hotspot.longitude if hotspot.has_coordinates else 0.0,
            species_count=len(hotspot.all_time_species),
        )
        for hotspot in state.hotspots.values()
        if len(hotspot.all_time_species) > min_species
    ]
    summaries.sort(key=lambda h: h.species_count, reverse=True)
    return summaries


def build_region_stats(state: AggregationState) -> RegionStats:
    """Region-wide species and observation totals."""
    return RegionStats(
        total_species=len(state.region.all_time_species),
        total_observations=state.region.observation_count,
    )
