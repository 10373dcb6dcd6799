"""
Prefect flow for building the birding guide data from eBird exports.

Two full passes over the EBD download (checklists, then observations)
followed by an in-memory reduction into the JSON files the site imports.

Run locally:
    python -m birding_guide.flows.build
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

from prefect import flow, task
from prefect.utilities.annotations import quote

from birding_guide.analysis import (
    build_hotspot_index,
    build_region_stats,
    hotspot_index_to_list,
    region_stats_to_dict,
    score_hotspots,
    seasonal_hotspots_to_dict,
)
from birding_guide.config import get_settings
from birding_guide.datasources import ebird
from birding_guide.datasources.ebird import AggregationState, MissingExportError
from birding_guide.schemas import HotspotSummary, RegionStats, Season, SeasonalHotspot
from birding_guide.store import DataStore

# Data store with tiered directories
store = DataStore(Path("data"))

# Relative paths within the store
SEASONAL_HOTSPOTS_PATH = Path("derived/seasonal_hotspots.json")
HOTSPOTS_PATH = Path("derived/hotspots.json")
STATS_PATH = Path("derived/stats.json")

EBD_SOURCE = "ebird.org (EBD)"


def _report_skips(state: AggregationState, reasons: tuple[str, ...]) -> None:
    counts = ", ".join(f"{reason}={state.skipped[reason]:,}" for reason in reasons)
    print(f"Skipped rows: {counts}")


# =============================================================================
# Pipeline tasks
# =============================================================================


@task(name="check-exports")
def check_exports(sampling_path: Path, observation_path: Path) -> None:
    """Fail before any pass runs if either export is missing."""
    for path in (sampling_path, observation_path):
        if not path.exists():
            msg = f"EBD export not found: {path}"
            raise MissingExportError(msg)


@task(name="load-sampling")
def load_sampling(sampling_path: Path, current_year: int) -> AggregationState:
    """Pass 1: load complete hotspot checklists from the sampling export."""
    print(f"Processing sampling file: {sampling_path}")
    state = ebird.load_checklists(sampling_path, current_year=current_year)
    print(
        f"Total valid checklists: {len(state.checklists):,} "
        f"at {len(state.hotspots):,} hotspots"
    )
    _report_skips(
        state, ("incomplete", "stale", "not_hotspot", "restricted", "duplicate_checklist")
    )
    return state


@task(name="aggregate-observations")
def aggregate_observations(observation_path: Path, state: AggregationState) -> AggregationState:
    """Pass 2: tally species from the observation export."""
    print(f"Processing observation file: {observation_path}")
    state = ebird.aggregate_observations(observation_path, state)
    print(
        f"Observations processed: {state.region.observation_count:,} "
        f"({len(state.region.all_time_species):,} species)"
    )
    _report_skips(state, ("orphan", "not_species", "duplicate_species"))
    return state


@task(name="score-seasons")
def score_seasons(state: AggregationState) -> dict[Season, list[SeasonalHotspot]]:
    """Rank hotspots by notable species for each season."""
    print("Calculating notable species scores...")
    seasonal = score_hotspots(state)
    for season, hotspots in seasonal.items():
        print(f"  {season.value}: {len(hotspots)} hotspots")
    return seasonal


@task(name="index-hotspots")
def index_hotspots(state: AggregationState) -> tuple[list[HotspotSummary], RegionStats]:
    """Build the all-time hotspot list and region totals."""
    return build_hotspot_index(state), build_region_stats(state)


@task(name="save-outputs")
def save_outputs(
    seasonal: dict[Season, list[SeasonalHotspot]],
    index: list[HotspotSummary],
    stats: RegionStats,
    meta: dict[str, Any],
) -> dict[str, Path]:
    """Publish the three site data files via store, tagging each with ``meta``."""
    return {
        "seasonal_hotspots": store.publish(
            SEASONAL_HOTSPOTS_PATH, seasonal_hotspots_to_dict(seasonal), EBD_SOURCE, **meta
        ),
        "hotspots": store.publish(
            HOTSPOTS_PATH, hotspot_index_to_list(index), EBD_SOURCE, **meta
        ),
        "stats": store.publish(STATS_PATH, region_stats_to_dict(stats), EBD_SOURCE, **meta),
    }


# =============================================================================
# Flow
# =============================================================================


@flow(name="build-birding-guide", log_prints=True)
def build_all(
    sampling_path: Path | None = None,
    observation_path: Path | None = None,
    current_year: int | None = None,
) -> dict[str, Any]:
    """
    Build seasonal hotspot rankings, hotspot index and region stats.

    Args:
        sampling_path: EBD sampling export. Defaults to settings.
        observation_path: EBD observation export. Defaults to settings.
        current_year: Reference year for the recency window. Defaults to
            the current calendar year.

    Raises:
        MissingExportError: Either export is missing; nothing is written.
        ExportFormatError: An export header lacks a required column.
    """
    settings = get_settings()
    sampling_path = sampling_path or settings.sampling_path
    observation_path = observation_path or settings.observation_path
    if current_year is None:
        current_year = datetime.now().year

    check_exports(sampling_path, observation_path)

    state = load_sampling(sampling_path, current_year)
    checklist_count = len(state.checklists)
    # quote() keeps Prefect from walking the (large) state when resolving inputs
    state = aggregate_observations(observation_path, quote(state))

    seasonal = score_seasons(quote(state))
    index, stats = index_hotspots(quote(state))

    print("Writing outputs...")
    outputs = save_outputs(
        seasonal,
        index,
        stats,
        {
            "region": settings.region_code,
            "sampling_file": sampling_path.name,
            "observation_file": observation_path.name,
            "current_year": current_year,
        },
    )
    for name, path in outputs.items():
        print(f"Wrote {name}: {path}")

    return {
        "checklists": checklist_count,
        "hotspots": len(state.hotspots),
        "species": stats.total_species,
        "observations": stats.total_observations,
        "seasons": {season.value: len(seasonal[season]) for season in Season},
        "outputs": {name: str(path) for name, path in outputs.items()},
    }


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
