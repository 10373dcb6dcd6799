"""Observation aggregator: second pass over the EBD observation export.

Joins each observation to a checklist accepted by the loader and tallies
species per hotspot/season and per region/season.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from birding_guide.datasources.ebird import export
from birding_guide.reference.filters import SLASH_MARKER, SPUH_MARKER

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from birding_guide.datasources.ebird.models import AggregationState

PROGRESS_EVERY = 50_000


def is_countable_species(common_name: str) -> bool:
    """False for blanks, spuhs ("Empidonax sp.") and slashes ("Greater/Lesser Scaup")."""
    return bool(common_name) and SPUH_MARKER not in common_name and SLASH_MARKER not in common_name


def aggregate_observation_rows(
    rows: Iterable[dict[str, str]],
    state: AggregationState,
) -> AggregationState:
    """
    Tally species occurrences from observation rows.

    A species is counted at most once per checklist, even when the export
    lists it on several rows (e.g. separate subspecies or age/sex entries).

    Args:
        rows: Observation rows keyed by column name (see ``export.OBSERVATION_COLUMNS``).
        state: State returned by the checklist loader; mutated in place.

    Returns:
        The same state, with species tallies filled in and the checklist
        lookup released.
    """
    seen: set[tuple[str, str]] = set()
    region = state.region
    skipped = state.skipped

    for row in rows:
        sid = row[export.SAMPLING_EVENT_IDENTIFIER]
        checklist = state.checklists.get(sid)
        if checklist is None:
            skipped["orphan"] += 1
            continue

        species = row[export.COMMON_NAME]
        if not is_countable_species(species):
            skipped["not_species"] += 1
            continue

        key = (sid, species)
        if key in seen:
            skipped["duplicate_species"] += 1
            continue
        seen.add(key)

        hotspot = state.hotspots[checklist.locality_id]
        season = checklist.season

        hotspot.all_time_species.add(species)
        region.all_time_species.add(species)

        season_counts = region.species_counts[season]
        season_counts[species] = season_counts.get(species, 0) + 1
        region.observation_count += 1

        tally = hotspot.tally(season, species)
        tally.count += 1
        tally.years.add(checklist.year)

        if region.observation_count % PROGRESS_EVERY == 0:
            print(f"Processed {region.observation_count:,} observations...")

    # Checklists are only needed to route observation rows
    state.checklists.clear()
    return state


def aggregate_observations(path: Path, state: AggregationState) -> AggregationState:
    """
    Run the observation pass over an observation export file.

    Args:
        path: EBD observation export.
        state: State returned by ``load_checklists``.

    Raises:
        MissingExportError: The file does not exist.
        ExportFormatError: The header lacks a required column.
    """
    rows = export.read_export(path, export.OBSERVATION_COLUMNS)
    return aggregate_observation_rows(rows, state)
