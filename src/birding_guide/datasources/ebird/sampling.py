"""Checklist loader: first pass over the EBD sampling export.

Keeps only complete checklists at public, accessible hotspots from the last
``RECENT_YEARS`` years, and builds the per-hotspot/per-season checklist
counts and year coverage the scorer uses as denominators.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from birding_guide.datasources.ebird import export
from birding_guide.datasources.ebird.models import AggregationState, Checklist, Hotspot
from birding_guide.reference.filters import (
    COMPLETE_CHECKLIST_FLAG,
    HOTSPOT_LOCALITY_TYPE,
    RESTRICTED_ACCESS_TERMS,
)
from birding_guide.reference.scoring import RECENT_YEARS

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

PROGRESS_EVERY = 50_000


def is_restricted(locality_name: str) -> bool:
    """True if the locality name marks the site as off-limits."""
    lowered = locality_name.lower()
    return any(term in lowered for term in RESTRICTED_ACCESS_TERMS)


def _register_hotspot(row: dict[str, str]) -> Hotspot:
    return Hotspot(
        locality_id=row[export.LOCALITY_ID],
        name=row[export.LOCALITY],
        latitude=export.parse_coordinate(row[export.LATITUDE]),
        longitude=export.parse_coordinate(row[export.LONGITUDE]),
    )


def load_checklist_rows(
    rows: Iterable[dict[str, str]],
    *,
    current_year: int,
    state: AggregationState | None = None,
) -> AggregationState:
    """
    Accumulate checklist totals from sampling rows.

    Args:
        rows: Sampling rows keyed by column name (see ``export.SAMPLING_COLUMNS``).
        current_year: Reference year for the recency window.
        state: State to add to; a fresh one is created by default.

    Returns:
        The state, with ``checklists``, hotspot counters and region
        checklist totals filled in.
    """
    state = state or AggregationState()
    min_year = current_year - RECENT_YEARS
    skipped = state.skipped

    for row in rows:
        if row[export.ALL_SPECIES_REPORTED] != COMPLETE_CHECKLIST_FLAG:
            skipped["incomplete"] += 1
            continue

        year, season = export.parse_observation_date(row[export.OBSERVATION_DATE])
        if season is None or year < min_year:
            skipped["stale"] += 1
            continue

        if row[export.LOCALITY_TYPE] != HOTSPOT_LOCALITY_TYPE:
            skipped["not_hotspot"] += 1
            continue

        if is_restricted(row[export.LOCALITY]):
            skipped["restricted"] += 1
            continue

        sid = row[export.SAMPLING_EVENT_IDENTIFIER]
        if sid in state.checklists:
            skipped["duplicate_checklist"] += 1
            continue

        loc_id = row[export.LOCALITY_ID]
        hotspot = state.hotspots.get(loc_id)
        if hotspot is None:
            hotspot = _register_hotspot(row)
            state.hotspots[loc_id] = hotspot

        state.checklists[sid] = Checklist(
            sampling_event_id=sid, locality_id=loc_id, season=season, year=year
        )
        state.region.checklists[season] += 1
        hotspot.checklists[season] += 1
        hotspot.years_with_data[season].add(year)

        if len(state.checklists) % PROGRESS_EVERY == 0:
            print(f"Loaded {len(state.checklists):,} valid checklists...")

    return state


def load_checklists(path: Path, *, current_year: int | None = None) -> AggregationState:
    """
    Run the checklist pass over a sampling export file.

    Args:
        path: EBD sampling export (``*_sampling.txt``).
        current_year: Reference year for the recency window. Defaults to the
            current calendar year.

    Raises:
        MissingExportError: The file does not exist.
        ExportFormatError: The header lacks a required column.
    """
    if current_year is None:
        current_year = datetime.now().year
    rows = export.read_export(path, export.SAMPLING_COLUMNS)
    return load_checklist_rows(rows, current_year=current_year)
