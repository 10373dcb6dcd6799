"""Tests for the observation aggregator (observation pass)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from birding_guide.datasources.ebird import (
    AggregationState,
    MissingExportError,
    aggregate_observation_rows,
    aggregate_observations,
    load_checklist_rows,
)
from birding_guide.datasources.ebird.observations import is_countable_species
from birding_guide.schemas import Season
from tests.factories import observation_row, sampling_row

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def _loaded_state() -> AggregationState:
    """Two hotspots: L1 with winter checklists in 2023 and 2024, L2 with one in 2024."""
    return load_checklist_rows(
        [
            sampling_row("S1", observation_date="2023-01-10"),
            sampling_row("S2", observation_date="2024-01-10"),
            sampling_row("S3", observation_date="2024-02-10", locality_id="L2", locality="Ijams"),
        ],
        current_year=2026,
    )


class TestIsCountableSpecies:
    """Test the species-level filter."""

    @pytest.mark.parametrize("name", ["Cedar Waxwing", "Black-throated Green Warbler"])
    def test_species_accepted(self, name: str) -> None:
        assert is_countable_species(name) is True

    @pytest.mark.parametrize(
        "name",
        ["", "Empidonax sp.", "duck sp.", "Greater/Lesser Scaup", "Mallard/American Black Duck"],
    )
    def test_non_species_rejected(self, name: str) -> None:
        assert is_countable_species(name) is False


class TestAggregateObservationRows:
    """Test per-row joins, filters and tallies."""

    def test_tallies_hotspot_and_region(self) -> None:
        state = aggregate_observation_rows(
            [
                observation_row("S1", "Cedar Waxwing"),
                observation_row("S2", "Cedar Waxwing"),
                observation_row("S3", "Cedar Waxwing"),
            ],
            _loaded_state(),
        )
        tally = state.hotspots["L1"].species[Season.WINTER]["Cedar Waxwing"]
        assert tally.count == 2
        assert tally.years == {2023, 2024}
        assert state.hotspots["L2"].species[Season.WINTER]["Cedar Waxwing"].count == 1
        assert state.region.species_counts[Season.WINTER]["Cedar Waxwing"] == 3
        assert state.region.observation_count == 3

    def test_orphan_rows_dropped(self) -> None:
        state = aggregate_observation_rows(
            [observation_row("S999", "Cedar Waxwing")], _loaded_state()
        )
        assert state.region.species_counts[Season.WINTER] == {}
        assert state.skipped["orphan"] == 1

    def test_spuhs_and_slashes_dropped(self) -> None:
        state = aggregate_observation_rows(
            [
                observation_row("S1", "Accipiter sp."),
                observation_row("S1", "Downy/Hairy Woodpecker"),
                observation_row("S1", ""),
            ],
            _loaded_state(),
        )
        assert state.hotspots["L1"].species[Season.WINTER] == {}
        assert state.region.all_time_species == set()
        assert state.skipped["not_species"] == 3

    def test_species_counted_once_per_checklist(self) -> None:
        state = aggregate_observation_rows(
            [
                observation_row("S1", "Dark-eyed Junco", count="12"),
                observation_row("S1", "Dark-eyed Junco", count="3"),
            ],
            _loaded_state(),
        )
        assert state.hotspots["L1"].species[Season.WINTER]["Dark-eyed Junco"].count == 1
        assert state.region.species_counts[Season.WINTER]["Dark-eyed Junco"] == 1
        assert state.region.observation_count == 1
        assert state.skipped["duplicate_species"] == 1

    def test_all_time_species_sets(self) -> None:
        state = aggregate_observation_rows(
            [
                observation_row("S1", "Cedar Waxwing"),
                observation_row("S1", "Carolina Wren"),
                observation_row("S3", "Hermit Thrush"),
            ],
            _loaded_state(),
        )
        assert state.hotspots["L1"].all_time_species == {"Cedar Waxwing", "Carolina Wren"}
        assert state.hotspots["L2"].all_time_species == {"Hermit Thrush"}
        assert state.region.all_time_species == {
            "Cedar Waxwing",
            "Carolina Wren",
            "Hermit Thrush",
        }

    def test_species_years_within_hotspot_coverage(self) -> None:
        state = aggregate_observation_rows(
            [observation_row(sid, "Carolina Wren") for sid in ("S1", "S2", "S3")],
            _loaded_state(),
        )
        for hotspot in state.hotspots.values():
            for season in Season:
                for tally in hotspot.species[season].values():
                    assert tally.years <= hotspot.years_with_data[season]
                    assert tally.count >= tally.years_present

    def test_checklists_released_after_pass(self) -> None:
        state = aggregate_observation_rows([], _loaded_state())
        assert state.checklists == {}
        # Denominators survive
        assert state.hotspots["L1"].checklists[Season.WINTER] == 2


class TestAggregateObservations:
    """Test the file-level observation pass."""

    def test_reads_file(self, write_observations: Callable[..., Path]) -> None:
        path = write_observations([observation_row("S1", "Cedar Waxwing")])
        state = aggregate_observations(path, _loaded_state())
        assert state.region.all_time_species == {"Cedar Waxwing"}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(MissingExportError):
            aggregate_observations(tmp_path / "missing.txt", _loaded_state())
