"""Tests for the hotspot index, region stats and JSON serialization."""

from __future__ import annotations

import json

from birding_guide.analysis import (
    build_hotspot_index,
    build_region_stats,
    hotspot_index_to_list,
    region_stats_to_dict,
    seasonal_hotspots_to_dict,
)
from birding_guide.datasources.ebird import AggregationState, Hotspot
from birding_guide.schemas import NotableSpecies, RareSpecies, Season, SeasonalHotspot


def _hotspot_with_species(loc_id: str, n_species: int, coords: bool = True) -> Hotspot:
    hotspot = Hotspot(
        locality_id=loc_id,
        name=f"Park {loc_id}",
        latitude=36.0 if coords else None,
        longitude=-84.0 if coords else None,
    )
    hotspot.all_time_species.update(f"Species {i}" for i in range(n_species))
    return hotspot


class TestBuildHotspotIndex:
    """Test the all-time hotspot list."""

    def test_requires_more_than_ten_species(self) -> None:
        state = AggregationState(
            hotspots={
                "L10": _hotspot_with_species("L10", 10),
                "L11": _hotspot_with_species("L11", 11),
            }
        )
        index = build_hotspot_index(state)
        assert [h.id for h in index] == ["L11"]

    def test_sorted_by_species_count(self) -> None:
        state = AggregationState(
            hotspots={
                loc: _hotspot_with_species(loc, n)
                for loc, n in (("L1", 20), ("L2", 150), ("L3", 75))
            }
        )
        index = build_hotspot_index(state)
        assert [(h.id, h.species_count) for h in index] == [("L2", 150), ("L3", 75), ("L1", 20)]

    def test_unknown_coordinates_zero(self) -> None:
        state = AggregationState(hotspots={"L1": _hotspot_with_species("L1", 12, coords=False)})
        (summary,) = build_hotspot_index(state)
        assert (summary.latitude, summary.longitude) == (0.0, 0.0)

    def test_custom_threshold(self) -> None:
        state = AggregationState(hotspots={"L1": _hotspot_with_species("L1", 3)})
        assert len(build_hotspot_index(state, min_species=2)) == 1


class TestBuildRegionStats:
    """Test region totals."""

    def test_totals(self) -> None:
        state = AggregationState()
        state.region.all_time_species.update({"Cedar Waxwing", "Carolina Wren"})
        state.region.observation_count = 42
        stats = build_region_stats(state)
        assert stats.total_species == 2
        assert stats.total_observations == 42


class TestSerialization:
    """Test camelCase JSON output."""

    def test_seasonal_keys_in_fixed_order(self) -> None:
        result = seasonal_hotspots_to_dict({})
        assert list(result) == ["spring", "summer", "fall", "winter"]
        assert all(v == [] for v in result.values())

    def test_seasonal_hotspot_field_names(self) -> None:
        hotspot = SeasonalHotspot(
            hotspot_id="L1",
            hotspot_name="Seven Islands",
            latitude=35.95,
            longitude=-83.69,
            seasonal_species_count=1,
            notable_species=[
                NotableSpecies(
                    name="Cedar Waxwing",
                    score=15.0,
                    frequency=0.889,
                    region_frequency=0.055,
                    obs_count=120,
                    years_present=3,
                    years_total=3,
                )
            ],
            rare_species=[
                RareSpecies(
                    name="Evening Grosbeak", obs_count=2, last_seen_year=2024, frequency=0.0148
                )
            ],
        )
        result = seasonal_hotspots_to_dict({Season.WINTER: [hotspot]})
        (entry,) = result["winter"]

        assert set(entry) == {
            "hotspotId",
            "hotspotName",
            "latitude",
            "longitude",
            "seasonalSpeciesCount",
            "notableSpecies",
            "rareSpecies",
        }
        assert entry["notableSpecies"][0] == {
            "name": "Cedar Waxwing",
            "score": 15.0,
            "frequency": 0.889,
            "regionFrequency": 0.055,
            "obsCount": 120,
            "yearsPresent": 3,
            "yearsTotal": 3,
        }
        assert entry["rareSpecies"][0] == {
            "name": "Evening Grosbeak",
            "obsCount": 2,
            "lastSeenYear": 2024,
            "frequency": 0.0148,
        }
        # Round-trips through JSON unchanged
        assert json.loads(json.dumps(result)) == result

    def test_index_and_stats_field_names(self) -> None:
        state = AggregationState(hotspots={"L1": _hotspot_with_species("L1", 12)})
        state.region.observation_count = 7
        assert hotspot_index_to_list(build_hotspot_index(state)) == [
            {
                "id": "L1",
                "name": "Park L1",
                "latitude": 36.0,
                "longitude": -84.0,
                "speciesCount": 12,
            }
        ]
        assert region_stats_to_dict(build_region_stats(state)) == {
            "totalSpecies": 0,
            "totalObservations": 7,
        }
