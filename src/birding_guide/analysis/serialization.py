"""JSON serialization helpers for analysis results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from birding_guide.schemas import Season

if TYPE_CHECKING:
    from birding_guide.schemas import HotspotSummary, RegionStats, SeasonalHotspot


def seasonal_hotspots_to_dict(
    seasonal: dict[Season, list[SeasonalHotspot]],
) -> dict[str, list[dict[str, Any]]]:
    """Serialize seasonal rankings to ``{"spring": [...], ..., "winter": [...]}``.

    Every season key is present, in fixed order, even when its list is empty.
    """
    return {
        season.value: [h.model_dump(by_alias=True) for h in seasonal.get(season, [])]
        for season in Season
    }


def hotspot_index_to_list(index: list[HotspotSummary]) -> list[dict[str, Any]]:
    """Serialize the hotspot index, keeping its order."""
    return [h.model_dump(by_alias=True) for h in index]


def region_stats_to_dict(stats: RegionStats) -> dict[str, Any]:
    """Serialize region stats."""
    return stats.model_dump(by_alias=True)
