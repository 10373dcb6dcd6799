"""Scoring, indexing and serialization over the aggregated EBD state.

Each module is a pure function of ``AggregationState`` (plus constants from
``reference/``) and returns pydantic models from ``schemas.py``.

Dependency rule: analysis/ imports datasource *models* only.
It never reads export files, writes to the store or uses Prefect.

Modules:
  - notability: hotspot × season → notable/rare species, composite ranking
  - hotspot_index: all-time hotspot list, region totals
  - serialization: models → JSON-compatible dicts for the store

Adding an analysis module
-------------------------
1. Create ``analysis/{name}.py`` with a pure function::

       from birding_guide.datasources.ebird.models import AggregationState

       def summarize_something(state: AggregationState) -> SomeModel:
           ...

2. Rules:
   - Import datasource *models* only (never call pass functions here).
   - No I/O, no Prefect decorators.
   - Return pydantic models (add them to ``schemas.py``).

3. Wire into the pipeline (see ``flows/build.py``):
   - Call your function after the observation pass.
   - Publish the serialized result via ``store.publish``.

4. Re-export in ``__init__.py`` and add tests in ``tests/test_{name}.py``.
"""

from birding_guide.analysis.hotspot_index import build_hotspot_index, build_region_stats
from birding_guide.analysis.notability import rank_hotspots, score_hotspots
from birding_guide.analysis.serialization import (
    hotspot_index_to_list,
    region_stats_to_dict,
    seasonal_hotspots_to_dict,
)

__all__ = [
    "build_hotspot_index",
    "build_region_stats",
    "hotspot_index_to_list",
    "rank_hotspots",
    "region_stats_to_dict",
    "score_hotspots",
    "seasonal_hotspots_to_dict",
]
