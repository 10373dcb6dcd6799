"""eBird Basic Dataset (EBD) data source.

Reads the two tab-separated files of an EBD custom download for one region:

  - sampling export (``*_sampling.txt``): one row per checklist
  - observation export: one row per species reported on a checklist

Public API:
  - export: read_export, MissingExportError, ExportFormatError, column names
  - models: AggregationState, Checklist, Hotspot, Region, SpeciesTally
  - sampling: load_checklists, load_checklist_rows
  - observations: aggregate_observations, aggregate_observation_rows
"""

from birding_guide.datasources.ebird.export import (
    OBSERVATION_COLUMNS,
    SAMPLING_COLUMNS,
    ExportFormatError,
    MissingExportError,
    read_export,
)
from birding_guide.datasources.ebird.models import (
    AggregationState,
    Checklist,
    Hotspot,
    Region,
    SpeciesTally,
)
from birding_guide.datasources.ebird.observations import (
    aggregate_observation_rows,
    aggregate_observations,
)
from birding_guide.datasources.ebird.sampling import load_checklist_rows, load_checklists

__all__ = [
    "OBSERVATION_COLUMNS",
    "SAMPLING_COLUMNS",
    "AggregationState",
    "Checklist",
    "ExportFormatError",
    "Hotspot",
    "MissingExportError",
    "Region",
    "SpeciesTally",
    "aggregate_observation_rows",
    "aggregate_observations",
    "load_checklist_rows",
    "load_checklists",
    "read_export",
]
