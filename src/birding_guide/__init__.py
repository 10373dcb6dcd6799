"""Birding Guide - seasonal birding hotspot rankings from eBird exports.

Architecture::

    datasources/   eBird Basic Dataset (EBD) exports: reader, checklist loader,
                   observation aggregator
    reference/     Scoring thresholds and row filter vocabularies
    analysis/      Notability scoring, hotspot index, JSON serialization
    store.py       Raw inputs and published JSON outputs with sidecar metadata
    flows/         Prefect orchestration (build turns exports into site data)

Data flow: sampling export → loader → observation export → aggregator
→ analysis → store (derived/)

Extension points (step-by-step guides live in each package docstring):
  - New export reader:  datasources/__init__.py
  - New analysis:       analysis/__init__.py
"""

__version__ = "0.1.0"

from birding_guide.config import Settings
from birding_guide.schemas import Season, SeasonalHotspot

__all__ = ["Season", "SeasonalHotspot", "Settings", "__version__"]
