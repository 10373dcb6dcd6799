"""
Prefect flows for the data pipeline.

Flows:
- build: Turn an EBD download into the site's JSON data files

Usage (local):
    python -m birding_guide.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m birding_guide.flows.build

In GitHub Actions:
    pip install -e .
    birding-guide build --sampling path/to/sampling.txt --observations path/to/ebd.txt
"""
