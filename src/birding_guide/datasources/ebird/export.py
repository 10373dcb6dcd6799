"""Streaming reader for eBird Basic Dataset (EBD) tab-separated exports.

EBD files are large (millions of rows), so rows are read forward-only and
never held in memory. Columns are located by header name, never by position.
"""

from __future__ import annotations

import math
from datetime import date
from typing import TYPE_CHECKING

from birding_guide.schemas import Season

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path

# =============================================================================
# Column names (as they appear in the header, upper-cased)
# =============================================================================

ALL_SPECIES_REPORTED = "ALL SPECIES REPORTED"
OBSERVATION_DATE = "OBSERVATION DATE"
LOCALITY_TYPE = "LOCALITY TYPE"
SAMPLING_EVENT_IDENTIFIER = "SAMPLING EVENT IDENTIFIER"
LOCALITY_ID = "LOCALITY ID"
LOCALITY = "LOCALITY"
LATITUDE = "LATITUDE"
LONGITUDE = "LONGITUDE"
COMMON_NAME = "COMMON NAME"

SAMPLING_COLUMNS: tuple[str, ...] = (
    ALL_SPECIES_REPORTED,
    OBSERVATION_DATE,
    LOCALITY_TYPE,
    SAMPLING_EVENT_IDENTIFIER,
    LOCALITY_ID,
    LOCALITY,
    LATITUDE,
    LONGITUDE,
)

OBSERVATION_COLUMNS: tuple[str, ...] = (
    SAMPLING_EVENT_IDENTIFIER,
    COMMON_NAME,
)


# =============================================================================
# Errors
# =============================================================================


class MissingExportError(FileNotFoundError):
    """An EBD export file does not exist."""


class ExportFormatError(ValueError):
    """An EBD export has no header or lacks a required column."""


# =============================================================================
# Reading
# =============================================================================


def _header_index(header_line: str, columns: Sequence[str], path: Path) -> dict[str, int]:
    """Map each requested column to its position in the header."""
    positions = {
        name.strip().upper(): i for i, name in enumerate(header_line.rstrip("\r\n").split("\t"))
    }
    missing = [col for col in columns if col not in positions]
    if missing:
        msg = f"{path}: header is missing required column(s): {', '.join(missing)}"
        raise ExportFormatError(msg)
    return {col: positions[col] for col in columns}


def read_export(path: Path, columns: Sequence[str]) -> Iterator[dict[str, str]]:
    """
    Stream rows of a tab-separated EBD export.

    Fields are split on tabs only; EBD free-text fields contain bare quote
    characters, so no CSV quoting rules are applied. Bytes that are not valid
    UTF-8 decode to U+FFFD and the row is kept.

    Args:
        path: Export file.
        columns: Upper-case column names to extract from each row.

    Yields:
        Dict of column name -> raw string value. Rows too short to contain
        every requested column are skipped.

    Raises:
        MissingExportError: The file does not exist.
        ExportFormatError: The file is empty or a column is missing from the header.
    """
    if not path.exists():
        msg = f"EBD export not found: {path}"
        raise MissingExportError(msg)

    with path.open(encoding="utf-8", errors="replace", newline="") as f:
        header_line = f.readline()
        if not header_line:
            msg = f"{path}: export is empty (a header row is required)"
            raise ExportFormatError(msg)

        index = _header_index(header_line, columns, path)
        width = max(index.values()) + 1

        for line in f:
            fields = line.rstrip("\r\n").split("\t")
            if len(fields) < width:
                continue
            yield {col: fields[i] for col, i in index.items()}


# =============================================================================
# Field parsing
# =============================================================================


def parse_observation_date(value: str | None) -> tuple[int, Season | None]:
    """Parse an ``OBSERVATION DATE`` (``YYYY-MM-DD...``) into (year, season).

    Malformed or missing dates return ``(0, None)``; year 0 is older than any
    recency window, so such rows are dropped by the loader.
    """
    if not value:
        return 0, None
    try:
        observed = date.fromisoformat(value.strip()[:10])
    except ValueError:
        return 0, None
    return observed.year, Season.from_month(observed.month)


def parse_coordinate(value: str | None) -> float | None:
    """Parse a latitude/longitude string, returning None unless it's a finite number."""
    if not value:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None
