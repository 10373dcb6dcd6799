"""Shared fixtures: tiny EBD exports written under ``tmp_path``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.factories import OBSERVATION_HEADER, SAMPLING_HEADER, write_tsv

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture
def write_sampling(tmp_path: Path) -> Callable[[list[dict[str, str]]], Path]:
    """Write sampling rows to ``tmp_path/sampling.txt``."""

    def _write(rows: list[dict[str, str]]) -> Path:
        return write_tsv(tmp_path / "sampling.txt", SAMPLING_HEADER, rows)

    return _write


@pytest.fixture
def write_observations(tmp_path: Path) -> Callable[[list[dict[str, str]]], Path]:
    """Write observation rows to ``tmp_path/observations.txt``."""

    def _write(rows: list[dict[str, str]]) -> Path:
        return write_tsv(tmp_path / "observations.txt", OBSERVATION_HEADER, rows)

    return _write
