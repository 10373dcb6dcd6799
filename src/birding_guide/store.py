"""Data store for published site data.

Computed outputs live under derived/ and are rebuilt on every run (seasonal
rankings, hotspot index, region stats). EBD exports are inputs only and are
located through settings, not the store.

Published JSON stays bare, because the site imports it as-is. Provenance
(source, generation time, input files) lives in a sidecar ``.meta.json``
next to each file.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path  # noqa: TC003 - used at runtime
from typing import Any


class DataStore:
    """Manages reading and publishing of pipeline data files."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.derived = base_dir / "derived"

    def read(self, path: Path) -> Any | None:
        """Read a published JSON file.

        Returns the parsed payload, or None if the file doesn't exist.
        """
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open(encoding="utf-8") as f:
            return json.load(f)

    def read_meta(self, path: Path) -> dict[str, Any]:
        """Read the sidecar metadata for a file (empty if there is none)."""
        sidecar = self._sidecar(self._resolve(path))
        if not sidecar.exists():
            return {}
        with sidecar.open(encoding="utf-8") as f:
            result: dict[str, Any] = json.load(f)
        return result.get("meta", {})

    def publish(
        self,
        path: Path,
        data: Any,
        source: str,
        **params: Any,
    ) -> Path:
        """Write bare JSON plus a sidecar ``.meta.json``.

        Args:
            path: Relative path under base_dir (e.g. ``derived/stats.json``).
            data: JSON-compatible payload, written as-is.
            source: Data source identifier (e.g. ``"ebird.org (EBD)"``).
            **params: Extra metadata fields (region, input files, etc.).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        with full.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        meta: dict[str, Any] = {
            "source": source,
            "generated_at": datetime.now(UTC).isoformat(),
        }
        if params:
            meta.update(params)

        with self._sidecar(full).open("w", encoding="utf-8") as f:
            json.dump({"meta": meta}, f, indent=2, default=str)

        return full

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full

    @staticmethod
    def _sidecar(full: Path) -> Path:
        return full.with_suffix(full.suffix + ".meta.json")
