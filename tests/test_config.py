"""Tests for application settings."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from birding_guide.config import RAW_EBIRD_DIR, Settings, get_settings

if TYPE_CHECKING:
    import pytest


class TestSettings:
    """Test settings defaults and environment overrides."""

    def test_default_export_paths(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("BIRDING_GUIDE_SAMPLING_FILE", raising=False)
        monkeypatch.delenv("BIRDING_GUIDE_OBSERVATION_FILE", raising=False)
        settings = Settings(region_code="US-TN-093", ebd_release="relJan-2026")
        expected = RAW_EBIRD_DIR / "ebd_US-TN-093_smp_relJan-2026_sampling.txt"
        assert settings.sampling_path == expected
        assert settings.observation_path == RAW_EBIRD_DIR / "ebd_US-TN-093_smp_relJan-2026.txt"

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BIRDING_GUIDE_REGION_CODE", "US-NC-021")
        monkeypatch.setenv("BIRDING_GUIDE_SAMPLING_FILE", "/tmp/smp.txt")
        monkeypatch.setenv("BIRDING_GUIDE_DEBUG", "true")
        settings = Settings()
        assert settings.region_code == "US-NC-021"
        assert settings.debug is True
        assert settings.sampling_path == Path("/tmp/smp.txt")
        assert "US-NC-021" in settings.observation_path.name

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
