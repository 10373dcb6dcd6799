"""
Application settings.

Values come from environment variables prefixed ``BIRDING_GUIDE_`` (or a
``.env`` file in the working directory), e.g.::

    BIRDING_GUIDE_REGION_CODE=US-TN-093
    BIRDING_GUIDE_EBD_RELEASE=relJan-2026
    BIRDING_GUIDE_SAMPLING_FILE=/data/ebd_sampling.txt

Scoring thresholds are deliberately *not* settings; see ``reference/scoring.py``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Where EBD exports are unpacked, relative to the working directory
RAW_EBIRD_DIR = Path("data/raw/ebird")


class Settings(BaseSettings):
    """Runtime configuration for the birding guide pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="BIRDING_GUIDE_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "birding-guide"
    app_env: str = "development"
    debug: bool = False

    region_code: str = Field(default="US-TN-093", description="eBird region code (Knox County, TN)")
    ebd_release: str = Field(default="relJan-2026", description="EBD release tag in file names")

    sampling_file: Path | None = Field(default=None, description="Override sampling export path")
    observation_file: Path | None = Field(
        default=None, description="Override observation export path"
    )

    @property
    def sampling_path(self) -> Path:
        """Path to the sampling (one row per checklist) export."""
        if self.sampling_file is not None:
            return self.sampling_file
        return RAW_EBIRD_DIR / f"ebd_{self.region_code}_smp_{self.ebd_release}_sampling.txt"

    @property
    def observation_path(self) -> Path:
        """Path to the observation (one row per species per checklist) export."""
        if self.observation_file is not None:
            return self.observation_file
        return RAW_EBIRD_DIR / f"ebd_{self.region_code}_smp_{self.ebd_release}.txt"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()
