"""Configuration models and helpers for apparentsky settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from ..constants import (
    DEFAULT_HORIZON_DEG,
    DEFAULT_PRESSURE_PA,
    DEFAULT_TEMPERATURE_K,
    MAX_SEARCH_DAYS,
)
from ..core.leap_seconds import LeapSecondTable, default_table, load_table
from ..models import GeographicCoordinate, MetConditions

CONFIG_FILENAME = "settings.yaml"

# -------------------- Settings Schema --------------------


class AtmosphereCfg(BaseModel):
    """Standard atmosphere used for refraction."""

    temperature_k: float = DEFAULT_TEMPERATURE_K
    pressure_pa: float = DEFAULT_PRESSURE_PA

    @field_validator("temperature_k", "pressure_pa")
    @classmethod
    def _require_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("must be positive")
        return value

    def met(self) -> MetConditions:
        return MetConditions(temperature_k=self.temperature_k, pressure_pa=self.pressure_pa)


class SearchCfg(BaseModel):
    """Limits for the rise/set search."""

    max_days: int = Field(default=MAX_SEARCH_DAYS, ge=1)
    horizon_deg: float = Field(default=DEFAULT_HORIZON_DEG, ge=-90.0, le=90.0)


class LeapSecondsCfg(BaseModel):
    """Leap second table source."""

    table_path: Optional[Path] = None
    warn_when_expired: bool = True

    @field_validator("table_path", mode="before")
    @classmethod
    def _expand_path(cls, value: Path | str | None) -> Path | None:
        if value in {None, ""}:
            return None
        return Path(value).expanduser()

    def table(self) -> LeapSecondTable:
        """Return the configured table, falling back to the packaged one."""

        if self.table_path is None:
            return default_table()
        return load_table(self.table_path, warn_when_expired=self.warn_when_expired)


class SiteCfg(BaseModel):
    """Named observing site."""

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    elevation: float = 0.0

    def location(self) -> GeographicCoordinate:
        return GeographicCoordinate(
            latitude=self.latitude, longitude=self.longitude, elevation=self.elevation
        )


def _default_sites() -> Dict[str, SiteCfg]:
    return {
        "greenwich": SiteCfg(latitude=51.4779, longitude=-0.0015, elevation=46.0),
        "mauna_kea": SiteCfg(latitude=19.820611, longitude=-155.468094, elevation=4205.0),
    }


class Settings(BaseModel):
    """Top-level settings model."""

    atmosphere: AtmosphereCfg = Field(default_factory=AtmosphereCfg)
    search: SearchCfg = Field(default_factory=SearchCfg)
    leap_seconds: LeapSecondsCfg = Field(default_factory=LeapSecondsCfg)
    sites: Dict[str, SiteCfg] = Field(default_factory=_default_sites)
    default_site: Optional[str] = None

    @field_validator("sites", mode="before")
    @classmethod
    def _normalise_site_names(cls, value: object) -> object:
        if isinstance(value, dict):
            return {str(name).strip().lower(): site for name, site in value.items()}
        return value

    def site(self, name: str) -> SiteCfg:
        """Return the site registered under ``name`` (case insensitive)."""

        key = name.strip().lower()
        try:
            return self.sites[key]
        except KeyError:
            known = ", ".join(sorted(self.sites)) or "none"
            raise KeyError(f"unknown site '{name}' (known: {known})") from None


# -------------------- Persistence --------------------


def get_config_home() -> Path:
    """Return the directory where settings should be stored."""

    return Path(os.environ.get("APPARENTSKY_HOME", str(Path.home() / ".apparentsky")))


def config_path() -> Path:
    """Return the full path to the configuration file, creating directories as needed."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    """Instantiate a Settings object populated with defaults."""

    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Persist the given settings to disk as YAML."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump(mode="json")
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target_path


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, creating defaults if missing."""

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        settings = default_settings()
        save_settings(settings, source_path)
        return settings
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        raw = {}
    return Settings(**raw)
