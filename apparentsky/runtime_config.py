"""Runtime configuration loaded from environment variables and .env files."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import Field, PrivateAttr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from apparentsky.config.settings import Settings as PersistedSettings


def _default_home() -> Path:
    """Return the default apparentsky home directory."""

    return Path.home() / ".apparentsky"


class RuntimeSettings(BaseSettings):
    """Runtime configuration resolved from the process environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    apparentsky_home: Path = Field(default_factory=_default_home, alias="APPARENTSKY_HOME")
    settings_file: Path | None = Field(default=None, alias="APPARENTSKY_SETTINGS_FILE")

    _persisted_cache: PersistedSettings | None = PrivateAttr(default=None)

    @field_validator("apparentsky_home", mode="before")
    @classmethod
    def _validate_home(cls, value: Path | str | None) -> Path:
        if value is None or value == "":
            return _default_home()
        return Path(value).expanduser()

    @field_validator("settings_file", mode="before")
    @classmethod
    def _expand_optional_path(cls, value: Path | str | None) -> Path | None:
        if value in {None, ""}:
            return None
        return Path(value).expanduser()

    def config_file_path(self) -> Path:
        """Return the effective path to the persisted settings file."""

        if self.settings_file is not None:
            return self.settings_file
        return self.apparentsky_home / "settings.yaml"

    def persisted(self, *, fresh: bool = False) -> PersistedSettings:
        """Return a deep copy of the persisted settings, loading from disk once."""

        from apparentsky.config.settings import load_settings

        if fresh or self._persisted_cache is None:
            self._persisted_cache = load_settings(self.config_file_path())
        return self._persisted_cache.model_copy(deep=True)

    def clear_persisted_cache(self) -> None:
        """Clear any cached persisted settings forcing a reload on next access."""

        self._persisted_cache = None


__all__ = ["RuntimeSettings"]
