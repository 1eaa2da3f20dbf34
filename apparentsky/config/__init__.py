"""Configuration helpers exposed at :mod:`apparentsky.config`."""

from __future__ import annotations

from .settings import (
    AtmosphereCfg,
    LeapSecondsCfg,
    SearchCfg,
    Settings,
    SiteCfg,
    config_path,
    default_settings,
    get_config_home,
    load_settings,
    save_settings,
)

__all__ = [
    "AtmosphereCfg",
    "LeapSecondsCfg",
    "SearchCfg",
    "Settings",
    "SiteCfg",
    "config_path",
    "default_settings",
    "get_config_home",
    "load_settings",
    "save_settings",
]
