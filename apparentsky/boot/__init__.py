"""Process bootstrap helpers for apparentsky entry points."""

from __future__ import annotations

from .logging import configure_logging, resolve_level

__all__ = ["configure_logging", "resolve_level"]
