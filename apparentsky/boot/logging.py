"""Root logger setup for the apparentsky command line."""

from __future__ import annotations

import logging
import sys
from typing import IO

from apparentsky.runtime_config import RuntimeSettings

__all__ = ["configure_logging", "resolve_level"]

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def resolve_level(value: str | int | None) -> int:
    """Map a level name or number onto a :mod:`logging` level.

    Unknown names and blank strings resolve to ``WARNING``, the level at
    which an expired leap second table is reported.
    """

    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if text.isdigit():
        return int(text)
    return logging.getLevelNamesMapping().get(text.upper(), logging.WARNING)


def configure_logging(
    *,
    level: str | int | None = None,
    settings: RuntimeSettings | None = None,
    stream: IO[str] | None = None,
) -> int:
    """Install a stderr handler on the root logger and return its level.

    ``level`` wins when given; otherwise ``LOG_LEVEL`` is read through
    :class:`~apparentsky.runtime_config.RuntimeSettings`.  Diagnostics go
    to ``stream`` (stderr by default) so JSON written to stdout stays
    parseable.
    """

    if level is None:
        level = (settings or RuntimeSettings()).log_level
    resolved = resolve_level(level)
    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        stream=stream if stream is not None else sys.stderr,
        force=True,
    )
    return resolved
