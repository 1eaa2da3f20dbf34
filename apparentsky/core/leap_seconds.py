"""Leap second table used to derive the atomic time scales.

The bundled table follows the ``leap-seconds.list`` layout published by
the IERS and redistributed with the IANA time zone database: one record
per line holding the NTP timestamp of the transition and the cumulative
TAI-UTC offset, plus a ``#@`` line carrying the expiry timestamp.  The
default table is parsed once per process and never mutated; callers that
carry fresher data can parse their own file with :func:`load_table` and
pass it to the helpers in :mod:`apparentsky.core.time`.
"""

from __future__ import annotations

import datetime as _dt
import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Final, overload

from ..exceptions import LeapSecondTableError

__all__ = [
    "LeapSecondRecord",
    "LeapSecondTable",
    "NTP_UNIX_OFFSET",
    "default_table",
    "load_table",
    "parse_table",
]

LOG = logging.getLogger(__name__)

#: Seconds between the NTP epoch (1900-01-01) and the Unix epoch.
NTP_UNIX_OFFSET: Final[int] = 2_208_988_800

_DATA_FILE: Final[str] = "leap-seconds.list"


@dataclass(frozen=True, slots=True)
class LeapSecondRecord:
    """A single TAI-UTC transition."""

    ntp: int
    unix: int
    dtai: int
    when: _dt.datetime

    @classmethod
    def from_ntp(cls, ntp: int, dtai: int) -> LeapSecondRecord:
        unix = ntp - NTP_UNIX_OFFSET
        when = _dt.datetime.fromtimestamp(unix, tz=_dt.UTC)
        return cls(ntp=ntp, unix=unix, dtai=dtai, when=when)


@dataclass(frozen=True)
class LeapSecondTable(Sequence[LeapSecondRecord]):
    """Ordered, immutable collection of :class:`LeapSecondRecord` entries."""

    records: tuple[LeapSecondRecord, ...]
    expires: _dt.datetime | None = None

    def __post_init__(self) -> None:
        previous: LeapSecondRecord | None = None
        for record in self.records:
            if previous is not None:
                if record.unix <= previous.unix:
                    raise LeapSecondTableError(
                        f"leap second at {record.when.isoformat()} is not after "
                        f"{previous.when.isoformat()}"
                    )
                if record.dtai <= previous.dtai:
                    raise LeapSecondTableError(
                        f"TAI-UTC offset {record.dtai} at {record.when.isoformat()} "
                        f"does not increase on {previous.dtai}"
                    )
            previous = record

    @overload
    def __getitem__(self, index: int) -> LeapSecondRecord: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[LeapSecondRecord]: ...

    def __getitem__(self, index):
        return self.records[index]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[LeapSecondRecord]:
        return iter(self.records)

    def is_expired(self, now: _dt.datetime | None = None) -> bool:
        """Return ``True`` when the table's expiry instant has passed."""

        if self.expires is None:
            return False
        current = now if now is not None else _dt.datetime.now(_dt.UTC)
        if current.tzinfo is None:
            current = current.replace(tzinfo=_dt.UTC)
        return current >= self.expires


def parse_table(lines: Iterable[str]) -> LeapSecondTable:
    """Parse ``leap-seconds.list`` formatted ``lines`` into a table."""

    records: list[LeapSecondRecord] = []
    expires: _dt.datetime | None = None
    for number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("#@"):
            try:
                ntp = int(line[2:].split()[0])
            except (IndexError, ValueError) as exc:
                raise LeapSecondTableError("invalid expiry line", number) from exc
            expires = _dt.datetime.fromtimestamp(ntp - NTP_UNIX_OFFSET, tz=_dt.UTC)
            continue
        if line.startswith("#"):
            continue
        fields = line.split("#", 1)[0].split()
        if len(fields) < 2:
            raise LeapSecondTableError("expected NTP timestamp and offset", number)
        try:
            ntp, dtai = int(fields[0]), int(fields[1])
        except ValueError as exc:
            raise LeapSecondTableError("non-integer leap second field", number) from exc
        records.append(LeapSecondRecord.from_ntp(ntp, dtai))
    return LeapSecondTable(tuple(records), expires)


def load_table(
    path: Path | str | None = None, *, warn_when_expired: bool = True
) -> LeapSecondTable:
    """Load a leap second table from ``path`` or from the packaged data."""

    if path is None:
        data_path = resources.files("apparentsky.data").joinpath(_DATA_FILE)
        with data_path.open("r", encoding="utf-8") as handle:
            table = parse_table(handle)
        source = _DATA_FILE
    else:
        source_path = Path(path)
        with source_path.open("r", encoding="utf-8") as handle:
            table = parse_table(handle)
        source = str(source_path)

    LOG.debug("loaded %d leap second records from %s", len(table), source)
    if warn_when_expired and table.expires is not None and table.is_expired():
        LOG.warning(
            "leap second table %s expired on %s; TAI, TT and GPS may be off "
            "by any leap second announced since",
            source,
            table.expires.date().isoformat(),
        )
    return table


@cache
def default_table() -> LeapSecondTable:
    """Return the process-wide packaged leap second table."""

    return load_table()
