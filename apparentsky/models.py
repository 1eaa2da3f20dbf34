"""Value types exchanged between the time, correction and visibility layers.

Every angle is expressed in **degrees** unless the field name says
otherwise.  Catalog and apparent equatorial positions share the same
type; which frame a value belongs to is carried by the variable name at
the call site (``catalog``, ``apparent``) rather than by the runtime type.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from .constants import DEFAULT_PRESSURE_PA, DEFAULT_TEMPERATURE_K

__all__ = [
    "ApparentPosition",
    "EclipticCoordinate",
    "EquatorialCoordinate",
    "EquatorialDelta",
    "EquatorialSource",
    "GalacticCoordinate",
    "GeographicCoordinate",
    "HorizontalCoordinate",
    "MetConditions",
    "Transit",
    "TransitInstant",
    "TransitParameters",
]


@dataclass(frozen=True)
class EquatorialCoordinate:
    """Right ascension in ``[0, 360)`` and declination in ``[-90, 90]``."""

    ra: float
    dec: float


@dataclass(frozen=True)
class EquatorialDelta:
    """Additive right ascension / declination correction."""

    ra: float
    dec: float

    def __add__(self, other: EquatorialDelta) -> EquatorialDelta:
        return EquatorialDelta(self.ra + other.ra, self.dec + other.dec)


@dataclass(frozen=True)
class HorizontalCoordinate:
    """Altitude above the horizon and azimuth measured eastward from north."""

    alt: float
    az: float


@dataclass(frozen=True)
class GeographicCoordinate:
    """Observer location; longitude is positive east, elevation in metres."""

    latitude: float
    longitude: float
    elevation: float = 0.0


@dataclass(frozen=True)
class EclipticCoordinate:
    """Ecliptic longitude / latitude pair."""

    longitude: float
    latitude: float


@dataclass(frozen=True)
class GalacticCoordinate:
    """Galactic longitude ``l`` and latitude ``b``."""

    l: float  # noqa: E741
    b: float


@dataclass(frozen=True)
class MetConditions:
    """Atmospheric conditions used when modelling refraction."""

    temperature_k: float = DEFAULT_TEMPERATURE_K
    pressure_pa: float = DEFAULT_PRESSURE_PA


@dataclass(frozen=True)
class TransitParameters:
    """Trigonometric ratios deciding whether a body rises and sets at all."""

    ar: float
    h1: float


@dataclass(frozen=True)
class Transit:
    """Local sidereal times (hours) and azimuths of rise and set."""

    lst_rise: float
    lst_set: float
    rise_azimuth: float
    set_azimuth: float


@dataclass(frozen=True)
class TransitInstant:
    """A concrete UTC occurrence of a rise or set event."""

    datetime: datetime
    lst: float
    gst: float
    az: float


@dataclass(frozen=True)
class ApparentPosition:
    """Snapshot of where a catalog target appears to an observer."""

    moment: datetime
    catalog: EquatorialCoordinate
    apparent: EquatorialCoordinate
    hour_angle: float
    horizontal: HorizontalCoordinate
    observed: HorizontalCoordinate
    airmass: float

    @property
    def is_above_horizon(self) -> bool:
        return self.observed.alt > 0.0


#: Collaborator contract for external solar / lunar position providers.
EquatorialSource = Callable[[datetime], EquatorialCoordinate]
