"""Observer-centred corrections, transforms and event solvers."""

from __future__ import annotations

from ..ephemeris.fundamentals import ecliptic_to_equatorial, galactic_to_equatorial
from .corrections import (
    NutationAngles,
    annual_aberration_correction,
    apparent_equatorial,
    apply_corrections,
    diurnal_aberration_correction,
    nutation_angles,
    nutation_correction,
    precession_correction,
)
from .horizontal import (
    POLE_SENTINEL,
    angular_separation,
    equatorial_to_horizontal,
    horizontal_to_equatorial,
    parallactic_angle,
)
from .observation import observe
from .refraction import (
    airmass,
    correct_for_refraction,
    local_horizon_dip,
    refraction,
    refraction_for,
)
from .sidereal import (
    greenwich_from_local_sidereal,
    greenwich_sidereal_time,
    hour_angle,
    local_sidereal_time,
    universal_time_from_greenwich_sidereal,
)
from .transit import (
    is_above_horizon,
    is_circumpolar,
    is_visible,
    next_rise,
    next_set,
    rise_set_gate,
    transit,
)

__all__ = [
    "NutationAngles",
    "POLE_SENTINEL",
    "airmass",
    "angular_separation",
    "annual_aberration_correction",
    "apparent_equatorial",
    "apply_corrections",
    "correct_for_refraction",
    "diurnal_aberration_correction",
    "ecliptic_to_equatorial",
    "equatorial_to_horizontal",
    "galactic_to_equatorial",
    "greenwich_from_local_sidereal",
    "greenwich_sidereal_time",
    "horizontal_to_equatorial",
    "hour_angle",
    "is_above_horizon",
    "is_circumpolar",
    "is_visible",
    "local_horizon_dip",
    "local_sidereal_time",
    "next_rise",
    "next_set",
    "nutation_angles",
    "nutation_correction",
    "observe",
    "parallactic_angle",
    "precession_correction",
    "refraction",
    "refraction_for",
    "rise_set_gate",
    "transit",
    "universal_time_from_greenwich_sidereal",
]
