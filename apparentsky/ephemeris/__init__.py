"""Low order solar, lunar and orbital fundamental arguments."""

from __future__ import annotations

from .fundamentals import (
    earth_orbit_eccentricity,
    ecliptic_to_equatorial,
    galactic_to_equatorial,
    longitude_of_perihelion,
    lunar_ascending_node,
    lunar_mean_longitude,
    mean_obliquity,
    solar_ecliptic_coordinate,
    solar_equation_of_center,
    solar_equatorial_coordinate,
    solar_mean_anomaly,
    solar_mean_longitude,
    solar_true_longitude,
)

__all__ = [
    "earth_orbit_eccentricity",
    "ecliptic_to_equatorial",
    "galactic_to_equatorial",
    "longitude_of_perihelion",
    "lunar_ascending_node",
    "lunar_mean_longitude",
    "mean_obliquity",
    "solar_ecliptic_coordinate",
    "solar_equation_of_center",
    "solar_equatorial_coordinate",
    "solar_mean_anomaly",
    "solar_mean_longitude",
    "solar_true_longitude",
]
