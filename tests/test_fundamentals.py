from __future__ import annotations

from datetime import UTC, datetime

import pytest

from apparentsky.ephemeris import (
    earth_orbit_eccentricity,
    ecliptic_to_equatorial,
    galactic_to_equatorial,
    lunar_ascending_node,
    mean_obliquity,
    solar_equatorial_coordinate,
    solar_mean_anomaly,
    solar_true_longitude,
)
from apparentsky.models import EclipticCoordinate, GalacticCoordinate

J2000_MOMENT = datetime(2000, 1, 1, 12, 0, tzinfo=UTC)


def test_mean_obliquity(moment: datetime) -> None:
    assert mean_obliquity(moment) == pytest.approx(23.436511890585354, abs=1e-12)
    assert mean_obliquity(J2000_MOMENT) == pytest.approx(23.439292, abs=1e-12)


def test_fundamental_arguments_at_j2000() -> None:
    assert solar_mean_anomaly(J2000_MOMENT) == pytest.approx(357.52911, abs=1e-9)
    assert solar_true_longitude(J2000_MOMENT) == pytest.approx(280.382, abs=1e-3)
    assert lunar_ascending_node(J2000_MOMENT) == pytest.approx(125.0514, abs=1e-3)
    assert earth_orbit_eccentricity(J2000_MOMENT) == pytest.approx(0.0167086342)


def test_ecliptic_to_equatorial_for_venus() -> None:
    when = datetime(2016, 1, 4, 3, 0, tzinfo=UTC)
    venus = EclipticCoordinate(longitude=245.79403406596947, latitude=1.8937944394473665)
    coordinate = ecliptic_to_equatorial(venus, mean_obliquity(when))
    assert coordinate.ra == pytest.approx(244.24799409185357, abs=1e-9)
    assert coordinate.dec == pytest.approx(-19.405675761170443, abs=1e-9)


def test_ecliptic_origin_maps_to_equatorial_origin() -> None:
    coordinate = ecliptic_to_equatorial(EclipticCoordinate(0.0, 0.0), 23.44)
    assert coordinate.ra == pytest.approx(0.0, abs=1e-9)
    assert coordinate.dec == pytest.approx(0.0, abs=1e-9)


def test_galactic_to_equatorial() -> None:
    coordinate = galactic_to_equatorial(GalacticCoordinate(l=180.0, b=55.33333333))
    assert coordinate.ra == pytest.approx(153.92856024361822, abs=1e-9)
    assert coordinate.dec == pytest.approx(40.55960513183074, abs=1e-9)


def test_galactic_pole_maps_to_its_equatorial_position() -> None:
    coordinate = galactic_to_equatorial(GalacticCoordinate(l=0.0, b=90.0))
    assert coordinate.ra == pytest.approx(192.8598, abs=1e-9)
    assert coordinate.dec == pytest.approx(27.128027, abs=1e-9)


@pytest.mark.parametrize(
    ("moment", "ra", "dec"),
    [
        (J2000_MOMENT, 281.29, -23.03),
        (datetime(2021, 6, 21, 3, 32, tzinfo=UTC), 90.0, 23.44),
    ],
)
def test_solar_equatorial_coordinate(moment: datetime, ra: float, dec: float) -> None:
    sun = solar_equatorial_coordinate(moment)
    assert sun.ra == pytest.approx(ra, abs=0.05)
    assert sun.dec == pytest.approx(dec, abs=0.05)
