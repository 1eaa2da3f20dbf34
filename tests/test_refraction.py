from __future__ import annotations

import math
from datetime import datetime

import pytest

from apparentsky.models import (
    EquatorialCoordinate,
    GeographicCoordinate,
    HorizontalCoordinate,
    MetConditions,
)
from apparentsky.observational.horizontal import equatorial_to_horizontal
from apparentsky.observational.refraction import (
    airmass,
    correct_for_refraction,
    local_horizon_dip,
    refraction,
    refraction_for,
)


@pytest.fixture
def betelgeuse_horizontal(
    moment: datetime, mauna_kea: GeographicCoordinate, betelgeuse: EquatorialCoordinate
) -> HorizontalCoordinate:
    return equatorial_to_horizontal(moment, mauna_kea, betelgeuse)


def test_refraction_at_standard_conditions(betelgeuse_horizontal: HorizontalCoordinate) -> None:
    R = refraction(betelgeuse_horizontal, 283.15, 101325)
    assert R == pytest.approx(0.005224159687428409, abs=1e-12)


def test_refraction_scales_with_pressure_and_temperature() -> None:
    target = HorizontalCoordinate(alt=20.0, az=0.0)
    standard = refraction(target)
    assert refraction(target, pressure_pa=2 * 101325) == pytest.approx(2 * standard)
    assert refraction(target, temperature_k=2 * 283.15) == pytest.approx(standard / 2)


def test_refraction_is_unbounded_below_horizon() -> None:
    assert refraction(HorizontalCoordinate(alt=-0.5, az=90.0)) == math.inf


def test_refraction_grows_towards_the_horizon() -> None:
    values = [refraction(HorizontalCoordinate(alt=alt, az=0.0)) for alt in (60, 30, 10, 1, 0)]
    assert values == sorted(values)
    # About 29 arcminutes at the astronomical horizon.
    assert values[-1] * 60.0 == pytest.approx(29.0, abs=0.5)


def test_refraction_is_never_negative_near_the_zenith() -> None:
    for alt in (89.9, 89.95, 90.0):
        assert refraction(HorizontalCoordinate(alt=alt, az=0.0)) >= 0.0
    zenith = HorizontalCoordinate(alt=90.0, az=45.0)
    assert refraction(zenith) == 0.0
    assert correct_for_refraction(zenith).alt == 90.0


def test_correct_for_refraction_raises_altitude(
    betelgeuse_horizontal: HorizontalCoordinate,
) -> None:
    corrected = correct_for_refraction(betelgeuse_horizontal)
    assert corrected.az == betelgeuse_horizontal.az
    assert corrected.alt >= 72.79061860032508
    assert corrected.alt <= 73.0


def test_correct_for_refraction_leaves_bodies_below_horizon_alone() -> None:
    target = HorizontalCoordinate(alt=-12.0, az=200.0)
    assert correct_for_refraction(target) == target


def test_refraction_for_uses_met_conditions() -> None:
    target = HorizontalCoordinate(alt=15.0, az=0.0)
    thin_air = MetConditions(temperature_k=273.15, pressure_pa=61000.0)
    corrected = refraction_for(target, thin_air)
    assert corrected.alt - target.alt == pytest.approx(refraction(target, 273.15, 61000.0))
    assert corrected.alt - target.alt < refraction(target)


def test_airmass() -> None:
    assert airmass(HorizontalCoordinate(alt=90.0, az=0.0)) == pytest.approx(1.0, abs=1e-5)
    assert airmass(HorizontalCoordinate(alt=30.0, az=0.0)) == pytest.approx(1.9932, abs=1e-3)
    assert airmass(HorizontalCoordinate(alt=0.0, az=0.0)) == pytest.approx(38.75, abs=0.01)
    assert airmass(HorizontalCoordinate(alt=-5.0, az=0.0)) == math.inf


def test_airmass_increases_towards_the_horizon() -> None:
    values = [airmass(HorizontalCoordinate(alt=alt, az=0.0)) for alt in (90, 60, 30, 10, 2, 0)]
    assert values == sorted(values)


@pytest.mark.parametrize(
    ("elevation", "expected"),
    [(-10.0, 0.0), (0.0, 0.0), (10.0, 0.0927), (4205.0, 1.8990)],
)
def test_local_horizon_dip(elevation: float, expected: float) -> None:
    assert local_horizon_dip(elevation) == pytest.approx(expected, abs=1e-3)
