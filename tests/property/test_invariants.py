from __future__ import annotations

import math
from datetime import UTC, datetime, timedelta, timezone

import pytest

from apparentsky.core.angles import normalize_degrees, normalize_hours, signed_delta
from apparentsky.core.time import (
    international_atomic_time,
    julian_date,
    modified_julian_date,
    to_utc,
)
from apparentsky.models import EquatorialCoordinate, GeographicCoordinate, HorizontalCoordinate, TransitInstant
from apparentsky.observational import (
    correct_for_refraction,
    is_circumpolar,
    is_visible,
    next_rise,
    next_set,
    refraction,
)

hypothesis = pytest.importorskip("hypothesis")
given = hypothesis.given
st = hypothesis.strategies
settings = hypothesis.settings

ANGLES = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)
OFFSETS = st.integers(min_value=-14 * 60, max_value=14 * 60).map(
    lambda minutes: timezone(timedelta(minutes=minutes))
)
MOMENTS = st.datetimes(
    min_value=datetime(1990, 1, 1),
    max_value=datetime(2040, 1, 1),
    timezones=st.just(UTC),
)
LATITUDES = st.floats(min_value=-89.9, max_value=89.9)
DECLINATIONS = st.floats(min_value=-89.9, max_value=89.9)
HORIZONS = st.floats(min_value=-5.0, max_value=30.0)


@settings(deadline=None)
@given(angle=ANGLES)
def test_normalisers_stay_in_range(angle: float) -> None:
    assert 0.0 <= normalize_degrees(angle) < 360.0
    assert 0.0 <= normalize_hours(angle) < 24.0
    assert -180.0 <= signed_delta(angle) < 180.0


@settings(deadline=None)
@given(moment=st.datetimes(timezones=OFFSETS, min_value=datetime(1900, 1, 2), max_value=datetime(2100, 1, 1)))
def test_to_utc_is_idempotent(moment: datetime) -> None:
    once = to_utc(moment)
    assert once.tzinfo is UTC
    assert to_utc(once) == once
    assert once == moment


@settings(deadline=None)
@given(moment=MOMENTS)
def test_modified_julian_date_offset(moment: datetime) -> None:
    assert modified_julian_date(moment) == julian_date(moment) - 2400000.5


@settings(deadline=None)
@given(first=MOMENTS, second=MOMENTS)
def test_tai_offset_never_decreases(first: datetime, second: datetime) -> None:
    early, late = sorted((first, second))
    early_offset = international_atomic_time(early) - early
    late_offset = international_atomic_time(late) - late
    assert early_offset <= late_offset


@settings(deadline=None)
@given(alt=st.floats(min_value=-90.0, max_value=-1e-9), az=st.floats(min_value=0.0, max_value=359.9))
def test_refraction_is_a_no_op_below_horizon(alt: float, az: float) -> None:
    target = HorizontalCoordinate(alt=alt, az=az)
    assert refraction(target) == math.inf
    assert correct_for_refraction(target) == target


@settings(deadline=None)
@given(alt=st.floats(min_value=0.0, max_value=90.0))
def test_refraction_only_raises_altitude(alt: float) -> None:
    target = HorizontalCoordinate(alt=alt, az=0.0)
    corrected = correct_for_refraction(target)
    assert corrected.alt >= target.alt
    assert corrected.alt - target.alt < 0.5


@settings(deadline=None)
@given(latitude=LATITUDES, dec=DECLINATIONS, horizon=HORIZONS)
def test_circumpolar_implies_visible(latitude: float, dec: float, horizon: float) -> None:
    observer = GeographicCoordinate(latitude=latitude, longitude=0.0)
    target = EquatorialCoordinate(ra=0.0, dec=dec)
    if is_circumpolar(observer, target, horizon):
        assert is_visible(observer, target, horizon)


@settings(deadline=None, max_examples=50)
@given(
    moment=MOMENTS,
    latitude=st.floats(min_value=-60.0, max_value=60.0),
    longitude=st.floats(min_value=-180.0, max_value=180.0),
    ra=st.floats(min_value=0.0, max_value=359.9),
    dec=st.floats(min_value=-25.0, max_value=25.0),
)
def test_next_events_are_never_in_the_past(
    moment: datetime, latitude: float, longitude: float, ra: float, dec: float
) -> None:
    observer = GeographicCoordinate(latitude=latitude, longitude=longitude)
    target = EquatorialCoordinate(ra=ra, dec=dec)
    for solver in (next_rise, next_set):
        result = solver(moment, observer, target)
        assert isinstance(result, TransitInstant)
        assert moment <= result.datetime < moment + timedelta(days=2)
