from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from apparentsky.core.leap_seconds import LeapSecondRecord, LeapSecondTable
from apparentsky.core.time import (
    GPS_EPOCH,
    TAI_EPOCH,
    centuries_since_j2000,
    gps_time,
    international_atomic_time,
    julian_date,
    leap_second_correction,
    modified_julian_date,
    start_of_day,
    terrestrial_time,
    time_scales,
    to_utc,
    utc_from_julian_date,
)


def test_to_utc_strips_offset() -> None:
    local = datetime(2021, 5, 14, 0, 0, tzinfo=timezone(timedelta(hours=-2)))
    assert to_utc(local) == datetime(2021, 5, 14, 2, 0, tzinfo=UTC)
    assert to_utc(local).tzinfo is UTC


def test_to_utc_treats_naive_as_utc() -> None:
    naive = datetime(2021, 5, 14, 6, 30)
    assert to_utc(naive) == datetime(2021, 5, 14, 6, 30, tzinfo=UTC)


def test_julian_and_modified_julian_date(moment: datetime) -> None:
    assert julian_date(moment) == 2459348.5
    assert modified_julian_date(moment) == 59348.0


def test_julian_date_at_j2000() -> None:
    assert julian_date(datetime(2000, 1, 1, 12, 0, tzinfo=UTC)) == 2451545.0
    assert centuries_since_j2000(datetime(2000, 1, 1, 12, 0, tzinfo=UTC)) == 0.0


def test_centuries_since_j2000(moment: datetime) -> None:
    assert centuries_since_j2000(moment) == pytest.approx(7803.5 / 36525.0, rel=1e-12)


def test_utc_from_julian_date_inverts_julian_date(moment: datetime) -> None:
    assert utc_from_julian_date(2459348.5) == moment
    later = datetime(2021, 5, 14, 18, 45, 30, tzinfo=UTC)
    recovered = utc_from_julian_date(julian_date(later))
    assert abs((recovered - later).total_seconds()) < 1e-3


def test_start_of_day_uses_utc_calendar() -> None:
    local = datetime(2021, 5, 14, 23, 0, tzinfo=timezone(timedelta(hours=-3)))
    assert start_of_day(local) == datetime(2021, 5, 15, tzinfo=UTC)


@pytest.mark.parametrize(
    ("moment", "expected"),
    [
        (datetime(2021, 5, 14, tzinfo=UTC), 37),
        (datetime.fromtimestamp(1341100800, tz=UTC), 35),
        (datetime.fromtimestamp(820454400, tz=UTC), 30),
        (datetime(1972, 1, 1, tzinfo=UTC), 10),
    ],
)
def test_tai_offsets(moment: datetime, expected: int) -> None:
    assert international_atomic_time(moment) - moment == timedelta(seconds=expected)
    assert leap_second_correction(moment, TAI_EPOCH) == expected


def test_tai_2021_is_utc_plus_37_seconds(moment: datetime) -> None:
    assert international_atomic_time(moment) == moment + timedelta(seconds=37)


def test_tai_before_1972_is_unchanged() -> None:
    early = datetime(1969, 7, 20, 20, 17, tzinfo=UTC)
    assert international_atomic_time(early) == early


def test_terrestrial_time_adds_32_184_seconds(moment: datetime) -> None:
    assert terrestrial_time(moment) == moment + timedelta(seconds=37 + 32.184)


def test_gps_time_offsets(moment: datetime) -> None:
    assert gps_time(moment) == moment + timedelta(seconds=18)
    assert gps_time(GPS_EPOCH) == GPS_EPOCH
    before = datetime(1979, 12, 31, tzinfo=UTC)
    assert gps_time(before) == before


def test_leap_second_correction_is_zero_before_first_record() -> None:
    assert leap_second_correction(datetime(1971, 6, 1, tzinfo=UTC), TAI_EPOCH) == 0


def test_leap_second_correction_is_zero_before_the_scale_origin() -> None:
    assert leap_second_correction(datetime(1975, 1, 1, tzinfo=UTC), GPS_EPOCH) == 0
    assert leap_second_correction(datetime(1979, 12, 31, tzinfo=UTC), GPS_EPOCH) == 0
    assert leap_second_correction(GPS_EPOCH, GPS_EPOCH) == 0


def test_leap_second_correction_with_injected_table() -> None:
    table = LeapSecondTable(
        (
            LeapSecondRecord.from_ntp(3_000_000_000, 1),
            LeapSecondRecord.from_ntp(3_100_000_000, 2),
        )
    )
    origin = datetime(1990, 1, 1, tzinfo=UTC)
    assert leap_second_correction(datetime(2021, 1, 1, tzinfo=UTC), origin, table) == 2
    assert leap_second_correction(datetime(1996, 1, 1, tzinfo=UTC), origin, table) == 1
    assert international_atomic_time(datetime(2021, 1, 1, tzinfo=UTC), table) == datetime(
        2021, 1, 1, 0, 0, 2, tzinfo=UTC
    )


def test_time_scales_bundle(moment: datetime) -> None:
    scales = time_scales(moment)
    assert scales.utc == moment
    assert scales.jd == 2459348.5
    assert scales.mjd == 59348.0
    assert scales.tai == moment + timedelta(seconds=37)
    assert scales.gps == moment + timedelta(seconds=18)
    assert scales.tt == scales.tai + timedelta(seconds=32.184)
