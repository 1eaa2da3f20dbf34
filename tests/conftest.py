from __future__ import annotations

from datetime import UTC, datetime

import pytest

from apparentsky.models import EquatorialCoordinate, GeographicCoordinate

REFERENCE_MOMENT = datetime(2021, 5, 14, 0, 0, tzinfo=UTC)


@pytest.fixture
def moment() -> datetime:
    return REFERENCE_MOMENT


@pytest.fixture
def mauna_kea() -> GeographicCoordinate:
    return GeographicCoordinate(latitude=19.820611, longitude=-155.468094)


@pytest.fixture
def betelgeuse() -> EquatorialCoordinate:
    return EquatorialCoordinate(ra=88.7929583, dec=7.4070639)


@pytest.fixture
def polaris() -> EquatorialCoordinate:
    return EquatorialCoordinate(ra=37.95456067, dec=89.26410897)


@pytest.fixture
def sigma_octantis() -> EquatorialCoordinate:
    return EquatorialCoordinate(ra=317.195, dec=-88.9569444)


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APPARENTSKY_HOME", str(tmp_path / "home"))
    monkeypatch.delenv("APPARENTSKY_SETTINGS_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
