from __future__ import annotations

import io
import logging

import pytest

from apparentsky.boot import configure_logging, resolve_level
from apparentsky.runtime_config import RuntimeSettings


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, logging.WARNING),
        ("debug", logging.DEBUG),
        (" Info ", logging.INFO),
        ("15", 15),
        (logging.ERROR, logging.ERROR),
        ("loud", logging.WARNING),
        ("", logging.WARNING),
    ],
)
def test_configure_logging_levels(value, expected) -> None:
    assert configure_logging(level=value) == expected
    assert logging.getLogger().level == expected


def test_configure_logging_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "error")
    assert configure_logging() == logging.ERROR


def test_explicit_level_beats_runtime_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "error")
    assert configure_logging(level="info", settings=RuntimeSettings()) == logging.INFO
    assert configure_logging(settings=RuntimeSettings()) == logging.ERROR


def test_resolve_level_accepts_numbers_and_names() -> None:
    assert resolve_level("critical") == logging.CRITICAL
    assert resolve_level(" 5 ") == 5
    assert resolve_level("verbose") == logging.WARNING


def test_records_go_to_the_configured_stream() -> None:
    stream = io.StringIO()
    configure_logging(level="INFO", stream=stream)
    logging.getLogger("apparentsky.test").info("hello")
    assert stream.getvalue() == "INFO     apparentsky.test: hello\n"


def test_expired_table_warning_is_logged(tmp_path, caplog: pytest.LogCaptureFixture) -> None:
    from apparentsky.core.leap_seconds import load_table

    path = tmp_path / "old.list"
    path.write_text("#@\t3155673600\n2272060800\t10\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="apparentsky.core.leap_seconds"):
        table = load_table(path)
    assert table.is_expired()
    assert any("expired" in record.getMessage() for record in caplog.records)
