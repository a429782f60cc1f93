"""Shared pytest fixtures for the full kvconfig test suite."""

from __future__ import annotations

import io
import itertools
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from kvconfig.telemetry.logger import ParseLogger
from tests.fixture_paths import sample_config_fixture_path as resolve_sample_config_path


@pytest.fixture
def sample_config_path() -> Path:
    """Provide the sample configuration file shipped with the tests."""

    return resolve_sample_config_path()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that writes text to a fresh config file under `tmp_path`."""

    counter = itertools.count()

    def _write(text: str, name: str | None = None) -> Path:
        path = tmp_path / (name or f"config_{next(counter)}.cfg")
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def log_sink() -> io.StringIO:
    """Provide an in-memory sink for parse diagnostics."""

    return io.StringIO()


@pytest.fixture
def quiet_logger(log_sink: io.StringIO) -> Iterator[ParseLogger]:
    """Provide a non-debug logger that writes into `log_sink`."""

    with ParseLogger(log_sink) as logger:
        yield logger


@pytest.fixture(autouse=True)
def _clear_kvconfig_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep `KVCONFIG_*` variables from the host environment out of tests."""

    for key in (
        "KVCONFIG_COMMENT_MARKER",
        "KVCONFIG_SEPARATOR",
        "KVCONFIG_ENCODING",
        "KVCONFIG_LEGACY_KEY_BOUNDARY",
        "KVCONFIG_DEBUG",
    ):
        monkeypatch.delenv(key, raising=False)
