"""Shared pytest fixtures for passfields tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

from passfields.domain.document import PassDocument

FieldFactory = Callable[..., dict[str, Any]]


class RecordingLogger:
    """FieldLogger that keeps ``(event, kw)`` pairs for assertions."""

    def __init__(self) -> None:
        self.records: list[tuple[str, dict[str, Any]]] = []

    def warning(self, event: str, **kw: Any) -> None:
        self.records.append((event, kw))

    @property
    def events(self) -> list[str]:
        return [event for event, _ in self.records]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def document(recorder: RecordingLogger) -> PassDocument:
    """Unfrozen document whose groups report to ``recorder``."""
    return PassDocument(logger=recorder)


@pytest.fixture
def structlog_document() -> PassDocument:
    """Document wired to a real structlog logger (use with capture_logs)."""
    return PassDocument(logger=structlog.get_logger("passfields.tests"))


@pytest.fixture
def make_field() -> FieldFactory:
    """Build a valid raw field dict for *key*; kwargs override attributes."""

    def _make(key: str, **overrides: Any) -> dict[str, Any]:
        data: dict[str, Any] = {"key": key, "label": key.upper(), "value": f"value-{key}"}
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory so no stray passfields.toml is found."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PASSFIELDS_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None]:
    """Undo any configure_logging() done by CLI invocations."""
    pkg = logging.getLogger("passfields")
    handlers = pkg.handlers[:]
    level = pkg.level
    propagate = pkg.propagate
    yield
    pkg.handlers = handlers
    pkg.setLevel(level)
    pkg.propagate = propagate
    structlog.reset_defaults()
