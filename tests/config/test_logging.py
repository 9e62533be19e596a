"""Tests for structlog configuration and the rejected-field rendering."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import structlog

from passfields.config.logging import (
    condense_field_rejection,
    configure_logging,
    log_level,
)
from passfields.config.settings import PassFieldsSettings
from passfields.domain.document import PassDocument
from passfields.services.check import CheckService


def _json_lines(err: str) -> list[dict]:
    return [json.loads(line) for line in err.splitlines() if line.strip()]


class TestLogLevel:
    @pytest.mark.parametrize(
        ("verbose", "quiet", "expected"),
        [
            (False, False, logging.WARNING),
            (True, False, logging.DEBUG),
            (False, True, logging.ERROR),
            (True, True, logging.DEBUG),
        ],
    )
    def test_policy(self, verbose: bool, quiet: bool, expected: int) -> None:
        assert log_level(verbose=verbose, quiet=quiet) == expected


class TestCondenseFieldRejection:
    def test_folds_group_into_event(self) -> None:
        event = {
            "event": "Cannot add field with key 'k': another field already owns this key. Ignored.",
            "group": "backFields",
            "error": "DuplicateKeyError",
            "key": "k",
        }
        out = condense_field_rejection(None, "warning", event)
        assert out == {"event": f"backFields: {event['event']}"}

    def test_other_events_untouched(self) -> None:
        event = {"event": "group_loaded", "group": "backFields", "count": 2}
        assert condense_field_rejection(None, "debug", dict(event)) == event


class TestConfigureLogging:
    def test_handler_lives_on_package_logger(self) -> None:
        root_handlers = logging.getLogger().handlers[:]
        configure_logging()
        pkg = logging.getLogger("passfields")
        assert len(pkg.handlers) == 1
        assert pkg.propagate is False
        assert logging.getLogger().handlers == root_handlers

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True)
        configure_logging(log_json=True)
        pkg = logging.getLogger("passfields")
        assert len(pkg.handlers) == 1
        assert pkg.level == logging.WARNING

    def test_json_rejection_keeps_fields(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        doc = PassDocument(logger=structlog.get_logger("passfields.domain"))
        doc.back_fields.push({"key": "k", "value": "v"}, {"key": "k", "value": "w"})

        (parsed,) = _json_lines(capfd.readouterr().err)
        assert parsed["level"] == "warning"
        assert parsed["key"] == "k"
        assert parsed["group"] == "backFields"
        assert parsed["error"] == "DuplicateKeyError"
        assert parsed["logger"] == "passfields.domain"

    def test_console_rejection_is_condensed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging()
        doc = PassDocument(logger=structlog.get_logger("passfields.domain"))
        doc.header_fields.push(None)

        err = capfd.readouterr().err
        assert "headerFields: Cannot add field: None is not a valid field" in err
        assert "InvalidItem" not in err

    def test_quiet_hides_rejections(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(quiet=True, log_json=True)
        doc = PassDocument(logger=structlog.get_logger("passfields.domain"))
        doc.header_fields.push(None)
        assert capfd.readouterr().err == ""

    def test_verbose_reports_group_loads(
        self, tmp_path: Path, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        pass_json = tmp_path / "pass.json"
        pass_json.write_text(
            json.dumps({"generic": {"primaryFields": [{"key": "name", "value": "Ada"}]}})
        )
        CheckService(PassFieldsSettings.from_cli(start=tmp_path)).check(pass_json)

        events = _json_lines(capfd.readouterr().err)
        loads = [e for e in events if e["event"] == "group_loaded"]
        assert {e["group"] for e in loads} >= {"primaryFields"}
        primary = next(e for e in loads if e["group"] == "primaryFields")
        assert primary["count"] == 1
        assert primary["keys"] == ["name"]

    def test_debug_suppressed_by_default(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        logging.getLogger("passfields.services.check").debug("noise")
        assert capfd.readouterr().err == ""
