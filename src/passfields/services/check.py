"""CheckService — load a pass.json through validated field groups.

Every field of the pass style section goes through the same
``FieldsArray.push`` path an editing client would use, so the report shows
exactly which fields a document built from this file would keep.
"""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from passfields.domain.document import PassDocument
from passfields.domain.types import PassStyle
from passfields.services.result import ErrorCode, ServiceError, ServiceResult

if TYPE_CHECKING:
    from passfields.config.settings import PassFieldsSettings

logger = structlog.get_logger(__name__)


class RejectionRecorder:
    """Field logger that keeps every warning and forwards it to structlog."""

    def __init__(self, delegate: Any = logger) -> None:
        self._delegate = delegate
        self.events: list[str] = []

    def warning(self, event: str, **kw: Any) -> None:
        self.events.append(event)
        self._delegate.warning(event, **kw)


class CheckService:
    """Validate the field groups of a ``pass.json`` file."""

    def __init__(self, settings: PassFieldsSettings) -> None:
        self._settings = settings

    def check(self, path: Path, *, strict: bool | None = None) -> ServiceResult:
        """Load *path* and report accepted and rejected fields.

        Args:
            path: A ``pass.json`` file.
            strict: Fail when any field is rejected. Defaults to
                ``[check] fail_on_rejected``.
        """
        op = "check"
        if strict is None:
            strict = self._settings.check.fail_on_rejected

        if not path.is_file():
            return ServiceResult.failure(op, ErrorCode.NOT_FOUND, f"No such file: {path}")

        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            return ServiceResult.failure(
                op, ErrorCode.INVALID_JSON, f"Invalid JSON in {path}: {exc}"
            )

        if not isinstance(payload, dict):
            return ServiceResult.failure(
                op, ErrorCode.INVALID_PASS, "pass.json must contain a JSON object"
            )

        styles = [style for style in PassStyle if style.value in payload]
        if len(styles) != 1:
            found = [s.value for s in styles]
            return ServiceResult.failure(
                op,
                ErrorCode.INVALID_PASS,
                "pass.json must contain exactly one style section",
                styles=found,
            )
        style = styles[0]
        section = payload[style.value]
        if not isinstance(section, dict):
            return ServiceResult.failure(
                op, ErrorCode.INVALID_PASS, f"'{style.value}' must be a JSON object"
            )

        started = time.perf_counter()
        recorder = RejectionRecorder()
        document = PassDocument(
            logger=recorder,
            splice_policy=self._settings.field_groups.splice_policy,
        )
        lengths = document.load_fields(section)
        document.freeze()
        elapsed_ms = round((time.perf_counter() - started) * 1000, 3)

        groups: dict[str, dict[str, Any]] = {}
        for name, count in lengths.items():
            keys = document.group(name).keys()
            groups[name] = {"count": count, "keys": keys}
            logger.debug("group_loaded", group=name, count=count, keys=keys)
        data = {
            "path": str(path),
            "style": style.value,
            "groups": groups,
            "accepted": sum(lengths.values()),
            "rejected": len(recorder.events),
        }
        logger.debug(
            "pass_checked", path=str(path), accepted=data["accepted"], rejected=data["rejected"]
        )

        if strict and recorder.events:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                warnings=recorder.events,
                error=ServiceError(
                    code=ErrorCode.REJECTED_FIELDS,
                    message=f"{len(recorder.events)} field(s) rejected",
                    detail={"rejected": recorder.events},
                ),
                meta={"duration_ms": elapsed_ms},
            )
        return ServiceResult(
            ok=True,
            op=op,
            data=data,
            warnings=recorder.events,
            meta={"duration_ms": elapsed_ms},
        )
