"""structlog configuration for passfields.

Everything logged under ``passfields`` goes to one stderr handler owned by
that logger; the root logger is left alone. Level policy:

- ``--quiet``: ERROR only. Rejected fields still appear in the result.
- default: WARNING, one line per rejected field.
- ``--verbose``: DEBUG, adding the per-group load events of ``check``.

Rejected-field warnings carry ``group``, ``error`` and ``key`` or
``reason``. JSON output (``--log-json``) keeps them as fields; the console
renderer condenses them to ``<group>: <message>`` because the message
already names the key and the reason.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from passfields.domain.errors import DuplicateKeyError, InvalidItem, SchemaValidationError

PACKAGE_LOGGER = "passfields"

REJECTION_ERRORS = frozenset(
    cls.__name__ for cls in (InvalidItem, SchemaValidationError, DuplicateKeyError)
)


def log_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Level for the ``passfields`` logger. ``verbose`` wins over ``quiet``."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def condense_field_rejection(
    _logger: WrappedLogger, _method: str, event_dict: EventDict
) -> EventDict:
    """Fold a rejected-field event into a single ``group: message`` line."""
    if event_dict.get("error") not in REJECTION_ERRORS or "group" not in event_dict:
        return event_dict
    group = event_dict.pop("group")
    for name in ("error", "key", "reason"):
        event_dict.pop(name, None)
    event_dict["event"] = f"{group}: {event_dict['event']}"
    return event_dict


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog and the ``passfields`` stderr handler.

    Safe to call more than once; the previous handler is replaced.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    render_chain: list[Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    ]
    if log_json:
        render_chain.append(structlog.processors.JSONRenderer())
    else:
        render_chain.append(condense_field_rejection)
        render_chain.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=render_chain,
        )
    )

    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg.handlers.clear()
    pkg.addHandler(handler)
    pkg.setLevel(log_level(verbose=verbose, quiet=quiet))
    pkg.propagate = False
