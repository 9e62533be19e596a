"""Collaborator contracts for field groups: owner handle, logger, frozen guard."""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from passfields.domain import messages
from passfields.domain.errors import FrozenViolation


@runtime_checkable
class FrozenOwner(Protocol):
    """The document a field group belongs to."""

    @property
    def is_frozen(self) -> bool: ...


@runtime_checkable
class FieldLogger(Protocol):
    """Anything accepting warning events with keyword context.

    structlog loggers qualify as is. Plain :mod:`logging` loggers are
    wrapped in :class:`StdlibFieldLogger` by :func:`as_field_logger`.
    """

    def warning(self, event: str, **kw: Any) -> Any: ...


class NullLogger:
    """Drops every event. Used when a field group has no logger."""

    def warning(self, event: str, **kw: Any) -> None:
        return None


NULL_LOGGER = NullLogger()


class StdlibFieldLogger:
    """Route field warnings to a :mod:`logging` logger.

    The event text is the message; keyword context lands on the record
    through ``extra`` (``record.group``, ``record.key``, ...).
    """

    def __init__(self, logger: logging.Logger | logging.LoggerAdapter[Any]) -> None:
        self._logger = logger

    def warning(self, event: str, **kw: Any) -> None:
        self._logger.warning("%s", event, extra=kw)


def as_field_logger(logger: Any) -> FieldLogger:
    """Normalize the optional logger handed to a field group."""
    if logger is None:
        return NULL_LOGGER
    if isinstance(logger, logging.Logger | logging.LoggerAdapter):
        return StdlibFieldLogger(logger)
    return logger


def assert_unfrozen(owner: FrozenOwner, action: str, group: str) -> None:
    """Raise :class:`FrozenViolation` if *owner* no longer accepts mutations."""
    if owner.is_frozen:
        raise FrozenViolation(messages.format_message(messages.FROZEN, action, group))
