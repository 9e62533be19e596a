"""Error taxonomy for field group mutations.

Only :class:`FrozenViolation` ever reaches callers of ``FieldsArray``.
The :class:`FieldRejected` family is raised per candidate item and
absorbed by the collection into a logged warning.
"""

from __future__ import annotations


class PassFieldsError(Exception):
    """Base class for all passfields errors."""


class FrozenViolation(PassFieldsError):
    """Mutation attempted on a field group whose document is frozen."""


class FieldRejected(PassFieldsError, ValueError):
    """A candidate field was refused; recoverable, the item is skipped."""


class InvalidItem(FieldRejected):
    """The candidate is absent (``None``)."""


class SchemaValidationError(FieldRejected):
    """The candidate does not conform to the field schema."""

    def __init__(self, message: str, *, reason: str = "") -> None:
        super().__init__(message)
        self.reason = reason


class DuplicateKeyError(FieldRejected):
    """The candidate's key is already used by a sibling field."""

    def __init__(self, message: str, *, key: str) -> None:
        super().__init__(message)
        self.key = key
