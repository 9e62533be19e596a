"""passfields — self-validating field groups for wallet pass documents."""

from __future__ import annotations

from passfields.domain.document import PassDocument
from passfields.domain.errors import (
    DuplicateKeyError,
    FieldRejected,
    FrozenViolation,
    InvalidItem,
    PassFieldsError,
    SchemaValidationError,
)
from passfields.domain.fields_array import FieldsArray
from passfields.domain.keys import KeyPool
from passfields.domain.schema import PassField
from passfields.domain.types import FieldGroup, SplicePolicy

__version__ = "0.1.0"

__all__ = [
    "DuplicateKeyError",
    "FieldGroup",
    "FieldRejected",
    "FieldsArray",
    "FrozenViolation",
    "InvalidItem",
    "KeyPool",
    "PassDocument",
    "PassField",
    "PassFieldsError",
    "SchemaValidationError",
    "SplicePolicy",
    "__version__",
]
