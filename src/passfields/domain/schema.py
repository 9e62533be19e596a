"""Field schema — the pydantic model every field group element conforms to.

Attribute names are snake_case; the camelCase keys found in ``pass.json``
are accepted as aliases, so raw dictionaries validate directly.

All models use Pydantic with frozen config for immutability.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from passfields.domain import messages
from passfields.domain.errors import SchemaValidationError
from passfields.domain.types import DataDetectorType, DateStyle, NumberStyle, TextAlignment

_CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")
_CHANGE_MESSAGE_PLACEHOLDER = "%@"

FieldValue = str | int | float


class PassField(BaseModel):
    """A single entry of a field group.

    ``key`` identifies the field and must be unique across every group of
    the owning pass. ``value`` is a localizable string, an ISO 8601 date
    string, or a number. Everything else only affects presentation.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    key: str = Field(min_length=1)
    value: FieldValue
    label: str | None = None
    attributed_value: FieldValue | None = None
    change_message: str | None = None
    data_detector_types: list[DataDetectorType] | None = None
    text_alignment: TextAlignment | None = None
    date_style: DateStyle | None = None
    time_style: DateStyle | None = None
    ignores_time_zone: bool | None = None
    is_relative: bool | None = None
    number_style: NumberStyle | None = None
    currency_code: str | None = None
    semantics: dict[str, Any] | None = None

    @field_validator("key")
    @classmethod
    def _key_not_blank(cls, v: str) -> str:
        if not v.strip():
            msg = "key must not be blank"
            raise ValueError(msg)
        return v

    @field_validator("change_message")
    @classmethod
    def _change_message_placeholder(cls, v: str | None) -> str | None:
        if v is not None and _CHANGE_MESSAGE_PLACEHOLDER not in v:
            msg = f"changeMessage must contain the '{_CHANGE_MESSAGE_PLACEHOLDER}' placeholder"
            raise ValueError(msg)
        return v

    @field_validator("currency_code")
    @classmethod
    def _currency_code_format(cls, v: str | None) -> str | None:
        if v is not None and not _CURRENCY_PATTERN.match(v):
            msg = "currencyCode must be an ISO 4217 code (three uppercase letters)"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def _currency_excludes_number_style(self) -> PassField:
        if self.currency_code is not None and self.number_style is not None:
            msg = "currencyCode and numberStyle cannot be combined"
            raise ValueError(msg)
        return self


def describe_errors(exc: ValidationError) -> str:
    """Collapse a pydantic ``ValidationError`` into one readable line."""
    parts: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def _candidate_key(value: Any) -> str:
    if isinstance(value, BaseModel):
        return str(getattr(value, "key", "?"))
    if isinstance(value, dict):
        return str(value.get("key", "?"))
    return "?"


def assert_validity[T: BaseModel](model: type[T], value: Any) -> T:
    """Validate *value* against *model*, returning the model instance.

    Instances of *model* are re-validated so that models built with
    ``model_construct`` cannot sneak past the schema.

    Raises:
        SchemaValidationError: If *value* does not conform. ``reason``
            holds the validator's description of every failure.
    """
    data = value.model_dump(by_alias=True) if isinstance(value, model) else value
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        reason = describe_errors(exc)
        message = messages.format_message(messages.FIELD_SCHEMA, _candidate_key(value), reason)
        raise SchemaValidationError(message, reason=reason) from exc

