"""Field group names and pass.json formatting enums.

Values are the literal strings used in ``pass.json`` so that
validated fields can be compared against raw documents directly.
"""

from __future__ import annotations

from enum import StrEnum


class FieldGroup(StrEnum):
    """Named field groups of a pass style section, in rendering order."""

    HEADER = "headerFields"
    PRIMARY = "primaryFields"
    SECONDARY = "secondaryFields"
    AUXILIARY = "auxiliaryFields"
    BACK = "backFields"


class PassStyle(StrEnum):
    """Top-level style keys that hold the field groups in ``pass.json``."""

    BOARDING_PASS = "boardingPass"
    COUPON = "coupon"
    EVENT_TICKET = "eventTicket"
    GENERIC = "generic"
    STORE_CARD = "storeCard"


class TextAlignment(StrEnum):
    LEFT = "PKTextAlignmentLeft"
    CENTER = "PKTextAlignmentCenter"
    RIGHT = "PKTextAlignmentRight"
    NATURAL = "PKTextAlignmentNatural"


class DateStyle(StrEnum):
    """Shared by ``dateStyle`` and ``timeStyle``."""

    NONE = "PKDateStyleNone"
    SHORT = "PKDateStyleShort"
    MEDIUM = "PKDateStyleMedium"
    LONG = "PKDateStyleLong"
    FULL = "PKDateStyleFull"


class NumberStyle(StrEnum):
    DECIMAL = "PKNumberStyleDecimal"
    PERCENT = "PKNumberStylePercent"
    SCIENTIFIC = "PKNumberStyleScientific"
    SPELL_OUT = "PKNumberStyleSpellOut"


class DataDetectorType(StrEnum):
    PHONE_NUMBER = "PKDataDetectorTypePhoneNumber"
    LINK = "PKDataDetectorTypeLink"
    ADDRESS = "PKDataDetectorTypeAddress"
    CALENDAR_EVENT = "PKDataDetectorTypeCalendarEvent"


class SplicePolicy(StrEnum):
    """Ordering of key release vs. validation in ``FieldsArray.splice``.

    - ``validate-first``: new items are checked against the pool before the
      deleted range gives its keys back, so a key cannot be reused within
      the same splice call.
    - ``release-first``: the deleted range's keys are released first, so a
      field can be replaced by a new field under the same key.
    """

    VALIDATE_FIRST = "validate-first"
    RELEASE_FIRST = "release-first"
