"""Human-readable message templates.

Templates use ``%``-style placeholders; render them with
:func:`format_message` so a mismatched argument count never raises
while a warning is being reported.
"""

from __future__ import annotations

FIELD_INVALID = "Cannot add field: %s is not a valid field"
FIELD_SCHEMA = "Cannot add field with key '%s': %s"
FIELD_REPEATED_KEY = (
    "Cannot add field with key '%s': another field already owns this key. Ignored."
)
FROZEN = "Cannot %s on field group '%s': the pass is frozen"


def format_message(template: str, *args: object) -> str:
    """Render *template* with *args*.

    Falls back to appending the arguments when the placeholder count
    does not match.

    Examples:
        >>> format_message(FIELD_REPEATED_KEY, "gate")
        "Cannot add field with key 'gate': another field already owns this key. Ignored."
        >>> format_message("no placeholders", 1)
        'no placeholders 1'
    """
    if not args:
        return template
    try:
        return template % args
    except TypeError:
        return " ".join([template, *(str(a) for a in args)])
