"""PassDocument — owner of the frozen flag and of the shared key pool.

A document holds one :class:`FieldsArray` per :class:`FieldGroup`. All of
them share the document's :class:`KeyPool`, so a key used in the header
cannot be reused on the back, and all of them refuse mutation once
:meth:`PassDocument.freeze` has been called (e.g. after packaging).
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from passfields.domain.contracts import FieldLogger
from passfields.domain.fields_array import FieldsArray
from passfields.domain.keys import KeyPool
from passfields.domain.types import FieldGroup, SplicePolicy


class PassDocument:
    """In-memory pass with five field groups sharing one key pool."""

    def __init__(
        self,
        *,
        logger: FieldLogger | None = None,
        splice_policy: SplicePolicy = SplicePolicy.VALIDATE_FIRST,
    ) -> None:
        self._frozen = False
        self._pool = KeyPool()
        self._groups: dict[FieldGroup, FieldsArray] = {
            group: FieldsArray(
                self,
                self._pool,
                logger,
                name=group.value,
                splice_policy=splice_policy,
            )
            for group in FieldGroup
        }

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Mark the document immutable. There is no way back."""
        self._frozen = True

    @property
    def used_keys(self) -> frozenset[str]:
        """Snapshot of the keys held across all groups."""
        return self._pool.snapshot()

    @property
    def header_fields(self) -> FieldsArray:
        return self._groups[FieldGroup.HEADER]

    @property
    def primary_fields(self) -> FieldsArray:
        return self._groups[FieldGroup.PRIMARY]

    @property
    def secondary_fields(self) -> FieldsArray:
        return self._groups[FieldGroup.SECONDARY]

    @property
    def auxiliary_fields(self) -> FieldsArray:
        return self._groups[FieldGroup.AUXILIARY]

    @property
    def back_fields(self) -> FieldsArray:
        return self._groups[FieldGroup.BACK]

    def group(self, name: FieldGroup | str) -> FieldsArray:
        """Look up a group by :class:`FieldGroup` or its ``pass.json`` name.

        Raises:
            KeyError: If *name* is not a field group.
        """
        try:
            return self._groups[FieldGroup(name)]
        except ValueError:
            raise KeyError(name) from None

    def groups(self) -> Iterator[tuple[FieldGroup, FieldsArray]]:
        """Yield ``(group, fields)`` pairs in rendering order."""
        yield from self._groups.items()

    def load_fields(self, section: Mapping[str, Any]) -> dict[str, int]:
        """Push the field lists of a ``pass.json`` style section.

        Groups are filled in :class:`FieldGroup` order; keys of *section*
        that are not field groups are ignored. A group value that is not a
        list is treated as a single candidate.

        Returns:
            Resulting length of each group that appeared in *section*.
        """
        lengths: dict[str, int] = {}
        for group, fields in self._groups.items():
            if group.value not in section:
                continue
            raw = section[group.value]
            candidates = raw if isinstance(raw, list) else [raw]
            lengths[group.value] = fields.push(*candidates)
        return lengths
