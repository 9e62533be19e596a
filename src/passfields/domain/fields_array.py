"""FieldsArray — the validated, ordered collection behind each field group.

Every mutation is intercepted to keep three invariants:

- each element is a schema-conformant :class:`PassField`;
- no key appears twice across the groups sharing one :class:`KeyPool`;
- nothing changes once the owning document is frozen.

Insertions are best-effort batches. Each candidate is checked on its own;
rejected candidates are reported to the logger and skipped, the rest are
committed together in their input order. The frozen guard is the only
failure that reaches the caller, and it fires before anything is touched.
An error raised by the logger itself propagates with the pool restored.

PRECONDITION: groups sharing a pool are not thread-safe. Callers serialize
all mutating calls across sibling groups of the same document.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, overload

from passfields.domain import messages
from passfields.domain.contracts import (
    FieldLogger,
    FrozenOwner,
    as_field_logger,
    assert_unfrozen,
)
from passfields.domain.errors import (
    DuplicateKeyError,
    FieldRejected,
    InvalidItem,
    SchemaValidationError,
)
from passfields.domain.keys import KeyPool
from passfields.domain.schema import PassField, assert_validity
from passfields.domain.types import SplicePolicy


class FieldsArray:
    """Ordered field group bound to one owner and one shared key pool.

    Only ``push``, ``pop``, ``shift``, ``unshift`` and ``splice`` mutate
    the group. Reads go through the usual sequence protocol: ``len()``,
    indexing, iteration, ``in``.

    Usage::

        pool = KeyPool()
        primary = FieldsArray(document, pool, logger, name="primaryFields")
        primary.push({"key": "gate", "label": "Gate", "value": "B12"})
    """

    def __init__(
        self,
        owner: FrozenOwner,
        pool: KeyPool,
        logger: FieldLogger | None = None,
        *,
        name: str = "fields",
        splice_policy: SplicePolicy = SplicePolicy.VALIDATE_FIRST,
    ) -> None:
        self._owner = owner
        self._pool = pool
        self._logger: FieldLogger = as_field_logger(logger)
        self._name = name
        self._splice_policy = SplicePolicy(splice_policy)
        self._items: list[PassField] = []

    # --- Read-only surface ---

    @property
    def name(self) -> str:
        return self._name

    @property
    def splice_policy(self) -> SplicePolicy:
        return self._splice_policy

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[PassField]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    @overload
    def __getitem__(self, index: int) -> PassField: ...

    @overload
    def __getitem__(self, index: slice) -> list[PassField]: ...

    def __getitem__(self, index: int | slice) -> PassField | list[PassField]:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldsArray):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FieldsArray(name={self._name!r}, keys={self.keys()!r})"

    def keys(self) -> list[str]:
        """Keys of the held fields, in order."""
        return [f.key for f in self._items]

    def to_list(self) -> list[PassField]:
        """Shallow copy of the held fields."""
        return list(self._items)

    # --- Mutations ---

    def push(self, *items: Any) -> int:
        """Append the valid subset of *items*. Returns the new length."""
        assert_unfrozen(self._owner, "push", self._name)
        self._items.extend(self._register(items))
        return len(self._items)

    def unshift(self, *items: Any) -> int:
        """Prepend the valid subset of *items*, keeping their order."""
        assert_unfrozen(self._owner, "unshift", self._name)
        self._items[0:0] = self._register(items)
        return len(self._items)

    def pop(self) -> PassField:
        """Remove and return the last field, releasing its key.

        Raises:
            IndexError: If the group is empty.
        """
        assert_unfrozen(self._owner, "pop", self._name)
        field = self._items.pop()
        self._pool._release(field.key)
        return field

    def shift(self) -> PassField:
        """Remove and return the first field, releasing its key.

        Raises:
            IndexError: If the group is empty.
        """
        assert_unfrozen(self._owner, "shift", self._name)
        field = self._items.pop(0)
        self._pool._release(field.key)
        return field

    def splice(self, start: int, delete_count: int, *items: Any) -> list[PassField]:
        """Replace ``delete_count`` fields from *start* with the valid *items*.

        *start* is normalized like a slice bound: negative values count
        from the end and out-of-range values are clamped. A negative
        *delete_count* deletes nothing.

        Key ordering follows :attr:`splice_policy`. Under
        ``validate-first`` the new items are checked before the deleted
        fields release their keys, so a key leaving in this call cannot be
        reused by an item arriving in it. Under ``release-first`` it can.

        Returns:
            The removed fields, in order.
        """
        assert_unfrozen(self._owner, "splice", self._name)

        size = len(self._items)
        if start < 0:
            start = max(size + start, 0)
        else:
            start = min(start, size)
        end = start + min(max(delete_count, 0), size - start)
        doomed = self._items[start:end]

        if self._splice_policy is SplicePolicy.RELEASE_FIRST:
            self._release(doomed)
            try:
                accepted = self._register(items)
            except BaseException:
                self._reclaim(doomed)
                raise
        else:
            accepted = self._register(items)
            self._release(doomed)

        self._items[start:end] = accepted
        return doomed

    # --- Internals ---

    def _register(self, items: Iterable[Any]) -> list[PassField]:
        """Validate candidates in order and claim their keys.

        Rejected candidates are logged as warnings and dropped. If anything
        else escapes (a failing logger, say), the keys claimed so far are
        released before the error propagates.
        """
        accepted: list[PassField] = []
        try:
            for item in items:
                try:
                    field = self._check(item)
                except FieldRejected as exc:
                    self._warn(exc)
                    continue
                accepted.append(field)
        except BaseException:
            self._release(accepted)
            raise
        return accepted

    def _check(self, item: Any) -> PassField:
        if not item and not isinstance(item, Mapping):
            raise InvalidItem(messages.format_message(messages.FIELD_INVALID, repr(item)))
        field = assert_validity(PassField, item)
        if not self._pool._claim(field.key):
            raise DuplicateKeyError(
                messages.format_message(messages.FIELD_REPEATED_KEY, field.key),
                key=field.key,
            )
        return field

    def _release(self, fields: Iterable[PassField]) -> None:
        for field in fields:
            self._pool._release(field.key)

    def _reclaim(self, fields: Iterable[PassField]) -> None:
        for field in fields:
            self._pool._claim(field.key)

    def _warn(self, exc: FieldRejected) -> None:
        extra: dict[str, Any] = {"group": self._name, "error": type(exc).__name__}
        if isinstance(exc, DuplicateKeyError):
            extra["key"] = exc.key
        elif isinstance(exc, SchemaValidationError):
            extra["reason"] = exc.reason
        self._logger.warning(str(exc), **extra)
