"""KeyPool — field keys in use across the sibling groups of one pass.

INVARIANT: a key is in the pool if and only if some field currently held
by one of the groups sharing the pool carries that key.

The pool is a shared handle: the owning document creates one and hands
the same instance to each of its ``FieldsArray`` groups. Only those
groups call :meth:`_claim` and :meth:`_release`; everything else reads
the pool through ``in``, ``len()``, iteration and :meth:`snapshot`.

PRECONDITION: there is no internal locking. Callers must serialize every
mutating call across all groups that share a pool.
"""

from __future__ import annotations

from collections.abc import Iterator


class KeyPool:
    """Unordered set of field keys shared by reference between groups."""

    __slots__ = ("_keys",)

    def __init__(self) -> None:
        self._keys: set[str] = set()

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __repr__(self) -> str:
        return f"KeyPool({sorted(self._keys)!r})"

    def snapshot(self) -> frozenset[str]:
        """Immutable copy of the keys currently in use."""
        return frozenset(self._keys)

    def _claim(self, key: str) -> bool:
        """Register *key*. Returns False if it was already taken.

        Called only by ``FieldsArray``.
        """
        if key in self._keys:
            return False
        self._keys.add(key)
        return True

    def _release(self, key: str) -> None:
        """Give *key* back to the pool. Unknown keys are ignored.

        Called only by ``FieldsArray``.
        """
        self._keys.discard(key)
