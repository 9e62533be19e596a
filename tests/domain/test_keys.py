"""Tests for KeyPool."""

from __future__ import annotations

from passfields.domain.fields_array import FieldsArray
from passfields.domain.keys import KeyPool


class _Owner:
    is_frozen = False


class TestKeyPool:
    def test_claim_new_key(self) -> None:
        pool = KeyPool()
        assert pool._claim("a") is True
        assert "a" in pool
        assert len(pool) == 1

    def test_claim_taken_key(self) -> None:
        pool = KeyPool()
        pool._claim("a")
        assert pool._claim("a") is False
        assert len(pool) == 1

    def test_release(self) -> None:
        pool = KeyPool()
        pool._claim("a")
        pool._release("a")
        assert "a" not in pool
        assert pool._claim("a") is True

    def test_release_unknown_is_noop(self) -> None:
        pool = KeyPool()
        pool._release("ghost")
        assert len(pool) == 0

    def test_snapshot_is_detached(self) -> None:
        pool = KeyPool()
        pool._claim("a")
        snap = pool.snapshot()
        pool._claim("b")
        assert snap == frozenset({"a"})
        assert set(pool) == {"a", "b"}

    def test_repr_sorted(self) -> None:
        pool = KeyPool()
        pool._claim("b")
        pool._claim("a")
        assert repr(pool) == "KeyPool(['a', 'b'])"

    def test_no_public_mutators(self) -> None:
        pool = KeyPool()
        assert not hasattr(pool, "claim")
        assert not hasattr(pool, "release")
        assert not hasattr(pool, "add")

    def test_groups_mutate_the_pool(self) -> None:
        pool = KeyPool()
        fields = FieldsArray(_Owner(), pool)
        fields.push({"key": "a", "value": 1})
        assert pool.snapshot() == {"a"}
        fields.pop()
        assert len(pool) == 0
