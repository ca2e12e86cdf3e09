"""Tests for replacement specifications."""

import pytest

from array_replace.replacement import Batch, Single, to_replacement


class TestSingle:
    def test_items(self) -> None:
        assert list(Single(1, "x").items()) == [(1, "x")]

    def test_is_frozen(self) -> None:
        single = Single(1, "x")
        with pytest.raises(AttributeError):
            single.index = 2  # type: ignore[misc]


class TestBatch:
    def test_items_in_mapping_order(self) -> None:
        batch = Batch({2: "c", 0: "a"})
        assert list(batch.items()) == [(2, "c"), (0, "a")]

    def test_default_is_empty(self) -> None:
        assert list(Batch().items()) == []

    def test_equality(self) -> None:
        assert Batch({0: "a"}) == Batch({0: "a"})
        assert Batch({0: "a"}) != Batch({0: "b"})

    def test_is_unhashable(self) -> None:
        with pytest.raises(TypeError, match="unhashable"):
            hash(Batch({0: "a"}))

    def test_is_frozen(self) -> None:
        batch = Batch({0: "a"})
        with pytest.raises(AttributeError):
            batch.mapping = {}  # type: ignore[misc]


class TestToReplacement:
    def test_index_and_value(self) -> None:
        assert to_replacement(1, "x") == Single(1, "x")

    def test_none_is_a_valid_value(self) -> None:
        assert to_replacement(1, None) == Single(1, None)

    def test_mapping_becomes_batch(self) -> None:
        assert to_replacement({0: "a"}) == Batch({0: "a"})

    def test_mapping_ignores_value(self) -> None:
        assert to_replacement({0: "a"}, "ignored") == Batch({0: "a"})

    def test_mapping_is_snapshotted(self) -> None:
        mapping = {0: "a"}
        batch = to_replacement(mapping)
        mapping[1] = "b"
        assert list(batch.items()) == [(0, "a")]

    def test_single_passes_through(self) -> None:
        single = Single(0, "a")
        assert to_replacement(single) is single

    def test_batch_passes_through(self) -> None:
        batch = Batch({0: "a"})
        assert to_replacement(batch, "ignored") is batch

    def test_index_without_value_raises(self) -> None:
        with pytest.raises(TypeError, match="value is required"):
            to_replacement(1)
