"""Tests for the Record dataclass and its wire shape."""

from __future__ import annotations

import dataclasses

import pytest

from pgsql_extract.record import Record


class TestRecord:
    def test_defaults(self) -> None:
        record = Record()
        assert record.type is None
        assert record.length is None
        assert record.frontend is None
        assert record.data == ()

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Record().type = "Q"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Record(type="Q", data=(("a", "1"),)) == Record(
            type="Q", data=(("a", "1"),)
        )


class TestToDict:
    def test_unset_fields_omitted(self) -> None:
        assert Record().to_dict() == {"data": []}

    def test_key_order(self) -> None:
        record = Record(type="Q", length=5, frontend=True)
        assert list(record.to_dict()) == ["type", "frontend", "length", "data"]

    def test_pairs_become_lists(self) -> None:
        record = Record(data=(("a", "1"), ("b", None), ("c", False)))
        assert record.to_dict()["data"] == [["a", "1"], ["b", None], ["c", False]]

    def test_nested_pairs(self) -> None:
        record = Record(data=(("a", (("b", (("c", "1"),)),)),))
        assert record.to_dict()["data"] == [["a", [["b", [["c", "1"]]]]]]

    def test_empty_nested(self) -> None:
        assert Record(data=(("a", ()),)).to_dict()["data"] == [["a", []]]

    def test_data_order_preserved(self) -> None:
        names = ["z", "y", "x", "a"]
        record = Record(data=tuple((n, n) for n in names))
        assert [p[0] for p in record.to_dict()["data"]] == names
