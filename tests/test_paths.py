"""Tests for skillslots.core.paths: nested lookups and linear search."""

from __future__ import annotations

from collections import OrderedDict

import pytest

from skillslots.core.paths import MISSING, find_first, get_or, has_path


class TestGetOr:
    def test_empty_path_returns_root(self) -> None:
        root = {"a": 1}
        assert get_or(root, [], "default") is root

    def test_empty_path_returns_none_root(self) -> None:
        assert get_or(None, [], "default") is None

    def test_missing_top_level_key(self) -> None:
        sentinel = object()
        assert get_or({"a": 1}, ["b"], sentinel) is sentinel

    def test_nested_value(self) -> None:
        obj = {"a": {"b": {"c": 5}}}
        assert get_or(obj, ["a", "b", "c"], None) == 5
        assert get_or(obj, ["a", "b", "x"], None) is None
        assert get_or(obj, ["a", "x", "c"], None) is None

    def test_present_none_is_not_replaced(self) -> None:
        obj = {"a": {"b": None}}
        assert get_or(obj, ["a", "b"], "default") is None

    def test_missing_sentinel_distinguishes_absent_from_none(self) -> None:
        obj = {"a": None}
        assert get_or(obj, ["a"], MISSING) is None
        assert get_or(obj, ["b"], MISSING) is MISSING

    def test_traversal_into_scalar_returns_default(self) -> None:
        obj = {"a": 5, "s": "text", "n": None}
        assert get_or(obj, ["a", "b"], "d") == "d"
        assert get_or(obj, ["s", 0], "d") == "d"
        assert get_or(obj, ["n", "x"], "d") == "d"

    def test_list_index(self) -> None:
        obj = {"items": [{"id": "x"}, {"id": "y"}]}
        assert get_or(obj, ["items", 1, "id"]) == "y"
        assert get_or(obj, ["items", "0", "id"]) == "x"

    @pytest.mark.parametrize("key", [2, -1, "-1", "01", " 1", True, "id"])
    def test_list_keys_not_owned(self, key: object) -> None:
        assert get_or([10, 20], [key], "d") == "d"

    def test_tuple_index(self) -> None:
        assert get_or(("a", "b"), [1]) == "b"

    def test_int_key_matches_string_key_in_mappings(self) -> None:
        assert get_or({"0": "str"}, [0], "d") == "str"
        assert get_or({"values": {"1": {"id": "y"}}}, ["values", 1, "id"]) == "y"

    def test_exact_int_key_wins_over_string_form(self) -> None:
        assert get_or({0: "int", "0": "str"}, [0], "d") == "int"

    def test_string_key_does_not_match_int_key(self) -> None:
        assert get_or({0: "int"}, ["0"], "d") == "d"

    def test_bool_key_is_not_converted(self) -> None:
        assert get_or({"True": 1, "1": 2}, [True], "d") == "d"

    def test_unhashable_key_returns_default(self) -> None:
        assert get_or({"a": 1}, [["a"]], "d") == "d"

    def test_any_mapping_type(self) -> None:
        assert get_or(OrderedDict(a={"b": 2}), ["a", "b"]) == 2

    def test_default_defaults_to_none(self) -> None:
        assert get_or({}, ["a"]) is None

    def test_does_not_mutate(self) -> None:
        obj = {"a": {"b": [1, 2]}}
        get_or(obj, ["a", "b", 5], None)
        get_or(obj, ["a", "z"], None)
        assert obj == {"a": {"b": [1, 2]}}


class TestHasPath:
    def test_present_leaf_none(self) -> None:
        assert has_path({"a": {"b": None}}, ["a", "b"])

    def test_absent(self) -> None:
        assert not has_path({"a": {}}, ["a", "b"])

    def test_empty_path(self) -> None:
        assert has_path(None, [])


class TestMissing:
    def test_repr_and_falsy(self) -> None:
        assert repr(MISSING) == "MISSING"
        assert not MISSING


class TestFindFirst:
    def test_returns_first_match(self) -> None:
        assert find_first([1, 2, 3, 4], lambda x, i, s: x % 2 == 0) == 2

    def test_no_match_returns_default(self) -> None:
        sentinel = object()
        assert find_first([1, 3], lambda x, i, s: x > 10, sentinel) is sentinel

    def test_empty_sequence(self) -> None:
        assert find_first([], lambda x, i, s: True, "d") == "d"

    def test_default_defaults_to_none(self) -> None:
        assert find_first([1], lambda x, i, s: False) is None

    def test_returns_same_object(self) -> None:
        target = {"k": 1}
        assert find_first([{"k": 0}, target], lambda x, i, s: x["k"] == 1) is target

    def test_short_circuits(self) -> None:
        seen: list[int] = []

        def predicate(x: str, i: int, s: list[str]) -> bool:
            seen.append(i)
            return x == "b"

        assert find_first(["a", "b", "c", "d"], predicate) == "b"
        assert seen == [0, 1]

    def test_predicate_receives_index_and_sequence(self) -> None:
        seq = ["a", "b"]
        calls: list[tuple[str, int, object]] = []

        def predicate(x: str, i: int, s: list[str]) -> bool:
            calls.append((x, i, s))
            return False

        find_first(seq, predicate)
        assert calls == [("a", 0, seq), ("b", 1, seq)]
        assert calls[0][2] is seq
