from decimal import Decimal

import pytest

from typeconv.lists import to_list, to_strs


def test_list_returned_as_is():
    items = [1, "a"]
    assert to_list(items) is items


def test_iterables_collected():
    assert to_list((1, 2)) == [1, 2]
    assert to_list(x for x in "ab") == ["a", "b"]
    assert sorted(to_list({3, 1})) == [1, 3]


def test_json_bytes_and_text():
    assert to_list(b'[1,"a"]') == [1, "a"]
    assert to_list("[1,2]") == [1, 2]
    assert to_list("[1.5]") == [Decimal("1.5")]


def test_non_array_bytes_become_byte_values():
    assert to_list(b"hi") == list(b"hi")
    assert to_list(b'{"a":1}') == list(b'{"a":1}')


@pytest.mark.parametrize("value", [None, "", 0, 0.0, False])
def test_empty_and_zero(value):
    assert to_list(value) == []
    assert to_strs(value) == []


def test_scalars_and_mappings_wrap():
    assert to_list("abc") == ["abc"]
    assert to_list(5) == [5]
    assert to_list({"a": 1}) == [{"a": 1}]
    assert to_list({}) == [{}]


def test_strs_from_mixed_list():
    assert to_strs([1, 2.5, True, None, "x"]) == ["1", "2.5", "true", "", "x"]


def test_strs_from_json_text():
    assert to_strs('["a","b"]') == ["a", "b"]
    assert to_strs('["a",null]') == ["a", ""]
    assert to_strs('["a",1]') == ['["a",1]']


def test_strs_from_json_bytes_blank_non_strings():
    assert to_strs(b'["a",1]') == ["a", ""]


def test_strs_from_plain_bytes():
    assert to_strs(b"hi") == [str(byte) for byte in b"hi"]


def test_strs_scalars():
    assert to_strs("x") == ["x"]
    assert to_strs(7) == ["7"]
    assert to_strs(("a", "b")) == ["a", "b"]


@pytest.mark.parametrize("items", [["a"], ["a", "b", "c"], ["x y", ""]])
def test_strs_of_strings_round_trip(items):
    assert to_strs(items) == items
    assert len(to_list(items)) == len(items)