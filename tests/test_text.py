import dataclasses
import json
import math
import struct
from decimal import Decimal

import pytest

from typeconv.text import EMPTY_STRINGS, format_float, parse_json, to_bool, to_str


def _f32(value):
    return struct.unpack("<f", struct.pack("<f", value))[0]


def test_to_str_none_is_empty():
    assert to_str(None) == ""


@pytest.mark.parametrize("number", [0, 7, -42, 123456789012345])
def test_to_str_int_round_trip(number):
    assert int(to_str(number)) == number


def test_to_str_false():
    assert to_str(False) == "false"


def test_to_str_bool_round_trip():
    assert to_bool(to_str(True)) is True
    assert to_bool(to_str(False)) is False


@pytest.mark.parametrize("number", [0.1, 1.5, -2.25, 1e-7, 123.456, 1e21])
def test_to_str_float_round_trip_without_exponent(number):
    text = to_str(number)
    assert float(text) == number
    assert "e" not in text.lower()


def test_to_str_integral_float_has_no_fraction():
    assert to_str(3.0) == "3"


def test_to_str_large_float():
    assert to_str(1e21) == str(10**21)


def test_to_str_passes_strings_through():
    assert to_str("hello") == "hello"


def test_to_str_decodes_bytes():
    assert to_str(b"abc") == "abc"


def test_to_str_uses_exception_message():
    assert to_str(ValueError("broken thing")) == "broken thing"


def test_to_str_dict_is_json():
    data = {"b": 1, "a": [1, 2], "c": "x"}
    assert json.loads(to_str(data)) == data


def test_to_str_dataclass_is_json():
    @dataclasses.dataclass
    class Point:
        x: int
        y: int

    assert json.loads(to_str(Point(1, 2))) == {"x": 1, "y": 2}


def test_format_float_inf_and_nan():
    assert format_float(math.inf) == "+Inf"
    assert format_float(math.nan, 32) == "NaN"
    assert format_float(-math.inf).startswith("-")


@pytest.mark.parametrize("number", [0.1, 3.14159, 1e-5, 16777217.0, 2.5])
def test_format_float_32_round_trips_in_single_precision(number):
    text = format_float(number, 32)
    assert _f32(float(text)) == _f32(number)


def test_format_float_32_is_shorter_than_64():
    assert format_float(_f32(0.1), 32) == "0.1"
    assert len(format_float(_f32(0.1), 64)) > len("0.1")


def test_format_float_rejects_bad_bits():
    with pytest.raises(ValueError):
        format_float(1.0, 16)


@pytest.mark.parametrize("text", sorted(EMPTY_STRINGS))
def test_to_bool_false_strings(text):
    assert to_bool(text) is False
    assert to_bool(text.upper()) is False
    assert to_bool(text.encode()) is False


@pytest.mark.parametrize("value", ["yes", "1", "on", "anything", b"true"])
def test_to_bool_true_strings(value):
    assert to_bool(value) is True


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, False),
        ([], False),
        ({}, False),
        ([0], True),
        ({"a": 1}, True),
        (0, False),
        (0.0, False),
        (5, True),
        (-1.5, True),
    ],
)
def test_to_bool_values(value, expected):
    assert to_bool(value) is expected


def test_to_bool_dataclass_is_true():
    @dataclasses.dataclass
    class Empty:
        pass

    assert to_bool(Empty()) is True


def test_parse_json_keeps_fractions_exact():
    assert parse_json('[1, 2.5, "x"]') == [1, Decimal("2.5"), "x"]


def test_parse_json_bytes_round_trip():
    data = {"k": [1, 2, {"n": None}], "s": "v"}
    assert parse_json(json.dumps(data).encode()) == data


def test_parse_json_invalid():
    with pytest.raises(ValueError):
        parse_json("{bad")
    with pytest.raises(ValueError):
        parse_json("NaN")


def test_parse_json_wrong_type():
    with pytest.raises(TypeError):
        parse_json(3)