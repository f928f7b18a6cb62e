import datetime

import pytest

from typeconv.timeconv import parse_duration, to_duration, to_time

td = datetime.timedelta


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1h30m", td(hours=1, minutes=30)),
        ("1.5s", td(seconds=1.5)),
        ("-2ms", -td(milliseconds=2)),
        ("+3m", td(minutes=3)),
        ("300us", td(microseconds=300)),
        ("300µs", td(microseconds=300)),
        ("2h45m30.5s", td(hours=2, minutes=45, seconds=30.5)),
        ("0", td(0)),
        ("-0", td(0)),
    ],
)
def test_parse_duration(text, expected):
    assert parse_duration(text) == expected


@pytest.mark.parametrize("text", ["", "1", "1x", "abc", ".s", "-", "1.5"])
def test_parse_duration_rejects(text):
    with pytest.raises(ValueError):
        parse_duration(text)


def test_parse_duration_overflow():
    with pytest.raises(ValueError):
        parse_duration("10000000000h")


def test_to_duration_passthrough():
    delta = td(seconds=42)
    assert to_duration(delta) is delta


def test_to_duration_text():
    assert to_duration("5m") == td(minutes=5)
    assert to_duration("bogus") == td(0)


def test_to_duration_numeric_is_nanoseconds():
    assert to_duration(1_000_000) == td(milliseconds=1)
    assert to_duration("1000") == td(microseconds=1)
    assert to_duration(-2000) == -td(microseconds=2)


def test_to_time_passthrough():
    moment = datetime.datetime(2021, 3, 4, 5, 6, 7)
    assert to_time(moment) is moment


@pytest.mark.parametrize("value", [None, "", "nonsense text"])
def test_to_time_unconvertible(value):
    assert to_time(value) is None


def test_to_time_parses_text():
    assert to_time("2021-03-04 05:06:07") == datetime.datetime(2021, 3, 4, 5, 6, 7)
    assert to_time("2021-03-04T05:06:07Z") == datetime.datetime(
        2021, 3, 4, 5, 6, 7, tzinfo=datetime.timezone.utc
    )


def test_to_time_with_format():
    assert to_time("04/03/2021", "%d/%m/%Y") == datetime.datetime(2021, 3, 4)
    assert to_time("xx", "%Y") is None


def test_to_time_format_applies_to_datetime_text():
    moment = datetime.datetime(2021, 3, 4, 5, 6, 7)
    assert to_time(moment, "%Y-%m-%d %H:%M:%S") == moment


@pytest.mark.parametrize("stamp", [0, 1_600_000_000, 86_400])
def test_to_time_timestamp_round_trip(stamp):
    moment = to_time(stamp)
    assert moment.tzinfo == datetime.timezone.utc
    assert int(moment.timestamp()) == stamp
    assert to_time(str(stamp)) == moment