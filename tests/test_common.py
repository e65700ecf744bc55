from datetime import timedelta

import pytest

from fittrack.common import (
    ParseDurationError,
    ParseIntError,
    TrackerError,
    parse_duration,
    parse_int,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0h50m", timedelta(minutes=50)),
        ("1h30m", timedelta(minutes=90)),
        ("30m", timedelta(minutes=30)),
        ("2h", timedelta(hours=2)),
        ("1.5h", timedelta(minutes=90)),
        ("30.5m", timedelta(minutes=30, seconds=30)),
        ("3h00m", timedelta(hours=3)),
    ],
)
def test_parse_duration_values(text, expected):
    assert parse_duration(text) == expected


def test_parse_duration_bare_zero():
    assert parse_duration("0") == timedelta(0)
    assert parse_duration("-0") == timedelta(0)


def test_parse_duration_equivalent_spellings():
    assert parse_duration("90m") == parse_duration("1h30m") == parse_duration("1.5h")
    assert parse_duration("5400s") == parse_duration("1h30m")
    assert parse_duration("1500ms") == parse_duration("1.5s")
    assert parse_duration("1000us") == parse_duration("1ms")
    assert parse_duration("1000\u00b5s") == parse_duration("1ms")


def test_parse_duration_sign():
    assert parse_duration("-1h30m") == -parse_duration("1h30m")
    assert parse_duration("+1h30m") == parse_duration("1h30m")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "-",
        "+",
        "invalid",
        "1h-30m",
        "1.5d",
        "1 h30m",
        "30",
        ".h",
        "h",
        "99999999999h",
    ],
)
def test_parse_duration_errors(text):
    with pytest.raises(ParseDurationError):
        parse_duration(text)


@pytest.mark.parametrize(
    "text, expected",
    [("678", 678), ("+12345", 12345), ("-100", -100), ("0", 0)],
)
def test_parse_int_values(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "-", "+", "abc", " 12345", "12345 ", "123abc", "1_000", "1.5",
     "9223372036854775808"],
)
def test_parse_int_errors(text):
    with pytest.raises(ParseIntError):
        parse_int(text)


def test_errors_share_base_class():
    with pytest.raises(TrackerError):
        parse_int("abc")
    with pytest.raises(TrackerError):
        parse_duration("abc")
    with pytest.raises(ValueError):
        parse_duration("abc")