# tests/test_time_value.py
import pytest

from subadjust_core.errors import ParseError
from subadjust_core.models import TimeValue


@pytest.mark.parametrize("literal, expected_ms", [
    ("90.5", 90500),
    ("-9.05", -9050),
    ("-0.1", -100),
    (".111", 111),
    ("1.1", 1100),
    ("-.3", -300),
    (".01", 10),
    ("1.10\r", 1100),
    ("1.0005", 1000),
    ("1:2:3.200", 3723200),
    ("1:90", 150000),
    ("61:00:00", 219600000),
    ("00:01:23,456", 83456),
    ("-00:00:01,000", -1000),
    ("0", 0),
])
def test_parse_accepts(literal, expected_ms):
    assert TimeValue.parse(literal).ms == expected_ms


@pytest.mark.parametrize("literal", [
    "",
    "-",
    "1-",
    "abc",
    "1,2,3",
    "31-00:02:52,965",
    "31:00:02:52,965",
    ":00:02:52,965",
    "1:",
])
def test_parse_rejects(literal):
    with pytest.raises(ParseError):
        TimeValue.parse(literal)


def test_parse_error_keeps_literal():
    with pytest.raises(ParseError) as exc:
        TimeValue.parse("12x")
    assert exc.value.literal == "12x"


@pytest.mark.parametrize("ms, text", [
    (0, "00:00:00,000"),
    (65565123, "18:12:45,123"),
    (-65565123, "-18:12:45,123"),
    (360000000, "100:00:00,000"),
    (-4000, "-00:00:04,000"),
])
def test_format(ms, text):
    assert TimeValue(ms).format() == text
    assert str(TimeValue(ms)) == text


@pytest.mark.parametrize("ms", [0, 1, 999, 61000, -61001, 3723200, 400000000])
def test_format_then_parse_is_identity(ms):
    assert TimeValue.parse(TimeValue(ms).format()).ms == ms


def test_scale_about_pivot():
    assert TimeValue(15000).scale_about(TimeValue(10000), 2.0) == TimeValue(20000)
    assert TimeValue(10000).scale_about(TimeValue(10000), 3.0) == TimeValue(10000)


def test_scale_rounds_half_away_from_zero():
    assert TimeValue(1).scale_about(TimeValue(0), 0.5).ms == 1
    assert TimeValue(3).scale_about(TimeValue(0), 0.5).ms == 2
    assert TimeValue(-1).scale_about(TimeValue(0), 0.5).ms == -1


def test_arithmetic():
    assert TimeValue(1000).add(-1500) == TimeValue(-500)
    assert TimeValue(1000) + TimeValue(250) == TimeValue(1250)
    assert TimeValue(1000) + 5 == TimeValue(1005)
    assert 5 + TimeValue(1000) == TimeValue(1005)
    assert TimeValue(1000) - TimeValue(1500) == TimeValue(-500)
    assert -TimeValue(3) == TimeValue(-3)
    assert TimeValue(1) < TimeValue(2)


def test_from_seconds_and_seconds():
    assert TimeValue.from_seconds(1.5).ms == 1500
    assert TimeValue(2500).seconds == 2.5


def test_rejects_non_integer_ms():
    with pytest.raises(TypeError):
        TimeValue(1.5)
    with pytest.raises(TypeError):
        TimeValue(True)
