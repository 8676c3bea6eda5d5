# tests/test_positions.py
import pytest

from subadjust_core.models import PositionKind, PositionOverride
from subadjust_core.subtitles import format_position_tag, split_position_tag, strip_alignment_tags


@pytest.mark.parametrize("line, position, rest", [
    ("{\\an8}Hi", PositionOverride.top(), "Hi"),
    ("{\\an2}Hi", PositionOverride.bottom(), "Hi"),
    ("{\\pos(10,-20)}Hi", PositionOverride.pixel(10, -20), "Hi"),
    ("{\\an7}Hi", PositionOverride.none(), "{\\an7}Hi"),
    ("Hi {\\an8}", PositionOverride.none(), "Hi {\\an8}"),
    ("Plain", PositionOverride.none(), "Plain"),
])
def test_split_position_tag(line, position, rest):
    assert split_position_tag(line) == (position, rest)


@pytest.mark.parametrize("position", [
    PositionOverride.top(),
    PositionOverride.bottom(),
    PositionOverride.pixel(640, 80),
])
def test_format_is_inverse_of_split(position):
    assert split_position_tag(format_position_tag(position) + "text") == (position, "text")


def test_no_position_has_no_tag():
    assert format_position_tag(PositionOverride.none()) == ""


def test_strip_alignment_tags():
    assert strip_alignment_tags("{\\an7}{\\an8}Hi") == "Hi"
    assert strip_alignment_tags("{\\b1}Hi") == "{\\b1}Hi"
    assert strip_alignment_tags("Hi {\\an8}") == "Hi {\\an8}"


def test_position_override_validation():
    with pytest.raises(ValueError):
        PositionOverride(PositionKind.PIXEL)
    with pytest.raises(ValueError):
        PositionOverride(PositionKind.TOP, 1, 2)
    assert str(PositionOverride.pixel(1, 2)) == "pixel(1,2)"
