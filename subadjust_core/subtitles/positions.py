# subadjust_core/subtitles/positions.py
# -*- coding: utf-8 -*-
"""
Position override tags.

SRT has no positioning field of its own. Many players honour ASS override
codes at the start of a cue's text, so positions are stored that way:

    {\\an8}       top (top-centre alignment)
    {\\an2}       bottom (bottom-centre alignment, the SRT default)
    {\\pos(X,Y)}  pixel position

Only a tag at the very start of the first text line is treated as the
cue's position; everything else is ordinary text.
"""
from __future__ import annotations

import re
from typing import Tuple

from ..models import PositionKind, PositionOverride

_POSITION_TAG_RE = re.compile(
    r'^\{\\(?:an(?P<an>[28])|pos\((?P<x>-?\d+),(?P<y>-?\d+)\))\}'
)
_ALIGNMENT_TAG_RE = re.compile(r'^(?:\{\\an\d\})+')


def split_position_tag(line: str) -> Tuple[PositionOverride, str]:
    """Return the position encoded at the start of `line` and the rest of the line."""
    match = _POSITION_TAG_RE.match(line)
    if not match:
        return PositionOverride.none(), line

    rest = line[match.end():]
    if match.group('an') == '8':
        return PositionOverride.top(), rest
    if match.group('an') == '2':
        return PositionOverride.bottom(), rest
    return PositionOverride.pixel(int(match.group('x')), int(match.group('y'))), rest


def format_position_tag(position: PositionOverride) -> str:
    if position.kind is PositionKind.TOP:
        return '{\\an8}'
    if position.kind is PositionKind.BOTTOM:
        return '{\\an2}'
    if position.kind is PositionKind.PIXEL:
        return f'{{\\pos({position.x},{position.y})}}'
    return ''


def strip_alignment_tags(line: str) -> str:
    """Remove any leading {\\anN} codes left in the text."""
    return _ALIGNMENT_TAG_RE.sub('', line, count=1)
