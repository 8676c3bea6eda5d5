# subadjust_core/subtitles/transform.py
# -*- coding: utf-8 -*-
"""
Transform engine.

apply_transforms() is a pure function: it reads the input collection and
returns a new one of the same length and order. Per cue, in this order:

1. Position pass, judged on the start time BEFORE any timing change.
   to_top is checked first and wins over to_bottom.
2. Timing pass, gated by offset_start on the original start time:
   scale about the pivot, then add the offset, to both start and end.
3. Renumber pass (optional): 1..N by list position.

Any ConflictError aborts the whole call; nothing is returned.
"""
from __future__ import annotations

import logging
from collections import Counter
from typing import Tuple

from ..errors import ConflictError
from ..models import Cue, PositionOverride, TimeRange, TimeValue, TransformOptions
from .data import CueCollection
from .positions import strip_alignment_tags

logger = logging.getLogger(__name__)


def _in_any(ranges: Tuple[TimeRange, ...], t: TimeValue) -> bool:
    return any(r.contains(t) for r in ranges)


def _clear_alignment(lines: Tuple[str, ...]) -> Tuple[str, ...]:
    if not lines:
        return lines
    first = strip_alignment_tags(lines[0])
    if not first.strip():
        return lines[1:]
    return (first, *lines[1:])


def move_to_top(cue: Cue) -> Cue:
    """Tag a cue as top-aligned. Pixel-positioned cues can't be moved."""
    if cue.has_pixel_position:
        where = cue.box if cue.box is not None else cue.position
        raise ConflictError(
            f"Cannot override the position of subtitle {cue.index} at {cue.start} "
            f"because it has a hard coded position ({where}).",
            cue_index=cue.index,
            start=cue.start,
        )
    return cue.with_changes(position=PositionOverride.top(), lines=_clear_alignment(cue.lines))


def move_to_bottom(cue: Cue) -> Cue:
    """Drop every position override; bottom is where untagged cues are drawn."""
    return cue.with_changes(position=PositionOverride.none(), box=None, lines=_clear_alignment(cue.lines))


def adjust_timing(cue: Cue, options: TransformOptions) -> Cue:
    start, end = cue.start, cue.end
    if options.offset_start is not None and start < options.offset_start:
        return cue

    if options.scale_factor != 1.0:
        start = start.scale_about(options.scale_pivot, options.scale_factor)
        end = end.scale_about(options.scale_pivot, options.scale_factor)
    if options.offset_ms:
        start = start.add(options.offset_ms)
        end = end.add(options.offset_ms)
    return cue.with_changes(start=start, end=end)


def apply_transforms(data: CueCollection, options: TransformOptions) -> CueCollection:
    """
    Apply position overrides, scale, offset and renumbering in one pass.

    Args:
        data: Parsed cues; left untouched.
        options: Resolved transform settings.

    Returns:
        A new CueCollection.

    Raises:
        ConflictError: --to-top requested for a pixel-positioned cue.
    """
    report = Counter()
    result = []

    for position_in_list, cue in enumerate(data.cues, start=1):
        original_start = cue.start
        new_cue = cue

        if _in_any(options.to_top, original_start):
            new_cue = move_to_top(new_cue)
            report['moved_top'] += 1
        elif _in_any(options.to_bottom, original_start):
            new_cue = move_to_bottom(new_cue)
            report['moved_bottom'] += 1

        if options.changes_timing:
            timed = adjust_timing(new_cue, options)
            if timed is not new_cue:
                report['retimed'] += 1
            new_cue = timed

        if options.renumber and new_cue.index != position_in_list:
            new_cue = new_cue.with_changes(index=position_in_list)
            report['renumbered'] += 1

        result.append(new_cue)

    logger.info(
        "[Transform] %d cues: %d retimed, %d moved to top, %d moved to bottom, %d renumbered.",
        len(result), report['retimed'], report['moved_top'], report['moved_bottom'], report['renumbered'],
    )
    return data.with_cues(result)


class TransformEngine:
    """Holds a TransformOptions and applies it to any number of collections."""

    def __init__(self, options: TransformOptions):
        self.options = options

    def apply(self, data: CueCollection) -> CueCollection:
        return apply_transforms(data, self.options)
