# subadjust_core/subtitles/writers/srt_writer.py
# -*- coding: utf-8 -*-
"""
SRT subtitle file writer.

Converts a CueCollection back to SubRip text, using the collection's
line ending. Every block, including the last, is followed by a blank line.
"""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List

from ...models import PositionOverride
from ..positions import format_position_tag

if TYPE_CHECKING:
    from ...models import Cue
    from ..data import CueCollection


def format_timing_line(cue: 'Cue') -> str:
    line = f'{cue.start.format()} --> {cue.end.format()}'
    if cue.box is not None:
        line += f'  {cue.box}'
    return line


def format_cue(cue: 'Cue') -> List[str]:
    """Lines of one block, without the trailing blank line."""
    lines = [str(cue.index), format_timing_line(cue)]

    # Blank text lines would end the block early.
    text = [line for line in cue.lines if line.strip()]
    tag = format_position_tag(cue.position)
    if text:
        lines.append(tag + text[0])
        lines.extend(text[1:])
    else:
        # Tag-only cue; {\an2} is the default placement and keeps the block non-empty.
        lines.append(tag or format_position_tag(PositionOverride.bottom()))
    return lines


def format_srt(data: 'CueCollection') -> str:
    out = []
    for cue in data.cues:
        for line in format_cue(cue):
            out.append(line + data.line_ending)
        out.append(data.line_ending)
    return ''.join(out)


def write_srt_file(data: 'CueCollection', path: Path, encoding: str = 'utf-8') -> None:
    """Write a CueCollection to `path`. newline='' keeps the collection's line endings as-is."""
    with open(path, 'w', encoding=encoding, newline='') as f:
        f.write(format_srt(data))
