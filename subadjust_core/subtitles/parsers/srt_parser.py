# subadjust_core/subtitles/parsers/srt_parser.py
# -*- coding: utf-8 -*-
"""
SRT subtitle parser.

Parses SubRip text into a CueCollection.
Preserves:
- Original index numbers
- Millisecond timing (negative timestamps included)
- Text lines verbatim, apart from a leading position tag
- Pixel display boxes on the timing line
- The line ending of the source (LF or CRLF)
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional, Tuple

from ...errors import FormatError, ParseError
from ...models import Cue, DisplayBox, TimeValue
from ..positions import split_position_tag

logger = logging.getLogger(__name__)

# 00:00:08,614 --> 00:00:10,373
# 00:00:08,614 --> 00:00:10,373  X1:201 X2:516 Y1:397 Y2:423
_TIMING_RE = re.compile(
    r'^\s*(?P<start>\S+?)\s*-->\s*(?P<end>\S+)'
    r'(?:\s+X1:(?P<x1>-?\d+)\s+X2:(?P<x2>-?\d+)\s+Y1:(?P<y1>-?\d+)\s+Y2:(?P<y2>-?\d+))?'
    r'\s*$'
)


def detect_line_ending(text: str) -> str:
    """Line ending of the first line; LF when there is no line break at all."""
    first_break = text.find('\n')
    if first_break > 0 and text[first_break - 1] == '\r':
        return '\r\n'
    return '\n'


def _split_blocks(text: str) -> List[List[str]]:
    """Group non-blank lines into blocks separated by one or more blank lines."""
    lines = text.replace('\r\n', '\n').replace('\r', '\n').split('\n')
    blocks: List[List[str]] = []
    current: List[str] = []
    for line in lines:
        if line.strip():
            current.append(line)
        elif current:
            blocks.append(current)
            current = []
    if current:
        blocks.append(current)
    return blocks


def _parse_index(line: str, block_no: int) -> int:
    try:
        index = int(line.strip())
    except ValueError:
        raise FormatError(f"Was expecting a cue number, found {line!r}", block=block_no, line=line) from None
    if index < 0:
        raise FormatError(f"Cue number must not be negative: {line!r}", block=block_no, line=line)
    return index


def _parse_timing(line: str, block_no: int) -> Tuple[TimeValue, TimeValue, Optional[DisplayBox]]:
    match = _TIMING_RE.match(line)
    if not match:
        raise FormatError(f"Expecting 'start --> end', got {line!r}", block=block_no, line=line)

    try:
        start = TimeValue.parse(match.group('start'))
        end = TimeValue.parse(match.group('end'))
    except ParseError as e:
        raise FormatError(f"Bad timestamp in {line!r}: {e}", block=block_no, line=line) from e

    box = None
    if match.group('x1') is not None:
        box = DisplayBox(
            x1=int(match.group('x1')),
            x2=int(match.group('x2')),
            y1=int(match.group('y1')),
            y2=int(match.group('y2')),
        )
    return start, end, box


def parse_srt_block(block: List[str], block_no: int) -> Cue:
    """Parse one block of non-blank lines: number, timing, text lines."""
    index = _parse_index(block[0], block_no)
    if len(block) < 2:
        raise FormatError("Missing timing line", block=block_no, line=block[0])
    start, end, box = _parse_timing(block[1], block_no)
    if len(block) < 3:
        raise FormatError("Cue has no text", block=block_no, line=block[1])

    position, first_line = split_position_tag(block[2])
    # A tag on a line of its own leaves nothing of that line to keep.
    lines = (first_line, *block[3:]) if first_line.strip() else tuple(block[3:])
    return Cue(
        index=index,
        start=start,
        end=end,
        lines=lines,
        position=position,
        box=box,
    )


def parse_srt_text(text: str) -> 'CueCollection':
    """
    Parse SRT content into a CueCollection.

    SRT format:
    ```
    1
    00:00:01,000 --> 00:00:04,000
    First subtitle line
    Maybe second line

    2
    00:00:05,000 --> 00:00:08,000
    Second subtitle
    ```

    Raises:
        FormatError: naming the 1-based block number on malformed input.
    """
    from ..data import CueCollection

    if text.startswith('\ufeff'):
        text = text[1:]

    line_ending = detect_line_ending(text)
    cues = [parse_srt_block(block, block_no) for block_no, block in enumerate(_split_blocks(text), start=1)]
    logger.debug("Parsed %d cues (line ending %r).", len(cues), line_ending)
    return CueCollection(cues=tuple(cues), line_ending=line_ending)


def parse_srt_file(path: Path) -> 'CueCollection':
    """Read and parse an SRT file, detecting its encoding."""
    from ...io.files import read_text

    text, _encoding = read_text(Path(path))
    return parse_srt_text(text)
