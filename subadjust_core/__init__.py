# subadjust_core/__init__.py
"""Retime and reposition cues in SRT subtitle files."""

__version__ = '0.1.0'

from .errors import (
    ConfigError,
    ConflictError,
    ExtractionError,
    FormatError,
    ParseError,
    SubAdjustError,
)
from .models import Cue, DisplayBox, PositionKind, PositionOverride, TimeRange, TimeValue, TransformOptions
from .subtitles import CueCollection, TransformEngine, apply_transforms

__all__ = [
    'ConfigError',
    'ConflictError',
    'Cue',
    'CueCollection',
    'DisplayBox',
    'ExtractionError',
    'FormatError',
    'ParseError',
    'PositionKind',
    'PositionOverride',
    'SubAdjustError',
    'TimeRange',
    'TimeValue',
    'TransformEngine',
    'TransformOptions',
    'apply_transforms',
]
