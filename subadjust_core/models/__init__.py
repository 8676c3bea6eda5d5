# subadjust_core/models/__init__.py
from .enums import PositionKind
from .timing import TimeRange, TimeValue, round_half_away
from .cues import Cue, DisplayBox, PositionOverride
from .transform import TransformOptions

__all__ = [
    'Cue',
    'DisplayBox',
    'PositionKind',
    'PositionOverride',
    'TimeRange',
    'TimeValue',
    'TransformOptions',
    'round_half_away',
]
