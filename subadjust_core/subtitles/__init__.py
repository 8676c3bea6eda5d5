# subadjust_core/subtitles/__init__.py
from .data import CueCollection
from .positions import format_position_tag, split_position_tag, strip_alignment_tags
from .transform import TransformEngine, apply_transforms

__all__ = [
    'CueCollection',
    'TransformEngine',
    'apply_transforms',
    'format_position_tag',
    'split_position_tag',
    'strip_alignment_tags',
]
