# subadjust_core/options.py
# -*- coding: utf-8 -*-
"""
Turns the user-facing options into one unambiguous TransformOptions.

Convenience forms are resolved here so the engine only ever sees plain
numbers: --from/--to become an offset, --subs-are-fast/--subs-are-slow
become a scale factor.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import ConfigError
from .models import TimeRange, TimeValue, TransformOptions

logger = logging.getLogger(__name__)

PAL = 25.0
NTSC = 23.976

# Common PAL/NTSC speed mix-ups. Reciprocal of each other; keep stable.
SUBS_ARE_FAST_SCALE = NTSC / PAL
SUBS_ARE_SLOW_SCALE = PAL / NTSC


@dataclass
class AdjustRequest:
    """Options as the user gave them, before any resolution."""

    offset: Optional[TimeValue] = None
    from_time: Optional[TimeValue] = None
    to_time: Optional[TimeValue] = None
    offset_start: Optional[TimeValue] = None
    scale: Optional[float] = None
    scale_pivot: Optional[TimeValue] = None
    subs_are_slow: bool = False
    subs_are_fast: bool = False
    to_top: List[TimeRange] = field(default_factory=list)
    to_bottom: List[TimeRange] = field(default_factory=list)
    renumber: bool = False
    extract: bool = False


def resolve_transform_options(request: AdjustRequest) -> TransformOptions:
    """
    Validate a request and resolve it to TransformOptions.

    Raises:
        ConfigError: for mutually exclusive, incomplete or empty option sets.
    """
    if (request.from_time is None) != (request.to_time is None):
        raise ConfigError("The `--from` and `--to` arguments must be used together.", ('--from', '--to'))
    if request.from_time is not None and request.offset is not None:
        raise ConfigError("The `--from`/`--to` arguments can't be used with `--offset`.", ('--from', '--to', '--offset'))

    scale_flags = [
        name for name, used in (
            ('--scale', request.scale is not None),
            ('--subs-are-fast', request.subs_are_fast),
            ('--subs-are-slow', request.subs_are_slow),
        ) if used
    ]
    if len(scale_flags) > 1:
        raise ConfigError(f"Only one of {', '.join(scale_flags)} is allowed.", tuple(scale_flags))

    if request.scale is not None and not (math.isfinite(request.scale) and request.scale > 0):
        raise ConfigError(f"The scale must be a finite number greater than zero, got {request.scale}.", ('--scale',))

    scale = request.scale
    if request.subs_are_fast:
        scale = SUBS_ARE_FAST_SCALE
    elif request.subs_are_slow:
        scale = SUBS_ARE_SLOW_SCALE

    if request.scale_pivot is not None and scale is None:
        raise ConfigError("Cannot use a scale pivot without some type of time scaling.", ('--scale-pivot',))

    offset_ms = 0
    if request.from_time is not None:
        offset_ms = request.to_time.ms - request.from_time.ms
    elif request.offset is not None:
        offset_ms = request.offset.ms

    has_operation = (
        request.offset is not None
        or request.from_time is not None
        or scale is not None
        or request.to_top
        or request.to_bottom
        or request.renumber
        or request.extract
    )
    if not has_operation:
        raise ConfigError(
            "`--extract` or one of the offset options, the scale options, `--renumber`, "
            "or the `--to-top`, `--to-bottom` options must be used.\nSee `--help` for details."
        )

    for top_range in request.to_top:
        for bottom_range in request.to_bottom:
            if top_range.overlaps(bottom_range):
                logger.warning(
                    "--to-top range %s overlaps --to-bottom range %s; --to-top wins for cues in both.",
                    top_range, bottom_range,
                )

    return TransformOptions(
        offset_ms=offset_ms,
        offset_start=request.offset_start,
        scale_factor=scale if scale is not None else 1.0,
        scale_pivot=request.scale_pivot if request.scale_pivot is not None else TimeValue(0),
        to_top=tuple(request.to_top),
        to_bottom=tuple(request.to_bottom),
        renumber=request.renumber,
    )
