# subadjust_core/models/transform.py
"""Resolved, unambiguous transform settings consumed by the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .timing import TimeRange, TimeValue


@dataclass(frozen=True)
class TransformOptions:
    offset_ms: int = 0
    offset_start: Optional[TimeValue] = None  # None: adjust from the very beginning
    scale_factor: float = 1.0
    scale_pivot: TimeValue = field(default_factory=TimeValue)
    to_top: tuple[TimeRange, ...] = ()
    to_bottom: tuple[TimeRange, ...] = ()
    renumber: bool = False

    def __post_init__(self):
        for name in ("to_top", "to_bottom"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    @property
    def changes_timing(self) -> bool:
        return self.offset_ms != 0 or self.scale_factor != 1.0

    @property
    def changes_positions(self) -> bool:
        return bool(self.to_top or self.to_bottom)

    @property
    def is_noop(self) -> bool:
        return not (self.changes_timing or self.changes_positions or self.renumber)
