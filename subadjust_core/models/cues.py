# subadjust_core/models/cues.py
"""
Cue data model.

Cues are frozen value objects. Operations never mutate a cue in place;
they build a new one with dataclasses.replace().
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from .enums import PositionKind
from .timing import TimeValue


@dataclass(frozen=True)
class PositionOverride:
    """Where a cue is drawn: unmarked (NONE), TOP, BOTTOM or a PIXEL point."""

    kind: PositionKind = PositionKind.NONE
    x: Optional[int] = None
    y: Optional[int] = None

    def __post_init__(self):
        has_point = self.x is not None and self.y is not None
        if self.kind is PositionKind.PIXEL and not has_point:
            raise ValueError("A pixel position needs both x and y.")
        if self.kind is not PositionKind.PIXEL and (self.x is not None or self.y is not None):
            raise ValueError(f"Coordinates are only valid for pixel positions, not {self.kind.value}.")

    @classmethod
    def none(cls) -> PositionOverride:
        return cls(PositionKind.NONE)

    @classmethod
    def top(cls) -> PositionOverride:
        return cls(PositionKind.TOP)

    @classmethod
    def bottom(cls) -> PositionOverride:
        return cls(PositionKind.BOTTOM)

    @classmethod
    def pixel(cls, x: int, y: int) -> PositionOverride:
        return cls(PositionKind.PIXEL, int(x), int(y))

    @property
    def is_none(self) -> bool:
        return self.kind is PositionKind.NONE

    @property
    def is_pixel(self) -> bool:
        return self.kind is PositionKind.PIXEL

    def __str__(self) -> str:
        if self.is_pixel:
            return f"pixel({self.x},{self.y})"
        return self.kind.value


@dataclass(frozen=True)
class DisplayBox:
    """
    Hard coded pixel rectangle written after the timing line by some SRT
    producers, e.g. "X1:201 X2:516 Y1:397 Y2:423". Its meaning depends on
    the video resolution and is not well documented; it is carried through
    untouched.
    """

    x1: int  # left
    x2: int  # right
    y1: int  # top
    y2: int  # bottom

    def __str__(self) -> str:
        return f"X1:{self.x1} X2:{self.x2} Y1:{self.y1} Y2:{self.y2}"


@dataclass(frozen=True)
class Cue:
    """One subtitle entry."""

    index: int
    start: TimeValue
    end: TimeValue
    lines: tuple[str, ...] = ()
    position: PositionOverride = field(default_factory=PositionOverride)
    box: Optional[DisplayBox] = None

    def __post_init__(self):
        # Accept any iterable of lines but store an immutable tuple.
        if not isinstance(self.lines, tuple):
            object.__setattr__(self, "lines", tuple(self.lines))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def duration_ms(self) -> int:
        return self.end.ms - self.start.ms

    @property
    def has_pixel_position(self) -> bool:
        return self.position.is_pixel or self.box is not None

    def with_changes(self, **changes) -> Cue:
        return replace(self, **changes)
