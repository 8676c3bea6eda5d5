# subadjust_core/models/timing.py
"""
Time values and time ranges.

All timing is stored as INTEGER MILLISECONDS relative to the start of the
file. Values may be negative: range bounds and shifted timestamps are
allowed to fall before zero so that a shift can always be undone.

Accepted time literals:
    [[H:]M:]S[,F]    clock form, ',' or '.' before the fraction
    S.F / .F         plain decimal seconds

Components are summed without clock validation, so "1:90" is 150 seconds.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from ..errors import ParseError

logger = logging.getLogger(__name__)

_ALLOWED_CHARS = re.compile(r"^[0-9:.,\-]+$")

_TIME_RE = re.compile(
    r"""^(?P<sign>-)?
    (?:
        (?:(?:(?P<hours>\d+):)?(?P<minutes>\d+):)?   # [[hours:]minutes:]
        (?P<seconds>\d+)                            # seconds
        (?:[,.](?P<fraction>\d+))?                  # decimal part
    |
        [,.](?P<only_fraction>\d+)                  # only decimal, no prior digit
    )$""",
    re.VERBOSE,
)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _fraction_to_ms(digits: str) -> int:
    """Digits after the separator as milliseconds: "5" -> 500, "05" -> 50, "0005" -> 0."""
    return int((digits + "000")[:3])


@dataclass(frozen=True, order=True)
class TimeValue:
    """A timestamp with millisecond resolution."""

    ms: int = 0

    def __post_init__(self):
        if isinstance(self.ms, bool) or not isinstance(self.ms, int):
            raise TypeError(f"TimeValue needs integer milliseconds, got {self.ms!r}")

    @classmethod
    def parse(cls, text: str) -> TimeValue:
        """Parse a clock or decimal-seconds literal. Raises ParseError."""
        literal = text.strip()
        if not literal:
            raise ParseError("Empty time value", literal=text)
        if not _ALLOWED_CHARS.match(literal):
            raise ParseError(f"Invalid characters in time value: {text!r}", literal=text)
        if literal.count(":") > 2:
            raise ParseError(
                f"Too many ':' components in time value (at most hh:mm:ss): {text!r}",
                literal=text,
            )

        match = _TIME_RE.match(literal)
        if not match:
            raise ParseError(f"Cannot coerce value into timestamp: {text!r}", literal=text)

        sign = -1 if match.group("sign") else 1
        if match.group("only_fraction") is not None:
            return cls(sign * _fraction_to_ms(match.group("only_fraction")))

        hours = int(match.group("hours") or 0)
        minutes = int(match.group("minutes") or 0)
        seconds = int(match.group("seconds"))
        fraction = _fraction_to_ms(match.group("fraction") or "")

        total = fraction + 1000 * (seconds + 60 * (minutes + 60 * hours))
        return cls(sign * total)

    @classmethod
    def from_seconds(cls, seconds: float) -> TimeValue:
        return cls(round_half_away(seconds * 1000))

    @property
    def seconds(self) -> float:
        return self.ms / 1000.0

    def format(self) -> str:
        """Render as HH:MM:SS,mmm (leading '-' for negative values)."""
        sign = "-" if self.ms < 0 else ""
        remaining = abs(self.ms)
        hours, remaining = divmod(remaining, 3_600_000)
        minutes, remaining = divmod(remaining, 60_000)
        seconds, milliseconds = divmod(remaining, 1000)
        return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d},{milliseconds:03d}"

    def __str__(self) -> str:
        return self.format()

    def add(self, delta_ms: int) -> TimeValue:
        return TimeValue(self.ms + int(delta_ms))

    def scale_about(self, pivot: TimeValue, factor: float) -> TimeValue:
        """pivot + round((self - pivot) * factor), rounding halves away from zero."""
        if factor == 1:
            return self
        return TimeValue(pivot.ms + round_half_away((self.ms - pivot.ms) * factor))

    def __add__(self, other: Union[int, TimeValue]) -> TimeValue:
        if isinstance(other, TimeValue):
            return TimeValue(self.ms + other.ms)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.add(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Union[int, TimeValue]) -> TimeValue:
        if isinstance(other, TimeValue):
            return TimeValue(self.ms - other.ms)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.add(-other)
        return NotImplemented

    def __neg__(self) -> TimeValue:
        return TimeValue(-self.ms)


@dataclass(frozen=True)
class TimeRange:
    """
    An interval of TimeValues, closed at both present ends.

    A missing bound is unbounded in that direction. A reversed range is
    legal and contains nothing.
    """

    start: Optional[TimeValue] = None
    end: Optional[TimeValue] = None

    @classmethod
    def parse(cls, text: str) -> TimeRange:
        """
        Parse START?-END? literals such as "10-20", "300-", "-1:00.5", "-".

        The '-' is both the separator and a sign. Scanning left to right, a
        leading '-' is first taken as the sign of the start bound and the
        next '-' is the separator; if no further '-' follows, or it follows
        immediately, the leading '-' was the separator after all.
        """
        literal = text.strip()
        if not literal:
            raise ParseError("Empty time range", literal=text)

        if literal.startswith("-"):
            rest = literal[1:]
            sep = rest.find("-")
            if sep <= 0:
                start_token, end_token = "", rest
            else:
                start_token, end_token = "-" + rest[:sep], rest[sep + 1:]
        else:
            sep = literal.find("-")
            if sep < 0:
                raise ParseError(
                    f"Malformed time range (expected START-END): {text!r}", literal=text
                )
            start_token, end_token = literal[:sep], literal[sep + 1:]

        try:
            start = TimeValue.parse(start_token) if start_token else None
            end = TimeValue.parse(end_token) if end_token else None
        except ParseError as e:
            raise ParseError(f"Malformed time range {text!r}: {e}", literal=text) from e

        time_range = cls(start, end)
        if time_range.is_empty:
            logger.warning("Time range %r ends before it starts and matches nothing.", text)
        return time_range

    @property
    def is_empty(self) -> bool:
        return self.start is not None and self.end is not None and self.start > self.end

    def contains(self, t: TimeValue) -> bool:
        return (self.start is None or t >= self.start) and (self.end is None or t <= self.end)

    def __contains__(self, t: TimeValue) -> bool:
        return self.contains(t)

    def overlaps(self, other: TimeRange) -> bool:
        """True if at least one instant lies in both ranges."""
        if self.is_empty or other.is_empty:
            return False
        starts = [t for t in (self.start, other.start) if t is not None]
        ends = [t for t in (self.end, other.end) if t is not None]
        if not starts or not ends:
            return True
        return max(starts) <= min(ends)

    def to_literal(self) -> str:
        start = self.start.format() if self.start is not None else ""
        end = self.end.format() if self.end is not None else ""
        return f"{start}-{end}"

    def __str__(self) -> str:
        return self.to_literal()
