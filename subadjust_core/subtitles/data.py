# subadjust_core/subtitles/data.py
"""
Ordered cue container.

- Parse once from SRT text (or a file)
- Transform into a new collection (never in place)
- Serialize once at the end

Insertion order is the display order and is never re-sorted here; only the
transform engine's renumber pass rewrites cue numbers.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, Iterator, overload

from ..models import Cue


@dataclass(frozen=True)
class CueCollection:
    cues: tuple[Cue, ...] = ()
    line_ending: str = "\n"

    def __post_init__(self):
        if not isinstance(self.cues, tuple):
            object.__setattr__(self, "cues", tuple(self.cues))
        if self.line_ending not in ("\n", "\r\n"):
            raise ValueError(f"Unsupported line ending: {self.line_ending!r}")

    # ------------------------------------------------------------------
    # Load / save
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> CueCollection:
        """Parse SRT text. Raises FormatError on malformed blocks."""
        from .parsers.srt_parser import parse_srt_text

        return parse_srt_text(text)

    @classmethod
    def from_file(cls, path: Path | str) -> CueCollection:
        from .parsers.srt_parser import parse_srt_file

        return parse_srt_file(Path(path))

    def serialize(self) -> str:
        from .writers.srt_writer import format_srt

        return format_srt(self)

    def save(self, path: Path | str, encoding: str = "utf-8") -> None:
        from .writers.srt_writer import write_srt_file

        write_srt_file(self, Path(path), encoding=encoding)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.cues)

    def __iter__(self) -> Iterator[Cue]:
        return iter(self.cues)

    @overload
    def __getitem__(self, item: int) -> Cue: ...

    @overload
    def __getitem__(self, item: slice) -> tuple[Cue, ...]: ...

    def __getitem__(self, item):
        return self.cues[item]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def with_cues(self, cues: Iterable[Cue]) -> CueCollection:
        """A new collection with the same line ending."""
        return replace(self, cues=tuple(cues))

    def indices(self) -> list[int]:
        return [cue.index for cue in self.cues]

    def get_timing_range(self) -> tuple[int, int]:
        """(earliest start, latest end) in ms, or (0, 0) when empty."""
        if not self.cues:
            return (0, 0)
        return (
            min(cue.start.ms for cue in self.cues),
            max(cue.end.ms for cue in self.cues),
        )
