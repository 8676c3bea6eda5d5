# subadjust_core/errors.py
# -*- coding: utf-8 -*-
"""
Exception hierarchy.

Every failure is terminal for a run: callers either get a complete result
or one of these exceptions, never partial output.
"""
from __future__ import annotations

from typing import Optional


class SubAdjustError(Exception):
    """Base class for all errors raised by subadjust."""
    pass


class ParseError(SubAdjustError):
    """Raised for a malformed time literal or range literal."""

    def __init__(self, message: str, literal: Optional[str] = None):
        super().__init__(message)
        self.literal = literal


class FormatError(ParseError):
    """Raised when an SRT file is structurally invalid."""

    def __init__(self, message: str, block: Optional[int] = None, line: Optional[str] = None):
        if block is not None:
            message = f"Block {block}: {message}"
        super().__init__(message, literal=line)
        self.block = block
        self.line = line


class ConflictError(SubAdjustError):
    """Raised when a transform cannot be applied to a particular cue."""

    def __init__(self, message: str, cue_index: Optional[int] = None, start=None):
        super().__init__(message)
        self.cue_index = cue_index
        self.start = start


class ConfigError(SubAdjustError):
    """Raised for mutually exclusive, incomplete or missing options."""

    def __init__(self, message: str, options: tuple = ()):
        super().__init__(message)
        self.options = tuple(options)


class ExtractionError(SubAdjustError):
    """Raised when subtitles cannot be extracted from the input."""
    pass
