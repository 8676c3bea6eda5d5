# subadjust_core/subtitles/writers/__init__.py
from .srt_writer import format_cue, format_srt, format_timing_line, write_srt_file

__all__ = ['format_cue', 'format_srt', 'format_timing_line', 'write_srt_file']
