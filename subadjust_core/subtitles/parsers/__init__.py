# subadjust_core/subtitles/parsers/__init__.py
from .srt_parser import detect_line_ending, parse_srt_file, parse_srt_text

__all__ = ['detect_line_ending', 'parse_srt_file', 'parse_srt_text']
