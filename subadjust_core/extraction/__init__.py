# subadjust_core/extraction/__init__.py
from .subtitles import SubtitleExtractor, is_native_srt

__all__ = ['SubtitleExtractor', 'is_native_srt']
