# subadjust_core/extraction/subtitles.py
# -*- coding: utf-8 -*-
"""
Produce SRT text from inputs that are not SRT already.

Text subtitle formats that pysubs2 understands are converted in-process.
Anything else (video containers, other subtitle files) goes through
ffmpeg, which picks the first subtitle stream unless configured otherwise.
"""
import logging
import shutil
import tempfile
from pathlib import Path
from typing import Optional

import pysubs2
from pysubs2.exceptions import Pysubs2Error

from ..errors import ExtractionError
from ..io.files import read_text
from ..io.runner import CommandRunner

logger = logging.getLogger(__name__)

# Subtitle formats pysubs2 can read without a video to take the frame rate from.
_PYSUBS2_SUFFIXES = {'.ass', '.ssa', '.vtt', '.json', '.sub', '.tmp'}

_FFMPEG_CANDIDATES = ['ffmpeg', 'ffmpeg.exe']


def is_native_srt(path: Path) -> bool:
    return Path(path).suffix.lower() == '.srt'


class SubtitleExtractor:
    """Converts a video or foreign subtitle file to SRT text."""

    def __init__(self, config, runner: CommandRunner, tool_paths: Optional[dict] = None):
        self.config = config
        self.runner = runner
        self.tool_paths = dict(tool_paths or {})

    def find_ffmpeg(self) -> str:
        """
        Locate ffmpeg: explicit tool path, then the configured path, then PATH.
        Under WSL, ffmpeg.exe can be picked up when there is no native ffmpeg.
        """
        if self.tool_paths.get('ffmpeg'):
            return self.tool_paths['ffmpeg']
        configured = self.config.get('ffmpeg_path', '')
        if configured:
            if not Path(configured).exists() and not shutil.which(configured):
                raise ExtractionError(f"Configured ffmpeg not found: {configured}")
            return configured
        for candidate in _FFMPEG_CANDIDATES:
            found = shutil.which(candidate)
            if found:
                return found
            logger.info("'%s' not found on PATH, trying the next candidate.", candidate)
        raise ExtractionError("Cannot extract subtitles: could not find `ffmpeg` or `ffmpeg.exe`.")

    def extract(self, input_path: Path) -> str:
        """
        Return SRT text for `input_path`.

        Raises:
            ExtractionError: missing input, unreadable subtitle file,
                ffmpeg not found, or ffmpeg failure.
        """
        input_path = Path(input_path)
        if not input_path.is_file():
            raise ExtractionError(f"Input path does not exist: {input_path}")

        if input_path.suffix.lower() in _PYSUBS2_SUFFIXES:
            try:
                return self._extract_with_pysubs2(input_path)
            except ExtractionError as e:
                logger.warning("%s Falling back to ffmpeg.", e)
        return self._extract_with_ffmpeg(input_path)

    def _extract_with_pysubs2(self, input_path: Path) -> str:
        self.runner._log_message(f'[Extract] Converting {input_path.name} with pysubs2...')
        try:
            text, _encoding = read_text(input_path)
            subs = pysubs2.SSAFile.from_string(text)
        except (Pysubs2Error, UnicodeError, ValueError) as e:
            raise ExtractionError(f"pysubs2 could not read {input_path.name}: {e}") from e

        if not subs.events:
            raise ExtractionError(f"No subtitle events found in {input_path.name}.")
        return subs.to_string('srt')

    def _extract_with_ffmpeg(self, input_path: Path) -> str:
        ffmpeg = self.find_ffmpeg()
        stream = int(self.config.get('extract_subtitle_stream', 0))

        with tempfile.TemporaryDirectory(prefix='subadjust_') as temp_dir:
            output_path = Path(temp_dir) / f'{input_path.stem}.srt'
            cmd = [
                'ffmpeg', '-y', '-loglevel', 'error',
                '-i', str(input_path),
                '-map', f'0:s:{stream}',
                '-f', 'srt', str(output_path),
            ]
            self.runner._log_message(f'[Extract] Extracting subtitle stream {stream} from {input_path.name}...')
            result = self.runner.run(cmd, {**self.tool_paths, 'ffmpeg': ffmpeg})

            if result is None or not output_path.exists():
                raise ExtractionError(
                    f"ffmpeg could not extract subtitle stream {stream} from {input_path.name}."
                )
            text, _encoding = read_text(output_path)

        if not text.strip():
            raise ExtractionError(f"ffmpeg produced no subtitles for {input_path.name}.")
        return text
