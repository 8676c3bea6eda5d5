# subadjust_core/pipeline.py
# -*- coding: utf-8 -*-
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .errors import ConfigError
from .extraction import SubtitleExtractor, is_native_srt
from .io.files import backup, read_text, restore, write_text
from .io.runner import CommandRunner
from .models import TransformOptions
from .subtitles import CueCollection, apply_transforms

logger = logging.getLogger(__name__)


@dataclass
class AdjustResult:
    text: str
    cues: CueCollection
    output_path: Optional[Path] = None
    backup_path: Optional[Path] = None


class AdjustPipeline:
    """
    read (or extract) -> parse -> transform -> serialize -> backup -> write

    Nothing is written unless every earlier step succeeded. A failed write
    puts the backup back in place.
    """

    def __init__(self, config, log_callback: Optional[Callable[[str], None]] = None,
                 tool_paths: Optional[dict] = None):
        self.config = config
        self.log_callback = log_callback or logging.getLogger('subadjust_core.io.runner').info
        self.tool_paths = dict(tool_paths or {})
        self.runner = CommandRunner(config, self.log_callback)

    def _load(self, input_path: Path, extract: bool):
        if extract:
            if is_native_srt(input_path):
                raise ConfigError(f"{input_path.name} is already an SRT file; nothing to extract.", ('--extract',))
            extractor = SubtitleExtractor(self.config, self.runner, self.tool_paths)
            return extractor.extract(input_path), 'utf-8'
        return read_text(input_path)

    def run(self, input_path, options: TransformOptions, extract: bool = False,
            output_path=None, write: bool = True) -> AdjustResult:
        """
        Args:
            input_path: SRT file, or with extract=True any file ffmpeg/pysubs2 can read.
            options: Resolved transform settings.
            extract: Convert the input to SRT first.
            output_path: Where to write. Defaults to the input itself, or the
                input with a .srt suffix when extracting.
            write: False to only return the text (e.g. for stdout).
        """
        input_path = Path(input_path)
        if not input_path.exists():
            raise ConfigError(f"Input path does not exist: {input_path}")

        if output_path is not None:
            destination = Path(output_path)
        elif extract:
            destination = input_path.with_suffix('.srt')
        else:
            destination = input_path
        if write and input_path.is_symlink() and destination == input_path:
            raise ConfigError("Will not modify a symlink.")

        text, source_encoding = self._load(input_path, extract)
        cues = CueCollection.parse(text)
        logger.info("Applying changes to %d subtitles in memory.", len(cues))
        if not options.is_noop:
            cues = apply_transforms(cues, options)
        out_text = cues.serialize()

        result = AdjustResult(text=out_text, cues=cues)
        if not write:
            return result

        encoding = self.config.get('output_encoding') or source_encoding
        suffix = self.config.get('backup_suffix', '.bak')
        if destination.exists() and self.config.get('make_backup', True):
            result.backup_path = backup(destination, suffix)
        try:
            write_text(destination, out_text, encoding)
        except (OSError, UnicodeError):
            if result.backup_path is not None:
                restore(destination, suffix)
            raise
        result.output_path = destination
        return result
