# subadjust_core/io/files.py
# -*- coding: utf-8 -*-
"""
Reading and writing subtitle files on disk.

In-place edits always go through backup() first so that a failed write
can be undone with restore().
"""
from __future__ import annotations

import codecs
import logging
import os
from pathlib import Path
from typing import Tuple

logger = logging.getLogger(__name__)

# Encodings to try when auto-detecting
# BOMs are sniffed first, so only BOM-less encodings are listed here.
ENCODINGS_TO_TRY = [
    'utf-8',
    'cp1252',     # Windows Western European
    'latin1',
]


def detect_encoding(path: Path) -> Tuple[str, bool]:
    """Detect file encoding. Returns (encoding, has_bom)."""
    with open(path, 'rb') as f:
        raw = f.read(4)

    if raw.startswith(codecs.BOM_UTF8):
        return ('utf-8-sig', True)
    elif raw.startswith(codecs.BOM_UTF16_LE) or raw.startswith(codecs.BOM_UTF16_BE):
        return ('utf-16', True)

    for encoding in ENCODINGS_TO_TRY:
        try:
            with open(path, 'r', encoding=encoding) as f:
                f.read()
            return (encoding, False)
        except (UnicodeDecodeError, UnicodeError, LookupError):
            continue

    return ('utf-8', False)


def read_text(path: Path) -> Tuple[str, str]:
    """
    Read a text file with its detected encoding.

    Line endings are left exactly as stored (newline='').

    Returns:
        (text, encoding) - pass the encoding back to write_text() to
        preserve it.
    """
    path = Path(path)
    encoding, has_bom = detect_encoding(path)
    logger.info("Opening input file: %s (%s%s)", path, encoding, ', BOM' if has_bom else '')
    with open(path, 'r', encoding=encoding, newline='') as f:
        text = f.read()
    return text, encoding


def write_text(path: Path, text: str, encoding: str = 'utf-8') -> None:
    logger.info("Writing subtitles to disk: %s", path)
    with open(path, 'w', encoding=encoding, newline='') as f:
        f.write(text)


def backup_path_for(path: Path, suffix: str = '.bak') -> Path:
    path = Path(path)
    return path.with_name(path.name + suffix)


def backup(path: Path, suffix: str = '.bak') -> Path:
    """Move `path` aside to `<path><suffix>`, replacing an older backup."""
    dest = backup_path_for(path, suffix)
    logger.info("Backing up file to %s", dest)
    os.replace(path, dest)
    return dest


def restore(path: Path, suffix: str = '.bak') -> None:
    """Put the backup taken by backup() back in place."""
    src = backup_path_for(path, suffix)
    logger.info("Restoring %s", src)
    os.replace(src, path)
