# subadjust_core/cli.py
# -*- coding: utf-8 -*-
"""
Command line interface.

Adjust subtitle timing or positions in SRT files: fix the time offset or
time scale of subtitles that were meant for a different cut or a
different playback speed, or move subtitles to the top or bottom of the
frame.

Times are given as [[hh:]mm:]ss[,ms], a decimal number of seconds, or a
mix like 1:30.4. Values starting with '-' that are not plain numbers
must be attached with '=', e.g. --to-top=-1:00 or --offset=-1:30.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import AppConfig
from .errors import ConfigError, ParseError, SubAdjustError
from .models import TimeRange, TimeValue
from .options import AdjustRequest, resolve_transform_options
from .pipeline import AdjustPipeline

logger = logging.getLogger('subadjust')


def _time_arg(value: str) -> TimeValue:
    try:
        return TimeValue.parse(value)
    except ParseError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _range_arg(value: str) -> TimeRange:
    try:
        return TimeRange.parse(value)
    except ParseError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='subadjust',
        description="Adjust subtitle timing or positions in SRT files.",
        epilog="Times: [[hh:]mm:]ss[,ms] or decimal seconds. "
               "Ranges: START-END where either end may be omitted, e.g. 10-20, -1:00.5, 300-, -. "
               "--to-top and --to-bottom take one or more ranges; put INPUT first or end the ranges with --, "
               "e.g. subadjust --to-top 10-20 -- movie.srt.",
    )
    p.add_argument('input', type=Path, help="Input file in the SubRip (.srt) format.")

    offset = p.add_argument_group('offset')
    offset.add_argument('-o', '--offset', type=_time_arg,
                        help="How far to shift subtitles forward. Negative values shift them backward.")
    offset.add_argument('-f', '--from', dest='from_time', type=_time_arg,
                        help="Used with --to to create an offset (to - from) instead of --offset.")
    offset.add_argument('-t', '--to', dest='to_time', type=_time_arg,
                        help="Used with --from to create an offset (to - from) instead of --offset.")
    offset.add_argument('-s', '--offset-start', type=_time_arg,
                        help="Only subtitles starting at or after this time are adjusted (offset and scale).")

    scale = p.add_argument_group('scale')
    scale.add_argument('--scale', type=float,
                       help="Scale the subtitle speed slower (<1) or faster (>1).")
    scale.add_argument('--scale-pivot', type=_time_arg,
                       help="The time that is assumed to be perfectly matched already when scaling.")
    scale.add_argument('--subs-are-slow', action='store_true',
                       help="The subtitles lag more and more behind: guess the usual PAL/NTSC correction.")
    scale.add_argument('--subs-are-fast', action='store_true',
                       help="The subtitles run further and further ahead: guess the usual PAL/NTSC correction.")

    position = p.add_argument_group('position')
    position.add_argument('--to-top', type=_range_arg, nargs='+', action='extend', default=[], metavar='RANGE',
                          help="Move subtitles starting in this range (before timing changes) to the top. "
                               "Not possible for subtitles with pixel positions.")
    position.add_argument('--to-bottom', type=_range_arg, nargs='+', action='extend', default=[], metavar='RANGE',
                          help="Move subtitles starting in this range (before timing changes) back to the "
                               "bottom by removing their position tags.")

    p.add_argument('-r', '--renumber', action='store_true', help="Renumber the subtitles 1..N.")
    p.add_argument('-e', '--extract', action='store_true',
                   help="Convert a video or other subtitle file to .srt first (needs ffmpeg for videos).")
    p.add_argument('--output', type=Path, help="Write here instead of modifying the input.")
    p.add_argument('--stdout', action='store_true', help="Print the result instead of writing a file.")
    p.add_argument('--no-backup', action='store_true', help="Don't keep a .bak copy of the overwritten file.")
    p.add_argument('--config', type=Path, help="Settings file (JSON).")
    p.add_argument('-v', '--verbose', action='count', default=0, help="More logging (-vv for debug).")
    p.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return p


def _configure_logging(verbosity: int, config_level: str) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = getattr(logging, str(config_level).upper(), logging.WARNING)
    logging.basicConfig(level=level, format='%(message)s', stream=sys.stderr, force=True)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = AppConfig(args.config)
    _configure_logging(args.verbose, config.get('log_level', 'WARNING'))
    if args.no_backup:
        config.set('make_backup', False)

    request = AdjustRequest(
        offset=args.offset,
        from_time=args.from_time,
        to_time=args.to_time,
        offset_start=args.offset_start,
        scale=args.scale,
        scale_pivot=args.scale_pivot,
        subs_are_slow=args.subs_are_slow,
        subs_are_fast=args.subs_are_fast,
        to_top=args.to_top,
        to_bottom=args.to_bottom,
        renumber=args.renumber,
        extract=args.extract,
    )

    try:
        if args.output is not None and args.stdout:
            raise ConfigError("`--output` and `--stdout` can't be used together.", ('--output', '--stdout'))
        options = resolve_transform_options(request)
        pipeline = AdjustPipeline(config)
        result = pipeline.run(
            args.input,
            options,
            extract=args.extract,
            output_path=args.output,
            write=not args.stdout,
        )
    except (SubAdjustError, OSError) as e:
        logger.error("Error: %s", e)
        return 1

    if args.stdout:
        sys.stdout.write(result.text)
    else:
        logger.info("Wrote %d subtitles to %s", len(result.cues), result.output_path)
    return 0


if __name__ == '__main__':
    sys.exit(main())
