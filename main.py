#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
subadjust: retime and reposition SRT subtitles.
Command line entry point.
"""

import sys
from subadjust_core.cli import main

if __name__ == '__main__':
    sys.exit(main())
