# subadjust_core/models/enums.py
# -*- coding: utf-8 -*-
from enum import Enum

class PositionKind(Enum):
    NONE = 'none'
    TOP = 'top'
    BOTTOM = 'bottom'
    PIXEL = 'pixel'
