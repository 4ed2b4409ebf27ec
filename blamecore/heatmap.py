# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

"""
Age heat map: recent commits are green, old commits are red, with yellow
halfway through.
"""

from blamecore import colors
from blamecore.qt import *


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _channel(start: int, end: int, u: float) -> int:
    return min(255, max(0, round(lerp(start, end, u))))


def heatColor(ageDays: int, maxAgeDays: int = 365) -> QColor:
    if maxAgeDays <= 0:
        maxAgeDays = 1

    t = min(1.0, max(0.0, ageDays / maxAgeDays))

    if t < 0.5:
        start, end = colors.HEAT_RECENT, colors.HEAT_MIDDLE
        u = t * 2
    else:
        start, end = colors.HEAT_MIDDLE, colors.HEAT_OLD
        u = (t - 0.5) * 2

    return QColor(_channel(start.red(), end.red(), u),
                  _channel(start.green(), end.green(), u),
                  _channel(start.blue(), end.blue(), u))
