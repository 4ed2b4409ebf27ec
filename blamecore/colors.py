# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from blamecore.qt import *

teal        = QColor(0x00, 0x96, 0x88)
pink        = QColor(0xE9, 0x1E, 0x63)
purple      = QColor(0x9C, 0x27, 0xB0)
deepPurple  = QColor(0x67, 0x3A, 0xB7)
indigo      = QColor(0x3F, 0x51, 0xB5)
blue        = QColor(0x21, 0x96, 0xF3)
cyan        = QColor(0x00, 0xBC, 0xD4)
green       = QColor(0x4C, 0xAF, 0x50)
lightGreen  = QColor(0x8B, 0xC3, 0x4A)
orange      = QColor(0xFF, 0x98, 0x00)
deepOrange  = QColor(0xFF, 0x57, 0x22)
brown       = QColor(0x79, 0x55, 0x48)

yellow      = QColor(0xFF, 0xEB, 0x3B)
red         = QColor(0xF4, 0x43, 0x36)

AUTHOR_PALETTE = (
    teal,
    pink,
    purple,
    deepPurple,
    indigo,
    blue,
    cyan,
    green,
    lightGreen,
    orange,
    deepOrange,
    brown,
)
""" Colors handed out to authors, in order of first appearance. """

HEAT_RECENT = green
HEAT_MIDDLE = yellow
HEAT_OLD = red

LIGHT_THEME_DIMMING = 0.8


def paletteFromHex(names) -> tuple[QColor, ...]:
    """ Build a palette from color names such as "#009688". Invalid names raise ValueError. """
    palette = []
    for name in names:
        color = QColor(name)
        if not color.isValid():
            raise ValueError(f"invalid color: {name!r}")
        palette.append(color)
    return tuple(palette)


def rgb(color: QColor) -> tuple[int, int, int]:
    return color.red(), color.green(), color.blue()


def isDarkColor(color: QColor) -> bool:
    luminance = (0.299 * color.red() + 0.587 * color.green() + 0.114 * color.blue()) / 255
    return luminance < 0.5


def adjustForTheme(color: QColor, darkTheme: bool) -> QColor:
    """ Light themes get slightly darker colors; dark themes keep them as-is. """
    if darkTheme:
        return QColor(color)
    return QColor(int(color.red() * LIGHT_THEME_DIMMING),
                  int(color.green() * LIGHT_THEME_DIMMING),
                  int(color.blue() * LIGHT_THEME_DIMMING))
