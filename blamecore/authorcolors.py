# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import logging
from collections.abc import Sequence

from blamecore import colors
from blamecore.qt import *

logger = logging.getLogger(__name__)


class AuthorColorTable:
    """
    Hands out palette colors to authors in order of first appearance.

    An author keeps the same color until clear() is called. Emails are
    compared case-insensitively.
    """

    palette: tuple[QColor, ...]

    assignments: dict[str, int]
    " Palette index by case-folded author email "

    cursor: int

    def __init__(self, palette: Sequence[QColor] = colors.AUTHOR_PALETTE):
        if not palette:
            raise ValueError("author palette must not be empty")
        self.palette = tuple(palette)
        self.assignments = {}
        self.cursor = 0

    def colorFor(self, email: str | None) -> QColor:
        if not email:
            return self.palette[0]

        key = email.casefold()

        try:
            index = self.assignments[key]
        except KeyError:
            index = self.cursor % len(self.palette)
            self.assignments[key] = index
            self.cursor += 1
            logger.debug(f"Author #{self.cursor} {key} gets palette color {index}")

        return self.palette[index]

    def clear(self):
        self.assignments.clear()
        self.cursor = 0

    def __len__(self):
        return len(self.assignments)

    def __contains__(self, email: str):
        return bool(email) and email.casefold() in self.assignments
