# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

"""
Wires the resolver, the blame cache and the color tables together according
to BlamePrefs. This is the object a host editor talks to.
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime

from blamecore import colors
from blamecore.annotationtext import buildInlineText, formatStatusBarText, formatTooltip
from blamecore.authorcolors import AuthorColorTable
from blamecore.blame.blamecache import BlameCache
from blamecore.blame.blameline import BlameLine
from blamecore.heatmap import heatColor
from blamecore.logsink import setPackageLogLevel
from blamecore.porcelain import set_owner_validation
from blamecore.prefs import BlamePrefs, ColorMode
from blamecore.qt import *
from blamecore.resolver import RepoResolver
from blamecore.toolbox import formatBlameDate, utcNow

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class LineAnnotation:
    lineNumber: int
    shortId: str
    dateText: str
    inlineText: str
    statusBarText: str
    tooltip: str
    color: QColor | None


class BlameSession:
    resolver: RepoResolver
    cache: BlameCache
    authorColors: AuthorColorTable
    prefs: BlamePrefs

    def __init__(self, prefs: BlamePrefs | None = None, darkTheme: bool = True):
        self.prefs = prefs or BlamePrefs()
        self.darkTheme = darkTheme

        self.resolver = RepoResolver()
        self.cache = BlameCache(self.resolver, ttl=self.prefs.cacheTtlSeconds)
        self.authorColors = AuthorColorTable(colors.paletteFromHex(self.prefs.authorPalette))

        setPackageLogLevel(self.prefs.logLevel)

        if self.prefs.trustAllRepositories:
            logger.info("Repository ownership checks disabled")
            set_owner_validation(False)

    def openFile(self, path: str) -> bool:
        """
        Open the file's repository and start loading its blame in the
        background. Listen to `cache.blameLoaded` for the result.
        """
        if not self.resolver.tryOpen(path):
            return False
        self.cache.loadInBackground(path)
        return True

    def annotationColor(self, line: BlameLine, now: datetime | None = None) -> QColor | None:
        mode = self.prefs.colorMode

        if mode == ColorMode.Author:
            color = self.authorColors.colorFor(line.authorEmail)
        elif mode == ColorMode.Age:
            color = heatColor(line.ageDaysAt(now or utcNow()), self.prefs.maxAgeDays)
        else:
            return None

        return colors.adjustForTheme(color, self.darkTheme)

    def annotate(self, line: BlameLine, now: datetime | None = None) -> LineAnnotation:
        now = now or utcNow()
        prefs = self.prefs
        return LineAnnotation(
            lineNumber=line.lineNumber,
            shortId=line.shortId,
            dateText=formatBlameDate(line.authorTimestamp, prefs.dateFormat, now),
            inlineText=buildInlineText(line, prefs, now),
            statusBarText=formatStatusBarText(line, prefs, now),
            tooltip=formatTooltip(line, now),
            color=self.annotationColor(line, now),
        )

    def applyPrefs(self, prefs: BlamePrefs):
        oldPrefs = self.prefs
        self.prefs = prefs

        if prefs.cacheDurationMinutes != oldPrefs.cacheDurationMinutes:
            self.cache.setTtl(prefs.cacheTtlSeconds)

        if prefs.authorPalette != oldPrefs.authorPalette:
            logger.debug("Author palette changed, resetting color assignments")
            self.authorColors = AuthorColorTable(colors.paletteFromHex(prefs.authorPalette))

        if prefs.trustAllRepositories != oldPrefs.trustAllRepositories:
            set_owner_validation(not prefs.trustAllRepositories)

        setPackageLogLevel(prefs.logLevel)

    def shutdown(self):
        assert onAppThread()
        if not self.cache.waitForIdle(5_000):
            logger.warning("Background blame jobs still running at shutdown")
        self.cache.clearCache()
        self.resolver.close()
