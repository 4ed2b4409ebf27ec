# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from __future__ import annotations

from datetime import datetime

from blamecore.blame.blameline import BlameLine
from blamecore.localization import *
from blamecore.prefs import BlamePrefs
from blamecore.qt import *
from blamecore.toolbox import ellipsize, formatAbsoluteDate, formatBlameDate, relativeTime, utcNow

INLINE_SEPARATOR = " | "
INLINE_AUTHOR_MAX = 15
INLINE_MESSAGE_MAX = 50
STATUS_BAR_ELLIPSIS = "..."


def buildInlineText(line: BlameLine, prefs: BlamePrefs, now: datetime | None = None) -> str:
    """
    End-of-line annotation, e.g. "Jane Doe | 3 days ago | Fix parser".
    """
    now = now or utcNow()
    parts = []

    if prefs.showAuthor:
        parts.append(ellipsize(line.author, INLINE_AUTHOR_MAX))

    if prefs.showDate:
        parts.append(formatBlameDate(line.authorTimestamp, prefs.dateFormat, now))

    if prefs.showMessage and not prefs.compactMode:
        parts.append(ellipsize(line.summary, INLINE_MESSAGE_MAX))

    return INLINE_SEPARATOR.join(parts)


def formatStatusBarText(line: BlameLine, prefs: BlamePrefs, now: datetime | None = None) -> str:
    """
    Fill in the status bar template. Recognized placeholders:
    {author}, {date}, {message}, {sha}.
    """
    now = now or utcNow()

    if prefs.statusBarRelativeDate:
        date = relativeTime(now, line.authorTimestamp)
    else:
        date = formatAbsoluteDate(line.authorTimestamp, QLocale.FormatType.ShortFormat)

    text = (prefs.statusBarFormat
            .replace("{author}", line.author or _("Unknown"))
            .replace("{date}", date)
            .replace("{message}", line.summary)
            .replace("{sha}", line.shortId))

    maxLength = prefs.statusBarMaxLength
    if maxLength > 0 and len(text) > maxLength:
        text = text[:max(0, maxLength - len(STATUS_BAR_ELLIPSIS))] + STATUS_BAR_ELLIPSIS

    # The prefix doesn't count towards statusBarMaxLength
    return prefs.statusBarPrefix + text


def formatTooltip(line: BlameLine, now: datetime | None = None) -> str:
    """ Plain-text details for a hover popup. """
    now = now or utcNow()
    absolute = formatAbsoluteDate(line.authorTimestamp, QLocale.FormatType.LongFormat)
    return "\n".join([
        _("Commit: {0}", line.commitId),
        _("Author: {0} <{1}>", line.author or _("Unknown"), line.authorEmail),
        _("Date: {0} ({1})", absolute, line.relativeTimeAt(now)),
        "",
        line.fullMessage.strip(),
    ])
