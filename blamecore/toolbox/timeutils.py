# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

from blamecore.localization import *
from blamecore.qt import *

RELATIVE_DATE_FORMAT = "relative"

_SECONDS_PER_DAY = 86400


def utcNow() -> datetime:
    return datetime.now(timezone.utc)


def relativeTime(now: datetime, then: datetime) -> str:
    """
    Human-readable elapsed time between two instants, e.g. "3 weeks ago".
    Timestamps in the future read as "just now".
    """
    elapsed = now - then
    if elapsed <= timedelta(0):
        return _("just now")

    seconds = elapsed.total_seconds()
    days = seconds / _SECONDS_PER_DAY

    if days > 365:
        n = int(days // 365)
        return _n("{n} year ago", "{n} years ago", n)

    if days > 30:
        n = int(days // 30)
        return _n("{n} month ago", "{n} months ago", n)

    if days > 7:
        n = int(days // 7)
        return _n("{n} week ago", "{n} weeks ago", n)

    if days >= 1:
        n = int(days)
        return _n("{n} day ago", "{n} days ago", n)

    if seconds >= 3600:
        n = int(seconds // 3600)
        return _n("{n} hour ago", "{n} hours ago", n)

    if seconds >= 60:
        n = int(seconds // 60)
        return _n("{n} minute ago", "{n} minutes ago", n)

    return _("just now")


def ageDays(now: datetime, then: datetime) -> int:
    """ Whole days elapsed since `then`. Never negative. """
    days = (now - then).total_seconds() / _SECONDS_PER_DAY
    return max(0, math.floor(days))


def toQDateTime(stamp: datetime) -> QDateTime:
    """ Convert an aware datetime to a QDateTime in the same UTC offset. """
    offset = stamp.utcoffset() or timedelta(0)
    return QDateTime.fromSecsSinceEpoch(int(stamp.timestamp()), QTimeZone(int(offset.total_seconds())))


def formatAbsoluteDate(stamp: datetime, pattern: str | QLocale.FormatType) -> str:
    """ Render a timestamp with a Qt date format pattern, e.g. "yyyy-MM-dd HH:mm". """
    return QLocale().toString(toQDateTime(stamp), pattern)


def formatBlameDate(stamp: datetime, dateFormat: str, now: datetime | None = None) -> str:
    """
    Format an annotation date: "relative" (any case) yields relativeTime(),
    anything else is used as a Qt date format pattern.
    """
    if not dateFormat or dateFormat.lower() == RELATIVE_DATE_FORMAT:
        return relativeTime(now or utcNow(), stamp)
    return formatAbsoluteDate(stamp, dateFormat)
