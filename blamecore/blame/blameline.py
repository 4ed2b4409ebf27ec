# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta, timezone

from blamecore.porcelain import *
from blamecore.toolbox import ageDays, firstLine, relativeTime, utcNow


def signatureDateTime(signature: Signature) -> datetime:
    """ Aware datetime of a signature, expressed in the signer's UTC offset. """
    tz = timezone(timedelta(minutes=signature.offset))
    return datetime.fromtimestamp(signature.time, tz)


@dataclasses.dataclass(frozen=True)
class BlameLine:
    """
    Attribution of a single line of a file to the commit that last touched it.
    """

    lineNumber: int
    " 1-based "

    commitId: str
    " Full 40-character hash "

    author: str
    authorEmail: str
    authorTimestamp: datetime
    summary: str
    fullMessage: str

    @staticmethod
    def fromCommit(lineNumber: int, commit: Commit) -> BlameLine:
        author = commit.author
        return BlameLine(
            lineNumber=lineNumber,
            commitId=str(commit.id),
            author=author.name,
            authorEmail=author.email,
            authorTimestamp=signatureDateTime(author),
            summary=firstLine(commit.message),
            fullMessage=commit.message,
        )

    @property
    def shortId(self) -> str:
        return id7(self.commitId)

    @property
    def ageDays(self) -> int:
        return self.ageDaysAt(utcNow())

    @property
    def relativeTime(self) -> str:
        return self.relativeTimeAt(utcNow())

    def ageDaysAt(self, now: datetime) -> int:
        return ageDays(now, self.authorTimestamp)

    def relativeTimeAt(self, now: datetime) -> str:
        return relativeTime(now, self.authorTimestamp)
