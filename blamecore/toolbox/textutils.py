# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

def messageSummary(body: str, elision="") -> tuple[str, bool]:
    """
    Return the first line of a commit message, and whether the message
    continues past that line. If `elision` is given, it is appended to
    the summary of continued messages.
    """
    messageContinued = False
    message: str = body.strip()
    newline = message.find('\n')
    if newline > -1:
        messageContinued = newline < len(message) - 1
        message = message[:newline].rstrip('\r')
        if messageContinued:
            message += elision
    return message, messageContinued


def firstLine(text: str) -> str:
    summary, _dummy = messageSummary(text or "")
    return summary


def ellipsize(text: str, maxLength: int, ellipsis: str = "…") -> str:
    """
    Truncate text so that it fits in maxLength characters, ellipsis included.
    Text that already fits is returned unchanged.
    """
    if not text or maxLength <= 0 or len(text) <= maxLength:
        return text or ""
    keep = max(0, maxLength - len(ellipsis))
    return text[:keep] + ellipsis
