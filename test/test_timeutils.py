# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from datetime import datetime, timedelta, timezone

from blamecore.toolbox import *
from .util import *

NOW = datetime(2024, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("elapsed, expected", [
    (timedelta(seconds=30), "just now"),
    (timedelta(minutes=1), "1 minute ago"),
    (timedelta(minutes=5), "5 minutes ago"),
    (timedelta(hours=1), "1 hour ago"),
    (timedelta(hours=23, minutes=59), "23 hours ago"),
    (timedelta(days=1), "1 day ago"),
    (timedelta(days=3), "3 days ago"),
    (timedelta(days=7), "7 days ago"),
    (timedelta(days=8), "1 week ago"),
    (timedelta(days=14), "2 weeks ago"),
    (timedelta(days=31), "1 month ago"),
    (timedelta(days=365), "12 months ago"),
    (timedelta(days=400), "1 year ago"),
    (timedelta(days=800), "2 years ago"),
])
def testRelativeTime(elapsed, expected):
    assert relativeTime(NOW, NOW - elapsed) == expected


def testRelativeTimeInFuture():
    assert relativeTime(NOW, NOW + timedelta(days=3)) == "just now"
    assert relativeTime(NOW, NOW) == "just now"


def testRelativeTimeAcrossOffsets():
    then = datetime(2024, 6, 15, 13, 0, 0, tzinfo=timezone(timedelta(hours=3)))  # 10:00 UTC
    assert relativeTime(NOW, then) == "2 hours ago"


def testAgeDays():
    assert ageDays(NOW, NOW) == 0
    assert ageDays(NOW, NOW - timedelta(hours=23)) == 0
    assert ageDays(NOW, NOW - timedelta(days=1, hours=12)) == 1
    assert ageDays(NOW, NOW - timedelta(days=365)) == 365
    assert ageDays(NOW, NOW + timedelta(days=10)) == 0


def testAgeDaysIsMonotonic():
    then = NOW - timedelta(days=40)
    ages = [ageDays(NOW + timedelta(hours=h), then) for h in range(0, 24 * 10, 7)]
    assert ages == sorted(ages)


def testFormatBlameDateRelative():
    stamp = NOW - timedelta(days=3)
    assert formatBlameDate(stamp, "relative", NOW) == "3 days ago"
    assert formatBlameDate(stamp, "Relative", NOW) == "3 days ago"
    assert formatBlameDate(stamp, "", NOW) == "3 days ago"


def testFormatBlameDateUsesAuthorOffset():
    # 2023-01-15 23:30 in UTC+2 is already 2023-01-15 21:30 UTC; the author's local day must be kept
    stamp = datetime(2023, 1, 15, 23, 30, tzinfo=timezone(timedelta(hours=2)))
    assert formatBlameDate(stamp, "yyyy-MM-dd", NOW) == "2023-01-15"
    assert formatBlameDate(stamp, "HH:mm", NOW) == "23:30"


def testRelativePathInTree(tempDir):
    root = tempPath(tempDir, "Repo")
    assert relativePathInTree(root, root + "/src/main.py") == "src/main.py"
    assert relativePathInTree(root + "/", root + "/a.txt") == "a.txt"
    assert relativePathInTree(root, root) == ""
    assert relativePathInTree(root, root + "2/file.txt") == ""
    assert relativePathInTree(root, tempPath(tempDir, "elsewhere.txt")) == ""
    assert relativePathInTree("", root + "/a.txt") == ""


def testRelativePathInTreeIgnoresCase(tempDir):
    root = tempPath(tempDir, "Repo")
    assert relativePathInTree(root, tempPath(tempDir, "REPO", "Src", "Main.py")) == "Src/Main.py"


def testNearestExistingDirectory(tempDir):
    base = tempPath(tempDir)
    writeFile(base + "/a/b/file.txt", "hello")

    assert nearestExistingDirectory(base + "/a/b/file.txt") == base + "/a/b"
    assert nearestExistingDirectory(base + "/a/b") == base + "/a/b"
    assert nearestExistingDirectory(base + "/a/nope/deeper/x.txt") == base + "/a"


def testCacheKeyFoldsCase():
    assert cacheKey("/Work/Src/File.PY") == cacheKey("/work/src/file.py")
    assert cacheKey("/work/./src/../src/file.py") == cacheKey("/work/src/file.py")


def testEllipsize():
    assert ellipsize("short", 15) == "short"
    assert ellipsize("exactly fifteen", 15) == "exactly fifteen"
    assert ellipsize("this is way too long", 10) == "this is w…"
    assert len(ellipsize("x" * 100, 50)) == 50
    assert ellipsize("anything", 0) == "anything"
    assert ellipsize("", 5) == ""


def testMessageSummary():
    assert messageSummary("Fix bug\n\nLong explanation") == ("Fix bug", True)
    assert messageSummary("Fix bug\n") == ("Fix bug", False)
    assert messageSummary("Fix bug\r\nMore", elision=" […]") == ("Fix bug […]", True)
    assert firstLine("") == ""
