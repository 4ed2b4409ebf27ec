# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import logging
from datetime import datetime, timezone

from blamecore import colors
from blamecore.heatmap import heatColor
from blamecore.prefs import BlamePrefs, ColorMode, LoggingLevel
from blamecore.session import BlameSession, LineAnnotation
from .util import *


def testOpenFileLoadsInBackground(tempDir, qtbot):
    path, (c1, c2, c3) = makeThreeAuthorRepo(tempDir)
    session = BlameSession()

    with qtbot.waitSignal(session.cache.blameLoaded) as blocker:
        assert session.openFile(path)

    loadedPath, lines = blocker.args
    assert loadedPath == path
    assert [line.commitId for line in lines] == [c1, c2, c2, c1, c3]
    assert session.resolver.isOpen
    session.shutdown()


def testOpenFileOutsideRepo(tempDir, qtbot):
    outside = tempPath(tempDir, "loose.txt")
    writeFile(outside, "x\n")
    session = BlameSession()

    with qtbot.assertNotEmitted(session.cache.blameLoaded):
        assert not session.openFile(outside)
        assert not session.openFile("")


def testAnnotateAuthorColors(tempDir):
    path, commits = makeThreeAuthorRepo(tempDir)
    session = BlameSession(BlamePrefs(colorMode=ColorMode.Author), darkTheme=True)
    assert session.cache.ensureLoaded(path)
    lines = session.cache.getBlame(path)

    now = daysAfter(CAROL, 3)
    annotations = [session.annotate(line, now) for line in lines]
    assert all(isinstance(a, LineAnnotation) for a in annotations)

    palette = colors.AUTHOR_PALETTE
    assert [a.color for a in annotations] == [palette[0], palette[1], palette[1], palette[0], palette[2]]

    carol = annotations[4]
    assert carol.lineNumber == 5
    assert carol.shortId == commits[2][:7]
    assert carol.dateText == "3 days ago"
    assert carol.inlineText == "Carol Clark | 3 days ago | Better ending"
    assert carol.statusBarText == "Carol Clark, 3 days ago • Better ending"
    assert commits[2] in carol.tooltip


def testAnnotateLightTheme(tempDir):
    path, commits = makeThreeAuthorRepo(tempDir)
    session = BlameSession(darkTheme=False)
    session.cache.ensureLoaded(path)
    line = session.cache.getBlameForLine(path, 1)

    color = session.annotationColor(line)
    assert colors.rgb(color) == colors.rgb(colors.adjustForTheme(colors.AUTHOR_PALETTE[0], darkTheme=False))


def testAnnotateAgeColors(tempDir):
    path, commits = makeThreeAuthorRepo(tempDir)
    session = BlameSession(BlamePrefs(colorMode=ColorMode.Age, maxAgeDays=100))
    session.cache.ensureLoaded(path)
    line = session.cache.getBlameForLine(path, 5)

    now = daysAfter(CAROL, 50)
    assert colors.rgb(session.annotationColor(line, now)) == colors.rgb(heatColor(50, 100))
    assert colors.rgb(session.annotate(line, now).color) == (255, 235, 59)


def testAnnotateWithoutColors(tempDir):
    path, commits = makeThreeAuthorRepo(tempDir)
    session = BlameSession(BlamePrefs(colorMode=ColorMode.NoColors))
    session.cache.ensureLoaded(path)
    line = session.cache.getBlameForLine(path, 1)
    assert session.annotate(line).color is None


def testApplyPrefs(tempDir):
    session = BlameSession()
    assert session.cache.ttl == 300

    session.authorColors.colorFor("alice@example.com")
    table = session.authorColors

    # Same palette: assignments survive
    session.applyPrefs(BlamePrefs(cacheDurationMinutes=1))
    assert session.cache.ttl == 60
    assert session.authorColors is table

    # New palette: assignments start over
    session.applyPrefs(BlamePrefs(authorPalette=("#ff0000", "#0000ff")))
    assert session.authorColors is not table
    assert len(session.authorColors) == 0
    assert colors.rgb(session.authorColors.colorFor("bob@example.com")) == (255, 0, 0)


def testApplyPrefsLogLevel():
    session = BlameSession(BlamePrefs(logLevel=LoggingLevel.Info))
    assert logging.getLogger("blamecore").level == logging.INFO

    session.applyPrefs(BlamePrefs(logLevel=LoggingLevel.Benchmark))
    assert logging.getLogger("blamecore").level == 5


def testShutdown(tempDir):
    path, commits = makeThreeAuthorRepo(tempDir)
    session = BlameSession()
    assert session.openFile(path)
    session.shutdown()
    assert not session.resolver.isOpen
    assert not session.cache.isCached(path)


@pytest.fixture
def restoreOwnerValidation():
    saved = get_owner_validation()
    yield
    set_owner_validation(saved)


def testTrustAllRepositories(restoreOwnerValidation):
    set_owner_validation(True)

    session = BlameSession(BlamePrefs())
    assert get_owner_validation()

    session = BlameSession(BlamePrefs(trustAllRepositories=True))
    assert not get_owner_validation()

    session.applyPrefs(BlamePrefs(trustAllRepositories=False))
    assert get_owner_validation()

    session.applyPrefs(BlamePrefs(trustAllRepositories=True))
    assert not get_owner_validation()
