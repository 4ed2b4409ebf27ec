# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Generator

import pygit2
import pytest

# Tests never need a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def setUpGitConfigSearchPaths(prefix=""):
    """
    Prevent unit tests from accessing the host system's git config files.
    This modifies libgit2 search paths and GIT_CONFIG environment variables
    for vanilla git.
    """
    ConfigLevel = pygit2.enums.ConfigLevel

    levels = [
        ConfigLevel.GLOBAL,
        ConfigLevel.XDG,
        ConfigLevel.SYSTEM,
        ConfigLevel.PROGRAMDATA,
    ]

    for level in levels:
        if prefix:
            path = f"{prefix}_{level.name}"
        else:
            path = ""
        pygit2.settings.search_path[level] = path

    os.environ["GIT_CONFIG_NOSYSTEM"] = "1"
    os.environ["GIT_CONFIG_GLOBAL"] = os.devnull


@pytest.fixture(scope='session', autouse=True)
def maskHostGitConfig():
    setUpGitConfigSearchPaths("")


@pytest.fixture(scope='session', autouse=True)
def setUpLogging():
    rootLogger = logging.root
    rootLogger.setLevel(logging.DEBUG)

    yield

    # Chatty destructors may cause spam after pytest has wound down.
    # Work around https://github.com/pytest-dev/pytest/issues/5502
    for handler in rootLogger.handlers:
        rootLogger.removeHandler(handler)


@pytest.fixture(autouse=True)
def resetPackageLogLevel():
    # BlameSession and installLogSink change the package's level
    yield
    logging.getLogger("blamecore").setLevel(logging.NOTSET)


@pytest.fixture(scope="session")
def qapp_cls():
    # The blame core only needs an event loop, not a GUI
    from blamecore.qt import QCoreApplication
    yield QCoreApplication


@pytest.fixture
def tempDir() -> Generator[tempfile.TemporaryDirectory, None, None]:
    location = os.environ.get("BLAMECORE_TEMPDIR", None)

    td = tempfile.TemporaryDirectory(prefix="blamecoretest-", dir=location)
    yield td
    td.cleanup()
