# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import os
import tempfile
from datetime import datetime, timedelta, timezone

import pygit2
import pytest

from blamecore.porcelain import *
from blamecore.qt import *

TEST_SIGNATURE = Signature("Test Person", "toto@example.com", 1672600000, 0)

# 2023-01-01 00:00:00 UTC
BASE_TIME = 1672531200

ALICE = Signature("Alice Anderson", "alice@example.com", BASE_TIME, 60)
BOB = Signature("Bob Brown", "Bob@Example.com", BASE_TIME + 10 * 86400, -300)
CAROL = Signature("Carol Clark", "carol@example.com", BASE_TIME + 20 * 86400, 0)


def utcFromTimestamp(stamp: int) -> datetime:
    return datetime.fromtimestamp(stamp, timezone.utc)


def daysAfter(signature: Signature, days: float) -> datetime:
    return utcFromTimestamp(signature.time) + timedelta(days=days)


def tempPath(tempDir: tempfile.TemporaryDirectory | str, *parts: str) -> str:
    tempDirPath = tempDir if isinstance(tempDir, str) else tempDir.name
    return os.path.join(os.path.realpath(tempDirPath), *parts)


def writeFile(path, text):
    # Prevent accidental littering of current working directory
    assert os.path.isabs(path), "pass me an absolute path"

    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(text.encode("utf-8") if isinstance(text, str) else text)


def readTextFile(path):
    with open(path, encoding="utf-8") as f:
        return f.read()


def makeRepo(tempDir, name="repo", bare=False) -> str:
    """ Initialize an empty repository whose default branch is 'main'. Returns its path. """
    path = tempPath(tempDir, name)
    pygit2.init_repository(path, bare=bare, initial_head="main")
    return path


def commitFiles(workdir: str, files: dict[str, str | bytes], message="Commit", author=TEST_SIGNATURE) -> str:
    """
    Write files into the working tree and commit them on top of HEAD.
    Returns the new commit's full hash.
    """
    for relPath, contents in files.items():
        writeFile(os.path.join(workdir, relPath), contents)

    repo = Repo(workdir)
    try:
        index = repo.index
        for relPath in files:
            index.add(relPath)
        index.write()
        tree = index.write_tree()
        parents = [] if repo.head_is_unborn else [repo.head.target]
        oid = repo.create_commit("HEAD", author, author, message, tree, parents)
    finally:
        repo.free()

    return str(oid)


def makeThreeAuthorRepo(tempDir) -> tuple[str, list[str]]:
    """
    Five-line file touched by three authors:
    line 1 and 4 by Alice, lines 2-3 by Bob, line 5 by Carol.
    Returns (path to the file, [alice's commit, bob's commit, carol's commit]).
    """
    wd = makeRepo(tempDir)

    c1 = commitFiles(wd, {"story.txt": "one\ntwo\nthree\nfour\nfive\n"},
                     "Write the story\n\nFirst draft.", ALICE)
    c2 = commitFiles(wd, {"story.txt": "one\nTWO\nTHREE\nfour\nfive\n"},
                     "Shout the middle", BOB)
    c3 = commitFiles(wd, {"story.txt": "one\nTWO\nTHREE\nfour\nthe end\n"},
                     "Better ending", CAROL)

    return os.path.join(wd, "story.txt"), [c1, c2, c3]
