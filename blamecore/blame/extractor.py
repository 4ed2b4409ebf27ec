# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

"""
Turn pygit2 blame hunks into one BlameLine per line of a file.
"""

from __future__ import annotations

import logging

from blamecore.appconsts import *
from blamecore.blame.blameline import BlameLine
from blamecore.porcelain import *
from blamecore.toolbox import Benchmark, relativePathInTree

logger = logging.getLogger(__name__)


def extractBlame(repo: Repo | None, filePath: str) -> tuple[BlameLine, ...]:
    """
    Blame a file as of HEAD.

    Returns an empty tuple if the file is outside the repository's working
    tree, was never committed, is binary, or if the backend fails in any way.
    """

    if repo is None or not filePath:
        return ()

    workdir = repo.workdir
    if not workdir:
        logger.debug(f"Can't blame in bare repository: {filePath}")
        return ()

    relPath = relativePathInTree(workdir, filePath)
    if not relPath:
        logger.debug(f"Not in working tree {workdir}: {filePath}")
        return ()

    with Benchmark("extractBlame") as bench:
        bench.detail = relPath
        try:
            lines = _extract(repo, relPath)
        except (GitError, KeyError, ValueError, OSError) as exc:
            logger.debug(f"Can't blame {relPath}: {exc}")
            return ()

    logger.debug(f"Blamed {relPath}: {len(lines)} lines")
    return lines


def _extract(repo: Repo, relPath: str) -> tuple[BlameLine, ...]:
    blob = repo.blob_at_head(relPath)
    if blob.is_binary:
        logger.debug(f"Not blaming binary file: {relPath}")
        return ()

    commitCache: dict[Oid, Commit] = {}
    lines: list[BlameLine] = []

    for hunk in repo.blame(relPath):
        oid = hunk.final_commit_id
        try:
            commit = commitCache[oid]
        except KeyError:
            commit = repo.peel_commit(oid)
            commitCache[oid] = commit

        # Hunks must tile the file without gaps
        if APP_DEBUG:
            assert hunk.final_start_line_number == len(lines) + 1, \
                f"blame hunk starts at {hunk.final_start_line_number}, expected {len(lines) + 1}"

        for _i in range(hunk.lines_in_hunk):
            lines.append(BlameLine.fromCommit(len(lines) + 1, commit))

    return tuple(lines)
