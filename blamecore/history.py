# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

"""
Commit log, per-file history and branch listing for history views.
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime

from blamecore.blame.blameline import signatureDateTime
from blamecore.porcelain import *
from blamecore.toolbox import Benchmark, benchmark, firstLine, relativePathInTree

logger = logging.getLogger(__name__)

DEFAULT_MAX_COMMITS = 1000


@dataclasses.dataclass(frozen=True)
class CommitInfo:
    commitId: str
    author: str
    authorEmail: str
    authorTimestamp: datetime
    summary: str
    parentIds: tuple[str, ...] = ()

    @property
    def shortId(self) -> str:
        return id7(self.commitId)

    @staticmethod
    def fromCommit(commit: Commit) -> CommitInfo:
        return CommitInfo(
            commitId=str(commit.id),
            author=commit.author.name,
            authorEmail=commit.author.email,
            authorTimestamp=signatureDateTime(commit.author),
            summary=firstLine(commit.message),
            parentIds=tuple(str(p) for p in commit.parent_ids),
        )


@dataclasses.dataclass(frozen=True)
class BranchInfo:
    name: str
    isRemote: bool
    isHead: bool
    tipId: str
    upstreamName: str = ""


def _blobIdAt(commit: Commit, path: str) -> Oid | None:
    try:
        return commit.tree[path].id
    except KeyError:
        return None


def fileHistory(repo: Repo | None, filePath: str) -> list[CommitInfo]:
    """
    Commits that changed the file relative to their first parent, newest first.
    """
    if repo is None or not repo.workdir:
        return []

    relPath = relativePathInTree(repo.workdir, filePath)
    if not relPath:
        return []

    history = []
    try:
        with Benchmark("fileHistory") as bench:
            bench.detail = relPath
            for commit in repo.walk_from_head(SortMode.TIME):
                blobId = _blobIdAt(commit, relPath)
                parentBlobId = _blobIdAt(commit.parents[0], relPath) if commit.parents else None
                if blobId != parentBlobId:
                    history.append(CommitInfo.fromCommit(commit))
    except (GitError, KeyError, ValueError, OSError) as exc:
        logger.warning(f"Can't read history of {relPath}: {exc}")
        return []

    logger.debug(f"{len(history)} commits touch {relPath}")
    return history


@benchmark
def commitLog(repo: Repo | None, maxCount: int = DEFAULT_MAX_COMMITS) -> list[CommitInfo]:
    """ Up to maxCount commits reachable from HEAD, newest first. """
    if repo is None:
        return []

    log = []
    try:
        for commit in repo.walk_from_head(SortMode.TIME):
            if len(log) >= maxCount:
                break
            log.append(CommitInfo.fromCommit(commit))
    except (GitError, KeyError, ValueError) as exc:
        logger.warning(f"Can't read commit log: {exc}")
        return []

    return log


def listBranches(repo: Repo | None) -> list[BranchInfo]:
    """ Local branches, then remote-tracking branches, each sorted by name. """
    if repo is None:
        return []

    branches = []
    try:
        for name in sorted(repo.branches.local):
            branch = repo.branches.local[name]
            upstream = branch.upstream
            branches.append(BranchInfo(
                name=name,
                isRemote=False,
                isHead=branch.is_head(),
                tipId=str(branch.resolve().target),
                upstreamName=upstream.shorthand if upstream is not None else ""))

        for name in sorted(repo.branches.remote):
            branch = repo.branches.remote[name]
            if name.endswith("/HEAD"):
                continue
            branches.append(BranchInfo(
                name=name,
                isRemote=True,
                isHead=False,
                tipId=str(branch.resolve().target)))
    except (GitError, KeyError, ValueError) as exc:
        logger.warning(f"Can't list branches: {exc}")
        return []

    return branches
