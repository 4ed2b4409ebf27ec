# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import threading

from blamecore.porcelain import *
from blamecore.toolbox import canonicalPath, nearestExistingDirectory

logger = logging.getLogger(__name__)


def _isOwnershipError(exc: Exception) -> bool:
    message = str(exc).lower()
    return "not owned by current user" in message or "safe.directory" in message


class RepoResolver:
    """
    Finds the repository that contains a file and keeps it open.

    At most one repository is held at a time. Opening a file in another
    repository frees the previous handle first.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._repo: Repo | None = None
        self._root = ""

    def tryOpen(self, filePath: str) -> bool:
        if not filePath:
            return False

        startDir = nearestExistingDirectory(filePath)
        if not startDir:
            logger.debug(f"No existing directory above {filePath}")
            return False

        try:
            gitDir = discover_repository(startDir)
        except (GitError, OSError, KeyError, ValueError) as exc:
            self._logOpenFailure(startDir, exc)
            return False

        if not gitDir:
            logger.debug(f"Not in a repository: {filePath}")
            return False

        with self._lock:
            if self._repo is not None and canonicalPath(self._repo.path) == canonicalPath(gitDir):
                logger.debug(f"Reusing open repository: {self._root}")
                return True

            self._closeLocked()

            try:
                repo = Repo(gitDir, RepositoryOpenFlag.NO_SEARCH)
            except (GitError, OSError, KeyError, ValueError) as exc:
                self._logOpenFailure(gitDir, exc)
                return False

            self._repo = repo
            self._root = canonicalPath(repo.workdir or repo.path)

        logger.info(f"Opened repository: {self._root}")
        return True

    def close(self):
        with self._lock:
            self._closeLocked()

    def _closeLocked(self):
        if self._repo is None:
            return
        logger.debug(f"Closing repository: {self._root}")
        self._repo.free()
        self._repo = None
        self._root = ""

    @staticmethod
    def _logOpenFailure(path: str, exc: Exception):
        logger.warning(f"Can't open repository at {path}: {exc}")
        if _isOwnershipError(exc):
            logger.warning(f"To trust this repository, run: "
                           f"git config --global --add safe.directory '{path}' "
                           f"(or turn on trustAllRepositories)")

    @property
    def repo(self) -> Repo | None:
        with self._lock:
            return self._repo

    @property
    def currentRoot(self) -> str:
        with self._lock:
            return self._root

    @property
    def isOpen(self) -> bool:
        with self._lock:
            return self._repo is not None

    @property
    def currentBranchName(self) -> str | None:
        with self._lock:
            if self._repo is None:
                return None
            try:
                return self._repo.head_branch_shorthand
            except (GitError, KeyError, ValueError) as exc:
                logger.debug(f"Can't read HEAD: {exc}")
                return None
