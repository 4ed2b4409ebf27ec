# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

"""
Thin layer over pygit2 with the handful of repository helpers that the blame
pipeline needs.
"""

from __future__ import annotations

import pygit2 as _pygit2
from pygit2 import (
    Blob,
    Commit,
    GitError,
    Oid,
    Signature,
    discover_repository,
)
from pygit2.enums import RepositoryOpenFlag, SortMode


HEADS_PREFIX = "refs/heads/"


def id7(oid: Oid | str) -> str:
    """ Abbreviate a commit hash to 7 characters. """
    return str(oid)[:7]


def set_owner_validation(enabled: bool):
    """
    When enabled (libgit2's default), repositories owned by another user
    can only be opened if they are listed in safe.directory.
    """
    _pygit2.settings.owner_validation = enabled


def get_owner_validation() -> bool:
    return bool(_pygit2.settings.owner_validation)


class Repo(_pygit2.Repository):
    """
    pygit2.Repository with a few conveniences.
    """

    @property
    def head_branch_shorthand(self) -> str:
        """
        Name of the branch HEAD points to, even if the branch is unborn.
        Returns "HEAD" if HEAD is detached.
        """
        if self.head_is_unborn:
            target = self.lookup_reference("HEAD").target
            return str(target).removeprefix(HEADS_PREFIX)
        return self.head.shorthand

    @property
    def head_commit_id(self) -> Oid:
        return self.head.target

    @property
    def head_tree(self) -> _pygit2.Tree:
        return self.head.peel(Commit).tree

    def peel_commit(self, oid: Oid) -> Commit:
        return self[oid].peel(Commit)

    def blob_at_head(self, path: str) -> Blob:
        """ Raise KeyError if the path isn't a blob in the tree at HEAD. """
        obj = self.head_tree[path]
        if not isinstance(obj, Blob):
            raise KeyError(f"not a blob: {path}")
        return obj

    def walk_from_head(self, sort: SortMode = SortMode.TIME):
        if self.head_is_unborn:
            return iter(())
        return self.walk(self.head_commit_id, sort)


__all__ = [
    "Blob",
    "Commit",
    "GitError",
    "HEADS_PREFIX",
    "Oid",
    "Repo",
    "RepositoryOpenFlag",
    "Signature",
    "SortMode",
    "discover_repository",
    "get_owner_validation",
    "id7",
    "set_owner_validation",
]
