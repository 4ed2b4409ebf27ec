# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import os


def canonicalPath(path: str) -> str:
    """
    Absolute, symlink-free path without a trailing separator.
    """
    path = os.path.realpath(os.path.abspath(path))
    if len(path) > 1:
        path = path.rstrip("/\\") or path
    return path


def cacheKey(path: str) -> str:
    """ Case-insensitive key for per-file caches. """
    return os.path.normpath(path).casefold()


def relativePathInTree(treeRoot: str, filePath: str) -> str:
    """
    Return filePath relative to treeRoot, with forward slashes as git expects.

    The prefix comparison is case-insensitive on the canonicalized absolute
    paths. Returns an empty string if filePath isn't inside treeRoot (or if
    filePath is the root itself).
    """
    if not treeRoot or not filePath:
        return ""

    base = canonicalPath(treeRoot)
    full = canonicalPath(filePath)

    if not full.casefold().startswith(base.casefold()):
        return ""

    remainder = full[len(base):]

    # Reject siblings that merely share a prefix ("/repo" vs "/repo2/file")
    if remainder and remainder[0] not in "/\\":
        return ""

    return remainder.lstrip("/\\").replace("\\", "/")


def nearestExistingDirectory(path: str) -> str:
    """
    Walk upward from path until an existing directory is found.
    A path to an existing file yields its containing directory.
    Returns an empty string if nothing along the way exists.
    """
    path = os.path.abspath(path)
    if os.path.isfile(path):
        path = os.path.dirname(path)

    while not os.path.isdir(path):
        parent = os.path.dirname(path)
        if parent == path:
            return ""
        path = parent

    return path
