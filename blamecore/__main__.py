# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import logging
import sys
from argparse import ArgumentParser

from blamecore.appconsts import APP_DISPLAY_NAME, APP_VERSION
from blamecore.blame import BlameCache
from blamecore.porcelain import GitError
from blamecore.qt import QT_BINDING, QT_BINDING_VERSION
from blamecore.resolver import RepoResolver
from blamecore.toolbox import (
    BENCHMARK_LOGGING_LEVEL,
    RELATIVE_DATE_FORMAT,
    ellipsize,
    formatBlameDate,
    relativePathInTree,
    utcNow,
)

ABSOLUTE_DATE_FORMAT = "yyyy-MM-dd HH:mm"
AUTHOR_COLUMN_WIDTH = 15


def makeParser() -> ArgumentParser:
    parser = ArgumentParser(prog="blamecore", description=f"{APP_DISPLAY_NAME} {APP_VERSION}: annotate a file with git blame")
    parser.add_argument("path", help="File path")
    parser.add_argument("-d", "--date-format", default=RELATIVE_DATE_FORMAT,
                        help="'relative' or a Qt date pattern such as 'yyyy-MM-dd' (default: relative)")
    parser.add_argument("--no-relative", action="store_true",
                        help=f"Show absolute dates ({ABSOLUTE_DATE_FORMAT}) instead of relative ones")
    parser.add_argument("--version", action="version",
                        version=f"{APP_DISPLAY_NAME} {APP_VERSION} (Qt binding: {QT_BINDING} {QT_BINDING_VERSION})")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log more details (-vv for timings)")
    return parser


def sourceLinesAtHead(repo, path: str) -> list[str]:
    relPath = relativePathInTree(repo.workdir or "", path)
    try:
        blob = repo.blob_at_head(relPath)
    except (GitError, KeyError, ValueError):
        return []
    return blob.data.decode("utf-8", errors="replace").splitlines()


def main(argv=None) -> int:
    args = makeParser().parse_args(argv)

    level = [logging.WARNING, logging.DEBUG, BENCHMARK_LOGGING_LEVEL][min(args.verbose, 2)]
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format='%(levelname).1s %(asctime)s %(filename)-16s | %(message)s',
        datefmt="%H:%M:%S")
    logging.captureWarnings(True)

    dateFormat = args.date_format
    if args.no_relative and dateFormat.lower() == RELATIVE_DATE_FORMAT:
        dateFormat = ABSOLUTE_DATE_FORMAT

    resolver = RepoResolver()
    cache = BlameCache(resolver)

    try:
        if not cache.ensureLoaded(args.path):
            print(f"No blame available for {args.path}", file=sys.stderr)
            return 1

        lines = cache.getBlame(args.path)
        source = sourceLinesAtHead(resolver.repo, args.path)
        now = utcNow()

        for line in lines:
            i = line.lineNumber - 1
            text = source[i] if i < len(source) else ""
            author = ellipsize(line.author, AUTHOR_COLUMN_WIDTH)
            date = formatBlameDate(line.authorTimestamp, dateFormat, now)
            print(f"{line.shortId} {author:<{AUTHOR_COLUMN_WIDTH}} {date} | {text}")
    finally:
        resolver.close()

    return 0


if __name__ == '__main__':
    sys.exit(main())
