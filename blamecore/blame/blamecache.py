# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

"""
Expiring per-file cache of blame results, with background loading.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
import time
from collections.abc import Callable
from concurrent.futures import Future

from blamecore.appconsts import *
from blamecore.blame.blameline import BlameLine
from blamecore.blame.extractor import extractBlame
from blamecore.qt import *
from blamecore.resolver import RepoResolver
from blamecore.toolbox import cacheKey

logger = logging.getLogger(__name__)

DEFAULT_TTL = 5 * 60

BlameLines = tuple[BlameLine, ...]
Extractor = Callable[..., BlameLines]


@dataclasses.dataclass(frozen=True)
class CacheEntry:
    key: str
    lines: BlameLines
    loadedAt: float

    def isExpired(self, now: float, ttl: float) -> bool:
        if ttl <= 0:
            return True
        return now - self.loadedAt > ttl


class BlameLoadJob(QRunnable):
    """
    Runs one cache operation on the cache's thread pool.
    """

    def __init__(self, work: Callable[[], None]):
        super().__init__()
        self.work = work

    def run(self):
        self.work()


class BlameCache(QObject):
    blameLoaded = Signal(str, object)
    """
    Emitted with (path, lines) when a background load completes.
    Emitted from a worker thread unless ForceSerial is set.
    """

    ForceSerial = APP_NOTHREADS
    """ Run background jobs synchronously on the calling thread (unit tests). """

    resolver: RepoResolver
    ttl: float

    def __init__(
            self,
            resolver: RepoResolver,
            ttl: float = DEFAULT_TTL,
            extractor: Extractor = extractBlame,
            clock: Callable[[], float] = time.monotonic,
            parent: QObject | None = None,
    ):
        super().__init__(parent)
        self.setObjectName("BlameCache")
        self.resolver = resolver
        self.ttl = ttl
        self.extractor = extractor
        self.clock = clock

        self._lock = threading.Lock()
        self._entries: dict[str, CacheEntry] = {}

        # A load may only store its result if the key's generation hasn't moved.
        # invalidateCache bumps one key, clearCache bumps the epoch.
        self._generations: dict[str, int] = {}
        self._epoch = 0

        # Generation of the background load in flight for each key
        self._pending: dict[str, tuple[int, int]] = {}

        self.threadPool = QThreadPool(self)

    # -------------------------------------------------------------------------
    # Synchronous access

    def getBlame(self, path: str) -> BlameLines:
        if not path:
            return ()

        lines, _current = self._fetch(path, cacheKey(path))
        return lines or ()

    def getBlameForLine(self, path: str, lineNumber: int) -> BlameLine | None:
        lines = self.getBlame(path)
        if 1 <= lineNumber <= len(lines):
            return lines[lineNumber - 1]
        return None

    def getBlameForLines(self, path: str, startLine: int, endLine: int) -> BlameLines:
        """ Lines startLine through endLine, inclusive. Out-of-range numbers are clipped. """
        lines = self.getBlame(path)
        startLine = max(1, startLine)
        if endLine < startLine:
            return ()
        return lines[startLine - 1: endLine]

    def ensureLoaded(self, path: str) -> bool:
        """
        Make sure that blame is available for the file, opening its repository
        if needed. Return True if the file has at least one blamed line.
        """
        if not path:
            return False

        entry = self._freshEntry(cacheKey(path))
        if entry is not None:
            return len(entry.lines) > 0

        if not self.resolver.tryOpen(path):
            return False

        return len(self.getBlame(path)) > 0

    def isCached(self, path: str) -> bool:
        return bool(path) and self._freshEntry(cacheKey(path)) is not None

    def invalidateCache(self, path: str):
        """
        Forget the file's blame. A load that is still running for this file
        won't store its result, and a new loadInBackground request starts over.
        """
        if not path:
            return
        key = cacheKey(path)
        with self._lock:
            removed = self._entries.pop(key, None)
            self._generations[key] = self._generations.get(key, 0) + 1
        if removed is not None:
            logger.debug(f"Invalidated: {path}")

    def clearCache(self):
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            self._generations.clear()
            self._epoch += 1
        logger.debug(f"Cleared {count} cache entries")

    def setTtl(self, seconds: float):
        self.ttl = seconds

    def _freshEntry(self, key: str) -> CacheEntry | None:
        with self._lock:
            entry = self._entries.get(key)
        if entry is None or entry.isExpired(self.clock(), self.ttl):
            return None
        return entry

    def _generationLocked(self, key: str) -> tuple[int, int]:
        return self._epoch, self._generations.get(key, 0)

    def _fetch(self, path: str, key: str) -> tuple[BlameLines | None, bool]:
        """
        Return cached or freshly extracted lines, and whether they are current.

        Lines are None if the extractor raised. Lines extracted while the key
        was invalidated are returned but not stored, and are not current.
        """
        entry = self._freshEntry(key)
        if entry is not None:
            logger.debug(f"Cache hit: {path}")
            return entry.lines, True

        logger.debug(f"Cache miss: {path}")

        with self._lock:
            generation = self._generationLocked(key)

        try:
            lines = tuple(self.extractor(self.resolver.repo, path))
        except Exception:
            logger.exception(f"Blame extraction failed: {path}")
            return None, False

        with self._lock:
            if self._generationLocked(key) != generation:
                logger.debug(f"Dropping blame invalidated during extraction: {path}")
                return lines, False
            self._entries[key] = CacheEntry(key, lines, self.clock())

        return lines, True

    # -------------------------------------------------------------------------
    # Background access

    def loadInBackground(self, path: str):
        """
        Compute blame for the file off the calling thread, then emit blameLoaded.
        Requests for a file whose load is already pending are folded into it,
        unless the file was invalidated since that load was scheduled.
        """
        if not path:
            return

        key = cacheKey(path)
        with self._lock:
            generation = self._generationLocked(key)
            if self._pending.get(key) == generation:
                logger.debug(f"Load already pending: {path}")
                return
            self._pending[key] = generation

        self._submit(lambda: self._backgroundLoad(path, key, generation))

    def getBlameAsync(self, path: str) -> Future:
        """ Run getBlame on the thread pool. The future resolves to the lines. """
        future = Future()
        future.set_running_or_notify_cancel()

        def work():
            try:
                future.set_result(self.getBlame(path))
            except Exception as exc:
                logger.exception(f"Async blame failed: {path}")
                future.set_exception(exc)

        self._submit(work)
        return future

    def subscribe(self, callback: Callable[[str, BlameLines], None]) -> Callable[[], None]:
        """
        Call `callback(path, lines)` after every background load.
        The callback runs on this cache's thread, via the event loop.
        Return a function that cancels the subscription.
        """
        self.blameLoaded.connect(callback, Qt.ConnectionType.QueuedConnection)

        def unsubscribe():
            try:
                self.blameLoaded.disconnect(callback)
            except (TypeError, RuntimeError):
                logger.debug("Subscriber already disconnected")

        return unsubscribe

    def waitForIdle(self, msecs: int = -1) -> bool:
        """ Block until all background jobs have finished. False on timeout. """
        return self.threadPool.waitForDone(msecs)

    def _submit(self, work: Callable[[], None]):
        if BlameCache.ForceSerial:
            work()
        else:
            self.threadPool.start(BlameLoadJob(work))

    def _backgroundLoad(self, path: str, key: str, generation: tuple[int, int]):
        try:
            lines, current = self._fetch(path, key)
        except Exception:
            logger.exception(f"Background blame failed: {path}")
            return
        finally:
            with self._lock:
                if self._pending.get(key) == generation:
                    del self._pending[key]

        # Failed, or superseded by an invalidation
        if lines is None or not current:
            return

        self.blameLoaded.emit(path, lines)
