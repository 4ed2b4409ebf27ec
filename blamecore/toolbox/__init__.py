# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from .benchmark import BENCHMARK_LOGGING_LEVEL, Benchmark, benchmark
from .pathutils import cacheKey, canonicalPath, nearestExistingDirectory, relativePathInTree
from .textutils import ellipsize, firstLine, messageSummary
from .timeutils import (
    RELATIVE_DATE_FORMAT,
    ageDays,
    formatAbsoluteDate,
    formatBlameDate,
    relativeTime,
    utcNow,
)
