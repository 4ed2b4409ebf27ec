# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import dataclasses
import enum
import logging
from collections.abc import Mapping

from blamecore.qt import *
from blamecore.toolbox.benchmark import BENCHMARK_LOGGING_LEVEL
from blamecore.toolbox.timeutils import RELATIVE_DATE_FORMAT

logger = logging.getLogger(__name__)


DEFAULT_AUTHOR_PALETTE = (
    "#009688",
    "#E91E63",
    "#9C27B0",
    "#673AB7",
    "#3F51B5",
    "#2196F3",
    "#00BCD4",
    "#4CAF50",
    "#8BC34A",
    "#FF9800",
    "#FF5722",
    "#795548",
)

DEFAULT_STATUS_BAR_FORMAT = "{author}, {date} • {message}"


class ColorMode(enum.IntEnum):
    NoColors = 0
    Author = 1
    Age = 2


class LoggingLevel(enum.IntEnum):
    Benchmark = BENCHMARK_LOGGING_LEVEL
    Debug = logging.DEBUG
    Info = logging.INFO
    Warning = logging.WARNING
    Error = logging.ERROR


@dataclasses.dataclass
class BlamePrefs:
    _category_inline            : int                   = 0
    showInlineBlame             : bool                  = True
    showAuthor                  : bool                  = True
    showDate                    : bool                  = True
    showMessage                 : bool                  = True
    compactMode                 : bool                  = False
    dateFormat                  : str                   = RELATIVE_DATE_FORMAT

    _category_colors            : int                   = 0
    colorMode                   : ColorMode             = ColorMode.Author
    maxAgeDays                  : int                   = 365
    authorPalette               : tuple                 = DEFAULT_AUTHOR_PALETTE

    _category_statusBar         : int                   = 0
    showStatusBar               : bool                  = True
    statusBarFormat             : str                   = DEFAULT_STATUS_BAR_FORMAT
    statusBarRelativeDate       : bool                  = True
    statusBarMaxLength          : int                   = 100
    statusBarPrefix             : str                   = ""

    _category_advanced          : int                   = 0
    cacheDurationMinutes        : float                 = 5
    trustAllRepositories        : bool                  = False
    logLevel                    : LoggingLevel          = LoggingLevel.Warning

    def __post_init__(self):
        self.colorMode = _coerceEnum(ColorMode, self.colorMode, "colorMode")
        self.logLevel = _coerceEnum(LoggingLevel, self.logLevel, "logLevel")
        self.authorPalette = tuple(self.authorPalette)

        if self.cacheDurationMinutes < 0:
            raise ValueError(f"cacheDurationMinutes must be >= 0: {self.cacheDurationMinutes}")
        if self.maxAgeDays <= 0:
            raise ValueError(f"maxAgeDays must be > 0: {self.maxAgeDays}")
        if self.statusBarMaxLength < 0:
            raise ValueError(f"statusBarMaxLength must be >= 0: {self.statusBarMaxLength}")
        if not self.authorPalette:
            raise ValueError("authorPalette must not be empty")
        for name in self.authorPalette:
            if not isinstance(name, str) or not QColor(name).isValid():
                raise ValueError(f"invalid color in authorPalette: {name!r}")

    @property
    def cacheTtlSeconds(self) -> float:
        return self.cacheDurationMinutes * 60

    @property
    def isRelativeDate(self) -> bool:
        return not self.dateFormat or self.dateFormat.lower() == RELATIVE_DATE_FORMAT

    @classmethod
    def fromDict(cls, data: Mapping):
        """
        Build prefs from a plain mapping (e.g. parsed JSON).
        Unknown keys are ignored with a warning; bad values raise ValueError.
        """
        knownKeys = {f.name for f in dataclasses.fields(cls) if not f.name.startswith("_")}
        kwargs = {}

        for key, value in data.items():
            if key not in knownKeys:
                logger.warning(f"Ignoring unknown pref: {key}")
                continue
            kwargs[key] = value

        return cls(**kwargs)

    def toDict(self) -> dict:
        result = {}
        for f in dataclasses.fields(self):
            if f.name.startswith("_"):
                continue
            value = getattr(self, f.name)
            if isinstance(value, enum.Enum):
                value = value.name
            elif isinstance(value, tuple):
                value = list(value)
            result[f.name] = value
        return result


def _coerceEnum(enumType: type[enum.IntEnum], value, fieldName: str):
    """ Accept an enum member, its name, or its integer value. """
    if isinstance(value, enumType):
        return value
    if isinstance(value, str):
        try:
            return enumType[value]
        except KeyError:
            pass
        for member in enumType:
            if member.name.lower() == value.lower():
                return member
    elif isinstance(value, int) and not isinstance(value, bool):
        try:
            return enumType(value)
        except ValueError:
            pass
    raise ValueError(f"invalid {fieldName}: {value!r}")
