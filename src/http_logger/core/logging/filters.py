"""
Level filtering.

Severities are totally ordered ``debug < info < warn < error``. The Logger
asks the filter before doing any other work, so a rejected call costs nothing.
"""

import logging
from typing import Any, Union

from .config import LogLevel


def should_log(level: Union[LogLevel, str], threshold: Union[LogLevel, str]) -> bool:
    """
    Check whether an entry at ``level`` passes ``threshold``.

    An unknown threshold falls back to INFO; an unknown level is treated as
    INFO as well.

    Example:
        >>> should_log("warn", "info")
        True
        >>> should_log("debug", "info")
        False
    """
    return LogLevel.parse(level).ordinal >= LogLevel.parse(threshold).ordinal


class LevelFilter(logging.Filter):
    """
    Minimum-severity gate.

    Used directly by the Logger through ``allows()``. As a ``logging.Filter``
    it can also be attached to stdlib handlers; records carrying an ``entry``
    attribute are judged by the entry's level, other records by ``levelno``.

    Example:
        >>> level_filter = LevelFilter("warn")
        >>> level_filter.allows("error")
        True
        >>> level_filter.allows("info")
        False
    """

    def __init__(self, threshold: Union[LogLevel, str] = LogLevel.INFO):
        super().__init__()
        self.threshold = LogLevel.parse(threshold)

    def allows(self, level: Union[LogLevel, str]) -> bool:
        """Return True if ``level`` is at or above the threshold."""
        return should_log(level, self.threshold)

    def filter(self, record: logging.LogRecord) -> bool:
        entry: Any = getattr(record, "entry", None)
        if entry is not None:
            return self.allows(entry.level)
        return record.levelno >= self.threshold.logging_level
