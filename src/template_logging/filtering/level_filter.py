"""
Severity-based admission
"""

import logging
from typing import Optional, Union

from ..severity import (
    Severity,
    severity_from_logging_level,
    severity_from_string,
)
from .base import LogFilter

SeverityLike = Union[Severity, int, str]


def to_severity(value: SeverityLike) -> Severity:
    if isinstance(value, str):
        return severity_from_string(value)
    try:
        return Severity(value)
    except ValueError:
        return Severity.NONE


class SeverityFilter(LogFilter):
    """
    Admit records whose severity is at least ``min_severity`` and, when
    ``max_severity`` is given, at most ``max_severity``
    """

    def __init__(
        self,
        min_severity: SeverityLike = Severity.NONE,
        max_severity: Optional[SeverityLike] = None,
    ):
        self.min_severity = to_severity(min_severity)
        self.max_severity = to_severity(max_severity) if max_severity is not None else None

    def admits(self, severity: Severity) -> bool:
        if severity < self.min_severity:
            return False
        return self.max_severity is None or severity <= self.max_severity


class SeverityLoggingFilter(logging.Filter):
    """The same admission rule for stdlib logging handlers and loggers"""

    def __init__(self, severity_filter: SeverityFilter, name: str = ""):
        super().__init__(name)
        self.severity_filter = severity_filter

    def filter(self, record: logging.LogRecord) -> bool:
        if not super().filter(record):
            return False
        return self.severity_filter.admits(severity_from_logging_level(record.levelno))
