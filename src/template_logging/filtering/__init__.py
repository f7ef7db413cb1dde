"""
Record admission based on severity
"""

from .base import LogFilter
from .level_filter import SeverityFilter, SeverityLoggingFilter, to_severity

__all__ = [
    "LogFilter",
    "SeverityFilter",
    "SeverityLoggingFilter",
    "to_severity",
]
