"""
Severity levels and their textual renderings
"""

import logging
from enum import IntEnum
from typing import Any, Dict, Tuple


class Severity(IntEnum):
    """Ordered log severities. NONE sorts below everything else."""

    NONE = 0
    TRACE = 1
    DEBUG = 2
    INFO = 3
    WARN = 4
    ERROR = 5
    CRITICAL = 6
    STACK = 7
    FATAL = 8
    PANIC = 9


# Index of every table is the severity value
UC_SEVERITY_STRINGS: Tuple[str, ...] = (
    "NONE",
    "TRACE",
    "DEBUG",
    "INFO",
    "WARN",
    "ERROR",
    "CRITICAL",
    "STACK",
    "FATAL",
    "PANIC",
)
CAP_SEVERITY_STRINGS = tuple(s.capitalize() for s in UC_SEVERITY_STRINGS)
LC_SEVERITY_STRINGS = tuple(s.lower() for s in UC_SEVERITY_STRINGS)

UC_SHORT_SEVERITY_STRINGS: Tuple[str, ...] = (
    "NONE",
    "TRAC",
    "DEBG",
    "INFO",
    "WARN",
    "EROR",
    "CRIT",
    "STAK",
    "FATL",
    "PANC",
)
CAP_SHORT_SEVERITY_STRINGS = tuple(s.capitalize() for s in UC_SHORT_SEVERITY_STRINGS)
LC_SHORT_SEVERITY_STRINGS = tuple(s.lower() for s in UC_SHORT_SEVERITY_STRINGS)

UC_SHORTEST_SEVERITY_STRINGS = tuple(s[0] for s in UC_SEVERITY_STRINGS)
LC_SHORTEST_SEVERITY_STRINGS = tuple(s.lower() for s in UC_SHORTEST_SEVERITY_STRINGS)

_MAX_INDEX = len(UC_SEVERITY_STRINGS) - 1

_NAME_LOOKUP: Dict[str, Severity] = {}
for _sev in Severity:
    _NAME_LOOKUP[UC_SEVERITY_STRINGS[_sev]] = _sev
    _NAME_LOOKUP[UC_SHORT_SEVERITY_STRINGS[_sev]] = _sev
# Common aliases used by the standard library
_NAME_LOOKUP["WARNING"] = Severity.WARN
_NAME_LOOKUP["NOTSET"] = Severity.NONE

_TO_LOGGING_LEVEL: Dict[Severity, int] = {
    Severity.NONE: logging.NOTSET,
    Severity.TRACE: 5,
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.CRITICAL: logging.CRITICAL,
    Severity.STACK: 55,
    Severity.FATAL: 60,
    Severity.PANIC: 70,
}


def severity_to_index(value: Any) -> int:
    """Return a safe table index for value; out of range maps to NONE"""
    try:
        index = int(value)
    except (TypeError, ValueError):
        return 0
    if 0 <= index <= _MAX_INDEX:
        return index
    return 0


def severity_from_string(name: str) -> Severity:
    """Parse any long or short spelling, case-insensitively"""
    return _NAME_LOOKUP.get(name.strip().upper(), Severity.NONE)


def severity_from_logging_level(levelno: int) -> Severity:
    """Map a stdlib logging level number onto the closest severity"""
    if levelno <= logging.NOTSET:
        return Severity.NONE
    if levelno < logging.DEBUG:
        return Severity.TRACE
    if levelno < logging.INFO:
        return Severity.DEBUG
    if levelno < logging.WARNING:
        return Severity.INFO
    if levelno < logging.ERROR:
        return Severity.WARN
    if levelno < logging.CRITICAL:
        return Severity.ERROR
    if levelno < _TO_LOGGING_LEVEL[Severity.STACK]:
        return Severity.CRITICAL
    if levelno < _TO_LOGGING_LEVEL[Severity.FATAL]:
        return Severity.STACK
    if levelno < _TO_LOGGING_LEVEL[Severity.PANIC]:
        return Severity.FATAL
    return Severity.PANIC


def severity_to_logging_level(severity: Severity) -> int:
    return _TO_LOGGING_LEVEL[Severity(severity_to_index(severity))]
