"""
Base class and shared helpers for byte-oriented formatters
"""

import os
from abc import ABC, abstractmethod

from ..record import LogRecord

# Rendered when a record carries no file name
FILE_PLACEHOLDER = "???"

_SEPARATORS = {"/", os.sep}


def base_name(path: str) -> str:
    """Everything after the last path separator"""
    return path[max(path.rfind(sep) for sep in _SEPARATORS) + 1 :]


class Formatter(ABC):
    """
    Turns a LogRecord into the exact bytes written to a sink

    Implementations keep scratch buffers, so one instance must not be
    used from several threads at once without a lock.
    """

    @abstractmethod
    def format(self, record: LogRecord) -> bytes:
        """Render record, newline-terminated unless the result is empty"""
        pass

    @abstractmethod
    def should_capture_location(self) -> bool:
        """True if records need file/line/function filled in"""
        pass
