"""
The value handed to a formatter for a single log call
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional, Tuple

from .severity import Severity


@dataclass
class LogRecord:
    """
    Everything a formatter may need for one line

    The message is kept unexpanded (``fmt`` + ``args``) until
    ``get_message()`` is called, so records that end up filtered out
    cost no string formatting.
    """

    time: datetime = field(default_factory=datetime.now)
    severity: Severity = Severity.NONE
    file: str = ""
    line: int = 0
    function: str = ""
    package: str = ""
    message: str = ""
    fmt: Optional[str] = None
    args: Tuple[Any, ...] = ()
    pid: int = 0

    def get_message(self) -> str:
        """Resolve printf-style or concatenation-style message text"""
        if self.fmt is not None:
            fmt = str(self.fmt)
            if not self.args:
                return fmt
            args = self.args
            # Same convention as the logging module: a lone mapping feeds %(name)s
            if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
                args = args[0]
            try:
                return fmt % args
            except Exception as e:
                # A bad call site must never take the program down
                return f"{fmt} (format error: {e}; args={self.args!r})"
        if self.args:
            return " ".join(str(arg) for arg in self.args)
        return self.message
