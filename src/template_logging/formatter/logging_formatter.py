"""
Adapter that lets the standard logging module render through a template
"""

import logging
import threading
from datetime import datetime
from typing import Optional, Union

from ..compiler import CompiledFormat, GrammarType
from ..config import LoggerConfig, get_default_config
from ..record import LogRecord
from ..severity import severity_from_logging_level
from .base import Formatter
from .std_formatter import StdFormatter


def from_logging_record(record: logging.LogRecord) -> LogRecord:
    """Convert a stdlib LogRecord into the formatter's record type"""
    return LogRecord(
        time=datetime.fromtimestamp(record.created),
        severity=severity_from_logging_level(record.levelno),
        file=record.pathname or "",
        line=record.lineno or 0,
        function=f"{record.module}.{record.funcName}" if record.funcName else "",
        package=record.module or "",
        message=record.getMessage(),
        pid=record.process or 0,
    )


class TemplateFormatter(logging.Formatter):
    """
    logging.Formatter that renders records through a compiled template

    Rendering is serialized on the instance, so one formatter may be
    attached to several handlers.
    """

    def __init__(
        self,
        template: Optional[Union[str, CompiledFormat]] = None,
        grammar: Optional[GrammarType] = None,
        config: Optional[LoggerConfig] = None,
        formatter: Optional[Formatter] = None,
    ):
        super().__init__()
        self._lock = threading.Lock()
        self.config = config or get_default_config()
        if formatter is not None:
            self.formatter = formatter
        else:
            self.formatter = StdFormatter(
                template if template is not None else self.config.format,
                grammar or self.config.grammar,
            )

    def format(self, record: logging.LogRecord) -> str:
        converted = from_logging_record(record)
        with self._lock:
            rendered = self.formatter.format(converted)
        text = rendered.decode("utf-8", "replace")
        # The handler appends its own terminator
        if text.endswith("\n"):
            text = text[:-1]

        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            text = f"{text}\n{record.exc_text}"
        return text
