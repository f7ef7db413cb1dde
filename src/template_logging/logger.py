import logging
import os
import sys
import threading
import traceback
from typing import Any, BinaryIO, Optional, Union

from .config import LoggerConfig, get_default_config
from .filtering import SeverityFilter, SeverityLoggingFilter, to_severity
from .filtering.level_filter import SeverityLike
from .formatter import Formatter, StdFormatter, TemplateFormatter
from .formatter.base import FILE_PLACEHOLDER
from .record import LogRecord
from .severity import Severity, severity_to_logging_level


class LogPanic(RuntimeError):
    """Raised by panic() after the record has been written"""


def _binary_stream(output: str) -> BinaryIO:
    stream = sys.stdout if output == "stdout" else sys.stderr
    return getattr(stream, "buffer", stream)


def _capture_location(record: LogRecord, depth: int) -> None:
    """Fill file/line/function from the frame ``depth`` levels above the caller"""
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        record.file = FILE_PLACEHOLDER
        record.line = 0
        return

    code = frame.f_code
    module = frame.f_globals.get("__name__", "")
    name = getattr(code, "co_qualname", code.co_name)
    record.file = code.co_filename
    record.line = frame.f_lineno
    record.function = f"{module}.{name}" if module else name
    record.package = module


def format_stacks() -> bytes:
    """Stack traces of every running thread"""
    names = {thread.ident: thread.name for thread in threading.enumerate()}
    lines = []
    for ident, frame in sys._current_frames().items():
        lines.append(f"Thread {names.get(ident, '?')} ({ident}):\n")
        lines.extend(traceback.format_stack(frame))
        lines.append("\n")
    return "".join(lines).encode("utf-8", "backslashreplace")


class TemplateLogger:
    """
    Front door that builds records, filters them and writes the rendered
    bytes to a sink

    Rendering and writing happen under one lock since formatters reuse
    their scratch buffers.
    """

    def __init__(
        self,
        out: Optional[BinaryIO] = None,
        formatter: Optional[Union[str, Formatter]] = None,
        config: Optional[LoggerConfig] = None,
    ):
        self.config = config or get_default_config()
        self._lock = threading.Lock()
        self._out = out if out is not None else _binary_stream(self.config.output)
        self._formatter = self._make_formatter(formatter)
        self._filter = self.config.create_filter()
        self._verbosity = self.config.verbosity
        self._pid = os.getpid()

    def _make_formatter(self, formatter: Optional[Union[str, Formatter]]) -> Formatter:
        if formatter is None:
            return StdFormatter(self.config.format, self.config.grammar)
        if isinstance(formatter, str):
            return StdFormatter(formatter, self.config.grammar)
        return formatter

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    @property
    def severity_filter(self) -> SeverityFilter:
        return self._filter

    def set_output(self, out: BinaryIO) -> None:
        """Set the output destination for this logger"""
        with self._lock:
            self._out = out

    def set_formatter(self, formatter: Union[str, Formatter]) -> None:
        new_formatter = self._make_formatter(formatter)
        with self._lock:
            self._formatter = new_formatter

    def set_severities(
        self, min_severity: SeverityLike, max_severity: Optional[SeverityLike] = None
    ) -> None:
        """Only records within [min_severity, max_severity] are written"""
        severity_filter = SeverityFilter(min_severity, max_severity)
        with self._lock:
            self._filter = severity_filter

    def set_verbosity(self, level: int) -> None:
        with self._lock:
            self._verbosity = level

    def is_v(self, level: int) -> bool:
        """
        Tests whether the verbosity is at least level::

            if log.is_v(2):
                log.info("some info")
        """
        return self._verbosity >= level

    def v(self, level: int) -> "Verbose":
        """Chainable verbosity check: ``log.v(2).info("some info")``"""
        return Verbose(self._verbosity >= level, self)

    def output(
        self,
        severity: Severity,
        calldepth: int,
        message: str = "",
        fmt: Optional[str] = None,
        args: tuple = (),
    ) -> bool:
        """
        Filter, render and write one record

        calldepth counts frames above this one and picks the caller
        reported for file/line/function, which are only looked up when
        the formatter uses them. Returns False if the record was filtered.
        """
        if not self._filter.admits(severity):
            return False

        record = LogRecord(
            severity=severity, message=message, fmt=fmt, args=args, pid=self._pid
        )
        # Frame lookup runs outside the lock
        if self._formatter.should_capture_location():
            _capture_location(record, calldepth)

        with self._lock:
            self._out.write(self._formatter.format(record))
        return True

    def write_stacks(self) -> None:
        stacks = format_stacks()
        with self._lock:
            self._out.write(stacks)

    def trace(self, msg: Any, *args: Any) -> None:
        self.output(Severity.TRACE, 2, fmt=msg, args=args)

    def debug(self, msg: Any, *args: Any) -> None:
        self.output(Severity.DEBUG, 2, fmt=msg, args=args)

    def info(self, msg: Any, *args: Any) -> None:
        self.output(Severity.INFO, 2, fmt=msg, args=args)

    def warn(self, msg: Any, *args: Any) -> None:
        self.output(Severity.WARN, 2, fmt=msg, args=args)

    def error(self, msg: Any, *args: Any) -> None:
        self.output(Severity.ERROR, 2, fmt=msg, args=args)

    def critical(self, msg: Any, *args: Any) -> None:
        self.output(Severity.CRITICAL, 2, fmt=msg, args=args)

    def log(self, severity: SeverityLike, msg: Any, *args: Any) -> None:
        self.output(to_severity(severity), 2, fmt=msg, args=args)

    def print(self, *values: Any) -> None:
        """Space-joined values at DEBUG"""
        self.output(Severity.DEBUG, 2, args=values)

    def stack(self, msg: Any, *args: Any) -> None:
        """Like info() at STACK, followed by the stacks of all threads"""
        if self.output(Severity.STACK, 2, fmt=msg, args=args):
            self.write_stacks()

    def fatal(self, msg: Any, *args: Any) -> None:
        """Write the record, then exit the process with status 1"""
        self.output(Severity.FATAL, 2, fmt=msg, args=args)
        sys.exit(1)

    def panic(self, msg: Any, *args: Any) -> None:
        """Write the record, then raise LogPanic with the message"""
        message = LogRecord(fmt=msg, args=args).get_message()
        self.output(Severity.PANIC, 2, message)
        raise LogPanic(message)


class Verbose:
    """
    Result of TemplateLogger.v(); every call is a no-op unless the
    verbosity check passed
    """

    def __init__(self, enabled: bool, logger: TemplateLogger):
        self.enabled = enabled
        self.logger = logger

    def __bool__(self) -> bool:
        return self.enabled

    def trace(self, msg: Any, *args: Any) -> None:
        if self.enabled:
            self.logger.output(Severity.TRACE, 2, fmt=msg, args=args)

    def debug(self, msg: Any, *args: Any) -> None:
        if self.enabled:
            self.logger.output(Severity.DEBUG, 2, fmt=msg, args=args)

    def info(self, msg: Any, *args: Any) -> None:
        if self.enabled:
            self.logger.output(Severity.INFO, 2, fmt=msg, args=args)

    def warn(self, msg: Any, *args: Any) -> None:
        if self.enabled:
            self.logger.output(Severity.WARN, 2, fmt=msg, args=args)

    def error(self, msg: Any, *args: Any) -> None:
        if self.enabled:
            self.logger.output(Severity.ERROR, 2, fmt=msg, args=args)

    def critical(self, msg: Any, *args: Any) -> None:
        if self.enabled:
            self.logger.output(Severity.CRITICAL, 2, fmt=msg, args=args)

    def log(self, severity: SeverityLike, msg: Any, *args: Any) -> None:
        if self.enabled:
            self.logger.output(to_severity(severity), 2, fmt=msg, args=args)

    def print(self, *values: Any) -> None:
        if self.enabled:
            self.logger.output(Severity.DEBUG, 2, args=values)

    def stack(self, msg: Any, *args: Any) -> None:
        if self.enabled and self.logger.output(Severity.STACK, 2, fmt=msg, args=args):
            self.logger.write_stacks()

    def fatal(self, msg: Any, *args: Any) -> None:
        if self.enabled:
            self.logger.output(Severity.FATAL, 2, fmt=msg, args=args)
            sys.exit(1)

    def panic(self, msg: Any, *args: Any) -> None:
        if self.enabled:
            message = LogRecord(fmt=msg, args=args).get_message()
            self.logger.output(Severity.PANIC, 2, message)
            raise LogPanic(message)


_default_logger: Optional[TemplateLogger] = None
_default_lock = threading.Lock()


def get_default_logger() -> TemplateLogger:
    """Process-wide logger, built from the default config on first use"""
    global _default_logger
    with _default_lock:
        if _default_logger is None:
            _default_logger = TemplateLogger(config=get_default_config())
        return _default_logger


def set_default_logger(logger: Optional[TemplateLogger]) -> None:
    """Replace the process-wide logger; None rebuilds it on next use"""
    global _default_logger
    with _default_lock:
        _default_logger = logger


def get_logger(name: str, config: Optional[LoggerConfig] = None) -> logging.Logger:
    """Create a stdlib logger whose handler renders through a template"""
    logger = logging.getLogger(name)

    if not logger.handlers:
        config = config or get_default_config()
        level = severity_to_logging_level(to_severity(config.min_severity))
        # NOTSET would defer to the parent logger's level
        logger.setLevel(max(level, 1))

        stream = sys.stdout if config.output == "stdout" else sys.stderr
        handler = logging.StreamHandler(stream)
        handler.setFormatter(TemplateFormatter(config=config))
        if config.max_severity is not None:
            handler.addFilter(SeverityLoggingFilter(config.create_filter()))
        logger.addHandler(handler)

        logger.propagate = True

    return logger
