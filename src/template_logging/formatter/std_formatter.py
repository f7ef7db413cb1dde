"""
Template renderer

Executes a CompiledFormat against one LogRecord, appending each literal
or computed fragment to an output buffer.
"""

import re
from datetime import datetime, timezone
from typing import Optional, Union

from ..compiler import CompiledFormat, GrammarType, compile_format
from ..numeric import two_digits, write_fixed_width, write_variable_width
from ..record import LogRecord
from ..severity import (
    CAP_SEVERITY_STRINGS,
    CAP_SHORT_SEVERITY_STRINGS,
    LC_SEVERITY_STRINGS,
    LC_SHORT_SEVERITY_STRINGS,
    LC_SHORTEST_SEVERITY_STRINGS,
    UC_SEVERITY_STRINGS,
    UC_SHORT_SEVERITY_STRINGS,
    UC_SHORTEST_SEVERITY_STRINGS,
    severity_to_index,
)
from ..verbs import Verb
from .base import FILE_PLACEHOLDER, Formatter, base_name

# Large enough for any date, clock, line number or nanosecond timestamp
SCRATCH_SIZE = 64

# A safe-message buffer that grew beyond this is dropped after use
SAFE_BUFFER_LIMIT = 8000

# Values this large are written via str() instead of the scratch buffer
_INLINE_LIMIT = 10 ** (SCRATCH_SIZE - 2)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_HEX_DIGITS = b"0123456789abcdef"
_CONTROL_BYTES = re.compile(rb"[\x00-\x1f]")

_SEVERITY_TABLES = {
    Verb.SEVERITY: UC_SEVERITY_STRINGS,
    Verb.SEVERITY_CAP: CAP_SEVERITY_STRINGS,
    Verb.SEVERITY_LOWER: LC_SEVERITY_STRINGS,
    Verb.SEV: UC_SHORT_SEVERITY_STRINGS,
    Verb.SEV_CAP: CAP_SHORT_SEVERITY_STRINGS,
    Verb.SEV_LOWER: LC_SHORT_SEVERITY_STRINGS,
    Verb.S: UC_SHORTEST_SEVERITY_STRINGS,
    Verb.S_LOWER: LC_SHORTEST_SEVERITY_STRINGS,
}
# Pre-encoded once
_SEVERITY_BYTES = {
    verb: tuple(s.encode("ascii") for s in table)
    for verb, table in _SEVERITY_TABLES.items()
}

_MESSAGE_VERBS = int(Verb.MESSAGE | Verb.SAFE_MESSAGE)


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "backslashreplace")


def epoch_delta(moment: datetime):
    """
    Time since the Unix epoch

    Naive datetimes are taken as local time, or as UTC when the platform
    cannot resolve a local offset for them (e.g. near datetime.min).
    """
    if moment.tzinfo is None:
        try:
            moment = moment.astimezone()
        except (OverflowError, ValueError, OSError):
            moment = moment.replace(tzinfo=timezone.utc)
    return moment - _EPOCH


class Renderer:
    """
    Owns the scratch buffers used while rendering

    The buffers are reused across calls, which makes an instance unsafe
    to share between threads without external locking.
    """

    def __init__(self):
        self._tmp = bytearray(SCRATCH_SIZE)
        self._view = memoryview(self._tmp)
        self._safe = bytearray()

    def render(self, compiled: CompiledFormat, record: LogRecord) -> bytes:
        out = bytearray()
        literals = compiled.literals
        literal_index = 0
        message: Optional[str] = None
        if compiled.flags & _MESSAGE_VERBS:
            message = record.get_message()

        for part in compiled.parts:
            if part == Verb.LITERAL:
                out += literals[literal_index]
                literal_index += 1
            elif part == Verb.MESSAGE:
                out += _encode(message)
            elif part == Verb.SAFE_MESSAGE:
                self._write_safe_message(out, message)
            elif part in _SEVERITY_BYTES:
                out += _SEVERITY_BYTES[part][severity_to_index(record.severity)]
            elif part == Verb.DATE:
                self._write_date(out, record.time, 0x2D)  # '-'
            elif part == Verb.DATE_SLASH:
                self._write_date(out, record.time, 0x2F)  # '/'
            elif part == Verb.TIME:
                self._write_time(out, record.time, False)
            elif part == Verb.TIME_MICRO:
                self._write_time(out, record.time, True)
            elif part == Verb.UNIX:
                delta = epoch_delta(record.time)
                self._write_number(out, delta.days * 86400 + delta.seconds)
            elif part == Verb.UNIX_NANO:
                delta = epoch_delta(record.time)
                seconds = delta.days * 86400 + delta.seconds
                self._write_number(out, seconds * 1_000_000_000 + delta.microseconds * 1000)
            elif part == Verb.FULL_FILE:
                out += _encode(record.file or FILE_PLACEHOLDER)
            elif part == Verb.FILE:
                out += _encode(self._file_name(record.file, False))
            elif part == Verb.SHORT_FILE:
                out += _encode(self._file_name(record.file, True))
            elif part == Verb.LINE:
                self._write_number(out, record.line or 0)
            elif part == Verb.FULL_FUNCTION:
                out += _encode(record.function or "")
            elif part == Verb.PKG_FUNCTION:
                out += _encode(base_name(record.function or ""))
            elif part == Verb.FUNCTION:
                function = base_name(record.function or "")
                out += _encode(function[function.rfind(".") + 1 :])

        if out and out[-1] != 0x0A:
            out.append(0x0A)  # '\n'
        return bytes(out)

    def _write_date(self, out: bytearray, moment: datetime, separator: int) -> None:
        tmp = self._tmp
        write_fixed_width(tmp, 0, 4, moment.year)
        tmp[4] = separator
        two_digits(tmp, 5, moment.month)
        tmp[7] = separator
        two_digits(tmp, 8, moment.day)
        out += self._view[:10]

    def _write_time(self, out: bytearray, moment: datetime, micro: bool) -> None:
        tmp = self._tmp
        two_digits(tmp, 0, moment.hour)
        tmp[2] = 0x3A  # ':'
        two_digits(tmp, 3, moment.minute)
        tmp[5] = 0x3A
        two_digits(tmp, 6, moment.second)
        if micro:
            tmp[8] = 0x2E  # '.'
            write_fixed_width(tmp, 9, 6, moment.microsecond)
            out += self._view[:15]
        else:
            out += self._view[:8]

    def _write_number(self, out: bytearray, value: int) -> None:
        if -_INLINE_LIMIT < value < _INLINE_LIMIT:
            count = write_variable_width(self._tmp, 0, value)
            out += self._view[:count]
        else:
            out += str(value).encode("ascii")

    @staticmethod
    def _file_name(path: str, strip_suffix: bool) -> str:
        if not path:
            return FILE_PLACEHOLDER
        name = base_name(path)
        if strip_suffix:
            # Fixed three-character suffix, e.g. ".go" or ".py"
            name = name[: max(len(name) - 3, 0)]
        return name

    def _write_safe_message(self, out: bytearray, message: str) -> None:
        data = _encode(message)
        if _CONTROL_BYTES.search(data) is None:
            out += data
            return

        safe = self._safe
        del safe[:]
        tmp = self._tmp
        tmp[0] = 0x5C  # '\\'
        tmp[1] = 0x78  # 'x'
        prev = 0
        for match in _CONTROL_BYTES.finditer(data):
            start = match.start()
            safe += data[prev:start]
            char = data[start]
            tmp[2] = _HEX_DIGITS[char >> 4]
            tmp[3] = _HEX_DIGITS[char & 0x0F]
            safe += self._view[:4]
            prev = start + 1
        safe += data[prev:]
        out += safe

        # Don't let one huge message pin memory
        if len(safe) > SAFE_BUFFER_LIMIT:
            self._safe = bytearray()


class StdFormatter(Formatter):
    """Formatter driven by a user template in either grammar"""

    def __init__(
        self,
        template: Union[str, CompiledFormat],
        grammar: GrammarType = "auto",
    ):
        if isinstance(template, CompiledFormat):
            self.compiled = template
        else:
            self.compiled = compile_format(template, grammar)
        self.renderer = Renderer()

    @property
    def template(self) -> str:
        return self.compiled.template

    def format(self, record: LogRecord) -> bytes:
        return self.renderer.render(self.compiled, record)

    def should_capture_location(self) -> bool:
        return self.compiled.should_capture_location()


def render(compiled: CompiledFormat, record: LogRecord) -> bytes:
    """Render with throwaway scratch buffers; safe to call from any thread"""
    return Renderer().render(compiled, record)
