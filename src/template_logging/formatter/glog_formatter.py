"""
Fixed-layout formatter producing glog style lines
"""

from ..numeric import two_digits, write_fixed_width, write_variable_width
from ..record import LogRecord
from ..severity import UC_SHORTEST_SEVERITY_STRINGS, severity_to_index
from .base import FILE_PLACEHOLDER, Formatter, base_name

_SEVERITY_LETTERS = tuple(ord(s[0]) for s in UC_SHORTEST_SEVERITY_STRINGS)


class GlogFormatter(Formatter):
    """
    Log lines have this form::

        Lmmdd hh:mm:ss.uuuuuu ppppp file:line] msg...

    L is the one-letter severity, ppppp the process id (5 digits, zero
    padded), file the base name of the source file.
    """

    def __init__(self):
        self._tmp = bytearray(64)
        self._view = memoryview(self._tmp)

    def should_capture_location(self) -> bool:
        return True

    def format(self, record: LogRecord) -> bytes:
        tmp = self._tmp
        moment = record.time
        out = bytearray()

        tmp[0] = _SEVERITY_LETTERS[severity_to_index(record.severity)]
        two_digits(tmp, 1, moment.month)
        two_digits(tmp, 3, moment.day)
        tmp[5] = 0x20  # ' '
        two_digits(tmp, 6, moment.hour)
        tmp[8] = 0x3A  # ':'
        two_digits(tmp, 9, moment.minute)
        tmp[11] = 0x3A
        two_digits(tmp, 12, moment.second)
        tmp[14] = 0x2E  # '.'
        write_fixed_width(tmp, 15, 6, moment.microsecond)
        tmp[21] = 0x20
        write_fixed_width(tmp, 22, 5, record.pid or 0)
        tmp[27] = 0x20
        out += self._view[:28]

        out += (base_name(record.file) if record.file else FILE_PLACEHOLDER).encode(
            "utf-8", "backslashreplace"
        )

        tmp[0] = 0x3A  # ':'
        count = write_variable_width(tmp, 1, record.line or 0)
        tmp[count + 1] = 0x5D  # ']'
        tmp[count + 2] = 0x20
        out += self._view[: count + 3]

        message = record.get_message()
        out += message.encode("utf-8", "backslashreplace")
        if message and not message.endswith("\n"):
            out.append(0x0A)

        return bytes(out)
