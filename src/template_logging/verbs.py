"""
Template verbs and their operation codes
"""

from enum import IntFlag
from typing import Dict


class Verb(IntFlag):
    """One bit per operation so a template's verbs fold into a single mask"""

    LITERAL = 1 << 0
    DATE = 1 << 1
    DATE_SLASH = 1 << 2
    TIME = 1 << 3
    TIME_MICRO = 1 << 4
    UNIX = 1 << 5
    UNIX_NANO = 1 << 6
    SEVERITY = 1 << 7
    SEVERITY_CAP = 1 << 8
    SEVERITY_LOWER = 1 << 9
    SEV = 1 << 10
    SEV_CAP = 1 << 11
    SEV_LOWER = 1 << 12
    S = 1 << 13
    S_LOWER = 1 << 14
    FULL_FILE = 1 << 15
    FILE = 1 << 16
    SHORT_FILE = 1 << 17
    LINE = 1 << 18
    FULL_FUNCTION = 1 << 19
    PKG_FUNCTION = 1 << 20
    FUNCTION = 1 << 21
    COLOR = 1 << 22
    MESSAGE = 1 << 23
    SAFE_MESSAGE = 1 << 24


# Verbs that need the caller's file/line/function
LOCATION_MASK = int(
    Verb.FULL_FILE
    | Verb.FILE
    | Verb.SHORT_FILE
    | Verb.LINE
    | Verb.FULL_FUNCTION
    | Verb.PKG_FUNCTION
    | Verb.FUNCTION
)

# %X grammar
SHORT_VERBS: Dict[str, Verb] = {
    "D": Verb.DATE,
    "d": Verb.DATE_SLASH,
    "T": Verb.TIME_MICRO,
    "t": Verb.TIME,
    "L": Verb.SEVERITY,
    "l": Verb.SEV,
    "F": Verb.FULL_FILE,
    "f": Verb.FILE,
    "x": Verb.SHORT_FILE,
    "s": Verb.LINE,
    "M": Verb.MESSAGE,
    "P": Verb.FULL_FUNCTION,
    "p": Verb.FUNCTION,
}

# %{Name} grammar
NAMED_VERBS: Dict[str, Verb] = {
    "SEVERITY": Verb.SEVERITY,
    "Severity": Verb.SEVERITY_CAP,
    "severity": Verb.SEVERITY_LOWER,
    "SEV": Verb.SEV,
    "Sev": Verb.SEV_CAP,
    "sev": Verb.SEV_LOWER,
    "S": Verb.S,
    "s": Verb.S_LOWER,
    "Date": Verb.DATE,
    "Time": Verb.TIME,
    "Unix": Verb.UNIX,
    "UnixNano": Verb.UNIX_NANO,
    "FullFile": Verb.FULL_FILE,
    "File": Verb.FILE,
    "ShortFile": Verb.SHORT_FILE,
    "Line": Verb.LINE,
    "FullFunction": Verb.FULL_FUNCTION,
    "PkgFunction": Verb.PKG_FUNCTION,
    "Function": Verb.FUNCTION,
    "Color": Verb.COLOR,
    "Message": Verb.MESSAGE,
    "SafeMessage": Verb.SAFE_MESSAGE,
}


def requires_location(flags: int) -> bool:
    return (flags & LOCATION_MASK) != 0
