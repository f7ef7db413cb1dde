"""
ANSI escape codes for the ``%{Color style}`` verb

Style syntax is ``foreground[+attributes][:background[+attributes]]``,
e.g. ``red``, ``red+b``, ``white+h:blue`` or ``208`` for the 256-color
palette.
"""

from typing import Dict, List

RESET = "\033[0m"

COLORS: Dict[str, int] = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "default": 9,
}

_FG_ATTRIBUTES = (("b", "1"), ("B", "5"), ("u", "4"), ("i", "7"))


def _palette_index(name: str) -> int:
    if name.isdigit() and 0 <= int(name) <= 255:
        return int(name)
    return -1


def color_code(style: str) -> str:
    """Resolve a style string to its escape sequence; unknown styles give ''"""
    style = style.strip()
    if not style or style == "off":
        return ""
    if style == "reset":
        return RESET

    foreground, _, background = style.partition(":")
    fg_name, _, fg_attrs = foreground.partition("+")
    bg_name, _, bg_attrs = background.partition("+")

    codes: List[str] = [code for attr, code in _FG_ATTRIBUTES if attr in fg_attrs]

    if fg_name:
        index = _palette_index(fg_name)
        if index >= 0:
            codes.append(f"38;5;{index}")
        elif fg_name in COLORS:
            base = 90 if "h" in fg_attrs else 30
            codes.append(str(base + COLORS[fg_name]))
        else:
            return ""

    if bg_name:
        index = _palette_index(bg_name)
        if index >= 0:
            codes.append(f"48;5;{index}")
        elif bg_name in COLORS:
            base = 100 if "h" in bg_attrs else 40
            codes.append(str(base + COLORS[bg_name]))
        else:
            return ""

    if not codes:
        return ""
    return "\033[" + ";".join(codes) + "m"
