"""
Template compilation

A template is compiled once into alternating literal segments and verb
operation codes. Compilation never fails: anything that is not a
recognized verb is kept as literal text.
"""

import re
from dataclasses import dataclass
from typing import List, Literal, Tuple

from .colors import color_code
from .verbs import NAMED_VERBS, SHORT_VERBS, Verb, requires_location

GrammarType = Literal["short", "named", "auto"]

SENTINEL = "%"

# %{Name} or %{Name argument}; the argument ends at the first unescaped "}"
_NAMED_VERB_RE = re.compile(r"%\{([A-Za-z]+)(?:\s(.*?[^\\]))?\}")

_QUOTES = ('"', "'", "`")


@dataclass(frozen=True)
class CompiledFormat:
    """Immutable result of compiling a template"""

    template: str
    # literal segments in order of appearance, already encoded
    literals: Tuple[bytes, ...]
    # one entry per segment; Verb.LITERAL consumes the next literal
    parts: Tuple[Verb, ...]
    # bitwise OR of every verb in parts
    flags: int

    def should_capture_location(self) -> bool:
        return requires_location(self.flags)

    def uses(self, verb: Verb) -> bool:
        return (self.flags & verb) != 0


class _FormatBuilder:
    """Accumulates segments while a template is scanned"""

    def __init__(self, template: str):
        self.template = template
        self.literals: List[bytes] = []
        self.parts: List[Verb] = []
        self.flags = 0
        self._pending: List[str] = []

    def text(self, value: str) -> None:
        if value:
            self._pending.append(value)

    def verb(self, verb: Verb) -> None:
        self.flush()
        self.parts.append(verb)
        self.flags |= int(verb)

    def flush(self) -> None:
        if not self._pending:
            return
        literal = "".join(self._pending)
        self._pending = []
        self.literals.append(literal.encode("utf-8", "backslashreplace"))
        self.parts.append(Verb.LITERAL)

    def build(self) -> CompiledFormat:
        self.flush()
        return CompiledFormat(
            template=self.template,
            literals=tuple(self.literals),
            parts=tuple(self.parts),
            flags=self.flags,
        )


def _unquote(argument: str) -> str:
    argument = argument.strip()
    if len(argument) >= 2 and argument[0] == argument[-1] and argument[0] in _QUOTES:
        return argument[1:-1]
    return argument


def compile_short(template: str) -> CompiledFormat:
    """
    Compile a single-character verb template, e.g. ``"%D %T [%L] %M"``

    ``%%`` is a literal percent sign; an unknown ``%X`` and a trailing
    lone ``%`` are kept verbatim.
    """
    builder = _FormatBuilder(template)
    i = 0
    end = len(template)
    while i < end:
        j = template.find(SENTINEL, i)
        if j < 0:
            builder.text(template[i:])
            break
        builder.text(template[i:j])

        if j + 1 >= end:
            builder.text(SENTINEL)
            break

        char = template[j + 1]
        verb = SHORT_VERBS.get(char)
        if char == SENTINEL:
            builder.text(SENTINEL)
        elif verb is not None:
            builder.verb(verb)
        else:
            builder.text(template[j : j + 2])
        i = j + 2

    return builder.build()


def compile_named(template: str) -> CompiledFormat:
    """
    Compile a named verb template, e.g. ``"%{Date} %{Time} %{Message}"``

    ``%{Color style}`` is resolved here and spliced in as literal text.
    Unknown names are kept verbatim including the ``%{...}`` wrapper.
    """
    builder = _FormatBuilder(template)
    i = 0
    end = len(template)
    while i < end:
        j = template.find(SENTINEL, i)
        if j < 0:
            builder.text(template[i:])
            break
        builder.text(template[i:j])

        if template.startswith(SENTINEL * 2, j):
            builder.text(SENTINEL)
            i = j + 2
            continue

        match = _NAMED_VERB_RE.match(template, j)
        if match is None:
            builder.text(SENTINEL)
            i = j + 1
            continue

        name, argument = match.group(1), match.group(2)
        verb = NAMED_VERBS.get(name)
        if verb is None:
            builder.text(match.group(0))
        elif verb == Verb.COLOR:
            style = _unquote((argument or "").replace("\\}", "}"))
            builder.text(color_code(style))
        else:
            builder.verb(verb)
        i = match.end()

    return builder.build()


def detect_grammar(template: str) -> str:
    return "named" if SENTINEL + "{" in template else "short"


def compile_format(template: str, grammar: GrammarType = "auto") -> CompiledFormat:
    """Compile template with the requested grammar ("auto" guesses)"""
    if grammar not in ("short", "named"):
        grammar = detect_grammar(template)
    if grammar == "named":
        return compile_named(template)
    return compile_short(template)
