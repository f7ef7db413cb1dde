from template_logging.compiler import (
    CompiledFormat,
    compile_format,
    compile_named,
    compile_short,
    detect_grammar,
)
from template_logging.verbs import LOCATION_MASK, Verb


def test_short_grammar_splits_literals_and_verbs():
    compiled = compile_short("[%D] %M")
    assert compiled.parts == (Verb.LITERAL, Verb.DATE, Verb.LITERAL, Verb.MESSAGE)
    assert compiled.literals == (b"[", b"] ")
    assert compiled.flags == Verb.DATE | Verb.MESSAGE


def test_short_grammar_doubled_sentinel_is_literal():
    compiled = compile_short("100%% done")
    assert compiled.parts == (Verb.LITERAL,)
    assert compiled.literals == (b"100% done",)


def test_short_grammar_unknown_verb_stays_literal():
    compiled = compile_short("%notsupported")
    assert compiled.literals == (b"%notsupported",)
    assert compiled.flags == 0


def test_short_grammar_trailing_sentinel_stays_literal():
    assert compile_short("50%").literals == (b"50%",)


def test_named_grammar_recognizes_every_verb_name():
    compiled = compile_named("%{Date} %{Time} %{Message}")
    assert compiled.parts == (
        Verb.DATE,
        Verb.LITERAL,
        Verb.TIME,
        Verb.LITERAL,
        Verb.MESSAGE,
    )


def test_named_grammar_unknown_name_keeps_wrapper():
    compiled = compile_named("a %{Bogus} b")
    assert compiled.literals == (b"a %{Bogus} b",)
    assert compiled.parts == (Verb.LITERAL,)


def test_named_grammar_malformed_verbs_stay_literal():
    assert compile_named("%{Date").literals == (b"%{Date",)
    assert compile_named("% {Date}").literals == (b"% {Date}",)


def test_named_grammar_doubled_sentinel():
    compiled = compile_named("%%{Date}")
    assert compiled.literals == (b"%{Date}",)
    assert compiled.flags == 0


def test_color_is_resolved_at_compile_time():
    compiled = compile_named("%{Color red}%{SEV}%{Color reset} %{Message}")
    assert Verb.COLOR not in compiled.parts
    assert compiled.literals[0] == b"\x1b[31m"
    assert compiled.literals[1] == b"\x1b[0m "
    assert not compiled.uses(Verb.COLOR)
    assert not compiled.should_capture_location()


def test_color_argument_may_be_quoted():
    compiled = compile_named('%{Color "green+b"}x')
    assert compiled.literals == (b"\x1b[1;32mx",)


def test_adjacent_literals_are_merged():
    compiled = compile_named("a%{Color reset}b%%c")
    assert compiled.literals == (b"a\x1b[0mb%c",)


def test_location_flag_tracks_location_verbs():
    assert compile_short("%f:%s").should_capture_location()
    assert compile_short("%P").should_capture_location()
    assert not compile_short("%D %T %L %M").should_capture_location()
    assert compile_named("%{Function}").should_capture_location()
    assert not compile_named("%{Unix} %{SafeMessage}").should_capture_location()


def test_location_mask_matches_location_verbs():
    location_verbs = [
        Verb.FULL_FILE,
        Verb.FILE,
        Verb.SHORT_FILE,
        Verb.LINE,
        Verb.FULL_FUNCTION,
        Verb.PKG_FUNCTION,
        Verb.FUNCTION,
    ]
    for verb in Verb:
        assert bool(LOCATION_MASK & verb) == (verb in location_verbs)


def test_empty_template():
    compiled = compile_format("")
    assert compiled.parts == ()
    assert compiled.literals == ()


def test_compilation_is_idempotent():
    first = compile_format("%{Date} %{SEV} %{Message}")
    second = compile_format("%{Date} %{SEV} %{Message}")
    assert isinstance(first, CompiledFormat)
    assert first == second


def test_grammar_detection():
    assert detect_grammar("%{Message}") == "named"
    assert detect_grammar("%M") == "short"
    assert compile_format("%M %{Message}", grammar="short").literals == (b" %{Message}",)
    assert compile_format("%M", grammar="named").literals == (b"%M",)
    assert compile_format("%M", grammar="bogus").parts == (Verb.MESSAGE,)
