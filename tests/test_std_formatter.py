from datetime import datetime, timezone

from template_logging import LogRecord, Severity, StdFormatter, compile_format, render
from template_logging.formatter.std_formatter import SAFE_BUFFER_LIMIT, Renderer


def test_short_grammar_full_template(sample_record):
    formatter = StdFormatter(
        "%p-%P [%D]%%[%d]%%[%T][%t] [%L:%l:%F:%f:%x:%s] %%%M%%", grammar="short"
    )
    assert formatter.format(sample_record) == (
        b"func-app/handlers/pkg.func [2014-01-08]%[2014/01/08]%[18:27:14.123456][18:27:14] "
        b"[PANIC:PANC:/path/to/testing.go:testing.go:testing:391] %hello there!%\n"
    )


def test_named_date_time_message(sample_record):
    formatter = StdFormatter("%{Date} %{Time} %{Message}")
    assert formatter.format(sample_record) == b"2014-01-08 18:27:14 hello there!\n"


def test_severity_variants(sample_record):
    formatter = StdFormatter(
        "%{SEVERITY} %{Severity} %{severity} %{SEV} %{Sev} %{sev} %{S} %{s}"
    )
    assert formatter.format(sample_record) == b"PANIC Panic panic PANC Panc panc P p\n"


def test_long_severity_short_grammar(sample_record):
    assert StdFormatter("%L").format(sample_record) == b"PANIC\n"


def test_out_of_range_severity_renders_none(sample_record):
    formatter = StdFormatter("%{SEVERITY} %{S}")
    sample_record.severity = 42
    assert formatter.format(sample_record) == b"NONE N\n"
    sample_record.severity = -3
    assert formatter.format(sample_record) == b"NONE N\n"


def test_unknown_verb_falls_back_to_literal(sample_record):
    assert StdFormatter("%notsupported").format(sample_record) == b"%notsupported\n"
    assert StdFormatter("%@").format(sample_record) == b"%@\n"


def test_plain_text_gets_newline(sample_record):
    assert StdFormatter("just text here").format(sample_record) == b"just text here\n"
    assert StdFormatter("ends here\n").format(sample_record) == b"ends here\n"


def test_empty_template_renders_nothing(sample_record):
    assert StdFormatter("").format(sample_record) == b""


def test_file_verbs(sample_record):
    formatter = StdFormatter("%{FullFile} %{File} %{ShortFile}:%{Line}")
    assert formatter.format(sample_record) == b"/path/to/testing.go testing.go testing:391\n"


def test_missing_file_renders_placeholder(sample_record):
    sample_record.file = ""
    sample_record.line = 0
    formatter = StdFormatter("%F %f %x %s", grammar="short")
    assert formatter.format(sample_record) == b"??? ??? ??? 0\n"


def test_short_file_name_shorter_than_suffix(sample_record):
    sample_record.file = "/tmp/ab"
    assert StdFormatter("%x|").format(sample_record) == b"|\n"


def test_function_verbs(sample_record):
    formatter = StdFormatter("%{FullFunction} %{PkgFunction} %{Function}")
    assert formatter.format(sample_record) == b"app/handlers/pkg.func pkg.func func\n"


def test_function_without_package(sample_record):
    sample_record.function = "main"
    assert StdFormatter("%{PkgFunction} %{Function}").format(sample_record) == b"main main\n"


def test_missing_function_renders_empty(sample_record):
    sample_record.function = None
    formatter = StdFormatter("%{FullFunction}|%{PkgFunction}|%{Function}|")
    assert formatter.format(sample_record) == b"|||\n"


def test_unix_timestamps():
    record = LogRecord(
        time=datetime(2014, 1, 8, 23, 27, 14, 123456, tzinfo=timezone.utc),
        severity=Severity.INFO,
    )
    formatter = StdFormatter("%{Unix} %{UnixNano}")
    assert formatter.format(record) == b"1389223634 1389223634123456000\n"


def test_unix_timestamp_near_datetime_min():
    # datetime(1, 1, 1) is -62135596800 in UTC; a local offset moves it by hours at most
    output = StdFormatter("%{Unix}").format(LogRecord(time=datetime(1, 1, 1)))
    assert output.startswith(b"-62135")
    assert output.endswith(b"\n")


def test_dates_before_year_1000_are_zero_padded():
    record = LogRecord(time=datetime(987, 6, 5, 4, 3, 2))
    assert StdFormatter("%d %t").format(record) == b"0987/06/05 04:03:02\n"


def test_safe_message_escapes_control_bytes(sample_record):
    sample_record.message = "line one\nline\ttwo\x01"
    formatter = StdFormatter("%{SafeMessage}")
    assert formatter.format(sample_record) == b"line one\\x0aline\\x09two\\x01\n"


def test_safe_message_without_control_bytes(sample_record):
    assert StdFormatter("%{SafeMessage}").format(sample_record) == b"hello there!\n"


def test_safe_message_buffer_is_bounded(sample_record):
    renderer = Renderer()
    compiled = compile_format("%{SafeMessage}")
    sample_record.message = "\n" * (SAFE_BUFFER_LIMIT // 2)
    output = renderer.render(compiled, sample_record)
    assert output == b"\\x0a" * (SAFE_BUFFER_LIMIT // 2) + b"\n"
    assert len(renderer._safe) == 0


def test_message_newline_is_not_doubled(sample_record):
    sample_record.message = "already terminated\n"
    assert StdFormatter("%M").format(sample_record) == b"already terminated\n"


def test_printf_message_is_expanded_at_render_time():
    record = LogRecord(fmt="%s has %d items", args=("cart", 3))
    assert StdFormatter("%M").format(record) == b"cart has 3 items\n"


def test_concatenation_message():
    record = LogRecord(args=("a", 1, None))
    assert StdFormatter("%M").format(record) == b"a 1 None\n"


def test_message_is_not_expanded_when_unused():
    calls = []

    class Tracked:
        def __str__(self):
            calls.append(1)
            return "built"

    record = LogRecord(severity=Severity.INFO, fmt="%s", args=(Tracked(),))
    assert StdFormatter("%L").format(record) == b"INFO\n"
    assert calls == []


def test_bad_printf_arguments_do_not_raise():
    record = LogRecord(fmt="%d apples", args=("many",))
    output = StdFormatter("%M").format(record)
    assert output.startswith(b"%d apples (format error:")


def test_missing_mapping_key_does_not_raise():
    record = LogRecord(fmt="%(user)s logged in", args=({"name": "bob"},))
    output = StdFormatter("%M").format(record)
    assert output.startswith(b"%(user)s logged in (format error: 'user';")
    assert output.endswith(b"\n")


def test_out_of_range_character_does_not_raise():
    record = LogRecord(fmt="%c", args=(10**9,))
    assert StdFormatter("%M").format(record).startswith(b"%c (format error:")


def test_unicode_is_utf8_encoded():
    record = LogRecord(message="caf\u00e9 \ud800")
    assert StdFormatter("%M").format(record) == b"caf\xc3\xa9 \\ud800\n"


def test_same_template_renders_identically(sample_record):
    first = StdFormatter("%{Date} %{SEV} %{File}:%{Line} %{Message}")
    second = StdFormatter("%{Date} %{SEV} %{File}:%{Line} %{Message}")
    assert first.format(sample_record) == second.format(sample_record)


def test_renderer_is_reusable(sample_record):
    formatter = StdFormatter("%s %M")
    assert formatter.format(sample_record) == b"391 hello there!\n"
    sample_record.line = 7
    sample_record.message = "again"
    assert formatter.format(sample_record) == b"7 again\n"


def test_module_render_function(sample_record):
    assert render(compile_format("%{Sev}"), sample_record) == b"Panc\n"


def test_formatter_accepts_compiled_format(sample_record):
    compiled = compile_format("%l", grammar="short")
    formatter = StdFormatter(compiled)
    assert formatter.compiled is compiled
    assert formatter.template == "%l"
    assert formatter.format(sample_record) == b"PANC\n"
    assert not formatter.should_capture_location()


def test_huge_line_numbers_still_render():
    record = LogRecord(line=10**80)
    assert StdFormatter("%s").format(record) == str(10**80).encode() + b"\n"
