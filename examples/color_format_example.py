"""
Colored severities, verbosity and severity ranges
"""

import sys

from template_logging import LoggerConfig, Severity, TemplateLogger


def simple():
    log = TemplateLogger(
        sys.stdout.buffer,
        "%{Date} %{Time} %{File}:%{Line} %{Message}",
        LoggerConfig(),
    )
    log.debug("with location")


def colors():
    frmt = "%{Color red+b}%{SEV}%{Color reset} %{Color cyan}%{Function}%{Color reset} %{SafeMessage}"
    log = TemplateLogger(sys.stdout.buffer, frmt, LoggerConfig())
    log.warn("multi\nline message stays on one line")
    log.error("something failed: %s", "disk full")


def verbosity():
    log = TemplateLogger(sys.stdout.buffer, "%l %M", LoggerConfig(verbosity=2))
    log.v(1).info("will print")
    log.v(3).info("will not print")

    log.set_severities(Severity.WARN, Severity.ERROR)
    log.info("filtered out")
    log.error("kept")


if __name__ == "__main__":
    simple()
    colors()
    verbosity()
