"""
Template Logging Library

Compiles compact log format templates once and renders records into the
exact bytes written to a sink.
"""

__version__ = "0.1.0"

from .colors import color_code
from .compiler import (
    CompiledFormat,
    compile_format,
    compile_named,
    compile_short,
)
from .config import (
    LoggerConfig,
    get_default_config,
    set_default_config,
)
from .filtering import (
    LogFilter,
    SeverityFilter,
    SeverityLoggingFilter,
)
from .formatter import (
    Formatter,
    GlogFormatter,
    Renderer,
    StdFormatter,
    TemplateFormatter,
    render,
)
from .logger import (
    LogPanic,
    TemplateLogger,
    Verbose,
    get_default_logger,
    get_logger,
    set_default_logger,
)
from .record import LogRecord
from .severity import (
    Severity,
    severity_from_logging_level,
    severity_from_string,
    severity_to_logging_level,
)
from .verbs import LOCATION_MASK, Verb

__all__ = [
    # Core
    "Severity",
    "severity_from_string",
    "severity_from_logging_level",
    "severity_to_logging_level",
    "Verb",
    "LOCATION_MASK",
    "CompiledFormat",
    "compile_format",
    "compile_short",
    "compile_named",
    "color_code",
    "LogRecord",
    "Formatter",
    "Renderer",
    "StdFormatter",
    "GlogFormatter",
    "render",
    # Front door
    "TemplateLogger",
    "Verbose",
    "LogPanic",
    "get_default_logger",
    "set_default_logger",
    "LogFilter",
    "SeverityFilter",
    "SeverityLoggingFilter",
    # Configuration
    "LoggerConfig",
    "get_default_config",
    "set_default_config",
    # stdlib logging integration
    "TemplateFormatter",
    "get_logger",
]
