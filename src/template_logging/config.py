import os
from dataclasses import dataclass
from typing import Literal, Optional

from .filtering import SeverityFilter
from .severity import Severity, severity_from_string

GrammarName = Literal["short", "named", "auto"]
OutputType = Literal["stderr", "stdout"]

DEFAULT_FORMAT = "%d %t %M"


@dataclass
class LoggerConfig:
    """Configuration for template loggers"""

    format: str = DEFAULT_FORMAT
    grammar: GrammarName = "auto"
    min_severity: str = "NONE"
    max_severity: Optional[str] = None
    verbosity: int = 0
    output: OutputType = "stderr"

    @classmethod
    def _parse_int_env(cls, key: str, default: int) -> int:
        """Parse integer from environment variable"""
        try:
            return int(os.getenv(key, str(default)))
        except ValueError:
            return default

    @classmethod
    def _parse_severity_env(cls, key: str, default: Optional[str]) -> Optional[str]:
        """Parse a severity name, keeping the default for unknown names"""
        value = os.getenv(key)
        if value is None:
            return default
        value = value.strip().upper()
        if severity_from_string(value) == Severity.NONE and value != "NONE":
            return default
        return value

    @classmethod
    def from_env(cls) -> "LoggerConfig":
        """Create configuration from environment variables"""
        grammar = os.getenv("TEMPLATE_LOG_GRAMMAR", "auto").lower()
        if grammar not in ["short", "named", "auto"]:
            grammar = "auto"

        output = os.getenv("TEMPLATE_LOG_OUTPUT", "stderr").lower()
        if output not in ["stderr", "stdout"]:
            output = "stderr"

        return cls(
            format=os.getenv("TEMPLATE_LOG_FORMAT", DEFAULT_FORMAT),
            grammar=grammar,
            min_severity=cls._parse_severity_env("TEMPLATE_LOG_LEVEL", "NONE"),
            max_severity=cls._parse_severity_env("TEMPLATE_LOG_MAX_LEVEL", None),
            verbosity=cls._parse_int_env("TEMPLATE_LOG_VERBOSITY", 0),
            output=output,
        )

    def create_filter(self) -> SeverityFilter:
        return SeverityFilter(self.min_severity, self.max_severity)


_default_config: Optional[LoggerConfig] = None


def get_default_config() -> LoggerConfig:
    """Get the default configuration instance"""
    global _default_config
    if _default_config is None:
        _default_config = LoggerConfig.from_env()
    return _default_config


def set_default_config(config: LoggerConfig) -> None:
    """Set the default configuration instance"""
    global _default_config
    _default_config = config
