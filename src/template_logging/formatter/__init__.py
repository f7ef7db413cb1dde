"""
Formatters turning log records into output bytes
"""

from .base import Formatter
from .glog_formatter import GlogFormatter
from .logging_formatter import TemplateFormatter, from_logging_record
from .std_formatter import Renderer, StdFormatter, render

__all__ = [
    "Formatter",
    "StdFormatter",
    "Renderer",
    "render",
    "GlogFormatter",
    "TemplateFormatter",
    "from_logging_record",
]
