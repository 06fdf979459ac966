"""
Log formatters module

Provides formatter implementations for rendering log entries as text.
"""

from phyros_logging.formatters.base_formatter import BaseFormatter
from phyros_logging.formatters.text_formatter import TextFormatter
from phyros_logging.formatters.json_formatter import JSONFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "JSONFormatter",
]
