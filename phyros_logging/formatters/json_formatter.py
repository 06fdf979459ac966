"""
JSON formatter for structured logging

Formats log entries as JSON objects
"""

import json
from typing import Optional

from phyros_logging.core.log_entry import LogEntry
from phyros_logging.core.logging_config import LoggingConfig
from phyros_logging.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log entries as JSON objects.

    Produces structured log output suitable for log aggregation systems.
    Values that are not JSON-native are written with ``str``.
    """

    def __init__(
        self,
        config: Optional[LoggingConfig] = None,
        include_arguments: bool = True,
        include_template: bool = True,
        indent: int = None,
        ensure_ascii: bool = False
    ):
        """
        Initialize JSON formatter.

        Args:
            config: When given, its application/host identity is added
            include_arguments: Include the ordered template arguments
            include_template: Include the raw message template
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters

        Example:
            # Compact JSON (one line per entry)
            formatter = JSONFormatter()

            # Stamped with application identity
            formatter = JSONFormatter(LoggingConfig(application_name="billing"))
        """
        self.config = config
        self.include_arguments = include_arguments
        self.include_template = include_template
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as JSON.

        Args:
            entry: Log entry to format

        Returns:
            JSON string
        """
        log_dict = entry.to_dict()

        if not self.include_arguments:
            log_dict.pop("arguments")
        if not self.include_template:
            log_dict.pop("message_template")
        if log_dict["exception"] is None:
            log_dict.pop("exception")

        if self.config is not None:
            for key, value in self.config.identity().items():
                log_dict.setdefault(key, value)

        return json.dumps(
            log_dict,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            default=str,
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
