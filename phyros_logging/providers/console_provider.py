"""Console provider with ANSI colors"""

import sys
from typing import Optional, TextIO

from phyros_logging.core.log_entry import LogEntry
from phyros_logging.core.log_severity import LogSeverity
from phyros_logging.core.logging_config import LoggingConfig
from phyros_logging.formatters.base_formatter import BaseFormatter
from phyros_logging.formatters.text_formatter import TextFormatter
from phyros_logging.providers.base_provider import LogProvider


class ConsoleLogProvider(LogProvider):
    """Write log entries to the console, one line each."""

    def __init__(
        self,
        minimum_severity: LogSeverity = LogSeverity.INFORMATION,
        include_timestamps: bool = True,
        colored: bool = True,
        stream: Optional[TextIO] = None,
        formatter: Optional[BaseFormatter] = None,
        mirror: Optional[TextIO] = None,
    ):
        """
        Initialize console provider.

        Args:
            minimum_severity: Entries below this severity are skipped
            include_timestamps: Prefix lines with a timestamp
            colored: Use ANSI color codes
            stream: Output stream (default: sys.stderr)
            formatter: Line formatter (default: TextFormatter)
            mirror: Optional second stream receiving every line uncolored
        """
        super().__init__()
        self.minimum_severity = LogSeverity(minimum_severity)
        self.include_timestamps = include_timestamps
        self.colored = colored
        self.stream = stream or sys.stderr
        self.formatter = formatter or TextFormatter(include_timestamps=include_timestamps)
        self.mirror = mirror

    @classmethod
    def from_config(cls, config: LoggingConfig, **kwargs) -> "ConsoleLogProvider":
        """
        Create a console provider from a LoggingConfig.

        Keyword arguments override the matching config values.
        """
        kwargs.setdefault("minimum_severity", config.minimum_severity)
        kwargs.setdefault("include_timestamps", config.include_timestamps)
        kwargs.setdefault("colored", config.colored_output)
        if kwargs.get("formatter") is None:
            kwargs["formatter"] = TextFormatter(
                include_timestamps=kwargs["include_timestamps"],
                timestamp_format=config.timestamp_format,
            )
        return cls(**kwargs)

    def _write(self, entry: LogEntry) -> None:
        """Write log entry to console."""
        if entry.severity < self.minimum_severity:
            return

        msg = self.formatter.format(entry)

        if self.colored:
            self.stream.write(f"{entry.severity.color_code}{msg}{entry.severity.reset_code}\n")
        else:
            self.stream.write(msg + "\n")
        self.stream.flush()

        if self.mirror is not None:
            self.mirror.write(msg + "\n")

    def flush(self) -> None:
        """Flush stream."""
        self.stream.flush()

    def _release(self) -> None:
        # Streams belong to the caller; only push out what is buffered
        self.stream.flush()
        if self.mirror is not None:
            self.mirror.flush()
