"""
Text formatter for console output

Lays out severity, correlation id, rendered message, exception and
properties on one line.
"""

from datetime import datetime
from typing import Optional

from phyros_logging.core.log_entry import LogEntry
from phyros_logging.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log entries as a single human-readable line.

    Layout::

        [2024-01-01 12:00:00.000] [Information] [<correlation id>] message
            | Exception: ValueError: boom | Properties: {user=bob, n=3}

    (all on one line; the exception and property sections only appear
    when the entry carries them)
    """

    def __init__(
        self,
        include_timestamps: bool = True,
        timestamp_format: str = "%Y-%m-%d %H:%M:%S.%f",
        include_correlation_id: bool = True,
    ):
        """
        Initialize text formatter.

        Args:
            include_timestamps: Prefix each line with the write time
            timestamp_format: strftime format for timestamps
            include_correlation_id: Include the entry's correlation id

        Example:
            # Default layout
            formatter = TextFormatter()

            # Without timestamps, for tests and piping
            formatter = TextFormatter(include_timestamps=False)
        """
        self.include_timestamps = include_timestamps
        self.timestamp_format = timestamp_format
        self.include_correlation_id = include_correlation_id

    def format(self, entry: LogEntry, now: Optional[datetime] = None) -> str:
        """
        Format log entry as one line.

        Args:
            entry: Log entry to format
            now: Timestamp to print (default: current time)

        Returns:
            Formatted string
        """
        parts = []

        if self.include_timestamps:
            stamp = (now or datetime.now()).strftime(self.timestamp_format)
            if self.timestamp_format.endswith("%f"):
                stamp = stamp[:-3]  # milliseconds
            parts.append(f"[{stamp}] ")

        parts.append(f"[{entry.severity}] ")

        if self.include_correlation_id:
            parts.append(f"[{entry.correlation_id}] ")

        parts.append(entry.render_message())

        if entry.exception is not None:
            parts.append(
                f" | Exception: {type(entry.exception).__name__}: {entry.exception}"
            )

        if entry.properties:
            rendered = ", ".join(
                f"{key}={self.format_value(value)}"
                for key, value in entry.properties.items()
            )
            parts.append(f" | Properties: {{{rendered}}}")

        return "".join(parts)

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(include_timestamps={self.include_timestamps})"
