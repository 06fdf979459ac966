"""
Log severity enumeration

Ordered severities attached to every log entry.
"""

import logging
from enum import IntEnum
from typing import Dict


class LogSeverity(IntEnum):
    """
    Log severity enumeration.

    Ordering is meaningful: providers compare severities to decide
    whether an entry passes their minimum level.
    """

    DEBUG = 0           # Verbose event, useful during development
    INFORMATION = 1     # Significant, successful operation
    WARNING = 2         # Problem that may cause future trouble
    ERROR = 3           # Loss of functionality or data
    FATAL = 4           # Fatal error or application crash

    def __str__(self) -> str:
        """Display name, e.g. ``Information``."""
        return self.name.capitalize()

    @classmethod
    def from_string(cls, severity_str: str) -> "LogSeverity":
        """
        Convert string to LogSeverity.

        Args:
            severity_str: Severity name or alias (case-insensitive)

        Returns:
            LogSeverity enum value

        Raises:
            ValueError: If severity_str is not valid
        """
        key = severity_str.strip().upper()
        key = SEVERITY_ALIASES.get(key, key)
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Invalid log severity: {severity_str}")

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this severity.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogSeverity.DEBUG: "\033[90m",        # Gray
            LogSeverity.INFORMATION: "\033[37m",  # White
            LogSeverity.WARNING: "\033[33m",      # Yellow
            LogSeverity.ERROR: "\033[31m",        # Red
            LogSeverity.FATAL: "\033[31;2m",      # Dark red
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"

    def to_logging_level(self) -> int:
        """Map to the numeric level used by the standard ``logging`` module."""
        return STDLIB_LEVELS[self]


# Short names accepted by from_string
SEVERITY_ALIASES: Dict[str, str] = {
    "INFO": "INFORMATION",
    "WARN": "WARNING",
    "CRITICAL": "FATAL",
}

STDLIB_LEVELS: Dict[LogSeverity, int] = {
    LogSeverity.DEBUG: logging.DEBUG,
    LogSeverity.INFORMATION: logging.INFO,
    LogSeverity.WARNING: logging.WARNING,
    LogSeverity.ERROR: logging.ERROR,
    LogSeverity.FATAL: logging.CRITICAL,
}
