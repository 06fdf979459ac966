"""
Base formatter interface

Formatters turn a log entry into a single line of text.
"""

import uuid
from abc import ABC, abstractmethod
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any

from phyros_logging.core.log_entry import LogEntry

# Values printed as-is; anything else is shown by type name
SCALAR_TYPES = (str, int, float, bool, Decimal, uuid.UUID, datetime, date, time, Enum)


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogEntry objects into strings. Subclasses decide
    the layout; ``format_value`` gives them a shared rendering for
    property values.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Format a log entry into a string.

        Args:
            entry: The log entry to format

        Returns:
            Formatted string representation of the log entry
        """
        pass

    @staticmethod
    def format_value(value: Any) -> str:
        """
        Render a property value for plain-text output.

        ``None`` becomes ``null``, scalars use ``str`` and complex objects
        are shown as ``[TypeName]``.
        """
        if value is None:
            return "null"
        if isinstance(value, SCALAR_TYPES):
            return str(value)
        return f"[{type(value).__name__}]"

    def __call__(self, entry: LogEntry) -> str:
        """Allow formatters to be callable."""
        return self.format(entry)
