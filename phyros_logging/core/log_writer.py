"""
Log writer facade

The stable entry point applications call to submit log entries.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional
import logging
import threading

from phyros_logging.core.exceptions import InvalidArgumentError, LoggerDisposedError
from phyros_logging.core.log_entry import LogEntry
from phyros_logging.core.log_severity import LogSeverity
from phyros_logging.providers.base_provider import LogProvider

logger = logging.getLogger(__name__)


class LogWriter(ABC):
    """
    Logs entries to the logging store.

    Implementations must be thread safe.
    """

    @abstractmethod
    def log(self, entry: LogEntry) -> None:
        """
        Log the specified entry.

        Raises:
            InvalidArgumentError: If entry is None
        """
        pass

    # Template and exception are positional-only so any keyword is a property name.

    def debug(self, message_template: str, /, *args: Any, **properties: Any) -> None:
        """Log a Debug entry."""
        self._log_new(LogSeverity.DEBUG, message_template, None, args, properties)

    def information(self, message_template: str, /, *args: Any, **properties: Any) -> None:
        """Log an Information entry."""
        self._log_new(LogSeverity.INFORMATION, message_template, None, args, properties)

    def warning(self, message_template: str, /, *args: Any, **properties: Any) -> None:
        """Log a Warning entry."""
        self._log_new(LogSeverity.WARNING, message_template, None, args, properties)

    def error(
        self, message_template: str, exception: Optional[BaseException], /, *args: Any, **properties: Any
    ) -> None:
        """Log an Error entry with an exception."""
        self._log_new(LogSeverity.ERROR, message_template, exception, args, properties)

    def fatal(
        self, message_template: str, exception: Optional[BaseException], /, *args: Any, **properties: Any
    ) -> None:
        """Log a Fatal entry with an exception."""
        self._log_new(LogSeverity.FATAL, message_template, exception, args, properties)

    def _log_new(self, severity, message_template, exception, args, properties) -> None:
        entry = LogEntry(severity, message_template, *args).add_properties(properties)
        if exception is not None:
            entry.add_exception(exception)
        self.log(entry)


class PhyrosLogWriter(LogWriter):
    """
    Log writer that delegates to exactly one LogProvider.

    Delegation is synchronous: no buffering, no retries, and provider
    errors propagate to the caller. The writer owns its provider and
    releases it once on shutdown.

    Example:
        with PhyrosLogWriter(ConsoleLogProvider()) as writer:
            writer.log(LogEntry.information("Service started"))
    """

    def __init__(self, provider: LogProvider):
        """
        Initialize log writer.

        Args:
            provider: The log provider implementation

        Raises:
            InvalidArgumentError: If provider is None
        """
        if provider is None:
            raise InvalidArgumentError("provider cannot be None")
        self._provider = provider
        self._shut_down = False
        self._lock = threading.Lock()

    @property
    def provider(self) -> LogProvider:
        """The wrapped provider."""
        return self._provider

    @property
    def is_shut_down(self) -> bool:
        """Whether shutdown() has run."""
        return self._shut_down

    def log(self, entry: LogEntry) -> None:
        """
        Forward an entry to the provider.

        Args:
            entry: The entry to log

        Raises:
            LoggerDisposedError: If the writer has been shut down
            InvalidArgumentError: If entry is None
        """
        if self._shut_down:
            raise LoggerDisposedError(
                type(self).__name__, "Cannot log to a disposed logger"
            )
        if entry is None:
            raise InvalidArgumentError("entry cannot be None")

        self._provider.write(entry)

    def shutdown(self) -> None:
        """Release the provider. Repeated calls do nothing."""
        with self._lock:
            if self._shut_down:
                return
            self._shut_down = True

        logger.debug("Shutting down log writer over %s", type(self._provider).__name__)
        self._provider.release()

    def __enter__(self) -> "PhyrosLogWriter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()
