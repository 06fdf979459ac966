"""
Base log provider interface

A provider is the backend-specific sink a writer delegates to.
"""

import logging
import threading
from abc import ABC, abstractmethod

from phyros_logging.core.exceptions import InvalidArgumentError, LoggerDisposedError
from phyros_logging.core.log_entry import LogEntry

logger = logging.getLogger(__name__)


class LogProvider(ABC):
    """
    Abstract base class for log providers.

    Subclasses implement ``_write`` and, when they hold a backend
    resource, ``_release``. The public ``write``/``release`` pair enforces
    the shared contract:

    - ``write`` rejects ``None`` and anything after release
    - ``release`` runs ``_release`` exactly once, however often it is called
    - ``with provider:`` releases on every exit path

    Thread Safety:
        ``_write`` calls are serialized with an internal lock unless the
        subclass sets ``thread_safe_backend = True``, in which case the
        backend's own write path is trusted.
    """

    thread_safe_backend = False

    def __init__(self):
        self._released = False
        self._lock = threading.RLock()

    @property
    def is_released(self) -> bool:
        """Whether release() has run."""
        return self._released

    def write(self, entry: LogEntry) -> None:
        """
        Write a log entry to the underlying backend.

        Args:
            entry: The log entry to write

        Raises:
            LoggerDisposedError: If the provider has been released
            InvalidArgumentError: If entry is None
        """
        if self._released:
            raise LoggerDisposedError(type(self).__name__)
        if entry is None:
            raise InvalidArgumentError("entry cannot be None")

        if self.thread_safe_backend:
            self._write(entry)
            return

        with self._lock:
            # Re-checked under the lock so a concurrent release wins cleanly
            if self._released:
                raise LoggerDisposedError(type(self).__name__)
            self._write(entry)

    @abstractmethod
    def _write(self, entry: LogEntry) -> None:
        """
        Perform the backend-specific write.

        Args:
            entry: Validated log entry
        """
        pass

    def release(self) -> None:
        """Release backend resources. Safe to call more than once."""
        with self._lock:
            if self._released:
                return
            self._released = True
        logger.debug("Releasing %s", type(self).__name__)
        self._release()

    def _release(self) -> None:
        """Release backend resources owned by this provider."""

    def __enter__(self) -> "LogProvider":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()
