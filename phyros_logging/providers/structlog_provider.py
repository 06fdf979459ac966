"""
structlog provider implementation

Forwards log entries to a structlog logger, binding the correlation id
and entry properties into the context for the duration of each write.
"""

from __future__ import annotations
from typing import Any, Optional

from phyros_logging.core.log_entry import LogEntry
from phyros_logging.core.log_severity import LogSeverity
from phyros_logging.providers.base_provider import LogProvider
from phyros_logging.providers.stdlib_provider import serialize_property

# Optional dependency
try:
    import structlog
    HAS_STRUCTLOG = True
except ImportError:
    HAS_STRUCTLOG = False
    structlog = None


_METHOD_NAMES = {
    LogSeverity.DEBUG: "debug",
    LogSeverity.INFORMATION: "info",
    LogSeverity.WARNING: "warning",
    LogSeverity.ERROR: "error",
    LogSeverity.FATAL: "critical",
}


class StructlogLogProvider(LogProvider):
    """
    Provider backed by structlog.

    Requires structlog package:
        pip install structlog

    For each entry, ``correlation_id`` and the entry properties are bound
    with ``structlog.contextvars.bound_contextvars`` so processors such as
    ``merge_contextvars`` pick them up; the event itself is the rendered
    message with ``message_template`` attached.

    Example:
        structlog.configure(processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.JSONRenderer(),
        ])
        provider = StructlogLogProvider(structlog.get_logger("billing"))
    """

    def __init__(self, logger: Optional[Any] = None, logger_name: Optional[str] = None):
        """
        Initialize structlog provider.

        Args:
            logger: structlog bound logger (default: structlog.get_logger())
            logger_name: Name passed to structlog.get_logger() when no
                         logger is given

        Raises:
            ImportError: If structlog is not installed
        """
        if not HAS_STRUCTLOG:
            raise ImportError(
                "structlog not installed. "
                "Install with: pip install structlog"
            )
        super().__init__()
        if logger is None:
            logger = structlog.get_logger(logger_name) if logger_name else structlog.get_logger()
        self.logger = logger

    def _write(self, entry: LogEntry) -> None:
        context = {key: serialize_property(value) for key, value in entry.properties.items()}
        context["correlation_id"] = str(entry.correlation_id)

        method = getattr(self.logger, _METHOD_NAMES[entry.severity])
        with structlog.contextvars.bound_contextvars(**context):
            if entry.exception is not None:
                method(
                    entry.render_message(),
                    message_template=entry.message_template,
                    exc_info=entry.exception,
                )
            else:
                method(entry.render_message(), message_template=entry.message_template)
