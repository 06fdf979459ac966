"""
Standard library logging provider

Forwards log entries to a ``logging.Logger`` as structured records.
"""

import json
import logging
import os
import sys
from collections.abc import Iterable, Mapping
from typing import Any, Dict, Optional

from phyros_logging.core.exceptions import InvalidArgumentError
from phyros_logging.core.log_entry import LogEntry
from phyros_logging.core.logging_config import LoggingConfig
from phyros_logging.providers.base_provider import LogProvider

# Attribute names already used by logging.LogRecord (plus makeRecord's guard list)
RESERVED_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "asctime"}

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep


class StdlibLogProvider(LogProvider):
    """
    Provider backed by a standard library ``logging.Logger``.

    Each entry becomes one record at the mapped level, with:

    - ``msg``: the rendered message
    - ``exc_info``: the attached exception, if any
    - ``extra``: ``correlation_id``, every property as a flat attribute,
      and the whole property set under ``phyros``

    Property keys that clash with ``LogRecord`` attributes are prefixed
    with ``prop_``. Collection-valued properties are serialized to
    compact JSON so handlers see a plain string.

    Thread Safety:
        ``logging.Logger`` serializes handler output itself, so writes are
        not additionally locked.

    Example:
        backend = logging.getLogger("billing")
        provider = StdlibLogProvider(backend)
        provider.write(LogEntry.information("Invoice {id} paid", 17))
    """

    thread_safe_backend = True

    def __init__(
        self,
        logger: logging.Logger,
        owns_backend: bool = False,
        config: Optional[LoggingConfig] = None,
    ):
        """
        Initialize stdlib provider.

        Args:
            logger: Backend logger
            owns_backend: Close and detach the logger's handlers on release
            config: When given, its application/host identity is added to
                    every record

        Raises:
            InvalidArgumentError: If logger is None
        """
        if logger is None:
            raise InvalidArgumentError("logger cannot be None")
        super().__init__()
        self.logger = logger
        self.owns_backend = owns_backend
        self.config = config

    def _write(self, entry: LogEntry) -> None:
        level = entry.severity.to_logging_level()
        if not self.logger.isEnabledFor(level):
            return

        exc = entry.exception
        exc_info = (type(exc), exc, exc.__traceback__) if exc is not None else None

        self.logger.log(
            level,
            entry.render_message(),
            exc_info=exc_info,
            extra=self.build_extra(entry),
            stacklevel=_caller_stacklevel(),
        )

    def build_extra(self, entry: LogEntry) -> Dict[str, Any]:
        """
        Build the ``extra`` mapping for a record.

        Args:
            entry: Log entry being written

        Returns:
            Dictionary safe to pass as ``extra``
        """
        properties = {key: serialize_property(value) for key, value in entry.properties.items()}

        extra: Dict[str, Any] = {
            "correlation_id": str(entry.correlation_id),
            "message_template": entry.message_template,
            "phyros": properties,
        }
        if self.config is not None:
            extra.update(self.config.identity())

        for key, value in properties.items():
            name = f"prop_{key}" if key in RESERVED_RECORD_ATTRS else key
            extra.setdefault(name, value)
        return extra

    def _release(self) -> None:
        if not self.owns_backend:
            return
        for handler in list(self.logger.handlers):
            handler.flush()
            handler.close()
            self.logger.removeHandler(handler)


def serialize_property(value: Any) -> Any:
    """
    Serialize collection values to compact JSON; leave everything else as is.

    Args:
        value: Property value

    Returns:
        JSON string for mappings and non-string iterables, else value
    """
    if isinstance(value, (str, bytes, bytearray)):
        return value
    if isinstance(value, Mapping):
        return json.dumps(dict(value), separators=(",", ":"), default=str)
    if isinstance(value, Iterable):
        return json.dumps(list(value), separators=(",", ":"), default=str)
    return value


def _caller_stacklevel() -> int:
    """
    Stack level of the first frame outside this package.

    Called from ``_write``; the result points ``logging`` at the application
    code that logged, however many package frames sit in between.
    """
    frame = sys._getframe(1)
    level = 1
    while frame is not None and os.path.abspath(frame.f_code.co_filename).startswith(_PACKAGE_DIR):
        frame = frame.f_back
        level += 1
    return level
