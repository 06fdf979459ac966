"""
Log entry data structure

A single structured logging event plus the fluent operations that
enrich it before it is handed to a writer.
"""

import re
import uuid
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from phyros_logging.core.exceptions import InvalidArgumentError
from phyros_logging.core.log_severity import LogSeverity

NIL_CORRELATION_ID = uuid.UUID(int=0)

# {{ and }} are literal braces; {Name}, {0}, {@Name}, {Name:fmt} are placeholders
_PLACEHOLDER = re.compile(r"\{\{|\}\}|\{[@$]?(\w+)(?:,[-+]?\d+)?(?::([^{}]*))?\}")


class LogEntry:
    """
    Log entry data structure.

    Holds severity, message template, positional arguments bound to the
    template placeholders, a correlation id, an optional exception and an
    open-ended set of properties.

    The ``add_*`` methods mutate this entry and return it so calls can be
    chained. They never copy: an entry belongs to one call site until it is
    logged and must not be enriched from several threads at once. Entries
    are not modified once written.

    Example:
        entry = (LogEntry.information("User {id} logged in", 42)
            .add_property("tenant", "acme")
            .add_correlation_id(request_id))
        writer.log(entry)
    """

    def __init__(self, severity: LogSeverity, message_template: str, *ordered_arguments: Any):
        assert message_template and message_template.strip(), "message_template must not be blank"

        self.severity = LogSeverity(severity)
        self.message_template = message_template
        self.ordered_arguments: Tuple[Any, ...] = tuple(ordered_arguments)
        self.timestamp = datetime.now()
        self._correlation_id = uuid.uuid4()
        self._exception: Optional[BaseException] = None
        self._properties: Dict[str, Any] = {}

    # Named constructors

    @classmethod
    def debug(cls, message_template: str, *ordered_arguments: Any) -> "LogEntry":
        """Create a Debug entry."""
        return cls(LogSeverity.DEBUG, message_template, *ordered_arguments)

    @classmethod
    def information(cls, message_template: str, *ordered_arguments: Any) -> "LogEntry":
        """Create an Information entry."""
        return cls(LogSeverity.INFORMATION, message_template, *ordered_arguments)

    @classmethod
    def warning(cls, message_template: str, *ordered_arguments: Any) -> "LogEntry":
        """Create a Warning entry."""
        return cls(LogSeverity.WARNING, message_template, *ordered_arguments)

    @classmethod
    def error(
        cls, message_template: str, exception: Optional[BaseException], *ordered_arguments: Any
    ) -> "LogEntry":
        """Create an Error entry with the exception already attached."""
        return cls(LogSeverity.ERROR, message_template, *ordered_arguments).add_exception(exception)

    @classmethod
    def fatal(
        cls, message_template: str, exception: Optional[BaseException], *ordered_arguments: Any
    ) -> "LogEntry":
        """Create a Fatal entry with the exception already attached."""
        return cls(LogSeverity.FATAL, message_template, *ordered_arguments).add_exception(exception)

    # Read-only views

    @property
    def correlation_id(self) -> uuid.UUID:
        """Correlation id; never the nil UUID."""
        return self._correlation_id

    @property
    def exception(self) -> Optional[BaseException]:
        """Attached exception, if any."""
        return self._exception

    @property
    def properties(self) -> Mapping[str, Any]:
        """Read-only, insertion-ordered view of the entry properties."""
        return MappingProxyType(self._properties)

    # Fluent enrichment

    def add_property(self, key: str, value: Any) -> "LogEntry":
        """
        Add a property unless the key is already present.

        The first value written for a key wins; later adds are ignored.

        Args:
            key: Property name
            value: Property value

        Returns:
            This entry
        """
        if key not in self._properties:
            self._properties[key] = value
        return self

    def add_properties(
        self,
        *properties: Union[Mapping[str, Any], Tuple[str, Any], Iterable[Tuple[str, Any]]],
        **kwargs: Any,
    ) -> "LogEntry":
        """
        Add several properties with ``add_property`` semantics.

        Each positional argument is a mapping, a ``(key, value)`` pair with a
        string key, or an iterable of such pairs. Pairs are applied in the
        order given, keyword arguments last.

        Example:
            entry.add_properties({"a": 1, "b": 2})
            entry.add_properties(("a", 1), ("b", 2))
            entry.add_properties([("a", 1), ("b", 2)])
            entry.add_properties(user="bob")

        Returns:
            This entry

        Raises:
            InvalidArgumentError: If an argument is none of the above
        """
        for item in properties:
            for key, value in _property_pairs(item):
                self.add_property(key, value)

        for key, value in kwargs.items():
            self.add_property(key, value)
        return self

    def add_correlation_id(self, correlation_id: Union[uuid.UUID, str, None]) -> "LogEntry":
        """
        Replace the correlation id.

        ``None`` and the nil UUID are ignored so an entry is never left
        untraceable.

        Args:
            correlation_id: UUID or its string form

        Returns:
            This entry

        Raises:
            InvalidArgumentError: If a string is not a valid UUID
        """
        if correlation_id is None:
            return self
        if not isinstance(correlation_id, uuid.UUID):
            try:
                correlation_id = uuid.UUID(str(correlation_id))
            except ValueError as e:
                raise InvalidArgumentError(f"Invalid correlation id: {correlation_id!r}") from e
        if correlation_id != NIL_CORRELATION_ID:
            self._correlation_id = correlation_id
        return self

    def add_exception(self, exception: Optional[BaseException]) -> "LogEntry":
        """
        Attach an exception, replacing any previous one.

        Unlike properties, the last exception written wins.

        Returns:
            This entry
        """
        self._exception = exception
        return self

    # Rendering

    def render_message(self) -> str:
        """
        Substitute the ordered arguments into the message template.

        Named placeholders bind positionally in order of appearance,
        numeric placeholders bind by index. Placeholders without a
        matching argument are left untouched.

        Returns:
            Rendered message
        """
        args = self.ordered_arguments
        position = 0

        def substitute(match: "re.Match") -> str:
            nonlocal position
            token = match.group(0)
            if token == "{{":
                return "{"
            if token == "}}":
                return "}"

            name, spec = match.group(1), match.group(2)
            if name.isdigit():
                index = int(name)
            else:
                index = position
                position += 1
            if index >= len(args):
                return token

            value = args[index]
            if spec:
                try:
                    return format(value, spec)
                except (TypeError, ValueError):
                    return str(value)
            return str(value)

        return _PLACEHOLDER.sub(substitute, self.message_template)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "severity": str(self.severity),
            "message_template": self.message_template,
            "message": self.render_message(),
            "arguments": list(self.ordered_arguments),
            "correlation_id": str(self._correlation_id),
            "properties": dict(self._properties),
            "exception": (
                f"{type(self._exception).__name__}: {self._exception}"
                if self._exception is not None
                else None
            ),
        }

    def __repr__(self) -> str:
        return (
            f"LogEntry(severity={self.severity!s}, "
            f"message_template={self.message_template!r}, "
            f"correlation_id={self._correlation_id})"
        )

    def __str__(self) -> str:
        """String representation."""
        return f"[{self.severity!s:11}] [{self._correlation_id}] {self.render_message()}"


def _is_pair(item: Any) -> bool:
    return isinstance(item, (tuple, list)) and len(item) == 2 and isinstance(item[0], str)


def _property_pairs(item: Any) -> List[Tuple[str, Any]]:
    """Expand one ``add_properties`` argument into (key, value) pairs."""
    if isinstance(item, Mapping):
        return list(item.items())
    if _is_pair(item):
        return [(item[0], item[1])]
    if isinstance(item, (str, bytes, bytearray)) or not isinstance(item, Iterable):
        raise InvalidArgumentError(
            f"Expected a mapping or (key, value) pairs, got {type(item).__name__}"
        )

    pairs = list(item)
    for pair in pairs:
        if not _is_pair(pair):
            raise InvalidArgumentError(f"Expected a (key, value) pair, got {pair!r}")
    return [(key, value) for key, value in pairs]
