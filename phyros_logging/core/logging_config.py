"""
Logging configuration management

Settings shared by the bundled providers and formatters.
"""

import os
import socket
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from phyros_logging.core.log_severity import LogSeverity

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class LoggingConfig:
    """
    Logging configuration.

    ``application_name`` and ``host_name`` identify the emitting process
    in structured output; the remaining fields drive console output.
    """

    # Identity
    application_name: Optional[str] = None
    host_name: str = field(default_factory=socket.gethostname)

    # Output settings
    minimum_severity: Union[LogSeverity, str] = LogSeverity.INFORMATION
    colored_output: bool = True
    include_timestamps: bool = True

    # Format settings
    timestamp_format: str = "%Y-%m-%d %H:%M:%S.%f"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.minimum_severity, str):
            self.minimum_severity = LogSeverity.from_string(self.minimum_severity)
        elif not isinstance(self.minimum_severity, LogSeverity):
            self.minimum_severity = LogSeverity(self.minimum_severity)

        if self.application_name is not None and not self.application_name.strip():
            raise ValueError("application_name cannot be blank")
        if not self.timestamp_format:
            raise ValueError("timestamp_format cannot be empty")

    def identity(self) -> Dict[str, str]:
        """Application and host fields to stamp onto structured output."""
        fields = {"host_name": self.host_name}
        if self.application_name:
            fields["application_name"] = self.application_name
        return fields

    @classmethod
    def default(cls) -> "LoggingConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggingConfig":
        """Create configuration for debugging."""
        return cls(
            minimum_severity=LogSeverity.DEBUG,
            colored_output=True,
            include_timestamps=True,
        )

    @classmethod
    def production_config(cls, application_name: Optional[str] = None) -> "LoggingConfig":
        """Create configuration for production."""
        return cls(
            application_name=application_name,
            minimum_severity=LogSeverity.WARNING,
            colored_output=False,
        )

    @classmethod
    def from_env(cls, prefix: str = "PHYROS_LOG_") -> "LoggingConfig":
        """
        Create configuration from environment variables.

        Reads ``<prefix>LEVEL``, ``<prefix>APP_NAME`` and ``<prefix>COLOR``;
        unset variables keep their defaults.

        Args:
            prefix: Environment variable prefix

        Returns:
            New LoggingConfig instance
        """
        kwargs = {}
        level = os.environ.get(f"{prefix}LEVEL")
        if level:
            kwargs["minimum_severity"] = level
        app_name = os.environ.get(f"{prefix}APP_NAME")
        if app_name:
            kwargs["application_name"] = app_name
        color = os.environ.get(f"{prefix}COLOR")
        if color is not None:
            kwargs["colored_output"] = color.strip().lower() in _TRUE_VALUES
        return cls(**kwargs)
