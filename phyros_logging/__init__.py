"""
Phyros Logging - A structured-logging abstraction layer

Application code builds LogEntry objects and hands them to a LogWriter;
the writer forwards them to whichever LogProvider was selected at startup.
"""

__version__ = "1.0.0"
__author__ = "Phyros"

import logging

from phyros_logging.core.log_entry import LogEntry
from phyros_logging.core.log_severity import LogSeverity
from phyros_logging.core.logging_config import LoggingConfig
from phyros_logging.core.log_writer import LogWriter, PhyrosLogWriter
from phyros_logging.core.logger_builder import PhyrosLoggerBuilder
from phyros_logging.core.registration import (
    add_phyros_logger,
    add_phyros_logger_with_factory,
    add_phyros_logger_with_provider,
    get_log_writer,
    reset_phyros_logger,
)
from phyros_logging.core.exceptions import (
    PhyrosLoggingError,
    InvalidArgumentError,
    InvalidStateError,
    LoggerDisposedError,
    NoProviderConfiguredError,
    BackendUnavailableError,
)
from phyros_logging.providers import LogProvider, ConsoleLogProvider, StdlibLogProvider

# Import submodules (not all classes by default)
from phyros_logging import formatters
from phyros_logging import providers

# Library diagnostics stay silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "LogEntry",
    "LogSeverity",
    "LoggingConfig",
    "LogWriter",
    "PhyrosLogWriter",
    "PhyrosLoggerBuilder",
    "LogProvider",
    "ConsoleLogProvider",
    "StdlibLogProvider",
    "add_phyros_logger",
    "add_phyros_logger_with_factory",
    "add_phyros_logger_with_provider",
    "get_log_writer",
    "reset_phyros_logger",
    "PhyrosLoggingError",
    "InvalidArgumentError",
    "InvalidStateError",
    "LoggerDisposedError",
    "NoProviderConfiguredError",
    "BackendUnavailableError",
    "formatters",
    "providers",
]
