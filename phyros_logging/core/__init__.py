"""
Core module for the logging pipeline

This module contains the fundamental classes:
- LogEntry: Structured log event with fluent enrichment
- LogSeverity: Severity enumeration
- LoggingConfig: Configuration management
- PhyrosLogWriter: Facade applications log through
- PhyrosLoggerBuilder: Selects the provider behind a writer
- add_phyros_logger: Process-wide pipeline registration
"""

from phyros_logging.core.exceptions import (
    PhyrosLoggingError,
    InvalidArgumentError,
    InvalidStateError,
    LoggerDisposedError,
    NoProviderConfiguredError,
    BackendUnavailableError,
)
from phyros_logging.core.log_severity import LogSeverity
from phyros_logging.core.log_entry import LogEntry
from phyros_logging.core.logging_config import LoggingConfig
from phyros_logging.core.log_writer import LogWriter, PhyrosLogWriter
from phyros_logging.core.logger_builder import PhyrosLoggerBuilder
from phyros_logging.core.registration import add_phyros_logger, get_log_writer, reset_phyros_logger

__all__ = [
    "PhyrosLoggingError",
    "InvalidArgumentError",
    "InvalidStateError",
    "LoggerDisposedError",
    "NoProviderConfiguredError",
    "BackendUnavailableError",
    "LogSeverity",
    "LogEntry",
    "LoggingConfig",
    "LogWriter",
    "PhyrosLogWriter",
    "PhyrosLoggerBuilder",
    "add_phyros_logger",
    "get_log_writer",
    "reset_phyros_logger",
]
