"""Providers module - Backends a log writer delegates to"""

from phyros_logging.providers.base_provider import LogProvider
from phyros_logging.providers.console_provider import ConsoleLogProvider
from phyros_logging.providers.stdlib_provider import StdlibLogProvider

# Optional provider (raises ImportError on construction if structlog is missing)
from phyros_logging.providers.structlog_provider import StructlogLogProvider, HAS_STRUCTLOG

__all__ = [
    "LogProvider",
    "ConsoleLogProvider",
    "StdlibLogProvider",
    "StructlogLogProvider",
    "HAS_STRUCTLOG",
]
