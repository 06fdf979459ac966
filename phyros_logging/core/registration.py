"""
Process-wide logging pipeline registration

Builds one global log writer the first time it is requested. Later
requests get that same writer back and their configuration is ignored;
registration is idempotent, not a way to reconfigure a running process.
"""

from __future__ import annotations
from typing import Callable, Optional
import atexit
import logging
import threading

from phyros_logging.core.exceptions import InvalidArgumentError
from phyros_logging.core.log_writer import PhyrosLogWriter
from phyros_logging.core.logger_builder import PhyrosLoggerBuilder, ProviderFactory
from phyros_logging.providers.base_provider import LogProvider

logger = logging.getLogger(__name__)

# Module-level reference to the global writer; guarded by _LOCK
_GLOBAL_WRITER: Optional[PhyrosLogWriter] = None
_LOCK = threading.Lock()
_ATEXIT_REGISTERED = False


def add_phyros_logger(configure: Callable[[PhyrosLoggerBuilder], None]) -> PhyrosLogWriter:
    """
    Register the process-wide logging pipeline.

    If a pipeline already exists it is returned unchanged and ``configure``
    is not called. Otherwise a builder is created, passed to ``configure``
    (which must select a provider), built, and wrapped in a
    PhyrosLogWriter that becomes the global writer. The whole
    check-then-create runs under one lock.

    Args:
        configure: Callable receiving the builder

    Returns:
        The global log writer

    Raises:
        InvalidArgumentError: If configure is None
        NoProviderConfiguredError: If configure selected no provider
    """
    global _GLOBAL_WRITER, _ATEXIT_REGISTERED

    if configure is None:
        raise InvalidArgumentError("configure cannot be None")

    with _LOCK:
        if _GLOBAL_WRITER is not None:
            logger.debug("Logging pipeline already registered; ignoring new configuration")
            return _GLOBAL_WRITER

        builder = PhyrosLoggerBuilder()
        configure(builder)
        provider = builder.build()
        writer = PhyrosLogWriter(provider)

        if not _ATEXIT_REGISTERED:
            atexit.register(_shutdown_at_exit)
            _ATEXIT_REGISTERED = True

        _GLOBAL_WRITER = writer
        logger.debug("Registered logging pipeline over %s", type(provider).__name__)
        return writer


def add_phyros_logger_with_provider(provider: LogProvider) -> PhyrosLogWriter:
    """Register the global pipeline with a specific provider."""
    return add_phyros_logger(lambda builder: builder.use_provider(provider))


def add_phyros_logger_with_factory(factory: ProviderFactory) -> PhyrosLogWriter:
    """Register the global pipeline with a provider factory."""
    return add_phyros_logger(lambda builder: builder.use_provider_factory(factory))


def get_log_writer() -> Optional[PhyrosLogWriter]:
    """Return the global log writer, or None if nothing is registered."""
    with _LOCK:
        return _GLOBAL_WRITER


def reset_phyros_logger(shutdown: bool = True) -> None:
    """
    Forget the global log writer.

    Intended for tests and orderly teardown.

    Args:
        shutdown: Shut the current writer down before forgetting it
    """
    global _GLOBAL_WRITER

    with _LOCK:
        writer = _GLOBAL_WRITER
        _GLOBAL_WRITER = None

    if writer is not None and shutdown:
        writer.shutdown()


def _shutdown_at_exit() -> None:
    """Release the global writer's provider at interpreter exit."""
    writer = _GLOBAL_WRITER
    if writer is not None:
        writer.shutdown()
