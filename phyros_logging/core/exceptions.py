"""
Exception hierarchy for the logging pipeline

Every failure surfaces to the caller of the failing operation.
Nothing in the core catches or retries these.
"""


class PhyrosLoggingError(Exception):
    """Base class for all logging pipeline errors."""


class InvalidArgumentError(PhyrosLoggingError, ValueError):
    """A required argument (entry, provider, factory, logger) was None or unusable."""


class InvalidStateError(PhyrosLoggingError, RuntimeError):
    """An object was used in a state that does not allow the operation."""


class LoggerDisposedError(InvalidStateError):
    """A writer or provider was used after it released its resources."""

    def __init__(self, name: str, message: str = ""):
        self.name = name
        super().__init__(message or f"Cannot use {name} after it has been released")


class NoProviderConfiguredError(InvalidStateError):
    """Builder was asked to build with neither a provider nor a factory set."""

    def __init__(self):
        super().__init__(
            "No log provider has been configured. "
            "Use use_provider or use_provider_factory to configure a provider."
        )


class BackendUnavailableError(PhyrosLoggingError, LookupError):
    """A backend lookup found nothing registered under the requested name."""
