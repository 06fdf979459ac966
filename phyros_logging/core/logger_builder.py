"""Logger builder pattern"""

from typing import Any, Callable, Optional
import logging

from phyros_logging.core.exceptions import (
    BackendUnavailableError,
    InvalidArgumentError,
    NoProviderConfiguredError,
)
from phyros_logging.core.logging_config import LoggingConfig
from phyros_logging.providers.base_provider import LogProvider
from phyros_logging.providers.console_provider import ConsoleLogProvider
from phyros_logging.providers.stdlib_provider import StdlibLogProvider

ProviderFactory = Callable[[], LogProvider]


class PhyrosLoggerBuilder:
    """
    Builder that selects exactly one log provider.

    A provider is configured either directly (``use_provider``) or lazily
    through a factory (``use_provider_factory``). The two are mutually
    exclusive and the last call wins. The ``use_*`` helpers for the
    bundled backends go through these two methods.

    Example:
        provider = (PhyrosLoggerBuilder()
            .use_console(LoggingConfig.debug_config())
            .build())
    """

    def __init__(self):
        self._provider: Optional[LogProvider] = None
        self._provider_factory: Optional[ProviderFactory] = None

    def use_provider(self, provider: LogProvider) -> "PhyrosLoggerBuilder":
        """
        Use a specific provider instance.

        Args:
            provider: The log provider to use

        Returns:
            Self for method chaining

        Raises:
            InvalidArgumentError: If provider is None
        """
        if provider is None:
            raise InvalidArgumentError("provider cannot be None")
        self._provider = provider
        self._provider_factory = None
        return self

    def use_provider_factory(self, factory: ProviderFactory) -> "PhyrosLoggerBuilder":
        """
        Use a factory that creates the provider at build time.

        Args:
            factory: Zero-argument callable returning a provider

        Returns:
            Self for method chaining

        Raises:
            InvalidArgumentError: If factory is None or not callable
        """
        if factory is None or not callable(factory):
            raise InvalidArgumentError("factory must be callable")
        self._provider_factory = factory
        self._provider = None
        return self

    def use_console(self, config: Optional[LoggingConfig] = None, **options: Any) -> "PhyrosLoggerBuilder":
        """
        Write to the console.

        Args:
            config: Console settings (default: LoggingConfig.default())
            **options: Extra ConsoleLogProvider arguments (stream, mirror, ...)

        Returns:
            Self for method chaining
        """
        config = config or LoggingConfig.default()
        return self.use_provider_factory(lambda: ConsoleLogProvider.from_config(config, **options))

    def use_stdlib_logger(
        self,
        logger: logging.Logger,
        owns_backend: bool = False,
        config: Optional[LoggingConfig] = None,
    ) -> "PhyrosLoggerBuilder":
        """
        Write to an existing standard library logger.

        Args:
            logger: Backend logger
            owns_backend: Close the logger's handlers when the provider is released
            config: Optional identity stamped onto records

        Returns:
            Self for method chaining

        Raises:
            InvalidArgumentError: If logger is None
        """
        if logger is None:
            raise InvalidArgumentError("logger cannot be None")
        return self.use_provider(StdlibLogProvider(logger, owns_backend=owns_backend, config=config))

    def use_stdlib_logger_factory(
        self,
        logger_factory: Callable[[], logging.Logger],
        owns_backend: bool = True,
        config: Optional[LoggingConfig] = None,
    ) -> "PhyrosLoggerBuilder":
        """
        Write to a standard library logger created at build time.

        Args:
            logger_factory: Zero-argument callable returning a logger
            owns_backend: Close the logger's handlers when the provider is released
                          (default: True, the provider owns what the factory made)
            config: Optional identity stamped onto records

        Returns:
            Self for method chaining

        Raises:
            InvalidArgumentError: If logger_factory is None
        """
        if logger_factory is None:
            raise InvalidArgumentError("logger_factory cannot be None")
        return self.use_provider_factory(
            lambda: StdlibLogProvider(logger_factory(), owns_backend=owns_backend, config=config)
        )

    def use_registered_logger(
        self,
        name: str,
        owns_backend: bool = False,
        config: Optional[LoggingConfig] = None,
    ) -> "PhyrosLoggerBuilder":
        """
        Write to a logger already registered with the logging manager.

        The lookup happens at build time. Unlike ``logging.getLogger``, it
        never creates a logger: the name must already be configured.

        Args:
            name: Registered logger name
            owns_backend: Close the logger's handlers when the provider is released
            config: Optional identity stamped onto records

        Returns:
            Self for method chaining

        Raises:
            InvalidArgumentError: If name is empty
        """
        if not name:
            raise InvalidArgumentError("name cannot be empty")

        def resolve() -> LogProvider:
            registered = logging.Logger.manager.loggerDict.get(name)
            if not isinstance(registered, logging.Logger):
                raise BackendUnavailableError(
                    f"No logger named '{name}' is registered. "
                    "Configure it before building, or use a different use_* method "
                    "to provide your own logger instance."
                )
            return StdlibLogProvider(registered, owns_backend=owns_backend, config=config)

        return self.use_provider_factory(resolve)

    def use_structlog(self, logger: Optional[Any] = None, logger_name: Optional[str] = None) -> "PhyrosLoggerBuilder":
        """
        Write through structlog (requires the ``structlog`` extra).

        Args:
            logger: structlog logger (default: structlog.get_logger())
            logger_name: Name for structlog.get_logger() when no logger is given

        Returns:
            Self for method chaining
        """
        from phyros_logging.providers.structlog_provider import StructlogLogProvider
        return self.use_provider_factory(
            lambda: StructlogLogProvider(logger=logger, logger_name=logger_name)
        )

    def build(self) -> LogProvider:
        """
        Build the configured provider.

        Returns:
            The direct provider if one is set, otherwise the factory's result

        Raises:
            NoProviderConfiguredError: If neither is configured
        """
        if self._provider is not None:
            return self._provider

        if self._provider_factory is not None:
            return self._provider_factory()

        raise NoProviderConfiguredError()
