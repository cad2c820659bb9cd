"""Logger builder pattern"""

from typing import List, Optional

from log_filter_module.core.logger import Logger
from log_filter_module.core.logger_config import LoggerConfig
from log_filter_module.core.log_level import LogLevel
from log_filter_module.core.properties import Properties
from log_filter_module.filters.base_filter import BaseFilter, FilterChain
from log_filter_module.filters.filter_factory import build_filter_chain
from log_filter_module.writers.console_writer import ConsoleWriter


class LoggerBuilder:
    """
    Builder pattern for logger construction.

    The filter chain is assembled here and published to the logger once,
    in ``build``.
    """

    def __init__(self):
        self._config = LoggerConfig()
        self._console_enabled = False
        self._console_stream = None
        self._custom_writers = []
        self._filters: List[BaseFilter] = []

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set minimum log level."""
        self._config.min_level = level
        return self

    def with_console(self, stream=None) -> "LoggerBuilder":
        """Enable console output."""
        self._console_enabled = True
        self._console_stream = stream
        return self

    def with_filter(self, log_filter: BaseFilter) -> "LoggerBuilder":
        """
        Append a filter to the chain.

        Args:
            log_filter: Filter instance (BaseFilter subclass)

        Returns:
            Self for method chaining

        Example:
            from log_filter_module.filters import LogLevelMatchFilter, DenyAllFilter

            logger = (LoggerBuilder()
                .with_filter(LogLevelMatchFilter(log_level_to_match=LogLevel.ERROR))
                .with_filter(DenyAllFilter())
                .build())
        """
        if not isinstance(log_filter, BaseFilter):
            raise TypeError("log_filter must be a BaseFilter")
        self._filters.append(log_filter)
        return self

    def with_properties(
        self,
        properties: Properties,
        filter_prefix: str = "filters."
    ) -> "LoggerBuilder":
        """
        Configure name, level and filters from properties.

        Name and level keep their current values when the keys are absent.

        Filters declared in the properties are appended after any added
        with ``with_filter`` so far.

        Args:
            properties: Configuration (see LoggerConfig.from_properties and
                        filter_factory.build_filter_chain for the keys)
            filter_prefix: Prefix of the numbered filter entries

        Returns:
            Self for method chaining
        """
        self._config = LoggerConfig.from_properties(properties, defaults=self._config)
        self._filters.extend(build_filter_chain(properties, prefix=filter_prefix))
        return self

    def add_writer(self, writer) -> "LoggerBuilder":
        """
        Add a custom writer.

        Args:
            writer: Object with a write(event) method

        Returns:
            Self for method chaining
        """
        self._custom_writers.append(writer)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        chain: Optional[FilterChain] = FilterChain(self._filters) if self._filters else None
        logger = Logger(
            LoggerConfig(name=self._config.name, min_level=self._config.min_level),
            filter_chain=chain,
        )

        if self._console_enabled:
            logger.add_writer(ConsoleWriter(stream=self._console_stream))

        for writer in self._custom_writers:
            logger.add_writer(writer)

        return logger
