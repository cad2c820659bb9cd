"""
Logger configuration management
"""

from dataclasses import dataclass
from typing import Optional

from log_filter_module.core.log_level import LogLevel
from log_filter_module.core.properties import Properties


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    ``min_level`` is the logger's own threshold, checked before any
    filter is consulted.
    """

    name: str = "logger"
    min_level: LogLevel = LogLevel.INFO

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.name:
            raise ValueError("name cannot be empty")
        if isinstance(self.min_level, str):
            self.min_level = LogLevel.from_string(self.min_level)
        if not isinstance(self.min_level, LogLevel):
            raise ValueError("min_level must be a LogLevel")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(min_level=LogLevel.TRACE)

    @classmethod
    def from_properties(
        cls,
        properties: Properties,
        defaults: Optional["LoggerConfig"] = None
    ) -> "LoggerConfig":
        """
        Create configuration from properties.

        Keys:
            Name: Logger name (default taken from ``defaults``)
            Level: Threshold level name; absent or unknown names keep the default

        Args:
            properties: Configuration
            defaults: Values used for absent keys (default: LoggerConfig())
        """
        defaults = defaults or cls()
        level = properties.get_log_level("Level")
        return cls(
            name=properties.get_property("Name", defaults.name) or defaults.name,
            min_level=level if level is not None else defaults.min_level,
        )
