"""
Log level enumeration

Levels are totally ordered. "Unset" is not a member: configuration code
represents it as ``None`` (see ``LogLevel.parse``).
"""

from enum import IntEnum
from typing import Optional


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are compatible with Python's logging module.
    """

    TRACE = 5       # Most verbose, detailed tracing
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages
    FATAL = 50      # Unrecoverable errors
    OFF = 100       # Logging disabled

    # Aliases accepted by the parser
    ALL = 5
    WARNING = 30
    CRITICAL = 50

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level = cls.parse(level_str)
        if level is None:
            raise ValueError(f"Invalid log level: {level_str}")
        return level

    @classmethod
    def parse(cls, level_str: Optional[str]) -> Optional["LogLevel"]:
        """
        Convert string to LogLevel without raising.

        Args:
            level_str: Level name (case-insensitive, surrounding whitespace ignored)

        Returns:
            LogLevel, or None when the name is empty, unknown or NOTSET
        """
        if not level_str:
            return None
        return cls.__members__.get(level_str.strip().upper())
