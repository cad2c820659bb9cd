"""
Logging event data structure

A LoggingEvent is a read-only snapshot handed to every filter in a chain.
Diagnostic context travels inside the event rather than being read from
thread-local state at decision time.
"""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Mapping
import threading

from log_filter_module.core.diagnostic_context import MDC, NDC
from log_filter_module.core.log_level import LogLevel


@dataclass(frozen=True)
class LoggingEvent:
    """
    Logging event snapshot.

    Contains the message, level and the diagnostic contexts of the thread
    that produced it.
    """

    level: LogLevel
    message: str
    logger_name: str = ""
    ndc: str = ""
    mdc: Mapping[str, str] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)
    thread_id: int = field(default_factory=threading.get_ident)
    thread_name: str = field(default_factory=lambda: threading.current_thread().name)

    def __post_init__(self):
        """Validate and normalise the event after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))
        # Detach from the caller's dict so the snapshot cannot change later
        object.__setattr__(self, "mdc", MappingProxyType(dict(self.mdc)))

    @classmethod
    def capture(
        cls,
        level: LogLevel,
        message: str,
        logger_name: str = ""
    ) -> "LoggingEvent":
        """
        Create an event carrying the calling thread's NDC and MDC.

        Args:
            level: Event level
            message: Event message
            logger_name: Name of the emitting logger

        Returns:
            New LoggingEvent instance
        """
        return cls(
            level=level,
            message=message,
            logger_name=logger_name,
            ndc=NDC.get(),
            mdc=MDC.get_context(),
        )

    def get_ndc(self) -> str:
        """Flattened nested diagnostic context."""
        return self.ndc

    def get_mdc(self, key: str) -> str:
        """Mapped diagnostic context value for ``key``; empty string when absent."""
        return self.mdc.get(key, "")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert event to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "message": self.message,
            "logger_name": self.logger_name,
            "ndc": self.ndc,
            "mdc": dict(self.mdc),
            "timestamp": self.timestamp.isoformat(),
            "thread_id": self.thread_id,
            "thread_name": self.thread_name,
        }

    def __str__(self) -> str:
        """String representation."""
        return (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"[{self.level.name:8}] "
            f"[{self.thread_name}] "
            f"{self.message}"
        )
