"""
Logger that consults a filter chain before writing
"""

from __future__ import annotations
from typing import Optional, List, Any, Union
import logging
import threading

from log_filter_module.core.filter_result import FilterResult
from log_filter_module.core.log_event import LoggingEvent
from log_filter_module.core.log_level import LogLevel
from log_filter_module.core.logger_config import LoggerConfig
from log_filter_module.filters.base_filter import BaseFilter, FilterChain, check_filter

logger = logging.getLogger(__name__)


class Logger:
    """
    Synchronous logger.

    Events below ``min_level`` are dropped outright. The rest are captured
    with the calling thread's diagnostic context and offered to the filter
    chain; anything not DENYed goes to every writer.

    Thread Safety:
        ``log`` may be called from any number of threads. The chain is
        replaced as a whole by ``set_filter_chain``; a chain that has been
        published must not be appended to.
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        filter_chain: Optional[FilterChain] = None
    ):
        self._config = config or LoggerConfig.default()
        self._writers: List[Any] = []
        self._filter_chain: Optional[FilterChain] = filter_chain
        self._metrics = {"logged": 0, "filtered": 0}
        self._metrics_lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def filter_chain(self) -> Optional[FilterChain]:
        return self._filter_chain

    def add_writer(self, writer: Any) -> None:
        """Add a log writer."""
        self._writers.append(writer)

    def set_filter_chain(self, chain: Optional[Union[FilterChain, BaseFilter]]) -> None:
        """
        Publish a fully built filter chain.

        Args:
            chain: New chain, a single filter, or None to remove filtering
        """
        if isinstance(chain, BaseFilter):
            chain = FilterChain.of(chain)
        self._filter_chain = chain

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self._config.min_level

    def log(self, level: LogLevel, message: str) -> FilterResult:
        """
        Log a message.

        Returns:
            The verdict for the event; DENY if it was below the threshold
        """
        if not self.is_enabled_for(level):
            return FilterResult.DENY

        event = LoggingEvent.capture(level, message, logger_name=self._config.name)

        # Read the reference once so a concurrent swap cannot split an evaluation
        chain = self._filter_chain
        verdict = check_filter(chain, event)
        if verdict is FilterResult.DENY:
            self._count("filtered")
            return verdict

        for writer in self._writers:
            try:
                writer.write(event)
            except Exception:
                logger.exception("Writer %r failed", writer)
        self._count("logged")
        return verdict

    def _count(self, key: str) -> None:
        with self._metrics_lock:
            self._metrics[key] += 1

    def trace(self, message: str) -> FilterResult:
        """Log trace message."""
        return self.log(LogLevel.TRACE, message)

    def debug(self, message: str) -> FilterResult:
        """Log debug message."""
        return self.log(LogLevel.DEBUG, message)

    def info(self, message: str) -> FilterResult:
        """Log info message."""
        return self.log(LogLevel.INFO, message)

    def warn(self, message: str) -> FilterResult:
        """Log warning message."""
        return self.log(LogLevel.WARN, message)

    def error(self, message: str) -> FilterResult:
        """Log error message."""
        return self.log(LogLevel.ERROR, message)

    def fatal(self, message: str) -> FilterResult:
        """Log fatal message."""
        return self.log(LogLevel.FATAL, message)

    def flush(self):
        """Flush all writers."""
        for writer in self._writers:
            if hasattr(writer, 'flush'):
                writer.flush()

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._metrics_lock:
            return self._metrics.copy()
