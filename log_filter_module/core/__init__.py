"""
Core module for the log filter system

This module contains the fundamental classes:
- Logger: Logger that consults a filter chain before writing
- LoggerBuilder: Builder pattern for logger construction
- LoggingEvent: Event snapshot handed to filters
- LogLevel: Log level enumeration
- FilterResult: Tri-state filter decision
- Properties: String-keyed configuration map
- NDC / MDC: Per-thread diagnostic contexts
"""

from log_filter_module.core.filter_result import FilterResult
from log_filter_module.core.log_level import LogLevel
from log_filter_module.core.diagnostic_context import NDC, MDC
from log_filter_module.core.log_event import LoggingEvent
from log_filter_module.core.properties import Properties
from log_filter_module.core.logger_config import LoggerConfig
from log_filter_module.core.logger import Logger
from log_filter_module.core.logger_builder import LoggerBuilder

__all__ = [
    "FilterResult",
    "LogLevel",
    "NDC",
    "MDC",
    "LoggingEvent",
    "Properties",
    "LoggerConfig",
    "Logger",
    "LoggerBuilder",
]
