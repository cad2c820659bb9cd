"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Log Filter Chain - decides whether a logging event is accepted,
denied or passed on to the next filter before it is written
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from log_filter_module.core.filter_result import FilterResult
from log_filter_module.core.log_level import LogLevel
from log_filter_module.core.log_event import LoggingEvent
from log_filter_module.core.properties import Properties
from log_filter_module.core.diagnostic_context import NDC, MDC
from log_filter_module.core.logger import Logger
from log_filter_module.core.logger_builder import LoggerBuilder
from log_filter_module.core.logger_config import LoggerConfig

# Import submodules (not all classes by default)
from log_filter_module import filters
from log_filter_module import writers

__all__ = [
    "FilterResult",
    "LogLevel",
    "LoggingEvent",
    "Properties",
    "NDC",
    "MDC",
    "Logger",
    "LoggerBuilder",
    "LoggerConfig",
    "filters",
    "writers",
]
