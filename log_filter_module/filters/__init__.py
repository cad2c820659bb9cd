"""
Log filters module

Provides the filter chain and the standard filter implementations.
"""

from log_filter_module.filters.base_filter import BaseFilter, FilterChain, check_filter
from log_filter_module.filters.deny_all_filter import DenyAllFilter
from log_filter_module.filters.level_filter import LogLevelMatchFilter, LogLevelRangeFilter
from log_filter_module.filters.string_match_filter import StringMatchFilter
from log_filter_module.filters.function_filter import FunctionFilter
from log_filter_module.filters.context_filter import NDCMatchFilter, MDCMatchFilter
from log_filter_module.filters.filter_factory import (
    build_filter_chain,
    create_filter,
    register_filter,
)

__all__ = [
    "BaseFilter",
    "FilterChain",
    "check_filter",
    "DenyAllFilter",
    "LogLevelMatchFilter",
    "LogLevelRangeFilter",
    "StringMatchFilter",
    "FunctionFilter",
    "NDCMatchFilter",
    "MDCMatchFilter",
    "build_filter_chain",
    "create_filter",
    "register_filter",
]
