"""
Function-based filter

Lets embedding code put ad-hoc logic into a chain
"""

from dataclasses import dataclass
from typing import Callable

from log_filter_module.core.filter_result import FilterResult
from log_filter_module.core.log_event import LoggingEvent
from log_filter_module.filters.base_filter import BaseFilter


@dataclass(frozen=True)
class FunctionFilter(BaseFilter):
    """
    Delegate the decision to a function.

    The function receives the event and must return a FilterResult
    without raising. Its result is returned unchanged.

    Example:
        def main_thread_only(event):
            if event.thread_name == "MainThread":
                return FilterResult.NEUTRAL
            return FilterResult.DENY

        filter = FunctionFilter(main_thread_only)
    """

    function: Callable[[LoggingEvent], FilterResult]

    def __post_init__(self):
        if not callable(self.function):
            raise TypeError("function must be callable")

    def decide(self, event: LoggingEvent) -> FilterResult:
        return self.function(event)

    def __repr__(self) -> str:
        """String representation."""
        function_name = getattr(self.function, '__name__', repr(self.function))
        return f"FunctionFilter(function={function_name})"
