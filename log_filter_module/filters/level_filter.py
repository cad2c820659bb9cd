"""
Level-based filters

Filters log events by exact level or by level range
"""

from dataclasses import dataclass
from typing import Optional

from log_filter_module.core.filter_result import FilterResult
from log_filter_module.core.log_event import LoggingEvent
from log_filter_module.core.log_level import LogLevel
from log_filter_module.core.properties import Properties
from log_filter_module.filters.base_filter import BaseFilter


@dataclass(frozen=True)
class LogLevelMatchFilter(BaseFilter):
    """
    Match events of exactly one level.

    Properties:
        LogLevelToMatch: Level name. Unset or unknown makes the filter inert.
        AcceptOnMatch: ACCEPT (true, default) or DENY matching events.

    Events of any other level get NEUTRAL.
    """

    log_level_to_match: Optional[LogLevel] = None
    accept_on_match: bool = True

    def decide(self, event: LoggingEvent) -> FilterResult:
        if self.log_level_to_match is None:
            return FilterResult.NEUTRAL

        if event.level == self.log_level_to_match:
            return FilterResult.on_match(self.accept_on_match)
        return FilterResult.NEUTRAL

    @classmethod
    def from_properties(cls, properties: Properties) -> "LogLevelMatchFilter":
        return cls(
            log_level_to_match=properties.get_log_level("LogLevelToMatch"),
            accept_on_match=properties.get_bool("AcceptOnMatch", True),
        )


@dataclass(frozen=True)
class LogLevelRangeFilter(BaseFilter):
    """
    Deny events outside an inclusive level range.

    Properties:
        LogLevelMin: Lower bound name; unset means no lower bound.
        LogLevelMax: Upper bound name; unset means no upper bound.
        AcceptOnMatch: If true (default) in-range events are ACCEPTed and
            later filters are skipped; if false they get NEUTRAL.

    Example:
        # WARN and ERROR only
        LogLevelRangeFilter(log_level_min=LogLevel.WARN,
                            log_level_max=LogLevel.ERROR)
    """

    log_level_min: Optional[LogLevel] = None
    log_level_max: Optional[LogLevel] = None
    accept_on_match: bool = True

    def decide(self, event: LoggingEvent) -> FilterResult:
        if self.log_level_min is not None and event.level < self.log_level_min:
            return FilterResult.DENY

        if self.log_level_max is not None and event.level > self.log_level_max:
            return FilterResult.DENY

        # In range: either settle it here or let later filters have a look
        return FilterResult.ACCEPT if self.accept_on_match else FilterResult.NEUTRAL

    @classmethod
    def from_properties(cls, properties: Properties) -> "LogLevelRangeFilter":
        return cls(
            log_level_min=properties.get_log_level("LogLevelMin"),
            log_level_max=properties.get_log_level("LogLevelMax"),
            accept_on_match=properties.get_bool("AcceptOnMatch", True),
        )
