"""
Substring-based filter

Filters log events based on message content
"""

from dataclasses import dataclass

from log_filter_module.core.filter_result import FilterResult
from log_filter_module.core.log_event import LoggingEvent
from log_filter_module.core.properties import Properties
from log_filter_module.filters.base_filter import BaseFilter


@dataclass(frozen=True)
class StringMatchFilter(BaseFilter):
    """
    Match events whose message contains a fixed string.

    Matching is a plain, case-sensitive substring test. Non-matching
    events, empty messages and an empty ``string_to_match`` all give
    NEUTRAL.

    Example:
        # Drop health check noise
        filter = StringMatchFilter(string_to_match="GET /health",
                                   accept_on_match=False)
    """

    string_to_match: str = ""
    accept_on_match: bool = True

    def decide(self, event: LoggingEvent) -> FilterResult:
        message = event.message

        if not self.string_to_match or not message:
            return FilterResult.NEUTRAL

        if self.string_to_match not in message:
            return FilterResult.NEUTRAL
        return FilterResult.on_match(self.accept_on_match)

    @classmethod
    def from_properties(cls, properties: Properties) -> "StringMatchFilter":
        return cls(
            string_to_match=properties.get_property("StringToMatch"),
            accept_on_match=properties.get_bool("AcceptOnMatch", True),
        )
