"""Filter that rejects every event"""

from dataclasses import dataclass

from log_filter_module.core.filter_result import FilterResult
from log_filter_module.core.log_event import LoggingEvent
from log_filter_module.core.properties import Properties
from log_filter_module.filters.base_filter import BaseFilter


@dataclass(frozen=True)
class DenyAllFilter(BaseFilter):
    """
    Deny every event.

    Placed at the end of a chain it turns the default ACCEPT into DENY, so
    only events explicitly accepted by earlier filters get through.
    """

    def decide(self, event: LoggingEvent) -> FilterResult:
        return FilterResult.DENY

    @classmethod
    def from_properties(cls, properties: Properties) -> "DenyAllFilter":
        return cls()
