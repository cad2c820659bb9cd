"""
Diagnostic context filters

Match events on their nested (NDC) or mapped (MDC) diagnostic context.
Once the empty-value guard passes these filters classify strictly: a
mismatch gets the opposite verdict instead of NEUTRAL.
"""

from dataclasses import dataclass

from log_filter_module.core.filter_result import FilterResult
from log_filter_module.core.log_event import LoggingEvent
from log_filter_module.core.properties import Properties
from log_filter_module.filters.base_filter import BaseFilter


@dataclass(frozen=True)
class NDCMatchFilter(BaseFilter):
    """
    Compare the event's flattened NDC with a configured value.

    Properties:
        NDCToMatch: Expected NDC value (default empty).
        AcceptOnMatch: Verdict polarity (default true).
        NeutralOnEmpty: If true (default), an empty expected or actual
            value gives NEUTRAL instead of being compared.
    """

    ndc_to_match: str = ""
    accept_on_match: bool = True
    neutral_on_empty: bool = True

    def decide(self, event: LoggingEvent) -> FilterResult:
        ndc = event.get_ndc()

        if self.neutral_on_empty and (not self.ndc_to_match or not ndc):
            return FilterResult.NEUTRAL

        if ndc == self.ndc_to_match:
            return FilterResult.on_match(self.accept_on_match)
        return FilterResult.on_mismatch(self.accept_on_match)

    @classmethod
    def from_properties(cls, properties: Properties) -> "NDCMatchFilter":
        return cls(
            ndc_to_match=properties.get_property("NDCToMatch"),
            accept_on_match=properties.get_bool("AcceptOnMatch", True),
            neutral_on_empty=properties.get_bool("NeutralOnEmpty", True),
        )


@dataclass(frozen=True)
class MDCMatchFilter(BaseFilter):
    """
    Compare one MDC entry of the event with a configured value.

    Properties:
        MDCKeyToMatch: MDC key to look up (default empty).
        MDCValueToMatch: Expected value (default empty).
        AcceptOnMatch: Verdict polarity (default true).
        NeutralOnEmpty: If true (default), an empty key, expected value or
            actual value gives NEUTRAL instead of being compared.
    """

    mdc_key_to_match: str = ""
    mdc_value_to_match: str = ""
    accept_on_match: bool = True
    neutral_on_empty: bool = True

    def decide(self, event: LoggingEvent) -> FilterResult:
        if self.neutral_on_empty and (
            not self.mdc_key_to_match or not self.mdc_value_to_match
        ):
            return FilterResult.NEUTRAL

        actual = event.get_mdc(self.mdc_key_to_match)

        if self.neutral_on_empty and not actual:
            return FilterResult.NEUTRAL

        if actual == self.mdc_value_to_match:
            return FilterResult.on_match(self.accept_on_match)
        return FilterResult.on_mismatch(self.accept_on_match)

    @classmethod
    def from_properties(cls, properties: Properties) -> "MDCMatchFilter":
        return cls(
            mdc_key_to_match=properties.get_property("MDCKeyToMatch"),
            mdc_value_to_match=properties.get_property("MDCValueToMatch"),
            accept_on_match=properties.get_bool("AcceptOnMatch", True),
            neutral_on_empty=properties.get_bool("NeutralOnEmpty", True),
        )
