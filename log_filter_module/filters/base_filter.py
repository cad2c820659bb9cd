"""
Base filter interface and filter chain

A chain is evaluated in order until one filter renders a terminal verdict.
If every filter is neutral (or the chain is empty) the event is accepted.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Optional, Tuple, Union

from log_filter_module.core.filter_result import FilterResult
from log_filter_module.core.log_event import LoggingEvent
from log_filter_module.core.properties import Properties


class BaseFilter(ABC):
    """
    Abstract base class for log filters.

    Concrete filters are frozen dataclasses: every option is fixed at
    construction and ``decide`` depends only on those options and the event.
    """

    @abstractmethod
    def decide(self, event: LoggingEvent) -> FilterResult:
        """
        Decide what to do with a logging event.

        Args:
            event: The event to inspect

        Returns:
            ACCEPT or DENY to end evaluation, NEUTRAL to defer to the next filter
        """
        pass

    @classmethod
    def from_properties(cls, properties: Properties) -> "BaseFilter":
        """
        Build a filter from configuration properties.

        Args:
            properties: Options for this filter only (prefix already stripped)
        """
        raise NotImplementedError(f"{cls.__name__} cannot be built from properties")

    def __call__(self, event: LoggingEvent) -> FilterResult:
        """Allow filters to be callable."""
        return self.decide(event)


class FilterChain:
    """
    Ordered sequence of filters.

    Appending replaces the underlying tuple, so a thread traversing the
    chain keeps seeing the filters that were present when it started.
    Build the chain completely before handing it to a logger.

    Example:
        chain = (FilterChain()
            .append_filter(StringMatchFilter(string_to_match="heartbeat",
                                             accept_on_match=False))
            .append_filter(LogLevelRangeFilter(log_level_min=LogLevel.INFO)))

        chain.decide(event)
    """

    def __init__(self, filters: Iterable[BaseFilter] = ()):
        self._filters: Tuple[BaseFilter, ...] = ()
        for log_filter in filters:
            self.append_filter(log_filter)

    @classmethod
    def of(cls, *filters: BaseFilter) -> "FilterChain":
        return cls(filters)

    def append_filter(self, log_filter: BaseFilter) -> "FilterChain":
        """
        Add a filter at the tail of the chain.

        Args:
            log_filter: Filter to append

        Returns:
            Self for method chaining

        Raises:
            TypeError: If log_filter is not a BaseFilter
        """
        if not isinstance(log_filter, BaseFilter):
            raise TypeError(
                f"expected BaseFilter, got {type(log_filter).__name__}"
            )
        self._filters = self._filters + (log_filter,)
        return self

    def decide(self, event: LoggingEvent) -> FilterResult:
        """
        Evaluate the chain for an event.

        Returns:
            The first non-NEUTRAL result, or ACCEPT if there is none
        """
        for log_filter in self._filters:
            result = log_filter.decide(event)
            if result.is_terminal:
                return result
        return FilterResult.ACCEPT

    @property
    def is_empty(self) -> bool:
        return not self._filters

    def __iter__(self) -> Iterator[BaseFilter]:
        return iter(self._filters)

    def __len__(self) -> int:
        return len(self._filters)

    def __repr__(self) -> str:
        """String representation."""
        return f"FilterChain({list(self._filters)!r})"


def check_filter(
    head: Optional[Union[FilterChain, BaseFilter]],
    event: LoggingEvent
) -> FilterResult:
    """
    Final verdict of a chain for an event.

    Args:
        head: Chain to evaluate; a single filter acts as a one-filter chain
              and None as the empty chain
        event: Event to decide on

    Returns:
        FilterResult, ACCEPT when nothing objects
    """
    if head is None:
        return FilterResult.ACCEPT
    if isinstance(head, BaseFilter):
        result = head.decide(event)
        return result if result.is_terminal else FilterResult.ACCEPT
    return head.decide(event)
